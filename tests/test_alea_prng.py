"""Tests for the Alea seed source."""

import pytest

from py_forestgen.core.alea_prng import AleaPRNG, Mash, hash_seed
from py_forestgen.utils.random import create_prng, resolve_seed


class TestAleaPRNG:
    """Test determinism and the integer/double helpers."""

    def test_same_seed_same_sequence(self):
        """Same seed string gives the same draws."""
        prng1 = AleaPRNG("forest")
        prng2 = AleaPRNG("forest")

        assert [prng1.random() for _ in range(50)] == [prng2.random() for _ in range(50)]

    def test_different_seeds(self):
        """Different seeds give different streams."""
        prng1 = AleaPRNG("seed1")
        prng2 = AleaPRNG("seed2")

        assert [prng1.random() for _ in range(10)] != [prng2.random() for _ in range(10)]

    def test_double_range(self):
        prng = AleaPRNG("doubles")
        for _ in range(1000):
            value = prng.next_double()
            assert 0.0 <= value < 1.0

    def test_int_range(self):
        """next_int stays within [min, max)."""
        prng = AleaPRNG("ints")
        values = [prng.next_int(3, 7) for _ in range(1000)]

        assert min(values) == 3
        assert max(values) == 6

    def test_empty_int_range(self):
        """An empty range returns its lower bound and still draws."""
        prng = AleaPRNG("empty")
        assert prng.next_int(5, 5) == 5
        assert prng.call_count == 1

    def test_inverted_int_range(self):
        prng = AleaPRNG("inverted")
        with pytest.raises(ValueError):
            prng.next_int(5, 3)

    def test_choice(self):
        prng = AleaPRNG("choice")
        items = ["a", "b", "c"]
        assert all(prng.choice(items) in items for _ in range(20))

        with pytest.raises(IndexError):
            prng.choice([])

    def test_numeric_seed(self):
        """Numeric seed is the Mash hash of the seed string."""
        prng = AleaPRNG("forest")
        assert prng.numeric_seed == hash_seed("forest")
        assert 0 <= prng.numeric_seed <= 0xFFFFFFFF

    def test_numeric_seed_from_number(self):
        """Numbers are seeded through their string form."""
        assert AleaPRNG(42).numeric_seed == AleaPRNG("42").numeric_seed

    def test_numeric_seed_does_not_drive_stream(self):
        prng1 = AleaPRNG("forest")
        prng2 = AleaPRNG("forest")
        prng2.numeric_seed = 0

        assert [prng1.random() for _ in range(5)] == [prng2.random() for _ in range(5)]


class TestMash:
    """Test the seed hash."""

    def test_hash_stable(self):
        assert hash_seed("abc") == hash_seed("abc")
        assert hash_seed("abc") != hash_seed("abd")

    def test_mash_is_stateful(self):
        """Each call folds into the running state."""
        mash = Mash()
        first = mash(" ")
        second = mash(" ")
        assert first != second
        assert 0.0 <= first < 1.0


class TestSeedResolution:
    """Test seed selection for a run."""

    def test_fixed_seed_kept(self):
        assert resolve_seed("fixed") == "fixed"

    def test_random_seed_replaces(self, monkeypatch):
        monkeypatch.setattr("py_forestgen.utils.random.time.time", lambda: 1234.5)
        assert resolve_seed("fixed", use_random_seed=True) == "1234.5"

    def test_create_prng(self):
        prng, seed = create_prng("fixed")
        assert seed == "fixed"
        assert prng.random() == AleaPRNG("fixed").random()
