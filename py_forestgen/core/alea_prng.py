"""
Python implementation of the Alea PRNG used as the forest seed source.

Based on Johannes Baagøe's Alea algorithm. Alea hashes the seed string with
its Mash function and only uses double arithmetic, so the same seed string
gives the same stream of draws on every platform.
"""


def _uint32(n):
    """Convert to unsigned 32-bit integer."""
    return int(n) & 0xFFFFFFFF


class Mash:
    """
    Baagøe's Mash string hash.

    Each call folds the string form of ``data`` into the running state and
    returns a float in [0, 1). Alea seeds its three state words from it.
    """

    def __init__(self):
        self.n = 0xEFC8249D  # 4022871197

    def __call__(self, data) -> float:
        n = self.n
        for char in str(data):
            n = n + ord(char)
            h = 0.02519603282416938 * n
            n = _uint32(h)
            h -= n
            h *= n
            n = _uint32(h)
            h -= n
            n += h * 0x100000000  # 2^32
        self.n = n
        return _uint32(n) * 2.3283064365386963e-10  # 2^-32


def hash_seed(seed: str) -> int:
    """Hash a seed string to its 32-bit numeric seed."""
    return _uint32(Mash()(seed) * 0x100000000)


class AleaPRNG:
    """
    Alea PRNG seeded from a string.

    Provides ``next_int`` / ``next_double`` for the generation pipeline on top
    of the raw ``random()`` stream.
    """

    def __init__(self, seed):
        """Initialize with seed string or number."""
        self.call_count = 0
        self.seed = str(seed)
        # Informational only; the state below is seeded from the string
        self.numeric_seed = hash_seed(self.seed)

        mash = Mash()

        # Initialize state
        self.s0 = mash(" ")
        self.s1 = mash(" ")
        self.s2 = mash(" ")
        self.c = 1

        self.s0 -= mash(self.seed)
        if self.s0 < 0:
            self.s0 += 1
        self.s1 -= mash(self.seed)
        if self.s1 < 0:
            self.s1 += 1
        self.s2 -= mash(self.seed)
        if self.s2 < 0:
            self.s2 += 1

    def random(self) -> float:
        """Generate next random number in [0, 1)."""
        self.call_count += 1
        t = 2091639 * self.s0 + self.c * 2.3283064365386963e-10  # 2^-32
        self.s0 = self.s1
        self.s1 = self.s2
        self.c = int(t)
        self.s2 = t - self.c
        return self.s2

    def next_double(self) -> float:
        """Next float in [0, 1)."""
        return self.random()

    def next_int(self, min_val: int, max_val: int) -> int:
        """
        Integer in [min_val, max_val).

        An empty range (min_val == max_val) returns min_val, still consuming
        one draw so the stream stays in step.
        """
        if max_val < min_val:
            raise ValueError(f"Invalid range [{min_val}, {max_val})")
        return min_val + int(self.random() * (max_val - min_val))

    def choice(self, seq):
        """Choose a random element from a non-empty sequence."""
        if not seq:
            raise IndexError("Cannot choose from an empty sequence")
        return seq[self.next_int(0, len(seq))]
