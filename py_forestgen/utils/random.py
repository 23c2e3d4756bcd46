"""
Random number generation utilities.

Every generation run gets its own Alea PRNG. Python's random and NumPy's
random are not used in generation code so runs stay reproducible from the
seed string alone.
"""

import time
from typing import Tuple

from ..core.alea_prng import AleaPRNG


def time_seed() -> str:
    """Seed string derived from the current time."""
    return str(time.time())


def resolve_seed(seed: str, use_random_seed: bool = False) -> str:
    """
    Return the seed string a run should use.

    Args:
        seed: Configured seed string
        use_random_seed: Replace the seed with a time-derived one

    Returns:
        Seed string
    """
    if use_random_seed:
        return time_seed()
    return seed


def create_prng(seed: str, use_random_seed: bool = False) -> Tuple[AleaPRNG, str]:
    """
    Create a fresh PRNG for one generation run.

    Returns:
        Tuple of (PRNG, seed string actually used)
    """
    resolved = resolve_seed(seed, use_random_seed)
    return AleaPRNG(resolved), resolved
