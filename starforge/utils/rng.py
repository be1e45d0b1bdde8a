"""Hash-seeded RNG for deterministic system generation."""

import hashlib
from typing import Callable, Optional, Sequence, TypeVar

T = TypeVar("T")

RandomFn = Callable[[], float]

# Numerical Recipes LCG parameters
LCG_MULTIPLIER = 1664525
LCG_INCREMENT = 1013904223
LCG_MODULUS = 2**32


class SeededRandom:
    """Linear congruential generator seeded from a SHA-256 hash of a string.

    All randomness in the generator should go through an instance of this
    class so that the same seed always reproduces the same system. The
    instance is callable and can be passed anywhere a ``RandomFn`` is expected.
    """

    def __init__(self, seed: str):
        """Initialize RNG with given seed.

        Args:
            seed: Arbitrary seed string. Its SHA-256 digest's first 4 bytes
                form the initial generator state.
        """
        self.seed = seed
        digest = hashlib.sha256(seed.encode("utf-8")).digest()
        self.state = int.from_bytes(digest[:4], "big")

    def __call__(self) -> float:
        return self.random()

    def random(self) -> float:
        """Return random float in [0.0, 1.0).

        Returns:
            Next value of the sequence
        """
        self.state = (LCG_MULTIPLIER * self.state + LCG_INCREMENT) % LCG_MODULUS
        return self.state / LCG_MODULUS

    def uniform(self, low: float, high: float) -> float:
        """Return random float in [low, high)."""
        return low + self.random() * (high - low)

    def randint(self, a: int, b: int) -> int:
        """Return random integer in range [a, b], inclusive.

        Args:
            a: Lower bound (inclusive)
            b: Upper bound (inclusive)

        Returns:
            Random integer between a and b
        """
        if b < a:
            raise ValueError(f"Invalid range: [{a}, {b}]")
        return a + int(self.random() * (b - a + 1))

    def choice(self, seq: Sequence[T]) -> T:
        """Choose random element from non-empty sequence."""
        if not seq:
            raise IndexError("Cannot choose from an empty sequence")
        return seq[int(self.random() * len(seq))]

    def get_state(self) -> int:
        """Get the current generator state for serialization."""
        return self.state

    def set_state(self, state: int):
        """Restore a state previously returned by get_state."""
        self.state = state % LCG_MODULUS


def create_seeded_source(seed: str) -> RandomFn:
    """Create a deterministic random source for the given seed.

    Args:
        seed: Seed string

    Returns:
        Zero-argument callable yielding floats in [0, 1)
    """
    return SeededRandom(seed)


def get_random_item(items: Sequence[T], random: RandomFn) -> Optional[T]:
    """Pick an item uniformly, or None when the sequence is empty."""
    if not items:
        return None
    index = min(int(random() * len(items)), len(items) - 1)
    return items[index]


def get_random_in_range(low: float, high: float, random: RandomFn) -> float:
    """Return a float uniformly distributed in [low, high)."""
    return low + random() * (high - low)
