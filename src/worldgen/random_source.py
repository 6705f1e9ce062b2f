"""Seedable random source shared by the generation stages."""

import hashlib
import math

import numpy as np

from .types import Range

# Seeds are kept within 63 bits so they fit numpy and opensimplex alike
_SEED_MASK = (1 << 63) - 1


def normalize_seed(seed: int | str) -> int:
    """Convert an integer or string seed to a non-negative integer.

    Non-negative integers are used as-is; anything else is hashed so that
    string seeds such as ``"seed"`` are stable across processes.
    """
    if isinstance(seed, int) and not isinstance(seed, bool) and 0 <= seed <= _SEED_MASK:
        return seed
    digest = hashlib.sha256(str(seed).encode("utf-8")).digest()
    return int.from_bytes(digest[:8], "big") & _SEED_MASK


class RandomSource:
    """Deterministic random stream.

    Every draw advances the stream, so callers that need reproducible output
    must draw in a fixed order. Independent sub-streams come from ``spawn``.
    """

    def __init__(self, seed: int | str, spawn_key: tuple[int, ...] = ()):
        self.seed = normalize_seed(seed)
        self.spawn_key = spawn_key
        self._rng = np.random.default_rng(
            np.random.SeedSequence(self.seed, spawn_key=spawn_key)
        )

    def spawn(self, key: int) -> "RandomSource":
        """Independent child stream identified by key.

        The child depends only on this source's seed and key path, not on how
        many draws have been made from this source.
        """
        return RandomSource(self.seed, spawn_key=self.spawn_key + (key,))

    def random(self) -> float:
        """Uniform float in [0, 1)."""
        return float(self._rng.random())

    def random_range(self, value_range: Range) -> float:
        """Uniform float in [start, end)."""
        return value_range.start + self.random() * value_range.width

    def random_range_integer(self, value_range: Range) -> int:
        """Uniform integer in [ceil(start), floor(end)], bounds included."""
        low = math.ceil(value_range.start)
        high = math.floor(value_range.end)
        if high < low:
            raise ValueError(f"No integer lies in range {value_range}")
        return int(self._rng.integers(low, high, endpoint=True))

    def with_probability(self, probability: float) -> bool:
        """True with the given probability."""
        return self.random() < probability

    def __repr__(self) -> str:
        return f"RandomSource(seed={self.seed}, spawn_key={self.spawn_key})"
