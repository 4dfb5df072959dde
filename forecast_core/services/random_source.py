"""Injectable sources of uniform pseudo-random values."""
import math
from itertools import cycle
from typing import Iterable, Optional, Sequence, TypeVar

import numpy as np

T = TypeVar("T")


class RandomSource:
    """
    Base class for uniform [0, 1) random values.

    Subclasses implement `next()`; the helpers below derive every other
    draw from it so a fixed sequence fully determines generated output.
    """

    def next(self) -> float:
        raise NotImplementedError

    def uniform(self, low: float, high: float) -> float:
        """Float in [low, high)."""
        return low + self.next() * (high - low)

    def uniform_int(self, low: int, high: int) -> int:
        """Integer in [low, high)."""
        return low + math.floor(self.next() * (high - low))

    def choice(self, options: Sequence[T]) -> T:
        """Pick one element of a non-empty sequence."""
        return options[math.floor(self.next() * len(options))]


class NumpyRandomSource(RandomSource):
    """Random source backed by a NumPy Generator.

    Deterministic for a given seed; seeded from OS entropy when seed is None.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def next(self) -> float:
        return float(self._rng.random())


class SequenceRandomSource(RandomSource):
    """Replays a fixed sequence of values, cycling when exhausted."""

    def __init__(self, values: Iterable[float]):
        self.values = list(values)
        if not self.values:
            raise ValueError("SequenceRandomSource needs at least one value")
        for value in self.values:
            if not 0.0 <= value < 1.0:
                raise ValueError(f"Random value out of range [0, 1): {value}")
        self._iter = cycle(self.values)

    def next(self) -> float:
        return next(self._iter)
