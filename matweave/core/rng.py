"""
Layered pseudorandom generators used to initialise matrices.

The pipeline is SeedExpander (splitmix64) -> BitGenerator (xoroshiro128+)
-> NormalSampler (Marsaglia polar method). Every generator owns mutable
state that advances on each draw; an instance must not be shared between
threads. There is no hidden global generator, callers that want a
continued stream hold on to one instance and pass it around.

Each layer has two distinct constructors:

- ``from_seed(seed)`` is deterministic, the same seed always yields the
  same stream.
- ``from_time()`` seeds from the wall clock (nanoseconds) and is never
  reproducible.
"""

from __future__ import annotations

import itertools
import logging
import math
import operator
import time
from typing import Iterator, Optional, Tuple

import numpy as np

from matweave.exceptions import SamplerExhausted

logger = logging.getLogger(__name__)

MASK64 = 0xFFFFFFFFFFFFFFFF
UINT64_MAX = MASK64
GOLDEN_GAMMA = 0x9E3779B97F4A7C15
_MIX_1 = 0xBF58476D1CE4E5B9
_MIX_2 = 0x94D049BB133111EB

# Largest double strictly below 1.0
_BELOW_ONE = 1.0 - 2.0**-53

DEFAULT_MAX_REJECTIONS = 10_000
_LONG_REJECTION_RUN = 16

_time_seed_counter = itertools.count()


def rotl64(value: int, shift: int) -> int:
    return ((value << shift) | (value >> (64 - shift))) & MASK64


def time_seed() -> int:
    """
    Seed taken from the wall clock in nanoseconds.

    The clock is mixed with a process-local counter so two calls landing
    in the same clock tick still produce different seeds.
    """
    return (time.time_ns() ^ (next(_time_seed_counter) * GOLDEN_GAMMA)) & MASK64


def _check_seed(seed: int) -> int:
    seed = operator.index(seed)
    if not 0 <= seed <= MASK64:
        raise ValueError(f"Seed must fit in an unsigned 64-bit integer, got {seed}")
    return seed


class SeedExpander:
    """
    splitmix64 generator, only used to derive the initial state of a
    `BitGenerator` from a single 64-bit seed.
    """

    __slots__ = ("_state",)

    def __init__(self, seed: int) -> None:
        self._state = _check_seed(seed)

    @classmethod
    def from_seed(cls, seed: int) -> "SeedExpander":
        return cls(seed)

    @classmethod
    def from_time(cls) -> "SeedExpander":
        seed = time_seed()
        logger.debug("Seeding expander from the clock: %#x", seed)
        return cls(seed)

    @property
    def state(self) -> int:
        return self._state

    def next_u64(self) -> int:
        self._state = (self._state + GOLDEN_GAMMA) & MASK64
        z = self._state
        z = ((z ^ (z >> 30)) * _MIX_1) & MASK64
        z = ((z ^ (z >> 27)) * _MIX_2) & MASK64
        return z ^ (z >> 31)

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        return self.next_u64()

    def __repr__(self) -> str:
        return f"SeedExpander(state={self._state:#018x})"


class BitGenerator:
    """
    xoroshiro128+ generator producing uniformly distributed 64-bit integers.

    The two state words are taken from consecutive outputs of a
    `SeedExpander`.
    """

    __slots__ = ("_s0", "_s1")

    def __init__(self, expander: SeedExpander) -> None:
        self._s0 = expander.next_u64()
        self._s1 = expander.next_u64()

    @classmethod
    def from_seed(cls, seed: int) -> "BitGenerator":
        return cls(SeedExpander.from_seed(seed))

    @classmethod
    def from_time(cls) -> "BitGenerator":
        return cls(SeedExpander.from_time())

    @property
    def state(self) -> Tuple[int, int]:
        return self._s0, self._s1

    def next_u64(self) -> int:
        s0 = self._s0
        s1 = self._s1
        result = (s0 + s1) & MASK64

        s1 ^= s0
        self._s0 = rotl64(s0, 55) ^ s1 ^ ((s1 << 14) & MASK64)
        self._s1 = rotl64(s1, 36)
        return result

    def next_float(self) -> float:
        """
        Uniform double in [0, 1), the 64-bit output divided by the largest
        64-bit value.

        Outputs close enough to the maximum to round up to 1.0 are pinned
        to the largest double below 1.0.
        """
        return min(self.next_u64() / UINT64_MAX, _BELOW_ONE)

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        return self.next_u64()

    def __repr__(self) -> str:
        return f"BitGenerator(state=({self._s0:#018x}, {self._s1:#018x}))"


class NormalSampler:
    """
    Normal variates from the Marsaglia polar method.

    Every accepted pair of uniforms ``(u, v)`` with ``r = u*u + v*v`` in
    ``(0, 1)`` yields two independent standard normals, ``u * c`` and
    ``v * c`` with ``c = sqrt(-2 ln(r) / r)``. The first is returned, the
    second is buffered and returned by the next call without touching the
    bit generator.

    Parameters
    ----------
    generator: BitGenerator
        Source of uniform variates, owned by the sampler from now on
    mean: float
        Mean of the produced distribution
    std_dev: float
        Standard deviation of the produced distribution
    max_rejections: int
        Safety cap on consecutive rejected pairs before giving up
    """

    __slots__ = ("_generator", "_buffer", "_mean", "_std_dev", "_max_rejections")

    def __init__(
        self,
        generator: BitGenerator,
        mean: float = 0.0,
        std_dev: float = 1.0,
        max_rejections: int = DEFAULT_MAX_REJECTIONS,
    ) -> None:
        if std_dev < 0:
            raise ValueError(f"Standard deviation must be non-negative, got {std_dev}")
        if max_rejections < 1:
            raise ValueError("max_rejections must be at least 1")
        self._generator = generator
        self._buffer: Optional[float] = None
        self._mean = float(mean)
        self._std_dev = float(std_dev)
        self._max_rejections = max_rejections

    @classmethod
    def from_seed(
        cls, seed: int, mean: float = 0.0, std_dev: float = 1.0
    ) -> "NormalSampler":
        return cls(BitGenerator.from_seed(seed), mean=mean, std_dev=std_dev)

    @classmethod
    def from_time(cls, mean: float = 0.0, std_dev: float = 1.0) -> "NormalSampler":
        return cls(BitGenerator.from_time(), mean=mean, std_dev=std_dev)

    @property
    def generator(self) -> BitGenerator:
        return self._generator

    @property
    def mean(self) -> float:
        return self._mean

    @property
    def std_dev(self) -> float:
        return self._std_dev

    @property
    def buffered(self) -> Optional[float]:
        """Standard normal held back for the next call, if any"""
        return self._buffer

    def standard(self) -> float:
        """
        Draw one standard normal (mean 0, standard deviation 1).
        """
        if self._buffer is not None:
            value = self._buffer
            self._buffer = None
            return value

        u, v, r = self._polar_pair()
        scale = math.sqrt(-2.0 * math.log(r) / r)
        self._buffer = v * scale
        return u * scale

    def draw(self) -> float:
        """
        Draw one variate from N(mean, std_dev**2).
        """
        return self._mean + self._std_dev * self.standard()

    def sample(self, count: int) -> np.ndarray:
        """
        Draw `count` variates into a new float64 array.
        """
        if count < 0:
            raise ValueError(f"Sample count must be non-negative, got {count}")
        return self.fill(np.empty(count, dtype=np.float64))

    def fill(self, buffer: np.ndarray) -> np.ndarray:
        """
        Overwrite every cell of a flat buffer with fresh draws, in order.
        """
        for idx in range(buffer.shape[0]):
            buffer[idx] = self.draw()
        return buffer

    def _polar_pair(self) -> Tuple[float, float, float]:
        gen = self._generator
        for attempt in range(self._max_rejections):
            u = gen.next_float() * 2.0 - 1.0
            v = gen.next_float() * 2.0 - 1.0
            r = u * u + v * v
            if 0.0 < r < 1.0:
                if attempt >= _LONG_REJECTION_RUN:
                    logger.warning(
                        "Polar sampler needed %d rejected pairs before accepting",
                        attempt,
                    )
                return u, v, r
        raise SamplerExhausted(
            f"No pair accepted after {self._max_rejections} attempts"
        )

    def __iter__(self) -> Iterator[float]:
        return self

    def __next__(self) -> float:
        return self.draw()

    def __repr__(self) -> str:
        return (
            f"NormalSampler(mean={self._mean}, std_dev={self._std_dev}, "
            f"buffered={self._buffer is not None})"
        )
