"""Sources of uniform draws in [0, 1) for the samplers.

Anything with a ``next_uniform()`` method satisfies :class:`RandomSource`.
Three providers ship with the package:

* :class:`SeededRandomSource` reproduces the same draws for the same seed.
* :class:`ThreadLocalRandomSource` is auto-seeded and keeps one generator per
  thread, so it needs no setup and is never shared between threads.
* :class:`GeneratorRandomSource` and :class:`StdlibRandomSource` adapt an
  existing numpy ``Generator`` or ``random.Random``.
"""

from __future__ import annotations

import numbers
import random
import threading
from collections.abc import Sequence
from typing import Protocol, Union, runtime_checkable

import numpy as np

SeedLike = Union[int, Sequence[int]]


@runtime_checkable
class RandomSource(Protocol):
    """Produces uniform floating-point draws in [0.0, 1.0)."""

    def next_uniform(self) -> float: ...


class GeneratorRandomSource:
    """Draws from a ``numpy.random.Generator``."""

    def __init__(self, generator: np.random.Generator) -> None:
        self._generator = generator

    @property
    def generator(self) -> np.random.Generator:
        return self._generator

    def next_uniform(self) -> float:
        return float(self._generator.random())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._generator!r})"


class SeededRandomSource(GeneratorRandomSource):
    """A generator seeded from an integer or a short sequence of integers.

    Two sources built from equal seeds yield identical draw sequences.
    """

    def __init__(self, seed: SeedLike) -> None:
        if isinstance(seed, numbers.Integral):
            seed = int(seed)
        else:
            seed = tuple(int(part) for part in seed)
        self._seed = seed
        super().__init__(np.random.default_rng(seed))

    @property
    def seed(self) -> SeedLike:
        return self._seed

    def __repr__(self) -> str:
        return f"SeededRandomSource({self._seed!r})"


class StdlibRandomSource:
    """Draws from a ``random.Random`` instance (a fresh one if none is given)."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    def next_uniform(self) -> float:
        return self._rng.random()


class ThreadLocalRandomSource:
    """Auto-seeded source holding a separate generator for every thread."""

    def __init__(self) -> None:
        self._local = threading.local()

    @property
    def generator(self) -> np.random.Generator:
        """The calling thread's generator, created on first use."""
        generator = getattr(self._local, "generator", None)
        if generator is None:
            generator = np.random.default_rng()
            self._local.generator = generator
        return generator

    def next_uniform(self) -> float:
        return float(self.generator.random())


_THREAD_SOURCE = ThreadLocalRandomSource()


def thread_random_source() -> ThreadLocalRandomSource:
    """Return the process-wide thread-local random source."""
    return _THREAD_SOURCE
