"""Samplers owning a random source, and stateless entry points.

The module-level functions draw from the thread-local default source. A
:class:`Sampler` holds its own source, so successive calls continue the same
stream of draws and a seeded sampler is fully reproducible.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence, Sequence
from typing import TypeVar

import numpy as np
from numpy.typing import NDArray

from random_choice import sus
from random_choice.random_source import (
    RandomSource,
    SeededRandomSource,
    SeedLike,
    thread_random_source,
)

T = TypeVar("T")


class Sampler:
    """Stochastic universal sampling driven by one random source.

    The ``*_f32`` methods round the weights to single precision first; every
    method sums and spaces spokes in double precision.
    """

    def __init__(self, random_source: RandomSource | None = None) -> None:
        if random_source is None:
            random_source = thread_random_source()
        elif not isinstance(random_source, RandomSource):
            raise TypeError(
                f"random_source must provide next_uniform(), got {random_source!r}"
            )
        self._random_source = random_source

    @classmethod
    def from_seed(cls, seed: SeedLike) -> Sampler:
        """Build a sampler whose draws are reproducible from ``seed``."""
        return cls(SeededRandomSource(seed))

    @property
    def random_source(self) -> RandomSource:
        return self._random_source

    def choose_indices(self, weights: sus.Weights, n: int) -> NDArray[np.intp]:
        """Choose ``n`` indices into ``weights``, in non-decreasing order."""
        return sus.choose_indices(weights, n, self._random_source, sus.DOUBLE)

    def choose_indices_f32(self, weights: sus.Weights, n: int) -> NDArray[np.intp]:
        return sus.choose_indices(weights, n, self._random_source, sus.SINGLE)

    def sample_by_weight(
        self, samples: Sequence[T], weights: sus.Weights, n: int
    ) -> list[T]:
        """Choose ``n`` of ``samples`` with probability proportional to weight.

        See :func:`random_choice.sus.sample_by_weight`.
        """
        return sus.sample_by_weight(
            samples, weights, n, self._random_source, sus.DOUBLE
        )

    def sample_by_weight_f32(
        self, samples: Sequence[T], weights: sus.Weights, n: int
    ) -> list[T]:
        return sus.sample_by_weight(
            samples, weights, n, self._random_source, sus.SINGLE
        )

    def resample_in_place(
        self,
        samples: MutableSequence[T],
        weights: sus.Weights,
        copy: Callable[[T], T] | None = None,
    ) -> None:
        """Overwrite ``samples`` with a weighted draw of the same size.

        See :func:`random_choice.sus.resample_in_place`.
        """
        sus.resample_in_place(samples, weights, self._random_source, sus.DOUBLE, copy)

    def resample_in_place_f32(
        self,
        samples: MutableSequence[T],
        weights: sus.Weights,
        copy: Callable[[T], T] | None = None,
    ) -> None:
        sus.resample_in_place(samples, weights, self._random_source, sus.SINGLE, copy)

    def __repr__(self) -> str:
        return f"Sampler({self._random_source!r})"


def random_choice() -> Sampler:
    """Return a sampler over the thread-local default random source."""
    return Sampler(thread_random_source())


def sample_by_weight(samples: Sequence[T], weights: sus.Weights, n: int) -> list[T]:
    """Choose ``n`` of ``samples`` by weight using the default random source."""
    return random_choice().sample_by_weight(samples, weights, n)


def sample_by_weight_f32(
    samples: Sequence[T], weights: sus.Weights, n: int
) -> list[T]:
    """Single-precision variant of :func:`sample_by_weight`."""
    return random_choice().sample_by_weight_f32(samples, weights, n)


def resample_in_place(
    samples: MutableSequence[T],
    weights: sus.Weights,
    copy: Callable[[T], T] | None = None,
) -> None:
    """Resample ``samples`` in place by weight using the default random source."""
    random_choice().resample_in_place(samples, weights, copy)


def resample_in_place_f32(
    samples: MutableSequence[T],
    weights: sus.Weights,
    copy: Callable[[T], T] | None = None,
) -> None:
    """Single-precision variant of :func:`resample_in_place`."""
    random_choice().resample_in_place_f32(samples, weights, copy)
