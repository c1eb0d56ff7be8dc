"""Stochastic universal sampling.

A single uniform draw ``u`` places the first spoke at ``spin = u * gap`` on the
cumulative weight axis, where ``gap = sum(weights) / n``. The remaining spokes
follow at equal spacing, and every spoke selects the first item whose prefix
sum reaches or exceeds it. Compared with ``n`` independent roulette-wheel draws
this keeps each item's count within one of its expected value.

Weights are rounded to the requested precision on the way in; all sums and
spoke arithmetic are then carried out in float64.
"""

from __future__ import annotations

import logging
import operator
from collections.abc import Callable, MutableSequence, Sequence
from typing import Any, TypeVar, Union

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from random_choice.errors import InvalidWeightError, SamplingError, WeightLengthError
from random_choice.random_source import RandomSource

logger = logging.getLogger(__name__)

T = TypeVar("T")

Weights = Union[Sequence[float], NDArray[Any]]

DOUBLE = np.float64
SINGLE = np.float32


def as_weights(weights: ArrayLike, dtype: DTypeLike = DOUBLE) -> NDArray[np.float64]:
    """Round ``weights`` to ``dtype`` and widen the result to float64.

    Raises :class:`InvalidWeightError` for the first negative, NaN or
    infinite weight. The sum of the weights is not checked for overflow.
    """
    with np.errstate(over="ignore"):
        narrowed = np.asarray(weights, dtype=dtype)
    if narrowed.ndim != 1:
        raise SamplingError(
            f"weights must be one-dimensional, got shape {narrowed.shape}"
        )
    invalid = ~np.isfinite(narrowed) | (narrowed < 0)
    if invalid.any():
        index = int(np.flatnonzero(invalid)[0])
        raise InvalidWeightError(index, float(narrowed[index]))
    return narrowed.astype(np.float64)


def spoke_positions(total: float, n: int, u: float) -> NDArray[np.float64]:
    """Return the ``n`` spoke positions for a wheel of circumference ``total``."""
    spoke_gap = total / n
    spin = u * spoke_gap
    return spin + spoke_gap * np.arange(n, dtype=np.float64)


def select_indices(
    weights: NDArray[np.float64], n: int, u: float
) -> NDArray[np.intp]:
    """Select ``n`` indices into ``weights`` using the spin ``u`` in [0, 1).

    ``weights`` must be non-empty and ``n`` positive. The result is
    non-decreasing. If every weight is zero the items are weighted uniformly.
    """
    # Overflow of the sum is the caller's responsibility and yields inf.
    with np.errstate(over="ignore"):
        cumulative = np.cumsum(weights, dtype=np.float64)
    total = float(cumulative[-1])
    if total == 0.0:
        logger.warning(
            "All %d weights are zero; selecting uniformly instead", len(weights)
        )
        cumulative = np.arange(1, len(weights) + 1, dtype=np.float64)
        total = float(cumulative[-1])

    with np.errstate(invalid="ignore"):
        spokes = spoke_positions(total, n, u)
    spokes = spokes[spokes < total]
    indices = np.searchsorted(cumulative, spokes, side="left")

    # Rounding, or a sum that overflowed to inf, leaves spokes at or past the total.
    shortfall = n - len(indices)
    if shortfall:
        if len(indices):
            last = indices[-1]
        else:
            last = np.searchsorted(cumulative, total, side="left")
        indices = np.concatenate(
            [indices, np.full(shortfall, last, dtype=indices.dtype)]
        )
    logger.debug(
        "Selected %d of %d items (spoke gap %.6g, topped up %d)",
        n,
        len(weights),
        total / n,
        shortfall,
    )
    return indices


def choose_indices(
    weights: ArrayLike,
    n: int,
    random_source: RandomSource,
    dtype: DTypeLike = DOUBLE,
) -> NDArray[np.intp]:
    """Choose ``n`` indices into ``weights`` with one draw from ``random_source``.

    Returns an empty array without drawing when ``weights`` is empty or
    ``n`` is zero.
    """
    n = operator.index(n)
    if n < 0:
        raise SamplingError(f"n must be non-negative, got {n}")
    array = as_weights(weights, dtype)
    if n == 0 or len(array) == 0:
        return np.empty(0, dtype=np.intp)
    return select_indices(array, n, random_source.next_uniform())


def sample_by_weight(
    samples: Sequence[T],
    weights: Weights,
    n: int,
    random_source: RandomSource,
    dtype: DTypeLike = DOUBLE,
) -> list[T]:
    """Choose ``n`` of ``samples``, each with probability proportional to its weight.

    The returned list holds the original sample objects (nothing is copied),
    in the order their indices were selected, which is never decreasing.

    Args:
        samples: Items to choose from.
        weights: One non-negative weight per sample. Weights need not sum
            to one and single weights may exceed one.
        n: Number of items to return.
        random_source: Supplies the single draw that spins the wheel.
        dtype: Precision the weights are rounded to before summing.

    Raises:
        WeightLengthError: If ``samples`` and ``weights`` differ in length.
        InvalidWeightError: If a weight is negative or not finite.
    """
    n = operator.index(n)
    if n < 0:
        raise SamplingError(f"n must be non-negative, got {n}")
    if n == 0 or len(weights) == 0:
        return []
    if len(samples) != len(weights):
        raise WeightLengthError(len(samples), len(weights))
    indices = choose_indices(weights, n, random_source, dtype)
    return [samples[i] for i in indices]


def resample_in_place(
    samples: MutableSequence[T],
    weights: Weights,
    random_source: RandomSource,
    dtype: DTypeLike = DOUBLE,
    copy: Callable[[T], T] | None = None,
) -> None:
    """Overwrite ``samples`` with ``len(samples)`` items drawn by weight.

    Sources are read from a snapshot taken before the first write, so slot
    ``i`` can be overwritten while a later slot still reads its old value.
    Sequences with fewer than two weights are left untouched.

    Args:
        samples: Items to resample; a list or a one-dimensional numpy array.
        weights: One non-negative weight per sample.
        random_source: Supplies the single draw that spins the wheel.
        dtype: Precision the weights are rounded to before summing.
        copy: Applied to every item placed into ``samples``. Without it an
            item selected twice occupies both slots as the same object.
    """
    if len(weights) < 2:
        return
    if len(samples) != len(weights):
        raise WeightLengthError(len(samples), len(weights))
    indices = choose_indices(weights, len(samples), random_source, dtype)

    if isinstance(samples, np.ndarray) and copy is None:
        samples[:] = samples[indices]
        return

    snapshot = list(samples)
    for destination, source in enumerate(indices):
        item = snapshot[source]
        samples[destination] = copy(item) if copy is not None else item
