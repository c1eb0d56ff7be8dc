"""Package initialization for random-choice.

Stochastic universal sampling: choose n items with probability proportional
to their weights, using a single spin of an n-spoked wheel.
"""

import logging

from random_choice.errors import InvalidWeightError, SamplingError, WeightLengthError
from random_choice.random_source import (
    GeneratorRandomSource,
    RandomSource,
    SeededRandomSource,
    StdlibRandomSource,
    ThreadLocalRandomSource,
    thread_random_source,
)
from random_choice.sampler import (
    Sampler,
    random_choice,
    resample_in_place,
    resample_in_place_f32,
    sample_by_weight,
    sample_by_weight_f32,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
    "GeneratorRandomSource",
    "InvalidWeightError",
    "RandomSource",
    "Sampler",
    "SamplingError",
    "SeededRandomSource",
    "StdlibRandomSource",
    "ThreadLocalRandomSource",
    "WeightLengthError",
    "random_choice",
    "resample_in_place",
    "resample_in_place_f32",
    "sample_by_weight",
    "sample_by_weight_f32",
    "thread_random_source",
]
