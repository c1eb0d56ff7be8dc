"""Exceptions raised for invalid sampling input."""


class SamplingError(ValueError):
    """Base class for errors raised by the samplers in this package."""


class WeightLengthError(SamplingError):
    """The samples and weights sequences are not index-aligned."""

    def __init__(self, n_samples: int, n_weights: int) -> None:
        super().__init__(
            f"samples and weights must have the same length, "
            f"got {n_samples} samples and {n_weights} weights"
        )
        self.n_samples = n_samples
        self.n_weights = n_weights


class InvalidWeightError(SamplingError):
    """A weight is negative, NaN or infinite."""

    def __init__(self, index: int, weight: float) -> None:
        super().__init__(
            f"Weight at index {index} must be finite and non-negative, got {weight}"
        )
        self.index = index
        self.weight = weight
