from random_choice import RandomSource


class FixedRandomSource:
    """Returns the same draw every time."""

    def __init__(self, value: float) -> None:
        self.value = value
        self.calls = 0

    def next_uniform(self) -> float:
        self.calls += 1
        return self.value


class CountingRandomSource:
    """Counts the draws taken from a wrapped source."""

    def __init__(self, source: RandomSource) -> None:
        self.source = source
        self.calls = 0

    def next_uniform(self) -> float:
        self.calls += 1
        return self.source.next_uniform()
