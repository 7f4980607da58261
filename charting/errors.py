class ChartError(Exception):
    """Base class for every error the chart pipeline handles itself."""


class EmptyDatasetError(ChartError):
    """Nothing to draw: the dataset is empty or missing."""


class DegenerateDeltaError(ChartError):
    """Percent change against a zero previous value."""

    def __init__(self, previous, current):
        super().__init__(f"percent change undefined for previous={previous!r} current={current!r}")
        self.previous = previous
        self.current = current


class InvalidDimensionError(ChartError):
    """Chart width or height is not a positive finite number."""


class InvalidRecordError(ChartError):
    """A record's values are missing, non-numeric or non-finite."""
