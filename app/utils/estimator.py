"""Weight estimation over a series of dated samples.

A sample is a ``(timestamp, value)`` pair. The estimate at a query time is the
value of a sample taken exactly then, or the midpoint between the closest
sample before and the closest sample after it.
"""
from bisect import bisect_left
from datetime import datetime
from typing import Iterable, List, NamedTuple, Optional


class Sample(NamedTuple):
    timestamp: datetime
    value: float


class InvalidInput(ValueError):
    pass


def _combine(series: List[Sample], before: Optional[Sample], after: Optional[Sample]) -> float:
    if before is not None and after is not None:
        return (before.value + after.value) / 2
    if before is not None:
        return before.value
    if after is not None:
        return after.value
    return series[0].value


def estimate(series: Iterable[Sample], query: datetime) -> float:
    """Estimate the value of ``series`` at ``query``.

    An exact timestamp match wins (first one in iteration order). Otherwise the
    result is the plain midpoint of the nearest samples on either side, or the
    value of the only side that has one.

    Raises InvalidInput if the series is empty.
    """
    series = list(series)
    if not series:
        raise InvalidInput("Cannot estimate a value from an empty series")

    before = None
    after = None
    for sample in series:
        if sample.timestamp == query:
            return sample.value
        if sample.timestamp < query:
            if before is None or sample.timestamp > before.timestamp:
                before = sample
        elif after is None or sample.timestamp < after.timestamp:
            after = sample
    return _combine(series, before, after)


def estimate_total(series_list: Iterable[Iterable[Sample]], query: datetime) -> float:
    """Sum of the estimates of every non-empty series at ``query``."""
    total = 0
    for series in series_list:
        series = list(series)
        if not series:
            continue
        total += estimate(series, query)
    return total


class SampleIndex:
    """Sorted snapshot of a series for repeated queries in O(log n).

    Sorting is stable, so samples sharing a timestamp keep their input order and
    the answers are the same as ``estimate`` on the original series.
    """

    def __init__(self, series: Iterable[Sample]) -> None:
        self.samples = sorted(series, key=lambda s: s.timestamp)
        if not self.samples:
            raise InvalidInput("Cannot index an empty series")
        self.timestamps = [s.timestamp for s in self.samples]

    def __len__(self):
        return len(self.samples)

    def estimate(self, query: datetime) -> float:
        left = bisect_left(self.timestamps, query)
        if left < len(self.samples) and self.timestamps[left] == query:
            return self.samples[left].value

        # greatest timestamp below query: the first sample of that run of equal timestamps
        before = None
        if left > 0:
            run_start = bisect_left(self.timestamps, self.timestamps[left - 1])
            before = self.samples[run_start]
        after = self.samples[left] if left < len(self.samples) else None
        return _combine(self.samples, before, after)
