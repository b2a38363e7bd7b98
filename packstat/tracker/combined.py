"""Top-K and last-K tracking driven by a single value stream."""

from typing import List

from .top_k import TopKTracker
from .last_k import LastKTracker


class TopLastTracker:
    """Feed each value to both a TopKTracker and a LastKTracker."""

    def __init__(self, k: int = 32):
        self.top = TopKTracker(k)
        self.last = LastKTracker(k)
        self.k = self.top.k

    def update(self, value: int):
        self.top.consider(value)
        self.last.record(value)

    def update_many(self, values):
        for value in values:
            self.update(int(value))

    def top_values(self) -> List[int]:
        return self.top.values()

    def last_values(self) -> List[int]:
        return self.last.values()

    @property
    def count(self) -> int:
        """Total values seen."""
        return self.last.total_recorded

    def reset(self):
        self.top.reset()
        self.last.reset()
