"""Circular window over the K most recently seen values."""

from typing import List

import numpy as np

from ._capacity import check_capacity


class LastKTracker:
    """Ring buffer of the last K values.

    ``cursor`` is the slot the next value will overwrite. Once the buffer
    has wrapped, that slot also holds the oldest surviving value.
    """

    def __init__(self, k: int = 32):
        self.k = check_capacity(k)
        self._values = np.zeros(self.k, dtype=np.uint16)
        self.cursor = 0
        self.total_recorded = 0

    def record(self, value: int):
        self._values[self.cursor] = value
        self.cursor = (self.cursor + 1) % self.k
        self.total_recorded += 1

    def values(self) -> List[int]:
        """Chronological readout, oldest first."""
        if self.total_recorded < self.k:
            return self._values[:self.total_recorded].tolist()
        return np.concatenate(
            (self._values[self.cursor:], self._values[:self.cursor])
        ).tolist()

    def __len__(self) -> int:
        return min(self.total_recorded, self.k)

    def reset(self):
        self._values[:] = 0
        self.cursor = 0
        self.total_recorded = 0
