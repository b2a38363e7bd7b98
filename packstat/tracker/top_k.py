"""Sorted fixed-capacity collection of the K largest values seen.

Kept as an ascending array updated by insertion on every value: O(K) per
update, and the readout is already in output order. A heap would make the
insert cheaper but needs a sort on every readout.
"""

from typing import List

import numpy as np

from ._capacity import check_capacity


class TopKTracker:
    """Maintain the K largest values in ascending order.

    Once full, a value must be strictly greater than the current minimum to
    get in; it then evicts that minimum.
    """

    def __init__(self, k: int = 32):
        self.k = check_capacity(k)
        self._values = np.zeros(self.k, dtype=np.uint16)
        self._count = 0

    def consider(self, value: int):
        """Offer one value to the collection."""
        values = self._values
        count = self._count

        if count == 0:
            values[0] = value
            self._count = 1
            return

        if count == self.k and value <= values[0]:
            return

        # First slot holding an entry >= value.
        idx = int(np.searchsorted(values[:count], value, side="left"))

        if count < self.k:
            values[idx + 1:count + 1] = values[idx:count]
            values[idx] = value
            self._count = count + 1
        else:
            # Drop the minimum by sliding [1, idx) down, then fill the gap.
            values[0:idx - 1] = values[1:idx]
            values[idx - 1] = value

    def values(self) -> List[int]:
        """Ascending readout of up to K values."""
        return self._values[:self._count].tolist()

    @property
    def minimum(self) -> int:
        if self._count == 0:
            raise ValueError("empty collection has no minimum")
        return int(self._values[0])

    @property
    def is_full(self) -> bool:
        return self._count == self.k

    def __len__(self) -> int:
        return self._count

    def reset(self):
        self._values[:] = 0
        self._count = 0
