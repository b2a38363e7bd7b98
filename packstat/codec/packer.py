"""Pack 12-bit values into the byte layout read by BitUnpacker.

Used to generate input files and test streams. An odd value count leaves a
trailing half byte, which is zero-filled and ignored when unpacking.
"""

from typing import Iterable

import numpy as np

from .unpacker import MAX_VALUE


class BitPacker:
    """Incrementally pack 12-bit values, two per three bytes."""

    def __init__(self):
        self._bytes = bytearray()
        self._half = None  # low nibble waiting for the next value

    def write(self, value: int):
        value = int(value)
        if not 0 <= value <= MAX_VALUE:
            raise ValueError(f"value out of 12-bit range: {value}")
        if self._half is None:
            self._bytes.append(value >> 4)
            self._half = value & 0x0F
        else:
            self._bytes.append((self._half << 4) | (value >> 8))
            self._bytes.append(value & 0xFF)
            self._half = None

    def write_many(self, values: Iterable[int]):
        for value in values:
            self.write(value)

    def flush(self) -> bytes:
        """Return the packed bytes, padding a dangling nibble with zeros."""
        out = bytes(self._bytes)
        if self._half is not None:
            out += bytes([self._half << 4])
        return out


def pack_values(values: Iterable[int]) -> bytes:
    """Pack a sequence of 12-bit values.

    Args:
        values: Integers in [0, 4095] (list, iterable or integer array).

    Returns:
        Packed bytes, ``ceil(1.5 * n)`` long.
    """
    if isinstance(values, np.ndarray):
        arr = values.ravel().astype(np.int64)
        if arr.size and (arr.min() < 0 or arr.max() > MAX_VALUE):
            raise ValueError("values out of 12-bit range")
        values = arr.tolist()
    packer = BitPacker()
    packer.write_many(values)
    return packer.flush()
