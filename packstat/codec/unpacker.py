"""12-bit value unpacking from a densely packed byte stream.

Values are packed big-nibble-first, two values per three bytes:

    byte 0       byte 1       byte 2
    AAAA AAAA    AAAA BBBB    BBBB BBBB

The unpacker is a three-phase state machine keyed on how many high-order
bits of the next value are already buffered (0, 4 or 8). It can be fed one
byte at a time across arbitrary chunk boundaries. A trailing group shorter
than 12 bits never produces a value.

Usage:
    unpacker = BitUnpacker()
    for byte in stream:
        value = unpacker.feed(byte)
        if value is not None:
            handle(value)

    # Whole buffer at once
    values = unpack_array(data)
"""

from typing import Iterable, Iterator, Optional, Union

import numpy as np

VALUE_BITS = 12
MAX_VALUE = (1 << VALUE_BITS) - 1

_LOW_NIBBLE = 0x0F


class BitUnpacker:
    """Reassemble 12-bit unsigned values from 8-bit bytes."""

    def __init__(self):
        self.pending_bits = 0  # high-order bits of the next value already held
        self.pending_value = 0
        self.bytes_consumed = 0
        self.values_emitted = 0

    def feed(self, byte: int) -> Optional[int]:
        """Consume one byte.

        Args:
            byte: Integer in [0, 255].

        Returns:
            The completed 12-bit value, or None if more bits are needed.
        """
        byte = int(byte)
        if not 0 <= byte <= 0xFF:
            raise ValueError(f"byte out of range: {byte}")
        self.bytes_consumed += 1

        if self.pending_bits == 0:
            self.pending_value = byte
            self.pending_bits = 8
            return None

        if self.pending_bits == 8:
            value = (self.pending_value << 4) | (byte >> 4)
            self.pending_value = byte & _LOW_NIBBLE
            self.pending_bits = 4
        else:
            value = (self.pending_value << 8) | byte
            self.pending_value = 0
            self.pending_bits = 0

        self.values_emitted += 1
        return value

    def feed_bytes(self, data: Union[bytes, bytearray, memoryview, Iterable[int]]) -> Iterator[int]:
        """Lazily yield every value completed by ``data``."""
        for byte in data:
            value = self.feed(byte)
            if value is not None:
                yield value

    def feed_chunk(self, data: Union[bytes, bytearray, memoryview]) -> np.ndarray:
        """Consume a whole chunk, returning its completed values as uint16.

        Equivalent to ``feed_bytes`` but unpacks the byte-aligned middle of
        the chunk with ``unpack_array``. Chunks may split values anywhere.
        """
        data = memoryview(bytes(data))
        head = []
        pos = 0
        while self.pending_bits != 0 and pos < len(data):
            value = self.feed(data[pos])
            if value is not None:
                head.append(value)
            pos += 1

        n_aligned = (len(data) - pos) // 3 * 3
        body = unpack_array(data[pos:pos + n_aligned])
        self.bytes_consumed += n_aligned
        self.values_emitted += len(body)
        pos += n_aligned

        tail = list(self.feed_bytes(data[pos:]))
        if not head and not tail:
            return body
        return np.concatenate((
            np.asarray(head, dtype=np.uint16), body, np.asarray(tail, dtype=np.uint16),
        ))

    @property
    def discarded_bits(self) -> int:
        """Bits that would be dropped if the stream ended now."""
        return self.pending_bits

    def reset(self):
        """Return to the initial state for a new stream."""
        self.pending_bits = 0
        self.pending_value = 0
        self.bytes_consumed = 0
        self.values_emitted = 0


def unpack_array(data: Union[bytes, bytearray, memoryview, np.ndarray]) -> np.ndarray:
    """Unpack a complete buffer in one vectorized pass.

    Produces the same sequence as feeding every byte to a fresh
    BitUnpacker.

    Args:
        data: Packed bytes (or a uint8 array).

    Returns:
        1D uint16 array of length ``(8 * len(data)) // 12``.
    """
    if isinstance(data, np.ndarray):
        raw = np.asarray(data, dtype=np.uint8).ravel()
    else:
        raw = np.frombuffer(bytes(data), dtype=np.uint8)
    n_groups, tail = divmod(len(raw), 3)

    groups = raw[:n_groups * 3].reshape(-1, 3).astype(np.uint16)
    out = np.empty(n_groups * 2 + (1 if tail == 2 else 0), dtype=np.uint16)
    out[0:n_groups * 2:2] = (groups[:, 0] << 4) | (groups[:, 1] >> 4)
    out[1:n_groups * 2:2] = ((groups[:, 1] & _LOW_NIBBLE) << 8) | groups[:, 2]

    # Two trailing bytes still hold one full value; one byte holds none.
    if tail == 2:
        b0, b1 = int(raw[-2]), int(raw[-1])
        out[-1] = (b0 << 4) | (b1 >> 4)
    return out
