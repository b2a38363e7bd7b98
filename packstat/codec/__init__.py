"""packstat codec subpackage: 12-bit stream unpacking and packing."""

from .unpacker import BitUnpacker, unpack_array, MAX_VALUE, VALUE_BITS
from .packer import BitPacker, pack_values

__all__ = [
    "BitUnpacker",
    "unpack_array",
    "BitPacker",
    "pack_values",
    "MAX_VALUE",
    "VALUE_BITS",
]
