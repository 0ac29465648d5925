"""Bit packing of black/white grids."""

import logging
from collections.abc import Sequence

logger = logging.getLogger(__name__)


def pack_bits(grid: Sequence[bool]) -> bytes:
    """Pack a row-major grid of flags into bytes, most significant bit first.

    The first of every 8 flags lands in bit 7. A trailing group of fewer
    than 8 flags does not fill a byte and is dropped.
    """
    logger.debug(f"Packing {len(grid)} bits")
    packed = bytearray(len(grid) // 8)
    for i in range(len(packed)):
        byte_val = 0
        for bit in range(8):
            if grid[8 * i + bit]:
                byte_val |= 1 << (7 - bit)
        packed[i] = byte_val
    return bytes(packed)


def to_hex(packed: bytes) -> str:
    """Uppercase hex representation, two characters per byte."""
    return packed.hex().upper()
