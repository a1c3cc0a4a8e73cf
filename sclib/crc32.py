"""CRC-32C (Castagnoli) checksum, usable incrementally over partial buffers."""

from __future__ import annotations

from typing import List, Union

_POLY = 0x82F63B78
_MASK = 0xFFFFFFFF


def _build_table() -> List[int]:
    table = []
    for n in range(256):
        crc = n
        for _ in range(8):
            crc = (crc >> 1) ^ _POLY if crc & 1 else crc >> 1
        table.append(crc)
    return table


_TABLE = _build_table()


def crc32c(data: Union[bytes, bytearray, memoryview], crc: int = 0) -> int:
    """Return the CRC-32C of ``data``.

    ``crc`` is the result of a previous call when checksumming data in
    pieces; it is zero for the first (or only) piece.
    """
    view = memoryview(data).cast("B")
    table = _TABLE
    value = ~crc & _MASK
    for byte in view:
        value = table[(value ^ byte) & 0xFF] ^ (value >> 8)
    return ~value & _MASK