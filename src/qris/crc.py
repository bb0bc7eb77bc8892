"""CRC-16/CCITT-FALSE used for the QRIS checksum field.

Parameters: poly 0x1021, init 0xFFFF, no reflection, no final XOR.
Input is a text payload; every character contributes its code point's low
byte, matching the reference payload generator.
"""

from __future__ import annotations

CRC16_POLY = 0x1021
CRC16_INIT = 0xFFFF


def _build_table(poly: int) -> tuple[int, ...]:
    table = []
    for byte in range(256):
        crc = byte << 8
        for _ in range(8):
            if crc & 0x8000:
                crc = ((crc << 1) ^ poly) & 0xFFFF
            else:
                crc = (crc << 1) & 0xFFFF
        table.append(crc)
    return tuple(table)


CRC16_TABLE = _build_table(CRC16_POLY)


def crc16_value(data: str) -> int:
    """Return the raw 16-bit register after consuming ``data``."""
    crc = CRC16_INIT
    for ch in data:
        crc = ((crc << 8) & 0xFFFF) ^ CRC16_TABLE[((crc >> 8) ^ ord(ch)) & 0xFF]
    return crc


def crc16(data: str) -> str:
    """Checksum ``data`` and render it as 4 uppercase hex digits."""
    return f"{crc16_value(data):04X}"
