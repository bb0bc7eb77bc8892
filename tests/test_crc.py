"""Tests for the CRC-16/CCITT-FALSE checksum."""

import random
import string

from qris.crc import CRC16_TABLE, crc16, crc16_value


def _bitwise_crc16(data: str) -> int:
    crc = 0xFFFF
    for ch in data:
        crc ^= ord(ch) << 8
        for _ in range(8):
            if crc & 0x8000:
                crc = (crc << 1) ^ 0x1021
            else:
                crc <<= 1
            crc &= 0xFFFF
    return crc


def test_crc16_check_value():
    """Standard CCITT-FALSE check value for '123456789'."""
    assert crc16("123456789") == "29B1"


def test_crc16_empty():
    """Empty input leaves the initial register untouched."""
    assert crc16_value("") == 0xFFFF
    assert crc16("") == "FFFF"


def test_crc16_table_size():
    assert len(CRC16_TABLE) == 256
    assert CRC16_TABLE[0] == 0
    assert CRC16_TABLE[1] == 0x1021


def test_crc16_format_is_four_uppercase_hex_digits():
    for sample in ["A", "000201", "hello world", "6304"]:
        result = crc16(sample)
        assert len(result) == 4
        assert result == result.upper()
        int(result, 16)


def test_crc16_zero_padded():
    """Small register values must still render as 4 digits."""
    value = crc16_value("A")
    assert crc16("A") == f"{value:04X}"


def test_crc16_matches_bitwise_reference():
    """Table-driven CRC must equal the shift-and-xor algorithm."""
    rng = random.Random(1234)
    for _ in range(200):
        length = rng.randint(0, 120)
        sample = "".join(rng.choice(string.printable) for _ in range(length))
        assert crc16_value(sample) == _bitwise_crc16(sample)


def test_crc16_non_latin_characters_match_bitwise_reference():
    for sample in ["KOPI ☕", "Café", "日本"]:
        assert crc16_value(sample) == _bitwise_crc16(sample)


def test_crc16_deterministic():
    data = "00020101021226170ID.CO.EXAMPLE.WWW6304"
    assert crc16(data) == crc16(data)


def test_crc16_single_character_change():
    """Changing any single character changes the checksum."""
    rng = random.Random(99)
    base = "00020101021152040000530336054055000058" + "02ID6304"
    reference = crc16(base)
    for index in range(len(base)):
        replacement = rng.choice([c for c in string.ascii_letters + string.digits if c != base[index]])
        mutated = base[:index] + replacement + base[index + 1 :]
        assert crc16(mutated) != reference, f"collision at index {index}"


def test_crc16_single_bit_flips():
    base = "0002010102126304"
    reference = crc16_value(base)
    for index, ch in enumerate(base):
        for bit in range(7):
            flipped = chr(ord(ch) ^ (1 << bit))
            mutated = base[:index] + flipped + base[index + 1 :]
            assert crc16_value(mutated) != reference
