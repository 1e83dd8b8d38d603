"""Hex dumps and bit/byte conversions."""

import logging
from collections.abc import Iterable, Iterator, Sequence

logger = logging.getLogger(__name__)

_LINE_BYTES = 16


def _printable(value: int) -> str:
    return chr(value) if 0x20 <= value <= 0x7E else "."


def hex_lines(data: bytes) -> Iterator[str]:
    """Yield hex dump lines of 16 bytes each, with offset and printable text."""
    for offset in range(0, len(data), _LINE_BYTES):
        chunk = data[offset : offset + _LINE_BYTES]
        hex_part = "".join(f"{b:02X} " for b in chunk)
        hex_part += "   " * (_LINE_BYTES - len(chunk))
        text = "".join(_printable(b) for b in chunk)
        yield f"{offset:04X}:  {hex_part}   *{text}*"


def dump(title: str, data: bytes, level: int = logging.INFO) -> None:
    """Log a titled hex dump of the data."""
    logger.log(level, "%s", title)
    for line in hex_lines(data):
        logger.log(level, "%s", line)


def dump_bits(title: str, bits: Iterable[bool], level: int = logging.INFO) -> None:
    """Pack bits MSB first into bytes and log their hex dump."""
    bits = list(bits)
    packed = bytearray()
    for start in range(0, len(bits), 8):
        chunk = bits[start : start + 8]
        chunk += [False] * (8 - len(chunk))
        packed.append(bits_to_byte_be(chunk))
    dump(title, bytes(packed), level)


def _check_byte(value: int) -> None:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{value} is not a byte value")


def _check_bits(bits: Sequence[bool]) -> None:
    if len(bits) != 8:
        raise ValueError(f"expected 8 bits, got {len(bits)}")


def byte_to_bits_be(value: int) -> list[bool]:
    """Bits of a byte, most significant first."""
    _check_byte(value)
    return [bool(value & (0x80 >> i)) for i in range(8)]


def byte_to_bits_le(value: int) -> list[bool]:
    """Bits of a byte, least significant first."""
    _check_byte(value)
    return [bool(value & (0x01 << i)) for i in range(8)]


def bits_to_byte_be(bits: Sequence[bool]) -> int:
    """Byte from eight bits, most significant first."""
    _check_bits(bits)
    return sum(0x80 >> i for i, bit in enumerate(bits) if bit)


def bits_to_byte_le(bits: Sequence[bool]) -> int:
    """Byte from eight bits, least significant first."""
    _check_bits(bits)
    return sum(0x01 << i for i, bit in enumerate(bits) if bit)