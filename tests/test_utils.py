import logging

import pytest

from dmrgw.utils import (
    bits_to_byte_be,
    bits_to_byte_le,
    byte_to_bits_be,
    byte_to_bits_le,
    dump,
    dump_bits,
    hex_lines,
)


@pytest.mark.parametrize("value", range(256))
def test_be_round_trip(value):
    assert bits_to_byte_be(byte_to_bits_be(value)) == value


@pytest.mark.parametrize("value", range(256))
def test_le_round_trip(value):
    assert bits_to_byte_le(byte_to_bits_le(value)) == value


@pytest.mark.parametrize("value", range(256))
def test_be_is_reverse_of_le(value):
    assert byte_to_bits_be(value) == list(reversed(byte_to_bits_le(value)))


def test_top_bit_positions():
    assert byte_to_bits_be(0x80)[0] is True
    assert byte_to_bits_le(0x80)[7] is True
    assert sum(byte_to_bits_be(0x80)) == 1


def test_invalid_inputs():
    with pytest.raises(ValueError):
        byte_to_bits_be(256)
    with pytest.raises(ValueError):
        bits_to_byte_be([True] * 7)
    with pytest.raises(ValueError):
        bits_to_byte_le([False] * 9)


def test_hex_lines_short():
    lines = list(hex_lines(b"AB\x00"))
    assert len(lines) == 1
    assert lines[0].startswith("0000:  41 42 00 ")
    assert lines[0].endswith("*AB.*")


def test_hex_lines_empty():
    assert list(hex_lines(b"")) == []


def test_dump_logs_title_and_lines(caplog):
    caplog.set_level(logging.INFO, logger="dmrgw.utils")
    data = b"hello, world, hello again"
    dump("Title", data)
    messages = [r.getMessage() for r in caplog.records]
    assert messages[0] == "Title"
    assert messages[1:] == list(hex_lines(data))


def test_dump_bits_matches_bytes(caplog):
    caplog.set_level(logging.DEBUG, logger="dmrgw.utils")
    data = b"AB"
    bits = byte_to_bits_be(data[0]) + byte_to_bits_be(data[1])
    dump_bits("Bits", bits, logging.DEBUG)
    messages = [r.getMessage() for r in caplog.records]
    assert messages == ["Bits"] + list(hex_lines(data))
    assert all(r.levelno == logging.DEBUG for r in caplog.records)