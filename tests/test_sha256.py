import hashlib

import pytest

from dmrgw.sha256 import SHA256, sha256


@pytest.mark.parametrize("length", [0, 1, 3, 55, 56, 63, 64, 65, 119, 120, 128, 1000])
def test_matches_reference(length):
    data = bytes(i % 251 for i in range(length))
    assert sha256(data) == hashlib.sha256(data).digest()


def test_known_vector_abc():
    assert sha256(b"abc").hex() == (
        "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
    )


def test_empty_digest():
    assert sha256(b"").hex() == (
        "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    )


@pytest.mark.parametrize("chunk", [1, 7, 63, 64, 65, 200])
def test_incremental_equals_one_shot(chunk):
    data = bytes(range(256)) * 3
    hasher = SHA256()
    for start in range(0, len(data), chunk):
        hasher.update(data[start : start + chunk])
    assert hasher.finish() == sha256(data)


def test_constructor_data_is_hashed():
    assert SHA256(b"hello world").finish() == hashlib.sha256(b"hello world").digest()


def test_read_of_fresh_hasher_is_initial_state():
    assert SHA256().read().hex().startswith("6a09e667bb67ae85")
    assert len(SHA256().read()) == 32


def test_reset_discards_input():
    hasher = SHA256(b"some input")
    hasher.reset()
    assert hasher.read() == SHA256().read()
    assert hasher.finish() == sha256(b"")


def test_process_block_rejects_partial_block():
    with pytest.raises(ValueError):
        SHA256().process_block(b"\x00" * 63)


def test_process_block_then_finish_matches_reference():
    data = b"\x5a" * 128
    hasher = SHA256()
    hasher.process_block(data)
    assert hasher.finish() == hashlib.sha256(data).digest()


def test_read_changes_after_block():
    hasher = SHA256()
    before = hasher.read()
    hasher.process_block(b"\x00" * 64)
    assert hasher.read() != before
    assert len(hasher.read()) == 32