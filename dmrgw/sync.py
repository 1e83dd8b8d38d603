"""Insertion of DMR sync patterns into 33-byte frames."""

from .defines import (
    BS_SOURCED_AUDIO_SYNC,
    BS_SOURCED_DATA_SYNC,
    MS_SOURCED_AUDIO_SYNC,
    MS_SOURCED_DATA_SYNC,
    SYNC_MASK,
)

_SYNC_OFFSET = 13


def _add_sync(frame: bytes, pattern: bytes) -> bytes:
    end = _SYNC_OFFSET + len(pattern)
    if len(frame) < end:
        raise ValueError(f"frame is {len(frame)} bytes, at least {end} needed")
    out = bytearray(frame)
    out[_SYNC_OFFSET:end] = bytes(
        (b & ~m & 0xFF) | p
        for b, m, p in zip(frame[_SYNC_OFFSET:end], SYNC_MASK, pattern)
    )
    return bytes(out)


def add_data_sync(frame: bytes, duplex: bool) -> bytes:
    """Return a copy of the frame carrying the BS (duplex) or MS data sync."""
    return _add_sync(frame, BS_SOURCED_DATA_SYNC if duplex else MS_SOURCED_DATA_SYNC)


def add_audio_sync(frame: bytes, duplex: bool) -> bytes:
    """Return a copy of the frame carrying the BS (duplex) or MS audio sync."""
    return _add_sync(frame, BS_SOURCED_AUDIO_SYNC if duplex else MS_SOURCED_AUDIO_SYNC)