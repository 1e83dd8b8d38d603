"""SHA-256 message digest with block-level and incremental interfaces."""

import struct

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF
_BLOCK = 64

_INITIAL_STATE = (
    0x6A09E667, 0xBB67AE85, 0x3C6EF372, 0xA54FF53A,
    0x510E527F, 0x9B05688C, 0x1F83D9AB, 0x5BE0CD19,
)

_ROUND_CONSTANTS = (
    0x428A2F98, 0x71374491, 0xB5C0FBCF, 0xE9B5DBA5,
    0x3956C25B, 0x59F111F1, 0x923F82A4, 0xAB1C5ED5,
    0xD807AA98, 0x12835B01, 0x243185BE, 0x550C7DC3,
    0x72BE5D74, 0x80DEB1FE, 0x9BDC06A7, 0xC19BF174,
    0xE49B69C1, 0xEFBE4786, 0x0FC19DC6, 0x240CA1CC,
    0x2DE92C6F, 0x4A7484AA, 0x5CB0A9DC, 0x76F988DA,
    0x983E5152, 0xA831C66D, 0xB00327C8, 0xBF597FC7,
    0xC6E00BF3, 0xD5A79147, 0x06CA6351, 0x14292967,
    0x27B70A85, 0x2E1B2138, 0x4D2C6DFC, 0x53380D13,
    0x650A7354, 0x766A0ABB, 0x81C2C92E, 0x92722C85,
    0xA2BFE8A1, 0xA81A664B, 0xC24B8B70, 0xC76C51A3,
    0xD192E819, 0xD6990624, 0xF40E3585, 0x106AA070,
    0x19A4C116, 0x1E376C08, 0x2748774C, 0x34B0BCB5,
    0x391C0CB3, 0x4ED8AA4A, 0x5B9CCA4F, 0x682E6FF3,
    0x748F82EE, 0x78A5636F, 0x84C87814, 0x8CC70208,
    0x90BEFFFA, 0xA4506CEB, 0xBEF9A3F7, 0xC67178F2,
)

DIGEST_SIZE = 32


def _rotr(x: int, n: int) -> int:
    return ((x >> n) | (x << (32 - n))) & _MASK32


class SHA256:
    """Incremental SHA-256 hasher."""

    def __init__(self, data: bytes = b"") -> None:
        self.reset()
        if data:
            self.update(data)

    def reset(self) -> None:
        """Return to the initial state, discarding any buffered input."""
        self._state = list(_INITIAL_STATE)
        self._total = 0
        self._buffer = b""

    def _compress(self, chunk: bytes) -> None:
        w = list(struct.unpack(">16I", chunk))
        for i in range(16, 64):
            s0 = _rotr(w[i - 15], 7) ^ _rotr(w[i - 15], 18) ^ (w[i - 15] >> 3)
            s1 = _rotr(w[i - 2], 17) ^ _rotr(w[i - 2], 19) ^ (w[i - 2] >> 10)
            w.append((w[i - 16] + s0 + w[i - 7] + s1) & _MASK32)

        a, b, c, d, e, f, g, h = self._state
        for k, word in zip(_ROUND_CONSTANTS, w):
            big_s1 = _rotr(e, 6) ^ _rotr(e, 11) ^ _rotr(e, 25)
            choose = g ^ (e & (f ^ g))
            t1 = (h + big_s1 + choose + k + word) & _MASK32
            big_s0 = _rotr(a, 2) ^ _rotr(a, 13) ^ _rotr(a, 22)
            majority = (a & b) | (c & (a | b))
            t2 = (big_s0 + majority) & _MASK32
            h, g, f, e = g, f, e, (d + t1) & _MASK32
            d, c, b, a = c, b, a, (t1 + t2) & _MASK32

        self._state = [
            (old + new) & _MASK32
            for old, new in zip(self._state, (a, b, c, d, e, f, g, h))
        ]

    def process_block(self, block: bytes) -> None:
        """Hash whole 64-byte blocks; the length must be a multiple of 64."""
        if len(block) % _BLOCK != 0:
            raise ValueError(f"block length {len(block)} is not a multiple of {_BLOCK}")
        self._total = (self._total + len(block)) & _MASK64
        for offset in range(0, len(block), _BLOCK):
            self._compress(block[offset : offset + _BLOCK])

    def update(self, data: bytes) -> None:
        """Feed data of any length."""
        buffered = self._buffer + bytes(data)
        whole = len(buffered) - len(buffered) % _BLOCK
        if whole:
            self.process_block(buffered[:whole])
        self._buffer = buffered[whole:]

    def read(self) -> bytes:
        """The current state as a 32-byte digest, without padding."""
        return struct.pack(">8I", *self._state)

    def finish(self) -> bytes:
        """Pad the remaining input and return the final digest."""
        remaining = self._buffer
        bit_length = ((self._total + len(remaining)) * 8) & _MASK64
        padding_zeros = (55 - len(remaining)) % _BLOCK
        padded = remaining + b"\x80" + b"\x00" * padding_zeros + struct.pack(">Q", bit_length)
        self._buffer = b""
        self.process_block(padded)
        return self.read()


def sha256(data: bytes) -> bytes:
    """The SHA-256 digest of the data."""
    return SHA256(data).finish()