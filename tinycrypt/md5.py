"""MD5 message digest with incremental updates."""

import struct

BLOCK_SIZE = 64
DIGEST_SIZE = 16

_MASK = 0xFFFFFFFF

_INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)

_CONSTANTS = (
    0xD76AA478, 0xE8C7B756, 0x242070DB, 0xC1BDCEEE,
    0xF57C0FAF, 0x4787C62A, 0xA8304613, 0xFD469501,
    0x698098D8, 0x8B44F7AF, 0xFFFF5BB1, 0x895CD7BE,
    0x6B901122, 0xFD987193, 0xA679438E, 0x49B40821,
    0xF61E2562, 0xC040B340, 0x265E5A51, 0xE9B6C7AA,
    0xD62F105D, 0x02441453, 0xD8A1E681, 0xE7D3FBC8,
    0x21E1CDE6, 0xC33707D6, 0xF4D50D87, 0x455A14ED,
    0xA9E3E905, 0xFCEFA3F8, 0x676F02D9, 0x8D2A4C8A,
    0xFFFA3942, 0x8771F681, 0x6D9D6122, 0xFDE5380C,
    0xA4BEEA44, 0x4BDECFA9, 0xF6BB4B60, 0xBEBFBC70,
    0x289B7EC6, 0xEAA127FA, 0xD4EF3085, 0x04881D05,
    0xD9D4D039, 0xE6DB99E5, 0x1FA27CF8, 0xC4AC5665,
    0xF4292244, 0x432AFF97, 0xAB9423A7, 0xFC93A039,
    0x655B59C3, 0x8F0CCC92, 0xFFEFF47D, 0x85845DD1,
    0x6FA87E4F, 0xFE2CE6E0, 0xA3014314, 0x4E0811A1,
    0xF7537E82, 0xBD3AF235, 0x2AD7D2BB, 0xEB86D391,
)

_SHIFTS = ((7, 12, 17, 22), (5, 9, 14, 20), (4, 11, 16, 23), (6, 10, 15, 21))


def _to_bytes(data):
    if isinstance(data, str):
        return data.encode("utf-8")
    if isinstance(data, int):
        raise TypeError("MD5 input must be bytes-like or str, not int")
    return bytes(data)


def _rotate_left(value, count):
    value &= _MASK
    return ((value << count) | (value >> (32 - count))) & _MASK


def _compress(state, block):
    """Run the 64 MD5 steps over one 64-byte block and return the new state."""
    words = struct.unpack("<16I", block)
    a, b, c, d = state
    for step in range(64):
        round_index = step // 16
        if round_index == 0:
            mixed = (b & c) | (~b & d)
            index = step
        elif round_index == 1:
            mixed = (d & b) | (~d & c)
            index = (5 * step + 1) % 16
        elif round_index == 2:
            mixed = b ^ c ^ d
            index = (3 * step + 5) % 16
        else:
            mixed = c ^ (b | (~d & _MASK))
            index = (7 * step) % 16
        total = (a + (mixed & _MASK) + _CONSTANTS[step] + words[index]) & _MASK
        a, d, c = d, c, b
        b = (b + _rotate_left(total, _SHIFTS[round_index][step % 4])) & _MASK
    return tuple((old + new) & _MASK for old, new in zip(state, (a, b, c, d)))


class MD5:
    """Incremental MD5 hash; feed data with :meth:`update`, read with :meth:`digest`."""

    digest_size = DIGEST_SIZE
    block_size = BLOCK_SIZE

    def __init__(self, data=b""):
        self._state = _INITIAL_STATE
        self._buffer = bytearray()
        self._length = 0
        self.update(data)

    def update(self, data):
        """Add ``data`` (bytes, or str as UTF-8) to the message."""
        data = _to_bytes(data)
        self._length += len(data)
        self._buffer += data
        full = len(self._buffer) // BLOCK_SIZE * BLOCK_SIZE
        for start in range(0, full, BLOCK_SIZE):
            self._state = _compress(self._state, bytes(self._buffer[start:start + BLOCK_SIZE]))
        del self._buffer[:full]
        return self

    def copy(self):
        """Return an independent hash object with the same state."""
        other = MD5()
        other._state = self._state
        other._buffer = bytearray(self._buffer)
        other._length = self._length
        return other

    def digest(self):
        """Return the 16-byte digest of everything fed so far."""
        bit_length = (self._length * 8) & 0xFFFFFFFFFFFFFFFF
        tail = bytes(self._buffer) + b"\x80"
        tail += bytes((BLOCK_SIZE - 8 - len(tail)) % BLOCK_SIZE)
        tail += struct.pack("<Q", bit_length)
        state = self._state
        for start in range(0, len(tail), BLOCK_SIZE):
            state = _compress(state, tail[start:start + BLOCK_SIZE])
        return struct.pack("<4I", *state)

    def hexdigest(self):
        """Return the digest as 32 lower-case hexadecimal characters."""
        return self.digest().hex()


def md5_hex(data):
    """Return the hexadecimal MD5 digest of ``data``."""
    return MD5(data).hexdigest()