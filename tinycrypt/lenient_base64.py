"""Base64 codec whose decoder stops quietly at the first non-Base64 character."""

from . import base64 as _strict

_VALUES = {ord(char): index for index, char in enumerate(_strict.ALPHABET)}


def _to_bytes(data):
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def encode(data):
    """Encode bytes (or UTF-8 text) as padded Base64 text."""
    return _strict.encode(data)


def decode(text):
    """Decode the leading run of Base64 characters in ``text``.

    Decoding ends at '=' or at any character outside the alphabet; what
    follows is ignored and no error is raised.
    """
    values = []
    for char in _to_bytes(text):
        value = _VALUES.get(char)
        if value is None:
            break
        values.append(value)

    bit_count = 6 * len(values)
    byte_count = bit_count // 8
    accumulator = 0
    for value in values:
        accumulator = (accumulator << 6) | value
    return (accumulator >> (bit_count - 8 * byte_count)).to_bytes(byte_count, "big")