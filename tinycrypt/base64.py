"""Standard Base64 encoding with a strict length check on decode."""

import binascii

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"

_INVALID = 255


def _to_bytes(data):
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def _lookup(char):
    """Map one Base64 character code to its 6-bit value, or 255 if foreign."""
    if 0x41 <= char <= 0x5A:  # A-Z
        return char - 0x41
    if 0x61 <= char <= 0x7A:  # a-z
        return char - 71
    if 0x30 <= char <= 0x39:  # 0-9
        return char + 4
    if char == 0x2B:  # +
        return 62
    if char == 0x2F:  # /
        return 63
    return _INVALID


def _quartet_to_triplet(a, b, c, d):
    return bytes(
        (
            ((a << 2) + ((b & 0x30) >> 4)) & 0xFF,
            (((b & 0x0F) << 4) + ((c & 0x3C) >> 2)) & 0xFF,
            (((c & 0x03) << 6) + d) & 0xFF,
        )
    )


def encoded_length(length):
    """Return the length of the padded Base64 text for ``length`` input bytes."""
    if length < 0:
        raise ValueError("length must not be negative")
    return (length + 2) // 3 * 4


def decoded_length(text):
    """Return the number of bytes that ``text`` decodes to."""
    raw = _to_bytes(text)
    padding = len(raw) - len(raw.rstrip(b"="))
    size = 6 * len(raw) // 8 - padding
    if size < 0:
        raise ValueError("too much padding in Base64 text")
    return size


def strip_padding(text):
    """Remove trailing '=' characters."""
    if isinstance(text, (bytes, bytearray)):
        return bytes(text).rstrip(b"=")
    return text.rstrip("=")


def encode(data):
    """Encode bytes (or UTF-8 text) as padded Base64 text."""
    return binascii.b2a_base64(_to_bytes(data), newline=False).decode("ascii")


def decode(text):
    """Decode Base64 text; raise ValueError if the result has the wrong length.

    Decoding stops at the first '='. Characters outside the alphabet are
    not rejected on their own, but a malformed text whose output length
    disagrees with :func:`decoded_length` is.
    """
    raw = _to_bytes(text)
    expected = decoded_length(raw)
    body = raw.split(b"=", 1)[0]
    values = [_lookup(char) for char in body]

    out = bytearray()
    for start in range(0, len(values), 4):
        chunk = values[start:start + 4]
        count = 3 if len(chunk) == 4 else len(chunk) - 1
        padded = chunk + [_INVALID] * (4 - len(chunk))
        out += _quartet_to_triplet(*padded)[:max(count, 0)]

    if len(out) != expected:
        raise ValueError(
            f"malformed Base64 text: decoded {len(out)} bytes, expected {expected}"
        )
    return bytes(out)