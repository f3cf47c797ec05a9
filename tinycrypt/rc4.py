"""RC4 stream cipher; the same call encrypts and decrypts."""


def _to_bytes(data):
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def _keystream(key):
    state = list(range(256))
    j = 0
    for i in range(256):
        j = (j + state[i] + key[i % len(key)]) % 256
        state[i], state[j] = state[j], state[i]

    i = j = 0
    while True:
        i = (i + 1) % 256
        j = (j + state[i]) % 256
        state[i], state[j] = state[j], state[i]
        yield state[(state[i] + state[j]) % 256]


def crypt(data, key):
    """XOR ``data`` with the RC4 keystream of ``key`` and return the bytes."""
    key = _to_bytes(key)
    if not key:
        raise ValueError("RC4 key must not be empty")
    return bytes(byte ^ k for byte, k in zip(_to_bytes(data), _keystream(key)))