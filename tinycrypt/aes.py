"""AES-128/192/256 block cipher with ECB and CBC helpers.

The text-level helpers pad the plaintext (PKCS#7 or zeros), encrypt it and
return the ciphertext as Base64 text; the matching decrypt helpers take that
text back to plaintext bytes. The key size is chosen from the key length.
"""

from . import lenient_base64

BLOCK_SIZE = 16
KEY_SIZES = (16, 24, 32)

_SBOX = bytes.fromhex(
    "637c777bf26b6fc53001672bfed7ab76"
    "ca82c97dfa5947f0add4a2af9ca472c0"
    "b7fd9326363ff7cc34a5e5f171d83115"
    "04c723c31896059a071280e2eb27b275"
    "09832c1a1b6e5aa0523bd6b329e32f84"
    "53d100ed20fcb15b6acbbe394a4c58cf"
    "d0efaafb434d338545f9027f503c9fa8"
    "51a3408f929d38f5bcb6da2110fff3d2"
    "cd0c13ec5f974417c4a77e3d645d1973"
    "60814fdc222a908846eeb814de5e0bdb"
    "e0323a0a4906245cc2d3ac629195e479"
    "e7c8376d8dd54ea96c56f4ea657aae08"
    "ba78252e1ca6b4c6e8dd741f4bbd8b8a"
    "703eb5664803f60e613557b986c11d9e"
    "e1f8981169d98e949b1e87e9ce5528df"
    "8ca1890dbfe6426841992d0fb054bb16"
)

_INV_SBOX = bytes(sorted(range(256), key=lambda index: _SBOX[index]))

_RCON = bytes.fromhex("8d01020408102040801b366cd8ab4d")


def _to_bytes(data):
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def _key_bytes(key):
    key = _to_bytes(key)
    if len(key) not in KEY_SIZES:
        raise ValueError(f"AES key must be 16, 24 or 32 bytes long, got {len(key)}")
    return key


def _iv_bytes(iv):
    iv = _to_bytes(iv)
    if len(iv) != BLOCK_SIZE:
        raise ValueError(f"IV must be {BLOCK_SIZE} bytes long, got {len(iv)}")
    return iv


def _blocks(data):
    return (data[start:start + BLOCK_SIZE] for start in range(0, len(data), BLOCK_SIZE))


def _xor(left, right):
    return bytes(a ^ b for a, b in zip(left, right))


def _xtime(value):
    return ((value << 1) ^ (0x1B if value & 0x80 else 0)) & 0xFF


def _multiply(value, factor):
    """Multiply two elements of GF(2^8)."""
    product = 0
    while factor:
        if factor & 1:
            product ^= value
        value = _xtime(value)
        factor >>= 1
    return product


def expand_key(key):
    """Return the expanded round-key schedule for a 16, 24 or 32 byte key."""
    key = _key_bytes(key)
    nk = len(key) // 4
    rounds = nk + 6
    words = [list(key[4 * i:4 * i + 4]) for i in range(nk)]
    for i in range(nk, 4 * (rounds + 1)):
        temp = list(words[i - 1])
        if i % nk == 0:
            temp = [_SBOX[byte] for byte in temp[1:] + temp[:1]]
            temp[0] ^= _RCON[i // nk]
        elif nk > 6 and i % nk == 4:
            temp = [_SBOX[byte] for byte in temp]
        words.append([a ^ b for a, b in zip(words[i - nk], temp)])
    return bytes(byte for word in words for byte in word)


def _round_key(schedule, round_index):
    return schedule[round_index * BLOCK_SIZE:(round_index + 1) * BLOCK_SIZE]


def _shift_rows(state):
    return [state[((col + row) % 4) * 4 + row] for col in range(4) for row in range(4)]


def _inv_shift_rows(state):
    return [state[((col - row) % 4) * 4 + row] for col in range(4) for row in range(4)]


def _mix_columns(state):
    out = []
    for col in range(4):
        column = state[4 * col:4 * col + 4]
        total = column[0] ^ column[1] ^ column[2] ^ column[3]
        out.extend(
            column[row] ^ total ^ _xtime(column[row] ^ column[(row + 1) % 4])
            for row in range(4)
        )
    return out


_INV_MIX = ((0x0E, 0x0B, 0x0D, 0x09),
            (0x09, 0x0E, 0x0B, 0x0D),
            (0x0D, 0x09, 0x0E, 0x0B),
            (0x0B, 0x0D, 0x09, 0x0E))


def _inv_mix_columns(state):
    out = []
    for col in range(4):
        column = state[4 * col:4 * col + 4]
        for factors in _INV_MIX:
            value = 0
            for byte, factor in zip(column, factors):
                value ^= _multiply(byte, factor)
            out.append(value)
    return out


def _cipher(block, schedule):
    rounds = len(schedule) // BLOCK_SIZE - 1
    state = list(_xor(block, _round_key(schedule, 0)))
    for round_index in range(1, rounds):
        state = _mix_columns(_shift_rows([_SBOX[b] for b in state]))
        state = list(_xor(state, _round_key(schedule, round_index)))
    state = _shift_rows([_SBOX[b] for b in state])
    return _xor(state, _round_key(schedule, rounds))


def _inv_cipher(block, schedule):
    rounds = len(schedule) // BLOCK_SIZE - 1
    state = list(_xor(block, _round_key(schedule, rounds)))
    for round_index in range(rounds - 1, 0, -1):
        state = [_INV_SBOX[b] for b in _inv_shift_rows(state)]
        state = _inv_mix_columns(list(_xor(state, _round_key(schedule, round_index))))
    state = [_INV_SBOX[b] for b in _inv_shift_rows(state)]
    return _xor(state, _round_key(schedule, 0))


def _check_block(block):
    block = _to_bytes(block)
    if len(block) != BLOCK_SIZE:
        raise ValueError(f"AES block must be {BLOCK_SIZE} bytes long, got {len(block)}")
    return block


def encrypt_block(block, key):
    """Encrypt one 16-byte block."""
    return _cipher(_check_block(block), expand_key(key))


def decrypt_block(block, key):
    """Decrypt one 16-byte block."""
    return _inv_cipher(_check_block(block), expand_key(key))


def _ecb_encrypt(data, schedule):
    return b"".join(_cipher(block, schedule) for block in _blocks(data))


def _ecb_decrypt(data, schedule):
    return b"".join(_inv_cipher(block, schedule) for block in _blocks(data))


def cbc_encrypt(data, key, iv):
    """CBC-encrypt ``data``; a partial final block is zero-padded first."""
    schedule = expand_key(key)
    previous = _iv_bytes(iv)
    data = _to_bytes(data)
    if len(data) % BLOCK_SIZE:
        data += bytes(BLOCK_SIZE - len(data) % BLOCK_SIZE)
    out = bytearray()
    for block in _blocks(data):
        previous = _cipher(_xor(block, previous), schedule)
        out += previous
    return bytes(out)


def cbc_decrypt(data, key, iv):
    """CBC-decrypt ``data``, whose length must be a multiple of 16."""
    schedule = expand_key(key)
    previous = _iv_bytes(iv)
    data = _to_bytes(data)
    if len(data) % BLOCK_SIZE:
        raise ValueError("CBC ciphertext length must be a multiple of 16")
    out = bytearray()
    for block in _blocks(data):
        out += _xor(_inv_cipher(block, schedule), previous)
        previous = block
    return bytes(out)


def _pkcs7_pad(data):
    pad = BLOCK_SIZE - len(data) % BLOCK_SIZE
    return data + bytes([pad]) * pad


def _zero_pad(data):
    return data + bytes(BLOCK_SIZE - len(data) % BLOCK_SIZE)


def _strip_pkcs7(data):
    """Drop trailing NULs, then the padding named by the last byte if it is sane."""
    data = data.rstrip(b"\0")
    if not data:
        return data
    pad = data[-1]
    if 1 <= pad <= BLOCK_SIZE and pad <= len(data) and 0 not in data[-pad:]:
        return data[:-pad]
    return data


def _cipher_text(text):
    raw = lenient_base64.decode(text)
    usable = len(raw) // BLOCK_SIZE * BLOCK_SIZE
    if usable == 0:
        raise ValueError("ciphertext is shorter than one AES block")
    return raw[:usable]


def ecb_pkcs7_encrypt(text, key):
    """ECB-encrypt ``text`` with PKCS#7 padding; return Base64 text."""
    schedule = expand_key(key)
    return lenient_base64.encode(_ecb_encrypt(_pkcs7_pad(_to_bytes(text)), schedule))


def ecb_pkcs7_decrypt(text, key):
    """Decrypt Base64 text made by :func:`ecb_pkcs7_encrypt`; return bytes."""
    schedule = expand_key(key)
    return _strip_pkcs7(_ecb_decrypt(_cipher_text(text), schedule))


def cbc_pkcs7_encrypt(text, key, iv):
    """CBC-encrypt ``text`` with PKCS#7 padding; return Base64 text."""
    return lenient_base64.encode(cbc_encrypt(_pkcs7_pad(_to_bytes(text)), key, iv))


def cbc_pkcs7_decrypt(text, key, iv):
    """Decrypt Base64 text made by :func:`cbc_pkcs7_encrypt`; return bytes."""
    return _strip_pkcs7(cbc_decrypt(_cipher_text(text), key, iv))


def cbc_zero_encrypt(text, key, iv):
    """CBC-encrypt ``text`` padded with 1 to 16 zero bytes; return Base64 text."""
    return lenient_base64.encode(cbc_encrypt(_zero_pad(_to_bytes(text)), key, iv))


def cbc_zero_decrypt(text, key, iv):
    """Decrypt Base64 text made by :func:`cbc_zero_encrypt`; trailing zeros are dropped."""
    return cbc_decrypt(_cipher_text(text), key, iv).rstrip(b"\0")