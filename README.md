# tinycrypt

Small, dependency-free Python implementations of classic encoding, checksum,
hash and cipher routines:

- `tinycrypt.base64`: Base64 with length helpers (`encode`, `decode`,
  `encoded_length`, `decoded_length`, `strip_padding`). `decode` stops at the
  first `=` and raises `ValueError` when the decoded length does not match
  `decoded_length`.
- `tinycrypt.lenient_base64`: Base64 (`encode`, `decode`) whose decoder stops
  quietly at the first `=` or character outside the alphabet.
- `tinycrypt.crc`: a configurable 16-bit CRC (`calculate_crc16`) and the preset
  `calc_crc` (init 0xFFFF, polynomial 0x8005, reflected input and output).
- `tinycrypt.rc4`: the RC4 stream cipher (`crypt`; the same call encrypts and
  decrypts; an empty key raises `ValueError`).
- `tinycrypt.aes`: AES-128/192/256 block operations (`expand_key`,
  `encrypt_block`, `decrypt_block`), CBC mode (`cbc_encrypt`, `cbc_decrypt`),
  and Base64-wrapped helpers with PKCS#7 or zero padding
  (`ecb_pkcs7_encrypt`/`ecb_pkcs7_decrypt`, `cbc_pkcs7_encrypt`/`cbc_pkcs7_decrypt`,
  `cbc_zero_encrypt`/`cbc_zero_decrypt`). The key size follows the key length;
  the decrypt helpers return bytes.
- `tinycrypt.md5`: an incremental `MD5` hasher (`update`, `copy`, `digest`,
  `hexdigest`) and `md5_hex`.
- `tinycrypt.bigint`: a signed arbitrary-precision `BigInt` that reads and
  writes binary and hexadecimal strings and supports `+ - * // % << >>` and
  comparisons.
- `tinycrypt.rsa`: textbook RSA built on `BigInt` (`is_prime`, `miller_rabin`,
  `random_prime`, `next_prime`, `generate` returning an `RsaKey`, and
  `encrypt`/`decrypt`, `encrypt_text`/`decrypt_text`).
- `tinycrypt.simple_rsa`: a toy RSA over pairs of characters and three-digit
  primes (`SimpleRsa`, `pow_mod`, `extend_gcd`, `mod_reverse`).

These routines are meant for interoperability and study. They are not
constant-time and should not protect real secrets.

## Installation

```
pip install .
```

## Examples

```python
from tinycrypt import aes, base64, crc, md5, rc4

base64.encode(b"realName")            # 'cmVhbE5hbWU='
base64.decode("cmVhbE5hbWU=")         # b'realName'

crc.calc_crc(b"123456789")            # 0x4B37

md5.md5_hex(b"abc")                   # '900150983cd24fb0d6963f7d28e17f72'

aes_key = bytes(range(16))            # 16 bytes selects AES-128
iv = bytes(16)
ciphertext_b64 = aes.cbc_pkcs7_encrypt("hello", aes_key, iv)
aes.cbc_pkcs7_decrypt(ciphertext_b64, aes_key, iv)  # b'hello'

ciphertext = rc4.crypt(b"attack at dawn", b"secret")
rc4.crypt(ciphertext, b"secret")      # b'attack at dawn'
```

Big integers and RSA:

```python
from tinycrypt.bigint import BigInt
from tinycrypt import rsa

x = BigInt.from_string("FF", 16)
(x * x).to_string(16)                 # 'FE01'

keys = rsa.generate(64)
blocks = rsa.encrypt_text("hi", keys.d, keys.n)
rsa.decrypt_text(blocks, keys.e, keys.n)  # b'hi'
```

## What the package does not do

It is a library only: there is no command-line tool, and nothing reads or
writes key files. RSA keys exist only as `RsaKey` objects in memory.

## Running the tests

```
pip install .[test]
pytest
```