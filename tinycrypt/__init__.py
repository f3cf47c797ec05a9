"""Small pure-Python Base64, CRC-16, RC4, AES, MD5, big integer and RSA routines."""

__version__ = "0.1.0"
__all__ = [
    "aes",
    "base64",
    "bigint",
    "crc",
    "lenient_base64",
    "md5",
    "rc4",
    "rsa",
    "simple_rsa",
]