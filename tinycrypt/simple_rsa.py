"""Toy RSA over pairs of characters with three-digit primes.

Each pair of characters ``(c1, c2)`` becomes the number ``c1 * 1000 + c2``,
which is raised to the key exponent modulo ``n`` and written as six decimal
digits. Odd-length text is padded with a NUL character.
"""

import random

PRIMES = (
    401, 409, 419, 421, 431, 433, 439,
    443, 449, 457, 461, 463, 467, 479, 487, 491, 499,
    503, 509, 521, 523, 541, 547, 557, 563, 569, 571,
    577, 587, 593, 599, 601, 607, 613, 617, 619, 631,
    641, 643, 647, 653, 659, 661, 673, 677, 683, 691,
    701, 709, 719, 727, 733, 739, 743, 751, 757, 761,
    769, 773, 787, 797, 809, 811, 821, 823, 827, 829,
    839, 853, 857, 859, 863, 877, 881, 883, 887, 907,
    911, 919, 929, 937, 941, 947, 953, 967, 971, 977,
    983, 991, 997,
)

PUBLIC_EXPONENT = 65537
BLOCK_DIGITS = 6


def pow_mod(base, exponent, modulus):
    """Return ``base ** exponent % modulus``; an exponent of 0 gives 1."""
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    if exponent == 0:
        return 1
    return pow(base, exponent, modulus)


def _trunc_div(a, b):
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def extend_gcd(a, b):
    """Return ``(d, x, y)`` with ``a * x + b * y == d == gcd(a, b)``."""
    if a == 0 and b == 0:
        raise ValueError("gcd(0, 0) is undefined")
    if b == 0:
        return a, 1, 0
    d, y, x = extend_gcd(b, a - _trunc_div(a, b) * b)
    y -= _trunc_div(a, b) * x
    return d, x, y


def mod_reverse(a, n):
    """Return x in [0, n) with ``a * x % n == 1``; raise ValueError if none exists."""
    d, x, _ = extend_gcd(a, n)
    if d != 1:
        raise ValueError(f"{a} has no inverse modulo {n}")
    return x % n


class SimpleRsa:
    """Pairwise-character RSA; ``a`` encrypts and ``b`` decrypts."""

    def __init__(self, n, key):
        self.n = n
        self.a = key
        self.b = key
        self.p = None
        self.q = None

    def encrypt(self, plaintext):
        """Encrypt ``plaintext`` into a string of six-digit blocks."""
        codes = [ord(char) for char in plaintext]
        if any(code > 0xFF for code in codes):
            raise ValueError("plaintext must contain only 8-bit characters")
        if len(codes) % 2:
            codes.append(0)
        blocks = []
        for first, second in zip(codes[0::2], codes[1::2]):
            value = pow_mod(first * 1000 + second, self.a, self.n)
            if value >= 10 ** BLOCK_DIGITS:
                raise ValueError("modulus is too large for six-digit blocks")
            blocks.append(str(value).zfill(BLOCK_DIGITS))
        return "".join(blocks)

    def decrypt(self, ciphertext):
        """Decrypt six-digit blocks back into text, padding NUL included."""
        chars = []
        for start in range(0, len(ciphertext), BLOCK_DIGITS):
            chunk = ciphertext[start:start + BLOCK_DIGITS]
            if not (chunk.isascii() and chunk.isdigit()):
                raise ValueError(f"invalid ciphertext block {chunk!r}")
            value = pow_mod(int(chunk), self.b, self.n)
            chars.append(chr(value // 1000))
            chars.append(chr(value % 1000))
        return "".join(chars)

    def generate_key(self):
        """Pick two primes from :data:`PRIMES` and set ``n``, ``a`` and ``b``."""
        self.a = PUBLIC_EXPONENT
        self.p = random.choice(PRIMES)
        self.q = random.choice(PRIMES)
        self.n = self.p * self.q
        self.b = mod_reverse(self.a, (self.p - 1) * (self.q - 1))