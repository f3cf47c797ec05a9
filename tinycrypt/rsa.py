"""Textbook RSA built on :class:`tinycrypt.bigint.BigInt`.

Keys are made from two random primes found by trial division and a
Miller-Rabin test. The public exponent is the largest prime below 100000
that does not divide phi(n). Messages are encrypted one value at a time,
and text one byte at a time.
"""

import functools
from dataclasses import dataclass

from .bigint import ONE, TWO, ZERO, BigInt

SIEVE_LIMIT = 100000
TRIAL_DIVISION_LIMIT = 10000
MILLER_RABIN_WITNESSES = (2, 3, 7, 61, 24251, 24281)


@dataclass(frozen=True)
class RsaKey:
    """An RSA key set: modulus ``n``, exponents ``e`` and ``d``, primes ``p`` and ``q``."""

    n: BigInt
    e: BigInt
    d: BigInt
    p: BigInt
    q: BigInt


@functools.lru_cache(maxsize=None)
def _primes():
    flags = bytearray([1]) * SIEVE_LIMIT
    flags[0:2] = b"\0\0"
    for candidate in range(2, int(SIEVE_LIMIT ** 0.5) + 1):
        if flags[candidate]:
            flags[candidate * candidate::candidate] = bytes(
                len(range(candidate * candidate, SIEVE_LIMIT, candidate))
            )
    return tuple(number for number, is_set in enumerate(flags) if is_set)


def get_prime(index):
    """Return the ``index``-th prime below 100000, or 1 past the end of the table."""
    if index < 0:
        raise ValueError("prime index must not be negative")
    primes = _primes()
    if index >= len(primes):
        return 1
    return primes[index]


def pow_mod(base, exponent, modulus):
    """Return ``base ** exponent % modulus`` by square-and-multiply.

    A non-positive exponent gives 1.
    """
    base = BigInt(base)
    exponent = BigInt(exponent)
    modulus = BigInt(modulus)
    result = BigInt(1)
    while exponent.compare(ZERO) == 1:
        if exponent.is_odd():
            result = (result * base) % modulus
        base = (base * base) % modulus
        exponent = exponent >> 1
    return result


def miller_rabin(n, n_minus_1, r, m, witness):
    """Run one Miller-Rabin round for ``n = 2**r * m + 1`` with ``witness``.

    Returns False when ``witness`` proves ``n`` composite.
    """
    n = BigInt(n)
    n_minus_1 = BigInt(n_minus_1)
    if n.compare(ONE) == 0:
        return False
    if n.compare(TWO) == 0:
        return True
    if not n.is_odd():
        return False

    d = pow_mod(witness, m, n)
    is_one = d.abs_compare(ONE)
    is_minus_one = d.abs_compare(n_minus_1)
    if is_one == 0:
        return True

    for _ in range(1, r):
        if is_one == 0 or is_minus_one == 0:
            break
        d = (d * d) % n
        is_one = d.abs_compare(ONE)
        is_minus_one = d.abs_compare(n_minus_1)

    return is_minus_one == 0 or is_one == 0


def is_prime(value):
    """Test ``value`` for primality.

    Values of at most two 12-bit limbs are checked by trial division alone;
    larger ones by trial division up to 10000 and then Miller-Rabin.
    """
    value = BigInt(value)
    primes = _primes()

    if value.num_digits() <= 2:
        small = abs(int(value))
        for prime in primes:
            if prime * prime > small:
                break
            if small % prime == 0:
                return False
        return True

    for prime in primes:
        if prime >= TRIAL_DIVISION_LIMIT:
            break
        if value % prime == 0:
            return False

    n_minus_1 = value.abs_minus(ONE)
    r = n_minus_1.count_suffix_zeros()
    m = n_minus_1 >> r
    return all(
        miller_rabin(value, n_minus_1, r, m, BigInt(witness))
        for witness in MILLER_RABIN_WITNESSES
    )


def random_prime(bit_size=512):
    """Return the first prime at or after a random odd ``bit_size``-bit number."""
    candidate = BigInt.random_odd(bit_size)
    while not is_prime(candidate):
        candidate = candidate + 2
    return candidate


def next_prime(start):
    """Return the first prime among ``start + 2``, ``start + 4``, ..."""
    candidate = BigInt(start) + 2
    while not is_prime(candidate):
        candidate = candidate + 2
    return candidate


def exgcd(a, b):
    """Return ``(g, x, y)`` with ``a * x + b * y == g == gcd(a, b)``."""
    if b == 0:
        return a, 1, 0
    gcd, x, y = exgcd(b, a % b)
    return gcd, y, x - (a // b) * y


def generate(bit_size=768):
    """Generate an :class:`RsaKey` whose modulus has about ``bit_size`` bits."""
    half = (bit_size + 1) >> 1
    p = random_prime(half)
    q = next_prime(p)
    n = p * q
    phi = (p - 1) * (q - 1)

    for prime in reversed(_primes()):
        phi_mod_e = phi % prime
        if phi_mod_e != 0:
            e_small = prime
            break
    else:
        raise ValueError("no public exponent found for phi(n)")

    gcd, x_small, y_small = exgcd(e_small, phi_mod_e)
    if gcd != 1:
        raise ValueError("public exponent is not coprime with phi(n)")

    k = phi // BigInt(e_small)
    d = BigInt(x_small) - k * y_small
    if d.compare(ZERO) > 0:
        d = d % phi
    else:
        d = phi - (d % phi)

    return RsaKey(n=n, e=BigInt(e_small), d=d, p=p, q=q)


def encrypt(message, d, n):
    """Encrypt one value: ``message ** d % n``."""
    return pow_mod(message, d, n)


def decrypt(cipher, e, n):
    """Decrypt one value: ``cipher ** e % n``."""
    return pow_mod(cipher, e, n)


def encrypt_text(text, d, n):
    """Encrypt each byte of ``text`` (bytes, or str as UTF-8) separately."""
    if isinstance(text, str):
        text = text.encode("utf-8")
    return [encrypt(BigInt(byte), d, n) for byte in bytes(text)]


def decrypt_text(blocks, e, n):
    """Decrypt blocks made by :func:`encrypt_text` back into bytes.

    Raises ValueError when a block decrypts to more than one 12-bit limb.
    """
    out = bytearray()
    for block in blocks:
        value = decrypt(block, e, n)
        if value.num_digits() > 1:
            raise ValueError("block does not decrypt to a single character")
        out.append(max(value.get_digit(0), 0) & 0xFF)
    return bytes(out)