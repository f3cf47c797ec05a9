"""Signed arbitrary-precision integers kept as 12-bit limbs.

Values are held as a sign and a magnitude; the limb view (least significant
first, 12 bits each) is what :meth:`BigInt.num_digits` and
:meth:`BigInt.get_digit` expose. Text conversion supports bases 2 and 16 only.
"""

import functools
import secrets

LIMB_BITS = 12
LIMB_BASE = 1 << LIMB_BITS
LIMB_MASK = LIMB_BASE - 1

_SUPPORTED_BASES = {2: "01", 16: "0123456789ABCDEFabcdef"}


def _check_base(base):
    if base not in _SUPPORTED_BASES:
        raise ValueError(f"only bases 2 and 16 are supported, got {base}")


@functools.total_ordering
class BigInt:
    """A signed integer with sign-and-magnitude semantics."""

    __slots__ = ("_negative", "_magnitude")

    def __init__(self, value=0):
        if isinstance(value, BigInt):
            self._negative = value._negative
            self._magnitude = value._magnitude
        elif isinstance(value, int):
            self._negative = value < 0
            self._magnitude = abs(value)
        else:
            raise TypeError(f"cannot build a BigInt from {type(value).__name__}")

    @classmethod
    def _make(cls, negative, magnitude):
        result = cls.__new__(cls)
        result._magnitude = magnitude
        result._negative = bool(negative) and magnitude != 0
        return result

    @staticmethod
    def _coerce(value):
        if isinstance(value, BigInt):
            return value
        if isinstance(value, int):
            return BigInt(value)
        raise TypeError(f"unsupported operand type: {type(value).__name__}")

    def _limbs(self):
        if self._magnitude == 0:
            return [0]
        limbs = []
        magnitude = self._magnitude
        while magnitude:
            limbs.append(magnitude & LIMB_MASK)
            magnitude >>= LIMB_BITS
        return limbs

    # construction and conversion

    @classmethod
    def from_string(cls, text, base=2):
        """Parse binary or hexadecimal text with an optional leading sign."""
        _check_base(base)
        if not text:
            raise ValueError("empty number text")
        negative = text[0] == "-"
        body = text[1:] if text[0] in "+-" else text
        if not body:
            raise ValueError("number text has a sign but no digits")
        allowed = _SUPPORTED_BASES[base]
        bad = [char for char in body if char not in allowed]
        if bad:
            raise ValueError(f"invalid base-{base} digit {bad[0]!r}")
        return cls._make(negative, int(body, base))

    def to_string(self, base=2):
        """Render as binary or upper-case hexadecimal, with '-' when negative."""
        _check_base(base)
        digits = format(self._magnitude, "b" if base == 2 else "X")
        return "-" + digits if self._negative else digits

    @classmethod
    def random(cls, bit_size):
        """Return a random positive value whose highest bit is bit ``bit_size - 1``."""
        if bit_size < 0:
            raise ValueError("bit size must not be negative")
        if bit_size == 0:
            return cls(0)
        return cls._make(False, secrets.randbits(bit_size) | (1 << (bit_size - 1)))

    @classmethod
    def random_odd(cls, bit_size):
        """Like :meth:`random`, with the lowest bit set as well."""
        value = cls.random(bit_size)
        if bit_size == 0:
            return value
        return cls._make(False, value._magnitude | 1)

    # inspection

    def num_digits(self):
        """Number of 12-bit limbs; zero has none."""
        if self._magnitude == 0:
            return 0
        return len(self._limbs())

    def get_digit(self, index):
        """Return limb ``index`` (least significant first), or -1 past the end."""
        limbs = self._limbs()
        if 0 <= index < len(limbs):
            return limbs[index]
        return -1

    def is_odd(self):
        return bool(self._magnitude & 1)

    def count_suffix_zeros(self):
        """Return i such that |self| = 2**i * d with d odd (0 for zero)."""
        if self._magnitude == 0:
            return 0
        return (self._magnitude & -self._magnitude).bit_length() - 1

    def compare(self, other):
        """Return 1, 0 or -1 as self is greater than, equal to or less than other."""
        other = self._coerce(other)
        if not self._negative and other._negative:
            return 1
        if self._negative and not other._negative:
            return -1
        result = self.abs_compare(other)
        return -result if self._negative else result

    def abs_compare(self, other):
        """Compare absolute values, returning 1, 0 or -1."""
        other = self._coerce(other)
        return (self._magnitude > other._magnitude) - (self._magnitude < other._magnitude)

    # arithmetic

    def abs_plus(self, other):
        """Return |self| + |other|."""
        other = self._coerce(other)
        return self._make(False, self._magnitude + other._magnitude)

    def abs_minus(self, other):
        """Return ||self| - |other||."""
        other = self._coerce(other)
        return self._make(False, abs(self._magnitude - other._magnitude))

    def plus(self, other):
        other = self._coerce(other)
        if self._negative == other._negative:
            return self._make(self._negative, self._magnitude + other._magnitude)
        if self._magnitude >= other._magnitude:
            return self._make(self._negative, self._magnitude - other._magnitude)
        return self._make(other._negative, other._magnitude - self._magnitude)

    def minus(self, other):
        other = self._coerce(other)
        return self.plus(self._make(not other._negative, other._magnitude))

    def left_shift(self, bits):
        if bits < 0:
            raise ValueError("shift count must not be negative")
        return self._make(self._negative, self._magnitude << bits)

    def right_shift(self, bits):
        """Shift the magnitude right, keeping the sign (rounds toward zero)."""
        if bits < 0:
            raise ValueError("shift count must not be negative")
        return self._make(self._negative, self._magnitude >> bits)

    def times(self, other):
        other = self._coerce(other)
        return self._make(self._negative != other._negative,
                          self._magnitude * other._magnitude)

    def divide(self, other):
        """Return (quotient, remainder) of |self| by |other|.

        The quotient carries the combined sign; the remainder is never negative.
        """
        other = self._coerce(other)
        if other._magnitude == 0:
            raise ZeroDivisionError("BigInt division by zero")
        quotient, remainder = divmod(self._magnitude, other._magnitude)
        return (self._make(self._negative != other._negative, quotient),
                self._make(False, remainder))

    # operators

    def __add__(self, other):
        try:
            return self.plus(other)
        except TypeError:
            return NotImplemented

    def __sub__(self, other):
        try:
            return self.minus(other)
        except TypeError:
            return NotImplemented

    def __mul__(self, other):
        try:
            return self.times(other)
        except TypeError:
            return NotImplemented

    def __floordiv__(self, other):
        try:
            return self.divide(other)[0]
        except TypeError:
            return NotImplemented

    def __mod__(self, other):
        """BigInt modulus gives a BigInt; an int modulus gives |self| mod |other| as int."""
        if isinstance(other, BigInt):
            return self.divide(other)[1]
        if isinstance(other, int):
            if other == 0:
                raise ZeroDivisionError("BigInt modulo by zero")
            return self._magnitude % abs(other)
        return NotImplemented

    def __lshift__(self, bits):
        return self.left_shift(bits)

    def __rshift__(self, bits):
        return self.right_shift(bits)

    def __eq__(self, other):
        if not isinstance(other, (BigInt, int)):
            return NotImplemented
        return self.compare(other) == 0

    def __lt__(self, other):
        if not isinstance(other, (BigInt, int)):
            return NotImplemented
        return self.compare(other) < 0

    def __hash__(self):
        return hash(int(self))

    def __int__(self):
        return -self._magnitude if self._negative else self._magnitude

    def __str__(self):
        return self.to_string(16)

    def __repr__(self):
        return f"BigInt({int(self)})"


ZERO = BigInt(0)
ONE = BigInt(1)
TWO = BigInt(2)