import pytest
from hypothesis import given
from hypothesis import strategies as st

from tinycrypt.bigint import BigInt

ints = st.integers(min_value=-(2 ** 200), max_value=2 ** 200)
nonzero = ints.filter(lambda value: value != 0)


@given(ints)
def test_int_round_trip(value):
    assert int(BigInt(value)) == value


@given(ints, st.sampled_from([2, 16]))
def test_string_round_trip(value, base):
    big = BigInt(value)
    assert int(BigInt.from_string(big.to_string(base), base)) == value


def test_hex_string_is_upper_case():
    assert BigInt(255).to_string(16) == "FF"
    assert str(BigInt(-255)) == "-FF"


def test_zero_renders_as_single_digit():
    assert BigInt(0).to_string(2) == "0"
    assert BigInt(0).to_string(16) == "0"


def test_from_string_binary_with_sign():
    assert int(BigInt.from_string("-1010", 2)) == -10
    assert int(BigInt.from_string("+1010", 2)) == 10


def test_minus_zero_is_positive():
    value = BigInt.from_string("-0", 2)
    assert value.to_string(2) == "0"
    assert value == BigInt(0)


@pytest.mark.parametrize("text, base", [("", 2), ("-", 16), ("102", 2), ("1G", 16)])
def test_from_string_rejects_bad_text(text, base):
    with pytest.raises(ValueError):
        BigInt.from_string(text, base)


@pytest.mark.parametrize("base", [8, 10])
def test_unsupported_base(base):
    with pytest.raises(ValueError):
        BigInt(5).to_string(base)
    with pytest.raises(ValueError):
        BigInt.from_string("5", base)


def test_limb_view():
    value = BigInt(4096)
    assert value.num_digits() == 2
    assert value.get_digit(0) == 0
    assert value.get_digit(1) == 1
    assert value.get_digit(2) == -1


def test_zero_has_no_digits():
    assert BigInt(0).num_digits() == 0
    assert BigInt(0).get_digit(0) == 0


@given(st.integers(min_value=1, max_value=2 ** 200))
def test_limbs_reassemble(value):
    big = BigInt(value)
    total = sum(big.get_digit(i) << (12 * i) for i in range(big.num_digits()))
    assert total == value
    assert all(0 <= big.get_digit(i) < 4096 for i in range(big.num_digits()))


@given(ints, ints)
def test_plus_and_minus(a, b):
    assert int(BigInt(a) + BigInt(b)) == a + b
    assert int(BigInt(a) - BigInt(b)) == a - b
    assert int(BigInt(a).plus(b)) == a + b
    assert int(BigInt(a).minus(b)) == a - b


@given(ints, ints)
def test_abs_operations(a, b):
    assert int(BigInt(a).abs_plus(BigInt(b))) == abs(a) + abs(b)
    assert int(BigInt(a).abs_minus(BigInt(b))) == abs(abs(a) - abs(b))


@given(ints, ints)
def test_times(a, b):
    assert int(BigInt(a) * BigInt(b)) == a * b


@given(ints, nonzero)
def test_divide_reconstructs_magnitude(a, b):
    quotient, remainder = BigInt(a).divide(BigInt(b))
    assert 0 <= int(remainder) < abs(b)
    assert abs(int(quotient)) * abs(b) + int(remainder) == abs(a)
    assert int(BigInt(a) // BigInt(b)) == int(quotient)
    assert int(BigInt(a) % BigInt(b)) == int(remainder)


def test_divide_sign_follows_operands():
    assert int(BigInt(-7) // BigInt(2)) == -3
    assert int(BigInt(-7) % BigInt(2)) == 1


def test_divide_by_zero():
    with pytest.raises(ZeroDivisionError):
        BigInt(5).divide(BigInt(0))
    with pytest.raises(ZeroDivisionError):
        BigInt(5) % 0


@given(ints, st.integers(min_value=1, max_value=100000))
def test_mod_int_is_magnitude_remainder(a, m):
    result = BigInt(a) % m
    assert isinstance(result, int)
    assert result == abs(a) % m


@given(ints, st.integers(min_value=0, max_value=100))
def test_shifts(a, bits):
    shifted = BigInt(a) << bits
    assert int(shifted) == a * (1 << bits)
    assert int(shifted >> bits) == a
    assert int(BigInt(a).right_shift(bits)) == (abs(a) >> bits) * (1 if a >= 0 else -1)


def test_negative_shift_rejected():
    with pytest.raises(ValueError):
        BigInt(1).left_shift(-1)
    with pytest.raises(ValueError):
        BigInt(1).right_shift(-1)


@given(ints, ints)
def test_compare_matches_ordering(a, b):
    expected = (a > b) - (a < b)
    assert BigInt(a).compare(BigInt(b)) == expected
    assert (BigInt(a) < BigInt(b)) == (a < b)
    assert (BigInt(a) == BigInt(b)) == (a == b)
    assert BigInt(a).abs_compare(BigInt(b)) == (abs(a) > abs(b)) - (abs(a) < abs(b))


@given(st.integers(min_value=1, max_value=2 ** 200))
def test_count_suffix_zeros(value):
    zeros = BigInt(value).count_suffix_zeros()
    assert value % (1 << zeros) == 0
    assert (value >> zeros) & 1 == 1


@given(ints)
def test_is_odd(value):
    assert BigInt(value).is_odd() == (value % 2 == 1)


@given(st.integers(min_value=1, max_value=300))
def test_random_has_exact_bit_length(bits):
    value = int(BigInt.random(bits))
    assert value.bit_length() == bits


@given(st.integers(min_value=1, max_value=300))
def test_random_odd(bits):
    value = BigInt.random_odd(bits)
    assert value.is_odd()
    assert int(value).bit_length() == bits


def test_random_zero_bits_is_zero():
    assert BigInt.random(0) == BigInt(0)
    with pytest.raises(ValueError):
        BigInt.random(-1)


def test_copy_and_repr():
    original = BigInt(-42)
    copy = BigInt(original)
    assert copy == original
    assert repr(copy) == "BigInt(-42)"
    assert hash(copy) == hash(original)


def test_rejects_non_integer():
    with pytest.raises(TypeError):
        BigInt("12")