import pytest
from hypothesis import given
from hypothesis import strategies as st

from tinycrypt import crc


def test_calc_crc_check_value():
    assert crc.calc_crc(b"123456789") == 0x4B37


def test_ccitt_false_check_value():
    assert crc.calculate_crc16(b"123456789", 0xFFFF, 0x1021, 0x0000, False, False) == 0x29B1


def test_empty_data_returns_init():
    assert crc.calc_crc(b"") == 0xFFFF
    assert crc.calculate_crc16(b"", 0x1234, 0x1021, 0x0000, False, False) == 0x1234


def test_calc_crc_matches_generic_parameters():
    data = b"realName"
    assert crc.calc_crc(data) == crc.calculate_crc16(data, 0xFFFF, 0x8005, 0x0000, True, True)


@given(st.binary())
def test_residue_is_zero(data):
    checksum = crc.calc_crc(data)
    assert crc.calc_crc(data + checksum.to_bytes(2, "little")) == 0


@given(st.binary())
def test_result_fits_sixteen_bits(data):
    assert 0 <= crc.calc_crc(data) <= 0xFFFF


@given(st.binary())
def test_xor_out_is_applied_last(data):
    plain = crc.calculate_crc16(data, 0xFFFF, 0x8005, 0x0000, True, True)
    inverted = crc.calculate_crc16(data, 0xFFFF, 0x8005, 0xFFFF, True, True)
    assert inverted == plain ^ 0xFFFF


def test_init_is_truncated_to_sixteen_bits():
    data = b"123456789"
    assert crc.calculate_crc16(data, 0x1FFFF, 0x8005, 0, True, True) == crc.calc_crc(data)


def test_text_is_hashed_as_utf8():
    assert crc.calc_crc("realName") == crc.calc_crc(b"realName")


@pytest.mark.parametrize("data", [b"a", b"ab", b"\x00\xff", b"123456789"])
def test_single_bit_change_alters_crc(data):
    flipped = bytes([data[0] ^ 0x01]) + data[1:]
    assert crc.calc_crc(flipped) != crc.calc_crc(data)