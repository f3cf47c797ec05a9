import pytest
from hypothesis import given
from hypothesis import strategies as st

from tinycrypt import rc4


@given(st.binary(), st.binary(min_size=1, max_size=64))
def test_round_trip(data, key):
    assert rc4.crypt(rc4.crypt(data, key), key) == data


@given(st.binary(), st.binary(min_size=1, max_size=64))
def test_length_preserved(data, key):
    assert len(rc4.crypt(data, key)) == len(data)


@given(st.binary(min_size=1, max_size=200))
def test_ciphertext_is_data_xor_keystream(data):
    key = b"secret"
    keystream = rc4.crypt(bytes(len(data)), key)
    expected = bytes(a ^ b for a, b in zip(data, keystream))
    assert rc4.crypt(data, key) == expected


@pytest.mark.parametrize(
    ("phrase", "plaintext", "expected_hex"),
    [
        (b"Key", b"Plaintext", "bbf316e8d940af0ad3"),
        (b"Wiki", b"pedia", "1021bf0420"),
        (b"Secret", b"Attack at dawn", "45a01f645fc35b383552544b9bf5"),
    ],
)
def test_known_vectors(phrase, plaintext, expected_hex):
    assert rc4.crypt(plaintext, phrase).hex() == expected_hex


def test_different_keys_give_different_output():
    data = bytes(32)
    assert rc4.crypt(data, b"secret") != rc4.crypt(data, b"placeholder")


def test_text_is_treated_as_utf8():
    key = "secret"
    assert rc4.crypt("realName", key) == rc4.crypt(b"realName", b"secret")


def test_empty_data():
    assert rc4.crypt(b"", b"secret") == b""


def test_empty_key_rejected():
    with pytest.raises(ValueError):
        rc4.crypt(b"realName", b"")


def test_ciphertext_differs_from_plaintext():
    data = b"realName" * 4
    assert rc4.crypt(data, b"secret") != data