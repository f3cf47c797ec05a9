import pytest
from hypothesis import given
from hypothesis import strategies as st

from tinycrypt import base64 as b64


def test_encode_known_value():
    assert b64.encode("realName") == "cmVhbE5hbWU="


def test_decode_known_value():
    assert b64.decode("cmVhbE5hbWU=") == b"realName"


def test_decode_accepts_bytes():
    assert b64.decode(b"cmVhbE5hbWU=") == b"realName"


def test_empty_round_trip():
    assert b64.encode(b"") == ""
    assert b64.decode("") == b""


@given(st.binary())
def test_round_trip(data):
    assert b64.decode(b64.encode(data)) == data


@given(st.binary())
def test_encoded_length_matches(data):
    assert b64.encoded_length(len(data)) == len(b64.encode(data))


@given(st.binary())
def test_decoded_length_matches(data):
    assert b64.decoded_length(b64.encode(data)) == len(data)


@given(st.binary())
def test_unpadded_text_decodes(data):
    stripped = b64.strip_padding(b64.encode(data))
    assert not stripped.endswith("=")
    assert b64.decode(stripped) == data


def test_strip_padding():
    assert b64.strip_padding("cmVhbE5hbWU=") == "cmVhbE5hbWU"
    assert b64.strip_padding(b"cmVhbE5hbWU=") == b"cmVhbE5hbWU"


def test_padding_in_middle_is_rejected():
    with pytest.raises(ValueError):
        b64.decode("cmVhbE5hbWU=cmVhbE5hbWU=")


def test_only_padding_is_rejected():
    with pytest.raises(ValueError):
        b64.decode("====")


def test_negative_length_is_rejected():
    with pytest.raises(ValueError):
        b64.encoded_length(-1)


def test_alphabet_round_trip():
    decoded = b64.decode(b64.ALPHABET)
    assert b64.encode(decoded) == b64.ALPHABET