"""Quoted / hex string decoding tests."""

import pytest

from warden.core.encoding import (
    EncodingError,
    add_enclosing_quotes,
    decode_ssid,
    hex_or_quoted_to_bytes,
    hex_string_to_bytes,
    is_quoted,
    remove_enclosing_quotes,
    string_to_utf8_bytes,
)


def test_quoted_string_decodes_to_utf8() -> None:
    """Ensure the quotes are stripped and the payload is UTF-8 encoded."""
    assert hex_or_quoted_to_bytes('"abc"') == b"abc"
    assert hex_or_quoted_to_bytes('"café"') == b"caf\xc3\xa9"


def test_hex_string_decodes_to_bytes() -> None:
    """Ensure hex digit pairs decode in either case."""
    assert hex_or_quoted_to_bytes("616263") == b"abc"
    assert hex_string_to_bytes("DEADbeef") == b"\xde\xad\xbe\xef"


def test_malformed_hex_raises() -> None:
    """Ensure odd-length, non-hex and non-ASCII input is rejected."""
    for value in ("61626", "zz", "é1", "61 62"):
        with pytest.raises(EncodingError):
            hex_string_to_bytes(value)


def test_null_input_raises() -> None:
    """Ensure a null string cannot be decoded."""
    with pytest.raises(EncodingError):
        hex_or_quoted_to_bytes(None)
    with pytest.raises(EncodingError):
        decode_ssid(None)


def test_unencodable_quoted_string_raises() -> None:
    """Ensure a lone surrogate inside quotes fails UTF-8 encoding."""
    with pytest.raises(EncodingError):
        hex_or_quoted_to_bytes('"\ud800abc"')
    with pytest.raises(EncodingError):
        string_to_utf8_bytes("\udfff")


def test_half_quoted_string_is_treated_as_hex() -> None:
    """Ensure a string with only a leading quote is not a quoted string."""
    assert is_quoted('"abc') is False
    with pytest.raises(EncodingError):
        hex_or_quoted_to_bytes('"abc')


def test_quote_helpers() -> None:
    """Ensure quoting helpers add and strip one pair of quotes."""
    assert add_enclosing_quotes("Office") == '"Office"'
    assert remove_enclosing_quotes('"Office"') == "Office"
    assert remove_enclosing_quotes("4f6666696365") == "4f6666696365"
    assert is_quoted('"') is False
    assert is_quoted('""') is True
