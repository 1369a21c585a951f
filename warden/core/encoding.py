"""
SSID and Credential String Decoding
=====================================

Network configurations carry SSIDs and secrets in one of two textual
encodings:

    - quoted:  ``"MyNetwork"``, the literal text wrapped in double
      quotes, stored on the wire as its UTF-8 bytes;
    - hex:     ``4d794e6574776f726b``, an even-length string of hex
      digit pairs giving the raw bytes.

The routines here turn either form into raw bytes. They raise
:class:`EncodingError` on malformed input; validators catch it and
report an ordinary validation failure.
"""

from __future__ import annotations

import binascii
from typing import Optional

QUOTE = '"'


class EncodingError(ValueError):
    """Raised when a quoted or hex string cannot be decoded to bytes."""


def is_quoted(value: str) -> bool:
    """True when *value* is wrapped in a pair of double quotes."""
    return len(value) > 1 and value.startswith(QUOTE) and value.endswith(QUOTE)


def add_enclosing_quotes(value: str) -> str:
    return f"{QUOTE}{value}{QUOTE}"


def remove_enclosing_quotes(value: str) -> str:
    if is_quoted(value):
        return value[1:-1]
    return value


def hex_string_to_bytes(value: str) -> bytes:
    """Decode a strict hex string (no separators, even length)."""
    try:
        return binascii.unhexlify(value.encode("ascii"))
    except (binascii.Error, UnicodeEncodeError) as exc:
        raise EncodingError(f"Malformed hex string: {value!r}") from exc


def string_to_utf8_bytes(value: str) -> bytes:
    try:
        return value.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise EncodingError("String is not encodable as UTF-8") from exc


def hex_or_quoted_to_bytes(value: Optional[str]) -> bytes:
    """Decode a quoted or hex string to its raw bytes.

    Raises:
        EncodingError: If *value* is ``None``, or is neither a
            well-formed quoted string nor a well-formed hex string.
    """
    if value is None:
        raise EncodingError("Cannot decode a null string")
    if is_quoted(value):
        return string_to_utf8_bytes(value[1:-1])
    return hex_string_to_bytes(value)


def decode_ssid(value: Optional[str]) -> bytes:
    """Decode an SSID in quoted or hex form to its raw octets."""
    return hex_or_quoted_to_bytes(value)
