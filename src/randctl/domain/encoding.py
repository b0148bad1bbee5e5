"""Presentation encodings for identifier bytes.

All transforms are pure. Each encoder has a decoder that inverts it
exactly, which is what makes importing an identifier by its URL-safe
base64 form possible.

- hex: lowercase, two digits per byte
- b64_std: standard alphabet, padded
- b64_url: URL-safe alphabet, unpadded
- dec: unsigned big-endian integer, no leading zeros
"""

from __future__ import annotations

import base64
import binascii
import string

_HEX_DIGITS = frozenset(string.hexdigits)
_B64_URL_ALPHABET = frozenset(string.ascii_letters + string.digits + "-_")


def to_hex(data: bytes) -> str:
    return data.hex()


def from_hex(text: str) -> bytes:
    """Decode lowercase or uppercase hex. Raises ValueError when malformed."""
    if len(text) % 2 or not _HEX_DIGITS.issuperset(text):
        raise ValueError(f"invalid hex string: {text!r}")
    return bytes.fromhex(text)


def to_b64_std(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def from_b64_std(text: str) -> bytes:
    """Decode padded standard base64. Raises ValueError when malformed."""
    try:
        return base64.b64decode(text.encode("ascii"), validate=True)
    except (binascii.Error, UnicodeEncodeError) as exc:
        raise ValueError(f"invalid base64 string: {exc}") from exc


def to_b64_url(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def from_b64_url(text: str) -> bytes:
    """Decode unpadded URL-safe base64. Raises ValueError when malformed.

    Padding and standard-alphabet characters (``+``, ``/``) are rejected:
    the encoded form never carries them. So are non-canonical inputs whose
    last character carries non-zero trailing bits, since re-encoding the
    bytes would not give *text* back.
    """
    if not _B64_URL_ALPHABET.issuperset(text):
        raise ValueError(f"invalid URL-safe base64 string: {text!r}")
    padded = text + "=" * (-len(text) % 4)
    try:
        data = base64.urlsafe_b64decode(padded.encode("ascii"))
    except binascii.Error as exc:
        raise ValueError(f"invalid URL-safe base64 string: {exc}") from exc
    if to_b64_url(data) != text:
        raise ValueError(f"non-canonical URL-safe base64 string: {text!r}")
    return data


def to_decimal(data: bytes) -> str:
    """Render bytes as an unsigned big-endian decimal. Empty input is ``"0"``."""
    return str(int.from_bytes(data, "big"))


def from_decimal(text: str, byte_length: int) -> bytes:
    """Decode a decimal string back into exactly *byte_length* bytes.

    Decimal drops leading zero bytes, so the caller supplies the width.
    """
    if not text or not text.isascii() or not text.isdigit():
        raise ValueError(f"invalid decimal string: {text!r}")
    try:
        return int(text).to_bytes(byte_length, "big")
    except OverflowError as exc:
        raise ValueError(f"{text} does not fit in {byte_length} bytes") from exc


def presentations(data: bytes, prefix: str = "") -> dict[str, str]:
    """All four presentation forms of *data*, each prefixed with *prefix*."""
    return {
        "b64_url": prefix + to_b64_url(data),
        "b64_std": prefix + to_b64_std(data),
        "hex": prefix + to_hex(data),
        "dec": prefix + to_decimal(data),
    }
