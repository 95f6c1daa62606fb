"""GUID binary layout — parsing, Base64 encoding, and rendering.

Every function in this module is a **pure** transformation — no I/O,
no side effects, fully deterministic.

Binary layout
-------------
A GUID is stored as 16 bytes using the Windows mixed-endian convention:

* ``Data1`` (4 bytes), ``Data2`` (2 bytes) and ``Data3`` (2 bytes) are
  little-endian;
* the trailing 8 bytes are kept in display order.

So ``786540b0-e0ca-44d5-ba80-cfd0ec0797d7`` is laid out as
``b0 40 65 78 ca e0 d5 44 ba 80 cf d0 ec 07 97 d7``.  This is exactly
:attr:`uuid.UUID.bytes_le`, which the module relies on.

Each direction has one parsing function (:func:`parse_guid`,
:func:`decode_immutable_id`) that both validates and produces the raw
bytes, so callers never parse the same value twice.
"""

from __future__ import annotations

import base64
import logging
import re
import uuid

from immutable_id.exceptions import InvalidInputError

logger = logging.getLogger(__name__)

GUID_BYTE_LENGTH: int = 16
"""Size of the raw GUID binary layout."""

IMMUTABLE_ID_LENGTH: int = 24
"""Length of a padded Base64 rendering of :data:`GUID_BYTE_LENGTH` bytes."""

_HEX_D = r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"

# N, D, B and P display forms.
_GUID_PATTERN = re.compile(
    rf"(?:[0-9a-fA-F]{{32}}|{_HEX_D}|\{{{_HEX_D}\}}|\({_HEX_D}\))",
)

_GUID_HINT = (
    "Expected 32 hex digits, optionally as 8-4-4-4-12 groups "
    "wrapped in {} or ()."
)
_IMMUTABLE_ID_HINT = (
    f"Expected a {IMMUTABLE_ID_LENGTH}-character Base64 string "
    f"encoding {GUID_BYTE_LENGTH} bytes."
)


# ---------------------------------------------------------------------------
# GUID text → bytes
# ---------------------------------------------------------------------------

def parse_guid(text: str) -> bytes:
    """Parse a GUID string into its 16-byte mixed-endian layout.

    Surrounding whitespace is ignored and hex digits are
    case-insensitive.

    Raises
    ------
    InvalidInputError
        If *text* is not a string or not a well-formed GUID.
    """
    if not isinstance(text, str):
        raise InvalidInputError(
            f"GUID must be a string, got {type(text).__name__}.",
            value=text,
        )

    stripped = text.strip()
    if not _GUID_PATTERN.fullmatch(stripped):
        logger.debug("Rejected GUID %r", text)
        raise InvalidInputError(
            f"Invalid GUID: {text!r}",
            value=text,
            hint=_GUID_HINT,
        )

    hex_digits = stripped.strip("{}()").replace("-", "")
    return uuid.UUID(hex=hex_digits).bytes_le


def format_guid(raw: bytes) -> str:
    """Render a 16-byte mixed-endian layout as a canonical GUID string.

    The result is the lowercase hyphenated ``8-4-4-4-12`` form.
    """
    if len(raw) != GUID_BYTE_LENGTH:
        raise InvalidInputError(
            f"GUID layout must be {GUID_BYTE_LENGTH} bytes, got {len(raw)}.",
            value=raw,
        )
    return str(uuid.UUID(bytes_le=bytes(raw)))


# ---------------------------------------------------------------------------
# ImmutableID text ⇄ bytes
# ---------------------------------------------------------------------------

def decode_immutable_id(text: str) -> bytes:
    """Decode an ImmutableID into the raw 16-byte GUID layout.

    Decoding is strict: characters outside the Base64 alphabet
    (whitespace included) and incorrect padding are rejected, the
    decoded value must be exactly :data:`GUID_BYTE_LENGTH` bytes long,
    and *text* must be the canonical encoding of those bytes, so the
    unused low bits of the last character must be zero.

    Raises
    ------
    InvalidInputError
        If *text* is not a string, not valid Base64, does not decode
        to 16 bytes, or is not canonical Base64.
    """
    if not isinstance(text, str):
        raise InvalidInputError(
            f"ImmutableID must be a string, got {type(text).__name__}.",
            value=text,
        )

    try:
        raw = base64.b64decode(text, validate=True)
    except ValueError as exc:
        # binascii.Error is a ValueError subclass; non-ASCII input
        # raises plain ValueError.
        logger.debug("Rejected ImmutableID %r: %s", text, exc)
        raise InvalidInputError(
            f"Invalid Base64 in ImmutableID: {text!r}",
            value=text,
            hint=_IMMUTABLE_ID_HINT,
        ) from exc

    if len(raw) != GUID_BYTE_LENGTH:
        logger.debug("Rejected ImmutableID %r: decoded to %d bytes", text, len(raw))
        raise InvalidInputError(
            f"ImmutableID {text!r} decodes to {len(raw)} bytes, "
            f"expected {GUID_BYTE_LENGTH}.",
            value=text,
            hint=_IMMUTABLE_ID_HINT,
        )

    if base64.b64encode(raw).decode("ascii") != text:
        logger.debug("Rejected ImmutableID %r: non-canonical encoding", text)
        raise InvalidInputError(
            f"Non-canonical Base64 in ImmutableID: {text!r}",
            value=text,
            hint=_IMMUTABLE_ID_HINT,
        )

    return raw


def encode_immutable_id(raw: bytes) -> str:
    """Base64-encode a 16-byte GUID layout into an ImmutableID."""
    if len(raw) != GUID_BYTE_LENGTH:
        raise InvalidInputError(
            f"GUID layout must be {GUID_BYTE_LENGTH} bytes, got {len(raw)}.",
            value=raw,
        )
    return base64.b64encode(raw).decode("ascii")
