"""GUID ⇄ ImmutableID converters.

This is the public conversion API consumed by the CLI layer and by
library callers.

Guarantees
----------
* Pure — no I/O, no ``print()``, no retained state between calls.
* Only :class:`~immutable_id.exceptions.ImmutableIdError` subclasses
  escape.
* Batches are all-or-nothing: every item is validated before any
  record is produced, and the first invalid item aborts the call.
* Output order and length always match the input.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from immutable_id.core.guid_layout import (
    decode_immutable_id,
    encode_immutable_id,
    format_guid,
    parse_guid,
)
from immutable_id.core.models import GuidRecord, ImmutableIdRecord
from immutable_id.exceptions import InvalidInputError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Single values
# ---------------------------------------------------------------------------

def guid_to_immutable_id(value: str) -> ImmutableIdRecord:
    """Convert one GUID string into an :class:`ImmutableIdRecord`.

    >>> guid_to_immutable_id("786540b0-e0ca-44d5-ba80-cfd0ec0797d7").immutable_id
    'sEBleMrg1US6gM/Q7AeX1w=='

    Raises
    ------
    InvalidInputError
        If *value* is not a well-formed GUID.
    """
    raw = parse_guid(value)
    return ImmutableIdRecord(guid=value, immutable_id=encode_immutable_id(raw))


def immutable_id_to_guid(value: str) -> GuidRecord:
    """Convert one ImmutableID string into a :class:`GuidRecord`.

    >>> immutable_id_to_guid("sEBleMrg1US6gM/Q7AeX1w==").guid
    '786540b0-e0ca-44d5-ba80-cfd0ec0797d7'

    Raises
    ------
    InvalidInputError
        If *value* is not valid Base64 or does not decode to 16 bytes.
    """
    raw = decode_immutable_id(value)
    return GuidRecord(immutable_id=value, guid=format_guid(raw))


# ---------------------------------------------------------------------------
# Batches
# ---------------------------------------------------------------------------

def _parse_all(
    values: Iterable[str],
    parse: Callable[[str], bytes],
) -> list[tuple[str, bytes]]:
    """Parse every value up front, tagging failures with their position."""
    parsed: list[tuple[str, bytes]] = []
    for position, value in enumerate(values):
        try:
            parsed.append((value, parse(value)))
        except InvalidInputError as exc:
            raise exc.at(position) from exc
    return parsed


def guids_to_immutable_ids(values: Iterable[str]) -> list[ImmutableIdRecord]:
    """Convert a sequence of GUIDs, preserving order.

    Raises
    ------
    InvalidInputError
        On the first malformed GUID; no records are returned.
    """
    parsed = _parse_all(values, parse_guid)
    logger.debug("Converting %d GUID(s) to ImmutableID", len(parsed))
    return [
        ImmutableIdRecord(guid=value, immutable_id=encode_immutable_id(raw))
        for value, raw in parsed
    ]


def immutable_ids_to_guids(values: Iterable[str]) -> list[GuidRecord]:
    """Convert a sequence of ImmutableIDs, preserving order.

    Raises
    ------
    InvalidInputError
        On the first invalid ImmutableID; no records are returned.
    """
    parsed = _parse_all(values, decode_immutable_id)
    logger.debug("Converting %d ImmutableID(s) to GUID", len(parsed))
    return [
        GuidRecord(immutable_id=value, guid=format_guid(raw))
        for value, raw in parsed
    ]
