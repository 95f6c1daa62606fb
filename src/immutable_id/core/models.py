"""Conversion records for immutable-id.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access and serialisation.  Each record pairs the
original input, verbatim, with the value computed from it.
"""

from __future__ import annotations

from dataclasses import dataclass


# ---------------------------------------------------------------------------
# GUID → ImmutableID
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ImmutableIdRecord:
    """Result of converting one GUID into its ImmutableID."""

    guid: str
    """The GUID exactly as supplied by the caller."""

    immutable_id: str
    """Base64 of the GUID's 16-byte layout (24 characters)."""

    def as_dict(self) -> dict[str, str]:
        """Return ``{"GUID": ..., "ImmutableID": ...}`` in that order."""
        return {"GUID": self.guid, "ImmutableID": self.immutable_id}

    @property
    def source(self) -> str:
        """The input value this record was computed from."""
        return self.guid

    @property
    def result(self) -> str:
        """The computed value."""
        return self.immutable_id


# ---------------------------------------------------------------------------
# ImmutableID → GUID
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class GuidRecord:
    """Result of converting one ImmutableID into its GUID."""

    immutable_id: str
    """The ImmutableID exactly as supplied by the caller."""

    guid: str
    """Canonical lowercase ``8-4-4-4-12`` GUID."""

    def as_dict(self) -> dict[str, str]:
        """Return ``{"ImmutableID": ..., "GUID": ...}`` in that order."""
        return {"ImmutableID": self.immutable_id, "GUID": self.guid}

    @property
    def source(self) -> str:
        """The input value this record was computed from."""
        return self.immutable_id

    @property
    def result(self) -> str:
        """The computed value."""
        return self.guid


ConversionRecord = ImmutableIdRecord | GuidRecord
