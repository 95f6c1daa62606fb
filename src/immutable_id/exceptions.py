"""Custom exception hierarchy for immutable-id.

All exceptions that cross layer boundaries must inherit from
:class:`ImmutableIdError`.  Raw standard-library parse errors (e.g.
``binascii.Error`` from Base64 decoding) must NEVER propagate beyond
the core layer — they must be caught and re-raised as a typed subclass
defined here.

Hierarchy
---------
ImmutableIdError
├── InvalidInputError
└── EnvironmentError
"""

from __future__ import annotations


class ImmutableIdError(Exception):
    """Base exception for all immutable-id errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Input validation ------------------------------------------------------

class InvalidInputError(ImmutableIdError):
    """Raised when a GUID or ImmutableID value fails validation.

    Raised before any conversion work happens for the offending item.
    In a batch, the whole call is aborted on the first invalid item.
    """

    def __init__(
        self,
        message: str,
        *,
        value: object = None,
        position: int | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.value: object = value
        """The rejected input, verbatim."""

        self.position: int | None = position
        """Zero-based index of the rejected item within a batch."""

    def at(self, position: int) -> InvalidInputError:
        """Return a copy of this error annotated with a batch *position*."""
        return InvalidInputError(
            f"Item {position + 1}: {self}",
            value=self.value,
            position=position,
            hint=self.hint,
        )


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(ImmutableIdError):
    """Raised when an optional runtime dependency is not available."""
