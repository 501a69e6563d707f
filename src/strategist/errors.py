"""Exception taxonomy for Strategist.

Only caller mistakes and external service failures are ever raised to a
caller. Malformed or missing fields in a generated reply are recovered
inside the normalizer and never surface here.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from strategist.llm.client import APIErrorType


class StrategistError(Exception):
    """Base exception for all Strategist errors."""

    pass


class CallerError(StrategistError):
    """A programming mistake by the caller (never defaulted away)."""

    pass


class UnknownPhaseError(CallerError, KeyError):
    """Raised when a phase id is not registered."""

    def __init__(self, phase_id: object) -> None:
        self.phase_id = phase_id
        super().__init__(f"Unknown phase: {phase_id!r}")

    def __str__(self) -> str:
        return str(self.args[0])


class UnknownBranchError(CallerError, KeyError):
    """Raised when a canonical key does not name a document branch."""

    def __init__(self, canonical_key: str) -> None:
        self.canonical_key = canonical_key
        super().__init__(f"Unknown document branch: {canonical_key!r}")

    def __str__(self) -> str:
        return str(self.args[0])


class BranchTypeError(CallerError, TypeError):
    """Raised when an update does not match the type of its branch."""

    def __init__(self, canonical_key: str, expected: str, actual: str) -> None:
        self.canonical_key = canonical_key
        super().__init__(
            f"Update for {canonical_key!r} must be {expected}, got {actual}"
        )


class RegistryError(StrategistError):
    """Raised when the phase table cannot be loaded."""

    pass


class DocumentFormatError(StrategistError):
    """Raised when a document snapshot cannot be read."""

    def __init__(self, source: object, message: str) -> None:
        self.source = source
        self.reason = message
        super().__init__(f"Invalid document in {source}: {message}")


class GenerationError(StrategistError):
    """Raised when the generation service fails or returns no usable JSON."""

    def __init__(self, message: str, error_type: APIErrorType | None = None) -> None:
        self.error_type = error_type
        super().__init__(message)
