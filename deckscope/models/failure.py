"""
Failure classification for the scoring engine.

Two error paths exist and they never mix:

- Data problems (missing prices, unknown card names, empty decklists) fail
  soft. Analyzers substitute neutral defaults and keep going.
- Programmer errors (passing a string where a decklist is required, a dict
  where a CardStub is required) fail fast with InvalidInputError so that
  integration bugs surface immediately.

Errors that an outer layer may want to report carry a FailureKind and can be
rendered to a FailureDetail model for serialization.
"""

from enum import Enum

from pydantic import BaseModel, Field


class FailureKind(str, Enum):
    """Classification of failure types."""

    INVALID_INPUT = "invalid_input"
    MISSING_REQUIRED = "missing_required"


class FailureDetail(BaseModel):
    """Detailed information about a failure."""

    kind: FailureKind = Field(
        ...,
        description="Classification of the failure",
    )
    message: str = Field(
        ...,
        description="User-appropriate explanation of what went wrong",
    )
    detail: str | None = Field(
        default=None,
        description="Additional technical detail (optional)",
    )
    suggestion: str | None = Field(
        default=None,
        description="Suggested action for the caller",
    )


class KnownError(Exception):
    """
    Base class for exceptions that represent known, explainable failures.

    Subclass this for errors where the engine knows exactly what went wrong.
    """

    def __init__(
        self,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
    ):
        self.kind = kind
        self.message = message
        self.detail = detail
        self.suggestion = suggestion
        super().__init__(message)

    def to_detail(self) -> FailureDetail:
        """Convert to a serializable FailureDetail."""
        return FailureDetail(
            kind=self.kind,
            message=self.message,
            detail=self.detail,
            suggestion=self.suggestion,
        )


class InvalidInputError(KnownError, TypeError):
    """
    Raised when an analyzer receives an argument of the wrong shape.

    This is the fail-fast path. It is a TypeError so callers that catch
    TypeError for argument mistakes keep working.
    """

    def __init__(self, argument: str, expected: str, received: object):
        self.argument = argument
        self.expected = expected
        self.received_type = type(received).__name__
        super().__init__(
            kind=FailureKind.INVALID_INPUT,
            message=f"{argument} must be {expected}, got {self.received_type}",
            suggestion="Pass parsed CardStub objects or a Deck.",
        )


class RecordError(KnownError, ValueError):
    """
    Raised when an input record cannot be turned into a domain object.

    The kind is MISSING_REQUIRED when a required field is absent and
    INVALID_INPUT when a field is present but malformed.
    """

    def __init__(
        self,
        reason: str,
        record: object = None,
        record_type: str = "input",
        kind: FailureKind = FailureKind.INVALID_INPUT,
    ):
        self.reason = reason
        self.record = record
        self.record_type = record_type
        super().__init__(
            kind=kind,
            message=f"Invalid {record_type} record: {reason}",
            detail=repr(record)[:200] if record is not None else None,
        )


class CardDataError(RecordError):
    """Raised when a raw card record cannot be turned into a CardStub."""

    def __init__(
        self,
        reason: str,
        record: object = None,
        kind: FailureKind = FailureKind.INVALID_INPUT,
    ):
        super().__init__(reason, record, record_type="card", kind=kind)
