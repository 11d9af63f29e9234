"""Error types raised by the character slicing helpers.

Each error carries a machine-readable code plus structured details so
callers can report failures without parsing the message text.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar


class ErrorCode:
    """Constants for error codes carried by slicing errors."""

    INVALID_RANGE = "invalid_range"
    MALFORMED_TEXT = "malformed_text"


@dataclass
class SliceError(ValueError):
    """Base exception class for all slicing errors.

    Attributes:
        error_code: Machine-readable error identifier.
        message: Human-readable error description.
        details: Additional structured error information.
        suggestion: Actionable guidance for recovery.
    """

    error_code: str = "slice_error"
    message: str = "Slicing failed"
    details: dict[str, Any] = field(default_factory=dict)
    suggestion: str = ""

    severity: ClassVar[str] = "error"

    def __post_init__(self) -> None:
        ValueError.__init__(self, self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a dictionary for structured reporting."""
        result: dict[str, Any] = {
            "error": self.error_code,
            "message": self.message,
        }
        if self.details:
            result["details"] = dict(self.details)
        if self.suggestion:
            result["suggestion"] = self.suggestion
        return result

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"


@dataclass
class InvalidRangeError(SliceError):
    """Raised when a character range cannot be satisfied."""

    error_code: str = field(default=ErrorCode.INVALID_RANGE)
    message: str = field(default="Invalid character range")
    details: dict[str, Any] = field(default_factory=dict)
    suggestion: str = field(
        default="Use non-negative bounds with start <= end, or call try_slice to get None instead"
    )


@dataclass
class MalformedTextError(SliceError):
    """Raised when UTF-8 validation is enabled and the subject is not well formed."""

    error_code: str = field(default=ErrorCode.MALFORMED_TEXT)
    message: str = field(default="Subject text is not valid UTF-8")
    details: dict[str, Any] = field(default_factory=dict)
    suggestion: str = field(default="Decode with errors='replace' and re-encode before slicing")

    offset: int | None = field(default=None)

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        if self.offset is not None:
            result["offset"] = self.offset
        return result


__all__ = ["ErrorCode", "SliceError", "InvalidRangeError", "MalformedTextError"]
