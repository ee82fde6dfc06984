"""Custom exception hierarchy for fluentQL.

All public errors inherit from FluentQLError so callers can catch the base
class for any fluentQL-specific failure.
"""
from __future__ import annotations

from typing import Any


class FluentQLError(Exception):
    """Base exception for all fluentQL errors."""


class StatementError(FluentQLError):
    """Raised when a builder call is invalid for the statement being built.

    These are programmer errors (an incorrect call sequence).  The statement
    that raised one should be discarded and built again from scratch.

    Args:
        message: Human-readable description.
        code: Machine-readable error code (e.g. ALREADY_SET).
        details: Extra context about the offending call.
    """

    def __init__(
        self,
        message: str,
        code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details: dict[str, Any] = details or {}

    def to_error_response(self) -> dict[str, Any]:
        """Returns a structured error response suitable for logging."""
        return {
            "error": self.code,
            "message": str(self),
            "details": self.details,
        }


class AlreadySetError(StatementError):
    """Raised when the statement kind is configured a second time."""

    def __init__(self, current: str, requested: str) -> None:
        super().__init__(
            f"Statement kind is already set to {current}; cannot change it to {requested}.",
            code="ALREADY_SET",
            details={"current": current, "requested": requested},
        )
        self.current = current
        self.requested = requested


class NotAllowedError(StatementError):
    """Raised when an operation is invoked on an incompatible statement kind."""

    def __init__(self, operation: str, kind: str | None) -> None:
        super().__init__(
            f"Method '{operation}' is not supported for mode {kind}.",
            code="NOT_ALLOWED",
            details={"operation": operation, "kind": kind},
        )
        self.operation = operation
        self.kind = kind


class QuoterConfigError(FluentQLError):
    """Raised when a quoting capability cannot be resolved or constructed.

    Args:
        message: Human-readable description.
        name: The quoter name that failed to resolve, if any.
    """

    def __init__(self, message: str, name: str | None = None) -> None:
        super().__init__(message)
        self.name = name
