"""Explicate error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 4xxx: Rewrite (one candidate declaration)
- 5xxx: Mutation
- 9xxx: Internal

Every rewrite error is terminal for the candidate that raised it and never
for its siblings. The rule converts them into an abstention at its ``apply``
boundary.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002

    # Rewrite (4xxx)
    RESOLUTION_FAILURE = 4001
    UNSUPPORTED_INITIALIZER = 4002
    SYNTHESIS_FAILURE = 4003

    # Mutation (5xxx)
    MUTATION_REJECTED = 5001

    # Internal (9xxx)
    INTERNAL_ERROR = 9001


@dataclass(frozen=True, slots=True)
class ExplicateError(Exception):
    """Base error with structured context for reports."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'SYNTHESIS_FAILURE')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON reports."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(ExplicateError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )


class RewriteError(ExplicateError):
    """A candidate declaration could not be rewritten."""

    @classmethod
    def resolution_failure(cls, expression: str) -> "RewriteError":
        return cls(
            code=ErrorCode.RESOLUTION_FAILURE,
            message=f"Type of '{expression}' could not be resolved",
            details={"expression": expression},
        )

    @classmethod
    def unsupported_initializer(cls, kind: str, expression: str) -> "RewriteError":
        return cls(
            code=ErrorCode.UNSUPPORTED_INITIALIZER,
            message=f"Initializer of kind '{kind}' cannot carry an explicit type",
            details={"kind": kind, "expression": expression},
        )

    @classmethod
    def synthesis_failure(cls, reason: str, **details: Any) -> "RewriteError":
        return cls(
            code=ErrorCode.SYNTHESIS_FAILURE,
            message=f"Cannot render explicit type: {reason}",
            details=details,
        )

    @classmethod
    def mutation_rejected(cls, reason: str, **details: Any) -> "RewriteError":
        return cls(
            code=ErrorCode.MUTATION_REJECTED,
            message=f"Replacement rejected: {reason}",
            details=details,
        )


class InternalError(ExplicateError):
    """Internal/unexpected errors."""

    @classmethod
    def unexpected(cls, reason: str, **details: Any) -> "InternalError":
        return cls(
            code=ErrorCode.INTERNAL_ERROR,
            message=f"Internal error: {reason}",
            details=details,
        )
