"""Custom exception hierarchy for typed_env.

Soft failures (a missing or malformed value) are absorbed by the accessor
and never reach the caller. The exceptions below cover the fatal
lookup-or-abort path, programming errors and configuration problems.
"""

from typing import Any, Dict, Optional


class TypedEnvError(Exception):
    """Base exception for all typed_env errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class MissingEnvironmentVariableError(TypedEnvError, KeyError):
    """Raised when a required environment variable is not set.

    The caller declared it cannot run without this value, so this is
    not caught anywhere inside the library.
    """

    def __init__(self, key: str):
        super().__init__(f"Missing required environment variable value for {key}")
        self.key = key


class ParseError(TypedEnvError, ValueError):
    """Raised when a raw environment value cannot be parsed."""

    def __init__(self, kind: str, raw: str, reason: str):
        """Initialize parse error.

        Args:
            kind: Name of the target value kind
            raw: Raw text that failed to parse
            reason: Short description of the failure
        """
        super().__init__(f"Cannot parse {kind} from {raw!r}: {reason}")
        self.kind = kind
        self.raw = raw
        self.reason = reason


class UnsupportedValueKindError(TypedEnvError, TypeError):
    """Raised when a value kind cannot be resolved for a default."""

    pass


class ConfigurationError(TypedEnvError):
    """Raised when typed_env's own configuration is invalid.

    Examples:
        - Unknown log level name
    """

    pass


class EnvironmentFileNotFoundError(TypedEnvError, FileNotFoundError):
    """Raised when a .env file passed to a provider does not exist."""

    def __init__(self, path: str):
        super().__init__(f"Environment file not found: {path}", details={"path": path})
        self.path = path
