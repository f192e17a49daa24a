"""Core abstractions and interfaces for typed_env."""

from typed_env.core.constants import ValueKind
from typed_env.core.protocols import EnvironmentProvider
from typed_env.core.exceptions import (
    TypedEnvError,
    MissingEnvironmentVariableError,
    ParseError,
    UnsupportedValueKindError,
    ConfigurationError,
    EnvironmentFileNotFoundError,
)
from typed_env.core.config import LoggingConfig

__all__ = [
    # Constants
    "ValueKind",
    # Protocols
    "EnvironmentProvider",
    # Exceptions
    "TypedEnvError",
    "MissingEnvironmentVariableError",
    "ParseError",
    "UnsupportedValueKindError",
    "ConfigurationError",
    "EnvironmentFileNotFoundError",
    # Configuration
    "LoggingConfig",
]
