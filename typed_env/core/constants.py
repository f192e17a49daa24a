"""Constants and enumerations for typed_env.

This module centralizes literal tables, unit tables and environment
variable names so parsers and configuration share one definition.
"""

from enum import Enum
from typing import Dict, Final, FrozenSet


class ValueKind(str, Enum):
    """Primitive types an environment value can be parsed into."""

    STRING = "string"
    BOOL = "bool"
    INT = "int"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    DURATION = "duration"


# Boolean literals
TRUE_LITERALS: Final[FrozenSet[str]] = frozenset({"1", "t", "T", "TRUE", "true", "True"})
FALSE_LITERALS: Final[FrozenSet[str]] = frozenset({"0", "f", "F", "FALSE", "false", "False"})

# Signed 64-bit bounds (integers and durations in nanoseconds)
INT64_MIN: Final[int] = -(1 << 63)
INT64_MAX: Final[int] = (1 << 63) - 1

# Duration units expressed in nanoseconds
NANOSECOND: Final[int] = 1
MICROSECOND: Final[int] = 1000 * NANOSECOND
MILLISECOND: Final[int] = 1000 * MICROSECOND
SECOND: Final[int] = 1000 * MILLISECOND
MINUTE: Final[int] = 60 * SECOND
HOUR: Final[int] = 60 * MINUTE

DURATION_UNITS: Final[Dict[str, int]] = {
    "ns": NANOSECOND,
    "us": MICROSECOND,
    "µs": MICROSECOND,  # micro sign
    "μs": MICROSECOND,  # greek small letter mu
    "ms": MILLISECOND,
    "s": SECOND,
    "m": MINUTE,
    "h": HOUR,
}

# Library configuration
ENV_LOG_LEVEL: Final[str] = "TYPED_ENV_LOG_LEVEL"
ENV_LOG_FILE: Final[str] = "TYPED_ENV_LOG_FILE"
DEFAULT_LOG_LEVEL: Final[str] = "INFO"
DEFAULT_LOG_FORMAT: Final[str] = (
    "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"
)
LOG_ROTATION: Final[str] = "10 MB"
LOG_RETENTION: Final[str] = "7 days"
LOG_LEVELS: Final[FrozenSet[str]] = frozenset(
    {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}
)
