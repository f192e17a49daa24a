"""
Environment accessor.
Typed retrieval of environment variables with a default, with a presence
flag, or with a fatal error for required text configuration.
"""

import datetime
from typing import Any, Optional, Tuple

import numpy as np
import pandas as pd
from loguru import logger

from typed_env.core.constants import ValueKind
from typed_env.core.exceptions import (
    MissingEnvironmentVariableError,
    ParseError,
    UnsupportedValueKindError,
)
from typed_env.core.protocols import EnvironmentProvider
from typed_env.parsers import parse_value, zero_value
from typed_env.providers import OsEnvironmentProvider


def infer_kind(default: Any) -> ValueKind:
    """
    Infer the value kind from a default value's type.

    Args:
        default: Default value passed by the caller

    Returns:
        Matching value kind

    Raises:
        UnsupportedValueKindError: If the type maps to no value kind
    """
    # bool is a subclass of int, np.float32 must win over float
    if isinstance(default, (bool, np.bool_)):
        return ValueKind.BOOL
    if isinstance(default, np.float32):
        return ValueKind.FLOAT32
    if isinstance(default, (int, np.integer)):
        return ValueKind.INT
    if isinstance(default, (float, np.floating)):
        return ValueKind.FLOAT64
    if isinstance(default, (datetime.timedelta, pd.Timedelta)):
        return ValueKind.DURATION
    if isinstance(default, str):
        return ValueKind.STRING
    raise UnsupportedValueKindError(
        f"Cannot infer value kind from default of type {type(default).__name__}",
        details={"default": repr(default)},
    )


class EnvironmentAccessor:
    """Reads typed values from an environment provider.

    Two families of operations are offered for every value kind:

    - ``get_*``: return the parsed value, or the caller's default when the
      variable is absent or malformed.
    - ``lookup_*``: return ``(value, True)`` when the variable is present and
      valid, otherwise ``(zero value, False)``.

    ``require_string`` raises MissingEnvironmentVariableError for text
    configuration the caller cannot run without.
    """

    def __init__(self, provider: Optional[EnvironmentProvider] = None):
        self.provider = provider if provider is not None else OsEnvironmentProvider()

    def _parse(self, key: str, kind: ValueKind) -> Tuple[Any, bool]:
        raw = self.provider.lookup(key)
        if raw is None:
            return zero_value(kind), False
        try:
            return parse_value(kind, raw), True
        except ParseError as e:
            logger.debug(
                f"Ignoring malformed {kind.value} value for {key} "
                f"(length {len(raw)}): {e.reason}"
            )
            return zero_value(kind), False

    # Generic operations

    def get(self, key: str, default: Any, kind: Optional[ValueKind] = None) -> Any:
        """
        Get a typed value, falling back to default.

        Args:
            key: Environment variable name
            default: Value returned when the variable is absent or malformed
            kind: Target value kind; inferred from default when omitted

        Returns:
            Parsed value or default
        """
        if kind is None:
            kind = infer_kind(default)
        value, found = self._parse(key, kind)
        return value if found else default

    def lookup(self, key: str, kind: ValueKind) -> Tuple[Any, bool]:
        """
        Get a typed value together with a found flag.

        Args:
            key: Environment variable name
            kind: Target value kind

        Returns:
            (parsed value, True), or (zero value, False) when the variable
            is absent or malformed
        """
        return self._parse(key, kind)

    def require_string(self, key: str) -> str:
        """
        Get a text value that must be set.

        Args:
            key: Environment variable name

        Returns:
            Raw environment value, unchanged

        Raises:
            MissingEnvironmentVariableError: If the variable is not set
        """
        raw = self.provider.lookup(key)
        if raw is None:
            logger.error(f"Missing required environment variable {key}")
            raise MissingEnvironmentVariableError(key)
        return raw

    # Text

    def get_string(self, key: str, default: str) -> str:
        return self.get(key, default, ValueKind.STRING)

    def lookup_string(self, key: str) -> Tuple[str, bool]:
        return self.lookup(key, ValueKind.STRING)

    # Boolean

    def get_bool(self, key: str, default: bool) -> bool:
        return self.get(key, default, ValueKind.BOOL)

    def lookup_bool(self, key: str) -> Tuple[bool, bool]:
        return self.lookup(key, ValueKind.BOOL)

    # Integer

    def get_int(self, key: str, default: int) -> int:
        return self.get(key, default, ValueKind.INT)

    def lookup_int(self, key: str) -> Tuple[int, bool]:
        return self.lookup(key, ValueKind.INT)

    # Floating point

    def get_float32(self, key: str, default: float) -> np.float32:
        """Get a 32-bit float; a present value is narrowed, a default is returned as given."""
        return self.get(key, default, ValueKind.FLOAT32)

    def lookup_float32(self, key: str) -> Tuple[np.float32, bool]:
        return self.lookup(key, ValueKind.FLOAT32)

    def get_float64(self, key: str, default: float) -> float:
        return self.get(key, default, ValueKind.FLOAT64)

    def lookup_float64(self, key: str) -> Tuple[float, bool]:
        return self.lookup(key, ValueKind.FLOAT64)

    # Duration

    def get_duration(self, key: str, default: Any) -> Any:
        """
        Get a duration such as "1h30m" or "250ms".

        Args:
            key: Environment variable name
            default: Value returned when the variable is absent or malformed,
                typically a pandas.Timedelta or datetime.timedelta

        Returns:
            pandas.Timedelta parsed from the variable, or default unchanged
        """
        return self.get(key, default, ValueKind.DURATION)

    def lookup_duration(self, key: str) -> Tuple[pd.Timedelta, bool]:
        return self.lookup(key, ValueKind.DURATION)

    def __repr__(self) -> str:
        return f"EnvironmentAccessor(provider={self.provider!r})"
