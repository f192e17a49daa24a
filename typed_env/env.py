"""
Environment variable utilities.
Module-level shortcuts over an EnvironmentAccessor bound to the process
environment.
"""

from typing import Any, Tuple

import numpy as np
import pandas as pd

from typed_env.accessor import EnvironmentAccessor

_default_accessor = EnvironmentAccessor()


def get_default_accessor() -> EnvironmentAccessor:
    """Return the accessor used by the module-level functions."""
    return _default_accessor


def get_env(key: str, default: str) -> str:
    """
    Get environment variable with default.

    Args:
        key: Environment variable name
        default: Default value if not set

    Returns:
        Environment variable value or default
    """
    return _default_accessor.get_string(key, default)


def get_env_or_raise(key: str) -> str:
    """
    Get environment variable or raise error if not set.

    Args:
        key: Environment variable name

    Returns:
        Environment variable value

    Raises:
        MissingEnvironmentVariableError: If environment variable is not set
    """
    return _default_accessor.require_string(key)


def lookup_env(key: str) -> Tuple[str, bool]:
    """Get environment variable and whether it is set."""
    return _default_accessor.lookup_string(key)


def get_env_bool(key: str, default: bool) -> bool:
    """
    Get environment variable as boolean.

    Args:
        key: Environment variable name
        default: Default value if not set or not a boolean literal

    Returns:
        Boolean value
    """
    return _default_accessor.get_bool(key, default)


def lookup_env_bool(key: str) -> Tuple[bool, bool]:
    return _default_accessor.lookup_bool(key)


def get_env_int(key: str, default: int) -> int:
    """
    Get environment variable as integer.

    Args:
        key: Environment variable name
        default: Default value if not set or not a base-10 integer

    Returns:
        Integer value
    """
    return _default_accessor.get_int(key, default)


def lookup_env_int(key: str) -> Tuple[int, bool]:
    return _default_accessor.lookup_int(key)


def get_env_float32(key: str, default: float) -> np.float32:
    return _default_accessor.get_float32(key, default)


def lookup_env_float32(key: str) -> Tuple[np.float32, bool]:
    return _default_accessor.lookup_float32(key)


def get_env_float64(key: str, default: float) -> float:
    return _default_accessor.get_float64(key, default)


def lookup_env_float64(key: str) -> Tuple[float, bool]:
    return _default_accessor.lookup_float64(key)


def get_env_duration(key: str, default: Any) -> Any:
    """
    Get environment variable as a duration ("90s", "1h30m", "250ms").

    Args:
        key: Environment variable name
        default: Default value if not set or not a duration literal

    Returns:
        pandas.Timedelta or default
    """
    return _default_accessor.get_duration(key, default)


def lookup_env_duration(key: str) -> Tuple[pd.Timedelta, bool]:
    return _default_accessor.lookup_duration(key)
