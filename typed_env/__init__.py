"""
typed_env: typed access to process environment variables.
Reads environment variables and parses them into str, bool, int, float32,
float64 and duration values, with a default or a found flag.
"""

from typed_env.core import (
    ValueKind,
    EnvironmentProvider,
    TypedEnvError,
    MissingEnvironmentVariableError,
    ParseError,
    UnsupportedValueKindError,
    ConfigurationError,
    EnvironmentFileNotFoundError,
    LoggingConfig,
)
from typed_env.accessor import EnvironmentAccessor, infer_kind
from typed_env.providers import (
    OsEnvironmentProvider,
    MappingEnvironmentProvider,
    DotenvEnvironmentProvider,
    ChainedEnvironmentProvider,
)
from typed_env.env import (
    get_default_accessor,
    get_env,
    get_env_or_raise,
    lookup_env,
    get_env_bool,
    lookup_env_bool,
    get_env_int,
    lookup_env_int,
    get_env_float32,
    lookup_env_float32,
    get_env_float64,
    lookup_env_float64,
    get_env_duration,
    lookup_env_duration,
)
from typed_env.utils.logging import setup_logging

__version__ = "0.1.0"

__all__ = [
    "ValueKind",
    "EnvironmentProvider",
    "TypedEnvError",
    "MissingEnvironmentVariableError",
    "ParseError",
    "UnsupportedValueKindError",
    "ConfigurationError",
    "EnvironmentFileNotFoundError",
    "LoggingConfig",
    "EnvironmentAccessor",
    "infer_kind",
    "OsEnvironmentProvider",
    "MappingEnvironmentProvider",
    "DotenvEnvironmentProvider",
    "ChainedEnvironmentProvider",
    "get_default_accessor",
    "get_env",
    "get_env_or_raise",
    "lookup_env",
    "get_env_bool",
    "lookup_env_bool",
    "get_env_int",
    "lookup_env_int",
    "get_env_float32",
    "lookup_env_float32",
    "get_env_float64",
    "lookup_env_float64",
    "get_env_duration",
    "lookup_env_duration",
    "setup_logging",
]
