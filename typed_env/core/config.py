"""Configuration for typed_env itself.

The library reads its own logging settings through an EnvironmentAccessor,
so the same parsing rules apply to them as to application variables.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from typed_env.core.constants import (
    DEFAULT_LOG_LEVEL,
    ENV_LOG_FILE,
    ENV_LOG_LEVEL,
    LOG_LEVELS,
)
from typed_env.core.exceptions import ConfigurationError

if TYPE_CHECKING:
    from typed_env.accessor import EnvironmentAccessor


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = DEFAULT_LOG_LEVEL
    log_file: Optional[str] = None

    def __post_init__(self):
        """Normalize and validate the level name."""
        if not isinstance(self.level, str):
            raise ConfigurationError(
                f"Log level must be a string, got {type(self.level).__name__}",
                details={"allowed": sorted(LOG_LEVELS)},
            )
        self.level = self.level.strip().upper()
        if self.level not in LOG_LEVELS:
            raise ConfigurationError(
                f"Unknown log level: {self.level}",
                details={"allowed": sorted(LOG_LEVELS)},
            )

    @classmethod
    def from_env(cls, accessor: Optional["EnvironmentAccessor"] = None) -> "LoggingConfig":
        """Create configuration from environment variables.

        Args:
            accessor: EnvironmentAccessor to read from; the process
                environment when omitted

        Returns:
            LoggingConfig instance

        Raises:
            ConfigurationError: If TYPED_ENV_LOG_LEVEL is not a known level
        """
        # typed_env.core imports this module before the accessor exists
        from typed_env.accessor import EnvironmentAccessor

        accessor = accessor or EnvironmentAccessor()
        log_file, found = accessor.lookup_string(ENV_LOG_FILE)
        return cls(
            level=accessor.get_string(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL),
            log_file=log_file if found and log_file else None,
        )

    def apply(self) -> None:
        """Install loguru sinks for this configuration."""
        from typed_env.utils.logging import setup_logging

        setup_logging(self)
