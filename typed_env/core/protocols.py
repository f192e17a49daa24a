"""Protocol definitions (interfaces) for typed_env.

The accessor depends on this interface instead of ``os.environ`` so it
can be exercised against an in-memory fake.
"""

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class EnvironmentProvider(Protocol):
    """Read-only source of environment variables."""

    def lookup(self, key: str) -> Optional[str]:
        """Return the raw value for key.

        Args:
            key: Environment variable name

        Returns:
            Raw text, or None if the variable is not set
        """
        ...
