"""
Environment providers.
Read-only key/value sources the accessor reads raw values from.
"""

import os
from pathlib import Path
from typing import Dict, Mapping, Optional, Union

from dotenv import dotenv_values
from loguru import logger

from typed_env.core.exceptions import EnvironmentFileNotFoundError
from typed_env.core.protocols import EnvironmentProvider


class OsEnvironmentProvider:
    """Provider backed by the live process environment."""

    def lookup(self, key: str) -> Optional[str]:
        return os.environ.get(key)

    def __repr__(self) -> str:
        return "OsEnvironmentProvider()"


class MappingEnvironmentProvider:
    """Provider backed by an in-memory mapping.

    The mapping is copied on construction, so later changes to the
    caller's dictionary are not observed.
    """

    def __init__(self, values: Optional[Mapping[str, str]] = None):
        self._values: Dict[str, str] = dict(values or {})

    def lookup(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def __repr__(self) -> str:
        return f"MappingEnvironmentProvider(keys={sorted(self._values)})"


class DotenvEnvironmentProvider:
    """Provider backed by a .env file.

    The file is read once with python-dotenv when the provider is created.
    Variable interpolation is disabled, and keys declared without a value
    are treated as absent.
    """

    def __init__(self, path: Union[str, Path], encoding: str = "utf-8"):
        """
        Load a .env file.

        Args:
            path: Path to the .env file
            encoding: File encoding

        Raises:
            EnvironmentFileNotFoundError: If the file does not exist
        """
        self.path = Path(path)
        if not self.path.is_file():
            raise EnvironmentFileNotFoundError(str(self.path))

        loaded = dotenv_values(self.path, interpolate=False, encoding=encoding)
        self._values: Dict[str, str] = {
            key: value for key, value in loaded.items() if value is not None
        }
        logger.info(f"Loaded {len(self._values)} variables from {self.path}")

    def lookup(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def __repr__(self) -> str:
        return f"DotenvEnvironmentProvider(path={str(self.path)!r})"


class ChainedEnvironmentProvider:
    """Provider that asks several providers in order.

    The first provider that has a value for the key wins. A typical
    chain puts the process environment in front of a .env file.
    """

    def __init__(self, *providers: EnvironmentProvider):
        self.providers = tuple(providers)

    def lookup(self, key: str) -> Optional[str]:
        for provider in self.providers:
            value = provider.lookup(key)
            if value is not None:
                return value
        return None

    def __repr__(self) -> str:
        inner = ", ".join(repr(provider) for provider in self.providers)
        return f"ChainedEnvironmentProvider({inner})"
