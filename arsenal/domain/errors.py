"""
Error taxonomy for the data-management layer.

Storage components raise these and never swallow them; the service lets them
propagate unchanged to the presentation layer.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

PathLike = Union[str, Path]


class ArsenalError(Exception):
    """Base class for every error raised by the arsenal core."""

    def __init__(self, message: str, path: Optional[PathLike] = None):
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class HomeResolutionError(ArsenalError):
    """The user's home directory could not be determined."""


class DirectoryCreateError(ArsenalError):
    """A directory (or one of its ancestors) could not be created."""


class ConfigError(ArsenalError):
    """Base class for config document errors."""


class ConfigMissingError(ConfigError):
    """No config document exists yet."""


class ConfigReadError(ConfigError):
    """The config document exists but is unreadable or malformed."""


class ConfigWriteError(ConfigError):
    """The config document could not be written."""


class StoreError(ArsenalError):
    """Base class for command store errors."""


class StoreReadError(StoreError):
    """The command store is missing, unreadable or malformed."""

    def __init__(self, message: str, path: Optional[PathLike] = None, missing: bool = False):
        super().__init__(message, path)
        self.missing = missing


class StoreWriteError(StoreError):
    """The command store could not be written."""
