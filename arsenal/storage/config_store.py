from __future__ import annotations

import logging
import os

from pydantic import ValidationError

from arsenal.domain.errors import (
    ArsenalError,
    ConfigMissingError,
    ConfigReadError,
    ConfigWriteError,
)
from arsenal.domain.models import Config
from arsenal.storage.paths import PathResolver, atomic_write_text

logger = logging.getLogger(__name__)


class ConfigStore:
    """
    Reads and writes ``config.json``, the document naming the active data file.
    """

    def __init__(self, paths: PathResolver):
        self._paths = paths

    def has_config(self) -> bool:
        """True iff the config file exists and is readable. Never raises."""
        try:
            path = self._paths.config_path()
            return path.is_file() and os.access(path, os.R_OK)
        except (ArsenalError, OSError):
            return False

    def read_config(self) -> Config:
        path = self._paths.config_path()
        try:
            raw = path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise ConfigMissingError(f"No config found at {path}", path) from exc
        except OSError as exc:
            raise ConfigReadError(f"Cannot read config {path}: {exc}", path) from exc

        try:
            return Config.model_validate_json(raw)
        except ValidationError as exc:
            raise ConfigReadError(f"Malformed config {path}: {exc}", path) from exc

    def write_config(self, config: Config) -> None:
        """Overwrite the whole config document, creating its directory if needed."""
        self._paths.ensure_config_dir()
        path = self._paths.config_path()
        try:
            atomic_write_text(path, config.model_dump_json(by_alias=True, indent=2))
        except OSError as exc:
            raise ConfigWriteError(f"Cannot write config {path}: {exc}", path) from exc
        logger.info(f"Config written to {path} (dataPath={config.data_path})")
