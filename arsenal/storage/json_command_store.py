from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from arsenal.domain.errors import StoreReadError, StoreWriteError
from arsenal.domain.models import CommandsFile
from arsenal.storage.command_store import CommandStore
from arsenal.storage.paths import atomic_write_text, ensure_parent_dir

logger = logging.getLogger(__name__)


class JsonCommandStore(CommandStore):
    def read_commands(self, path: Path) -> CommandsFile:
        path = Path(path)
        try:
            raw = path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise StoreReadError(f"Command store {path} does not exist", path, missing=True) from exc
        except OSError as exc:
            raise StoreReadError(f"Cannot read command store {path}: {exc}", path) from exc

        try:
            commands = CommandsFile.model_validate_json(raw)
        except ValidationError as exc:
            raise StoreReadError(f"Malformed command store {path}: {exc}", path) from exc

        logger.debug(f"Loaded {len(commands.groups)} groups from {path}")
        return commands

    def write_commands(self, path: Path, commands: CommandsFile) -> None:
        path = Path(path)
        ensure_parent_dir(path)
        try:
            atomic_write_text(path, commands.model_dump_json(by_alias=True, indent=2))
        except OSError as exc:
            raise StoreWriteError(f"Cannot write command store {path}: {exc}", path) from exc
        logger.debug(f"Wrote {len(commands.groups)} groups to {path}")
