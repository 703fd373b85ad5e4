from __future__ import annotations

import logging
import threading
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional

from arsenal.domain.errors import StoreReadError
from arsenal.domain.models import Command, CommandsFile, Config, Group, SearchResult
from arsenal.storage.command_store import CommandStore
from arsenal.storage.config_store import ConfigStore
from arsenal.storage.paths import PathResolver

logger = logging.getLogger(__name__)


class ArsenalService:
    """
    Façade over the config and command stores used by the presentation layer.

    Every mutation is a full read-modify-write of the command store. Operations
    on a group key that does not exist, or on a command id that is not in the
    group, are silent no-ops rather than errors.
    """

    def __init__(self, paths: PathResolver, config_store: ConfigStore, command_store: CommandStore):
        self._paths = paths
        self._config_store = config_store
        self._command_store = command_store
        self._data_path: Optional[Path] = None
        # Guards the lazy data path and each read-modify-write cycle.
        self._lock = threading.RLock()

    @property
    def data_path(self) -> Optional[Path]:
        return self._data_path

    # --- Config ---

    def has_config(self) -> bool:
        return self._config_store.has_config()

    def get_config(self) -> Config:
        return self._config_store.read_config()

    def set_data_path(self, path) -> None:
        """Point the config at ``path`` and make it the active data file."""
        with self._lock:
            self._config_store.write_config(Config(data_path=str(path)))
            self._data_path = Path(path)
        logger.info(f"Active data path set to {path}")

    def initialize_default(self) -> Path:
        """
        Bootstrap the default data file if the app is not configured yet.

        Returns the active data path. An existing config is adopted as-is, and
        an existing readable store file is never overwritten.
        """
        with self._lock:
            if self._config_store.has_config():
                config = self._config_store.read_config()
                self._data_path = Path(config.data_path)
                logger.debug(f"Config already present, using {self._data_path}")
                return self._data_path

            default_path = self._paths.default_data_path()
            self._paths.ensure_data_dir(default_path)

            try:
                self._command_store.read_commands(default_path)
                logger.info(f"Reusing existing command store at {default_path}")
            except StoreReadError:
                self._command_store.write_commands(default_path, CommandsFile(groups={}))
                logger.info(f"Created empty command store at {default_path}")

            self.set_data_path(default_path)
            return default_path

    def _ensure_data_path(self) -> None:
        # Without a config the active path simply stays unset.
        with self._lock:
            if self._data_path is None and self._config_store.has_config():
                self._data_path = Path(self._config_store.read_config().data_path)

    # --- Commands ---

    def get_commands(self) -> CommandsFile:
        with self._lock:
            self._ensure_data_path()
            if self._data_path is None:
                raise StoreReadError("No data path configured", missing=True)
            return self._command_store.read_commands(self._data_path)

    def get_groups(self) -> Dict[str, Group]:
        return self.get_commands().groups

    def _save(self, commands: CommandsFile) -> None:
        self._command_store.write_commands(self._data_path, commands)

    def add_group(self, key: str, name: str, icon: str, description: str) -> None:
        """Create the group at ``key``, replacing any existing group and its commands."""
        with self._lock:
            commands = self.get_commands()
            replaced = key in commands.groups
            commands.groups[key] = Group(name=name, icon=icon, description=description, commands=[])
            self._save(commands)
        logger.info(f"{'Replaced' if replaced else 'Added'} group '{key}'")

    def delete_group(self, key: str) -> None:
        with self._lock:
            commands = self.get_commands()
            removed = commands.groups.pop(key, None)
            self._save(commands)
        if removed is None:
            logger.debug(f"delete_group: group '{key}' not found")
        else:
            logger.info(f"Deleted group '{key}'")

    def add_command(
        self,
        group_key: str,
        cmd: str,
        description: str,
        output: str,
        note: str,
        tags: List[str],
    ) -> None:
        with self._lock:
            commands = self.get_commands()
            group = commands.groups.get(group_key)
            if group is None:
                logger.debug(f"add_command: group '{group_key}' not found, nothing to do")
                return

            next_id = max((c.id for c in group.commands), default=0) + 1
            group.commands.append(
                Command(
                    id=next_id,
                    cmd=cmd,
                    description=description,
                    output=output,
                    note=note,
                    tags=list(tags or []),
                    created=datetime.now().astimezone(),
                )
            )
            self._save(commands)
        logger.info(f"Added command {next_id} to group '{group_key}'")

    def update_command(
        self,
        group_key: str,
        command_id: int,
        cmd: str,
        description: str,
        output: str,
        note: str,
        tags: List[str],
    ) -> None:
        """Overwrite the mutable fields of a command. ``id`` and ``created`` are kept."""
        with self._lock:
            commands = self.get_commands()
            group = commands.groups.get(group_key)
            if group is None:
                logger.debug(f"update_command: group '{group_key}' not found, nothing to do")
                return

            target = next((c for c in group.commands if c.id == command_id), None)
            if target is not None:
                target.cmd = cmd
                target.description = description
                target.output = output
                target.note = note
                target.tags = list(tags or [])
                logger.info(f"Updated command {command_id} in group '{group_key}'")
            else:
                logger.debug(f"update_command: id {command_id} not in group '{group_key}'")

            self._save(commands)

    def delete_command(self, group_key: str, command_id: int) -> None:
        with self._lock:
            commands = self.get_commands()
            group = commands.groups.get(group_key)
            if group is None:
                logger.debug(f"delete_command: group '{group_key}' not found, nothing to do")
                return

            for i, c in enumerate(group.commands):
                if c.id == command_id:
                    del group.commands[i]
                    logger.info(f"Deleted command {command_id} from group '{group_key}'")
                    break
            else:
                logger.debug(f"delete_command: id {command_id} not in group '{group_key}'")

            self._save(commands)

    # --- Search ---

    def search(self, query: str) -> List[SearchResult]:
        """
        Case-insensitive substring search over command text, description and tags.

        Groups are visited in key order, commands in stored order. An empty
        query matches every command.
        """
        commands = self.get_commands()
        needle = (query or "").casefold()

        results: List[SearchResult] = []
        for group_key, group in sorted(commands.groups.items()):
            for command in group.commands:
                if _matches(command, needle):
                    results.append(SearchResult(group_key=group_key, group_name=group.name, command=command))

        logger.debug(f"search({query!r}) -> {len(results)} results")
        return results


def _matches(command: Command, needle: str) -> bool:
    return (
        needle in command.cmd.casefold()
        or needle in command.description.casefold()
        or any(needle in tag.casefold() for tag in command.tags)
    )
