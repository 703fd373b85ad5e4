from typing import Optional
import threading

from arsenal.storage.paths import PathResolver
from arsenal.storage.config_store import ConfigStore
from arsenal.storage.command_store import CommandStore
from arsenal.storage.json_command_store import JsonCommandStore
from arsenal.services.arsenal_service import ArsenalService

_lock = threading.Lock()
_path_resolver: Optional[PathResolver] = None
_command_store: Optional[CommandStore] = None
_arsenal_service: Optional[ArsenalService] = None


def get_path_resolver() -> PathResolver:
    global _path_resolver
    with _lock:
        if _path_resolver is None:
            # Home directory is resolved on each call, honouring ARSENAL_HOME.
            _path_resolver = PathResolver()
        return _path_resolver


def get_command_store() -> CommandStore:
    global _command_store
    with _lock:
        if _command_store is None:
            _command_store = JsonCommandStore()
        return _command_store


def get_arsenal_service() -> ArsenalService:
    global _arsenal_service
    paths = get_path_resolver()
    store = get_command_store()
    with _lock:
        if _arsenal_service is None:
            _arsenal_service = ArsenalService(paths, ConfigStore(paths), store)
        return _arsenal_service


def reset_dependencies() -> None:
    """Drop the cached singletons so the next call rebuilds them."""
    global _path_resolver, _command_store, _arsenal_service
    with _lock:
        _path_resolver = None
        _command_store = None
        _arsenal_service = None
