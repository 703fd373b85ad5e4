"""
Shared pytest configuration and fixtures for all tests.
"""
import pytest

from arsenal.domain.models import CommandsFile
from arsenal.services.arsenal_service import ArsenalService
from arsenal.storage.config_store import ConfigStore
from arsenal.storage.json_command_store import JsonCommandStore
from arsenal.storage.paths import HOME_ENV_VAR, PathResolver


@pytest.fixture
def home(tmp_path, monkeypatch):
    """Temporary home directory; the real one is never touched."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv(HOME_ENV_VAR, str(home_dir))
    return home_dir


@pytest.fixture
def paths(home):
    return PathResolver(home)


@pytest.fixture
def config_store(paths):
    return ConfigStore(paths)


@pytest.fixture
def command_store():
    return JsonCommandStore()


@pytest.fixture
def service(paths, config_store, command_store):
    return ArsenalService(paths, config_store, command_store)


@pytest.fixture
def initialized_service(service):
    """Service bootstrapped with the default (empty) data file."""
    service.initialize_default()
    return service


@pytest.fixture
def tools_service(initialized_service):
    """Service with a 'tools' group holding commands 1, 2 and 3."""
    initialized_service.add_group("tools", "Tools", "wrench", "Everyday tools")
    initialized_service.add_command("tools", "ls -la", "List all files", "", "", ["fs", "Listing"])
    initialized_service.add_command("tools", "grep -rn TODO .", "Find TODOs", "", "recursive", ["search"])
    initialized_service.add_command("tools", "df -h", "Disk usage", "Filesystem Size", "", [])
    return initialized_service


@pytest.fixture
def read_store(command_store):
    """Read the active data file straight from disk, bypassing the service."""
    def _read(service) -> CommandsFile:
        return command_store.read_commands(service.data_path)
    return _read
