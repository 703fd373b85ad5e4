from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Optional

from arsenal.domain.errors import DirectoryCreateError, HomeResolutionError

HOME_ENV_VAR = "ARSENAL_HOME"

CONFIG_DIR_PARTS = (".config", "arsenal")
CONFIG_FILE_NAME = "config.json"
DEFAULT_DATA_DIR_NAME = ".nuke-arsenal"
DEFAULT_DATA_FILE_NAME = "commands.json"


def ensure_parent_dir(path: Path) -> Path:
    """
    Create the directory that will hold ``path`` (and any missing ancestors).

    Idempotent. Never creates the file itself.
    """
    directory = Path(path).parent
    try:
        directory.mkdir(mode=0o755, parents=True, exist_ok=True)
    except OSError as exc:
        raise DirectoryCreateError(f"Cannot create directory {directory}: {exc}", directory) from exc
    return directory


def atomic_write_text(path: Path, text: str) -> None:
    """
    Replace ``path`` with ``text`` in one step.

    The data goes to a temporary file in the same directory first and is then
    renamed over the target, so readers see either the old or the new document.
    """
    path = Path(path)
    tmp_name = None
    try:
        with tempfile.NamedTemporaryFile(
            "w", encoding="utf-8", dir=str(path.parent), prefix=f".{path.name}.", suffix=".tmp", delete=False
        ) as handle:
            tmp_name = handle.name
            handle.write(text)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(tmp_name, path)
    except OSError:
        if tmp_name and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise


class PathResolver:
    """
    Compute the canonical config and data locations under the user's home.

    Priority for the home directory:
    1. The ``home`` argument
    2. Environment variable ARSENAL_HOME
    3. ``Path.home()``
    """

    def __init__(self, home: Optional[Path] = None):
        self._home = Path(home).expanduser() if home is not None else None

    def home_dir(self) -> Path:
        if self._home is not None:
            return self._home

        env_home = os.environ.get(HOME_ENV_VAR)
        if env_home:
            return Path(env_home).expanduser()

        try:
            return Path.home()
        except (RuntimeError, KeyError) as exc:
            raise HomeResolutionError(f"Cannot determine the home directory: {exc}") from exc

    def config_dir(self) -> Path:
        return self.home_dir().joinpath(*CONFIG_DIR_PARTS)

    def config_path(self) -> Path:
        return self.config_dir() / CONFIG_FILE_NAME

    def default_data_dir(self) -> Path:
        return self.home_dir() / DEFAULT_DATA_DIR_NAME

    def default_data_path(self) -> Path:
        return self.default_data_dir() / DEFAULT_DATA_FILE_NAME

    def ensure_config_dir(self) -> Path:
        """Create the config directory if it does not exist yet."""
        config_dir = self.config_dir()
        ensure_parent_dir(config_dir / CONFIG_FILE_NAME)
        return config_dir

    def ensure_data_dir(self, data_path: Path) -> Path:
        """Create the directory that holds ``data_path``."""
        return ensure_parent_dir(Path(data_path))
