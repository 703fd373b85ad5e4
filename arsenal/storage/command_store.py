from abc import ABC, abstractmethod
from pathlib import Path

from arsenal.domain.models import CommandsFile


class CommandStore(ABC):
    """
    Abstract base class for command store persistence.

    Implementations keep no cache: every read parses the document again and
    every write replaces the whole document.
    """

    @abstractmethod
    def read_commands(self, path: Path) -> CommandsFile:
        """
        Load the complete document at ``path``.
        Raises StoreReadError if it is missing or malformed.
        """
        pass

    @abstractmethod
    def write_commands(self, path: Path, commands: CommandsFile) -> None:
        """
        Replace the document at ``path`` with ``commands``, creating parent
        directories as needed. Raises StoreWriteError on I/O failure.
        """
        pass
