from __future__ import annotations

import os
import shutil
from abc import ABC, abstractmethod


class IInteractionPort(ABC):
    """Interface for asking the user to pick paths or answer yes/no.

    Pickers return ``None`` when the user cancels; that is not an error.
    Failures of the dialog layer itself raise ``InteractionError``.
    """

    @abstractmethod
    def pick_file(self, start_dir: str, *, title: str, initial_name: str | None = None) -> str | None:
        """Return the chosen file path, or None if cancelled."""

    @abstractmethod
    def pick_directory(self, start_dir: str, *, title: str) -> str | None:
        """Return the chosen directory path, or None if cancelled."""

    @abstractmethod
    def confirm(self, title: str, message: str) -> bool:
        """Return True when the user answers yes."""


class IFileOps(ABC):
    """Interface for the few filesystem primitives the resolvers need."""

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Return True if a file or directory exists at path."""

    @abstractmethod
    def make_dirs(self, path: str) -> None:
        """Create path and any missing parents."""

    @abstractmethod
    def copy(self, src: str, dst: str) -> None:
        """Copy src to dst, replacing dst if present."""


class LocalFileOps(IFileOps):
    """IFileOps on the local disk. OSError propagates unchanged."""

    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    def make_dirs(self, path: str) -> None:
        os.makedirs(path, mode=0o755, exist_ok=True)

    def copy(self, src: str, dst: str) -> None:
        shutil.copyfile(src, dst)
