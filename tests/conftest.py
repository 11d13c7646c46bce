from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterable

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from velfi.core import logger as core_logger
from velfi.services.documents.base import IFileOps, IInteractionPort, LocalFileOps


class ScriptedDialogs(IInteractionPort):
    """Returns canned answers in order and records every prompt."""

    def __init__(
        self,
        files: Iterable[str | None] = (),
        directories: Iterable[str | None] = (),
        confirms: Iterable[bool] = (),
    ) -> None:
        self.files = list(files)
        self.directories = list(directories)
        self.confirms = list(confirms)
        self.calls: list[tuple] = []

    def pick_file(self, start_dir, *, title, initial_name=None):
        self.calls.append(("pick_file", start_dir, title))
        return self.files.pop(0)

    def pick_directory(self, start_dir, *, title):
        self.calls.append(("pick_directory", start_dir, title))
        return self.directories.pop(0)

    def confirm(self, title, message):
        self.calls.append(("confirm", title, message))
        return self.confirms.pop(0)

    def kinds(self) -> list[str]:
        return [call[0] for call in self.calls]


class RecordingFileOps(IFileOps):
    """Delegates to the local disk and records mutating calls."""

    def __init__(self) -> None:
        self.inner = LocalFileOps()
        self.copies: list[tuple[str, str]] = []
        self.created: list[str] = []

    def exists(self, path):
        return self.inner.exists(path)

    def make_dirs(self, path):
        self.created.append(path)
        self.inner.make_dirs(path)

    def copy(self, src, dst):
        self.copies.append((src, dst))
        self.inner.copy(src, dst)


@pytest.fixture(autouse=True)
def _isolated_dirs(tmp_path_factory, monkeypatch):
    """Keep logs and settings out of the real home directory."""

    base = tmp_path_factory.mktemp("velfi-home")
    monkeypatch.setenv("VELFI_HOME", str(base / "work"))
    monkeypatch.setenv("VELFI_CONFIG_DIR", str(base / "config"))
    core_logger.reset_logger()
    yield
    core_logger.reset_logger()


@pytest.fixture()
def files() -> RecordingFileOps:
    return RecordingFileOps()


@pytest.fixture()
def docroot(tmp_path) -> Path:
    root = tmp_path / "docs"
    root.mkdir()
    return root


@pytest.fixture()
def outside_file(tmp_path) -> Path:
    src_dir = tmp_path / "downloads"
    src_dir.mkdir()
    src = src_dir / "statement.pdf"
    src.write_bytes(b"%PDF-1.4 statement")
    return src


@pytest.fixture()
def scripted():
    """Factory for ScriptedDialogs: ``scripted(files=[...], confirms=[...])``."""

    return ScriptedDialogs
