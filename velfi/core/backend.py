from __future__ import annotations

import os
from pathlib import Path
from typing import Callable

from velfi import __version__
from velfi.services.dialogs.base import CSV_FILTERS, PORTFOLIO_FILTERS, IAppDialogs
from velfi.services.documents import (
    DocumentChooser,
    DocumentReference,
    FolderResolver,
    IFileOps,
    LocalFileOps,
    relative_to,
    resolve_stored_reference,
    sanitize_name,
)
from velfi.services.opener import open_external

from .logger import get_logger
from .settings import AppConfig, config_path, load_config, save_config


EventEmitter = Callable[[str], None]

BEFORE_CLOSE_EVENT = "app:beforeclose"
DEFAULT_PORTFOLIO_NAME = "portfolio.velfi"


class Backend:
    """Operations the UI calls: files, dialogs, settings and document references.

    One instance lives for the whole process. Besides the injected dialogs and
    file primitives its only state is the ``quitting`` flag that turns the
    first close request into a confirmation round-trip with the UI.
    """

    def __init__(
        self,
        dialogs: IAppDialogs,
        files: IFileOps | None = None,
        *,
        emit: EventEmitter | None = None,
        config_file: str | Path | None = None,
        logger=None,
    ) -> None:
        self.logger = logger or get_logger()
        self.dialogs = dialogs
        self.files = files or LocalFileOps()
        self.emit_cb = emit
        self.config_file = Path(config_file) if config_file else None
        self.quitting = False

    # ------------------------------------------------------------------
    def emit(self, event: str) -> None:
        self.logger.debug("backend.emit event=%s", event)
        if self.emit_cb is not None:
            self.emit_cb(event)

    def before_close(self) -> bool:
        """Return True to veto the close and let the UI confirm first."""

        if self.quitting:
            return False
        self.request_close()
        return True

    def request_close(self) -> None:
        self.quitting = True
        self.emit(BEFORE_CLOSE_EVENT)

    def reset_close(self) -> None:
        """The UI cancelled the quit (user chose "No")."""

        self.quitting = False

    # ------------------------------------------------------------------
    def get_version(self) -> str:
        return __version__

    def read_file(self, path: str) -> str:
        return Path(path).read_text(encoding="utf-8")

    def write_file(self, path: str, content: str) -> None:
        Path(path).write_text(content, encoding="utf-8")
        self.logger.info("backend.write_file path=%s bytes=%d", path, len(content))

    def file_exists(self, path: str) -> bool:
        """Like ``os.path.exists`` but errors other than "not found" propagate."""

        try:
            os.stat(path)
        except FileNotFoundError:
            return False
        return True

    def create_directory(self, path: str) -> None:
        self.files.make_dirs(path)

    def copy_file(self, src: str, dst: str) -> None:
        self.files.copy(src, dst)

    def relative_path(self, base: str, target: str) -> str:
        return relative_to(base, target)

    def dir_of_file(self, path: str) -> str:
        return os.path.dirname(path) or os.curdir

    def open_external(self, path: str) -> None:
        self.logger.info("backend.open_external path=%s", path)
        open_external(path)

    # ------------------------------------------------------------------
    def open_file_dialog(self) -> str:
        return self.dialogs.open_file(title="Open Portfolio", filters=PORTFOLIO_FILTERS) or ""

    def save_file_dialog(self) -> str:
        return (
            self.dialogs.save_file(
                title="Save Portfolio As",
                default_name=DEFAULT_PORTFOLIO_NAME,
                filters=PORTFOLIO_FILTERS,
            )
            or ""
        )

    def save_csv_dialog(self, default_filename: str) -> str:
        return self.dialogs.save_file(title="Export CSV", default_name=default_filename, filters=CSV_FILTERS) or ""

    def confirm_dialog(self, title: str, message: str) -> bool:
        return self.dialogs.confirm(title, message)

    def open_directory_dialog(self) -> str:
        return self.dialogs.pick_directory("", title="Select Document Folder") or ""

    def select_document_dialog(self) -> str:
        return self.dialogs.pick_file("", title="Select Document") or ""

    # ------------------------------------------------------------------
    def sanitize_name(self, name: str) -> str:
        return sanitize_name(name)

    def choose_document_reference(
        self, docroot: str, docfolder: str, suggested_name: str | None = None
    ) -> DocumentReference | None:
        return DocumentChooser(self.dialogs, self.files, logger=self.logger).choose(
            docroot, docfolder, suggested_name
        )

    def choose_document(self, docroot: str, docfolder: str) -> str:
        """Legacy string form of ``choose_document_reference``; "" when cancelled."""

        ref = self.choose_document_reference(docroot, docfolder)
        return str(ref) if ref is not None else ""

    def choose_or_create_folder(self, docroot: str, current_value: str, suggested_name: str) -> str:
        return FolderResolver(self.dialogs, self.files, logger=self.logger).choose_or_create(
            docroot, current_value, suggested_name
        )

    def resolve_document(self, stored: str, docroot: str, docfolder: str) -> str:
        """Location of a stored reference, or "" when nothing is stored."""

        ref = resolve_stored_reference(stored, docroot, docfolder, files=self.files)
        if ref is None:
            return ""
        return ref.resolve(docroot, docfolder)

    # ------------------------------------------------------------------
    def load_config(self) -> AppConfig:
        return load_config(self.config_file)

    def save_config(self, config: AppConfig) -> None:
        path = save_config(config, self.config_file)
        self.logger.info("backend.save_config path=%s", path)

    def get_config_path(self) -> str:
        return str(self.config_file or config_path())
