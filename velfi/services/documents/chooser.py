"""Attach a user-picked file to an entity's document folder."""

from __future__ import annotations

import os

from velfi.core.errors import PathRelationError
from velfi.core.logger import get_logger

from .base import IFileOps, IInteractionPort
from .paths import is_outside, join, relative_to, to_absolute_folder, try_relative_to
from .reference import DocumentReference


SELECT_DOCUMENT_TITLE = "Select Document"
COPY_TITLE = "Copy Document"
COPY_MESSAGE = "Copy file to asset folder?"


class DocumentChooser:
    """Resolve a picked file against a document root/folder pair.

    Files picked inside the folder are referenced relative to it. Files
    outside it may be copied in after confirmation; the copy replaces any
    file of the same name already in the folder without asking.
    """

    def __init__(self, dialogs: IInteractionPort, files: IFileOps, *, logger=None) -> None:
        self.dialogs = dialogs
        self.files = files
        self.logger = logger or get_logger("documents")

    def choose(
        self,
        root: str,
        folder: str,
        suggested_name: str | None = None,
    ) -> DocumentReference | None:
        """Ask for a file and return how to reference it, or None if cancelled."""

        abs_folder = to_absolute_folder(root, folder)
        start_dir = abs_folder or root

        picked = self.dialogs.pick_file(start_dir, title=SELECT_DOCUMENT_TITLE, initial_name=suggested_name)
        if not picked:
            self.logger.debug("documents.choose cancelled start_dir=%s", start_dir)
            return None

        if not abs_folder:
            rel = try_relative_to(root, picked)
            if rel is None:
                return DocumentReference.absolute(picked)
            return DocumentReference.root(rel)

        try:
            rel = relative_to(abs_folder, picked)
        except PathRelationError:
            rel = None
        if rel is not None and not is_outside(rel):
            self.logger.debug("documents.choose inside folder=%s ref=%s", abs_folder, rel)
            return DocumentReference.folder(rel)

        if not self.dialogs.confirm(COPY_TITLE, COPY_MESSAGE):
            self.logger.debug("documents.choose copy_declined picked=%s", picked)
            if rel is None:
                return DocumentReference.absolute(picked)
            return DocumentReference.folder(rel)

        self.files.make_dirs(abs_folder)
        basename = os.path.basename(picked)
        dst = join(abs_folder, basename)
        self.logger.debug("documents.choose copy src=%s dst=%s", picked, dst)
        self.files.copy(picked, dst)
        return DocumentReference.folder(basename)


def choose_document(
    root: str,
    folder: str,
    suggested_name: str | None = None,
    *,
    dialogs: IInteractionPort,
    files: IFileOps,
    logger=None,
) -> DocumentReference | None:
    """Functional entry point for ``DocumentChooser.choose``."""

    return DocumentChooser(dialogs, files, logger=logger).choose(root, folder, suggested_name)


__all__ = ["DocumentChooser", "choose_document", "COPY_TITLE", "COPY_MESSAGE", "SELECT_DOCUMENT_TITLE"]
