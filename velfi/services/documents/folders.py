"""Assign or create the document folder of an entity."""

from __future__ import annotations

from velfi.core.logger import get_logger

from .base import IFileOps, IInteractionPort
from .naming import sanitize_name
from .paths import contained_relative, join, to_absolute_folder


SELECT_FOLDER_TITLE = "Select Document Folder"
CREATE_TITLE = "Create Folder"


class FolderResolver:
    """Pick an existing folder or create one named after the entity.

    Results are relative to the document root unless the user navigated
    outside it, in which case the absolute path is returned. Nothing is
    created without an explicit yes from the user.
    """

    def __init__(self, dialogs: IInteractionPort, files: IFileOps, *, logger=None) -> None:
        self.dialogs = dialogs
        self.files = files
        self.logger = logger or get_logger("documents")

    def choose_or_create(self, root: str, current: str, suggested_name: str) -> str:
        if current:
            return self._pick(root, to_absolute_folder(root, current), on_cancel=current)

        sanitized = sanitize_name(suggested_name)
        if not sanitized:
            return self._pick(root, root)

        candidate = join(root, sanitized)
        if self.files.exists(candidate):
            return self._pick(root, candidate)

        if self.dialogs.confirm(CREATE_TITLE, f"Create folder '{sanitized}'?"):
            self.files.make_dirs(candidate)
            self.logger.debug("documents.folder created path=%s", candidate)
            return sanitized

        return self._pick(root, root)

    def _pick(self, root: str, start_dir: str, *, on_cancel: str = "") -> str:
        picked = self.dialogs.pick_directory(start_dir, title=SELECT_FOLDER_TITLE)
        if not picked:
            return on_cancel
        rel = contained_relative(root, picked)
        if rel is None:
            self.logger.debug("documents.folder outside_root picked=%s", picked)
            return picked
        return rel


def choose_or_create_folder(
    root: str,
    current: str,
    suggested_name: str,
    *,
    dialogs: IInteractionPort,
    files: IFileOps,
    logger=None,
) -> str:
    """Functional entry point for ``FolderResolver.choose_or_create``."""

    return FolderResolver(dialogs, files, logger=logger).choose_or_create(root, current, suggested_name)


__all__ = ["FolderResolver", "choose_or_create_folder", "CREATE_TITLE", "SELECT_FOLDER_TITLE"]
