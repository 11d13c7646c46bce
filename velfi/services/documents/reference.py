"""Tagged document references and the legacy read-side heuristic.

Entities store references as plain strings. The string alone does not say
whether it is relative to the entity's document folder, relative to the
document root, or absolute; ``DocumentReference`` carries that tag alongside
the exact legacy string so callers can persist either form.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from enum import Enum

from .base import IFileOps
from .paths import join, to_absolute_folder

_URL_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*://")


class ReferenceBase(str, Enum):
    """What a reference path is relative to."""

    FOLDER = "folder"
    ROOT = "root"
    ABSOLUTE = "absolute"


@dataclass(frozen=True, slots=True)
class DocumentReference:
    """A document path plus the base it must be joined with."""

    base: ReferenceBase
    path: str

    def __str__(self) -> str:
        return self.path

    @classmethod
    def folder(cls, path: str) -> "DocumentReference":
        return cls(ReferenceBase.FOLDER, path)

    @classmethod
    def root(cls, path: str) -> "DocumentReference":
        return cls(ReferenceBase.ROOT, path)

    @classmethod
    def absolute(cls, path: str) -> "DocumentReference":
        return cls(ReferenceBase.ABSOLUTE, path)

    def resolve(self, root: str, folder: str) -> str:
        """Return the location this reference points to."""

        if self.base is ReferenceBase.FOLDER:
            return join(to_absolute_folder(root, folder), self.path)
        if self.base is ReferenceBase.ROOT:
            return join(root, self.path)
        return self.path


def is_url(value: str) -> bool:
    return bool(_URL_RE.match(value))


def resolve_stored_reference(
    stored: str,
    root: str,
    folder: str,
    *,
    files: IFileOps,
) -> DocumentReference | None:
    """Recover the tag of an untagged stored string.

    Tries relative-to-folder, then relative-to-root, and otherwise treats the
    string as absolute. A candidate only wins when it exists on disk. URLs and
    absolute paths are returned as absolute. Empty strings give None.
    """

    if not stored:
        return None
    if is_url(stored) or os.path.isabs(stored):
        return DocumentReference.absolute(stored)
    abs_folder = to_absolute_folder(root, folder)
    if abs_folder and files.exists(join(abs_folder, stored)):
        return DocumentReference.folder(stored)
    if root and files.exists(join(root, stored)):
        return DocumentReference.root(stored)
    return DocumentReference.absolute(stored)


__all__ = [
    "DocumentReference",
    "ReferenceBase",
    "is_url",
    "resolve_stored_reference",
]
