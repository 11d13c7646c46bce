"""Path arithmetic shared by the document and folder resolvers."""

from __future__ import annotations

import os
from pathlib import PurePath

from velfi.core.errors import PathRelationError


def join(*parts: str) -> str:
    """Join non-empty fragments and normalize the result; ``""`` if none."""

    kept = [p for p in parts if p]
    if not kept:
        return ""
    return os.path.normpath(os.path.join(*kept))


def to_absolute_folder(root: str, folder: str) -> str:
    """Anchor a root-relative folder at ``root``; absolute or empty folders pass through."""

    if folder and not os.path.isabs(folder):
        return join(root, folder)
    return folder


def relative_to(base: str, target: str) -> str:
    """Return ``target`` relative to ``base`` without touching the disk.

    Raises:
        PathRelationError: When only one of the paths is absolute (an empty
            base counts as relative) or the platform cannot relate them, such
            as paths on different Windows drives.
    """

    base = base or os.curdir
    target = target or os.curdir
    if os.path.isabs(base) != os.path.isabs(target):
        raise PathRelationError(f"cannot make {target!r} relative to {base!r}")
    try:
        return os.path.relpath(target, base)
    except ValueError as exc:
        raise PathRelationError(f"cannot make {target!r} relative to {base!r}: {exc}") from exc


def try_relative_to(base: str, target: str) -> str | None:
    """``relative_to`` that returns None instead of raising."""

    try:
        return relative_to(base, target)
    except PathRelationError:
        return None


def is_outside(relative_path: str) -> bool:
    """True iff the first segment of ``relative_path`` is the parent marker."""

    parts = PurePath(relative_path).parts
    return bool(parts) and parts[0] == os.pardir


def contained_relative(base: str, target: str) -> str | None:
    """Relative path of ``target`` when it lies inside ``base``, else None."""

    rel = try_relative_to(base, target)
    if rel is None or is_outside(rel):
        return None
    return rel


__all__ = [
    "join",
    "to_absolute_folder",
    "relative_to",
    "try_relative_to",
    "is_outside",
    "contained_relative",
]
