"""Document root/folder resolution for portfolio entities."""

from .base import IFileOps, IInteractionPort, LocalFileOps
from .chooser import DocumentChooser, choose_document
from .folders import FolderResolver, choose_or_create_folder
from .naming import sanitize_name
from .paths import is_outside, relative_to
from .reference import DocumentReference, ReferenceBase, resolve_stored_reference

__all__ = [
    "DocumentChooser",
    "DocumentReference",
    "FolderResolver",
    "IFileOps",
    "IInteractionPort",
    "LocalFileOps",
    "ReferenceBase",
    "choose_document",
    "choose_or_create_folder",
    "is_outside",
    "relative_to",
    "resolve_stored_reference",
    "sanitize_name",
]
