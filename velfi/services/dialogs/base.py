from __future__ import annotations

from abc import abstractmethod
from typing import Sequence, Tuple

from velfi.services.documents.base import IInteractionPort


FileFilter = Tuple[str, str]

PORTFOLIO_FILTERS: tuple[FileFilter, ...] = (
    ("Velfi Files (*.velfi)", "*.velfi"),
    ("All Files (*.*)", "*.*"),
)
CSV_FILTERS: tuple[FileFilter, ...] = (
    ("CSV Files (*.csv)", "*.csv"),
    ("All Files (*.*)", "*.*"),
)


class IAppDialogs(IInteractionPort):
    """Dialogs needed by the application shell on top of the resolver ones."""

    @abstractmethod
    def open_file(self, *, title: str, filters: Sequence[FileFilter] = ()) -> str | None:
        """Return an existing file to open, or None if cancelled."""

    @abstractmethod
    def save_file(
        self,
        *,
        title: str,
        default_name: str = "",
        filters: Sequence[FileFilter] = (),
    ) -> str | None:
        """Return a target path to save to, or None if cancelled."""
