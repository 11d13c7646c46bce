"""Dialog implementations for the GUI and the terminal."""

from .base import CSV_FILTERS, PORTFOLIO_FILTERS, FileFilter, IAppDialogs
from .console import ConsoleDialogs

__all__ = [
    "CSV_FILTERS",
    "PORTFOLIO_FILTERS",
    "ConsoleDialogs",
    "FileFilter",
    "IAppDialogs",
]
