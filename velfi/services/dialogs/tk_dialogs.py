"""Native dialogs through tkinter."""

from __future__ import annotations

import tkinter as tk
from tkinter import filedialog, messagebox
from typing import Any, Callable, Sequence

from velfi.core.errors import InteractionError

from .base import FileFilter, IAppDialogs


def _as_path(value: Any) -> str | None:
    # Tk returns "" or () when the dialog is dismissed.
    if not value:
        return None
    return str(value)


class TkDialogs(IAppDialogs):
    """IAppDialogs backed by ``tkinter.filedialog`` and ``tkinter.messagebox``."""

    def __init__(self, parent: tk.Misc | None = None) -> None:
        self.parent = parent

    def _call(self, fn: Callable[..., Any], **kwargs: Any) -> Any:
        if self.parent is not None:
            kwargs["parent"] = self.parent
        try:
            return fn(**kwargs)
        except tk.TclError as exc:
            raise InteractionError(f"dialog failed: {exc}") from exc

    def pick_file(self, start_dir: str, *, title: str, initial_name: str | None = None) -> str | None:
        kwargs: dict[str, Any] = {"title": title}
        if start_dir:
            kwargs["initialdir"] = start_dir
        if initial_name:
            kwargs["initialfile"] = initial_name
        return _as_path(self._call(filedialog.askopenfilename, **kwargs))

    def pick_directory(self, start_dir: str, *, title: str) -> str | None:
        kwargs: dict[str, Any] = {"title": title, "mustexist": False}
        if start_dir:
            kwargs["initialdir"] = start_dir
        return _as_path(self._call(filedialog.askdirectory, **kwargs))

    def confirm(self, title: str, message: str) -> bool:
        return bool(self._call(messagebox.askyesno, title=title, message=message, default=messagebox.NO))

    def open_file(self, *, title: str, filters: Sequence[FileFilter] = ()) -> str | None:
        return _as_path(self._call(filedialog.askopenfilename, title=title, filetypes=list(filters)))

    def save_file(
        self,
        *,
        title: str,
        default_name: str = "",
        filters: Sequence[FileFilter] = (),
    ) -> str | None:
        kwargs: dict[str, Any] = {"title": title, "filetypes": list(filters)}
        if default_name:
            kwargs["initialfile"] = default_name
        return _as_path(self._call(filedialog.asksaveasfilename, **kwargs))

    def show_error(self, title: str, message: str) -> None:
        self._call(messagebox.showerror, title=title, message=message)

    def show_info(self, title: str, message: str) -> None:
        self._call(messagebox.showinfo, title=title, message=message)
