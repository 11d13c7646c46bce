"""Terminal stand-ins for the native dialogs, used by the CLI."""

from __future__ import annotations

import os
from typing import Sequence

import typer

from .base import FileFilter, IAppDialogs


class ConsoleDialogs(IAppDialogs):
    """Ask for paths and confirmations with typer prompts.

    An empty answer cancels. Relative answers are taken relative to the
    directory the prompt started in.
    """

    def _ask_path(self, title: str, start_dir: str = "", default: str = "") -> str | None:
        hint = f" [{start_dir}]" if start_dir else ""
        answer = typer.prompt(f"{title}{hint}", default=default, show_default=bool(default))
        answer = answer.strip()
        if not answer:
            return None
        answer = os.path.expanduser(answer)
        if start_dir and not os.path.isabs(answer):
            answer = os.path.join(start_dir, answer)
        return os.path.normpath(answer)

    def pick_file(self, start_dir: str, *, title: str, initial_name: str | None = None) -> str | None:
        return self._ask_path(title, start_dir, default=initial_name or "")

    def pick_directory(self, start_dir: str, *, title: str) -> str | None:
        return self._ask_path(title, start_dir)

    def confirm(self, title: str, message: str) -> bool:
        return typer.confirm(f"{title}: {message}", default=False)

    def open_file(self, *, title: str, filters: Sequence[FileFilter] = ()) -> str | None:
        return self._ask_path(title)

    def save_file(
        self,
        *,
        title: str,
        default_name: str = "",
        filters: Sequence[FileFilter] = (),
    ) -> str | None:
        return self._ask_path(title, default=default_name)
