"""Open files and folders with the desktop's default application."""

from __future__ import annotations

import subprocess
import sys
from typing import List


def opener_command(path: str, platform: str | None = None) -> List[str]:
    """Return the argv that hands ``path`` to the OS default handler."""

    plat = platform or sys.platform
    if plat == "darwin":
        return ["open", path]
    if plat.startswith("win"):
        return ["cmd", "/c", "start", "", path]
    return ["xdg-open", path]


def open_external(path: str, platform: str | None = None) -> subprocess.Popen:
    """Start the opener without waiting for it to exit."""

    return subprocess.Popen(opener_command(path, platform))  # noqa: S603 - fixed argv


__all__ = ["open_external", "opener_command"]
