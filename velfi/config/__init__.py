"""Configuration helpers for velfi runtime files.

Loads the application menu definition from YAML and validates it into
immutable structures the GUI can render and bind without further checks.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping

import yaml

from velfi.core.errors import ConfigError


CONFIG_DIR = Path(__file__).resolve().parent
DEFAULT_MENU_PATH = CONFIG_DIR / "menu.yaml"

_ACCELERATOR_RE = re.compile(r"^(?:(?:CmdOrCtrl|Ctrl|Cmd|Shift|Alt)\+)+[A-Za-z0-9]$")


class MenuValidationError(ConfigError):
    """Raised when the menu configuration fails validation."""


@dataclass(frozen=True)
class MenuItem:
    """A clickable entry (or a separator when ``separator`` is set)."""

    label: str = ""
    event: str = ""
    accelerator: str | None = None
    separator: bool = False

    def tk_accelerator(self) -> str | None:
        """Accelerator text for display in a Tk menu."""

        if not self.accelerator:
            return None
        return self.accelerator.replace("CmdOrCtrl", "Ctrl")

    def tk_binding(self) -> str | None:
        """Event sequence for ``widget.bind_all``, e.g. ``<Control-Shift-S>``."""

        if not self.accelerator:
            return None
        *mods, key = self.accelerator.split("+")
        names = []
        for mod in mods:
            if mod in {"CmdOrCtrl", "Ctrl", "Cmd"}:
                names.append("Control")
            else:
                names.append(mod)
        key = key.upper() if "Shift" in mods else key.lower()
        return "<" + "-".join(names + [key]) + ">"


@dataclass(frozen=True)
class Menu:
    """A top-level menu and its entries."""

    label: str
    items: tuple[MenuItem, ...]


@dataclass(frozen=True)
class MenuDefinition:
    """Complete menu bar."""

    menus: tuple[Menu, ...]
    raw: Mapping[str, Any]

    def events(self) -> tuple[str, ...]:
        return tuple(item.event for menu in self.menus for item in menu.items if not item.separator)


def load_menu_definition(path: str | Path | None = None) -> MenuDefinition:
    """Load and validate the menu YAML (``config/menu.yaml`` by default)."""

    menu_path = Path(path) if path else DEFAULT_MENU_PATH
    raw = _load_yaml(menu_path)
    return _build_menu_definition(raw)


def _load_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise ConfigError(f"menu file not found: {path}")
    with path.open("r", encoding="utf-8") as handle:
        try:
            data = yaml.safe_load(handle) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"menu file is not valid YAML: {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError("menu configuration must be a mapping")
    return data


def _build_menu_definition(data: Mapping[str, Any]) -> MenuDefinition:
    menus_node = data.get("menus")
    if not isinstance(menus_node, list) or not menus_node:
        raise MenuValidationError("menus node missing or not a non-empty list")
    menus = []
    seen_events: set[str] = set()
    for idx, menu_node in enumerate(menus_node):
        if not isinstance(menu_node, Mapping):
            raise MenuValidationError(f"menus[{idx}] must be a mapping")
        label = menu_node.get("label")
        if not isinstance(label, str) or not label.strip():
            raise MenuValidationError(f"menus[{idx}] needs a label")
        items_node = menu_node.get("items")
        if not isinstance(items_node, list) or not items_node:
            raise MenuValidationError(f"menu {label} has no items")
        items = tuple(_build_item(label, i, node, seen_events) for i, node in enumerate(items_node))
        menus.append(Menu(label=label.strip(), items=items))
    return MenuDefinition(menus=tuple(menus), raw=data)


def _build_item(menu_label: str, idx: int, node: Any, seen_events: set[str]) -> MenuItem:
    if not isinstance(node, Mapping):
        raise MenuValidationError(f"menu {menu_label} items[{idx}] must be a mapping")
    if node.get("separator"):
        return MenuItem(separator=True)
    label = node.get("label")
    event = node.get("event")
    if not isinstance(label, str) or not label.strip():
        raise MenuValidationError(f"menu {menu_label} items[{idx}] needs a label")
    if not isinstance(event, str) or not event.strip():
        raise MenuValidationError(f"menu {menu_label} item {label} needs an event")
    if event in seen_events:
        raise MenuValidationError(f"duplicate menu event: {event}")
    seen_events.add(event)
    accelerator = node.get("accelerator")
    if accelerator is not None:
        if not isinstance(accelerator, str) or not _ACCELERATOR_RE.match(accelerator):
            raise MenuValidationError(f"menu {menu_label} item {label} has a bad accelerator: {accelerator!r}")
    return MenuItem(label=label.strip(), event=event.strip(), accelerator=accelerator)


__all__ = [
    "Menu",
    "MenuDefinition",
    "MenuItem",
    "MenuValidationError",
    "load_menu_definition",
]
