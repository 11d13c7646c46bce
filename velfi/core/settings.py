from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import List

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from .errors import ConfigError


load_dotenv(override=False)

CONFIG_FILENAME = "config.json"
APP_DIR_NAME = "velfi"


class AppConfig(BaseModel):
    """User settings shared with the UI.

    Attributes:
        locale: UI language (en, de-ch, fr, it).
        autosave: Save the open portfolio automatically.
        default_base_currency: ISO code used for new portfolios.
        default_currencies: ISO codes offered for new portfolios.
        tax_report_hidden_fields: Columns hidden in the tax report view.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    locale: str = "de-ch"
    autosave: bool = True
    default_base_currency: str = "CHF"
    default_currencies: List[str] = Field(default_factory=lambda: ["CHF", "USD", "EUR"])
    tax_report_hidden_fields: List[str] = Field(
        default_factory=lambda: [
            "irr",
            "committed",
            "totalInvested",
            "openCommitment",
            "invested",
            "divested",
        ]
    )


def _is_frozen() -> bool:
    return getattr(sys, "frozen", False) and hasattr(sys, "_MEIPASS")


def _work_dir() -> Path:
    """Writable base for runtime files (logs).

    - ``VELFI_HOME`` when set
    - Frozen: alongside the executable
    - Otherwise: ``~/.velfi``
    """
    env = os.getenv("VELFI_HOME")
    if env:
        return Path(env).expanduser()
    if _is_frozen():
        return Path(sys.executable).resolve().parent / "work"
    return Path.home() / ".velfi"


def _config_dir() -> Path:
    env = os.getenv("VELFI_CONFIG_DIR")
    if env:
        return Path(env).expanduser()
    xdg_home = os.getenv("XDG_CONFIG_HOME")
    if xdg_home:
        return Path(xdg_home).expanduser() / APP_DIR_NAME
    return Path.home() / ".config" / APP_DIR_NAME


def config_path() -> Path:
    """Return the location of ``config.json`` (it may not exist yet)."""

    return _config_dir() / CONFIG_FILENAME


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load settings from config.json.

    Returns the defaults when the file does not exist.
    """
    cfg_path = Path(path) if path else config_path()
    if not cfg_path.exists():
        return AppConfig()
    try:
        raw = cfg_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"config.json unreadable: {cfg_path}: {e}") from e
    try:
        return AppConfig.model_validate_json(raw)
    except ValidationError as e:
        raise ConfigError(f"config.json invalid: {cfg_path}: {e}") from e


def save_config(config: AppConfig, path: str | Path | None = None) -> Path:
    """Write settings as indented JSON, creating the directory if needed."""

    cfg_path = Path(path) if path else config_path()
    cfg_path.parent.mkdir(parents=True, exist_ok=True)
    cfg_path.write_text(config.model_dump_json(by_alias=True, indent=2), encoding="utf-8")
    return cfg_path
