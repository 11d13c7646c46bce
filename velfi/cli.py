"""Typer based command line entry points for velfi."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

from velfi import __version__
from velfi.core.backend import Backend
from velfi.core.errors import ConfigError, PathRelationError, VelfiError
from velfi.core.logger import get_logger, set_level
from velfi.services.dialogs import ConsoleDialogs
from velfi.services.documents import sanitize_name

app = typer.Typer(help="velfi portfolio document helpers.")
config_app = typer.Typer(name="config", help="Show or change user settings.")
app.add_typer(config_app, name="config")


def _backend(config_file: Optional[Path] = None) -> Backend:
    return Backend(ConsoleDialogs(), config_file=config_file)


def _fail(exc: Exception, code: int = 1) -> None:
    get_logger().error("command failed: %s", exc, exc_info=True)
    typer.secho(f"Error: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=code)


@app.callback()
def main_callback(
    log_level: str = typer.Option(
        "WARNING",
        "--log-level",
        help="Set logging level (e.g. DEBUG/INFO/WARNING).",
    ),
) -> None:
    """Configure logging before executing commands."""

    try:
        set_level(log_level)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--log-level") from exc


@app.command("version")
def cmd_version() -> None:
    """Print the application version."""

    typer.echo(__version__)


@app.command("sanitize")
def cmd_sanitize(name: str = typer.Argument(..., help="Free-text entity name")) -> None:
    """Print the folder name derived from NAME (empty if unusable)."""

    typer.echo(sanitize_name(name))


@app.command("relpath")
def cmd_relpath(
    base: str = typer.Argument(..., help="Base directory"),
    target: str = typer.Argument(..., help="Target path"),
) -> None:
    """Print TARGET relative to BASE."""

    try:
        typer.echo(_backend().relative_path(base, target))
    except PathRelationError as exc:
        _fail(exc)


@app.command("resolve")
def cmd_resolve(
    stored: str = typer.Argument(..., help="Stored document reference"),
    root: str = typer.Option("", "--root", help="Document root"),
    folder: str = typer.Option("", "--folder", help="Entity document folder"),
) -> None:
    """Print where a stored document reference points to."""

    typer.echo(_backend().resolve_document(stored, root, folder))


@app.command("attach")
def cmd_attach(
    root: str = typer.Option(..., "--root", help="Document root"),
    folder: str = typer.Option("", "--folder", help="Entity document folder"),
) -> None:
    """Pick a document for an entity, offering to copy it into the folder."""

    try:
        ref = _backend().choose_document_reference(root, folder)
    except (VelfiError, OSError) as exc:
        _fail(exc)
        return
    if ref is None:
        typer.secho("Cancelled.", err=True)
        return
    typer.echo(str(ref))
    typer.secho(f"(relative to: {ref.base.value})", err=True)


@app.command("folder")
def cmd_folder(
    root: str = typer.Option(..., "--root", help="Document root"),
    current: str = typer.Option("", "--current", help="Currently assigned folder"),
    name: str = typer.Option("", "--name", help="Entity name used to suggest a folder"),
) -> None:
    """Pick or create the document folder for an entity."""

    try:
        typer.echo(_backend().choose_or_create_folder(root, current, name))
    except (VelfiError, OSError) as exc:
        _fail(exc)


@app.command("gui")
def cmd_gui() -> None:
    """Start the desktop application."""

    from velfi.app_gui.main_gui import main

    main()


@config_app.command("path")
def config_path_cmd(
    config_file: Optional[Path] = typer.Option(None, "--file", help="Override config.json location"),
) -> None:
    """Print the location of config.json."""

    typer.echo(_backend(config_file).get_config_path())


@config_app.command("show")
def config_show(
    config_file: Optional[Path] = typer.Option(None, "--file", help="Override config.json location"),
) -> None:
    """Print the effective settings as JSON."""

    try:
        cfg = _backend(config_file).load_config()
    except ConfigError as exc:
        _fail(exc, code=2)
        return
    typer.echo(json.dumps(cfg.model_dump(by_alias=True), indent=2))


@config_app.command("set-locale")
def config_set_locale(
    locale: str = typer.Argument(..., help="UI language, e.g. en, de-ch, fr, it"),
    config_file: Optional[Path] = typer.Option(None, "--file", help="Override config.json location"),
) -> None:
    """Change the UI language and save the settings."""

    backend = _backend(config_file)
    try:
        cfg = backend.load_config()
        backend.save_config(cfg.model_copy(update={"locale": locale}))
    except (ConfigError, OSError) as exc:
        _fail(exc, code=2)
        return
    typer.echo(locale)
