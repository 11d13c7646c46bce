from unittest.mock import MagicMock

import pytest

tk = pytest.importorskip("tkinter")

from velfi.core.errors import InteractionError
from velfi.services.dialogs import tk_dialogs
from velfi.services.dialogs.tk_dialogs import TkDialogs


@pytest.mark.parametrize("dismissed", ["", ()])
def test_dismissed_picker_is_cancellation(monkeypatch, dismissed):
    monkeypatch.setattr(tk_dialogs.filedialog, "askopenfilename", MagicMock(return_value=dismissed))

    assert TkDialogs().pick_file("/docs", title="Select Document") is None


def test_pick_directory_passes_start_dir(monkeypatch):
    ask = MagicMock(return_value="/docs/acme")
    monkeypatch.setattr(tk_dialogs.filedialog, "askdirectory", ask)

    assert TkDialogs().pick_directory("/docs", title="Select Document Folder") == "/docs/acme"
    assert ask.call_args.kwargs["initialdir"] == "/docs"
    assert ask.call_args.kwargs["title"] == "Select Document Folder"


def test_empty_start_dir_is_not_passed(monkeypatch):
    ask = MagicMock(return_value="/x.pdf")
    monkeypatch.setattr(tk_dialogs.filedialog, "askopenfilename", ask)

    TkDialogs().pick_file("", title="Select Document", initial_name="scan.pdf")

    assert "initialdir" not in ask.call_args.kwargs
    assert ask.call_args.kwargs["initialfile"] == "scan.pdf"


def test_confirm_defaults_to_no(monkeypatch):
    ask = MagicMock(return_value=False)
    monkeypatch.setattr(tk_dialogs.messagebox, "askyesno", ask)

    assert TkDialogs().confirm("Copy Document", "Copy file to asset folder?") is False
    assert ask.call_args.kwargs["default"] == tk_dialogs.messagebox.NO


def test_tcl_error_becomes_interaction_error(monkeypatch):
    monkeypatch.setattr(
        tk_dialogs.filedialog, "askopenfilename", MagicMock(side_effect=tk.TclError("no display name"))
    )

    with pytest.raises(InteractionError):
        TkDialogs().open_file(title="Open Portfolio")


def test_parent_is_forwarded(monkeypatch):
    ask = MagicMock(return_value="/out.velfi")
    monkeypatch.setattr(tk_dialogs.filedialog, "asksaveasfilename", ask)
    parent = object()

    TkDialogs(parent).save_file(title="Save Portfolio As", default_name="portfolio.velfi")

    assert ask.call_args.kwargs["parent"] is parent
    assert ask.call_args.kwargs["initialfile"] == "portfolio.velfi"
