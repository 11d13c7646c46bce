import os

import pytest

from velfi.services.dialogs import console
from velfi.services.dialogs.console import ConsoleDialogs


@pytest.fixture()
def answers(monkeypatch):
    queue: list[str] = []

    def fake_prompt(text, default="", show_default=True):
        return queue.pop(0)

    monkeypatch.setattr(console.typer, "prompt", fake_prompt)
    return queue


def test_empty_answer_cancels(answers):
    answers.append("   ")
    assert ConsoleDialogs().pick_file("/start", title="Select Document") is None


def test_relative_answer_is_anchored_at_start_dir(answers, tmp_path):
    answers.append(os.path.join("sub", "a.pdf"))
    picked = ConsoleDialogs().pick_file(str(tmp_path), title="Select Document")
    assert picked == str(tmp_path / "sub" / "a.pdf")


def test_absolute_directory_answer_is_kept(answers, tmp_path):
    answers.append(str(tmp_path / "x") + os.sep)
    assert ConsoleDialogs().pick_directory("/elsewhere", title="Select Document Folder") == str(tmp_path / "x")


def test_confirm_defaults_to_no(monkeypatch):
    seen = {}

    def fake_confirm(text, default=True):
        seen["text"] = text
        seen["default"] = default
        return True

    monkeypatch.setattr(console.typer, "confirm", fake_confirm)

    assert ConsoleDialogs().confirm("Copy Document", "Copy file to asset folder?") is True
    assert seen == {"text": "Copy Document: Copy file to asset folder?", "default": False}
