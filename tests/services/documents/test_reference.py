import os

from velfi.services.documents.base import LocalFileOps
from velfi.services.documents.reference import (
    DocumentReference,
    ReferenceBase,
    is_url,
    resolve_stored_reference,
)


def test_str_is_legacy_plain_string():
    ref = DocumentReference.folder(os.path.join("2024", "k1.pdf"))
    assert str(ref) == os.path.join("2024", "k1.pdf")
    assert ref.base == "folder"


def test_resolve_joins_with_matching_base(tmp_path):
    root = str(tmp_path)
    assert DocumentReference.folder("a.pdf").resolve(root, "acme") == os.path.join(root, "acme", "a.pdf")
    assert DocumentReference.root("a.pdf").resolve(root, "acme") == os.path.join(root, "a.pdf")
    assert DocumentReference.absolute("/x/a.pdf").resolve(root, "acme") == "/x/a.pdf"


def test_declined_copy_reference_resolves_back_to_source(tmp_path):
    root = str(tmp_path / "docs")
    rel = os.path.join(os.pardir, os.pardir, "downloads", "s.pdf")
    assert DocumentReference.folder(rel).resolve(root, "acme") == str(tmp_path / "downloads" / "s.pdf")


def test_stored_string_prefers_folder_then_root(tmp_path):
    root = tmp_path / "docs"
    (root / "acme").mkdir(parents=True)
    (root / "acme" / "k1.pdf").write_text("folder copy")
    (root / "k1.pdf").write_text("root copy")
    (root / "only-root.pdf").write_text("root")
    files = LocalFileOps()

    assert resolve_stored_reference("k1.pdf", str(root), "acme", files=files) == DocumentReference.folder("k1.pdf")
    assert resolve_stored_reference("only-root.pdf", str(root), "acme", files=files) == DocumentReference.root(
        "only-root.pdf"
    )


def test_stored_string_unresolvable_is_treated_as_absolute(tmp_path):
    ref = resolve_stored_reference("missing.pdf", str(tmp_path), "", files=LocalFileOps())
    assert ref.base is ReferenceBase.ABSOLUTE
    assert ref.path == "missing.pdf"


def test_stored_absolute_and_url(tmp_path):
    files = LocalFileOps()
    absolute = str(tmp_path / "x.pdf")
    assert resolve_stored_reference(absolute, str(tmp_path), "acme", files=files) == DocumentReference.absolute(absolute)
    url = "https://bank.example/statements/42"
    assert is_url(url)
    assert resolve_stored_reference(url, str(tmp_path), "acme", files=files).base is ReferenceBase.ABSOLUTE


def test_empty_stored_string_is_none(tmp_path):
    assert resolve_stored_reference("", str(tmp_path), "acme", files=LocalFileOps()) is None
