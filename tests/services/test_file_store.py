"""Tests for uploaded image storage."""

from pathlib import Path

import pytest

from inkpress.core.errors import ValidationFailedError
from inkpress.services.file_store import ALLOWED_EXTENSIONS, ImageStore


def test_allowed_extensions() -> None:
    assert ALLOWED_EXTENSIONS == {".jpeg", ".jpg", ".png"}


def test_save_writes_prefixed_file(tmp_path: Path) -> None:
    store = ImageStore(tmp_path / "blog")
    name = store.save(b"bytes", ".png", "abc")
    assert name.startswith("abc-")
    assert name.endswith(".png")
    assert (tmp_path / "blog" / name).read_bytes() == b"bytes"


def test_same_identifier_gets_distinct_names(tmp_path: Path) -> None:
    store = ImageStore(tmp_path)
    assert store.save(b"1", ".jpg", "abc") != store.save(b"2", ".jpg", "abc")


def test_rejects_other_extensions(tmp_path: Path) -> None:
    with pytest.raises(ValidationFailedError):
        ImageStore(tmp_path).save(b"GIF89a", ".gif", "abc")
    assert list(tmp_path.iterdir()) == []


def test_delete_removes_stored_file(tmp_path: Path) -> None:
    store = ImageStore(tmp_path)
    name = store.save(b"data", ".png", "abc123")
    store.delete(name)
    assert not (tmp_path / name).exists()
    store.delete(name)
