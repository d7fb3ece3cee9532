"""Tests for JsonFile and DocumentStore."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from json_tree_translator.errors import ParseError
from json_tree_translator.store import DocumentStore, JsonFile

# ---------------------------------------------------------------------------
# JsonFile
# ---------------------------------------------------------------------------


class TestJsonFile:
    def test_from_text(self) -> None:
        file = JsonFile.from_text("en.json", '{"a": "b"}')
        assert file.name == "en.json"
        assert file.content == {"a": "b"}
        assert file.last_modified > 0

    def test_from_text_invalid(self) -> None:
        with pytest.raises(ParseError):
            JsonFile.from_text("en.json", "{oops")

    def test_from_path(self, tmp_path: Path) -> None:
        path = tmp_path / "common.json"
        path.write_text('{"hello": "Hello"}', encoding="utf-8")

        file = JsonFile.from_path(path)

        assert file.name == "common.json"
        assert file.content == {"hello": "Hello"}
        assert file.last_modified == int(path.stat().st_mtime * 1000)

    def test_with_content_returns_copy(self) -> None:
        file = JsonFile("en.json", {"a": 1}, last_modified=1)
        updated = file.with_content({"a": 2})
        assert file.content == {"a": 1}
        assert updated.content == {"a": 2}
        assert updated.name == "en.json"
        assert updated.last_modified >= 1


# ---------------------------------------------------------------------------
# DocumentStore
# ---------------------------------------------------------------------------


class TestDocumentStore:
    def test_starts_empty(self) -> None:
        store = DocumentStore()
        assert store.source is None
        assert store.target is None
        assert store.is_processing is False
        assert store.error is None

    def test_set_and_get(self) -> None:
        store = DocumentStore()
        file = JsonFile("en.json", {"a": "b"})
        store.set_file("source", file)
        assert store.get_file("source") is file
        assert store.source is file
        assert store.target is None

    def test_set_clears_error(self) -> None:
        store = DocumentStore()
        store.error = "boom"
        store.set_file("target", JsonFile("fr.json", {}))
        assert store.error is None

    def test_unknown_kind(self) -> None:
        with pytest.raises(ValueError, match="file kind"):
            DocumentStore().get_file("other")  # type: ignore[arg-type]

    def test_update_content(self) -> None:
        store = DocumentStore()
        store.set_file("source", JsonFile("en.json", {"a": "b"}, last_modified=1))

        updated = store.update_content("source", {"a": "c"})

        assert store.source is updated
        assert updated.content == {"a": "c"}
        assert updated.name == "en.json"

    def test_update_empty_slot(self) -> None:
        with pytest.raises(LookupError, match="no target file"):
            DocumentStore().update_content("target", {})

    def test_reset(self) -> None:
        store = DocumentStore()
        store.set_file("source", JsonFile("en.json", {}))
        store.error = "x"
        store.reset()
        assert store.source is None
        assert store.error is None

    def test_repr_lists_names_only(self) -> None:
        store = DocumentStore()
        store.set_file("source", JsonFile("en.json", {"secret": "value"}))
        assert "en.json" in repr(store)
        assert "value" not in repr(store)


# ---------------------------------------------------------------------------
# Persistence
# ---------------------------------------------------------------------------


class TestPersistence:
    def test_save_and_load(self, tmp_path: Path) -> None:
        path = tmp_path / "state.json"
        store = DocumentStore()
        store.set_file("source", JsonFile("en.json", {"a": "b"}, last_modified=42))
        store.is_processing = True
        store.save(path)

        loaded = DocumentStore.load(path)

        assert loaded.source == JsonFile("en.json", {"a": "b"}, last_modified=42)
        assert loaded.target is None
        assert loaded.is_processing is False

    def test_missing_file_gives_empty_store(self, tmp_path: Path) -> None:
        store = DocumentStore.load(tmp_path / "absent.json")
        assert store.source is None
        assert store.target is None

    def test_wrong_shape(self, tmp_path: Path) -> None:
        path = tmp_path / "state.json"
        path.write_text(json.dumps([1, 2]), encoding="utf-8")
        with pytest.raises(ParseError, match="'files'"):
            DocumentStore.load(path)

    def test_bad_entry(self, tmp_path: Path) -> None:
        path = tmp_path / "state.json"
        path.write_text(json.dumps({"files": {"source": {"name": "x"}}}), encoding="utf-8")
        with pytest.raises(ParseError, match="invalid source entry"):
            DocumentStore.load(path)

    def test_not_json(self, tmp_path: Path) -> None:
        path = tmp_path / "state.json"
        path.write_text("nope", encoding="utf-8")
        with pytest.raises(ParseError):
            DocumentStore.load(path)
