"""
Tests for the persisted collection file.
"""

import json

import pytest

from data_model import MisconceptionCollection
from motd._store import PersistenceError, atomic_write_bytes, load_collection, save_collection

from conftest import make_misconception


def test_artifact_shape(saved_collection):
    data = json.loads(saved_collection.read_text(encoding="utf-8"))
    assert list(data) == ["generatedAt", "totalCount", "misconceptions"]
    assert data["generatedAt"] == "2024-01-01T00:00:00.000Z"
    assert data["totalCount"] == 3
    first, second = data["misconceptions"][:2]
    assert list(first) == ["id", "text", "section", "category", "source"]
    assert list(second) == ["id", "text", "section", "subsection", "category", "source"]
    assert second["subsection"] == "Animals"


def test_round_trip(saved_collection, small_collection):
    loaded = load_collection(saved_collection)
    assert loaded.misconceptions == small_collection.misconceptions
    assert loaded.generated_at == small_collection.generated_at


def test_non_ascii_written_verbatim(tmp_path):
    path = tmp_path / "out.json"
    collection = MisconceptionCollection(
        misconceptions=[make_misconception("Napoléon was of average height.", id="n-1")],
    )
    save_collection(collection, path)
    raw = path.read_text(encoding="utf-8")
    assert "Napoléon" in raw
    assert raw.endswith("\n")


def test_no_temporary_files_left(saved_collection):
    assert [p.name for p in saved_collection.parent.iterdir()] == ["misconceptions.json"]


def test_overwrite_replaces_content(tmp_path):
    path = tmp_path / "nested" / "file.bin"
    atomic_write_bytes(path, b"first")
    atomic_write_bytes(path, b"second")
    assert path.read_bytes() == b"second"


def test_missing_file(tmp_path):
    with pytest.raises(PersistenceError, match="cannot read"):
        load_collection(tmp_path / "absent.json")


@pytest.mark.parametrize("content", ["not json", "{}", '{"misconceptions": {}}', '{"misconceptions": [{"id": "x"}]}'])
def test_invalid_file(tmp_path, content):
    path = tmp_path / "bad.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(PersistenceError, match="invalid collection file"):
        load_collection(path)
