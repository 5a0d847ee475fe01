"""Tests for the persistence library."""

from collections.abc import Callable
import json
import logging
from pathlib import Path

import pytest

from hanabi_canvas.persistence import (
    async_load_from_file,
    async_save_to_file,
    export_artworks,
    export_requests,
    import_artworks,
    import_requests,
    load_from_file,
    save_to_file,
)
from hanabi_canvas.records import ArtworkRecord, RequestRecord

ArtworkFactory = Callable[..., ArtworkRecord]
RequestFactory = Callable[..., RequestRecord]


def test_export_artworks_empty() -> None:
    """Test exporting no artworks still produces a wrapped document."""
    content = export_artworks([])
    assert json.loads(content) == {"artworks": []}
    assert import_artworks(content) == []


def test_artworks_round_trip(make_artwork: ArtworkFactory) -> None:
    """Test artworks survive an export and import."""
    artworks = [make_artwork("art-1"), make_artwork("art-2", is_liked=True)]

    imported = import_artworks(export_artworks(artworks))

    assert imported == artworks
    assert imported[1].is_liked
    assert imported[0].pixels[1].color.a == 128


def test_export_artworks_format(make_artwork: ArtworkFactory) -> None:
    """Test the artworks are wrapped in a single field object."""
    doc = json.loads(export_artworks((make_artwork("art-1"),)))
    assert list(doc) == ["artworks"]
    assert len(doc["artworks"]) == 1
    assert doc["artworks"][0]["id"] == "art-1"
    assert doc["artworks"][0]["isLiked"] is False
    assert doc["artworks"][0]["createdTimestamp"] == 1000


def test_export_is_deterministic(make_artwork: ArtworkFactory) -> None:
    """Test exporting the same artworks yields the same text."""
    artworks = [make_artwork("art-1"), make_artwork("art-2")]
    assert export_artworks(artworks) == export_artworks(list(artworks))


def test_import_ignores_formatting(make_artwork: ArtworkFactory) -> None:
    """Test whitespace and field order do not matter on import."""
    artworks = [make_artwork("art-1", is_liked=True)]
    doc = json.loads(export_artworks(artworks))
    doc["artworks"][0] = dict(reversed(list(doc["artworks"][0].items())))
    assert import_artworks(json.dumps(doc, separators=(",", ":"))) == artworks


@pytest.mark.parametrize(
    "content",
    [None, "", '{"artworks": null}', "{}", '{"other": []}'],
    ids=["none", "empty", "null-field", "empty-object", "missing-field"],
)
def test_import_artworks_nothing_to_load(
    content: str | None, caplog: pytest.LogCaptureFixture
) -> None:
    """Test empty input and absent fields yield no artworks without a warning."""
    with caplog.at_level(logging.WARNING):
        assert import_artworks(content) == []
    assert "Failed to import" not in caplog.text


@pytest.mark.parametrize(
    "content",
    [
        "not json",
        "[]",
        "null",
        '{"artworks": [{"name": "missing id"}]}',
        '{"artworks": 5}',
        '{"artworks": ["art-1"]}',
        '{"artworks": [{"id": "art-1"}',
        '{"artworks": [{"id": "a", "isLiked": "false"}]}',
        '{"artworks": [{"id": 5}]}',
        '{"artworks": [{"id": null}]}',
        '{"artworks": [{"id": "a", "width": "32"}]}',
    ],
    ids=[
        "not-json",
        "bare-array",
        "null",
        "missing-id",
        "not-a-list",
        "not-an-object",
        "truncated",
        "string-liked",
        "numeric-id",
        "null-id",
        "string-width",
    ],
)
def test_import_artworks_malformed(
    content: str, caplog: pytest.LogCaptureFixture
) -> None:
    """Test malformed input is logged and yields no artworks."""
    with caplog.at_level(logging.WARNING):
        assert import_artworks(content) == []
    assert "Failed to import artworks" in caplog.text


def test_requests_round_trip(make_request: RequestFactory) -> None:
    """Test requests survive an export and import."""
    requests = [make_request("req-1"), make_request("req-2", is_completed=True)]

    content = export_requests(requests)
    imported = import_requests(content)

    assert imported == requests
    doc = json.loads(content)
    assert list(doc) == ["requests"]
    assert doc["requests"][1]["isCompleted"] is True
    assert doc["requests"][0]["constraints"][0] == {
        "type": "ColorLimit",
        "intValue": 4,
        "floatValue": 0.0,
        "boolValue": False,
    }


def test_export_requests_empty() -> None:
    """Test exporting no requests."""
    assert import_requests(export_requests([])) == []


def test_import_requests_none() -> None:
    """Test no content yields no requests."""
    assert import_requests(None) == []


@pytest.mark.parametrize(
    "content",
    [
        "not json",
        '{"requests": [{"id": null}]}',
        '{"requests": [{"id": "req-1", "isCompleted": "false"}]}',
        '{"requests": [{"id": "req-1", "prompt": 7}]}',
        '{"requests": [{"id": "req-1", "constraints": [{"type": "Unknown"}]}]}',
        '{"requests": [{"id": "req-1", "constraints": '
        '[{"type": "TimeLimit", "floatValue": "30"}]}]}',
    ],
    ids=[
        "not-json",
        "null-id",
        "string-completed",
        "numeric-prompt",
        "unknown-constraint",
        "string-float",
    ],
)
def test_import_requests_malformed(
    content: str, caplog: pytest.LogCaptureFixture
) -> None:
    """Test malformed request input is logged and yields no requests."""
    with caplog.at_level(logging.WARNING):
        assert import_requests(content) == []
    assert "Failed to import requests" in caplog.text


def test_import_requests_integer_float_value() -> None:
    """Test a whole number is accepted for a float field."""
    content = (
        '{"requests": [{"id": "req-1", "constraints": '
        '[{"type": "TimeLimit", "floatValue": 30}]}]}'
    )
    [request] = import_requests(content)
    assert request.constraints[0].float_value == 30.0
    assert isinstance(request.constraints[0].float_value, float)


def test_import_does_not_cross_collections(make_artwork: ArtworkFactory) -> None:
    """Test an artworks document has no requests."""
    assert import_requests(export_artworks([make_artwork("art-1")])) == []


def test_save_and_load_file(tmp_path: Path, make_artwork: ArtworkFactory) -> None:
    """Test writing a document to disk and reading it back."""
    path = tmp_path / "artworks.json"
    content = export_artworks([make_artwork("art-1")])

    save_to_file(content, path)

    assert load_from_file(path) == content
    assert load_from_file(str(path)) == content
    assert import_artworks(load_from_file(path)) == [make_artwork("art-1")]


def test_load_missing_file(tmp_path: Path) -> None:
    """Test loading a file that does not exist."""
    assert load_from_file(tmp_path / "missing.json") is None
    assert import_artworks(load_from_file(tmp_path / "missing.json")) == []


def test_load_file_failure(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    """Test a read failure is logged and returns None."""
    with caplog.at_level(logging.WARNING):
        assert load_from_file(tmp_path) is None
    assert "Failed to load file" in caplog.text


def test_save_file_failure(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    """Test a write failure is logged and does not raise."""
    with caplog.at_level(logging.WARNING):
        save_to_file("{}", tmp_path / "missing-dir" / "artworks.json")
    assert "Failed to save file" in caplog.text


async def test_async_save_and_load_file(
    tmp_path: Path, make_request: RequestFactory
) -> None:
    """Test the async file helpers."""
    path = tmp_path / "requests.json"
    content = export_requests([make_request("req-1")])

    await async_save_to_file(content, path)

    assert await async_load_from_file(path) == content
    assert await async_load_from_file(tmp_path / "missing.json") is None


async def test_async_file_failures(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """Test the async file helpers never raise."""
    with caplog.at_level(logging.WARNING):
        await async_save_to_file("{}", tmp_path / "missing-dir" / "requests.json")
        assert await async_load_from_file(tmp_path) is None
    assert "Failed to save file" in caplog.text
    assert "Failed to load file" in caplog.text
