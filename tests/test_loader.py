"""Unit tests for reading files as text and data URIs."""

from __future__ import annotations

import asyncio
import base64
from pathlib import Path

import pytest

from stackpack.classifier import classify
from stackpack.errors import ReadFailure
from stackpack.loader import build_asset_table, detect_mime, load_content, load_encoded, load_text
from stackpack.models import InputFile

PNG_BYTES = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR"


def test_load_text_decodes_utf8(make_file) -> None:
    assert load_text(make_file("a.css", "h1::after { content: 'é'; }")) == "h1::after { content: 'é'; }"


def test_load_text_replaces_invalid_bytes(make_file) -> None:
    assert load_text(make_file("a.js", b"var s = '\xff';")) == "var s = '\ufffd';"


def test_load_encoded_is_data_uri(make_file) -> None:
    data = load_encoded(make_file("img/logo.png", PNG_BYTES))
    assert data == "data:image/png;base64," + base64.b64encode(PNG_BYTES).decode("ascii")


@pytest.mark.parametrize(
    "name, mime",
    [
        ("a.svg", "image/svg+xml"),
        ("a.webp", "image/webp"),
        ("a.ico", "image/x-icon"),
        ("a.JPG", "image/jpeg"),
        ("a.gif", "image/gif"),
        ("a.mp4", "video/mp4"),
        ("a.webm", "video/webm"),
        ("blob", "application/octet-stream"),
    ],
)
def test_detect_mime(name: str, mime: str) -> None:
    assert detect_mime(name) == mime


def test_read_errors_become_read_failure(failing_file) -> None:
    with pytest.raises(ReadFailure, match="locked.css") as excinfo:
        load_text(failing_file)
    assert isinstance(excinfo.value.__cause__, PermissionError)


def test_missing_path_fails_at_load_time(tmp_path: Path) -> None:
    f = InputFile.from_path(tmp_path / "gone.png")
    assert f.name == "gone.png"
    with pytest.raises(ReadFailure):
        load_encoded(f)


def test_from_path_reads_bytes(tmp_path: Path) -> None:
    p = tmp_path / "site.css"
    p.write_text("body{}", encoding="utf-8")
    f = InputFile.from_path(p, name="css/site.css")
    assert f.name == "css/site.css"
    assert f.size == 6
    assert load_text(f) == "body{}"


def test_asset_table_last_write_wins(make_file) -> None:
    first = make_file("a/logo.png", b"first")
    second = make_file("b\\logo.png", b"second")
    table = build_asset_table([first, second], [load_encoded(first), load_encoded(second)])

    assert list(table) == ["logo.png"]
    assert table["logo.png"] == load_encoded(second)


def test_load_content_keeps_order(make_file) -> None:
    classified = classify(
        [
            make_file("two.css", "b{}"),
            make_file("one.css", "a{}"),
            make_file("x.js", "x();"),
            make_file("pic.gif", b"GIF89a"),
            make_file("clip.mp4", b"\x00\x00"),
            make_file("index.html", "<p>hi</p>"),
        ]
    )
    loaded = asyncio.run(load_content(classified))

    assert loaded.stylesheets == ["b{}", "a{}"]
    assert loaded.scripts == ["x();"]
    assert loaded.markup == ["<p>hi</p>"]
    assert set(loaded.assets) == {"pic.gif", "clip.mp4"}
    assert loaded.assets["clip.mp4"].startswith("data:video/mp4;base64,")
    assert loaded.file_count == 6


def test_load_content_fails_whole_run(make_file, failing_file) -> None:
    classified = classify([make_file("ok.css", "a{}"), failing_file])
    with pytest.raises(ReadFailure):
        asyncio.run(load_content(classified))
