"""End-to-end tests for a bundling run."""

from __future__ import annotations

import asyncio

import pytest

from stackpack.bundler import bundle, bundle_sync, parse_output_kind
from stackpack.errors import InvalidOutputKind, ReadFailure
from stackpack.models import OutputKind


@pytest.fixture
def site(make_file):
    return [
        make_file("index.html", '<html><head></head><body><img src="img/logo.png"><h1>Hi</h1></body></html>'),
        make_file("css/site.css", ".hero { background: url('../img/hero.jpg'); }"),
        make_file("js/app.js", "var x = 1;"),
        make_file("img/logo.png", b"\x89PNG"),
        make_file("img/hero.jpg", b"\xff\xd8\xff"),
        make_file("README.md", "# notes"),
    ]


def test_standalone_bundle(site) -> None:
    skipped = []
    result = asyncio.run(bundle(site, on_unsupported=skipped.append))

    assert result.filename == "bundle.html"
    assert result.file_count == 5
    assert [d.name for d in skipped] == ["README.md"]
    assert 'src="data:image/png;base64,iVBORw=="' in result.content
    assert "url('data:image/jpeg;base64,/9j/')" in result.content
    assert "'use strict';\n  var x = 1;" in result.content
    assert "img/logo.png" not in result.content


def test_component_bundle(site) -> None:
    result = asyncio.run(bundle(site, OutputKind.COMPONENT, "hero", "HeroBanner"))

    assert result.filename == "hero.js"
    assert result.output_kind is OutputKind.COMPONENT
    assert "customElements.define('hero-banner', HeroBanner);" in result.content
    assert '<img src="data:image/png;base64,iVBORw=="><h1>Hi</h1>' in result.content
    assert "<head>" not in result.content


def test_bundle_sync_accepts_aliases(site) -> None:
    assert bundle_sync(site, "js").filename == "component.js"
    assert bundle_sync(site, "html", "page").filename == "page.html"


def test_read_failure_produces_no_bundle(site, failing_file) -> None:
    with pytest.raises(ReadFailure):
        bundle_sync(site + [failing_file])


def test_images_and_scripts_alone_still_bundle(make_file) -> None:
    result = bundle_sync([make_file("app.ts", "run();"), make_file("x.png", b"x")])
    assert result.content.startswith("<!DOCTYPE html>")
    assert "run();" in result.content


@pytest.mark.parametrize(
    "value, kind",
    [
        ("standalone-document", OutputKind.STANDALONE),
        ("isolated-component", OutputKind.COMPONENT),
        (" HTML ", OutputKind.STANDALONE),
        ("js", OutputKind.COMPONENT),
        (OutputKind.COMPONENT, OutputKind.COMPONENT),
    ],
)
def test_parse_output_kind(value, kind: OutputKind) -> None:
    assert parse_output_kind(value) is kind


def test_parse_output_kind_rejects_unknown() -> None:
    with pytest.raises(InvalidOutputKind, match="pdf"):
        parse_output_kind("pdf")
