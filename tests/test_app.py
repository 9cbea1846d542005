"""Tests for the Flask upload endpoints."""

from __future__ import annotations

import io

import pytest

from stackpack.app import create_app
from stackpack.settings import Settings


@pytest.fixture
def client():
    app = create_app(Settings())
    app.config["TESTING"] = True
    return app.test_client()


def upload(*files, **form):
    data = dict(form)
    data["files"] = [(io.BytesIO(content), name) for name, content in files]
    return data


def test_health(client) -> None:
    assert client.get("/health").get_json() == {"status": "ok"}


def test_bundle_download(client) -> None:
    resp = client.post(
        "/bundle",
        data=upload(
            ("index.html", b"<html><head></head><body><img src='pic.png'></body></html>"),
            ("pic.png", b"\x89PNG"),
            filename="site",
        ),
        content_type="multipart/form-data",
    )

    assert resp.status_code == 200
    assert resp.mimetype == "text/html"
    assert "attachment" in resp.headers["Content-Disposition"]
    assert "site.html" in resp.headers["Content-Disposition"]
    assert 'src="data:image/png;base64,iVBORw=="' in resp.get_data(as_text=True)


def test_api_bundle_component(client) -> None:
    resp = client.post(
        "/api/bundle",
        data=upload(("card.html", b"<body><p>card</p></body>"), ("card.js", b"init();"), output_kind="js", component_name="InfoCard"),
        content_type="multipart/form-data",
    )
    body = resp.get_json()

    assert resp.status_code == 200
    assert body["filename"] == "component.js"
    assert body["outputType"] == "isolated-component"
    assert body["fileCount"] == 2
    assert "customElements.define('info-card', InfoCard);" in body["content"]


def test_empty_upload_is_rejected(client) -> None:
    resp = client.post("/api/bundle", data=upload(("notes.txt", b"x")), content_type="multipart/form-data")
    assert resp.status_code == 400
    assert "No supported files" in resp.get_json()["error"]


def test_bad_output_kind_is_rejected(client) -> None:
    resp = client.post(
        "/bundle",
        data=upload(("a.css", b"a{}"), output_kind="pdf"),
        content_type="multipart/form-data",
    )
    assert resp.status_code == 400
