"""
HTTP tests for the /albums endpoints using FastAPI's TestClient.
"""
from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Garante que o pacote albums_api seja importavel durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from albums_api.app import create_app  # noqa: E402
from albums_api.core import config as core_config  # noqa: E402

NEW_ALBUM = {"id": "4", "title": "Kind of Blue", "artist": "Miles Davis", "price": 29.99}


@pytest.fixture()
def albums_path(tmp_path, monkeypatch):
    """Aponta ALBUMS_PATH para um arquivo temporario e limpa o cache de settings."""
    path = tmp_path / "albums.json"
    monkeypatch.setenv("ALBUMS_PATH", str(path))
    core_config.get_settings.cache_clear()
    yield path
    core_config.get_settings.cache_clear()


@pytest.fixture()
def client(albums_path):
    with TestClient(create_app()) as c:
        yield c


def test_list_returns_defaults(client):
    resp = client.get("/albums")
    assert resp.status_code == 200
    body = resp.json()
    assert [a["id"] for a in body] == ["1", "2", "3"]
    assert body[0] == {"id": "1", "title": "Blue Train", "artist": "John Coltrane", "price": 56.99}


def test_responses_are_indented(client):
    resp = client.get("/albums/2")
    assert resp.text.startswith('{\n    "id": "2"')


def test_get_by_id(client):
    resp = client.get("/albums/3")
    assert resp.status_code == 200
    assert resp.json()["title"] == "Sarah Vaughan and Clifford Brown"


def test_get_unknown_id_is_404_with_message(client):
    resp = client.get("/albums/999")
    assert resp.status_code == 404
    assert resp.json() == {"message": "album not found"}


def test_create_echoes_album_and_persists(client, albums_path):
    resp = client.post("/albums", json=NEW_ALBUM)
    assert resp.status_code == 201
    assert resp.json() == NEW_ALBUM

    assert client.get("/albums/4").json() == NEW_ALBUM
    assert [a["id"] for a in client.get("/albums").json()] == ["1", "2", "3", "4"]
    assert json.loads(albums_path.read_text(encoding="utf-8"))[-1] == NEW_ALBUM


def test_restart_reloads_persisted_catalog(client, albums_path):
    client.post("/albums", json=NEW_ALBUM)
    before = client.get("/albums").json()

    with TestClient(create_app()) as restarted:
        assert restarted.get("/albums").json() == before


@pytest.mark.parametrize(
    "payload",
    [
        b"{not json",
        b"[]",
        b'{"id": 4, "title": "x", "artist": "y", "price": 1}',
        b'{"id": "4", "title": "x", "artist": "y", "price": "cheap"}',
        b'{"id": "9", "price": 1' + b"0" * 400 + b"}",
        b'{"id": "9", "price": NaN}',
        b'{"id": "9", "price": Infinity}',
        b'{"id": "9", "price": 1e999}',
    ],
)
def test_malformed_body_is_400_and_changes_nothing(client, albums_path, payload):
    resp = client.post("/albums", content=payload, headers={"Content-Type": "application/json"})
    assert resp.status_code == 400
    assert resp.json() == {"message": "invalid album"}
    assert len(client.get("/albums").json()) == 3
    assert not albums_path.exists()


def test_missing_fields_default_to_empty_values(client):
    resp = client.post("/albums", json={"id": "5"})
    assert resp.status_code == 201
    assert resp.json() == {"id": "5", "title": "", "artist": "", "price": 0.0}


def test_write_failure_is_500_and_not_appended(tmp_path, monkeypatch):
    monkeypatch.setenv("ALBUMS_PATH", str(tmp_path / "missing-dir" / "albums.json"))
    core_config.get_settings.cache_clear()
    try:
        with TestClient(create_app()) as client:
            resp = client.post("/albums", json=NEW_ALBUM)
            assert resp.status_code == 500
            assert resp.json() == {"message": "album could not be saved"}
            assert client.get("/albums/4").status_code == 404
    finally:
        core_config.get_settings.cache_clear()


def test_access_log_line_per_request(client, caplog):
    with caplog.at_level("INFO", logger="albums_api.access"):
        client.get("/albums/999")
    lines = [r.getMessage() for r in caplog.records if r.name == "albums_api.access"]
    assert len(lines) == 1
    assert "GET /albums/999 -> 404" in lines[0]


def test_startup_log_names_environment_and_catalog(albums_path, monkeypatch, caplog):
    monkeypatch.setenv("APP_ENV", "staging")
    core_config.get_settings.cache_clear()
    with caplog.at_level("INFO", logger="albums_api.app"):
        app = create_app()
    assert f"env=staging, catalog={albums_path}" in caplog.text
    assert app.title == "Albums API (staging)"
