# tests/test_backend_api.py

from __future__ import annotations

import json

import pytest
from fastapi.testclient import TestClient

from backend import main as backend_main
from backend.main import create_app, initialize_app
from core import config


@pytest.fixture()
def client() -> TestClient:
    return TestClient(create_app(serve_client=False))


def test_initialize_app_returns_same_handle() -> None:
    assert initialize_app() is initialize_app()
    assert initialize_app() is backend_main.app


def test_health(client: TestClient) -> None:
    resp = client.get("/health")
    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "ok"
    assert data["tasks"] == 16
    assert data["categories"] == 8


def test_categories(client: TestClient) -> None:
    resp = client.get("/api/categories")
    assert resp.status_code == 200
    first = resp.json()[0]
    assert first == {
        "name": "A. Data Collection & Cleaning",
        "label": "Data Collection & Cleaning",
        "icon": "database",
        "count": 3,
    }


def test_tasks_default_to_first_category(client: TestClient) -> None:
    resp = client.get("/api/tasks")
    assert [t["id"] for t in resp.json()] == [1, 2, 4]


def test_tasks_filter_and_search(client: TestClient) -> None:
    resp = client.get(
        "/api/tasks", params={"category": "B. Descriptive Analytics", "q": "VOLATILITY"}
    )
    assert resp.status_code == 200
    assert [t["title"] for t in resp.json()] == ["Calculate volatility per script"]

    resp = client.get("/api/tasks", params={"category": "Unknown"})
    assert resp.status_code == 200
    assert resp.json() == []


def test_get_task(client: TestClient) -> None:
    resp = client.get("/api/tasks/56")
    assert resp.status_code == 200
    assert resp.json()["title"] == "Create automated PDF reports"

    assert client.get("/api/tasks/3").status_code == 404


def test_download_notebook(client: TestClient) -> None:
    resp = client.get("/api/tasks/8/notebook")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("application/x-ipynb+json")
    assert 'filename="Calculate_volatility_per_script.ipynb"' in resp.headers["content-disposition"]
    doc = json.loads(resp.content)
    assert doc["cells"][0]["source"][0] == "# Calculate volatility per script\n"
    assert doc["nbformat"] == 4


def test_unhandled_errors_become_json(monkeypatch: pytest.MonkeyPatch) -> None:
    def boom():
        raise RuntimeError("exploded")

    monkeypatch.setattr(backend_main, "system_health", boom)
    monkeypatch.setattr(config, "PSX_ENV", "development")
    client = TestClient(create_app(serve_client=False), raise_server_exceptions=False)

    resp = client.get("/health")
    assert resp.status_code == 500
    assert resp.json() == {"message": "exploded"}


def test_unhandled_errors_hidden_in_production(monkeypatch: pytest.MonkeyPatch) -> None:
    def boom():
        raise RuntimeError("secret detail")

    monkeypatch.setattr(backend_main, "system_health", boom)
    monkeypatch.setattr(config, "PSX_ENV", "production")
    client = TestClient(create_app(serve_client=False), raise_server_exceptions=False)

    resp = client.get("/health")
    assert resp.status_code == 500
    assert resp.json() == {"message": "An error occurred"}


# --------------------------------------------------------------------------- #
# Static host
# --------------------------------------------------------------------------- #

def test_static_assets_and_spa_fallback(tmp_path) -> None:
    (tmp_path / "index.html").write_text("<html>app</html>", encoding="utf-8")
    (tmp_path / "assets").mkdir()
    (tmp_path / "assets" / "main.js").write_text("console.log(1)", encoding="utf-8")
    client = TestClient(create_app(static_dir=str(tmp_path), serve_client=True))

    resp = client.get("/assets/main.js")
    assert resp.status_code == 200
    assert resp.text == "console.log(1)"
    assert "etag" in resp.headers
    assert "max-age=" in resp.headers["cache-control"]

    resp = client.get("/dashboard")
    assert resp.status_code == 200
    assert resp.text == "<html>app</html>"

    # API routes still win over the fallback
    assert client.get("/api/tasks/1").json()["id"] == 1


def test_static_assets_revalidate_with_etag(tmp_path) -> None:
    (tmp_path / "main.js").write_text("console.log(1)", encoding="utf-8")
    client = TestClient(create_app(static_dir=str(tmp_path), serve_client=True))

    first = client.get("/main.js")
    assert first.status_code == 200
    etag = first.headers["etag"]
    assert "last-modified" in first.headers

    resp = client.get("/main.js", headers={"If-None-Match": etag})
    assert resp.status_code == 304


def test_static_assets_answer_head(tmp_path) -> None:
    (tmp_path / "index.html").write_text("<html>app</html>", encoding="utf-8")
    (tmp_path / "main.js").write_text("console.log(1)", encoding="utf-8")
    client = TestClient(create_app(static_dir=str(tmp_path), serve_client=True))

    resp = client.head("/main.js")
    assert resp.status_code == 200
    assert resp.headers["content-length"] == str(len("console.log(1)"))
    assert resp.content == b""

    # client routes fall back to index.html for HEAD too
    assert client.head("/dashboard").status_code == 200


def test_static_fallback_without_index_is_404(tmp_path) -> None:
    client = TestClient(create_app(static_dir=str(tmp_path), serve_client=True))
    resp = client.get("/anything")
    assert resp.status_code == 404
    assert resp.json() == {"message": "Not found"}


def test_static_path_traversal_is_not_served(tmp_path) -> None:
    dist = tmp_path / "dist"
    dist.mkdir()
    (tmp_path / "secret.txt").write_text("nope", encoding="utf-8")
    client = TestClient(create_app(static_dir=str(dist), serve_client=True))
    resp = client.get("/..%2Fsecret.txt")
    assert "nope" not in resp.text


def test_missing_build_directory_raises(tmp_path) -> None:
    with pytest.raises(RuntimeError, match="build the client first"):
        create_app(static_dir=str(tmp_path / "missing"), serve_client=True)
