from __future__ import annotations

import pytest

try:
    from fastapi.testclient import TestClient

    from tappable_text_kit.api_service import API_SCHEMA_VERSION, app
except Exception:  # pragma: no cover
    TestClient = None  # type: ignore[assignment]
    API_SCHEMA_VERSION = 1  # type: ignore[assignment]
    app = None  # type: ignore[assignment]

pytestmark = pytest.mark.skipif(
    TestClient is None or app is None, reason="FastAPI service dependencies are not installed."
)


client = TestClient(app) if (TestClient is not None and app is not None) else None


def test_healthz() -> None:
    assert client is not None
    r = client.get("/healthz")
    assert r.status_code == 200
    assert r.json() == {"ok": True, "schema_version": API_SCHEMA_VERSION}


def test_segments_backward_compat_without_schema_version() -> None:
    assert client is not None
    r = client.post("/segments", json={"text": "hi #there @you"})
    assert r.status_code == 200
    data = r.json()
    assert data["schema_version"] == API_SCHEMA_VERSION
    assert [s["text"] for s in data["segments"]] == ["hi", " ", "#there", "", " ", "@you", ""]
    assert data["counts"]["hashtag"] == 1
    assert data["counts"]["mention"] == 1
    # Nothing is pressable over HTTP.
    assert not any(s["tappable"] for s in data["segments"])


def test_segments_ignores_unknown_fields() -> None:
    assert client is not None
    r = client.post(
        "/segments",
        json={"text": "see http://t.co", "unknown_top_level_field": "ignored"},
    )
    assert r.status_code == 200
    kinds = [s["kind"] for s in r.json()["segments"]]
    assert kinds == ["plain", "plain", "link"]


def test_segments_with_config_dict() -> None:
    assert client is not None
    r = client.post(
        "/segments",
        json={
            "schema_version": API_SCHEMA_VERSION,
            "text": "#tag @user",
            "config": {"extract_hashtags": "false", "extract_mentions": False},
        },
    )
    assert r.status_code == 200
    data = r.json()
    assert data["n_tokens"] == 3
    assert data["n_segments"] == 3
    assert {s["kind"] for s in data["segments"]} == {"plain"}


def test_rejects_future_schema_version() -> None:
    assert client is not None
    r = client.post("/segments", json={"schema_version": API_SCHEMA_VERSION + 1, "text": "hi"})
    assert r.status_code == 400
    assert "Unsupported schema_version" in str(r.json().get("detail"))


def test_rejects_invalid_config() -> None:
    assert client is not None
    r = client.post(
        "/segments",
        json={"text": "#tag", "config": {"extract_hashtags": "sometimes"}},
    )
    assert r.status_code == 400
