from linear_mcp.transports.http.app import build_http_app
from linear_mcp.transports.http.config import HttpConfig
from starlette.testclient import TestClient


def _build_app(cfg: HttpConfig | None = None):
    return build_http_app(cfg=cfg)


def test_healthz_ok_without_env(monkeypatch):
    monkeypatch.delenv("LINEAR_API_KEY", raising=False)
    client = TestClient(_build_app())

    resp = client.get("/healthz")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}
    assert resp.headers["Cache-Control"] == "no-store"


def test_readyz_ok_with_default_key(monkeypatch):
    monkeypatch.setenv("LINEAR_API_KEY", "lin_api_k")
    client = TestClient(_build_app())

    resp = client.get("/readyz")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "ok"
    assert body["failed"] == []
    assert body["checks"]["default_api_key_present"] is True
    assert body["checks"]["header_override_supported"] is True


def test_readyz_missing_default_key(monkeypatch):
    monkeypatch.delenv("LINEAR_API_KEY", raising=False)
    client = TestClient(_build_app())

    resp = client.get("/readyz")
    assert resp.status_code == 503
    body = resp.json()
    assert body["status"] == "fail"
    assert body["failed"] == ["default_api_key_present"]


def test_ops_paths_get_request_id(monkeypatch):
    monkeypatch.delenv("LINEAR_API_KEY", raising=False)
    client = TestClient(_build_app())

    resp = client.get("/healthz", headers={"X-Request-Id": "ops-1"})
    assert resp.headers["X-Request-Id"] == "ops-1"
