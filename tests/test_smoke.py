"""
CI smoke-tests — run with  `pytest -q`
"""
from fastapi.testclient import TestClient

from main import app

client = TestClient(app)


def test_health_ok() -> None:
    """Health check endpoint responds 200 with expected JSON."""
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_openapi_lists_sensitive_word_routes() -> None:
    paths = client.get("/openapi.json").json()["paths"]
    assert "/api/sensitive-words" in paths
    assert "/api/sensitive-words/sanitize" in paths
    assert "/api/sensitive-words/{word_id}" in paths
