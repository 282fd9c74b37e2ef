"""Tests for the feed proxy service."""
import httpx
import pytest
from fastapi.testclient import TestClient

from orbitwatch.config import Settings
from orbitwatch.proxy import app, get_http_client, get_settings

UPSTREAM = "http://upstream.test/gp.php"

SETTINGS = Settings(
    source_url="http://localhost:3000/debris",
    upstream_url=UPSTREAM,
    proxy_host="127.0.0.1",
    proxy_port=3000,
    http_timeout=5.0,
    log_level="INFO",
)


@pytest.fixture
def client_with():
    """Build a TestClient whose upstream calls go to the given handler."""

    def build(handler):
        async def fake_http_client():
            async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as c:
                yield c

        app.dependency_overrides[get_settings] = lambda: SETTINGS
        app.dependency_overrides[get_http_client] = fake_http_client
        return TestClient(app)

    yield build
    app.dependency_overrides.clear()


class TestDebrisEndpoint:

    def test_forwards_array_unchanged(self, client_with):
        payload = [{"OBJECT_NAME": "SL-8 R/B", "NORAD_CAT_ID": 10966}]
        seen = []

        def handler(request):
            seen.append(str(request.url))
            return httpx.Response(200, json=payload)

        resp = client_with(handler).get("/debris")
        assert resp.status_code == 200
        assert resp.json() == payload
        assert seen == [UPSTREAM]

    def test_upstream_error_status(self, client_with):
        resp = client_with(lambda request: httpx.Response(502)).get("/debris")
        assert resp.status_code == 500
        assert resp.json() == {"error": "Failed to fetch data"}

    def test_upstream_unreachable(self, client_with):
        def handler(request):
            raise httpx.ConnectTimeout("timed out", request=request)

        resp = client_with(handler).get("/debris")
        assert resp.status_code == 500

    def test_upstream_invalid_json(self, client_with):
        resp = client_with(lambda request: httpx.Response(200, content=b"nope")).get(
            "/debris"
        )
        assert resp.status_code == 500

    def test_cors_open(self, client_with):
        resp = client_with(lambda request: httpx.Response(200, json=[])).get(
            "/debris", headers={"Origin": "http://localhost:8501"}
        )
        assert resp.headers["access-control-allow-origin"] == "*"


class TestHealth:

    def test_ok(self):
        assert TestClient(app).get("/health").json() == {"status": "ok"}
