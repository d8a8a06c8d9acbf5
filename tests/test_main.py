"""
Tests for the HTTP pipeline in main.py.

Tests cover:
- Unhandled error responses in development and production
- HTTPS redirection
"""

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from gigapi.core.config import settings
from main import app, configure_middleware

FAILING_PATH = "/__failing"


@pytest_asyncio.fixture
async def failing_client():
    """
    Client against the real app with an extra route that raises.

    Starlette re-raises after the error handler responds, so the transport
    must not propagate app exceptions.
    """
    async def fail():
        raise RuntimeError("boom")

    app.add_api_route(FAILING_PATH, fail, methods=["GET"])
    route = app.router.routes[-1]

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as test_client:
        yield test_client

    app.router.routes.remove(route)


class TestUnhandledErrors:
    """Tests for the catch-all error handler"""

    @pytest.mark.asyncio
    async def test_production_hides_exception_text(self, failing_client, monkeypatch):
        monkeypatch.setattr(settings, "ENVIRONMENT", "production")

        response = await failing_client.get(FAILING_PATH)

        assert response.status_code == 500
        assert response.json() == {"detail": "Internal server error"}

    @pytest.mark.asyncio
    async def test_development_shows_exception_text(self, failing_client, monkeypatch):
        monkeypatch.setattr(settings, "ENVIRONMENT", "development")

        response = await failing_client.get(FAILING_PATH)

        assert response.status_code == 500
        assert response.json() == {"detail": "RuntimeError: boom"}


class TestHttpsRedirect:
    """Tests for optional HTTPS redirection"""

    @staticmethod
    def build_app():
        test_app = FastAPI()

        @test_app.get("/ping")
        async def ping():
            return {"status": "ok"}

        configure_middleware(test_app)
        return test_app

    @pytest.mark.asyncio
    async def test_redirects_when_enabled(self, monkeypatch):
        monkeypatch.setattr(settings, "HTTPS_REDIRECT", True)

        transport = ASGITransport(app=self.build_app())
        async with AsyncClient(transport=transport, base_url="http://test") as test_client:
            response = await test_client.get("/ping")

        assert response.status_code == 307
        assert response.headers["location"] == "https://test/ping"

    @pytest.mark.asyncio
    async def test_no_redirect_when_disabled(self, monkeypatch):
        monkeypatch.setattr(settings, "HTTPS_REDIRECT", False)

        transport = ASGITransport(app=self.build_app())
        async with AsyncClient(transport=transport, base_url="http://test") as test_client:
            response = await test_client.get("/ping")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}
