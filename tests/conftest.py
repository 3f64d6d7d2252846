"""
Pytest configuration and fixtures for testing.
"""

import pytest
from fastapi.responses import PlainTextResponse
from fastapi.testclient import TestClient
from starlette.requests import Request

from issyx_site.api.endpoints.contact import get_email_client
from issyx_site.core.config import Settings, get_settings
from issyx_site.main import create_app
from issyx_site.models.notification import DeliveryResult


class RecordingAssets:
    """ASGI stand-in for the static-asset server; remembers what it was sent."""

    def __init__(self):
        self.requests = []

    async def __call__(self, scope, receive, send):
        request = Request(scope, receive)
        body = await request.body()
        self.requests.append({"method": request.method, "path": request.url.path, "body": body})
        response = PlainTextResponse(f"asset {request.url.path}", headers={"X-Served-By": "assets"})
        await response(scope, receive, send)


class FakeEmailClient:
    def __init__(self, status_code=200, body='{"id": "msg_123"}', error=None):
        self.status_code = status_code
        self.body = body
        self.error = error
        self.sent = []

    async def send(self, message):
        self.sent.append(message)
        if self.error is not None:
            raise self.error
        return DeliveryResult(ok=200 <= self.status_code < 300, status_code=self.status_code, body=self.body)


@pytest.fixture
def settings():
    return Settings(_env_file=None, resend_api_key="re_test_key", contact_email=None)


@pytest.fixture
def assets():
    return RecordingAssets()


@pytest.fixture
def email_client():
    return FakeEmailClient()


@pytest.fixture
def app(settings, assets, email_client):
    application = create_app(settings=settings, assets=assets)
    application.dependency_overrides[get_settings] = lambda: settings
    application.dependency_overrides[get_email_client] = lambda: email_client
    return application


@pytest.fixture
def client(app):
    """Create a test client for the site application."""
    return TestClient(app)


@pytest.fixture
def valid_submission():
    return {
        "firstName": "Ada",
        "lastName": "Lovelace",
        "email": "ada@example.com",
        "company": "Analytical Engines Ltd",
        "deviceCount": "50-100",
        "interest": "Fleet monitoring",
        "message": "Looking for a demo next week.",
    }
