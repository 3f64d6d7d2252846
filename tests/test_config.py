from types import SimpleNamespace

import pytest
from pydantic import ValidationError
from starlette.datastructures import State
from starlette.requests import Request

from issyx_site.core.config import Settings, get_settings, load_settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("RESEND_API_KEY", raising=False)
    monkeypatch.delenv("CONTACT_EMAIL", raising=False)

    settings = Settings(_env_file=None)

    assert settings.resend_api_key is None
    assert settings.effective_contact_email == "sales@issyx.com"
    assert settings.contact_from == "Issyx Website <noreply@issyx.com>"
    assert settings.resend_api_url == "https://api.resend.com/emails"


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("RESEND_API_KEY", "re_env")
    monkeypatch.setenv("CONTACT_EMAIL", "leads@issyx.com")

    settings = Settings(_env_file=None)

    assert settings.resend_api_key == "re_env"
    assert settings.effective_contact_email == "leads@issyx.com"


def test_from_bindings(monkeypatch):
    monkeypatch.delenv("CONTACT_EMAIL", raising=False)
    bindings = SimpleNamespace(RESEND_API_KEY="re_worker", ASSETS=object())

    settings = Settings.from_bindings(bindings)

    assert settings.resend_api_key == "re_worker"
    assert settings.effective_contact_email == "sales@issyx.com"


def test_get_settings_prefers_worker_bindings():
    bindings = SimpleNamespace(RESEND_API_KEY="re_worker", CONTACT_EMAIL="edge@issyx.com")
    request = Request({"type": "http", "method": "POST", "path": "/api/contact", "headers": [], "env": bindings})

    settings = get_settings(request)

    assert settings.resend_api_key == "re_worker"
    assert settings.effective_contact_email == "edge@issyx.com"


def test_get_settings_falls_back_to_environment():
    request = Request({"type": "http", "method": "POST", "path": "/api/contact", "headers": []})

    assert get_settings(request) is load_settings()


def test_get_settings_uses_app_settings():
    settings = Settings(_env_file=None, resend_api_key="re_app")
    app = SimpleNamespace(state=State())
    app.state.settings = settings
    request = Request({"type": "http", "method": "POST", "path": "/api/contact", "headers": [], "app": app})

    assert get_settings(request) is settings


def test_log_level_is_normalized():
    assert Settings(_env_file=None, log_level=" debug ").log_level == "DEBUG"


def test_invalid_log_level_is_rejected():
    with pytest.raises(ValidationError) as exc_info:
        Settings(_env_file=None, log_level="LOUD")

    assert "log_level" in str(exc_info.value)
