from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from fastapi import Request
from functools import lru_cache
from typing import Literal, Optional

DEFAULT_CONTACT_EMAIL = "sales@issyx.com"

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class Settings(BaseSettings):
    # Resend credentials - without a key the contact form answers 503
    resend_api_key: Optional[str] = None
    resend_api_url: str = "https://api.resend.com/emails"
    resend_timeout_seconds: float = 10.0

    # Notification addressing
    contact_email: Optional[str] = None
    contact_from: str = "Issyx Website <noreply@issyx.com>"

    # Built Astro site, served for every non-API path in local development
    static_dir: str = "dist"

    log_level: LogLevel = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value):
        return value.strip().upper() if isinstance(value, str) else value

    @property
    def effective_contact_email(self) -> str:
        """Recipient of the demo-request notifications"""
        return self.contact_email or DEFAULT_CONTACT_EMAIL

    @classmethod
    def from_bindings(cls, env) -> "Settings":
        """
        Build settings from Cloudflare Worker bindings.

        Worker secrets and vars are attributes on the env object rather than
        process environment variables, so they are passed in explicitly.
        Unset bindings keep their defaults.
        """
        values = {}
        for field_name in cls.model_fields:
            value = getattr(env, field_name.upper(), None)
            if value is not None:
                values[field_name] = value
        return cls(**values)


@lru_cache
def load_settings() -> Settings:
    return Settings()


def get_settings(request: Request) -> Settings:
    """
    FastAPI dependency resolving the configuration for one request.

    On the edge the ASGI adapter puts the Worker bindings into the request
    scope under "env". Otherwise the settings the app was built with are
    used, and the process environment only when there are none.
    """
    bindings = request.scope.get("env")
    if bindings is not None:
        return Settings.from_bindings(bindings)

    app = request.scope.get("app")
    settings = getattr(app.state, "settings", None) if app is not None else None
    if settings is not None:
        return settings
    return load_settings()
