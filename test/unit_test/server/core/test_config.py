"""Unit tests for server configuration settings model.

Tests verify that the Settings model binds environment variables the way
.env.example documents them, including the nested ``__`` groups.
"""

from pathlib import Path

import pytest

from hotel_voice_assistant.server.core.config import (
    AuthConfig,
    CORSConfig,
    DatabaseConfig,
    EmailConfig,
    Settings,
    VapiConfig,
)


@pytest.fixture
def env_example_path() -> Path:
    """Get path to .env.example file."""
    return Path(__file__).resolve().parents[4] / ".env.example"


@pytest.fixture
def env_example_vars(env_example_path: Path) -> dict[str, str]:
    """Parse .env.example file and return environment variables."""
    env_vars = {}
    with open(env_example_path) as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            if "=" in line:
                key, value = line.split("=", 1)
                env_vars[key.strip()] = value.strip()
    return env_vars


class TestSettingsBinding:
    """Test Settings model environment variable binding."""

    def test_server_host_binding(self, env_example_vars: dict[str, str], monkeypatch):
        monkeypatch.setenv("HOTEL_VA_SERVER_HOST", env_example_vars["HOTEL_VA_SERVER_HOST"])

        settings = Settings()
        assert settings.server_host == env_example_vars["HOTEL_VA_SERVER_HOST"]

    def test_server_port_binding(self, env_example_vars: dict[str, str], monkeypatch):
        monkeypatch.setenv("HOTEL_VA_SERVER_PORT", env_example_vars["HOTEL_VA_SERVER_PORT"])

        settings = Settings()
        assert settings.server_port == int(env_example_vars["HOTEL_VA_SERVER_PORT"])

    def test_database_url_binding(self, monkeypatch):
        monkeypatch.setenv("DATABASE__URL", "postgres://u:p@db:5432/hotel")

        settings = Settings()
        assert settings.database.url == "postgres://u:p@db:5432/hotel"

    def test_auth_binding(self, monkeypatch):
        monkeypatch.setenv("AUTH__JWT_SECRET", "s")
        monkeypatch.setenv("AUTH__ACCESS_TOKEN_EXPIRE_MINUTES", "5")
        monkeypatch.setenv("AUTH__STAFF_PASSWORD", "pw")

        settings = Settings()
        assert settings.auth.jwt_secret == "s"
        assert settings.auth.access_token_expire_minutes == 5
        assert settings.auth.staff_password == "pw"

    def test_per_language_vapi_binding(self, monkeypatch):
        monkeypatch.setenv("VAPI__LANGUAGES__FR__PUBLIC_KEY", "pk-fr")
        monkeypatch.setenv("VAPI__LANGUAGES__FR__ASSISTANT_ID", "asst-fr")

        settings = Settings()
        fr = settings.vapi.languages["fr"]
        assert fr.public_key == "pk-fr"
        assert fr.assistant_id == "asst-fr"

    def test_email_binding(self, monkeypatch):
        monkeypatch.setenv("EMAIL__RESEND_API_KEY", "re_123")
        monkeypatch.setenv("EMAIL__DEFAULT_RECIPIENT", "frontdesk@example.com")

        settings = Settings()
        assert settings.email.is_configured is True
        assert settings.email.default_recipient == "frontdesk@example.com"

    def test_env_example_documents_every_group(self, env_example_vars: dict[str, str]):
        prefixes = {key.split("__", 1)[0] for key in env_example_vars if "__" in key}

        assert {"DATABASE", "AUTH", "VAPI", "EMAIL"} <= prefixes


class TestConfigDefaults:
    def test_database_default_is_postgres(self):
        assert DatabaseConfig().url.startswith("postgresql+asyncpg://")

    def test_auth_defaults(self):
        auth = AuthConfig()

        assert auth.jwt_algorithm == "HS256"
        assert auth.staff_username == "staff"
        assert auth.staff_password is None

    def test_cors_allows_patch(self):
        assert "PATCH" in CORSConfig().allow_methods

    def test_vapi_defaults(self):
        vapi = VapiConfig()

        assert vapi.base_url == "https://api.vapi.ai"
        assert vapi.languages == {}
        assert vapi.webhook_secret is None

    def test_email_unconfigured_without_key(self):
        assert EmailConfig().is_configured is False
