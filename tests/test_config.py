"""
Tests for application settings.
"""

import pytest

from devconnector.config import Settings

STRONG_SECRET = "x" * 48


def test_defaults(monkeypatch):
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    settings = Settings(_env_file=None, JWT_SECRET_KEY=STRONG_SECRET)

    assert settings.github_repos_limit == 5
    assert settings.github_token is None
    assert settings.api_prefix == "/api"


def test_api_prefix_is_normalized():
    settings = Settings(_env_file=None, JWT_SECRET_KEY=STRONG_SECRET, API_PREFIX="api/")

    assert settings.api_prefix == "/api"


def test_cors_origins_list():
    settings = Settings(
        _env_file=None,
        JWT_SECRET_KEY=STRONG_SECRET,
        CORS_ALLOWED_ORIGINS="http://a.example.com, http://b.example.com,",
    )

    assert settings.cors_origins_list == ["http://a.example.com", "http://b.example.com"]


def test_default_secret_warns_in_development(monkeypatch):
    monkeypatch.setenv("ENV", "development")

    with pytest.warns(UserWarning, match="default value"):
        Settings(_env_file=None, JWT_SECRET_KEY="CHANGE_ME")


def test_default_secret_rejected_in_production(monkeypatch):
    monkeypatch.setenv("ENV", "production")

    with pytest.raises(ValueError, match="JWT_SECRET_KEY"):
        Settings(_env_file=None, JWT_SECRET_KEY="CHANGE_ME")


def test_validate_production_config(monkeypatch):
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    settings = Settings(_env_file=None, JWT_SECRET_KEY="short-but-unique-secret")

    errors, warnings = settings.validate_production_config()

    assert errors == ["JWT_SECRET_KEY must be at least 32 characters"]
    assert any("GITHUB_TOKEN" in w for w in warnings)
