"""
Tests : Settings (valeurs par défaut, secret JWT obligatoire, URL du store).
"""

from datetime import timedelta

import pytest
from pydantic import ValidationError

from todo_api.core.config import Settings


def _settings(**overrides):
    overrides.setdefault("JWT_SECRET", "unit-secret")
    return Settings(_env_file=None, **overrides)


def test_defaults(monkeypatch):
    monkeypatch.delenv("ENV", raising=False)
    settings = _settings()
    assert settings.PORT == 3000
    # Sans ENV explicite : pas de détails d'erreur exposés
    assert settings.ENV == "production"
    assert not settings.is_development
    assert settings.JWT_EXPIRES_IN == "1h"
    assert settings.jwt_settings().ttl == timedelta(hours=1)
    assert settings.jwt_settings().algorithm == "HS256"

def test_jwt_secret_is_required(monkeypatch):
    monkeypatch.delenv("JWT_SECRET", raising=False)
    with pytest.raises(ValidationError):
        Settings(_env_file=None, DATABASE_URL="sqlite://")

@pytest.mark.parametrize("secret", ["", "   ", "CHANGE_ME", "change-me-to-a-long-random-string"])
def test_placeholder_jwt_secret_is_rejected(secret):
    with pytest.raises(ValidationError):
        _settings(JWT_SECRET=secret)

def test_jwt_settings_follow_configuration():
    jwt_settings = _settings(JWT_SECRET="s3cret", JWT_EXPIRES_IN="15m").jwt_settings()
    assert jwt_settings.secret == "s3cret"
    assert jwt_settings.ttl == timedelta(minutes=15)

def test_database_key_is_used_as_password():
    settings = _settings(DATABASE_URL="postgresql://todo@db:5432/todos", DATABASE_KEY="pw")
    assert settings.database_url == "postgresql://todo:pw@db:5432/todos"

def test_database_key_does_not_override_url_password():
    settings = _settings(DATABASE_URL="postgresql://todo:inline@db/todos", DATABASE_KEY="pw")
    assert settings.database_url == "postgresql://todo:inline@db/todos"

def test_development_flag():
    assert _settings(ENV="development").is_development
    assert not _settings(ENV="production").is_development
    assert not _settings(ENV="test").is_development
