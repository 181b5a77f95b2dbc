from __future__ import annotations

import pytest
from pydantic import ValidationError

from app.config import Settings


def _settings(**overrides) -> Settings:
    values = {
        "database_url": "sqlite://",
        "secret_key": "secret",
        "access_token_expire_minutes": 5,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def test_page_size_defaults() -> None:
    settings = _settings()

    assert settings.notifications_default_page_size == 25
    assert settings.notifications_max_page_size == 100
    assert settings.app_timezone == "UTC"


def test_default_page_size_cannot_exceed_maximum() -> None:
    with pytest.raises(ValidationError):
        _settings(notifications_default_page_size=200, notifications_max_page_size=50)


def test_token_lifetime_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        _settings(access_token_expire_minutes=0)
