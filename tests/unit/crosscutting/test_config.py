"""
Name: Settings Tests

Responsibilities:
  - Environment parsing and derived helpers
  - Startup validation (pool bounds, production secrets)
"""

import pytest
from pydantic import ValidationError

from hr_system.crosscutting.config import Settings

pytestmark = pytest.mark.unit

STRONG_SECRET = "s" * 40


def _settings(**overrides) -> Settings:
    values = {"database_url": "postgresql://localhost/hr"}
    values.update(overrides)
    return Settings(**values)


def test_derived_values():
    settings = _settings(
        allowed_origins="http://a.test, ,http://b.test", jwt_access_ttl_minutes=90
    )

    assert settings.get_allowed_origins_list() == ["http://a.test", "http://b.test"]
    assert settings.jwt_access_ttl_seconds == 5400


@pytest.mark.parametrize("env", ["test", "Testing", " ci "])
def test_test_environments(env):
    assert _settings(app_env=env).is_test() is True


def test_integration_environment_uses_real_adapters():
    assert _settings(app_env="integration").is_test() is False


def test_pool_bounds_are_validated():
    with pytest.raises(ValidationError):
        _settings(db_pool_min_size=5, db_pool_max_size=2)


@pytest.mark.parametrize(
    "field", ["jwt_access_ttl_minutes", "profile_cache_ttl_seconds", "db_pool_max_size"]
)
def test_non_positive_values_are_rejected(field):
    with pytest.raises(ValidationError):
        _settings(**{field: 0})


@pytest.mark.parametrize(
    "secret", ["dev-secret", "short-but-custom", "CHANGEME"]
)
def test_production_rejects_weak_jwt_secret(secret):
    with pytest.raises(ValidationError):
        _settings(app_env="production", jwt_secret=secret, default_password="x" * 12)


def test_production_requires_default_password():
    with pytest.raises(ValidationError):
        _settings(app_env="production", jwt_secret=STRONG_SECRET, default_password=" ")


def test_production_accepts_strong_configuration():
    settings = _settings(
        app_env="production", jwt_secret=STRONG_SECRET, default_password="Welcome-2025!"
    )

    assert settings.is_production() is True


def test_settings_are_frozen():
    settings = _settings()

    with pytest.raises(ValidationError):
        settings.log_level = "DEBUG"
