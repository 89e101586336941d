"""
Shared pytest fixtures for User service tests.
"""
import os
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from app.application.validators.user_validator import UserValidator
from app.domain.models.user import User
from app.domain.repositories.user_repository import UserRepository


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_user_service",
        "DISPOSABLE_EMAIL_DOMAINS": "10minutemail.com,tempmail.org,guerrillamail.com",
        "LOG_LEVEL": "DEBUG",
        "LOCAL_TIMEZONE": "UTC",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.cors_allowed_origins = ["*"]
    mock.disposable_email_domains = frozenset({"10minutemail.com", "tempmail.org", "guerrillamail.com"})
    mock.log_level = "INFO"
    mock.local_timezone = "UTC"

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("app.core.config.get_settings", return_value=mock), patch(
        "app.utils.datetime_utils.get_settings", return_value=mock
    ), patch("app.di.providers.user_provider.get_settings", return_value=mock):
        yield mock


@pytest.fixture
def mock_user_repo():
    """Mock UserRepository with async methods."""
    return AsyncMock(spec=UserRepository)


@pytest.fixture
def user_validator():
    """Validator with the default disposable-domain deny-list."""
    return UserValidator()


@pytest.fixture
def fixed_time():
    return datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def make_user(fixed_time):
    """Factory for persisted users with deterministic timestamps."""
    def _make_user(user_id: int = 1, name: str = "John Doe", email: str = "john@example.com") -> User:
        return User.rehydrate(
            id=user_id,
            name=name,
            email=email,
            created_at=fixed_time,
            updated_at=fixed_time,
        )
    return _make_user
