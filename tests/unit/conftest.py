from datetime import timedelta
from unittest.mock import AsyncMock, MagicMock

import pytest

from fleetadmin.app.services.password_hasher import PasswordHasher
from fleetadmin.app.services.token_manager import TokenManager

REPOSITORIES = ("companies", "admins", "modules", "company_modules", "drivers", "shifts", "users")


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork whose repositories expose AsyncMock methods"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    for name in REPOSITORIES:
        setattr(uow, name, AsyncMock())
    return uow


@pytest.fixture(scope="session")
def hasher():
    return PasswordHasher(rounds=4)


@pytest.fixture
def admin_tokens():
    return TokenManager("unit-admin-secret", timedelta(hours=1))


@pytest.fixture
def user_tokens():
    return TokenManager("unit-user-secret", timedelta(hours=1))
