import pytest
from unittest.mock import AsyncMock, MagicMock

from accounts.app.security.hmac_hasher import HMACHasher
from accounts.app.security.password_hasher import PasswordHasher
from tests.unit.fakes import FakeUnitOfWork

# Lowest bcrypt cost keeps the suite fast
TEST_BCRYPT_ROUNDS = 4


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    return uow


@pytest.fixture(scope="session")
def hmac_hasher():
    return HMACHasher("unit-test-hmac-key")


@pytest.fixture(scope="session")
def password_hasher():
    return PasswordHasher("unit-test-pepper", rounds=TEST_BCRYPT_ROUNDS)


@pytest.fixture
def fake_uow(hmac_hasher, password_hasher):
    """Unit of work with the real validators over in-memory repositories"""
    return FakeUnitOfWork(hmac_hasher, password_hasher)
