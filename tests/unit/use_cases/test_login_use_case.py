from unittest.mock import AsyncMock, MagicMock

import pytest

from accounts.app.errors import ErrorCode
from accounts.app.use_cases.auth import LoginUseCase, SignupCommand, SignupUseCase
from accounts.domain.entities import User
from accounts.libs.result import Error, Return


async def signup(uow, email="jon@example.com", password="password123"):
    result = await SignupUseCase(uow).execute(SignupCommand(email=email, password=password))
    return result.value


@pytest.mark.asyncio
async def test_successful_login_rotates_remember_token(fake_uow, password_hasher, hmac_hasher):
    signed_up = await signup(fake_uow)

    result = await LoginUseCase(fake_uow, password_hasher).execute(
        "  JON@example.com", "password123"
    )

    assert result.is_ok()
    response = result.value
    assert response.user.id == signed_up.user.id
    assert response.remember_token != signed_up.remember_token

    stored = fake_uow.user_repository.rows[response.user.id]
    assert stored.remember_hash == hmac_hasher.hash(response.remember_token)


@pytest.mark.asyncio
async def test_earlier_remember_token_stops_working(fake_uow, password_hasher):
    signed_up = await signup(fake_uow)

    await LoginUseCase(fake_uow, password_hasher).execute("jon@example.com", "password123")

    async with fake_uow:
        found = await fake_uow.users.get_by_remember(signed_up.remember_token)
    assert found.error.code == ErrorCode.NOT_FOUND


@pytest.mark.asyncio
async def test_wrong_password(fake_uow, password_hasher):
    await signup(fake_uow)
    commits = fake_uow.commits

    result = await LoginUseCase(fake_uow, password_hasher).execute("jon@example.com", "wrong-password")

    assert result.error.code == ErrorCode.INVALID_CREDENTIALS
    assert fake_uow.commits == commits


@pytest.mark.asyncio
@pytest.mark.parametrize("email", ["ghost@example.com", "not-an-email", ""])
async def test_unknown_or_malformed_email_looks_like_wrong_password(fake_uow, password_hasher, email):
    await signup(fake_uow)

    result = await LoginUseCase(fake_uow, password_hasher).execute(email, "password123")

    assert result.error.code == ErrorCode.INVALID_CREDENTIALS
    assert result.error.message == "Invalid email or password"


@pytest.mark.asyncio
async def test_unknown_email_still_runs_bcrypt(mock_uow):
    """Unknown accounts pay for one bcrypt comparison like known ones"""
    hasher = MagicMock()
    mock_uow.users.get_by_email = AsyncMock(
        return_value=Return.err(Error(ErrorCode.NOT_FOUND, "User not found"))
    )

    result = await LoginUseCase(mock_uow, hasher).execute("ghost@example.com", "password123")

    assert result.error.code == ErrorCode.INVALID_CREDENTIALS
    hasher.verify_dummy.assert_called_once_with("password123")


@pytest.mark.asyncio
async def test_corrupt_stored_hash_is_internal_error(mock_uow, password_hasher):
    user = User(id=1, email="jon@example.com", password_hash="garbage", remember_hash="x")
    mock_uow.users.get_by_email = AsyncMock(return_value=Return.ok(user))
    mock_uow.users.update = AsyncMock()

    result = await LoginUseCase(mock_uow, password_hasher).execute("jon@example.com", "password123")

    assert result.error.code == ErrorCode.INTERNAL_ERROR
    mock_uow.users.update.assert_not_called()


@pytest.mark.asyncio
async def test_storage_failure_is_not_masked(mock_uow, password_hasher):
    mock_uow.users.get_by_email = AsyncMock(
        return_value=Return.err(Error(ErrorCode.STORAGE_FAILURE, "Database error"))
    )

    result = await LoginUseCase(mock_uow, password_hasher).execute("jon@example.com", "password123")

    assert result.error.code == ErrorCode.STORAGE_FAILURE
