import pytest

from accounts.app.errors import ErrorCode, ValidationRule
from accounts.app.validation.password_reset_validator import PasswordResetValidator
from accounts.domain.entities import PasswordReset, PasswordResetDraft
from tests.unit.fakes import InMemoryPasswordResetRepository


@pytest.fixture
def repository():
    return InMemoryPasswordResetRepository()


@pytest.fixture
def validator(repository, hmac_hasher):
    return PasswordResetValidator(repository, hmac_hasher)


@pytest.mark.asyncio
async def test_create_generates_token_and_stores_hash(validator, repository, hmac_hasher):
    draft = PasswordResetDraft(reset=PasswordReset(user_id=7))

    result = await validator.create(draft)

    assert result.is_ok()
    assert len(draft.token) == 43
    assert result.value.token_hash == hmac_hasher.hash(draft.token)
    assert result.value.token_hash != draft.token
    assert len(repository.live()) == 1


@pytest.mark.asyncio
async def test_create_replaces_caller_token(validator):
    draft = PasswordResetDraft(reset=PasswordReset(user_id=7), token="caller-chosen")

    await validator.create(draft)

    assert draft.token != "caller-chosen"


@pytest.mark.asyncio
@pytest.mark.parametrize("user_id", [0, -3])
async def test_create_requires_user_id(validator, repository, user_id):
    result = await validator.create(PasswordResetDraft(reset=PasswordReset(user_id=user_id)))

    assert result.error.code == ErrorCode.VALIDATION_ERROR
    assert result.error.reason == ValidationRule.INVALID_ID
    assert repository.rows == {}


@pytest.mark.asyncio
async def test_get_by_token_finds_by_hash(validator):
    draft = PasswordResetDraft(reset=PasswordReset(user_id=7))
    created = (await validator.create(draft)).value

    result = await validator.get_by_token(draft.token)

    assert result.value.id == created.id


@pytest.mark.asyncio
async def test_get_by_token_empty_rejected(validator):
    result = await validator.get_by_token("")

    assert result.error.code == ErrorCode.VALIDATION_ERROR
    assert result.error.reason == ValidationRule.TOKEN_HASH_REQUIRED


@pytest.mark.asyncio
async def test_get_by_token_unknown_is_not_found(validator):
    result = await validator.get_by_token("never-issued")

    assert result.error.code == ErrorCode.NOT_FOUND


@pytest.mark.asyncio
async def test_deleted_reset_no_longer_found(validator):
    draft = PasswordResetDraft(reset=PasswordReset(user_id=7))
    created = (await validator.create(draft)).value

    assert (await validator.delete(created.id)).is_ok()

    assert (await validator.get_by_token(draft.token)).error.code == ErrorCode.NOT_FOUND


@pytest.mark.asyncio
async def test_delete_rejects_invalid_id(validator):
    result = await validator.delete(0)

    assert result.error.code == ErrorCode.VALIDATION_ERROR
    assert result.error.reason == ValidationRule.INVALID_ID


@pytest.mark.asyncio
async def test_delete_for_user_only_touches_that_user(validator, repository):
    await validator.create(PasswordResetDraft(reset=PasswordReset(user_id=7)))
    await validator.create(PasswordResetDraft(reset=PasswordReset(user_id=7)))
    await validator.create(PasswordResetDraft(reset=PasswordReset(user_id=8)))

    result = await validator.delete_for_user(7)

    assert result.value == 2
    assert [reset.user_id for reset in repository.live()] == [8]


@pytest.mark.asyncio
async def test_create_ignores_preset_hash(validator, hmac_hasher):
    draft = PasswordResetDraft(reset=PasswordReset(user_id=7, token_hash="stale-hash"))

    created = (await validator.create(draft)).value

    assert created.token_hash == hmac_hasher.hash(draft.token)
    assert (await validator.get_by_token(draft.token)).value.id == created.id
