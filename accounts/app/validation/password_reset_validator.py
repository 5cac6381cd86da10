"""
Password-Reset Record Validator

Validates reset records and derives token hashes before they reach the
password reset repository.
"""

from accounts.app.errors import ErrorCode, ValidationRule
from accounts.app.repositories.password_reset_repository import IPasswordResetRepository
from accounts.app.security.hmac_hasher import HMACHasher
from accounts.app.security.tokens import generate_token
from accounts.app.validation.chain import as_validation_error, rule_failed, run_validators
from accounts.domain.entities import PasswordReset, PasswordResetDraft
from accounts.libs.result import Error, Result, Return


def user_id_required(draft: PasswordResetDraft) -> Result[None]:
    if draft.reset.user_id is None or draft.reset.user_id <= 0:
        return rule_failed(ValidationRule.INVALID_ID, "User ID is invalid")
    return Return.ok(None)


class PasswordResetValidator:
    """Validating wrapper around an IPasswordResetRepository."""

    def __init__(self, repository: IPasswordResetRepository, hmac_hasher: HMACHasher):
        self.repository = repository
        self.hmac_hasher = hmac_hasher

    async def get_by_token(self, token: str) -> Result[PasswordReset]:
        draft = PasswordResetDraft(reset=PasswordReset(user_id=0), token=token)
        validation = await run_validators(draft, self.token_hash_required)
        if validation.is_err():
            return Return.err(validation.error)
        return await self.repository.get_by_token_hash(draft.reset.token_hash)

    async def create(self, draft: PasswordResetDraft) -> Result[PasswordReset]:
        """
        Issue a new reset token for ``draft.reset.user_id`` and store its hash.

        The plaintext token is left on ``draft.token`` for delivery.
        """
        try:
            draft.token = generate_token()
        except OSError as exc:
            return Return.err(
                Error(ErrorCode.INTERNAL_ERROR, f"Unable to create reset token: {exc}")
            )

        validation = await run_validators(draft, user_id_required, self.token_hash_required)
        if validation.is_err():
            return Return.err(validation.error)
        return await self.repository.create(draft.reset)

    async def delete(self, reset_id: int) -> Result[None]:
        if reset_id is None or reset_id <= 0:
            return Return.err(
                as_validation_error(Error(ValidationRule.INVALID_ID, "Invalid ID"))
            )
        return await self.repository.delete(reset_id)

    async def delete_for_user(self, user_id: int) -> Result[int]:
        """Invalidate every outstanding reset of a user."""
        draft = PasswordResetDraft(reset=PasswordReset(user_id=user_id))
        validation = await run_validators(draft, user_id_required)
        if validation.is_err():
            return Return.err(validation.error)
        return await self.repository.delete_by_user_id(user_id)

    def token_hash_required(self, draft: PasswordResetDraft) -> Result[None]:
        if draft.token:
            draft.reset.token_hash = self.hmac_hasher.hash(draft.token)
        if not draft.reset.token_hash:
            return rule_failed(ValidationRule.TOKEN_HASH_REQUIRED, "Token hash is required")
        return Return.ok(None)
