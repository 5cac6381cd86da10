"""
Confirm Password Reset Use Case

Handles password reset confirmation with token validation.
"""

import logging
from datetime import timedelta

from sqlalchemy.exc import SQLAlchemyError

from accounts.app.errors import ErrorCode
from accounts.app.security.tokens import generate_token
from accounts.app.services.unit_of_work import UnitOfWork
from accounts.domain.base import utcnow
from accounts.domain.entities import PASSWORD_RESET_TTL, UserDraft
from accounts.libs.result import Error, Result, Return
from .dtos import ConfirmPasswordResetResponse, UserInfo

logger = logging.getLogger(__name__)


class ConfirmPasswordResetUseCase:
    """
    Use case for confirming password reset.

    Business Rules:
    - Token is found by its HMAC hash
    - Token must be younger than 12 hours
    - New password is required and goes through the user update chain
      (min 8 chars, bcrypt)
    - A new remember token is issued, signing out every other session
    - The consumed reset is deleted after the password change is committed;
      if that delete fails the reset still succeeds and the failure is logged
    """

    def __init__(self, uow: UnitOfWork, token_ttl: timedelta = PASSWORD_RESET_TTL):
        self.uow = uow
        self.token_ttl = token_ttl

    async def execute(
        self, token: str, new_password: str
    ) -> Result[ConfirmPasswordResetResponse]:
        """
        Execute confirm password reset use case.

        Args:
            token: Password reset token (plain text from email)
            new_password: New password to set

        Returns:
            Result with the user and a fresh remember token, or Error

        Errors:
            - INVALID_TOKEN: Token not found or malformed
            - TOKEN_EXPIRED: Token is older than the reset window
            - VALIDATION_ERROR: New password rejected by the user chain
        """
        async with self.uow:
            found = await self.uow.password_resets.get_by_token(token)
            if found.is_err():
                if found.error.code in (ErrorCode.NOT_FOUND, ErrorCode.VALIDATION_ERROR):
                    return Return.err(
                        Error(ErrorCode.INVALID_TOKEN, "Invalid or expired password reset token")
                    )
                return Return.err(found.error)

            reset = found.value
            reset_id = reset.id

            if reset.is_expired(utcnow(), self.token_ttl):
                return Return.err(
                    Error(ErrorCode.TOKEN_EXPIRED, "Password reset token has expired")
                )

            loaded = await self.uow.users.get_by_id(reset.user_id)
            if loaded.is_err():
                return Return.err(loaded.error)

            draft = UserDraft(
                user=loaded.value,
                password=new_password,
                remember_token=generate_token(),
            )
            updated = await self.uow.users.change_password(draft)
            if updated.is_err():
                return Return.err(updated.error)

            await self.uow.commit()

            response = ConfirmPasswordResetResponse(
                user=UserInfo.from_user(updated.value),
                remember_token=draft.remember_token,
            )

            await self._discard_reset(reset_id)

            return Return.ok(response)

    async def _discard_reset(self, reset_id: int) -> None:
        deleted = await self.uow.password_resets.delete(reset_id)
        if deleted.is_err():
            logger.warning(
                f"Could not delete consumed password reset {reset_id}: {deleted.error.message}"
            )
            await self.uow.rollback()
            return

        try:
            await self.uow.commit()
        except SQLAlchemyError as exc:
            logger.warning(f"Could not delete consumed password reset {reset_id}: {exc!r}")
            await self.uow.rollback()
