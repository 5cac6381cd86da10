"""
Request Password Reset Use Case

Issues a password reset token for an account.
"""

import logging

from accounts.app.services.unit_of_work import UnitOfWork
from accounts.domain.entities import PasswordReset, PasswordResetDraft
from accounts.libs.result import Result, Return
from .dtos import PasswordResetIssued

logger = logging.getLogger(__name__)


class RequestPasswordResetUseCase:
    """
    Use case for requesting a password reset.

    Business Rules:
    - Token is 32 bytes from a CSPRNG, only its HMAC hash is stored
    - Any reset still outstanding for the user is invalidated first,
      so only the newest token works
    - Unknown email propagates as NOT_FOUND; hiding it from clients is the
      API layer's job
    - The plaintext token is returned for out-of-band delivery; this use
      case does not send mail
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, email: str) -> Result[PasswordResetIssued]:
        """
        Execute request password reset use case.

        Args:
            email: User's email address

        Returns:
            Result with the recipient and plaintext token, or Error
        """
        async with self.uow:
            found = await self.uow.users.get_by_email(email)
            if found.is_err():
                return Return.err(found.error)
            user = found.value

            invalidated = await self.uow.password_resets.delete_for_user(user.id)
            if invalidated.is_err():
                return Return.err(invalidated.error)

            draft = PasswordResetDraft(reset=PasswordReset(user_id=user.id))
            created = await self.uow.password_resets.create(draft)
            if created.is_err():
                return Return.err(created.error)

            await self.uow.commit()

            logger.info(
                f"Password reset issued for user {user.id} "
                f"({invalidated.value} earlier reset(s) invalidated)"
            )

            return Return.ok(
                PasswordResetIssued(user_id=user.id, email=user.email, token=draft.token)
            )
