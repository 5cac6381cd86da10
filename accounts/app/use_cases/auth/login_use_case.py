"""
Login Use Case

Handles user authentication and issues a remember token.
"""

import logging

from accounts.app.errors import ErrorCode
from accounts.app.security.password_hasher import PasswordHasher
from accounts.app.security.tokens import generate_token
from accounts.app.services.unit_of_work import UnitOfWork
from accounts.domain.entities import User, UserDraft
from accounts.libs.result import Error, Result, Return
from .dtos import LoginResponse, UserInfo

logger = logging.getLogger(__name__)


class LoginUseCase:
    """
    Use case for user login.

    Business Rules:
    - Unknown email, malformed email and wrong password all fail with the
      same INVALID_CREDENTIALS error (no account enumeration)
    - Unknown emails still pay for one bcrypt comparison
    - A corrupt stored hash is an INTERNAL_ERROR, not a failed login
    - Each login issues a fresh remember token; earlier tokens stop working
    """

    def __init__(self, uow: UnitOfWork, password_hasher: PasswordHasher):
        self.uow = uow
        self.password_hasher = password_hasher

    async def authenticate(self, email: str, password: str) -> Result[User]:
        """
        Match an email/password pair against the stored user.

        Must be awaited inside the unit of work.
        """
        found = await self.uow.users.get_by_email(email)
        if found.is_err():
            if found.error.code in (ErrorCode.NOT_FOUND, ErrorCode.VALIDATION_ERROR):
                self.password_hasher.verify_dummy(password)
                return Return.err(
                    Error(ErrorCode.INVALID_CREDENTIALS, "Invalid email or password")
                )
            return Return.err(found.error)

        user = found.value
        verified = self.password_hasher.verify(user.password_hash, password)
        if verified.is_err():
            if verified.error.code == ErrorCode.CREDENTIAL_MISMATCH:
                return Return.err(
                    Error(ErrorCode.INVALID_CREDENTIALS, "Invalid email or password")
                )
            logger.error(f"Password verification failed for user {user.id}: {verified.error.message}")
            return Return.err(Error(ErrorCode.INTERNAL_ERROR, "Could not authenticate"))

        return Return.ok(user)

    async def execute(self, email: str, password: str) -> Result[LoginResponse]:
        """
        Execute login use case.

        Args:
            email: User email (normalized by the validator)
            password: Plain text password

        Returns:
            Result with LoginResponse containing the user and remember token, or Error
        """
        async with self.uow:
            authenticated = await self.authenticate(email, password)
            if authenticated.is_err():
                return Return.err(authenticated.error)

            # Rotate remember token
            draft = UserDraft(user=authenticated.value, remember_token=generate_token())
            updated = await self.uow.users.update(draft)
            if updated.is_err():
                return Return.err(updated.error)

            await self.uow.commit()

            return Return.ok(
                LoginResponse(
                    user=UserInfo.from_user(updated.value),
                    remember_token=draft.remember_token,
                )
            )
