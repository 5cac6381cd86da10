"""
Load User Use Case

Resolves the user behind a remember token presented by a client.
"""

from accounts.app.errors import ErrorCode
from accounts.app.services.unit_of_work import UnitOfWork
from accounts.app.use_cases.auth.dtos import UserInfo
from accounts.libs.result import Error, Result, Return


class LoadUserUseCase:
    """
    Use case for loading the current user.

    Business Rules:
    - The token is hashed before lookup; plaintext tokens are never queried
    - Unknown, rotated or malformed tokens all fail with INVALID_TOKEN
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, remember_token: str) -> Result[UserInfo]:
        async with self.uow:
            found = await self.uow.users.get_by_remember(remember_token)
            if found.is_err():
                if found.error.code in (ErrorCode.NOT_FOUND, ErrorCode.VALIDATION_ERROR):
                    return Return.err(
                        Error(ErrorCode.INVALID_TOKEN, "Invalid or expired remember token")
                    )
                return Return.err(found.error)

            return Return.ok(UserInfo.from_user(found.value))
