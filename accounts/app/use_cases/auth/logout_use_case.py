"""
Logout Use Case

Logs a user out everywhere by rotating their remember token.
"""

from accounts.app.security.tokens import generate_token
from accounts.app.services.unit_of_work import UnitOfWork
from accounts.domain.entities import UserDraft
from accounts.libs.result import Result, Return
from .dtos import LogoutResponse


class LogoutUseCase:
    """
    Use case for logout.

    Business Rules:
    - A fresh remember token is generated and its hash stored
    - The new token is not handed out, so every token a client holds stops
      resolving to the user
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: int) -> Result[LogoutResponse]:
        async with self.uow:
            loaded = await self.uow.users.get_by_id(user_id)
            if loaded.is_err():
                return Return.err(loaded.error)

            draft = UserDraft(user=loaded.value, remember_token=generate_token())
            updated = await self.uow.users.update(draft)
            if updated.is_err():
                return Return.err(updated.error)

            await self.uow.commit()

            return Return.ok(
                LogoutResponse(status="logged_out", message="All sessions have been signed out")
            )
