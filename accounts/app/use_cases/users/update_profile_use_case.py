"""
Update Profile Use Case

Lets a signed-in user change their name, email address or password.
"""

from typing import Optional

from pydantic import BaseModel

from accounts.app.services.unit_of_work import UnitOfWork
from accounts.app.use_cases.auth.dtos import UserInfo
from accounts.domain.entities import UserDraft
from accounts.libs.result import Result, Return


class UpdateProfileCommand(BaseModel):
    """Fields left as None are not changed"""

    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class UpdateProfileUseCase:
    """
    Use case for updating the current user.

    Business Rules:
    - Changes go through the user update chain (email normalized and
      checked, new password min 8 chars and bcrypt hashed)
    - Without a new password the stored hash is kept as is
    - The remember token is left alone, the caller stays signed in
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: int, command: UpdateProfileCommand) -> Result[UserInfo]:
        async with self.uow:
            loaded = await self.uow.users.get_by_id(user_id)
            if loaded.is_err():
                return Return.err(loaded.error)

            user = loaded.value
            if command.name is not None:
                user.name = command.name.strip()
            if command.email is not None:
                user.email = command.email

            draft = UserDraft(user=user, password=command.password or "")
            updated = await self.uow.users.update(draft)
            if updated.is_err():
                return Return.err(updated.error)

            await self.uow.commit()

            return Return.ok(UserInfo.from_user(updated.value))
