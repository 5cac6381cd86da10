from accounts.app.services.unit_of_work import UnitOfWork
from accounts.domain.entities import User, UserDraft
from accounts.libs.result import Result, Return
from .dtos import UserInfo
from .signup_dto import SignupCommand, SignupResponse


class SignupUseCase:
    """
    Signup Use Case

    Command/Response Pattern:
    - Input: SignupCommand
    - Output: Result[SignupResponse]

    Business Logic:
    1. Run the full user creation chain (normalize email, format, availability,
       password rules, bcrypt, remember token)
    2. Persist the user
    3. Commit transaction
    4. Return the user and the plaintext remember token
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: SignupCommand) -> Result[SignupResponse]:
        """
        Execute signup use case

        Args:
            command: SignupCommand with name, email, password

        Returns:
            Result[SignupResponse], or VALIDATION_ERROR (reason EMAIL_TAKEN
            when the address is registered) / STORAGE_FAILURE
        """
        async with self.uow:
            draft = UserDraft(
                user=User(name=command.name.strip(), email=command.email),
                password=command.password,
            )
            created = await self.uow.users.create(draft)
            if created.is_err():
                return Return.err(created.error)

            await self.uow.commit()

            return Return.ok(
                SignupResponse(
                    user=UserInfo.from_user(created.value),
                    remember_token=draft.remember_token,
                )
            )
