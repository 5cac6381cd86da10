from sqlmodel.ext.asyncio.session import AsyncSession

from accounts.adapter.repositories.password_reset_repository import PasswordResetRepository
from accounts.adapter.repositories.user_repository import UserRepository
from accounts.app.security.hmac_hasher import HMACHasher
from accounts.app.security.password_hasher import PasswordHasher
from accounts.app.services.unit_of_work import UnitOfWork
from accounts.app.validation.password_reset_validator import PasswordResetValidator
from accounts.app.validation.user_validator import UserValidator


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(
        self,
        session: AsyncSession,
        hmac_hasher: HMACHasher,
        password_hasher: PasswordHasher,
    ):
        self.session = session
        self.hmac_hasher = hmac_hasher
        self.password_hasher = password_hasher

    async def __aenter__(self):
        # Wrap each repository in its validator
        self.users = UserValidator(
            UserRepository(self.session), self.hmac_hasher, self.password_hasher
        )
        self.password_resets = PasswordResetValidator(
            PasswordResetRepository(self.session), self.hmac_hasher
        )
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
