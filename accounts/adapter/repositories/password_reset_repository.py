from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy import update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from accounts.adapter.repositories.base import first_or_not_found, save, storage_failure
from accounts.app.errors import ErrorCode
from accounts.app.repositories.password_reset_repository import IPasswordResetRepository
from accounts.domain.base import utcnow
from accounts.domain.entities import PasswordReset
from accounts.libs.result import Error, Result, Return


class PasswordResetRepository(IPasswordResetRepository):
    """PasswordReset repository implementation using SQLModel

    Deletes are soft: deleted_at is set and the row disappears from lookups.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_token_hash(self, token_hash: str) -> Result[PasswordReset]:
        """Get password reset by token hash"""
        stmt = select(PasswordReset).where(
            PasswordReset.token_hash == token_hash,
            PasswordReset.deleted_at.is_(None),
        )
        return await first_or_not_found(self.session, stmt, "Password reset not found")

    async def create(self, reset: PasswordReset) -> Result[PasswordReset]:
        """Create a new password reset"""
        return await save(self.session, reset)

    async def delete(self, reset_id: int) -> Result[None]:
        """Soft-delete a password reset by ID"""
        now = utcnow()
        stmt = (
            update(PasswordReset)
            .where(PasswordReset.id == reset_id, PasswordReset.deleted_at.is_(None))
            .values(deleted_at=now, updated_at=now)
        )
        try:
            result = await self.session.execute(stmt)
            await self.session.flush()
        except SQLAlchemyError as exc:
            return storage_failure(exc)

        if result.rowcount == 0:
            return Return.err(Error(ErrorCode.NOT_FOUND, "Password reset not found"))
        return Return.ok(None)

    async def delete_by_user_id(self, user_id: int) -> Result[int]:
        """Soft-delete all live password resets for a user"""
        now = utcnow()
        stmt = (
            update(PasswordReset)
            .where(PasswordReset.user_id == user_id, PasswordReset.deleted_at.is_(None))
            .values(deleted_at=now, updated_at=now)
        )
        try:
            result = await self.session.execute(stmt)
            await self.session.flush()
        except SQLAlchemyError as exc:
            return storage_failure(exc)
        return Return.ok(result.rowcount)
