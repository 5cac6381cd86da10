from datetime import timedelta

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from accounts.adapter.services.mailgun_mail_service import MailgunMailService
from accounts.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from accounts.app.errors import ErrorCode
from accounts.app.security.hmac_hasher import HMACHasher
from accounts.app.security.password_hasher import PasswordHasher
from accounts.app.services.mail_service import IMailService
from accounts.app.services.unit_of_work import UnitOfWork
from accounts.app.use_cases.auth import UserInfo
from accounts.app.use_cases.users import LoadUserUseCase

engine = create_async_engine(ApplicationConfig.DB_URI, echo=ApplicationConfig.DB_ECHO, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

# Secrets are handed to the hashers here and nowhere else
hmac_hasher = HMACHasher(ApplicationConfig.HMAC_SECRET_KEY)
password_hasher = PasswordHasher(
    ApplicationConfig.PASSWORD_PEPPER, rounds=ApplicationConfig.BCRYPT_ROUNDS
)
password_reset_ttl = timedelta(hours=ApplicationConfig.PASSWORD_RESET_TTL_HOURS)

mail_service = MailgunMailService(
    domain=ApplicationConfig.MAILGUN_DOMAIN,
    api_key=ApplicationConfig.MAILGUN_API_KEY,
    sender=ApplicationConfig.MAIL_SENDER,
    reset_url=ApplicationConfig.PASSWORD_RESET_URL,
    api_base=ApplicationConfig.MAILGUN_API_BASE,
    timeout=ApplicationConfig.MAIL_TIMEOUT_SECONDS,
)

security = HTTPBearer()


async def create_tables() -> None:
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session, hmac_hasher, password_hasher)


def get_password_hasher() -> PasswordHasher:
    return password_hasher


def get_password_reset_ttl() -> timedelta:
    return password_reset_ttl


def get_mail_service() -> IMailService:
    return mail_service


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> UserInfo:
    """
    Dependency to resolve the remember token in the Authorization header.

    Args:
        credentials: Bearer token from Authorization header
        uow: Unit of work for the user lookup

    Returns:
        UserInfo of the token's owner

    Raises:
        HTTPException: 401 if the token does not resolve to a user
    """
    result = await LoadUserUseCase(uow).execute(credentials.credentials)

    if result.is_err():
        if result.error.code == ErrorCode.INVALID_TOKEN:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid or expired token",
            )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )

    return result.value
