import logging
from datetime import timedelta

from fastapi import APIRouter, BackgroundTasks, Depends, status
from pydantic import BaseModel, Field

from accounts.api.error import ClientError, ServerError
from accounts.app.errors import ErrorCode, ValidationRule
from accounts.app.security.password_hasher import PasswordHasher
from accounts.app.services.mail_service import IMailService
from accounts.app.services.unit_of_work import UnitOfWork
from accounts.app.use_cases.auth import (
    SignupCommand,
    SignupResponse,
    SignupUseCase,
    LoginUseCase,
    LogoutUseCase,
    RequestPasswordResetUseCase,
    ConfirmPasswordResetUseCase,
    LoginResponse,
    LogoutResponse,
    RequestPasswordResetResponse,
    ConfirmPasswordResetResponse,
    UserInfo,
)
from accounts.depends import (
    get_current_user,
    get_mail_service,
    get_password_hasher,
    get_password_reset_ttl,
    get_unit_of_work,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])

RESET_REQUESTED = RequestPasswordResetResponse(
    status="reset_requested",
    message="If an account exists for that email, a reset link has been sent",
)


class SignupRequest(BaseModel):
    """
    Signup HTTP request payload

    Only shape is checked here; email format and password length are
    enforced by the user validation chain so every entry point agrees.
    """

    name: str = Field("", max_length=255, description="Display name")
    email: str = Field(..., description="User email address")
    password: str = Field(..., description="User password (min 8 chars)")


@router.post(
    "/signup", status_code=status.HTTP_201_CREATED, response_model=SignupResponse
)
async def signup(
    request: SignupRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    User Signup

    Creates an account and signs the caller in with a remember token.

    Raises:
        - 400 Bad Request: Email or password rejected by validation
        - 409 Conflict: Email already taken
        - 500 Internal Server Error: Server error
    """
    command = SignupCommand(
        name=request.name, email=request.email, password=request.password
    )

    use_case = SignupUseCase(uow)
    result = await use_case.execute(command)

    if result.is_err():
        error = result.error
        if error.code == ErrorCode.VALIDATION_ERROR:
            if error.reason == ValidationRule.EMAIL_TAKEN:
                raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value


class LoginRequest(BaseModel):
    """Login HTTP request payload"""

    email: str = Field(..., description="User email address")
    password: str = Field(..., description="User password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def login(
    request: LoginRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
):
    """
    User Login

    Checks the email/password pair and issues a new remember token.
    Earlier remember tokens stop working.

    Raises:
        - 401 Unauthorized: Invalid credentials
        - 500 Internal Server Error: Server error
    """
    use_case = LoginUseCase(uow, password_hasher)
    result = await use_case.execute(request.email, request.password)

    if result.is_err():
        error = result.error
        if error.code == ErrorCode.INVALID_CREDENTIALS:
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        raise ServerError(error)

    return result.value


@router.post("/logout", status_code=status.HTTP_200_OK, response_model=LogoutResponse)
async def logout(
    current_user: UserInfo = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Logout

    Rotates the remember token without returning it, which signs the user
    out of every session.

    Raises:
        - 401 Unauthorized: Missing or invalid remember token
        - 500 Internal Server Error: Server error
    """
    use_case = LogoutUseCase(uow)
    result = await use_case.execute(current_user.id)

    if result.is_err():
        raise ServerError(result.error)

    return result.value


class RequestPasswordResetRequest(BaseModel):
    """Request password reset HTTP request payload"""

    email: str = Field(..., description="User email address")


async def deliver_password_reset(mail_service: IMailService, email: str, token: str) -> None:
    sent = await mail_service.send_password_reset(email, token)
    if sent.is_err():
        logger.error(f"Password reset email was not delivered: {sent.error.message}")


@router.post(
    "/forgot-password",
    status_code=status.HTTP_200_OK,
    response_model=RequestPasswordResetResponse,
)
async def forgot_password(
    request: RequestPasswordResetRequest,
    background_tasks: BackgroundTasks,
    uow: UnitOfWork = Depends(get_unit_of_work),
    mail_service: IMailService = Depends(get_mail_service),
):
    """
    Request Password Reset

    Issues a reset token and mails it to the account owner.

    Security:
        - No email enumeration (same response for known and unknown emails)
        - The token only ever leaves the server by email

    Returns:
        - 200 OK: Always, unless the server fails
        - 500 Internal Server Error: Server error
    """
    use_case = RequestPasswordResetUseCase(uow)
    result = await use_case.execute(request.email)

    if result.is_err():
        error = result.error
        if error.code in (ErrorCode.NOT_FOUND, ErrorCode.VALIDATION_ERROR):
            return RESET_REQUESTED
        raise ServerError(error)

    issued = result.value
    background_tasks.add_task(deliver_password_reset, mail_service, issued.email, issued.token)

    return RESET_REQUESTED


class ConfirmPasswordResetRequest(BaseModel):
    """Confirm password reset HTTP request payload"""

    token: str = Field(..., description="Password reset token from the email")
    new_password: str = Field(..., description="New password (min 8 chars)")


@router.post(
    "/reset-password",
    status_code=status.HTTP_200_OK,
    response_model=ConfirmPasswordResetResponse,
)
async def reset_password(
    request: ConfirmPasswordResetRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    token_ttl: timedelta = Depends(get_password_reset_ttl),
):
    """
    Confirm Password Reset

    Sets the new password, signs the user in with a new remember token and
    retires the reset token.

    Raises:
        - 400 Bad Request: Invalid token or new password rejected
        - 410 Gone: Expired token
        - 500 Internal Server Error: Server error
    """
    use_case = ConfirmPasswordResetUseCase(uow, token_ttl=token_ttl)
    result = await use_case.execute(request.token, request.new_password)

    if result.is_err():
        error = result.error
        if error.code in (ErrorCode.INVALID_TOKEN, ErrorCode.VALIDATION_ERROR):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == ErrorCode.TOKEN_EXPIRED:
            raise ClientError(error, status_code=status.HTTP_410_GONE)
        raise ServerError(error)

    return result.value
