from typing import Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from accounts.api.error import ClientError, ServerError
from accounts.app.errors import ErrorCode, ValidationRule
from accounts.app.services.unit_of_work import UnitOfWork
from accounts.app.use_cases.auth import UserInfo
from accounts.app.use_cases.users import UpdateProfileCommand, UpdateProfileUseCase
from accounts.depends import get_current_user, get_unit_of_work

router = APIRouter(prefix="/users", tags=["User"])


class UpdateProfileRequest(BaseModel):
    """PUT /users/me payload, omitted fields are left unchanged"""
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


@router.get("/me", status_code=status.HTTP_200_OK, response_model=UserInfo)
async def get_me(current_user: UserInfo = Depends(get_current_user)):
    """
    Load Current User

    Raises:
        - 401 Unauthorized: Missing or invalid remember token
    """
    return current_user


@router.put("/me", status_code=status.HTTP_200_OK, response_model=UserInfo)
async def update_me(
    request: UpdateProfileRequest,
    current_user: UserInfo = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Current User

    Raises:
        - 400 Bad Request: Email or password rejected by validation
        - 401 Unauthorized: Missing or invalid remember token
        - 409 Conflict: Email taken by another account
        - 500 Internal Server Error: Server error
    """
    command = UpdateProfileCommand(
        name=request.name, email=request.email, password=request.password
    )

    use_case = UpdateProfileUseCase(uow)
    result = await use_case.execute(current_user.id, command)

    if result.is_err():
        error = result.error
        if error.code == ErrorCode.VALIDATION_ERROR:
            if error.reason == ValidationRule.EMAIL_TAKEN:
                raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value
