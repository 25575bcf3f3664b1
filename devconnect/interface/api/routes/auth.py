"""Authentication routes."""

from typing import Annotated

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, BeforeValidator, Field

from devconnect.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    TokenResponse,
)
from devconnect.application.usecase.common import CallerContext
from devconnect.domain.error import InvalidCredentialsError, NotFoundError
from devconnect.interface.api.auth import require_caller
from devconnect.interface.api.validation import required, valid_email

router = APIRouter(prefix="/auth", tags=["auth"], route_class=DishkaRoute)


class LoginAPIRequest(BaseModel):
    """API request for logging in."""

    email: Annotated[
        str, BeforeValidator(valid_email("Please include a valid email"))
    ] = Field(default=None, validate_default=True)
    password: Annotated[str, BeforeValidator(required("Password is required"))] = (
        Field(default=None, validate_default=True)
    )


@router.get("", response_model=GetCurrentUserResponse)
async def get_current_user(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    caller: CallerContext = Depends(require_caller),
) -> GetCurrentUserResponse:
    """Get the authenticated user's account."""
    try:
        return await get_current_user_use_case.execute(
            GetCurrentUserRequest(caller=caller)
        )
    except NotFoundError as e:
        logfire.warn("Token for a deleted user", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )
    except Exception as e:
        logfire.error("Unexpected error loading current user", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error",
        )


@router.post("", response_model=TokenResponse)
async def login(
    request: LoginAPIRequest,
    login_use_case: FromDishka[LoginUseCase],
) -> TokenResponse | JSONResponse:
    """Log in with email and password.

    Returns:
        Token, or 400 with "Invalid credentials"
    """
    try:
        return await login_use_case.execute(
            LoginRequest(email=request.email, password=request.password)
        )
    except InvalidCredentialsError as e:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"errors": [{"msg": str(e)}]},
        )
    except Exception as e:
        logfire.error("Unexpected error during login", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error",
        )
