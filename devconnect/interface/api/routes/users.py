"""User registration routes."""

from typing import Annotated

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, BeforeValidator, Field

from devconnect.application.usecase.auth import (
    RegisterRequest,
    RegisterUseCase,
    TokenResponse,
)
from devconnect.domain.error import AlreadyExistsError
from devconnect.interface.api.validation import min_length, required, valid_email

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)

MIN_PASSWORD_LENGTH = 6


class RegisterAPIRequest(BaseModel):
    """API request for registering a user."""

    name: Annotated[str, BeforeValidator(required("Name is required"))] = Field(
        default=None, validate_default=True
    )
    email: Annotated[
        str, BeforeValidator(valid_email("Please include a valid email"))
    ] = Field(default=None, validate_default=True)
    password: Annotated[
        str,
        BeforeValidator(
            min_length(
                MIN_PASSWORD_LENGTH,
                "Please enter a password with 6 or more characters",
            )
        ),
    ] = Field(default=None, validate_default=True)


@router.post("", response_model=TokenResponse)
async def register_user(
    request: RegisterAPIRequest,
    register_use_case: FromDishka[RegisterUseCase],
) -> TokenResponse | JSONResponse:
    """Register a user and log them in.

    Returns:
        Token for the new user, or 400 if the email is taken
    """
    try:
        return await register_use_case.execute(
            RegisterRequest(
                name=request.name, email=request.email, password=request.password
            )
        )
    except AlreadyExistsError as e:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"errors": [{"msg": str(e)}]},
        )
    except Exception as e:
        logfire.error("Unexpected error registering user", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error",
        )
