"""Register use case."""

import logfire
from pydantic import BaseModel

from devconnect.domain.service import JWTService, UserService

from .login import TokenResponse


class RegisterRequest(BaseModel):
    """Register request (already validated at the API edge)."""

    name: str
    email: str
    password: str


class RegisterUseCase:
    """Use case for creating an account and logging it in."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize register use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: RegisterRequest) -> TokenResponse:
        """Execute registration flow.

        Steps:
        1. Create the user (email must be new, avatar from Gravatar)
        2. Issue a token for the new user

        Args:
            request: Register request

        Returns:
            Token for the new user

        Raises:
            AlreadyExistsError: If the email is already registered
        """
        with logfire.span("register.execute", name=request.name):
            user = await self.user_service.register(
                name=request.name, email=request.email, password=request.password
            )
            token = self.jwt_service.create_token(user_id=str(user.id))
            return TokenResponse(token=token)
