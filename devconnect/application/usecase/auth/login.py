"""Login use case."""

import logfire
from pydantic import BaseModel

from devconnect.domain.service import JWTService, UserService


class LoginRequest(BaseModel):
    """Login request."""

    email: str
    password: str


class TokenResponse(BaseModel):
    """Issued access token."""

    token: str


class LoginUseCase:
    """Use case for logging in with email and password."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> TokenResponse:
        """Check the credentials and issue a token.

        Args:
            request: Login request

        Returns:
            Token for the authenticated user

        Raises:
            InvalidCredentialsError: If the email is unknown or the password is wrong
        """
        with logfire.span("login.execute"):
            user = await self.user_service.authenticate(request.email, request.password)
            token = self.jwt_service.create_token(user_id=str(user.id))
            logfire.info("User logged in", user_id=str(user.id))
            return TokenResponse(token=token)
