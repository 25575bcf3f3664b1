"""Domain layer DI providers."""

from dishka import Scope, provide

from devconnect.config import AuthSettings
from devconnect.domain.repository import (
    PostRepository,
    ProfileRepository,
    UserRepository,
)
from devconnect.domain.service import (
    JWTService,
    PostService,
    ProfileService,
    UserService,
)
from devconnect.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services, one set per request.

    Services share the request's repositories and therefore its session.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        return UserService(user_repository=user_repository)

    @provide
    def get_profile_service(
        self, profile_repository: ProfileRepository
    ) -> ProfileService:
        return ProfileService(profile_repository=profile_repository)

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        return PostService(post_repository=post_repository)
