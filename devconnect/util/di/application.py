"""Application layer DI providers."""

from dishka import Scope, provide

from devconnect.adapter.github import GithubClient
from devconnect.application.usecase.auth import (
    GetCurrentUserUseCase,
    LoginUseCase,
    RegisterUseCase,
)
from devconnect.application.usecase.post import (
    AddCommentUseCase,
    CreatePostUseCase,
    DeleteCommentUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    LikePostUseCase,
    ListPostsUseCase,
    UnlikePostUseCase,
)
from devconnect.application.usecase.profile import (
    AddEducationUseCase,
    AddExperienceUseCase,
    DeleteAccountUseCase,
    GetMyProfileUseCase,
    GetProfileByUserUseCase,
    ListGithubReposUseCase,
    ListProfilesUseCase,
    RemoveEducationUseCase,
    RemoveExperienceUseCase,
    UpsertProfileUseCase,
)
from devconnect.domain.service import (
    JWTService,
    PostService,
    ProfileService,
    UserService,
)
from devconnect.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider."""

    scope = Scope.REQUEST

    # Auth use cases
    @provide
    def get_register_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> RegisterUseCase:
        return RegisterUseCase(user_service=user_service, jwt_service=jwt_service)

    @provide
    def get_login_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> LoginUseCase:
        return LoginUseCase(user_service=user_service, jwt_service=jwt_service)

    @provide
    def get_current_user_use_case(
        self, user_service: UserService
    ) -> GetCurrentUserUseCase:
        return GetCurrentUserUseCase(user_service=user_service)

    # Profile use cases
    @provide
    def get_my_profile_use_case(
        self, profile_service: ProfileService, user_service: UserService
    ) -> GetMyProfileUseCase:
        return GetMyProfileUseCase(
            profile_service=profile_service, user_service=user_service
        )

    @provide
    def get_profile_by_user_use_case(
        self, profile_service: ProfileService, user_service: UserService
    ) -> GetProfileByUserUseCase:
        return GetProfileByUserUseCase(
            profile_service=profile_service, user_service=user_service
        )

    @provide
    def get_list_profiles_use_case(
        self, profile_service: ProfileService, user_service: UserService
    ) -> ListProfilesUseCase:
        return ListProfilesUseCase(
            profile_service=profile_service, user_service=user_service
        )

    @provide
    def get_upsert_profile_use_case(
        self, profile_service: ProfileService, user_service: UserService
    ) -> UpsertProfileUseCase:
        return UpsertProfileUseCase(
            profile_service=profile_service, user_service=user_service
        )

    @provide
    def get_add_experience_use_case(
        self, profile_service: ProfileService, user_service: UserService
    ) -> AddExperienceUseCase:
        return AddExperienceUseCase(
            profile_service=profile_service, user_service=user_service
        )

    @provide
    def get_remove_experience_use_case(
        self, profile_service: ProfileService, user_service: UserService
    ) -> RemoveExperienceUseCase:
        return RemoveExperienceUseCase(
            profile_service=profile_service, user_service=user_service
        )

    @provide
    def get_add_education_use_case(
        self, profile_service: ProfileService, user_service: UserService
    ) -> AddEducationUseCase:
        return AddEducationUseCase(
            profile_service=profile_service, user_service=user_service
        )

    @provide
    def get_remove_education_use_case(
        self, profile_service: ProfileService, user_service: UserService
    ) -> RemoveEducationUseCase:
        return RemoveEducationUseCase(
            profile_service=profile_service, user_service=user_service
        )

    @provide
    def get_delete_account_use_case(
        self,
        post_service: PostService,
        profile_service: ProfileService,
        user_service: UserService,
    ) -> DeleteAccountUseCase:
        return DeleteAccountUseCase(
            post_service=post_service,
            profile_service=profile_service,
            user_service=user_service,
        )

    @provide
    def get_list_github_repos_use_case(
        self, github_client: GithubClient
    ) -> ListGithubReposUseCase:
        return ListGithubReposUseCase(github_client=github_client)

    # Post use cases
    @provide
    def get_create_post_use_case(
        self, post_service: PostService, user_service: UserService
    ) -> CreatePostUseCase:
        return CreatePostUseCase(post_service=post_service, user_service=user_service)

    @provide
    def get_get_post_use_case(self, post_service: PostService) -> GetPostUseCase:
        return GetPostUseCase(post_service=post_service)

    @provide
    def get_list_posts_use_case(self, post_service: PostService) -> ListPostsUseCase:
        return ListPostsUseCase(post_service=post_service)

    @provide
    def get_delete_post_use_case(self, post_service: PostService) -> DeletePostUseCase:
        return DeletePostUseCase(post_service=post_service)

    @provide
    def get_like_post_use_case(self, post_service: PostService) -> LikePostUseCase:
        return LikePostUseCase(post_service=post_service)

    @provide
    def get_unlike_post_use_case(self, post_service: PostService) -> UnlikePostUseCase:
        return UnlikePostUseCase(post_service=post_service)

    @provide
    def get_add_comment_use_case(
        self, post_service: PostService, user_service: UserService
    ) -> AddCommentUseCase:
        return AddCommentUseCase(post_service=post_service, user_service=user_service)

    @provide
    def get_delete_comment_use_case(
        self, post_service: PostService
    ) -> DeleteCommentUseCase:
        return DeleteCommentUseCase(post_service=post_service)
