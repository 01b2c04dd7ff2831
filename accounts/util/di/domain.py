"""Domain layer DI providers."""

from dishka import Scope, provide

from accounts.config import AuthSettings, Settings
from accounts.domain.repository import (
    GroupRepository,
    MemberRepository,
    UserRepository,
)
from accounts.domain.service import (
    GroupService,
    JWTService,
    Mailer,
    NotificationService,
    PasswordHasher,
    Tokenizer,
    UserService,
)
from accounts.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        return UserService(user_repository=user_repository)

    @provide
    def get_group_service(
        self,
        group_repository: GroupRepository,
        member_repository: MemberRepository,
    ) -> GroupService:
        return GroupService(
            group_repository=group_repository, member_repository=member_repository
        )

    @provide
    def get_password_hasher(self, auth_settings: AuthSettings) -> PasswordHasher:
        return PasswordHasher(auth_settings=auth_settings)

    @provide
    def get_tokenizer(self, auth_settings: AuthSettings) -> Tokenizer:
        return Tokenizer(auth_settings=auth_settings)

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_notification_service(
        self, mailer: Mailer, settings: Settings
    ) -> NotificationService:
        return NotificationService(mailer=mailer, settings=settings)
