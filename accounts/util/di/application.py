"""Application layer DI providers."""

from dishka import Scope, provide

from accounts.application.query import UserFetcher
from accounts.application.usecase.admin import (
    ActivateUserUseCase,
    BlockUserUseCase,
    ChangeRoleUseCase,
    CreateUserUseCase,
    EditUserUseCase,
    GetUserDetailsUseCase,
    ListUsersUseCase,
)
from accounts.application.usecase.auth import GetCurrentUserUseCase, LoginUseCase
from accounts.application.usecase.email import (
    ConfirmEmailChangeUseCase,
    RequestEmailChangeUseCase,
)
from accounts.application.usecase.group import RemoveGroupUseCase
from accounts.application.usecase.network import (
    AttachNetworkUseCase,
    DetachNetworkUseCase,
    NetworkAuthUseCase,
)
from accounts.application.usecase.reset import (
    ResetPasswordUseCase,
    ResetRequestUseCase,
)
from accounts.application.usecase.signup import (
    SignUpConfirmUseCase,
    SignUpRequestUseCase,
)
from accounts.application.usecase.user import ChangeNameUseCase
from accounts.domain.repository import Flusher
from accounts.domain.service import (
    GroupService,
    JWTService,
    NotificationService,
    PasswordHasher,
    Tokenizer,
    UserService,
)
from accounts.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Sign up
    @provide
    def get_sign_up_request_use_case(
        self,
        user_service: UserService,
        password_hasher: PasswordHasher,
        tokenizer: Tokenizer,
        notification_service: NotificationService,
        flusher: Flusher,
    ) -> SignUpRequestUseCase:
        return SignUpRequestUseCase(
            user_service=user_service,
            password_hasher=password_hasher,
            tokenizer=tokenizer,
            notification_service=notification_service,
            flusher=flusher,
        )

    @provide
    def get_sign_up_confirm_use_case(
        self, user_service: UserService, flusher: Flusher
    ) -> SignUpConfirmUseCase:
        return SignUpConfirmUseCase(user_service=user_service, flusher=flusher)

    # Auth
    @provide
    def get_login_use_case(
        self,
        user_fetcher: UserFetcher,
        password_hasher: PasswordHasher,
        jwt_service: JWTService,
    ) -> LoginUseCase:
        return LoginUseCase(
            user_fetcher=user_fetcher,
            password_hasher=password_hasher,
            jwt_service=jwt_service,
        )

    @provide
    def get_current_user_use_case(
        self, jwt_service: JWTService, user_fetcher: UserFetcher
    ) -> GetCurrentUserUseCase:
        return GetCurrentUserUseCase(jwt_service=jwt_service, user_fetcher=user_fetcher)

    # Social networks
    @provide
    def get_network_auth_use_case(
        self, user_service: UserService, flusher: Flusher
    ) -> NetworkAuthUseCase:
        return NetworkAuthUseCase(user_service=user_service, flusher=flusher)

    @provide
    def get_attach_network_use_case(
        self, user_service: UserService, flusher: Flusher
    ) -> AttachNetworkUseCase:
        return AttachNetworkUseCase(user_service=user_service, flusher=flusher)

    @provide
    def get_detach_network_use_case(
        self, user_service: UserService, flusher: Flusher
    ) -> DetachNetworkUseCase:
        return DetachNetworkUseCase(user_service=user_service, flusher=flusher)

    # Password reset
    @provide
    def get_reset_request_use_case(
        self,
        user_service: UserService,
        tokenizer: Tokenizer,
        notification_service: NotificationService,
        flusher: Flusher,
    ) -> ResetRequestUseCase:
        return ResetRequestUseCase(
            user_service=user_service,
            tokenizer=tokenizer,
            notification_service=notification_service,
            flusher=flusher,
        )

    @provide
    def get_reset_password_use_case(
        self,
        user_service: UserService,
        password_hasher: PasswordHasher,
        flusher: Flusher,
    ) -> ResetPasswordUseCase:
        return ResetPasswordUseCase(
            user_service=user_service,
            password_hasher=password_hasher,
            flusher=flusher,
        )

    # Email change
    @provide
    def get_request_email_change_use_case(
        self,
        user_service: UserService,
        tokenizer: Tokenizer,
        notification_service: NotificationService,
        flusher: Flusher,
    ) -> RequestEmailChangeUseCase:
        return RequestEmailChangeUseCase(
            user_service=user_service,
            tokenizer=tokenizer,
            notification_service=notification_service,
            flusher=flusher,
        )

    @provide
    def get_confirm_email_change_use_case(
        self, user_service: UserService, flusher: Flusher
    ) -> ConfirmEmailChangeUseCase:
        return ConfirmEmailChangeUseCase(user_service=user_service, flusher=flusher)

    # Profile
    @provide
    def get_change_name_use_case(
        self, user_service: UserService, flusher: Flusher
    ) -> ChangeNameUseCase:
        return ChangeNameUseCase(user_service=user_service, flusher=flusher)

    # Administration
    @provide
    def get_create_user_use_case(
        self,
        user_service: UserService,
        password_hasher: PasswordHasher,
        flusher: Flusher,
    ) -> CreateUserUseCase:
        return CreateUserUseCase(
            user_service=user_service,
            password_hasher=password_hasher,
            flusher=flusher,
        )

    @provide
    def get_edit_user_use_case(
        self, user_service: UserService, flusher: Flusher
    ) -> EditUserUseCase:
        return EditUserUseCase(user_service=user_service, flusher=flusher)

    @provide
    def get_change_role_use_case(
        self, user_service: UserService, flusher: Flusher
    ) -> ChangeRoleUseCase:
        return ChangeRoleUseCase(user_service=user_service, flusher=flusher)

    @provide
    def get_activate_user_use_case(
        self, user_service: UserService, flusher: Flusher
    ) -> ActivateUserUseCase:
        return ActivateUserUseCase(user_service=user_service, flusher=flusher)

    @provide
    def get_block_user_use_case(
        self, user_service: UserService, flusher: Flusher
    ) -> BlockUserUseCase:
        return BlockUserUseCase(user_service=user_service, flusher=flusher)

    @provide
    def get_list_users_use_case(self, user_fetcher: UserFetcher) -> ListUsersUseCase:
        return ListUsersUseCase(user_fetcher=user_fetcher)

    @provide
    def get_user_details_use_case(
        self, user_fetcher: UserFetcher
    ) -> GetUserDetailsUseCase:
        return GetUserDetailsUseCase(user_fetcher=user_fetcher)

    # Work members
    @provide
    def get_remove_group_use_case(
        self, group_service: GroupService, flusher: Flusher
    ) -> RemoveGroupUseCase:
        return RemoveGroupUseCase(group_service=group_service, flusher=flusher)
