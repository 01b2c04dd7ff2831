"""Administrative user management use cases."""

from .create import CreateUserRequest, CreateUserUseCase
from .edit import EditUserRequest, EditUserUseCase
from .query import (
    GetUserDetailsUseCase,
    ListUsersRequest,
    ListUsersUseCase,
)
from .status import (
    ActivateUserUseCase,
    BlockUserUseCase,
    ChangeRoleRequest,
    ChangeRoleUseCase,
    UserIdRequest,
)

__all__ = [
    "ActivateUserUseCase",
    "BlockUserUseCase",
    "ChangeRoleRequest",
    "ChangeRoleUseCase",
    "CreateUserRequest",
    "CreateUserUseCase",
    "EditUserRequest",
    "EditUserUseCase",
    "GetUserDetailsUseCase",
    "ListUsersRequest",
    "ListUsersUseCase",
    "UserIdRequest",
]
