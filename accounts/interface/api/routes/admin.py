"""User administration routes (admin role required)."""

from typing import Literal
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, status
from pydantic import BaseModel

from accounts.application.query import DetailsView, Page, UserFilter, UserListItem
from accounts.application.usecase.admin import (
    ActivateUserUseCase,
    BlockUserUseCase,
    ChangeRoleRequest,
    ChangeRoleUseCase,
    CreateUserRequest,
    CreateUserUseCase,
    EditUserRequest,
    EditUserUseCase,
    GetUserDetailsUseCase,
    ListUsersRequest,
    ListUsersUseCase,
    UserIdRequest,
)
from accounts.application.usecase.auth import GetCurrentUserUseCase
from accounts.application.usecase.response import UserStateResponse
from accounts.config import Settings
from accounts.domain.value import Role, UserStatus
from accounts.interface.api.security import require_admin

router = APIRouter(prefix="/admin/users", tags=["admin"], route_class=DishkaRoute)


class EditUserAPIRequest(BaseModel):
    email: str
    first_name: str
    last_name: str


class RoleAPIRequest(BaseModel):
    role: Role


async def _authorize(
    current_user: GetCurrentUserUseCase, auth_token: str | None, action: str
) -> DetailsView:
    user = await current_user.execute(auth_token)
    require_admin(user, action)
    return user


@router.get("", response_model=Page[UserListItem])
async def list_users(
    current_user: FromDishka[GetCurrentUserUseCase],
    use_case: FromDishka[ListUsersUseCase],
    settings: FromDishka[Settings],
    name: str | None = None,
    email: str | None = None,
    user_status: UserStatus | None = Query(default=None, alias="status"),
    role: Role | None = None,
    page: int = Query(default=1, ge=1),
    size: int | None = Query(default=None, ge=1),
    sort: str = "register_date",
    direction: Literal["asc", "desc"] = "desc",
    auth_token: str | None = Cookie(default=None),
) -> Page[UserListItem]:
    """List users with filtering, sorting and pagination.

    Example:
        GET /admin/users?email=example.com&status=active&sort=name&direction=asc
    """
    await _authorize(current_user, auth_token, "list users")

    size = min(size or settings.pagination.default_size, settings.pagination.max_size)
    return await use_case.execute(
        ListUsersRequest(
            filter=UserFilter(name=name, email=email, status=user_status, role=role),
            page=page,
            size=size,
            sort=sort,
            direction=direction,
        )
    )


@router.get("/{user_id}", response_model=DetailsView)
async def show_user(
    user_id: UUID,
    current_user: FromDishka[GetCurrentUserUseCase],
    use_case: FromDishka[GetUserDetailsUseCase],
    auth_token: str | None = Cookie(default=None),
) -> DetailsView:
    await _authorize(current_user, auth_token, "view users")
    return await use_case.execute(user_id)


@router.post(
    "", response_model=UserStateResponse, status_code=status.HTTP_201_CREATED
)
async def create_user(
    request: CreateUserRequest,
    current_user: FromDishka[GetCurrentUserUseCase],
    use_case: FromDishka[CreateUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> UserStateResponse:
    """Provision an active account with a generated password."""
    await _authorize(current_user, auth_token, "create users")
    return await use_case.execute(request)


@router.put("/{user_id}", response_model=UserStateResponse)
async def edit_user(
    user_id: UUID,
    request: EditUserAPIRequest,
    current_user: FromDishka[GetCurrentUserUseCase],
    use_case: FromDishka[EditUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> UserStateResponse:
    await _authorize(current_user, auth_token, "edit users")
    return await use_case.execute(
        EditUserRequest(
            user_id=user_id,
            email=request.email,
            first_name=request.first_name,
            last_name=request.last_name,
        )
    )


@router.post("/{user_id}/role", response_model=UserStateResponse)
async def change_role(
    user_id: UUID,
    request: RoleAPIRequest,
    current_user: FromDishka[GetCurrentUserUseCase],
    use_case: FromDishka[ChangeRoleUseCase],
    auth_token: str | None = Cookie(default=None),
) -> UserStateResponse:
    await _authorize(current_user, auth_token, "change roles")
    return await use_case.execute(ChangeRoleRequest(user_id=user_id, role=request.role))


@router.post("/{user_id}/activate", response_model=UserStateResponse)
async def activate_user(
    user_id: UUID,
    current_user: FromDishka[GetCurrentUserUseCase],
    use_case: FromDishka[ActivateUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> UserStateResponse:
    await _authorize(current_user, auth_token, "activate users")
    return await use_case.execute(UserIdRequest(user_id=user_id))


@router.post("/{user_id}/block", response_model=UserStateResponse)
async def block_user(
    user_id: UUID,
    current_user: FromDishka[GetCurrentUserUseCase],
    use_case: FromDishka[BlockUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> UserStateResponse:
    await _authorize(current_user, auth_token, "block users")
    return await use_case.execute(UserIdRequest(user_id=user_id))
