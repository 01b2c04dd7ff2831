"""Work members group routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status

from accounts.application.usecase.auth import GetCurrentUserUseCase
from accounts.application.usecase.group import RemoveGroupRequest, RemoveGroupUseCase
from accounts.interface.api.security import require_admin

router = APIRouter(
    prefix="/work/members/groups", tags=["work"], route_class=DishkaRoute
)


@router.delete("/{group_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_group(
    group_id: UUID,
    current_user: FromDishka[GetCurrentUserUseCase],
    use_case: FromDishka[RemoveGroupUseCase],
    auth_token: str | None = Cookie(default=None),
) -> None:
    """Remove an empty group."""
    user = await current_user.execute(auth_token)
    require_admin(user, "remove groups")
    await use_case.execute(RemoveGroupRequest(group_id=group_id))
