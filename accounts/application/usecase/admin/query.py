"""Admin user listing use cases."""

from typing import Literal
from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from accounts.application.query import (
    DetailsView,
    Page,
    UserFetcher,
    UserFilter,
    UserListItem,
)
from accounts.application.usecase.base import BaseUseCase


class ListUsersRequest(BaseModel):
    filter: UserFilter = UserFilter()
    page: int = Field(default=1, ge=1)
    size: int = Field(default=50, ge=1)
    sort: str = "register_date"
    direction: Literal["asc", "desc"] = "desc"


class ListUsersUseCase(BaseUseCase):
    """Paginated, filtered list of users."""

    def __init__(self, user_fetcher: UserFetcher) -> None:
        self.user_fetcher = user_fetcher

    async def execute(self, request: ListUsersRequest) -> Page[UserListItem]:
        """List users.

        Raises:
            ValueError: If the sort field is not allowed
        """
        with logfire.span(
            "list_users",
            page=request.page,
            size=request.size,
            sort=request.sort,
            direction=request.direction,
        ):
            page = await self.user_fetcher.all(
                request.filter,
                request.page,
                request.size,
                request.sort,
                request.direction,
            )
            logfire.info("Users listed", total=page.total, count=len(page.items))
            return page


class GetUserDetailsUseCase(BaseUseCase):
    def __init__(self, user_fetcher: UserFetcher) -> None:
        self.user_fetcher = user_fetcher

    async def execute(self, user_id: UUID) -> DetailsView:
        with logfire.span("get_user_details", user_id=str(user_id)):
            return await self.user_fetcher.get_details(user_id)
