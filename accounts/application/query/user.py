"""User read model.

Flat views of users assembled straight from storage, used by the login
flow and the admin listing. They bypass the aggregate on purpose and never
return it.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from math import ceil
from typing import Generic, Optional, TypeVar
from uuid import UUID

from pydantic import BaseModel, Field, computed_field

from accounts.domain.error import NotFoundError
from accounts.domain.value import Role, UserStatus

SORT_FIELDS = ("register_date", "name", "email", "role", "status")

T = TypeVar("T")


class AuthView(BaseModel):
    """Credentials and state needed to sign a user in."""

    id: UUID
    email: Optional[str] = None
    password_hash: Optional[str] = None
    name: str
    role: Role
    status: UserStatus


class ShortView(BaseModel):
    id: UUID
    email: Optional[str] = None
    role: Role
    status: UserStatus


class SocialNetworkView(BaseModel):
    network: str
    identity: str


class DetailsView(BaseModel):
    """Everything the admin sees on a user page."""

    id: UUID
    register_date: datetime
    email: Optional[str] = None
    first_name: str
    last_name: str
    role: Role
    status: UserStatus
    networks: list[SocialNetworkView] = []


class UserListItem(BaseModel):
    id: UUID
    register_date: datetime
    name: str
    email: Optional[str] = None
    role: Role
    status: UserStatus


class UserFilter(BaseModel):
    """Admin listing filter; empty fields do not filter."""

    name: Optional[str] = None
    email: Optional[str] = None
    status: Optional[UserStatus] = None
    role: Optional[Role] = None


class Page(BaseModel, Generic[T]):
    """One page of a listing. ``page`` is 1-based."""

    items: list[T]
    total: int = Field(ge=0)
    page: int = Field(ge=1)
    size: int = Field(ge=1)

    @computed_field
    @property
    def pages(self) -> int:
        return ceil(self.total / self.size) if self.total else 0


def check_sort(sort: str) -> None:
    """Reject sort fields outside the whitelist.

    Raises:
        ValueError: If ``sort`` is not a sortable column
    """
    if sort not in SORT_FIELDS:
        raise ValueError(f"Cannot sort by {sort}")


class UserFetcher(ABC):
    """Queries over stored users."""

    @abstractmethod
    async def exists_by_reset_token(self, token: str) -> bool:
        pass

    @abstractmethod
    async def find_for_auth(self, email: str) -> Optional[AuthView]:
        pass

    @abstractmethod
    async def find_for_auth_by_network(
        self, network: str, identity: str
    ) -> Optional[AuthView]:
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[ShortView]:
        pass

    @abstractmethod
    async def find_by_confirm_token(self, token: str) -> Optional[ShortView]:
        pass

    @abstractmethod
    async def find_details(self, user_id: UUID) -> Optional[DetailsView]:
        pass

    async def get_details(self, user_id: UUID) -> DetailsView:
        """Details of a user that must exist.

        Raises:
            NotFoundError: If the user does not exist
        """
        details = await self.find_details(user_id)
        if details is None:
            raise NotFoundError("User", str(user_id))
        return details

    @abstractmethod
    async def all(
        self,
        filter: UserFilter,
        page: int,
        size: int,
        sort: str,
        direction: str,
    ) -> Page[UserListItem]:
        """List users matching ``filter``.

        Name and email match case-insensitive substrings, status and role
        match exactly. ``direction`` "desc" sorts descending, anything else
        ascending.

        Raises:
            ValueError: If ``sort`` is not one of SORT_FIELDS
        """
        pass
