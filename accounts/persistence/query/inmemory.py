"""In-memory user read model for testing."""

from typing import Callable, Optional
from uuid import UUID

from accounts.application.query.user import (
    AuthView,
    DetailsView,
    Page,
    ShortView,
    SocialNetworkView,
    UserFetcher,
    UserFilter,
    UserListItem,
    check_sort,
)
from accounts.domain.model import User
from accounts.persistence.repository.inmemory import InMemoryUserRepository


def _email(user: User) -> Optional[str]:
    return user.email.root if user.email else None


def _auth_view(user: User) -> AuthView:
    return AuthView(
        id=user.id,
        email=_email(user),
        password_hash=user.password_hash,
        name=user.name.full.strip(),
        role=user.role,
        status=user.status,
    )


def _short_view(user: User) -> ShortView:
    return ShortView(id=user.id, email=_email(user), role=user.role, status=user.status)


SORT_KEYS: dict[str, Callable[[User], object]] = {
    "register_date": lambda u: u.register_date,
    "name": lambda u: u.name.full.strip(),
    "email": lambda u: _email(u),
    "role": lambda u: u.role.value,
    "status": lambda u: u.status.value,
}


class InMemoryUserFetcher(UserFetcher):
    """Builds user views from an in-memory user repository."""

    def __init__(self, user_repository: InMemoryUserRepository) -> None:
        self.user_repository = user_repository

    async def exists_by_reset_token(self, token: str) -> bool:
        return await self.user_repository.find_by_reset_token(token) is not None

    async def find_for_auth(self, email: str) -> Optional[AuthView]:
        for user in self.user_repository.all():
            if _email(user) == email.lower():
                return _auth_view(user)
        return None

    async def find_for_auth_by_network(
        self, network: str, identity: str
    ) -> Optional[AuthView]:
        user = await self.user_repository.find_by_network_identity(network, identity)
        return _auth_view(user) if user else None

    async def find_by_email(self, email: str) -> Optional[ShortView]:
        for user in self.user_repository.all():
            if _email(user) == email.lower():
                return _short_view(user)
        return None

    async def find_by_confirm_token(self, token: str) -> Optional[ShortView]:
        user = await self.user_repository.find_by_confirm_token(token)
        return _short_view(user) if user else None

    async def find_details(self, user_id: UUID) -> Optional[DetailsView]:
        for user in self.user_repository.all():
            if user.id == user_id:
                return DetailsView(
                    id=user.id,
                    register_date=user.register_date,
                    email=_email(user),
                    first_name=user.name.first,
                    last_name=user.name.last,
                    role=user.role,
                    status=user.status,
                    networks=[
                        SocialNetworkView(network=n.network, identity=n.identity)
                        for n in sorted(user.networks, key=lambda n: n.network)
                    ],
                )
        return None

    def _matches(self, user: User, filter: UserFilter) -> bool:
        if filter.name and filter.name.lower() not in user.name.full.lower():
            return False
        if filter.email and filter.email.lower() not in (_email(user) or ""):
            return False
        if filter.status and user.status is not filter.status:
            return False
        if filter.role and user.role is not filter.role:
            return False
        return True

    async def all(
        self,
        filter: UserFilter,
        page: int,
        size: int,
        sort: str,
        direction: str,
    ) -> Page[UserListItem]:
        check_sort(sort)

        key = SORT_KEYS[sort]
        matched = [u for u in self.user_repository.all() if self._matches(u, filter)]
        # NULLs sort last ascending and first descending, as in PostgreSQL
        matched.sort(
            key=lambda u: (key(u) is None, key(u) if key(u) is not None else ""),
            reverse=direction == "desc",
        )

        start = (page - 1) * size
        return Page[UserListItem](
            items=[
                UserListItem(
                    id=u.id,
                    register_date=u.register_date,
                    name=u.name.full.strip(),
                    email=_email(u),
                    role=u.role,
                    status=u.status,
                )
                for u in matched[start : start + size]
            ],
            total=len(matched),
            page=page,
            size=size,
        )
