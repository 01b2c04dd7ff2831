"""Read models."""

from .user import (
    SORT_FIELDS,
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

__all__ = [
    "SORT_FIELDS",
    "AuthView",
    "DetailsView",
    "Page",
    "ShortView",
    "SocialNetworkView",
    "UserFetcher",
    "UserFilter",
    "UserListItem",
    "check_sort",
]
