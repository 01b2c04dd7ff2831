"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM mapping.
"""

from typing import Any, Dict, Iterable
from uuid import UUID

from accounts.domain.model import Group, Member, User
from accounts.domain.value import (
    Email,
    GroupId,
    Name,
    Role,
    SocialNetwork,
    UserId,
    UserStatus,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any], network_rows: Iterable[Dict[str, Any]]) -> User:
    """Convert a ``user_users`` row and its network rows to a User.

    An empty embedded reset token (both columns NULL) is normalised to
    absent by the aggregate itself.
    """
    return User(
        id=UserId(_uuid(row["id"])),
        register_date=row["register_date"],
        name=Name(first=row["name_first"], last=row["name_last"]),
        status=UserStatus(row["status"]),
        role=Role(row["role"]),
        email=Email(row["email"]) if row.get("email") else None,
        password_hash=row.get("password_hash"),
        confirm_token=row.get("confirm_token"),
        new_email=Email(row["new_email"]) if row.get("new_email") else None,
        new_email_token=row.get("new_email_token"),
        reset_password_token={
            "token": row.get("reset_password_token"),
            "expires_at": row.get("reset_password_expires"),
        },
        networks=tuple(
            SocialNetwork(network=n["network"], identity=n["identity"])
            for n in network_rows
        ),
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert a User to a ``user_users`` row (networks excluded)."""
    reset = user.reset_password_token
    return {
        "id": user.id,
        "register_date": user.register_date,
        "email": user.email.root if user.email else None,
        "password_hash": user.password_hash,
        "confirm_token": user.confirm_token,
        "name_first": user.name.first,
        "name_last": user.name.last,
        "new_email": user.new_email.root if user.new_email else None,
        "new_email_token": user.new_email_token,
        "status": user.status.value,
        "reset_password_token": reset.token if reset else None,
        "reset_password_expires": reset.expires_at if reset else None,
        "role": user.role.value,
    }


def row_to_group(row: Dict[str, Any]) -> Group:
    return Group(id=GroupId(_uuid(row["id"])), name=row["name"])


def group_to_dict(group: Group) -> Dict[str, Any]:
    return {"id": group.id, "name": group.name}


def member_to_dict(member: Member) -> Dict[str, Any]:
    return {
        "id": member.id,
        "group_id": member.group_id,
        "name": member.name,
        "email": member.email.root,
    }
