"""Test configuration and fixtures."""

import os
from datetime import datetime, timezone

import logfire

from accounts.domain.model import User
from accounts.domain.value import Email, Name, Role, new_user_id

os.environ.setdefault("ENVIRONMENT", "test")

logfire.configure(send_to_logfire=False, console=False)

NOW = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


def make_active_user(
    email: str = "alice@example.com",
    first: str = "Alice",
    last: str = "Smith",
    password_hash: str = "hash",
    role: Role = Role.USER,
) -> User:
    """Helper building an active, email-registered user."""
    user = User.create(
        id=new_user_id(),
        register_date=NOW,
        name=Name(first=first, last=last),
        email=Email(email),
        password_hash=password_hash,
    )
    return user if role is Role.USER else user.change_role(role)


def make_waiting_user(email: str = "bob@example.com", token: str = "confirm") -> User:
    """Helper building a user who signed up by email and has not confirmed."""
    return User.sign_up_by_email(
        id=new_user_id(),
        register_date=NOW,
        name=Name(first="Bob", last="Jones"),
        email=Email(email),
        password_hash="hash",
        confirm_token=token,
    )


def make_network_user(network: str = "github", identity: str = "alice-gh") -> User:
    """Helper building a user registered by a social network only."""
    return User.sign_up_by_network(
        id=new_user_id(),
        register_date=NOW,
        name=Name(first="Net", last="User"),
        network=network,
        identity=identity,
    )
