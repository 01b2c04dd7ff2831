"""User aggregate root.

Users sign up by email (and confirm it), by a social network, or are
provisioned by an administrator. All state changes go through the guarded
operations below; each returns the next state of the aggregate and leaves
the current instance untouched.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import model_validator

from accounts.domain.error import InvalidOperationError
from accounts.domain.model.common import DomainModel
from accounts.domain.value import (
    Email,
    Name,
    ResetPasswordToken,
    Role,
    SocialNetwork,
    UserId,
    UserStatus,
)


class User(DomainModel):
    """User aggregate root.

    Invariants:
    - at least one authentication method: an email or a social network
    - at most one social network entry per network name
    - ``new_email`` and ``new_email_token`` are both set or both absent
    - an expired reset token is treated as absent
    """

    id: UserId
    register_date: datetime
    name: Name
    status: UserStatus
    role: Role = Role.USER
    email: Optional[Email] = None
    password_hash: Optional[str] = None
    confirm_token: Optional[str] = None
    new_email: Optional[Email] = None
    new_email_token: Optional[str] = None
    reset_password_token: Optional[ResetPasswordToken] = None
    networks: tuple[SocialNetwork, ...] = ()

    @model_validator(mode="before")
    @classmethod
    def drop_empty_reset_token(cls, data: Any) -> Any:
        """Normalise a reset token loaded with empty columns to absent."""
        if isinstance(data, dict):
            token = data.get("reset_password_token")
            if isinstance(token, dict) and not token.get("token"):
                data = {**data, "reset_password_token": None}
        return data

    @model_validator(mode="after")
    def check_invariants(self) -> "User":
        if self.email is None and not self.networks:
            raise ValueError("User must have an email or a social network")
        if (self.new_email is None) != (self.new_email_token is None):
            raise ValueError("New email and its token must be set together")
        names = [n.network for n in self.networks]
        if len(names) != len(set(names)):
            raise ValueError("Social network names must be unique")
        return self

    # Construction

    @classmethod
    def sign_up_by_email(
        cls,
        id: UserId,
        register_date: datetime,
        name: Name,
        email: Email,
        password_hash: str,
        confirm_token: str,
    ) -> "User":
        """Register a user who has to confirm the email before signing in."""
        return cls(
            id=id,
            register_date=register_date,
            name=name,
            email=email,
            password_hash=password_hash,
            confirm_token=confirm_token,
            status=UserStatus.WAIT,
        )

    @classmethod
    def sign_up_by_network(
        cls,
        id: UserId,
        register_date: datetime,
        name: Name,
        network: str,
        identity: str,
    ) -> "User":
        """Register an active user identified by a social network."""
        return cls(
            id=id,
            register_date=register_date,
            name=name,
            networks=(SocialNetwork(network=network, identity=identity),),
            status=UserStatus.ACTIVE,
        )

    @classmethod
    def create(
        cls,
        id: UserId,
        register_date: datetime,
        name: Name,
        email: Email,
        password_hash: str,
    ) -> "User":
        """Provision an active account without email confirmation."""
        return cls(
            id=id,
            register_date=register_date,
            name=name,
            email=email,
            password_hash=password_hash,
            status=UserStatus.ACTIVE,
        )

    # Status

    @property
    def is_wait(self) -> bool:
        return self.status is UserStatus.WAIT

    @property
    def is_active(self) -> bool:
        return self.status is UserStatus.ACTIVE

    @property
    def is_blocked(self) -> bool:
        return self.status is UserStatus.BLOCKED

    def confirm_sign_up(self) -> "User":
        if self.is_active:
            raise InvalidOperationError("User is already confirmed.")
        return self._evolve(status=UserStatus.ACTIVE, confirm_token=None)

    def activate(self) -> "User":
        if self.is_active:
            raise InvalidOperationError("User is already active.")
        return self._evolve(status=UserStatus.ACTIVE)

    def block(self) -> "User":
        if self.is_blocked:
            raise InvalidOperationError("User is already blocked.")
        return self._evolve(status=UserStatus.BLOCKED)

    # Social networks

    def attach_network(self, network: str, identity: str) -> "User":
        if any(n.has_name(network) for n in self.networks):
            raise InvalidOperationError("Social network is already attached.")
        attached = SocialNetwork(network=network, identity=identity)
        return self._evolve(networks=self.networks + (attached,))

    def detach_network(self, network: str, identity: str) -> "User":
        if self.email is None and len(self.networks) == 1:
            raise InvalidOperationError("Unable to detach the last social network.")
        remaining = tuple(n for n in self.networks if not n.matches(network, identity))
        if len(remaining) == len(self.networks):
            raise InvalidOperationError("Social network is not attached.")
        return self._evolve(networks=remaining)

    # Password reset

    def reset_token_at(self, now: datetime) -> Optional[ResetPasswordToken]:
        """Return the pending reset token unless it has expired at ``now``."""
        token = self.reset_password_token
        if token is None or token.is_expired_to(now):
            return None
        return token

    def request_password_reset(
        self, token: ResetPasswordToken, now: datetime
    ) -> "User":
        if not self.is_active:
            raise InvalidOperationError("User is not active.")
        if self.email is None:
            raise InvalidOperationError("Email is not specified.")
        if self.reset_token_at(now) is not None:
            raise InvalidOperationError("Resetting password is already requested.")
        return self._evolve(reset_password_token=token)

    def password_reset(self, now: datetime, password_hash: str) -> "User":
        if self.reset_password_token is None:
            raise InvalidOperationError("Resetting password is not requested.")
        if self.reset_password_token.is_expired_to(now):
            raise InvalidOperationError("Reset token is expired.")
        return self._evolve(password_hash=password_hash, reset_password_token=None)

    # Email change

    def request_email_changing(self, email: Email, token: str) -> "User":
        if not self.is_active:
            raise InvalidOperationError("User is not active.")
        if self.email == email:
            raise InvalidOperationError("Email is already same.")
        return self._evolve(new_email=email, new_email_token=token)

    def confirm_email_changing(self, token: str) -> "User":
        if self.new_email_token is None:
            raise InvalidOperationError("Changing is not requested.")
        if self.new_email_token != token:
            raise InvalidOperationError("Incorrect changing token.")
        return self._evolve(email=self.new_email, new_email=None, new_email_token=None)

    # Profile

    def change_role(self, role: Role) -> "User":
        if self.role is role:
            raise InvalidOperationError("Role is already same.")
        return self._evolve(role=role)

    def change_name(self, name: Name) -> "User":
        return self._evolve(name=name)

    def edit(self, email: Email, name: Name) -> "User":
        return self._evolve(email=email, name=name)

    def _evolve(self, **changes: Any) -> "User":
        # Re-validate so the invariants above hold for every new state
        return type(self).model_validate({**dict(self), **changes})
