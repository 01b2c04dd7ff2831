"""Domain services."""

from .base import Service
from .group_service import GroupService
from .jwt_service import JWTService
from .notification_service import Mailer, MailMessage, NotificationService
from .password_hasher import PasswordHasher
from .tokenizer import Tokenizer
from .user_service import UserService

__all__ = [
    "GroupService",
    "JWTService",
    "Mailer",
    "MailMessage",
    "NotificationService",
    "PasswordHasher",
    "Service",
    "Tokenizer",
    "UserService",
]
