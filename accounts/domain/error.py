"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class InvalidOperationError(DomainError):
    """Raised when an aggregate refuses an illegal state transition."""

    def __init__(self, message: str):
        super().__init__(message)


class AuthenticationError(DomainError):
    """Raised when credentials do not identify an active user."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when a user lacks the role required for an operation."""

    def __init__(self, user_id: str, action: str):
        self.user_id = user_id
        self.action = action
        super().__init__(f"User {user_id} is not authorized to {action}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
