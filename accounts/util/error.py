"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class DependencyInjectionError(UtilError):
    """Dependency injection error."""

    pass


class JWTError(UtilError):
    """Session token could not be issued or verified."""

    pass
