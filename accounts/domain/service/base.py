"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold logic that needs collaborators (repositories,
    hashing, mail) and therefore cannot live on an aggregate.
    """

    pass
