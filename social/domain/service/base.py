"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold business logic spanning repositories, caches and
    configuration. They are request-scoped, like the repositories they use.
    """

    pass
