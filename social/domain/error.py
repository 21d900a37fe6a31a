"""Domain layer errors.

Every error carries the message shown to API clients. The interface layer
maps each class to an HTTP status code.
"""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Malformed or out-of-range input."""

    pass


class AuthenticationError(DomainError):
    """Missing, invalid or expired credential."""

    def __init__(self, reason: str = "unauthorized"):
        self.reason = reason
        super().__init__("unauthorized")


class AuthorizationError(DomainError):
    """Authenticated caller lacks the privilege for the operation."""

    def __init__(self, required_role: str | None = None):
        self.required_role = required_role
        super().__init__("forbidden")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class VersionConflictError(NotFoundError):
    """Raised when a versioned update matched no row.

    The post either no longer exists or was updated by someone else since
    the caller read it.
    """

    def __init__(self, post_id: int, version: int):
        self.version = version
        super().__init__("Post", str(post_id))


class ConflictError(DomainError):
    """Uniqueness violation."""

    pass


class DuplicateEmailError(ConflictError):
    """Raised when an email is already registered."""

    def __init__(self, email: str):
        self.email = email
        super().__init__("a user with that email already exists")


class DuplicateUsernameError(ConflictError):
    """Raised when a username is already taken."""

    def __init__(self, username: str):
        self.username = username
        super().__init__("a user with that username already exists")


class AlreadyFollowingError(ConflictError):
    """Raised when a follower edge already exists."""

    def __init__(self, follower_id: int, followed_id: int):
        self.follower_id = follower_id
        self.followed_id = followed_id
        super().__init__(f"user {follower_id} already follows user {followed_id}")


class RateLimitError(DomainError):
    """Raised when a client exceeds its request budget."""

    def __init__(self, retry_after: int):
        self.retry_after = retry_after
        super().__init__(f"rate limit exceeded, retry after: {retry_after}s")


class HashingError(DomainError):
    """Raised when a password cannot be hashed."""

    pass


class InternalError(DomainError):
    """Unclassified backend failure."""

    pass
