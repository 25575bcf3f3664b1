"""Domain errors.

Routes translate these into HTTP responses; anything else becomes a 500.
"""


class DomainError(Exception):
    """Base domain error."""


class NotFoundError(DomainError):
    """A user, profile, post or comment doesn't exist."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class NotAuthorizedError(DomainError):
    """The caller isn't the author of what they tried to change."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class AlreadyExistsError(DomainError):
    """A unique value (an account email) is taken."""


class InvalidCredentialsError(DomainError):
    """An email/password pair matches no account."""

    def __init__(self) -> None:
        super().__init__("Invalid credentials")


class BusinessRuleViolationError(DomainError):
    """The operation conflicts with the current state, e.g. liking twice."""
