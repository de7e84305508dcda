"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class InactiveAccountError(Exception):
    """Raised when a login matches a TARS user whose account is not active."""

    def __init__(self, user_id: int | str):
        self.user_id = user_id
        super().__init__(f"TarsUser with id '{user_id}' is inactive")


class ExternalCallFailed(Exception):
    """Raised when a call to the TARS backend fails.

    The message is normalized once, where the outbound call returns: the
    backend's structured error field, else its raw body, else the
    transport error text. ``status_code`` is the upstream HTTP status when
    a response was received at all.
    """

    def __init__(self, operation: str, message: str, status_code: int | None = None):
        self.operation = operation
        self.message = message
        self.status_code = status_code
        super().__init__(f"Failed to {operation}: {message}")

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404 or "not found" in self.message.lower()


class UserDatabaseError(Exception):
    """Raised when the local user database file is missing or unreadable."""
