"""Domain-specific exceptions — framework-independent."""

from typing import Any


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class InvalidRecordError(Exception):
    """Raised when a record fails validation before it is persisted.

    ``errors`` carries the underlying validation error list so callers can
    surface per-field messages.
    """

    def __init__(self, entity_type: str, errors: list[Any]):
        self.entity_type = entity_type
        self.errors = errors
        super().__init__(f"Invalid {entity_type} record: {errors}")


class UnknownFilterFieldError(Exception):
    """Raised when a discrete filter targets a field the entity cannot be filtered on."""

    def __init__(self, entity_type: str, field: str, allowed: tuple[str, ...]):
        self.entity_type = entity_type
        self.field = field
        self.allowed = allowed
        super().__init__(
            f"{entity_type} cannot be filtered on '{field}' (allowed: {', '.join(allowed)})"
        )


class IdentifierExhaustedError(Exception):
    """Raised when no free identifier could be drawn within the retry budget."""

    def __init__(self, attempts: int):
        self.attempts = attempts
        super().__init__(f"Could not generate a unique id after {attempts} attempts")


class LoginError(Exception):
    """Raised by the login gate when credentials are rejected."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)
