"""Domain-specific exceptions, framework-independent."""


class DomainValidationError(Exception):
    """Raised when an entity would be constructed in an invalid state."""

    def __init__(self, message: str, field: str | None = None):
        self.message = message
        self.field = field
        super().__init__(message)


class InvalidArticleIdError(ValueError):
    """Raised when an article identity is built from a non-positive integer."""

    def __init__(self, value: int):
        self.value = value
        super().__init__("Article ID must be greater than 0")


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class DuplicateEntityError(Exception):
    """Raised when attempting to create a duplicate entity."""

    def __init__(self, entity_type: str, field: str, value: str):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{entity_type} with {field}='{value}' already exists")


class PersistenceError(Exception):
    """Raised when the store rejects a write (missing references, vanished rows)."""
