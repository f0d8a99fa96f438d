"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class DataAccessError(Exception):
    """Raised when a collaborator (interaction log, score store) fails to read or write.

    Always propagated to the caller; a failed recalculation never persists a score.
    """

    def __init__(self, operation: str, cause: Exception | None = None):
        self.operation = operation
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Data access failed during {operation}{detail}")


class ValidationError(ValueError):
    """Raised when scoring input is invalid (lookback window, filters, interaction data)."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"Invalid {field}: {message}")
