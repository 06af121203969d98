"""Domain errors raised by the store and services."""


class CampusEventsError(Exception):
    """Base class for all domain errors."""


class ValidationError(CampusEventsError):
    """Raised when caller input is malformed. Nothing has been persisted."""


class NotFoundError(CampusEventsError):
    """Raised when a referenced event, club or category does not exist."""

    def __init__(self, entity: str, entity_id):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} {entity_id} not found")


class StoreError(CampusEventsError):
    """Raised when the underlying persistence layer fails."""


class StoreUnavailable(StoreError):
    """Raised when a store call does not complete within its timeout."""
