"""
Domain exceptions shared by the repository, service and API layers.

The data layer raises these; only the web layer (see main.py) turns them
into HTTP responses.
"""

from typing import Any


class GigApiError(Exception):
    """Base class for all application errors."""
    pass


class NotFoundError(GigApiError):
    """Raised when an identity does not resolve to a stored row."""

    def __init__(self, entity: str, entity_id: Any):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} {entity_id} not found")


class ValidationError(GigApiError):
    """Raised for a missing required field or an out-of-range paging parameter."""
    pass


class StorageError(GigApiError):
    """Raised when the database stays unreachable after the retry policy gives up."""
    pass
