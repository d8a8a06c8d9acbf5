"""
CRUD operations (Create, Read, Update, Delete) for database models.

This layer provides a clean separation between the service layer and database
operations, following the Repository pattern.
"""

from gigapi.crud.base import AsyncRepository, SQLAlchemyRepository
from gigapi.crud.gig import GigRepository

__all__ = ["AsyncRepository", "SQLAlchemyRepository", "GigRepository"]
