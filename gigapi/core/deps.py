"""
FastAPI dependencies wiring the data layer into the endpoints.

This is the composition root: each request gets its own session, a
repository over that session and a service over that repository.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from gigapi.core.database import get_db, retry_policy
from gigapi.crud.gig import GigRepository
from gigapi.services.gig_service import GigService, GigServiceBase


def get_gig_repository(db: AsyncSession = Depends(get_db)) -> GigRepository:
    return GigRepository(db, retry_policy=retry_policy)


def get_gig_service(
    repository: GigRepository = Depends(get_gig_repository)
) -> GigServiceBase:
    return GigService(repository)
