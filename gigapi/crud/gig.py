"""
Repository for the Gig model.

All CRUD behaviour comes from SQLAlchemyRepository; gigs are returned in
GigId order, which is the order they were stored in.
"""

from gigapi.crud.base import SQLAlchemyRepository
from gigapi.models.gig import Gig


class GigRepository(SQLAlchemyRepository[Gig]):
    model = Gig
