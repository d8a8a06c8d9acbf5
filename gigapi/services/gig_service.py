"""
Gig service: domain-facing facade over the gig repository.

Defines the GigServiceBase contract and the GigService implementation.
The service is a pure delegation layer; it adds no business rules. It turns
request schemas into ORM rows on the way in and ORM rows into GigRead copies
on the way out, so no session-bound object leaves this layer.
"""

import logging
from abc import ABC, abstractmethod
from typing import List

from gigapi.crud.base import AsyncRepository
from gigapi.models.gig import Gig
from gigapi.schemas.gig import GigCreate, GigRead, GigUpdate

logger = logging.getLogger(__name__)


class GigServiceBase(ABC):
    """
    Abstract contract for gig operations.

    Errors raised by the repository (NotFoundError, ValidationError,
    StorageError) propagate to the caller unchanged.
    """

    @abstractmethod
    async def get_gigs_page(self, page: int, page_size: int) -> List[GigRead]:
        """
        Return one page of gigs.

        Args:
            page: 1-based page number
            page_size: Maximum number of gigs on the page

        Raises:
            ValidationError: If page or page_size is below 1
        """
        pass

    @abstractmethod
    async def get_gigs(self) -> List[GigRead]:
        """Return every gig in stored order."""
        pass

    @abstractmethod
    async def get_gig(self, gig_id: int) -> GigRead:
        """
        Return a single gig.

        Raises:
            NotFoundError: If no gig has this id
        """
        pass

    @abstractmethod
    async def create_gig(self, gig: GigCreate) -> GigRead:
        """
        Store a new gig and return it with its database-assigned id.

        Raises:
            ValidationError: If a required field is missing
        """
        pass

    @abstractmethod
    async def update_gig(self, gig: GigUpdate) -> GigRead:
        """
        Replace every mutable field of an existing gig.

        Raises:
            NotFoundError: If gig.gig_id does not exist
            ValidationError: If a required field is missing
        """
        pass

    @abstractmethod
    async def delete_gig(self, gig_id: int) -> None:
        """
        Delete a gig.

        Raises:
            NotFoundError: If no gig has this id
        """
        pass


class GigService(GigServiceBase):
    """GigServiceBase implementation delegating to an AsyncRepository[Gig]."""

    def __init__(self, repository: AsyncRepository[Gig]):
        self.repository = repository

    async def get_gigs_page(self, page: int, page_size: int) -> List[GigRead]:
        gigs = await self.repository.list_paged(page, page_size)
        return [GigRead.model_validate(gig) for gig in gigs]

    async def get_gigs(self) -> List[GigRead]:
        gigs = await self.repository.list_all()
        return [GigRead.model_validate(gig) for gig in gigs]

    async def get_gig(self, gig_id: int) -> GigRead:
        gig = await self.repository.get_by_id(gig_id)
        return GigRead.model_validate(gig)

    async def create_gig(self, gig: GigCreate) -> GigRead:
        created = await self.repository.add(
            Gig(name=gig.name, gig_date=gig.gig_date, music_genre=gig.music_genre)
        )
        logger.info(f"Created gig {created.gig_id}: {created.name}")
        return GigRead.model_validate(created)

    async def update_gig(self, gig: GigUpdate) -> GigRead:
        updated = await self.repository.update(
            Gig(
                gig_id=gig.gig_id,
                name=gig.name,
                gig_date=gig.gig_date,
                music_genre=gig.music_genre,
            )
        )
        logger.info(f"Updated gig {updated.gig_id}")
        return GigRead.model_validate(updated)

    async def delete_gig(self, gig_id: int) -> None:
        await self.repository.delete(gig_id)
        logger.info(f"Deleted gig {gig_id}")
