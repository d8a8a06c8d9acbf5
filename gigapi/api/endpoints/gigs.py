import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status

from gigapi.core.deps import get_gig_service
from gigapi.schemas.gig import GigCreate, GigRead, GigUpdate, GigWrite
from gigapi.services.gig_service import GigServiceBase

router = APIRouter(prefix="/gigs", tags=["Gigs"])
logger = logging.getLogger(__name__)


@router.get("/", response_model=List[GigRead])
async def list_gigs(
    page: Optional[int] = Query(default=None, description="1-based page number"),
    page_size: Optional[int] = Query(default=None, description="Gigs per page"),
    service: GigServiceBase = Depends(get_gig_service)
):
    """
    List gigs in the order they were stored.

    Without paging parameters every gig is returned. With both `page` and
    `page_size`, only that page is returned.
    """
    if page is None and page_size is None:
        return await service.get_gigs()

    if page is None or page_size is None:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="page and page_size must be given together"
        )

    return await service.get_gigs_page(page, page_size)


@router.get("/{gig_id}", response_model=GigRead)
async def get_gig(gig_id: int, service: GigServiceBase = Depends(get_gig_service)):
    """Retrieve a gig by ID."""
    return await service.get_gig(gig_id)


@router.post("/", status_code=status.HTTP_201_CREATED, response_model=GigRead)
async def create_gig(request: GigCreate, service: GigServiceBase = Depends(get_gig_service)):
    """
    Create a new gig.

    The gig_id is assigned by the database and returned in the response.
    """
    return await service.create_gig(request)


@router.put("/{gig_id}", response_model=GigRead)
async def update_gig(
    gig_id: int,
    request: GigWrite,
    service: GigServiceBase = Depends(get_gig_service)
):
    """Replace every field of an existing gig except its ID."""
    return await service.update_gig(GigUpdate(gig_id=gig_id, **request.model_dump()))


@router.delete("/{gig_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_gig(gig_id: int, service: GigServiceBase = Depends(get_gig_service)):
    """Delete a gig by ID."""
    await service.delete_gig(gig_id)
    return None
