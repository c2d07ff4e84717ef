# squirrel_registry/api/sightings.py

from fastapi import APIRouter, Depends, HTTPException, status

from squirrel_registry.entities.squirrel import EntityError, Squirrel
from squirrel_registry.models.sightings import (
    SightingCreate,
    SightingCreateResponse,
    SightingListResponse,
)

router = APIRouter(prefix="/sightings", tags=["sightings"])


def get_squirrel() -> Squirrel:
    return Squirrel()


@router.get("/", response_model=SightingListResponse)
async def list_sightings(squirrel: Squirrel = Depends(get_squirrel)) -> SightingListResponse:
    """
    Return every sighting in creation order.
    """
    try:
        return await squirrel.list()
    except EntityError:
        raise HTTPException(status_code=503, detail="Sightings store unavailable")


@router.post(
    "/",
    response_model=SightingCreateResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_sighting(
    sighting: SightingCreate,
    squirrel: Squirrel = Depends(get_squirrel),
) -> SightingCreateResponse:
    """
    Store a new sighting; all four fields are required.
    """
    try:
        return await squirrel.create(sighting)
    except EntityError:
        raise HTTPException(status_code=503, detail="Sightings store unavailable")
