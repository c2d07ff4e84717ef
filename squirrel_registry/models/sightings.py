# squirrel_registry/models/sightings.py

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field


class SightingCreate(BaseModel):
    name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    location: str = Field(..., min_length=1)
    date_spotted: date = Field(..., alias="dateSpotted")

    class Config:
        populate_by_name = True
        str_strip_whitespace = True


class SightingOut(BaseModel):
    id: int
    name: str
    description: str
    location: str
    date_spotted: date = Field(..., alias="dateSpotted")

    class Config:
        from_attributes = True
        populate_by_name = True


class SightingListResponse(BaseModel):
    """
    Envelope returned by Squirrel.list(); data is omitted on failure.
    """
    success: bool
    data: Optional[List[SightingOut]] = None


class SightingCreateResponse(BaseModel):
    success: bool
    data: Optional[SightingOut] = None
