from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime, timezone


class GigBase(BaseModel):
    """Fields shared by every Gig schema"""
    name: str = Field(..., description="Name of the gig")
    gig_date: datetime = Field(..., description="When the gig takes place (stored as naive UTC)")
    music_genre: Optional[str] = None

    @field_validator("gig_date")
    @classmethod
    def normalize_gig_date(cls, v: datetime) -> datetime:
        """Convert offset-aware dates to naive UTC to match the GigDate column"""
        if v.tzinfo is not None and v.utcoffset() is not None:
            return v.astimezone(timezone.utc).replace(tzinfo=None)
        return v


class GigCreate(GigBase):
    """Schema for creating a new gig (the id is assigned by the database)"""
    pass


class GigWrite(GigBase):
    """Request body for replacing a gig; the id comes from the URL"""
    pass


class GigUpdate(GigBase):
    """Schema for replacing every mutable field of an existing gig"""
    gig_id: int


class GigRead(GigBase):
    """Schema for gig responses"""
    gig_id: int

    class Config:
        from_attributes = True  # Allows conversion from SQLAlchemy models
