"""
Packing list schemas.
"""
from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class TripWeather(BaseModel):
    temp: int = 72
    condition: str = "Clear"
    description: str = "clear sky"


class PackingGenerateRequest(BaseModel):
    """Trip details. destination, trip_type and days are required but validated in the route."""
    destination: Optional[str] = None
    country: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    trip_type: Optional[str] = None
    weather: Optional[TripWeather] = None
    days: Optional[int] = Field(None, ge=0, le=60)
    is_international: bool = False


class PackingItem(BaseModel):
    name: str
    category: str = "clothing"  # clothing, shoes, accessories
    quantity: int = 1
    is_from_closet: bool = False
    closet_item_id: Optional[str] = None
    image_url: Optional[str] = None


class DayOutfitDetail(BaseModel):
    items: List[str] = []
    description: str = ""


class DayOutfit(BaseModel):
    day: int
    date: Optional[str] = None
    outfit: DayOutfitDetail


class PackingGenerateResponse(BaseModel):
    success: bool = True
    items: List[PackingItem] = []
    outfits: List[DayOutfit] = []


class PackingListCreate(BaseModel):
    """Schema for saving a generated packing list"""
    destination: str = Field(..., min_length=1)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    trip_type: Optional[str] = None
    list_data: dict = Field(default_factory=dict)


class PackingListResponse(PackingListCreate):
    id: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
