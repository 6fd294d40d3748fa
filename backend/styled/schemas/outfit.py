"""
Outfit generation and history schemas.
"""
from datetime import date as date_type
from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from .calendar import CalendarEvent, EventContext
from .weather import WeatherData

ItemSource = Literal["closet", "mix", "new"]


class NewItemSuggestion(BaseModel):
    """An item the user does not own yet"""
    description: str = ""
    category: str = ""
    color: Optional[str] = None
    reasoning: str = ""
    estimated_price: Optional[str] = None


class WeatherSnapshot(BaseModel):
    """Weather the outfit was generated for"""
    temperature: int = 72
    condition: str = "Clear"
    city: str = ""


class OutfitData(BaseModel):
    """Generated outfit payload stored with each saved outfit"""
    closet_item_ids: List[str] = []
    closet_items: List[dict] = []
    new_items: List[NewItemSuggestion] = []
    weather_rationale: str = ""
    style_rationale: str = ""
    styling_tips: List[str] = []
    formality_level: Optional[int] = None
    weather: Optional[WeatherSnapshot] = None


class GeneratedOutfit(BaseModel):
    """An outfit suggestion that has not been saved"""
    id: str
    label: str
    outfit_data: OutfitData


class OutfitGenerateRequest(BaseModel):
    """Single outfit for an occasion"""
    occasion: str = Field(..., min_length=1)
    item_source: ItemSource = "closet"
    weather: Optional[WeatherSnapshot] = None


class OutfitMultipleRequest(BaseModel):
    """Several validated outfits for an occasion and formality level"""
    occasion: str = Field(..., min_length=1)
    item_source: ItemSource = "closet"
    formality_level: int = Field(50, ge=0, le=100, description="0 = very casual, 100 = formal")
    count: int = Field(3, ge=1, le=6)
    weather: Optional[WeatherSnapshot] = None


class OutfitVoiceRequest(BaseModel):
    """Free-text outfit request"""
    prompt: str = Field(..., min_length=1, description="What the user said")
    weather: Optional[WeatherSnapshot] = None


class VoiceOutfit(BaseModel):
    """Outfit suggestion parsed from a free-text request"""
    label: str = "Outfit"
    item_source: str = "mix"
    occasion: str = ""
    formality_level: int = 50
    closet_item_ids: List[str] = []
    new_items: List[NewItemSuggestion] = []
    weather_rationale: str = ""
    style_rationale: str = ""
    styling_tips: List[str] = []


class OutfitForEventRequest(BaseModel):
    """Outfits for a calendar event"""
    event: CalendarEvent
    item_source: ItemSource = "closet"
    formality_level: Optional[int] = Field(None, ge=0, le=100)
    count: int = Field(3, ge=1, le=6)
    home_city: Optional[str] = Field(None, description="Weather location when the event has no destination")


class MultipleOutfitsResponse(BaseModel):
    success: bool = True
    outfits: List[GeneratedOutfit] = []


class VoiceOutfitsResponse(BaseModel):
    success: bool = True
    outfits: List[VoiceOutfit] = []


class EventOutfitsResponse(MultipleOutfitsResponse):
    context: EventContext
    weather: WeatherData
    weather_is_fallback: bool = False


class SavedOutfitCreate(BaseModel):
    """Schema for saving an outfit to history"""
    label: str = Field(..., min_length=1)
    context_type: str = "manual_request"
    context_id: Optional[str] = None
    date: Optional[date_type] = None
    outfit_data: dict = Field(default_factory=dict, description="Generated outfit payload")


class SavedOutfitResponse(BaseModel):
    """Saved outfit as returned by the API"""
    id: str
    label: str
    context_type: str
    context_id: Optional[str] = None
    date: Optional[date_type] = None
    is_favorite: bool = False
    outfit_data: dict = {}
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class FavoriteUpdate(BaseModel):
    is_favorite: bool
