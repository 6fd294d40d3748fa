"""
Pydantic schemas for the Styled API.

Import all schemas here for easy access.
"""
from .common import HealthResponse, DeleteResponse
from .calendar import CalendarEvent, EventContext, CalendarEventWithContext, CalendarEventsResponse
from .weather import WeatherData, WeatherResponse, ClothingSuggestions, WeatherAdviceResponse
from .closet import (
    ClosetItemBase, ClosetItemCreate, ClosetItemUpdate, ClosetItemResponse,
    ClassifyRequest, ClothingClassification, ClassifyResponse,
)
from .outfit import (
    NewItemSuggestion, WeatherSnapshot, OutfitData, GeneratedOutfit,
    OutfitGenerateRequest, OutfitMultipleRequest, OutfitVoiceRequest, VoiceOutfit,
    OutfitForEventRequest, MultipleOutfitsResponse, VoiceOutfitsResponse, EventOutfitsResponse,
    SavedOutfitCreate, SavedOutfitResponse, FavoriteUpdate,
)
from .packing import (
    TripWeather, PackingGenerateRequest, PackingItem, DayOutfit, PackingGenerateResponse,
    PackingListCreate, PackingListResponse,
)
from .user import ProfileResponse, ProfileUpdate
from .inspo import InspoImageCreate, InspoImageResponse, InspoBulkDelete

__all__ = [
    # Common
    "HealthResponse",
    "DeleteResponse",
    # Calendar
    "CalendarEvent",
    "EventContext",
    "CalendarEventWithContext",
    "CalendarEventsResponse",
    # Weather
    "WeatherData",
    "WeatherResponse",
    "ClothingSuggestions",
    "WeatherAdviceResponse",
    # Closet
    "ClosetItemBase",
    "ClosetItemCreate",
    "ClosetItemUpdate",
    "ClosetItemResponse",
    "ClassifyRequest",
    "ClothingClassification",
    "ClassifyResponse",
    # Outfit
    "NewItemSuggestion",
    "WeatherSnapshot",
    "OutfitData",
    "GeneratedOutfit",
    "OutfitGenerateRequest",
    "OutfitMultipleRequest",
    "OutfitVoiceRequest",
    "VoiceOutfit",
    "OutfitForEventRequest",
    "MultipleOutfitsResponse",
    "VoiceOutfitsResponse",
    "EventOutfitsResponse",
    "SavedOutfitCreate",
    "SavedOutfitResponse",
    "FavoriteUpdate",
    # Packing
    "TripWeather",
    "PackingGenerateRequest",
    "PackingItem",
    "DayOutfit",
    "PackingGenerateResponse",
    "PackingListCreate",
    "PackingListResponse",
    # Profile
    "ProfileResponse",
    "ProfileUpdate",
    # Inspo
    "InspoImageCreate",
    "InspoImageResponse",
    "InspoBulkDelete",
]
