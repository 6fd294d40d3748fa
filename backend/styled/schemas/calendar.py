"""
Calendar event and event-context schemas.
"""
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from styled.reco.occasion import OccasionLabel


class CalendarEvent(BaseModel):
    """A calendar event as read from the user's calendar (never stored)"""
    id: str = Field("", description="Provider event id")
    title: str = Field("", description="Event summary")
    description: str = Field("", description="Free-text event notes")
    location: str = Field("", description="Free-text location")
    start: Optional[str] = Field(None, description="Start timestamp or date")
    end: Optional[str] = Field(None, description="End timestamp or date")
    is_all_day: bool = False

    @field_validator("id", "title", "description", "location", mode="before")
    @classmethod
    def none_to_empty(cls, v):
        """Absent text fields are treated as empty strings."""
        return "" if v is None else v


class EventContext(BaseModel):
    """Occasion and travel destination derived from an event"""
    occasion: OccasionLabel
    destination: Optional[str] = None


class CalendarEventWithContext(CalendarEvent):
    """Calendar event annotated with its derived context"""
    occasion: OccasionLabel
    destination: Optional[str] = None


class CalendarEventsResponse(BaseModel):
    success: bool = True
    events: List[CalendarEventWithContext] = []
