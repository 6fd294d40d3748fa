import logging

from fastapi import APIRouter, Depends, Header

from styled.core.auth import get_current_user
from styled.models import User
from styled.reco.event_context import annotate_event, derive_event_context
from styled.schemas import CalendarEvent, CalendarEventsResponse, EventContext
from styled.utils.google_calendar import fetch_upcoming_events

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/events", response_model=CalendarEventsResponse)
def list_upcoming_events(
    x_provider_token: str = Header("", description="Google OAuth access token from the sign-in session"),
    user: User = Depends(get_current_user),
):
    """Upcoming Google Calendar events, each annotated with occasion and destination."""
    events = fetch_upcoming_events(x_provider_token)
    return CalendarEventsResponse(events=[annotate_event(event) for event in events])


@router.post("/context", response_model=EventContext)
async def event_context(event: CalendarEvent, user: User = Depends(get_current_user)):
    """Occasion and destination for a single event."""
    return derive_event_context(event)
