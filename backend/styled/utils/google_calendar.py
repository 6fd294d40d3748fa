"""
Google Calendar v3 client for the user's upcoming events.

The Google access token comes from the hosted auth provider's OAuth session
and is passed through by the client; it is never stored.
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Dict, List

import requests

from styled.config import settings
from styled.core.exceptions import AuthenticationError, ExternalServiceError
from styled.schemas.calendar import CalendarEvent

logger = logging.getLogger(__name__)

GOOGLE_EVENTS_URL = "https://www.googleapis.com/calendar/v3/calendars/primary/events"

EXPIRED_ACCESS_MESSAGE = "Your Google Calendar access has expired. Please sign in with Google again."


def _isoformat(dt: datetime) -> str:
    return dt.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def map_google_event(event: Dict) -> CalendarEvent:
    """Flatten a Google Calendar event resource into a CalendarEvent"""
    start = event.get("start") or {}
    end = event.get("end") or {}
    return CalendarEvent(
        id=event.get("id") or "",
        title=event.get("summary") or "Untitled Event",
        description=event.get("description") or "",
        location=event.get("location") or "",
        start=start.get("dateTime") or start.get("date"),
        end=end.get("dateTime") or end.get("date"),
        is_all_day=not start.get("dateTime"),
    )


def fetch_upcoming_events(provider_token: str) -> List[CalendarEvent]:
    """
    Events on the primary calendar from now until CALENDAR_LOOKAHEAD_DAYS ahead.

    Raises:
        AuthenticationError: token missing, expired or revoked
        ExternalServiceError: any other Google API failure
    """
    if not provider_token:
        raise AuthenticationError(
            "No Google access token. Please sign in with Google again to grant calendar access."
        )

    now = datetime.now(timezone.utc)
    params = {
        "timeMin": _isoformat(now),
        "timeMax": _isoformat(now + timedelta(days=settings.CALENDAR_LOOKAHEAD_DAYS)),
        "singleEvents": "true",
        "orderBy": "startTime",
        "maxResults": settings.CALENDAR_MAX_RESULTS,
    }

    try:
        response = requests.get(
            GOOGLE_EVENTS_URL,
            params=params,
            headers={"Authorization": f"Bearer {provider_token}"},
            timeout=10,
        )
    except requests.RequestException as e:
        logger.error(f"Google Calendar request failed: {e}")
        raise ExternalServiceError("Google Calendar", "Failed to fetch calendar events") from e

    if response.status_code != 200:
        try:
            error_message = ((response.json().get("error") or {}).get("message")) or ""
        except ValueError:
            error_message = ""
        logger.error(f"Google Calendar API error: {response.status_code} {error_message}")
        if response.status_code == 401 or "Invalid Credentials" in error_message:
            raise AuthenticationError(EXPIRED_ACCESS_MESSAGE)
        raise ExternalServiceError("Google Calendar", "Failed to fetch calendar events")

    items = response.json().get("items") or []
    logger.info(f"Fetched {len(items)} calendar events")
    return [map_google_event(item) for item in items]
