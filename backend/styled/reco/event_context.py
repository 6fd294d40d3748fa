from __future__ import annotations

from typing import Any

from styled.schemas.calendar import CalendarEventWithContext, EventContext

from .destination import extract_destination
from .occasion import classify_occasion


def derive_event_context(event: Any) -> EventContext:
    """Occasion and destination for one event. Derived on every call, never stored."""
    return EventContext(
        occasion=classify_occasion(event),
        destination=extract_destination(event),
    )


def annotate_event(event: Any) -> CalendarEventWithContext:
    """Copy of the event with its derived context attached."""
    data = event.model_dump() if hasattr(event, "model_dump") else dict(event)
    data.update(derive_event_context(event).model_dump())
    return CalendarEventWithContext(**data)
