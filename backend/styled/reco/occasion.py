from __future__ import annotations

from enum import Enum
from typing import Any, List, Tuple


class OccasionLabel(str, Enum):
    BUSINESS = "Business"
    BRUNCH = "Brunch"
    DINNER = "Dinner"
    DATE_NIGHT = "Date Night"
    GIRLS_NIGHT_OUT = "Girls Night Out"
    SPORTS_EVENT = "Sports Event"
    CONCERT = "Concert"
    ERRANDS = "Errands"
    TRAVEL_DAY = "Travel Day"
    BEACH_DAY = "Beach Day"
    CASUAL_DAY_OUT = "Casual Day Out"


# Checked in order, first bucket with any hit wins.
# Dinner sits before Date Night so "Thanksgiving Dinner" is not read as a date.
OCCASION_BUCKETS: List[Tuple[OccasionLabel, List[str]]] = [
    (OccasionLabel.BUSINESS, ["interview", "meeting", "presentation", "conference", "work", "business"]),
    (OccasionLabel.BRUNCH, ["brunch", "breakfast"]),
    (OccasionLabel.DINNER, ["dinner", "thanksgiving", "supper"]),
    (OccasionLabel.DATE_NIGHT, ["date", "romantic", "anniversary"]),
    (OccasionLabel.GIRLS_NIGHT_OUT, ["girls", "ladies night", "girls night"]),
    (OccasionLabel.SPORTS_EVENT, [
        "game", "match", "sports", "football", "basketball", "baseball", "soccer", "hockey", "stadium",
    ]),
    (OccasionLabel.CONCERT, ["concert", "show", "music", "festival", "performance"]),
    (OccasionLabel.ERRANDS, [
        "errand", "grocery", "shopping", "appointment", "pickup", "dentist", "doctor", "bank",
    ]),
    (OccasionLabel.TRAVEL_DAY, ["travel", "flight", "airport", "trip", "vacation"]),
    (OccasionLabel.BEACH_DAY, ["beach", "pool", "swim"]),
    (OccasionLabel.CASUAL_DAY_OUT, ["casual", "hangout", "coffee", "lunch", "walk", "park"]),
]

DEFAULT_OCCASION = OccasionLabel.CASUAL_DAY_OUT


def event_field(event: Any, name: str) -> str:
    """Read a text field from a mapping or an object; absent or None becomes ''."""
    if event is None:
        return ""
    if hasattr(event, "get"):
        value = event.get(name)
    else:
        value = getattr(event, name, None)
    return value if isinstance(value, str) else ""


def event_text(event: Any, *fields: str) -> str:
    return " ".join(event_field(event, f) for f in fields)


def _contains_any(text: str, words: List[str]) -> bool:
    return any(w in text for w in words)


def classify_occasion(event: Any) -> OccasionLabel:
    """Map an event to exactly one occasion bucket.

    Plain substring containment over the lower-cased title, description and
    location, so "Brunchville" still counts as brunch.
    """
    text = event_text(event, "title", "description", "location").lower()
    for label, keywords in OCCASION_BUCKETS:
        if _contains_any(text, keywords):
            return label
    return DEFAULT_OCCASION
