"""
Travel destination detection from calendar event text.

Heuristic only: returns a plain city name suitable for a weather lookup, or
None. No geocoding is attempted.
"""
from __future__ import annotations

import re
from typing import Any, Callable, Optional, Sequence

from .occasion import event_field, event_text


AIRPORT_CITIES = {
    "DTW": "Detroit",
    "JFK": "New York",
    "LAX": "Los Angeles",
    "ORD": "Chicago",
    "DFW": "Dallas",
    "DEN": "Denver",
    "SFO": "San Francisco",
    "SEA": "Seattle",
    "ATL": "Atlanta",
    "BOS": "Boston",
    "MIA": "Miami",
    "LAS": "Las Vegas",
    "MCO": "Orlando",
    "PHX": "Phoenix",
    "IAH": "Houston",
    "MSP": "Minneapolis",
    "CLT": "Charlotte",
    "EWR": "Newark",
    "LGA": "New York",
    "SAN": "San Diego",
    "TPA": "Tampa",
    "PDX": "Portland",
    "SLC": "Salt Lake City",
    "BWI": "Baltimore",
    "DCA": "Washington DC",
    "IAD": "Washington DC",
    "AUS": "Austin",
    "BNA": "Nashville",
    "RDU": "Raleigh",
    "SJC": "San Jose",
    "OAK": "Oakland",
    "SMF": "Sacramento",
    "DAL": "Dallas",
    "HOU": "Houston",
    "MDW": "Chicago",
    "FLL": "Fort Lauderdale",
    "RSW": "Fort Myers",
    "PBI": "Palm Beach",
}

US_STATES = (
    "AL", "AK", "AZ", "AR", "CA", "CO", "CT", "DE", "FL", "GA",
    "HI", "ID", "IL", "IN", "IA", "KS", "KY", "LA", "ME", "MD",
    "MA", "MI", "MN", "MS", "MO", "MT", "NE", "NV", "NH", "NJ",
    "NM", "NY", "NC", "ND", "OH", "OK", "OR", "PA", "RI", "SC",
    "SD", "TN", "TX", "UT", "VT", "VA", "WA", "WV", "WI", "WY",
)

FLIGHT_PATTERN = re.compile(r"([A-Z]{3})\s*(?:TO|→|-|–|—)\s*([A-Z]{3})", re.IGNORECASE)

# Leftmost hit wins and there are no word boundaries, so "Boston" loses its
# tail at "st"; such candidates fail the length check and the next state is tried.
ADDRESS_TAIL = re.compile(
    r"\s*(Township|Twp|County|Dr|Drive|St|Street|Ave|Avenue|Rd|Road|Blvd|Boulevard|\d+).*$",
    re.IGNORECASE,
)
NON_CITY_WORD = re.compile(
    r"^(Dr|Drive|St|Street|Ave|Avenue|Rd|Road|Blvd|Boulevard|Ln|Lane|Ct|Court|Way|Pl|Place"
    r"|Township|Twp|County)$",
    re.IGNORECASE,
)
CONNECTOR_WORD = re.compile(r"^(in|at|near|to|for|with)$", re.IGNORECASE)
ZIP_CODE = re.compile(r"\d{5}")

MAX_CITY_WORDS = 2
SHORT_LOCATION_MAX = 30


def _state_pattern(state: str, comma: str) -> re.Pattern:
    return re.compile(rf"([A-Za-z\s]+?)\s*{comma}\s+{state}\b", re.IGNORECASE)


# Compiled once per state, in US_STATES order; the comma variant serves event text
STATE_PATTERNS = {state: _state_pattern(state, ",?") for state in US_STATES}
STATE_PATTERNS_WITH_COMMA = {state: _state_pattern(state, ",") for state in US_STATES}


def _city_before_state(text: str, require_comma: bool = False, stop_at_connector: bool = False) -> Optional[str]:
    patterns = STATE_PATTERNS_WITH_COMMA if require_comma else STATE_PATTERNS
    for state in US_STATES:
        match = patterns[state].search(text)
        if not match:
            continue
        captured = match.group(1).strip()
        stripped = ADDRESS_TAIL.sub("", captured, count=1).strip()
        if len(stripped) <= 2 or stripped.isdigit():
            continue

        # Walk back from the state code collecting city-like words
        words = []
        for word in reversed(captured.split()):
            if word.isdigit() or NON_CITY_WORD.match(word):
                continue
            if stop_at_connector and CONNECTOR_WORD.match(word):
                break
            words.insert(0, word)
            if len(words) >= MAX_CITY_WORDS:
                break
        city = " ".join(words)
        if len(city) > 2:
            return city
    return None


def destination_from_flight(event: Any) -> Optional[str]:
    """Map the arrival airport of "DTW to LAX", "DTW-LAX" or "DTW → LAX" to its city."""
    text = event_text(event, "title", "description", "location").upper()
    match = FLIGHT_PATTERN.search(text)
    if not match:
        return None
    return AIRPORT_CITIES.get(match.group(2).upper())


def destination_from_address(event: Any) -> Optional[str]:
    location = event_field(event, "location")
    if not location:
        return None
    return _city_before_state(location)


def destination_from_short_location(event: Any) -> Optional[str]:
    """A short location with no comma and no ZIP code is taken as the city itself."""
    location = event_field(event, "location")
    if not location:
        return None
    if len(location) < SHORT_LOCATION_MAX and "," not in location and not ZIP_CODE.search(location):
        return location.strip() or None
    return None


def destination_from_event_text(event: Any) -> Optional[str]:
    """Look for "City, ST" in the title and description, e.g. "Client Meeting in Denver, CO"."""
    if event_field(event, "location"):
        return None
    text = event_text(event, "title", "description")
    return _city_before_state(text, require_comma=True, stop_at_connector=True)


DestinationRule = Callable[[Any], Optional[str]]

DESTINATION_RULES: Sequence[DestinationRule] = (
    destination_from_flight,
    destination_from_address,
    destination_from_short_location,
    destination_from_event_text,
)


def extract_destination(event: Any, rules: Sequence[DestinationRule] = DESTINATION_RULES) -> Optional[str]:
    """Return the first city any rule finds, or None."""
    for rule in rules:
        city = rule(event)
        if city is not None:
            return city
    return None
