import pytest

from styled.reco.occasion import OccasionLabel, classify_occasion, event_field, event_text
from styled.schemas import CalendarEvent


@pytest.mark.parametrize(
    "title, expected",
    [
        ("Team Meeting", OccasionLabel.BUSINESS),
        ("Job interview at Acme", OccasionLabel.BUSINESS),
        ("Sunday Brunch", OccasionLabel.BRUNCH),
        ("Family Thanksgiving Dinner", OccasionLabel.DINNER),
        ("Romantic Date Night", OccasionLabel.DATE_NIGHT),
        ("Girls night!", OccasionLabel.GIRLS_NIGHT_OUT),
        ("Lakers basketball", OccasionLabel.SPORTS_EVENT),
        ("Taylor Swift concert", OccasionLabel.CONCERT),
        ("Dentist", OccasionLabel.ERRANDS),
        ("Flight home", OccasionLabel.TRAVEL_DAY),
        ("Pool party", OccasionLabel.BEACH_DAY),
        ("Coffee with Ana", OccasionLabel.CASUAL_DAY_OUT),
    ],
)
def test_classify_occasion_buckets(title: str, expected: OccasionLabel) -> None:
    assert classify_occasion({"title": title}) == expected


def test_empty_event_is_casual_day_out() -> None:
    assert classify_occasion({}) == OccasionLabel.CASUAL_DAY_OUT
    assert classify_occasion(CalendarEvent()) == OccasionLabel.CASUAL_DAY_OUT
    assert classify_occasion(None) == OccasionLabel.CASUAL_DAY_OUT


def test_first_bucket_wins() -> None:
    # Both "meeting" and "dinner" hit; Business is checked first
    assert classify_occasion({"title": "Dinner meeting with investors"}) == OccasionLabel.BUSINESS
    # Dinner is checked before Date Night
    assert classify_occasion({"title": "Anniversary dinner"}) == OccasionLabel.DINNER


def test_substring_matching_has_no_word_boundaries() -> None:
    assert classify_occasion({"title": "Trip to Brunchville"}) == OccasionLabel.BRUNCH
    # "update" contains "date"
    assert classify_occasion({"title": "Status update"}) == OccasionLabel.DATE_NIGHT


def test_description_and_location_are_considered() -> None:
    event = {"title": "Saturday", "description": "bring sunscreen", "location": "South Beach"}
    assert classify_occasion(event) == OccasionLabel.BEACH_DAY


def test_matching_is_case_insensitive() -> None:
    assert classify_occasion({"title": "QUARTERLY PRESENTATION"}) == OccasionLabel.BUSINESS


def test_classify_is_idempotent() -> None:
    event = CalendarEvent(title="Girls Night Out", location="Downtown")
    assert classify_occasion(event) == classify_occasion(event)


def test_event_field_treats_missing_and_non_text_as_empty() -> None:
    assert event_field({"title": None}, "title") == ""
    assert event_field({"title": 42}, "title") == ""
    assert event_field(CalendarEvent(title="x"), "location") == ""
    assert event_text({"title": "a", "location": "b"}, "title", "description", "location") == "a  b"
