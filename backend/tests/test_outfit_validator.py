from styled.reco.fashion_rules import filter_appropriate_items
from styled.reco.outfit_validator import enrich_outfit, validate_outfit_ids

CLOSET = [
    {"id": "tee", "name": "White Cotton Tee", "category": "top", "color": "white"},
    {"id": "sweater", "name": "Cream Wool Sweater", "category": "top", "color": "cream"},
    {"id": "jeans", "name": "Blue Straight Jeans", "category": "bottom", "color": "blue"},
    {"id": "skirt", "name": "Linen Midi Skirt", "category": "bottom", "color": "beige"},
    {"id": "dress", "name": "Black Slip Dress", "category": "dress", "color": "black"},
    {"id": "sneakers", "name": "White Sneakers", "category": "shoes", "color": "white"},
    {"id": "loafers", "name": "Tan Loafers", "category": "shoes", "color": "tan"},
    {"id": "coat", "name": "Camel Coat", "category": "outerwear", "color": "camel"},
]
BY_ID = {item["id"]: item for item in CLOSET}


def _validate(ids, temp=72, formality=30):
    appropriate = filter_appropriate_items(CLOSET, temp, formality)
    return validate_outfit_ids(ids, BY_ID, appropriate, temp)


def test_unknown_ids_are_dropped() -> None:
    assert _validate(["tee", "jeans", "sneakers", "made-up"]) == ["tee", "jeans", "sneakers"]


def test_missing_shoes_are_added() -> None:
    result = _validate(["tee", "jeans"])
    assert result[:2] == ["tee", "jeans"]
    assert result[2] in ("sneakers", "loafers")


def test_dress_outfit_is_dress_plus_shoes() -> None:
    assert _validate(["dress", "tee", "jeans", "loafers"]) == ["dress", "loafers"]


def test_missing_top_or_bottom_is_filled_in() -> None:
    result = _validate(["jeans", "sneakers"])
    assert "tee" in result
    assert "jeans" in result
    assert "sneakers" in result


def test_outerwear_only_kept_when_cold() -> None:
    assert "coat" not in _validate(["tee", "jeans", "loafers", "coat"], temp=72)
    assert "coat" in _validate(["sweater", "jeans", "loafers", "coat"], temp=45)


def test_weather_inappropriate_pieces_are_removed() -> None:
    assert "sweater" not in _validate(["sweater", "jeans", "sneakers"], temp=85)


def test_enrich_outfit_attaches_closet_details() -> None:
    outfit = {
        "label": "Weekend",
        "closet_item_ids": ["tee", "jeans", "gone"],
        "weather_rationale": "Light layers",
        "styling_tips": ["Cuff the jeans"],
    }
    enriched = enrich_outfit(outfit, BY_ID, formality_level=30)
    assert [i["name"] for i in enriched["closet_items"]] == ["White Cotton Tee", "Blue Straight Jeans"]
    assert enriched["closet_item_ids"] == ["tee", "jeans", "gone"]
    assert enriched["new_items"] == []
    assert enriched["style_rationale"] == ""
    assert enriched["styling_tips"] == ["Cuff the jeans"]
    assert enriched["formality_level"] == 30
