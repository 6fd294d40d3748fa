"""
Stylist knowledge base: weather and formality bands, item categorization and
appropriateness filters.

 HOW IT AFFECTS OUTFIT SUGGESTIONS:
 - Closet items are filtered by weather + formality before they reach the prompt
 - The same filters are reapplied to whatever the model returns (see outfit_validator)
 - All matching is lowercase substring matching on item names

 TUNING RECOMMENDATIONS:
 - Add keywords to the "forbidden" lists to keep items out of a weather band
 - Shoe lists per formality only feed the prompt; the hard filters live in the
   is_*_appropriate functions below
"""
from __future__ import annotations

from typing import Any, Dict, List, Mapping

FASHION_RULES: Dict[str, Dict[str, Dict[str, Any]]] = {
    "formality": {
        "casual": {
            "range": (0, 40),
            "description": "Relaxed, everyday wear",
            "shoe_types": ["sneakers", "flats", "flat sandals", "loafers", "canvas shoes", "slides"],
            "avoid_shoes": ["stilettos", "pumps", "wedges", "heeled sandals", "slingbacks", "strappy heels",
                            "platform heels"],
            "examples": [
                "jeans + t-shirt + sneakers",
                "casual dress + flat sandals",
                "casual dress + sneakers",
                "white cami tank + beige linen shorts + sneakers",
                "basic tee + jeans + white sneakers",
                "t-shirt + denim shorts + sneakers",
                "shorts + tank + slides",
            ],
        },
        "smartCasual": {
            "range": (41, 60),
            "description": "Put-together but not formal",
            "shoe_types": ["loafers", "ankle boots", "block heels", "nice flats", "clean sneakers"],
            "avoid_shoes": ["athletic sneakers", "flip flops", "very high stilettos"],
            "examples": [
                "dark jeans + blouse + ankle boots",
                "trousers + nice top + loafers",
                "midi skirt + tucked blouse + block heels",
            ],
        },
        "dressy": {
            "range": (61, 80),
            "description": "Date night, nice dinner, events",
            "shoe_types": ["heels", "heeled boots", "dressy flats", "strappy sandals"],
            "avoid_shoes": ["sneakers", "athletic shoes", "casual sandals"],
            "examples": [
                "elegant dress + heels",
                "dressy pants + silk top + heels",
                "skirt + elegant blouse + heeled sandals",
            ],
        },
        "formal": {
            "range": (81, 100),
            "description": "Special events, galas, formal occasions",
            "shoe_types": ["heels", "elegant pumps", "strappy heels"],
            "avoid_shoes": ["flats", "boots", "sneakers", "casual shoes"],
            "examples": [
                "formal gown + elegant heels",
                "cocktail dress + strappy heels",
                "elegant midi dress + pumps",
            ],
        },
    },
    "weather": {
        "hot": {
            "forbidden": ["sweaters", "knits", "long sleeves", "turtlenecks", "mock necks", "ribbed", "wool",
                          "heavy", "puffer", "coat", "jacket", "boots"],
            "note": "Lightweight, breathable items only. No layering.",
        },
        "warm": {
            "forbidden": ["heavy sweaters", "wool", "puffer", "heavy coat", "turtleneck", "thick knits", "ribbed",
                          "long sleeve", "long-sleeve"],
            "note": "Light fabrics only. No heavy layers.",
        },
        "mild": {
            "forbidden": ["heavy winter coats", "puffer jackets"],
            "note": "Light layers OK.",
        },
        "cool": {
            "forbidden": ["shorts", "tank tops", "sleeveless", "sandals"],
            "note": "Warm layers needed.",
        },
        "cold": {
            "forbidden": ["shorts", "mini skirts", "tank tops", "sleeveless", "sandals", "open-toe"],
            "note": "Warm coat mandatory.",
        },
    },
    "occasions": {
        "Date Night": {
            "casual": "Nice jeans + pretty top + cute comfortable shoes.",
            "dressy": "Elegant dress OR dressy pants with nice top + heels",
            "formal": "Your best dress + elegant heels.",
        },
        "Brunch": {
            "casual": "Jeans + nice top + comfortable shoes. Sundress works.",
            "dressy": "Midi dress OR nice pants + blouse + cute heels",
            "formal": "Elegant day dress + heels",
        },
        "Casual Outing": {
            "casual": "Jeans/shorts + t-shirt/casual top + sneakers/sandals",
            "dressy": "Elevated casual - nice jeans + blouse + loafers",
            "formal": "N/A",
        },
        "Party": {
            "casual": "Fun dress OR jeans + statement top + fun shoes",
            "dressy": "Party dress + heels",
            "formal": "Cocktail dress or gown + elegant heels",
        },
    },
}

# Default formality per calendar occasion when the caller does not pick one
OCCASION_FORMALITY = {
    "Business": 65,
    "Brunch": 45,
    "Dinner": 60,
    "Date Night": 70,
    "Girls Night Out": 65,
    "Sports Event": 20,
    "Concert": 35,
    "Errands": 10,
    "Travel Day": 20,
    "Beach Day": 10,
    "Casual Day Out": 30,
}

OUTFIT_STRUCTURE = {
    "formal": "FORMAL: All outfits should be DRESS + HEELS. Dresses are expected.",
    "dressy": "DRESSY: 2 outfits can be DRESS + HEELS, 1 should be TOP + BOTTOM + HEELS.",
    "smartCasual": "SMART CASUAL: Mix - some TOP + BOTTOM + SHOES, maybe 1 dress.",
    "casual": "CASUAL: Prefer TOP + BOTTOM + COMFORTABLE SHOES (sneakers, flats, loafers). "
              "Dress optional but keep it casual.",
}

OUTFIT_CATEGORIES = ("top", "bottom", "dress", "shoes", "outerwear")

OUTERWEAR_BELOW_F = 60


def _name(item: Mapping[str, Any]) -> str:
    return (item.get("name") or "").lower()


def _contains_any(text: str, words: List[str]) -> bool:
    return any(w in text for w in words)


def get_weather_category(temp: float) -> str:
    if temp >= 75:
        return "hot"
    if temp >= 70:
        return "warm"
    if temp >= 60:
        return "mild"
    if temp >= 50:
        return "cool"
    return "cold"


def get_formality_category(level: int) -> str:
    if level <= 40:
        return "casual"
    if level <= 60:
        return "smartCasual"
    if level <= 80:
        return "dressy"
    return "formal"


def get_formality_label(level: int) -> str:
    """Human label for a 0-100 formality slider value"""
    if level <= 20:
        return "Very Casual"
    if level <= 40:
        return "Casual"
    if level <= 60:
        return "Smart Casual"
    if level <= 80:
        return "Dressy"
    return "Formal"


def categorize_item(item: Mapping[str, Any]) -> str:
    """Outfit slot for an item, inferred from its category and name.

    Returns one of top, bottom, dress, shoes, outerwear, accessory, other.
    """
    name = _name(item)
    category = (item.get("category") or "").lower()

    if "dress" in category or "dress" in name:
        return "dress"
    if "outerwear" in category or _contains_any(name, ["jacket", "coat", "blazer", "cardigan", "puffer"]):
        return "outerwear"
    if "shoe" in category or _contains_any(
        name, ["heel", "boot", "sneaker", "sandal", "loafer", "flat", "pump", "slingback", "mule"]
    ):
        return "shoes"
    if "bottom" in category or _contains_any(name, ["pants", "trouser", "jeans", "skirt", "shorts"]):
        return "bottom"
    if "top" in category or _contains_any(
        name, ["shirt", "blouse", "top", "tank", "cami", "sweater", "turtleneck", "t-shirt", "bodysuit", "mock neck"]
    ):
        return "top"
    if _contains_any(name, ["bag", "belt", "scarf", "hat", "jewelry"]):
        return "accessory"
    return "other"


def is_weather_appropriate(item: Mapping[str, Any], temp: float) -> bool:
    name = _name(item)

    if temp >= 75:
        if _contains_any(name, ["long sleeve", "long-sleeve", "sweater", "knit", "wool", "turtleneck",
                                "mock neck", "mock-neck", "ribbed", "jacket", "coat", "puffer", "blazer"]):
            return False
        if "boot" in name and "ankle" not in name:
            return False

    elif temp >= 70:
        if _contains_any(name, ["long sleeve", "long-sleeve", "sweater", "wool", "heavy", "turtleneck",
                                "mock neck", "ribbed", "puffer", "heavy coat"]):
            return False

    elif temp >= 60:
        if _contains_any(name, ["puffer", "heavy coat", "wool coat"]):
            return False

    elif temp < 50:
        if _contains_any(name, ["tank", "sleeveless", "cami", "shorts", "mini skirt", "sandal",
                                "open-toe", "open toe"]):
            return False

    return True


def is_shoe_appropriate_for_formality(item: Mapping[str, Any], formality_level: int) -> bool:
    name = _name(item)
    formality = get_formality_category(formality_level)

    if formality == "casual":
        if _contains_any(name, ["stiletto", "pump", "wedge", "slingback"]):
            return False
        if "strappy" in name and "heel" in name:
            return False
        # Block, low and kitten heels are fine for casual
        if "heel" in name and not _contains_any(name, ["block", "low", "kitten"]):
            return False

    if formality == "formal":
        if _contains_any(name, ["sneaker", "loafer", "combat"]):
            return False
        if "flat" in name and "ballet" not in name:
            return False
        if "boot" in name and "heel" not in name:
            return False

    return True


def is_item_appropriate_for_formality(item: Mapping[str, Any], formality_level: int) -> bool:
    name = _name(item)
    category = categorize_item(item)
    formality = get_formality_category(formality_level)

    if formality == "casual":
        if category == "dress":
            if _contains_any(name, ["button", "structured", "tailored", "blazer dress", "shirt dress",
                                    "wrap dress", "mini dress"]):
                return False
            if _contains_any(name, ["bodycon", "fitted", "tight"]):
                return False
            if "maxi" in name and "casual" not in name:
                return False

        if _contains_any(name, ["drape", "satin", "sequin", "sparkle", "cocktail", "formal", "evening",
                                "bell sleeve", "puff sleeve", "balloon sleeve"]):
            return False
        if "silk" in name and category == "top":
            return False
        if "halter" in name and "casual" not in name:
            return False

    if formality == "formal":
        if _contains_any(name, ["t-shirt", "tee ", "casual", "athletic", "sports", "hoodie", "sweatshirt"]):
            return False
        if "denim" in name and category == "bottom":
            return False

    return True


def filter_appropriate_items(items: List[Mapping[str, Any]], temp: float, formality_level: int) -> Dict[str, List]:
    """Bucket closet items by outfit slot, keeping only weather + formality appropriate ones."""
    appropriate: Dict[str, List] = {cat: [] for cat in OUTFIT_CATEGORIES}
    for item in items:
        cat = categorize_item(item)
        if cat not in appropriate:
            continue
        if not is_weather_appropriate(item, temp):
            continue
        if cat == "shoes" and not is_shoe_appropriate_for_formality(item, formality_level):
            continue
        if not is_item_appropriate_for_formality(item, formality_level):
            continue
        appropriate[cat].append(item)
    return appropriate


def get_occasion_guidance(occasion: str, formality_level: int) -> str:
    """Stylist guidance for the occasion; unknown occasions use "Casual Outing"."""
    occasion_lower = (occasion or "").lower()
    key = next((k for k in FASHION_RULES["occasions"] if k.lower() in occasion_lower), "Casual Outing")
    guidance = FASHION_RULES["occasions"][key]
    if get_formality_category(formality_level) in ("formal", "dressy"):
        return guidance["dressy"]
    return guidance["casual"]


def default_formality_for(occasion: str) -> int:
    return OCCASION_FORMALITY.get(occasion, 50)
