from __future__ import annotations

from typing import Any, List, Mapping, Optional, Tuple

from .fashion_rules import categorize_item

# Neutrals go with everything
NEUTRALS = ["black", "white", "gray", "grey", "beige", "cream", "tan", "brown", "navy", "nude", "camel"]

CLASHING_COLORS: List[Tuple[str, str]] = [
    ("purple", "blue"),
    ("red", "pink"),
    ("red", "orange"),
    ("green", "blue"),
    ("orange", "pink"),
]

HARMONIES: List[Tuple[str, str]] = [
    ("blue", "white"),
    ("black", "white"),
    ("beige", "white"),
    ("navy", "white"),
    ("black", "red"),
    ("cream", "brown"),
    ("pink", "white"),
    ("blue", "beige"),
]

CLASHING_VIBES: List[Tuple[str, str]] = [
    ("streetwear", "polished"),
    ("streetwear", "bohemian"),
    ("edgy", "bohemian"),
]

VIBE_KEYWORDS = {
    "streetwear": ["yeezy", "jordan", "nike", "adidas", "sneaker", "hoodie", "sweatpant", "jogger", "athletic",
                   "sports", "high-top", "boost"],
    "polished": ["button-up", "button up", "structured", "tailored", "blazer", "blouse", "heel", "pump",
                 "midi dress", "mini dress", "slingback", "elegant"],
    "bohemian": ["crochet", "linen", "flowy", "maxi", "boho", "peasant", "fringe", "embroidered"],
    "edgy": ["leather", "combat", "moto", "studded", "chain", "black"],
    "casual": ["t-shirt", "tee", "basic", "jeans", "denim", "casual", "cotton", "simple"],
}

HIGH_TOP_KEYWORDS = ["high-top", "high top", "jordan", "dunk", "air force"]
SNEAKER_KEYWORDS = ["sneaker", "yeezy", "jordan", "nike", "adidas", "athletic"]
DRESSY_DRESS_KEYWORDS = ["maxi", "fitted", "bodycon", "floral", "elegant", "midi"]


def _pair_matches(a: str, b: str, pair: Tuple[str, str]) -> bool:
    x, y = pair
    return (x in a and y in b) or (y in a and x in b)


def do_colors_clash(color1: Optional[str], color2: Optional[str]) -> bool:
    c1 = (color1 or "").lower()
    c2 = (color2 or "").lower()
    if any(n in c1 for n in NEUTRALS) or any(n in c2 for n in NEUTRALS):
        return False
    return any(_pair_matches(c1, c2, pair) for pair in CLASHING_COLORS)


def get_item_vibe(item: Mapping[str, Any]) -> List[str]:
    """Style vibes inferred from the item name; ["neutral"] when none match."""
    name = (item.get("name") or "").lower()
    vibes = [vibe for vibe, keywords in VIBE_KEYWORDS.items() if any(k in name for k in keywords)]
    return vibes or ["neutral"]


def do_vibes_clash(item1: Mapping[str, Any], item2: Mapping[str, Any]) -> bool:
    name1 = (item1.get("name") or "").lower()
    name2 = (item2.get("name") or "").lower()
    cat1 = categorize_item(item1)
    cat2 = categorize_item(item2)

    # High-tops never go with dresses
    if (cat1 == "dress" and any(k in name2 for k in HIGH_TOP_KEYWORDS)) or \
            (cat2 == "dress" and any(k in name1 for k in HIGH_TOP_KEYWORDS)):
        return True

    def dressy_dress(name: str, cat: str) -> bool:
        return cat == "dress" and any(k in name for k in DRESSY_DRESS_KEYWORDS)

    def sneaker(name: str) -> bool:
        return any(k in name for k in SNEAKER_KEYWORDS)

    if (dressy_dress(name1, cat1) and sneaker(name2)) or (dressy_dress(name2, cat2) and sneaker(name1)):
        return True

    vibes1 = get_item_vibe(item1)
    vibes2 = get_item_vibe(item2)
    if "neutral" in vibes1 or "neutral" in vibes2:
        return False

    for v1, v2 in CLASHING_VIBES:
        if (v1 in vibes1 and v2 in vibes2) or (v2 in vibes1 and v1 in vibes2):
            return True
    return False


def find_color_clash(items: List[Mapping[str, Any]]) -> Optional[Tuple[str, str]]:
    """Names of the first pair of items whose colors clash, or None."""
    for i in range(len(items)):
        for j in range(i + 1, len(items)):
            if do_colors_clash(items[i].get("color"), items[j].get("color")):
                return items[i].get("name"), items[j].get("name")
    return None
