"""
Post-generation cleanup of model-proposed outfits.

The model is told the rules but does not always follow them, so each outfit
is rebuilt from the closet ids it proposed:
 - unknown ids are dropped
 - every outfit gets shoes
 - dress outfits are dress + shoes (+ outerwear when cold)
 - everything else is one top + one bottom + shoes (+ outerwear when cold)
 - weather-inappropriate pieces other than outerwear are removed
 - shoes that clash in style with another piece are swapped for a better pair
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

from .color_matcher import do_vibes_clash, find_color_clash
from .fashion_rules import OUTERWEAR_BELOW_F, categorize_item, is_weather_appropriate

logger = logging.getLogger(__name__)


def _first(items: List[Mapping[str, Any]]) -> Optional[Mapping[str, Any]]:
    return items[0] if items else None


def validate_outfit_ids(
    proposed_ids: List[str],
    closet_by_id: Dict[str, Mapping[str, Any]],
    appropriate: Dict[str, List[Mapping[str, Any]]],
    temperature: float,
) -> List[str]:
    """Return the corrected list of closet item ids for one outfit.

    Args:
        proposed_ids: ids the model returned
        closet_by_id: the user's active closet keyed by id
        appropriate: closet items bucketed by slot, already weather/formality filtered
        temperature: °F the outfit is for
    """
    valid = [i for i in (proposed_ids or []) if i in closet_by_id]
    selected: Dict[str, List[Mapping[str, Any]]] = {
        cat: [] for cat in ("top", "bottom", "dress", "shoes", "outerwear")
    }
    for item_id in valid:
        cat = categorize_item(closet_by_id[item_id])
        if cat in selected:
            selected[cat].append(closet_by_id[item_id])

    if not selected["shoes"] and appropriate.get("shoes"):
        selected["shoes"].append(appropriate["shoes"][0])

    wants_outerwear = temperature < OUTERWEAR_BELOW_F and selected["outerwear"]

    if selected["dress"]:
        picks = [selected["dress"][0], _first(selected["shoes"])]
    else:
        picks = [
            _first(selected["top"]) or _first(appropriate.get("top", [])),
            _first(selected["bottom"]) or _first(appropriate.get("bottom", [])),
            _first(selected["shoes"]),
        ]
    if wants_outerwear:
        picks.append(selected["outerwear"][0])

    final_ids: List[str] = []
    for item in picks:
        if item is None or item["id"] in final_ids:
            continue
        if categorize_item(item) != "outerwear" and not is_weather_appropriate(item, temperature):
            continue
        final_ids.append(item["id"])

    return _swap_clashing_shoes(final_ids, closet_by_id, appropriate)


def _swap_clashing_shoes(
    ids: List[str],
    closet_by_id: Dict[str, Mapping[str, Any]],
    appropriate: Dict[str, List[Mapping[str, Any]]],
) -> List[str]:
    items = [closet_by_id[i] for i in ids if i in closet_by_id]

    clash = find_color_clash(items)
    if clash and len(items) > 1:
        logger.info("Color clash detected: %s vs %s", *clash)

    shoe_index = next((n for n, item in enumerate(items) if categorize_item(item) == "shoes"), None)
    if shoe_index is None:
        return ids

    shoe = items[shoe_index]
    for n, other in enumerate(items):
        if n == shoe_index or not do_vibes_clash(shoe, other):
            continue
        logger.info("Style clash detected: %s vs %s", shoe.get("name"), other.get("name"))
        better = next((s for s in appropriate.get("shoes", []) if not do_vibes_clash(s, other)), None)
        if better is not None:
            return [better["id"] if i == shoe["id"] else i for i in ids]
    return ids


def enrich_outfit(
    outfit: Mapping[str, Any],
    closet_by_id: Dict[str, Mapping[str, Any]],
    formality_level: Optional[int] = None,
) -> Dict[str, Any]:
    """Generated outfit data with full closet item details attached."""
    ids = list(outfit.get("closet_item_ids") or [])
    return {
        "closet_items": [dict(closet_by_id[i]) for i in ids if i in closet_by_id],
        "closet_item_ids": ids,
        "new_items": outfit.get("new_items") or [],
        "weather_rationale": outfit.get("weather_rationale") or "",
        "style_rationale": outfit.get("style_rationale") or "",
        "styling_tips": outfit.get("styling_tips") or [],
        "formality_level": formality_level,
    }
