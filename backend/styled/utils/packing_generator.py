"""
Trip packing lists with one suggested outfit per day
"""
import json
import logging
from datetime import date, timedelta
from typing import Any, Dict, List, Mapping, Optional

from styled.core.exceptions import AIResponseError
from styled.utils.gemini_client import generate_json

logger = logging.getLogger(__name__)

MAX_CLOSET_ITEMS = 30

PACKING_SYSTEM = ("You are a helpful travel packing assistant and fashion stylist. Always respond with valid JSON "
                  "only. Be specific with item names and include weather-appropriate clothing.")


def trip_dates(start: Optional[date], days: int) -> List[str]:
    """ISO dates for each day of the trip, starting today when no start date is given"""
    start = start or date.today()
    return [(start + timedelta(days=offset)).isoformat() for offset in range(days)]


def generate_packing_list(
    destination: str,
    trip_type: str,
    days: int,
    closet_items: List[Mapping[str, Any]],
    preferences: Mapping[str, Any],
    country: Optional[str] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    weather: Optional[Mapping[str, Any]] = None,
    is_international: bool = False,
) -> Dict[str, List]:
    """
    Returns:
        {"items": [...], "outfits": [...]} with closet items flagged is_from_closet
    """
    dates = trip_dates(start_date, days)
    closet_context = [
        {
            "id": item["id"],
            "name": item.get("name"),
            "category": item.get("category"),
            "color": item.get("color"),
            "season": item.get("season") or [],
            "vibe": item.get("vibe") or [],
            "image_url": item.get("image_url"),
        }
        for item in closet_items[:MAX_CLOSET_ITEMS]
    ]
    if weather:
        weather_desc = f"{weather.get('temp')}°F, {weather.get('condition')} ({weather.get('description')})"
    else:
        weather_desc = "moderate weather"

    closet_block = (json.dumps(closet_context, indent=2) if closet_context
                    else "User has limited items in closet - suggest items they should pack/buy")
    end_label = end_date.isoformat() if end_date else dates[-1]

    prompt = f"""You are a professional travel packing expert and fashion stylist. Create a comprehensive packing list AND daily outfit suggestions for this trip:

TRIP DETAILS:
- Destination: {destination}, {country or 'USA'}
- Duration: {days} days ({dates[0]} to {end_label})
- Trip Type: {trip_type}
- Weather: {weather_desc}
- International Travel: {'Yes' if is_international else 'No'}

USER'S CLOSET ITEMS (reference these when suggesting from closet):
{closet_block}

USER STYLE PREFERENCES:
- Style: {', '.join(preferences.get('style_vibe') or []) or 'Not specified'}
- Favorite Colors: {', '.join(preferences.get('color_palette') or []) or 'Not specified'}

IMPORTANT INSTRUCTIONS:
1. Generate CLOTHING items appropriate for the weather and trip type
2. Include items the user should bring EVEN IF NOT in their closet (like snow boots for a cold destination, rain jacket for rainy weather, etc.)
3. For items from the user's closet, set is_from_closet: true and include their closet_item_id and image_url
4. For suggested new items, set is_from_closet: false
5. Include underwear, socks, pajamas, and basics
6. Generate a daily outfit suggestion for each day of the trip
7. Be specific about quantities based on trip length

Respond with a JSON object in this exact format:
{{
  "items": [
    {{
      "name": "Item name (be specific, e.g., 'Warm Winter Coat' not just 'Coat')",
      "category": "clothing|shoes|accessories",
      "quantity": 1,
      "is_from_closet": true,
      "closet_item_id": "id if from closet or null",
      "image_url": "url if from closet or null"
    }}
  ],
  "outfits": [
    {{
      "day": 1,
      "date": "{dates[0]}",
      "outfit": {{
        "items": ["Item 1", "Item 2", "Item 3"],
        "description": "Brief description of the outfit and why it works for this day"
      }}
    }}
  ]
}}

Generate:
- 15-30 clothing/shoe/accessory items depending on trip length
- One outfit per day ({days} outfits total)
- Weather-appropriate suggestions (e.g., snow boots, rain jacket, sun hat)
- Trip-type appropriate items (e.g., business attire for business trip, swimsuit for beach)"""

    data = generate_json(prompt, system=PACKING_SYSTEM, temperature=0.7, max_output_tokens=4096)
    items = data.get("items")
    outfits = data.get("outfits")
    if not isinstance(items, list) or not isinstance(outfits, list):
        raise AIResponseError("Failed to generate packing list")

    closet_by_id = {item["id"]: item for item in closet_items}
    cleaned_items = []
    for item in items:
        if not isinstance(item, dict) or not item.get("name"):
            continue
        closet_id = item.get("closet_item_id")
        from_closet = bool(item.get("is_from_closet")) and closet_id in closet_by_id
        cleaned_items.append({
            "name": item["name"],
            "category": item.get("category") or "clothing",
            "quantity": item.get("quantity") or 1,
            "is_from_closet": from_closet,
            "closet_item_id": closet_id if from_closet else None,
            "image_url": closet_by_id[closet_id].get("image_url") if from_closet else None,
        })

    # One outfit per day, dated from the trip start
    cleaned_outfits = []
    for index, outfit in enumerate(o for o in outfits if isinstance(o, dict)):
        if index >= days:
            break
        detail = outfit.get("outfit") or {}
        cleaned_outfits.append({
            "day": index + 1,
            "date": dates[index],
            "outfit": {
                "items": [str(i) for i in detail.get("items") or []],
                "description": detail.get("description") or "",
            },
        })

    logger.info(f"Packing list for {destination}: {len(cleaned_items)} items, {len(cleaned_outfits)} outfits")
    return {"items": cleaned_items, "outfits": cleaned_outfits}
