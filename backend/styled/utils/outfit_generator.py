"""
Outfit generation with Gemini.

Prompts carry the user's closet, style profile, weather and (for calendar
events) the derived occasion and destination. Whatever the model returns is
validated against the closet before it reaches the client.
"""
import logging
import time
from typing import Any, Dict, List, Mapping, Optional

from styled.core.exceptions import AIResponseError, ValidationError
from styled.reco.color_matcher import HARMONIES
from styled.reco.fashion_rules import (
    FASHION_RULES,
    OUTERWEAR_BELOW_F,
    OUTFIT_STRUCTURE,
    filter_appropriate_items,
    get_formality_category,
    get_formality_label,
    get_occasion_guidance,
    get_weather_category,
)
from styled.reco.outfit_validator import enrich_outfit, validate_outfit_ids
from styled.utils.gemini_client import generate_json

logger = logging.getLogger(__name__)

DEFAULT_TEMPERATURE_F = 72
MAX_PROMPT_ITEMS = 50

STYLIST_SYSTEM = "You are a professional fashion stylist. Always respond with valid JSON only, no markdown."


def _join(values: Optional[List[str]], default: str) -> str:
    return ", ".join(values) if values else default


def _names_match(a: str, b: str) -> bool:
    a, b = a.lower(), b.lower()
    return a in b or b in a


def _match_names_to_ids(names: List[str], closet_items: List[Mapping[str, Any]]) -> List[str]:
    """Closet ids whose names loosely match any of the model's item names"""
    names = [n for n in (names or []) if isinstance(n, str) and n.strip()]
    return [
        item["id"] for item in closet_items
        if any(_names_match(item.get("name") or "", n) for n in names)
    ]


def _weather_line(weather: Optional[Mapping[str, Any]]) -> str:
    if not weather:
        return f"{DEFAULT_TEMPERATURE_F}°F, Clear"
    return f"{weather.get('temperature', DEFAULT_TEMPERATURE_F)}°F, {weather.get('condition', 'Clear')}"


def generate_outfit(
    occasion: str,
    item_source: str,
    closet_items: List[Mapping[str, Any]],
    preferences: Mapping[str, Any],
    weather: Optional[Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    """
    One outfit in closet, mix or new mode.

    Returns:
        {label, outfit_data} ready to be saved to history

    Raises:
        ValidationError: closet mode with an empty closet
    """
    closet_items = list(closet_items)[:MAX_PROMPT_ITEMS]
    style = _join(preferences.get("style_vibe"), "casual, elevated basics")
    colors = _join(preferences.get("color_palette"), "neutral tones")
    budget = preferences.get("budget_level") or "$$"
    weather_line = _weather_line(weather)

    if item_source == "closet":
        if not closet_items:
            raise ValidationError("No items in closet. Please add some clothes first!")
        closet_text = "\n".join(
            f"- {i.get('name')} ({i.get('category')}, {i.get('color')}, vibes: {', '.join(i.get('vibe') or [])})"
            for i in closet_items
        )
        prompt = f"""Create an outfit for: {occasion}

User's Style: {style}
Favorite Colors: {colors}

Available Closet Items:
{closet_text}

Create a complete outfit using ONLY items from the closet above. Return ONLY valid JSON:
{{
  "label": "Creative outfit name",
  "items": ["item name 1", "item name 2", "item name 3"],
  "weather_rationale": "Why this works for the weather ({weather_line})",
  "style_rationale": "Why this matches the user's style and occasion"
}}"""

    elif item_source == "mix":
        closet_text = "\n".join(f"- {i.get('name')} ({i.get('category')}, {i.get('color')})" for i in closet_items)
        closet_block = f"Closet Items Available:\n{closet_text}" if closet_items else "User has an empty closet."
        mix_rule = ("MIXES items from their closet with NEW item suggestions" if closet_items
                    else "suggests ALL NEW items")
        prompt = f"""Create an outfit for: {occasion}

User's Style: {style}
Budget: {budget}

{closet_block}

Create an outfit that {mix_rule}. Return ONLY valid JSON:
{{
  "label": "Creative outfit name",
  "closet_items": ["closet item names to use"],
  "new_items": [
    {{"description": "White sneakers", "category": "shoes", "reasoning": "why this completes the look"}}
  ],
  "weather_rationale": "Why this works for {weather_line}",
  "style_rationale": "Why this matches the user's style"
}}"""

    else:
        prompt = f"""Create a complete outfit for: {occasion}

User's Style: {style}
Favorite Colors: {colors}
Budget: {budget}

Create a COMPLETE outfit with ALL NEW items to purchase. Return ONLY valid JSON:
{{
  "label": "Creative outfit name",
  "new_items": [
    {{"description": "Black wide-leg trousers", "category": "bottom", "reasoning": "elegant base piece"}},
    {{"description": "Silk blouse in cream", "category": "top", "reasoning": "sophisticated and timeless"}},
    {{"description": "Leather loafers", "category": "shoes", "reasoning": "comfortable and chic"}}
  ],
  "weather_rationale": "Why this works for {weather_line}",
  "style_rationale": "Why this matches the user's style and budget"
}}"""

    logger.info(f"Generating outfit - mode: {item_source}, occasion: {occasion}")
    data = generate_json(prompt, system=STYLIST_SYSTEM, temperature=0.8, max_output_tokens=600)

    if item_source == "closet":
        closet_ids = _match_names_to_ids(data.get("items") or [], closet_items)
        new_items = []
    elif item_source == "mix":
        closet_ids = _match_names_to_ids(data.get("closet_items") or [], closet_items)
        new_items = data.get("new_items") or []
    else:
        closet_ids = []
        new_items = data.get("new_items") or []

    return {
        "label": data.get("label") or occasion,
        "outfit_data": {
            "closet_item_ids": closet_ids,
            "new_items": new_items,
            "weather_rationale": data.get("weather_rationale") or "",
            "style_rationale": data.get("style_rationale") or "",
            "weather": dict(weather) if weather else None,
        },
    }


def _format_items(items: List[Mapping[str, Any]]) -> str:
    return "\n".join(f'ID:"{i["id"]}" → {i.get("name")}' for i in items) or "(none available)"


def build_multiple_outfits_prompt(
    occasion: str,
    item_source: str,
    formality_level: int,
    count: int,
    temperature: float,
    appropriate: Dict[str, List[Mapping[str, Any]]],
    preferences: Mapping[str, Any],
    event_context: Optional[Mapping[str, Any]] = None,
) -> str:
    weather_cat = get_weather_category(temperature)
    formality_cat = get_formality_category(formality_level)
    weather_rules = FASHION_RULES["weather"][weather_cat]
    formality_rules = FASHION_RULES["formality"][formality_cat]

    strict_rules = [
        "EVERY outfit MUST include SHOES",
        "DRESS outfit = dress + shoes only (NO tops, NO pants)",
        "TOP+BOTTOM outfit = 1 top + 1 bottom + 1 shoes",
        "Only use IDs from the lists above",
    ]
    if item_source == "closet":
        strict_rules.append("new_items must be []")
    if formality_cat == "casual":
        strict_rules.append("NO heels/stilettos - use sneakers, flats, loafers!")
    if temperature >= 70:
        strict_rules.append("NO long sleeves, NO sweaters, NO ribbed - too warm!")
    strict_rules.append(
        "COLOR COORDINATION: Don't pair purple with blue, red with pink, or orange with green. "
        "Neutrals (black, white, beige, gray) go with everything. Good pairings: "
        + ", ".join(f"{a} + {b}" for a, b in HARMONIES)
    )
    strict_rules.append(
        "STYLE COHESION: Don't mix streetwear (Yeezys, Jordans, athletic) with polished items "
        "(structured dresses, heels, blazers). Keep the aesthetic consistent!"
    )
    rules_text = "\n".join(f"{n}. {rule}" for n, rule in enumerate(strict_rules, start=1))

    event_block = ""
    if event_context:
        destination = event_context.get("destination")
        event_block = f"\n- Calendar event: {event_context.get('title') or occasion}"
        if destination:
            event_block += f"\n- Destination: {destination}"

    outerwear = (_format_items(appropriate.get("outerwear", [])) if temperature < OUTERWEAR_BELOW_F
                 else "(not needed for this weather)")

    return f"""You are a professional fashion stylist creating {count} outfits.

## CONTEXT
- Occasion: {occasion}
- Formality: {get_formality_label(formality_level)}, {formality_level}/100 ({formality_rules['description']})
- Weather: {temperature}°F ({weather_cat.upper()})
- Client Style: {_join(preferences.get('style_vibe'), 'Classic')}
- Colors to avoid: {_join(preferences.get('avoid_colors'), 'none')}{event_block}

## OCCASION GUIDANCE
For {occasion} at {formality_cat} level: {get_occasion_guidance(occasion, formality_level)}

## WEATHER RULES ({temperature}°F = {weather_cat.upper()})
{weather_rules['note']}
FORBIDDEN: {', '.join(weather_rules['forbidden'])}

## FORMALITY RULES
{OUTFIT_STRUCTURE[formality_cat]}
Good shoe types: {', '.join(formality_rules['shoe_types'])}
Avoid shoes: {', '.join(formality_rules['avoid_shoes'])}
Examples: {' | '.join(formality_rules['examples'])}

## AVAILABLE ITEMS (already filtered for weather + formality)

TOPS:
{_format_items(appropriate.get('top', []))}

BOTTOMS:
{_format_items(appropriate.get('bottom', []))}

DRESSES:
{_format_items(appropriate.get('dress', []))}

SHOES:
{_format_items(appropriate.get('shoes', []))}

OUTERWEAR (only if temp < {OUTERWEAR_BELOW_F}°F):
{outerwear}

## STRICT RULES
{rules_text}

## RESPONSE (JSON only)
{{
  "outfits": [
    {{
      "label": "Name",
      "closet_item_ids": ["id1", "id2", "id3"],
      "new_items": [],
      "weather_rationale": "Why these work for {temperature}°F",
      "style_rationale": "Why this fits {occasion}",
      "styling_tips": ["Tip 1", "Tip 2"]
    }}
  ]
}}

Create {count} DIFFERENT outfits. Every outfit MUST have shoes!"""


def generate_multiple_outfits(
    occasion: str,
    item_source: str,
    formality_level: int,
    count: int,
    closet_items: List[Mapping[str, Any]],
    preferences: Mapping[str, Any],
    temperature: Optional[float] = None,
    event_context: Optional[Mapping[str, Any]] = None,
) -> List[Dict[str, Any]]:
    """
    Several outfits for an occasion, validated against the closet.

    Returns:
        List of {id, label, outfit_data} dicts (not saved)
    """
    temperature = DEFAULT_TEMPERATURE_F if temperature is None else temperature
    closet = list(closet_items) if item_source in ("closet", "mix") else []
    closet_by_id = {item["id"]: item for item in closet}
    appropriate = filter_appropriate_items(closet, temperature, formality_level)

    prompt = build_multiple_outfits_prompt(
        occasion, item_source, formality_level, count, temperature, appropriate, preferences, event_context
    )
    formality_cat = get_formality_category(formality_level)
    if formality_cat == "casual":
        shoe_rule = "CASUAL = sneakers, flats, loafers. NO heels!"
    elif formality_cat == "formal":
        shoe_rule = "FORMAL = elegant dresses + heels"
    else:
        shoe_rule = "Match shoes to formality"
    system = f"""You are an expert fashion stylist. Critical rules:
1. ALWAYS include shoes
2. {shoe_rule}
3. Dress = complete outfit (no extra top/bottom)
4. Only use provided IDs"""

    data = generate_json(prompt, system=system, temperature=0.7)
    proposed = data.get("outfits")
    if not isinstance(proposed, list):
        raise AIResponseError("No outfits in AI response")

    stamp = int(time.time() * 1000)
    outfits = []
    for index, outfit in enumerate(proposed[:count]):
        if not isinstance(outfit, dict):
            continue
        if item_source == "closet":
            outfit["new_items"] = []
        outfit["closet_item_ids"] = validate_outfit_ids(
            outfit.get("closet_item_ids") or [], closet_by_id, appropriate, temperature
        )
        outfits.append({
            "id": f"outfit-{index}-{stamp}",
            "label": outfit.get("label") or f"Outfit {index + 1}",
            "outfit_data": enrich_outfit(outfit, closet_by_id, formality_level),
        })

    logger.info(f"Generated {len(outfits)} outfits for {occasion} (formality {formality_level}, {temperature}°F)")
    return outfits


def generate_voice_outfits(
    request_text: str,
    closet_items: List[Mapping[str, Any]],
    preferences: Mapping[str, Any],
    weather: Optional[Mapping[str, Any]] = None,
) -> List[Dict[str, Any]]:
    """Three outfit ideas from a free-text request ("something cute for brunch, warm out")"""
    if weather:
        weather_context = (f"Current weather: {weather.get('temperature')}°F, "
                           f"{weather.get('condition')} in {weather.get('city')}")
    else:
        weather_context = "Weather data not available"

    context_lines = [weather_context]
    if preferences.get("style_vibe"):
        context_lines.append(f"User's style preferences: {', '.join(preferences['style_vibe'])}")
    if preferences.get("color_palette"):
        context_lines.append(f"Preferred colors: {', '.join(preferences['color_palette'])}")
    if preferences.get("avoid_colors"):
        context_lines.append(f"Colors to avoid: {', '.join(preferences['avoid_colors'])}")
    if closet_items:
        summary = ", ".join(
            f"ID:\"{i['id']}\" {i.get('name')} ({i.get('category')}, {i.get('color')})" for i in closet_items[:10]
        )
        context_lines.append(f"User has {len(closet_items)} items in closet including: {summary}")
    else:
        context_lines.append("User has no items in closet yet")
    context = "\n".join(context_lines)

    system = f"""You are an expert AI fashion stylist. The user will describe what they need in natural language.
Your job is to understand their request and generate 3 outfit suggestions.

CONTEXT:
{context}

RESPONSE FORMAT (JSON):
{{
  "outfits": [
    {{
      "label": "Outfit name",
      "item_source": "closet" | "mix" | "new",
      "occasion": "Casual Day Out" | "Date Night" | "Business" | etc,
      "formality_level": 0-100,
      "closet_item_ids": ["id1", "id2"] or [],
      "new_items": [
        {{"description": "Item description", "category": "top/bottom/dress/shoes/bag", "color": "color", "reasoning": "why", "estimated_price": "$X"}}
      ],
      "weather_rationale": "Why this works for the weather",
      "style_rationale": "Why this fits their style and request",
      "styling_tips": ["Tip 1", "Tip 2"]
    }}
  ]
}}

RULES:
1. Parse their natural language request to determine occasion, formality level, and whether they want closet items, mix & match, or new items only
2. If they have closet items and didn't specify "new only", try to use them
3. Keep it cohesive and weather-appropriate
4. Match their described vibe/mood
5. Return exactly 3 outfit options"""

    data = generate_json(
        f'User said: "{request_text}"\n\nPlease generate 3 outfit suggestions based on this request.',
        system=system,
        temperature=0.8,
    )
    outfits = data.get("outfits")
    if not isinstance(outfits, list) or not outfits:
        raise AIResponseError("No outfits generated")

    known_ids = {item["id"] for item in closet_items}
    cleaned = []
    for outfit in outfits[:3]:
        if not isinstance(outfit, dict):
            continue
        outfit["closet_item_ids"] = [i for i in outfit.get("closet_item_ids") or [] if i in known_ids]
        cleaned.append(outfit)
    return cleaned
