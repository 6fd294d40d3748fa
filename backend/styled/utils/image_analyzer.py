"""
Clothing photo classification using the Gemini vision model
"""
import base64
import logging
import re
from typing import Dict, Optional, Tuple

import requests
from pydantic import ValidationError as PydanticValidationError

from styled.config import settings
from styled.core.exceptions import AIResponseError, ExternalServiceError, ValidationError
from styled.schemas.closet import ClothingClassification
from styled.utils.gemini_client import generate_json

logger = logging.getLogger(__name__)

CLASSIFY_PROMPT = """Analyze this clothing item and return ONLY a valid JSON object with this exact structure (no markdown, no extra text):
{
  "name": "brief description (e.g., 'White Cotton T-Shirt')",
  "category": "one of: top, bottom, dress, outerwear, shoes, bag, accessory",
  "color": "primary color",
  "season": ["array of: spring, summer, fall, winter"],
  "vibe": ["array of style vibes like: casual, elevated basics, professional, edgy, resort, etc"],
  "fit": "fit description (e.g., oversized, fitted, relaxed, cropped)"
}"""

DATA_URL_PATTERN = re.compile(r'data:(image/[^;]+);base64,(.+)', re.DOTALL)


def extract_base64_from_data_url(data_url: str) -> Optional[Tuple[str, str]]:
    """Return (mime_type, base64 payload) for a data URL, else None"""
    match = DATA_URL_PATTERN.match(data_url)
    if match:
        return match.group(1), match.group(2)
    return None


def _inline_image(image_url: str) -> Dict:
    """Build a Gemini inline_data part from a data URL or a remote image URL"""
    extracted = extract_base64_from_data_url(image_url)
    if extracted:
        mime_type, data = extracted
    elif image_url.startswith(("http://", "https://")):
        try:
            response = requests.get(image_url, timeout=settings.GEMINI_TIMEOUT)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error(f"Failed to download image {image_url}: {e}")
            raise ExternalServiceError("Image download", "could not fetch image") from e
        mime_type = response.headers.get("Content-Type", "image/jpeg").split(";")[0]
        data = base64.b64encode(response.content).decode("ascii")
    else:
        raise ValidationError("image_url must be an http(s) URL or a base64 data URL", field="image_url")

    return {"inline_data": {"mime_type": mime_type, "data": data}}


def classify_clothing_image(image_url: str) -> ClothingClassification:
    """
    Classify a clothing photo into name, category, color, seasons, vibes and fit.

    Raises:
        ExternalServiceError: Gemini unavailable or the image could not be fetched
        AIResponseError: Gemini's answer did not match the expected structure
    """
    raw = generate_json(
        CLASSIFY_PROMPT,
        temperature=0.2,
        max_output_tokens=300,
        image_parts=[_inline_image(image_url)],
        model=settings.GEMINI_VISION_MODEL,
    )
    try:
        classification = ClothingClassification(**raw)
    except PydanticValidationError as e:
        logger.error(f"Unexpected classification shape: {raw} ({e})")
        raise AIResponseError("Classification response did not match the expected format") from e

    logger.info(f"Classified item as {classification.category}: {classification.name}")
    return classification
