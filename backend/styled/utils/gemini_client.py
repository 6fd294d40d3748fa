"""
Gemini REST client shared by outfit, packing and vision features.

All callers ask for JSON; responses are parsed leniently (pure JSON, a
```json fenced block, or the first balanced {...} in the text).
"""
import json
import logging
import re
from typing import Dict, List, Optional

import requests

from styled.config import settings
from styled.core.exceptions import AIResponseError, ExternalServiceError

logger = logging.getLogger(__name__)

GEMINI_URL = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"

# Gemini token limits (approximate): 1 token ≈ 4 characters of English text
MAX_INPUT_TOKENS = 100000
TOKEN_WARNING_THRESHOLD = 50000


def _estimate_tokens(text: str) -> int:
    return len(text) // 4


def extract_json_from_response(text: str) -> Optional[Dict]:
    """
    Extract and parse JSON from a model response.
    Handles various response formats: pure JSON, markdown code blocks, or mixed text.

    Returns:
        Parsed JSON dict or None if parsing fails
    """
    # Try direct JSON parse first (for structured output)
    try:
        parsed = json.loads(text)
        if isinstance(parsed, dict):
            return parsed
    except json.JSONDecodeError:
        pass

    json_match = re.search(r'```(?:json)?\s*(\{.*?\})\s*```', text, re.DOTALL)
    if json_match:
        try:
            return json.loads(json_match.group(1))
        except json.JSONDecodeError as e:
            logger.warning(f"Failed to parse JSON from code block: {e}")

    # Find matching closing brace for nested structures
    start_idx = text.find('{')
    if start_idx != -1:
        brace_count = 0
        for i in range(start_idx, len(text)):
            if text[i] == '{':
                brace_count += 1
            elif text[i] == '}':
                brace_count -= 1
                if brace_count == 0:
                    try:
                        return json.loads(text[start_idx:i + 1])
                    except json.JSONDecodeError as e:
                        logger.warning(f"Failed to parse JSON from brace-matched text: {e}")
                        break

    logger.error(f"Failed to extract valid JSON from Gemini response. Response text: {text[:500]}")
    return None


def generate_json(
    prompt: str,
    system: Optional[str] = None,
    temperature: float = 0.7,
    max_output_tokens: int = 2048,
    image_parts: Optional[List[Dict]] = None,
    model: Optional[str] = None,
) -> Dict:
    """
    Send a prompt to Gemini and return the parsed JSON object it answers with.

    Args:
        prompt: User prompt text
        system: Optional system instruction
        temperature: Sampling temperature
        max_output_tokens: Output cap
        image_parts: Extra content parts, e.g. {"inline_data": {...}} for vision
        model: Model name, defaults to GEMINI_MODEL

    Raises:
        ExternalServiceError: Gemini not configured, unreachable, or returned an error
        AIResponseError: Gemini answered but not with a JSON object
    """
    if not settings.gemini_configured:
        raise ExternalServiceError("Gemini", "GEMINI_API_KEY not set")

    estimated_tokens = _estimate_tokens(prompt)
    if estimated_tokens > MAX_INPUT_TOKENS:
        raise ExternalServiceError("Gemini", f"Prompt exceeds token limit ({estimated_tokens} > {MAX_INPUT_TOKENS})")
    if estimated_tokens > TOKEN_WARNING_THRESHOLD:
        logger.warning(f"Prompt is large (~{estimated_tokens} tokens)")

    model = model or settings.GEMINI_MODEL
    body = {
        "contents": [{
            "parts": [{"text": prompt}] + list(image_parts or [])
        }],
        "generationConfig": {
            "temperature": temperature,
            "maxOutputTokens": max_output_tokens,
            "responseMimeType": "application/json",  # Enforce JSON output
        },
    }
    if system:
        body["systemInstruction"] = {"parts": [{"text": system}]}

    logger.info(f"Sending prompt to Gemini ({model}): ~{estimated_tokens} tokens")
    try:
        response = requests.post(
            GEMINI_URL.format(model=model),
            params={"key": settings.GEMINI_API_KEY},
            json=body,
            timeout=settings.GEMINI_TIMEOUT,
        )
    except requests.RequestException as e:
        logger.error(f"Gemini request failed: {e}")
        raise ExternalServiceError("Gemini", "request failed") from e

    if response.status_code != 200:
        logger.error(f"Gemini API error: {response.status_code} {response.text[:500]}")
        raise ExternalServiceError("Gemini", f"HTTP {response.status_code}")

    result = response.json()
    candidates = result.get("candidates") or []
    if not candidates:
        logger.error(f"No candidates in Gemini response: {json.dumps(result)[:500]}")
        raise AIResponseError("No response from AI")

    parts = (candidates[0].get("content") or {}).get("parts") or []
    if not parts or not parts[0].get("text"):
        logger.error(f"No parts in Gemini response content: {json.dumps(result)[:500]}")
        raise AIResponseError("No response from AI")

    parsed = extract_json_from_response(parts[0]["text"].strip())
    if parsed is None:
        raise AIResponseError("Failed to parse AI response")
    return parsed
