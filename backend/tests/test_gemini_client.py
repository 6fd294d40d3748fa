import pytest
import requests

from styled.config import settings
from styled.core.exceptions import AIResponseError, ExternalServiceError
from styled.utils import gemini_client
from styled.utils.gemini_client import extract_json_from_response, generate_json


def _gemini_payload(text: str) -> dict:
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


def test_extract_json_variants() -> None:
    assert extract_json_from_response('{"a": 1}') == {"a": 1}
    assert extract_json_from_response('Here you go:\n```json\n{"a": {"b": 2}}\n```') == {"a": {"b": 2}}
    assert extract_json_from_response('Sure! {"outfits": [{"x": 1}]} hope it helps') == {"outfits": [{"x": 1}]}
    assert extract_json_from_response("no json here") is None


def test_generate_json_requires_api_key(monkeypatch) -> None:
    monkeypatch.setattr(settings, "GEMINI_API_KEY", "")
    with pytest.raises(ExternalServiceError):
        generate_json("hello")


def test_generate_json_posts_prompt_and_parses(monkeypatch, fake_response) -> None:
    monkeypatch.setattr(settings, "GEMINI_API_KEY", "test-key")
    seen = {}

    def fake_post(url, params=None, json=None, timeout=None):
        seen.update(url=url, params=params, body=json)
        return fake_response(200, _gemini_payload('{"label": "Look"}'))

    monkeypatch.setattr(gemini_client.requests, "post", fake_post)
    result = generate_json("Make an outfit", system="Be a stylist", temperature=0.3)

    assert result == {"label": "Look"}
    assert seen["url"].endswith(f"{settings.GEMINI_MODEL}:generateContent")
    assert seen["params"] == {"key": "test-key"}
    assert seen["body"]["contents"][0]["parts"][0]["text"] == "Make an outfit"
    assert seen["body"]["systemInstruction"]["parts"][0]["text"] == "Be a stylist"
    assert seen["body"]["generationConfig"]["responseMimeType"] == "application/json"
    assert seen["body"]["generationConfig"]["temperature"] == 0.3


def test_generate_json_appends_image_parts(monkeypatch, fake_response) -> None:
    monkeypatch.setattr(settings, "GEMINI_API_KEY", "test-key")
    seen = {}

    def fake_post(url, params=None, json=None, timeout=None):
        seen["parts"] = json["contents"][0]["parts"]
        return fake_response(200, _gemini_payload("{}"))

    monkeypatch.setattr(gemini_client.requests, "post", fake_post)
    image = {"inline_data": {"mime_type": "image/png", "data": "aGk="}}
    generate_json("Classify", image_parts=[image], model="vision-model")
    assert seen["parts"][1] == image


def test_generate_json_http_error(monkeypatch, fake_response) -> None:
    monkeypatch.setattr(settings, "GEMINI_API_KEY", "test-key")
    monkeypatch.setattr(gemini_client.requests, "post", lambda *a, **k: fake_response(500, text="boom"))
    with pytest.raises(ExternalServiceError) as exc:
        generate_json("hello")
    assert exc.value.status_code == 502


def test_generate_json_network_error(monkeypatch) -> None:
    monkeypatch.setattr(settings, "GEMINI_API_KEY", "test-key")

    def fake_post(*args, **kwargs):
        raise requests.ConnectionError("down")

    monkeypatch.setattr(gemini_client.requests, "post", fake_post)
    with pytest.raises(ExternalServiceError):
        generate_json("hello")


@pytest.mark.parametrize(
    "payload",
    [{"candidates": []}, {"candidates": [{"content": {"parts": []}}]}, _gemini_payload("not json at all")],
)
def test_generate_json_unusable_answers(monkeypatch, fake_response, payload) -> None:
    monkeypatch.setattr(settings, "GEMINI_API_KEY", "test-key")
    monkeypatch.setattr(gemini_client.requests, "post", lambda *a, **k: fake_response(200, payload))
    with pytest.raises(AIResponseError):
        generate_json("hello")


def test_generate_json_rejects_oversized_prompt(monkeypatch) -> None:
    monkeypatch.setattr(settings, "GEMINI_API_KEY", "test-key")
    prompt = "x" * (gemini_client.MAX_INPUT_TOKENS * 4 + 8)
    with pytest.raises(ExternalServiceError):
        generate_json(prompt)
