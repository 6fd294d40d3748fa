from datetime import date

import pytest

from styled.core.exceptions import AIResponseError, ValidationError
from styled.models import Outfit
from styled.utils import outfit_generator
from styled.utils.outfit_generator import generate_multiple_outfits, generate_outfit


class FakeGemini:
    """Stands in for the model; tests set .reply and read .prompts."""

    def __init__(self):
        self.reply = {}
        self.prompts = []
        self.systems = []


@pytest.fixture
def fake_gemini(monkeypatch) -> FakeGemini:
    fake = FakeGemini()

    def generate_json(prompt, system=None, **kwargs):
        fake.prompts.append(prompt)
        fake.systems.append(system)
        return fake.reply

    monkeypatch.setattr(outfit_generator, "generate_json", generate_json)
    return fake


# Generation helpers
def test_generate_outfit_closet_mode_matches_names(fake_gemini) -> None:
    closet = [
        {"id": "1", "name": "White Tee", "category": "top", "color": "white"},
        {"id": "2", "name": "Black Jeans", "category": "bottom", "color": "black"},
        {"id": "3", "name": "Red Heels", "category": "shoes", "color": "red"},
    ]
    fake_gemini.reply = {"label": "Easy Saturday", "items": ["white tee", "Black Jeans (slim)"]}
    result = generate_outfit("Brunch", "closet", closet, {"style_vibe": ["minimal"]}, {"temperature": 65})

    assert result["label"] == "Easy Saturday"
    assert result["outfit_data"]["closet_item_ids"] == ["1", "2"]
    assert result["outfit_data"]["new_items"] == []
    assert result["outfit_data"]["weather"] == {"temperature": 65}
    assert "minimal" in fake_gemini.prompts[0]


def test_generate_outfit_closet_mode_needs_items(fake_gemini) -> None:
    with pytest.raises(ValidationError):
        generate_outfit("Brunch", "closet", [], {})
    assert fake_gemini.prompts == []


def test_generate_outfit_new_mode_ignores_closet(fake_gemini) -> None:
    fake_gemini.reply = {"new_items": [{"description": "Linen shirt", "category": "top"}]}
    result = generate_outfit("Beach Day", "new", [{"id": "1", "name": "Tee"}], {})
    assert result["label"] == "Beach Day"
    assert result["outfit_data"]["closet_item_ids"] == []
    assert result["outfit_data"]["new_items"][0]["description"] == "Linen shirt"


def test_generate_multiple_outfits_validates_ids(fake_gemini) -> None:
    closet = [
        {"id": "t", "name": "White Tee", "category": "top", "color": "white"},
        {"id": "b", "name": "Black Jeans", "category": "bottom", "color": "black"},
        {"id": "s", "name": "White Sneakers", "category": "shoes", "color": "white"},
    ]
    fake_gemini.reply = {"outfits": [
        {"label": "One", "closet_item_ids": ["t", "b", "ghost"], "new_items": [{"description": "hat"}]},
        {"label": "Two", "closet_item_ids": ["t", "b", "s"]},
        {"label": "Three", "closet_item_ids": []},
    ]}
    outfits = generate_multiple_outfits("Errands", "closet", 20, 2, closet, {}, temperature=72)

    assert len(outfits) == 2
    first = outfits[0]["outfit_data"]
    assert first["closet_item_ids"] == ["t", "b", "s"]
    assert first["new_items"] == []
    assert [i["name"] for i in first["closet_items"]] == ["White Tee", "Black Jeans", "White Sneakers"]
    assert first["formality_level"] == 20
    assert outfits[0]["id"].startswith("outfit-0-")


def test_generate_multiple_outfits_prompt_carries_event(fake_gemini) -> None:
    fake_gemini.reply = {"outfits": []}
    generate_multiple_outfits(
        "Business", "new", 65, 3, [], {}, temperature=45,
        event_context={"title": "Client Meeting in Denver, CO", "destination": "Denver"},
    )
    prompt = fake_gemini.prompts[0]
    assert "Calendar event: Client Meeting in Denver, CO" in prompt
    assert "Destination: Denver" in prompt
    assert "45°F (COLD)" in prompt
    assert "Formality: Dressy, 65/100" in prompt


def test_generate_multiple_outfits_bad_reply(fake_gemini) -> None:
    fake_gemini.reply = {"something": "else"}
    with pytest.raises(AIResponseError):
        generate_multiple_outfits("Brunch", "closet", 50, 3, [], {})


# Routes
def test_generate_route_saves_history(client, closet, fake_gemini) -> None:
    fake_gemini.reply = {"label": "Clean Lines", "items": ["White Cotton T-Shirt", "Blue Straight Jeans"]}
    response = client.post("/outfits/generate", json={"occasion": "Coffee run"})

    assert response.status_code == 201
    body = response.json()
    assert body["label"] == "Clean Lines"
    assert body["context_type"] == "manual_request"
    assert body["date"] == date.today().isoformat()
    assert set(body["outfit_data"]["closet_item_ids"]) == {closet["tee"].id, closet["jeans"].id}

    history = client.get("/outfits").json()
    assert [o["id"] for o in history] == [body["id"]]


def test_generate_route_empty_closet(client, fake_gemini) -> None:
    response = client.post("/outfits/generate", json={"occasion": "Coffee run", "item_source": "closet"})
    assert response.status_code == 400


def test_generate_multiple_route(client, closet, fake_gemini) -> None:
    fake_gemini.reply = {"outfits": [
        {"label": "A", "closet_item_ids": [closet["tee"].id, closet["jeans"].id, closet["sneakers"].id]},
    ]}
    response = client.post(
        "/outfits/generate-multiple",
        json={"occasion": "Brunch", "formality_level": 30, "count": 1, "weather": {"temperature": 78}},
    )
    assert response.status_code == 200
    outfits = response.json()["outfits"]
    assert len(outfits) == 1
    assert outfits[0]["label"] == "A"
    assert len(outfits[0]["outfit_data"]["closet_items"]) == 3


def test_generate_multiple_route_validates_count(client) -> None:
    response = client.post("/outfits/generate-multiple", json={"occasion": "Brunch", "count": 10})
    assert response.status_code == 422


def test_voice_route_filters_unknown_ids(client, closet, fake_gemini) -> None:
    fake_gemini.reply = {"outfits": [
        {"label": "Cozy", "item_source": "closet", "closet_item_ids": [closet["coat"].id, "nope"]},
        {"label": "Fresh", "item_source": "new", "new_items": [{"description": "Linen set"}]},
    ]}
    response = client.post("/outfits/generate-voice", json={"prompt": "something cozy for a rainy day"})
    assert response.status_code == 200
    outfits = response.json()["outfits"]
    assert outfits[0]["closet_item_ids"] == [closet["coat"].id]
    assert outfits[1]["new_items"][0]["description"] == "Linen set"
    assert 'User said: "something cozy for a rainy day"' in fake_gemini.prompts[0]


def test_voice_route_no_outfits(client, fake_gemini) -> None:
    fake_gemini.reply = {"outfits": []}
    response = client.post("/outfits/generate-voice", json={"prompt": "anything"})
    assert response.status_code == 502
    assert response.json()["error_code"] == "AI_RESPONSE_ERROR"


def test_for_event_route(client, closet, fake_gemini) -> None:
    fake_gemini.reply = {"outfits": [{"label": "Boardroom", "closet_item_ids": [closet["loafers"].id]}]}
    response = client.post(
        "/outfits/for-event",
        json={"event": {"id": "e1", "title": "Client Meeting in Denver, CO"}, "count": 1},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["context"] == {"occasion": "Business", "destination": "Denver"}
    assert body["weather"]["city"] == "Denver"
    assert body["weather_is_fallback"] is True
    assert body["outfits"][0]["outfit_data"]["formality_level"] == 65
    assert "Destination: Denver" in fake_gemini.prompts[0]


def test_for_event_route_uses_home_city_and_explicit_formality(client, closet, fake_gemini) -> None:
    fake_gemini.reply = {"outfits": [{"label": "Easy", "closet_item_ids": []}]}
    response = client.post(
        "/outfits/for-event",
        json={"event": {"title": "Lunch with Sam"}, "formality_level": 40, "count": 1},
    )
    body = response.json()
    assert body["context"]["destination"] is None
    assert body["weather"]["city"] == "Chicago"
    assert body["outfits"][0]["outfit_data"]["formality_level"] == 40


# History
def test_save_favorite_and_delete(client) -> None:
    saved = client.post(
        "/outfits",
        json={"label": "Date look", "context_type": "Event", "context_id": "evt-9",
              "outfit_data": {"closet_item_ids": ["x"]}},
    )
    assert saved.status_code == 201
    outfit_id = saved.json()["id"]
    assert saved.json()["is_favorite"] is False

    favorite = client.patch(f"/outfits/{outfit_id}/favorite", json={"is_favorite": True})
    assert favorite.json()["is_favorite"] is True
    assert len(client.get("/outfits", params={"favorites_only": True}).json()) == 1

    assert client.delete(f"/outfits/{outfit_id}").status_code == 200
    assert client.get("/outfits").json() == []
    assert client.delete(f"/outfits/{outfit_id}").status_code == 404


def test_history_is_scoped_and_filtered(client, db_session, user) -> None:
    db_session.add_all([
        Outfit(user_id=user.id, label="Mine", outfit_data={}),
        Outfit(user_id=user.id, label="Mine, loved", outfit_data={}, is_favorite=True),
        Outfit(user_id="someone-else", label="Theirs", outfit_data={}),
    ])
    db_session.commit()

    assert {o["label"] for o in client.get("/outfits").json()} == {"Mine", "Mine, loved"}
    assert [o["label"] for o in client.get("/outfits", params={"favorites_only": True}).json()] == ["Mine, loved"]
