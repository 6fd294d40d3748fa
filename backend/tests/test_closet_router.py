from styled.models import ClosetItem
from styled.routers import closet as closet_router
from styled.schemas import ClothingClassification
from styled.utils import cloudinary_helper


def test_create_and_get_item(client) -> None:
    response = client.post(
        "/closet",
        json={"name": "Navy Blazer", "category": "Outerwear", "color": "navy", "vibe": ["polished"],
              "image_url": "https://img.example.com/blazer.jpg"},
    )
    assert response.status_code == 201
    item = response.json()
    assert item["category"] == "outerwear"
    assert item["image_url"] == "https://img.example.com/blazer.jpg"
    assert item["is_archived"] is False

    fetched = client.get(f"/closet/{item['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["name"] == "Navy Blazer"


def test_invalid_category_is_rejected(client) -> None:
    response = client.post("/closet", json={"name": "Thing", "category": "spaceship"})
    assert response.status_code == 422


def test_list_filters(client, closet, db_session) -> None:
    closet["coat"].is_archived = True
    db_session.commit()

    response = client.get("/closet")
    assert response.status_code == 200
    assert response.headers["X-Total-Count"] == "5"
    assert "Camel Wool Coat" not in [i["name"] for i in response.json()]

    with_archived = client.get("/closet", params={"include_archived": True})
    assert len(with_archived.json()) == 6

    shoes = client.get("/closet", params={"category": "SHOES"})
    assert {i["name"] for i in shoes.json()} == {"White Leather Sneakers", "Tan Suede Loafers"}


def test_items_are_scoped_to_user(client, db_session) -> None:
    other = ClosetItem(user_id="someone-else", name="Secret Skirt", category="bottom")
    db_session.add(other)
    db_session.commit()

    assert client.get("/closet").json() == []
    response = client.get(f"/closet/{other.id}")
    assert response.status_code == 404
    assert response.json()["error_code"] == "NOT_FOUND"


def test_update_item(client, closet) -> None:
    item_id = closet["tee"].id
    response = client.patch(f"/closet/{item_id}", json={"color": "ivory", "is_archived": True})
    assert response.status_code == 200
    body = response.json()
    assert body["color"] == "ivory"
    assert body["is_archived"] is True
    assert body["name"] == "White Cotton T-Shirt"


def test_update_image_replaces_cloudinary_asset(client, closet, db_session, monkeypatch) -> None:
    item = closet["jeans"]
    item.image_url = "https://res.cloudinary.com/demo/old.jpg"
    item.cloudinary_id = "styled_closet/old"
    db_session.commit()

    deleted = []
    monkeypatch.setattr(closet_router, "upload_image", lambda data, **kw: {
        "url": "https://res.cloudinary.com/demo/new.jpg", "public_id": "styled_closet/new", "uploaded": True,
    })
    monkeypatch.setattr(closet_router, "delete_image", lambda public_id: deleted.append(public_id) or True)

    response = client.patch(f"/closet/{item.id}", json={"image_url": "data:image/png;base64,aGVsbG8="})
    assert response.status_code == 200
    assert response.json()["image_url"] == "https://res.cloudinary.com/demo/new.jpg"
    assert deleted == ["styled_closet/old"]


def test_delete_item(client, closet) -> None:
    item_id = closet["dress"].id
    response = client.delete(f"/closet/{item_id}")
    assert response.status_code == 200
    assert response.json() == {"success": True, "deleted": 1}
    assert client.get(f"/closet/{item_id}").status_code == 404


def test_data_url_kept_inline_when_cloudinary_disabled(client) -> None:
    data_url = "data:image/png;base64,aGVsbG8="
    response = client.post("/closet", json={"name": "Scarf", "category": "accessory", "image_url": data_url})
    assert response.status_code == 201
    assert response.json()["image_url"] == data_url


def test_cloudinary_status(client) -> None:
    response = client.get("/closet/cloudinary-status")
    assert response.status_code == 200
    assert response.json()["configured"] is False
    assert cloudinary_helper.get_cloudinary_status()["folder"] == response.json()["folder"]


def test_classify_updates_item(client, closet, monkeypatch) -> None:
    seen = {}

    def fake_classify(image_url):
        seen["image_url"] = image_url
        return ClothingClassification(
            name="Light Wash Denim Jeans", category="bottom", color="light blue",
            season=["spring", "fall"], vibe=["casual"], fit="straight",
        )

    monkeypatch.setattr(closet_router, "classify_clothing_image", fake_classify)
    item_id = closet["jeans"].id
    response = client.post("/closet/classify", json={"item_id": item_id, "image_url": "https://img/jeans.jpg"})

    assert response.status_code == 200
    body = response.json()
    assert body["classification"]["fit"] == "straight"
    assert body["item"]["name"] == "Light Wash Denim Jeans"
    assert body["item"]["season"] == ["spring", "fall"]
    assert seen["image_url"] == "https://img/jeans.jpg"


def test_classify_without_image(client, closet) -> None:
    response = client.post("/closet/classify", json={"item_id": closet["tee"].id})
    assert response.status_code == 400
    assert response.json()["details"] == {"field": "image_url"}


def test_classify_without_gemini_key(client, closet) -> None:
    response = client.post(
        "/closet/classify",
        json={"item_id": closet["tee"].id, "image_url": "data:image/png;base64,aGVsbG8="},
    )
    assert response.status_code == 502
    assert response.json()["error_code"] == "EXTERNAL_SERVICE_ERROR"
