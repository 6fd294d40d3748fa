from styled.models import InspoImage
from styled.routers import inspo as inspo_router


# Profile
def test_get_profile(client, user) -> None:
    response = client.get("/profile/me")
    assert response.status_code == 200
    body = response.json()
    assert body["id"] == user.id
    assert body["style_vibe"] == ["casual", "elevated basics"]
    assert body["plan_ahead_days"] == 2
    assert body["use_calendar_styling"] is True


def test_partial_profile_update(client) -> None:
    response = client.patch("/profile/me", json={"home_city": "Austin", "avoid_colors": ["neon green"]})
    assert response.status_code == 200
    body = response.json()
    assert body["home_city"] == "Austin"
    assert body["avoid_colors"] == ["neon green"]
    assert body["color_palette"] == ["navy", "cream"]


def test_profile_update_validation(client) -> None:
    assert client.patch("/profile/me", json={"budget_level": "$$$$$"}).status_code == 422
    assert client.patch("/profile/me", json={"plan_ahead_days": 30}).status_code == 422


# Inspiration images
def test_add_and_list_inspo(client) -> None:
    response = client.post("/inspo", json={"image_url": "https://pins.example.com/1.jpg"})
    assert response.status_code == 201
    image_id = response.json()["id"]

    listed = client.get("/inspo").json()
    assert [i["id"] for i in listed] == [image_id]
    assert listed[0]["image_url"] == "https://pins.example.com/1.jpg"


def test_inspo_uploads_to_inspo_folder(client, monkeypatch) -> None:
    seen = {}

    def fake_upload(data, folder=None, tags=None):
        seen.update(folder=folder, tags=tags)
        return {"url": "https://res.cloudinary.com/demo/inspo.jpg", "public_id": "styled_inspo/abc", "uploaded": True}

    monkeypatch.setattr(inspo_router, "upload_image", fake_upload)
    response = client.post("/inspo", json={"image_url": "data:image/jpeg;base64,aGk="})
    assert response.json()["image_url"] == "https://res.cloudinary.com/demo/inspo.jpg"
    assert seen == {"folder": "styled_inspo", "tags": ["inspo"]}


def test_replace_inspo_image(client, db_session, user, monkeypatch) -> None:
    image = InspoImage(user_id=user.id, image_url="https://res.cloudinary.com/demo/old.jpg", cloudinary_id="old")
    db_session.add(image)
    db_session.commit()

    deleted = []
    monkeypatch.setattr(inspo_router, "delete_image", lambda public_id: deleted.append(public_id) or True)
    response = client.put(f"/inspo/{image.id}", json={"image_url": "https://pins.example.com/new.jpg"})

    assert response.status_code == 200
    assert response.json()["image_url"] == "https://pins.example.com/new.jpg"
    assert deleted == ["old"]


def test_delete_and_bulk_delete(client, db_session, user) -> None:
    mine = [InspoImage(user_id=user.id, image_url=f"https://pins.example.com/{n}.jpg") for n in range(3)]
    theirs = InspoImage(user_id="someone-else", image_url="https://pins.example.com/x.jpg")
    db_session.add_all(mine + [theirs])
    db_session.commit()

    assert client.delete(f"/inspo/{mine[0].id}").status_code == 200
    assert client.delete(f"/inspo/{theirs.id}").status_code == 404

    response = client.post("/inspo/bulk-delete", json={"ids": [mine[1].id, mine[2].id, theirs.id]})
    assert response.json() == {"success": True, "deleted": 2}
    assert client.get("/inspo").json() == []
    assert db_session.get(InspoImage, theirs.id) is not None


def test_bulk_delete_needs_ids(client) -> None:
    assert client.post("/inspo/bulk-delete", json={"ids": []}).status_code == 422
