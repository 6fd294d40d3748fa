import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request, Response
from sqlalchemy.orm import Session

from styled.core.auth import get_current_user
from styled.core.exceptions import NotFoundError, ValidationError
from styled.core.rate_limit import AI_RATE_LIMIT, limiter
from styled.database import get_db
from styled.models import ClosetItem, User
from styled.schemas import (
    ClassifyRequest,
    ClassifyResponse,
    ClosetItemCreate,
    ClosetItemResponse,
    ClosetItemUpdate,
    DeleteResponse,
)
from styled.utils.cloudinary_helper import delete_image, get_cloudinary_status, upload_image
from styled.utils.image_analyzer import classify_clothing_image

logger = logging.getLogger(__name__)

router = APIRouter()


def get_user_item(db: Session, user: User, item_id: str) -> ClosetItem:
    item = db.query(ClosetItem).filter(ClosetItem.id == item_id, ClosetItem.user_id == user.id).first()
    if not item:
        raise NotFoundError("Closet item", item_id)
    return item


def active_closet(db: Session, user: User) -> List[ClosetItem]:
    """Non-archived items, oldest first"""
    return (
        db.query(ClosetItem)
        .filter(ClosetItem.user_id == user.id, ClosetItem.is_archived.is_(False))
        .order_by(ClosetItem.created_at)
        .all()
    )


@router.get("", response_model=List[ClosetItemResponse])
async def list_closet_items(
    response: Response,
    category: Optional[str] = Query(None, description="Only items in this category"),
    include_archived: bool = Query(False, description="Include archived items"),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """List the current user's closet, newest first."""
    query = db.query(ClosetItem).filter(ClosetItem.user_id == user.id)
    if not include_archived:
        query = query.filter(ClosetItem.is_archived.is_(False))
    if category:
        query = query.filter(ClosetItem.category == category.lower())

    items = query.order_by(ClosetItem.created_at.desc()).all()
    response.headers["X-Total-Count"] = str(len(items))
    return items


# Specific routes must come BEFORE parameterized routes like /{item_id}
@router.get("/cloudinary-status")
async def cloudinary_status():
    return get_cloudinary_status()


@router.post("/classify", response_model=ClassifyResponse)
@limiter.limit(AI_RATE_LIMIT)
def classify_item(
    request: Request,
    payload: ClassifyRequest,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Classify an item's photo with the vision model and store the result on the item."""
    item = get_user_item(db, user, payload.item_id)
    image_url = payload.image_url or item.image_url
    if not image_url:
        raise ValidationError("Item has no image to classify", field="image_url")

    logger.info(f"Classifying item {item.id}")
    classification = classify_clothing_image(image_url)

    item.name = classification.name
    item.category = classification.category
    item.color = classification.color
    item.season = classification.season
    item.vibe = classification.vibe
    item.fit = classification.fit
    db.commit()
    db.refresh(item)

    return ClassifyResponse(classification=classification, item=ClosetItemResponse.model_validate(item))


@router.post("", response_model=ClosetItemResponse, status_code=201)
def create_closet_item(
    payload: ClosetItemCreate,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Add an item; base64 data URLs are uploaded to Cloudinary when it is configured."""
    image = upload_image(payload.image_url, tags=["closet"]) if payload.image_url else None

    item = ClosetItem(
        user_id=user.id,
        name=payload.name,
        category=payload.category,
        color=payload.color,
        season=payload.season,
        vibe=payload.vibe,
        fit=payload.fit,
        brand=payload.brand,
        source=payload.source,
        image_url=image["url"] if image else None,
        cloudinary_id=image["public_id"] if image else None,
    )
    db.add(item)
    db.commit()
    db.refresh(item)
    return item


@router.get("/{item_id}", response_model=ClosetItemResponse)
async def get_closet_item(item_id: str, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    return get_user_item(db, user, item_id)


@router.patch("/{item_id}", response_model=ClosetItemResponse)
def update_closet_item(
    item_id: str,
    payload: ClosetItemUpdate,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    item = get_user_item(db, user, item_id)
    updates = payload.model_dump(exclude_unset=True)

    new_image = updates.pop("image_url", None)
    if new_image and new_image != item.image_url:
        image = upload_image(new_image, tags=["closet"])
        if item.cloudinary_id:
            delete_image(item.cloudinary_id)
        item.image_url = image["url"]
        item.cloudinary_id = image["public_id"]

    for field, value in updates.items():
        setattr(item, field, value)

    db.commit()
    db.refresh(item)
    return item


@router.delete("/{item_id}", response_model=DeleteResponse)
def delete_closet_item(item_id: str, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    item = get_user_item(db, user, item_id)
    if item.cloudinary_id:
        delete_image(item.cloudinary_id)
    db.delete(item)
    db.commit()
    return DeleteResponse()
