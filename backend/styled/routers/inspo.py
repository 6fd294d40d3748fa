import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from styled.config import settings
from styled.core.auth import get_current_user
from styled.core.exceptions import NotFoundError
from styled.database import get_db
from styled.models import InspoImage, User
from styled.schemas import DeleteResponse, InspoBulkDelete, InspoImageCreate, InspoImageResponse
from styled.utils.cloudinary_helper import delete_image, upload_image

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_user_image(db: Session, user: User, image_id: str) -> InspoImage:
    image = db.query(InspoImage).filter(InspoImage.id == image_id, InspoImage.user_id == user.id).first()
    if not image:
        raise NotFoundError("Inspiration image", image_id)
    return image


@router.get("", response_model=List[InspoImageResponse])
async def list_inspo_images(db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    return (
        db.query(InspoImage)
        .filter(InspoImage.user_id == user.id)
        .order_by(InspoImage.created_at.desc())
        .all()
    )


@router.post("", response_model=InspoImageResponse, status_code=201)
def add_inspo_image(payload: InspoImageCreate, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    uploaded = upload_image(payload.image_url, folder=settings.CLOUDINARY_INSPO_FOLDER, tags=["inspo"])
    image = InspoImage(user_id=user.id, image_url=uploaded["url"], cloudinary_id=uploaded["public_id"])
    db.add(image)
    db.commit()
    db.refresh(image)
    return image


@router.post("/bulk-delete", response_model=DeleteResponse)
def bulk_delete_inspo_images(
    payload: InspoBulkDelete,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Delete several images; ids that are not the user's are ignored."""
    images = db.query(InspoImage).filter(InspoImage.user_id == user.id, InspoImage.id.in_(payload.ids)).all()
    for image in images:
        if image.cloudinary_id:
            delete_image(image.cloudinary_id)
        db.delete(image)
    db.commit()

    logger.info(f"Deleted {len(images)} inspiration images for user {user.id}")
    return DeleteResponse(deleted=len(images))


@router.put("/{image_id}", response_model=InspoImageResponse)
def replace_inspo_image(
    image_id: str,
    payload: InspoImageCreate,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    image = _get_user_image(db, user, image_id)
    uploaded = upload_image(payload.image_url, folder=settings.CLOUDINARY_INSPO_FOLDER, tags=["inspo"])
    if image.cloudinary_id and image.cloudinary_id != uploaded["public_id"]:
        delete_image(image.cloudinary_id)

    image.image_url = uploaded["url"]
    image.cloudinary_id = uploaded["public_id"]
    db.commit()
    db.refresh(image)
    return image


@router.delete("/{image_id}", response_model=DeleteResponse)
def delete_inspo_image(image_id: str, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    image = _get_user_image(db, user, image_id)
    if image.cloudinary_id:
        delete_image(image.cloudinary_id)
    db.delete(image)
    db.commit()
    return DeleteResponse()
