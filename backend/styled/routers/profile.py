import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from styled.core.auth import get_current_user
from styled.database import get_db
from styled.models import User
from styled.schemas import ProfileResponse, ProfileUpdate

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/me", response_model=ProfileResponse)
async def get_profile(user: User = Depends(get_current_user)):
    return user


@router.patch("/me", response_model=ProfileResponse)
async def update_profile(
    payload: ProfileUpdate,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Update only the fields that were sent"""
    updates = payload.model_dump(exclude_unset=True)
    for field, value in updates.items():
        setattr(user, field, value)

    db.commit()
    db.refresh(user)
    logger.info(f"Updated profile {user.id}: {', '.join(sorted(updates)) or 'no changes'}")
    return user
