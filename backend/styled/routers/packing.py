import logging
from typing import List

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from styled.core.auth import get_current_user
from styled.core.exceptions import NotFoundError, ValidationError
from styled.core.rate_limit import AI_RATE_LIMIT, limiter
from styled.database import get_db
from styled.models import PackingList, User
from styled.routers.closet import active_closet
from styled.schemas import (
    DeleteResponse,
    PackingGenerateRequest,
    PackingGenerateResponse,
    PackingListCreate,
    PackingListResponse,
)
from styled.utils.packing_generator import generate_packing_list

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_user_list(db: Session, user: User, list_id: str) -> PackingList:
    packing_list = db.query(PackingList).filter(PackingList.id == list_id, PackingList.user_id == user.id).first()
    if not packing_list:
        raise NotFoundError("Packing list", list_id)
    return packing_list


@router.post("/generate", response_model=PackingGenerateResponse)
@limiter.limit(AI_RATE_LIMIT)
def generate_packing(
    request: Request,
    payload: PackingGenerateRequest,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Packing list plus one outfit per trip day, drawing on the user's closet."""
    if not payload.destination or not payload.trip_type or not payload.days:
        raise ValidationError("Missing required fields: destination, trip_type, days")

    closet = [item.to_dict() for item in active_closet(db, user)]
    logger.info(f"Generating packing list for {payload.destination} ({payload.days} days, {len(closet)} closet items)")
    result = generate_packing_list(
        destination=payload.destination,
        trip_type=payload.trip_type,
        days=payload.days,
        closet_items=closet,
        preferences=user.style_preferences(),
        country=payload.country,
        start_date=payload.start_date,
        end_date=payload.end_date,
        weather=payload.weather.model_dump() if payload.weather else None,
        is_international=payload.is_international,
    )
    return PackingGenerateResponse(items=result["items"], outfits=result["outfits"])


@router.get("", response_model=List[PackingListResponse])
async def list_packing_lists(db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    return (
        db.query(PackingList)
        .filter(PackingList.user_id == user.id)
        .order_by(PackingList.created_at.desc())
        .all()
    )


@router.post("", response_model=PackingListResponse, status_code=201)
async def save_packing_list(
    payload: PackingListCreate,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    packing_list = PackingList(user_id=user.id, **payload.model_dump())
    db.add(packing_list)
    db.commit()
    db.refresh(packing_list)
    return packing_list


@router.get("/{list_id}", response_model=PackingListResponse)
async def get_packing_list(list_id: str, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    return _get_user_list(db, user, list_id)


@router.delete("/{list_id}", response_model=DeleteResponse)
async def delete_packing_list(list_id: str, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    packing_list = _get_user_list(db, user, list_id)
    db.delete(packing_list)
    db.commit()
    return DeleteResponse()
