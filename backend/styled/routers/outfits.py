import logging
from datetime import date
from typing import List

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.orm import Session

from styled.core.auth import get_current_user
from styled.core.exceptions import NotFoundError
from styled.core.rate_limit import AI_RATE_LIMIT, limiter
from styled.database import get_db
from styled.models import Outfit, User
from styled.reco.event_context import derive_event_context
from styled.reco.fashion_rules import default_formality_for
from styled.routers.closet import active_closet
from styled.schemas import (
    DeleteResponse,
    EventOutfitsResponse,
    FavoriteUpdate,
    MultipleOutfitsResponse,
    OutfitForEventRequest,
    OutfitGenerateRequest,
    OutfitMultipleRequest,
    OutfitVoiceRequest,
    SavedOutfitCreate,
    SavedOutfitResponse,
    VoiceOutfitsResponse,
)
from styled.utils.outfit_generator import generate_multiple_outfits, generate_outfit, generate_voice_outfits
from styled.utils.weather import WeatherResult, fetch_weather, get_fallback_weather

logger = logging.getLogger(__name__)

router = APIRouter()


def _closet_dicts(db: Session, user: User) -> List[dict]:
    return [item.to_dict() for item in active_closet(db, user)]


def _get_user_outfit(db: Session, user: User, outfit_id: str) -> Outfit:
    outfit = db.query(Outfit).filter(Outfit.id == outfit_id, Outfit.user_id == user.id).first()
    if not outfit:
        raise NotFoundError("Outfit", outfit_id)
    return outfit


@router.get("", response_model=List[SavedOutfitResponse])
async def list_outfits(
    favorites_only: bool = Query(False, description="Only favorited outfits"),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Outfit history, newest first."""
    query = db.query(Outfit).filter(Outfit.user_id == user.id)
    if favorites_only:
        query = query.filter(Outfit.is_favorite.is_(True))
    return query.order_by(Outfit.created_at.desc()).all()


@router.post("", response_model=SavedOutfitResponse, status_code=201)
async def save_outfit(payload: SavedOutfitCreate, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    outfit = Outfit(
        user_id=user.id,
        label=payload.label,
        context_type=payload.context_type,
        context_id=payload.context_id,
        date=payload.date or date.today(),
        outfit_data=payload.outfit_data,
    )
    db.add(outfit)
    db.commit()
    db.refresh(outfit)
    return outfit


@router.post("/generate", response_model=SavedOutfitResponse, status_code=201)
@limiter.limit(AI_RATE_LIMIT)
def generate_and_save_outfit(
    request: Request,
    payload: OutfitGenerateRequest,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Generate one outfit and save it to history."""
    weather = payload.weather.model_dump() if payload.weather else None
    generated = generate_outfit(
        payload.occasion, payload.item_source, _closet_dicts(db, user), user.style_preferences(), weather
    )
    outfit = Outfit(
        user_id=user.id,
        label=generated["label"],
        context_type="manual_request",
        date=date.today(),
        outfit_data=generated["outfit_data"],
    )
    db.add(outfit)
    db.commit()
    db.refresh(outfit)
    logger.info(f"Saved generated outfit {outfit.id} for user {user.id}")
    return outfit


@router.post("/generate-multiple", response_model=MultipleOutfitsResponse)
@limiter.limit(AI_RATE_LIMIT)
def generate_outfit_options(
    request: Request,
    payload: OutfitMultipleRequest,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Several validated outfit options; nothing is saved."""
    temperature = payload.weather.temperature if payload.weather else None
    outfits = generate_multiple_outfits(
        occasion=payload.occasion,
        item_source=payload.item_source,
        formality_level=payload.formality_level,
        count=payload.count,
        closet_items=_closet_dicts(db, user),
        preferences=user.style_preferences(),
        temperature=temperature,
    )
    return MultipleOutfitsResponse(outfits=outfits)


@router.post("/generate-voice", response_model=VoiceOutfitsResponse)
@limiter.limit(AI_RATE_LIMIT)
def generate_outfits_from_text(
    request: Request,
    payload: OutfitVoiceRequest,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    weather = payload.weather.model_dump() if payload.weather else None
    outfits = generate_voice_outfits(payload.prompt, _closet_dicts(db, user), user.style_preferences(), weather)
    return VoiceOutfitsResponse(outfits=outfits)


@router.post("/for-event", response_model=EventOutfitsResponse)
@limiter.limit(AI_RATE_LIMIT)
def generate_outfits_for_event(
    request: Request,
    payload: OutfitForEventRequest,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """
    Outfits for a calendar event: the event's occasion picks the formality and
    its destination (or the user's home city) picks the weather.
    """
    context = derive_event_context(payload.event)
    city = context.destination or payload.home_city or user.home_city
    weather = fetch_weather(city=city) if city else WeatherResult(get_fallback_weather("Unknown"), True)
    formality = (payload.formality_level if payload.formality_level is not None
                 else default_formality_for(context.occasion.value))

    logger.info(f"Event '{payload.event.title}': {context.occasion.value}, destination={context.destination}")
    outfits = generate_multiple_outfits(
        occasion=context.occasion.value,
        item_source=payload.item_source,
        formality_level=formality,
        count=payload.count,
        closet_items=_closet_dicts(db, user),
        preferences=user.style_preferences(),
        temperature=weather.weather.temperature,
        event_context={"title": payload.event.title, "destination": context.destination},
    )
    return EventOutfitsResponse(
        outfits=outfits,
        context=context,
        weather=weather.weather,
        weather_is_fallback=weather.is_fallback,
    )


@router.patch("/{outfit_id}/favorite", response_model=SavedOutfitResponse)
async def set_favorite(
    outfit_id: str,
    payload: FavoriteUpdate,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    outfit = _get_user_outfit(db, user, outfit_id)
    outfit.is_favorite = payload.is_favorite
    db.commit()
    db.refresh(outfit)
    return outfit


@router.delete("/{outfit_id}", response_model=DeleteResponse)
async def delete_outfit(outfit_id: str, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    outfit = _get_user_outfit(db, user, outfit_id)
    db.delete(outfit)
    db.commit()
    return DeleteResponse()
