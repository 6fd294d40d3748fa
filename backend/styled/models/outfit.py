"""
Saved outfit model.
"""
from sqlalchemy import Boolean, Column, Date, DateTime, ForeignKey, JSON, String

from .base import Base, new_id, utcnow


class Outfit(Base):
    """Saved outfit model"""
    __tablename__ = "outfits"

    id = Column(String(36), primary_key=True, default=new_id, index=True)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    label = Column(String(255), nullable=False)
    context_type = Column(String(50), nullable=False, default="manual_request")  # manual_request, Event, voice
    context_id = Column(String(255), nullable=True)  # e.g. calendar event id
    date = Column(Date, nullable=True)
    is_favorite = Column(Boolean, nullable=False, default=False)
    # closet_item_ids, new_items, weather/style rationale, styling tips, weather
    outfit_data = Column(JSON, nullable=False, default=dict)
    created_at = Column(DateTime, default=utcnow)
