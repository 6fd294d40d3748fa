"""
Saved packing list model.
"""
from sqlalchemy import Column, Date, DateTime, ForeignKey, JSON, String

from .base import Base, new_id, utcnow


class PackingList(Base):
    """Saved packing list model"""
    __tablename__ = "packing_lists"

    id = Column(String(36), primary_key=True, default=new_id, index=True)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    destination = Column(String(255), nullable=False)
    start_date = Column(Date, nullable=True)
    end_date = Column(Date, nullable=True)
    trip_type = Column(String(100), nullable=True)
    list_data = Column(JSON, nullable=False, default=dict)  # items, outfits, weather
    created_at = Column(DateTime, default=utcnow)
