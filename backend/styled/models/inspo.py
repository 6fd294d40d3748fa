"""
Inspiration image model.
"""
from sqlalchemy import Column, DateTime, ForeignKey, String, Text

from .base import Base, new_id, utcnow


class InspoImage(Base):
    __tablename__ = "inspo_images"

    id = Column(String(36), primary_key=True, default=new_id, index=True)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    image_url = Column(Text, nullable=False)
    cloudinary_id = Column(String(255), nullable=True)
    created_at = Column(DateTime, default=utcnow)
