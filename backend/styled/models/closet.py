"""
Closet item model.
"""
from sqlalchemy import Boolean, Column, DateTime, ForeignKey, JSON, String, Text

from .base import Base, new_id, utcnow


class ClosetItem(Base):
    """Closet item model"""
    __tablename__ = "closet_items"

    id = Column(String(36), primary_key=True, default=new_id, index=True)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    image_url = Column(Text, nullable=True)  # Cloudinary URL
    cloudinary_id = Column(String(255), nullable=True)  # For deletion
    name = Column(String(255), nullable=False, default="New item")
    category = Column(String(50), nullable=True, index=True)
    color = Column(String(100), nullable=True)
    season = Column(JSON, nullable=False, default=list)
    vibe = Column(JSON, nullable=False, default=list)
    fit = Column(String(100), nullable=True)
    brand = Column(String(120), nullable=True)
    source = Column(String(50), nullable=False, default="upload")
    is_archived = Column(Boolean, nullable=False, default=False, index=True)
    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)

    def to_dict(self):
        """Convert to dictionary (the shape the outfit rules and prompts work with)"""
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "color": self.color,
            "season": self.season or [],
            "vibe": self.vibe or [],
            "fit": self.fit,
            "brand": self.brand,
            "image_url": self.image_url,
        }
