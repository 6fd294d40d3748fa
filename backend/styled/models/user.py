"""
User profile model.
"""
from sqlalchemy import Boolean, Column, DateTime, Integer, JSON, String

from .base import Base, utcnow


class User(Base):
    """Profile row for an identity owned by the hosted auth provider"""
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, index=True)  # auth provider "sub"
    email = Column(String(255), nullable=True, index=True)
    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)

    # Profile
    height = Column(String(50), nullable=True)
    body_shape = Column(String(50), nullable=True)
    style_vibe = Column(JSON, nullable=False, default=list)
    color_palette = Column(JSON, nullable=False, default=list)
    avoid_colors = Column(JSON, nullable=False, default=list)
    budget_level = Column(String(10), nullable=False, default="$$")
    preferred_brands = Column(JSON, nullable=True)

    # Location
    home_city = Column(String(120), nullable=True)
    home_region = Column(String(120), nullable=True)
    home_country = Column(String(120), nullable=True)
    timezone = Column(String(64), nullable=True)
    use_auto_location = Column(Boolean, nullable=False, default=True)

    # Features
    use_calendar_styling = Column(Boolean, nullable=False, default=True)
    plan_ahead_days = Column(Integer, nullable=False, default=2)

    def style_preferences(self) -> dict:
        """Subset of the profile that is fed into generation prompts"""
        return {
            "style_vibe": self.style_vibe or [],
            "color_palette": self.color_palette or [],
            "avoid_colors": self.avoid_colors or [],
            "budget_level": self.budget_level or "$$",
        }
