"""
User profile schemas.
"""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

BUDGET_LEVELS = ("$", "$$", "$$$", "$$$$")


class ProfileResponse(BaseModel):
    """Profile of the authenticated user"""
    id: str
    email: Optional[str] = None
    height: Optional[str] = None
    body_shape: Optional[str] = None
    style_vibe: List[str] = []
    color_palette: List[str] = []
    avoid_colors: List[str] = []
    budget_level: str = "$$"
    preferred_brands: Optional[List[str]] = None
    home_city: Optional[str] = None
    home_region: Optional[str] = None
    home_country: Optional[str] = None
    timezone: Optional[str] = None
    use_auto_location: bool = True
    use_calendar_styling: bool = True
    plan_ahead_days: int = 2
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class ProfileUpdate(BaseModel):
    """Partial profile update (onboarding and settings pages)"""
    height: Optional[str] = None
    body_shape: Optional[str] = None
    style_vibe: Optional[List[str]] = None
    color_palette: Optional[List[str]] = None
    avoid_colors: Optional[List[str]] = None
    budget_level: Optional[str] = None
    preferred_brands: Optional[List[str]] = None
    home_city: Optional[str] = None
    home_region: Optional[str] = None
    home_country: Optional[str] = None
    timezone: Optional[str] = None
    use_auto_location: Optional[bool] = None
    use_calendar_styling: Optional[bool] = None
    plan_ahead_days: Optional[int] = Field(None, ge=0, le=14)

    @field_validator("budget_level")
    @classmethod
    def validate_budget_level(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and v not in BUDGET_LEVELS:
            raise ValueError(f"budget_level must be one of {', '.join(BUDGET_LEVELS)}")
        return v
