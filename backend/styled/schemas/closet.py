"""
Closet item schemas.
"""
from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

ClothingCategory = Literal["top", "bottom", "dress", "outerwear", "shoes", "bag", "accessory"]


class ClosetItemBase(BaseModel):
    """Base schema for closet items"""
    name: str = Field("New item", description="Short description, e.g. 'White Cotton T-Shirt'")
    category: Optional[ClothingCategory] = Field(None, description="Categorization for outfit building")
    color: Optional[str] = Field(None, description="Primary color of the item")
    season: List[str] = Field(default_factory=list, description="spring, summer, fall, winter")
    vibe: List[str] = Field(default_factory=list, description="Style vibes, e.g. casual, edgy")
    fit: Optional[str] = None
    brand: Optional[str] = None

    @field_validator("category", mode="before")
    @classmethod
    def normalize_category(cls, v):
        if isinstance(v, str):
            v = v.strip().lower()
            return v or None
        return v


class ClosetItemCreate(ClosetItemBase):
    """Schema for creating a closet item; image_url may be a URL or a base64 data URL"""
    image_url: Optional[str] = Field(None, description="Image URL or data:image/...;base64 payload")
    source: str = Field("upload", description="How the item was added")


class ClosetItemUpdate(BaseModel):
    """Schema for updating a closet item (all fields optional)"""
    name: Optional[str] = None
    category: Optional[ClothingCategory] = None
    color: Optional[str] = None
    season: Optional[List[str]] = None
    vibe: Optional[List[str]] = None
    fit: Optional[str] = None
    brand: Optional[str] = None
    image_url: Optional[str] = None
    is_archived: Optional[bool] = None

    @field_validator("category", mode="before")
    @classmethod
    def normalize_category(cls, v):
        if isinstance(v, str):
            v = v.strip().lower()
            return v or None
        return v


class ClosetItemResponse(ClosetItemBase):
    """Closet item as returned by the API"""
    id: str
    user_id: str
    image_url: Optional[str] = None
    source: str = "upload"
    is_archived: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class ClassifyRequest(BaseModel):
    """Classify an existing closet item from its image"""
    item_id: str
    image_url: Optional[str] = Field(None, description="Defaults to the item's stored image")


class ClothingClassification(BaseModel):
    """Vision model classification of a clothing photo"""
    name: str
    category: ClothingCategory
    color: str
    season: List[str] = []
    vibe: List[str] = []
    fit: Optional[str] = None

    @field_validator("category", mode="before")
    @classmethod
    def normalize_category(cls, v):
        return v.strip().lower() if isinstance(v, str) else v


class ClassifyResponse(BaseModel):
    success: bool = True
    classification: ClothingClassification
    item: ClosetItemResponse
