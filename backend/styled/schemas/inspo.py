"""
Inspiration image schemas.
"""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class InspoImageCreate(BaseModel):
    image_url: str = Field(..., min_length=1, description="Image URL or data:image/...;base64 payload")


class InspoImageResponse(BaseModel):
    id: str
    image_url: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class InspoBulkDelete(BaseModel):
    ids: List[str] = Field(..., min_length=1)
