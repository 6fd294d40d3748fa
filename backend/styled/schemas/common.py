"""
Common/shared schemas used across the application.
"""
from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Health check response"""
    status: str


class DeleteResponse(BaseModel):
    """Acknowledgement for delete endpoints"""
    success: bool = True
    deleted: int = 1
