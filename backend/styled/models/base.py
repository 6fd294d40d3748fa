"""
Shared declarative base and column helpers.
"""
import uuid
from datetime import datetime

from styled.database import Base


def new_id() -> str:
    """Primary keys are UUID strings, matching the ids issued by the auth provider"""
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.utcnow()


__all__ = ["Base", "new_id", "utcnow"]
