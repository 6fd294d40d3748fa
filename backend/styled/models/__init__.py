"""
Database models for Styled.

Import all models here for easy access and to ensure they are registered with SQLAlchemy.
"""
from .base import Base
from .user import User
from .closet import ClosetItem
from .outfit import Outfit
from .inspo import InspoImage
from .packing import PackingList

__all__ = ["Base", "User", "ClosetItem", "Outfit", "InspoImage", "PackingList"]
