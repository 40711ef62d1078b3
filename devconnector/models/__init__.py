"""
SQLAlchemy models for DevConnector.

Single source of truth for all database models.

Usage:
    from devconnector.models import User, Profile
"""

from .base import Base
from .profile import Profile
from .user import User

__all__ = [
    "Base",
    "User",
    "Profile",
]
