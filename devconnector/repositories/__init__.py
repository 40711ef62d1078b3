"""
Repository pattern implementations for data access.

Usage:
    from devconnector.repositories import ProfileRepository
    from devconnector.db import db

    with db.session() as session:
        repo = ProfileRepository(session)
        profile = repo.get_by_user_id(user_id)
"""

from .base import BaseRepository
from .profile_repository import ProfileRepository
from .user_repository import UserRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "ProfileRepository",
]
