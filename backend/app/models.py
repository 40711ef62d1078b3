"""
SQLAlchemy ORM models for the backend.

Re-exports the models from the devconnector.models package.
"""

from devconnector.models import Base, Profile, User

__all__ = [
    "Base",
    "User",
    "Profile",
]
