"""Profile repository, including embedded experience/education entries."""

from typing import Any

from sqlalchemy.orm import joinedload

from devconnector.constants import ENTRY_SECTIONS
from devconnector.models import Profile

from .base import BaseRepository


class ProfileRepository(BaseRepository[Profile]):
    """Repository for Profile operations."""

    model = Profile

    def get_by_user_id(self, user_id: int) -> Profile | None:
        """Get profile by user ID, with the owning user loaded."""
        return (
            self.session.query(Profile)
            .options(joinedload(Profile.user))
            .filter(Profile.user_id == user_id)
            .first()
        )

    def list_all(self) -> list[Profile]:
        """All profiles in creation order, with owning users loaded."""
        return (
            self.session.query(Profile)
            .options(joinedload(Profile.user))
            .order_by(Profile.id)
            .all()
        )

    def upsert(self, user_id: int, fields: dict[str, Any]) -> Profile:
        """
        Create the user's profile or update it in place.

        Only keys present in ``fields`` are written.
        """
        profile = self.get_by_user_id(user_id)

        if profile:
            for key, value in fields.items():
                setattr(profile, key, value)
        else:
            profile = Profile(
                user_id=user_id,
                skills=[],
                social={},
                experience=[],
                education=[],
            )
            for key, value in fields.items():
                setattr(profile, key, value)
            self.session.add(profile)

        self.session.flush()
        self.session.refresh(profile)
        return profile

    def delete_by_user_id(self, user_id: int) -> bool:
        """Delete the user's profile if there is one."""
        profile = self.get_by_user_id(user_id)
        if not profile:
            return False
        self.session.delete(profile)
        self.session.flush()
        return True

    # =========================================================================
    # Embedded entries
    # =========================================================================

    def prepend_entry(self, profile: Profile, section: str, entry: dict[str, Any]) -> Profile:
        """Insert an entry at the front of the experience or education list."""
        entries = self._entries(profile, section)
        # Assign a new list so the JSON column is marked dirty
        setattr(profile, section, [entry, *entries])
        self.session.flush()
        return profile

    def remove_entry(self, profile: Profile, section: str, entry_id: str) -> bool:
        """
        Remove the entry with ``entry_id`` from the section.

        Returns False and leaves the list untouched when no entry matches.
        """
        entries = self._entries(profile, section)
        remaining = [entry for entry in entries if entry.get("id") != entry_id]
        if len(remaining) == len(entries):
            return False
        setattr(profile, section, remaining)
        self.session.flush()
        return True

    @staticmethod
    def _entries(profile: Profile, section: str) -> list[dict[str, Any]]:
        if section not in ENTRY_SECTIONS:
            raise ValueError(f"Unknown profile section: {section}")
        return list(getattr(profile, section) or [])
