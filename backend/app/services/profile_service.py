"""
Profile management service functions.

Route handlers call these with the request's database session; each write
function commits before returning.
"""

import uuid
from typing import Any

from sqlalchemy.orm import Session

from devconnector.constants import (
    EDUCATION,
    EXPERIENCE,
    MAX_USER_ID,
    PROFILE_TEXT_FIELDS,
    SKILLS_SEPARATOR,
    SOCIAL_PLATFORMS,
)
from devconnector.logging import LogContext, get_logger
from devconnector.repositories import ProfileRepository, UserRepository

from ..models import Profile, User
from ..schemas import EducationCreateRequest, ExperienceCreateRequest, ProfileUpdateRequest

logger = get_logger("profile.service")


class ProfileNotFoundError(LookupError):
    """The user has no profile to modify."""

    def __init__(self, user_id: int):
        super().__init__(f"No profile for user {user_id}")
        self.user_id = user_id


def split_skills(raw: str) -> list[str]:
    """Split comma separated skills, trimming each and dropping blanks."""
    return [skill.strip() for skill in raw.split(SKILLS_SEPARATOR) if skill.strip()]


def build_profile_fields(payload: ProfileUpdateRequest) -> dict[str, Any]:
    """
    Map a create/update request onto profile columns.

    Empty text fields are left out so they do not overwrite stored values.
    ``social`` is always rebuilt from the request.
    """
    fields: dict[str, Any] = {}
    for name in PROFILE_TEXT_FIELDS:
        value = getattr(payload, name)
        if value:
            fields[name] = value

    if payload.skills:
        fields["skills"] = split_skills(payload.skills)

    fields["social"] = {
        platform: getattr(payload, platform)
        for platform in SOCIAL_PLATFORMS
        if getattr(payload, platform)
    }
    return fields


def parse_user_id(raw: str) -> int | None:
    """
    Parse a user id from a path segment.

    Returns None unless the segment is an ASCII positive integer that fits a
    signed 64-bit column.
    """
    if not (raw.isascii() and raw.isdigit()):
        return None
    try:
        value = int(raw)
    except ValueError:
        return None
    return value if 0 < value <= MAX_USER_ID else None


def get_profile(db: Session, user_id: int) -> Profile | None:
    """Fetch the profile for a user, or None if it does not exist."""
    return ProfileRepository(db).get_by_user_id(user_id)


def list_profiles(db: Session) -> list[Profile]:
    return ProfileRepository(db).list_all()


def upsert_profile(db: Session, user: User, payload: ProfileUpdateRequest) -> Profile:
    """Create or update the user's profile from the request."""
    profile = ProfileRepository(db).upsert(user.id, build_profile_fields(payload))
    db.commit()
    logger.info("profile_upserted", user_id=user.id, profile_id=profile.id)
    return profile


def delete_account(db: Session, user: User) -> None:
    """
    Delete the user's profile and then the user record.

    Both deletes commit together; a failure rolls back both.
    """
    user_id = user.id
    ProfileRepository(db).delete_by_user_id(user_id)
    UserRepository(db).delete_user(user_id)
    db.commit()
    logger.info("account_deleted", user_id=user_id)


# =============================================================================
# Embedded entries
# =============================================================================


def _new_entry_id() -> str:
    return uuid.uuid4().hex


def new_experience_entry(payload: ExperienceCreateRequest) -> dict[str, Any]:
    return {
        "id": _new_entry_id(),
        "title": payload.title,
        "company": payload.company,
        "location": payload.location,
        "from": payload.from_date.isoformat() if payload.from_date else None,
        "to": payload.to_date.isoformat() if payload.to_date else None,
        "current": bool(payload.current),
        "description": payload.description,
    }


def new_education_entry(payload: EducationCreateRequest) -> dict[str, Any]:
    return {
        "id": _new_entry_id(),
        "school": payload.school,
        "degree": payload.degree,
        "fieldofstudy": payload.fieldofstudy,
        "from": payload.from_date.isoformat() if payload.from_date else None,
        "to": payload.to_date.isoformat() if payload.to_date else None,
        "current": bool(payload.current),
        "description": payload.description,
    }


def add_entry(db: Session, user: User, section: str, entry: dict[str, Any]) -> Profile:
    """
    Prepend an experience or education entry to the user's profile.

    Raises:
        ProfileNotFoundError: when the user has no profile yet.
    """
    repo = ProfileRepository(db)
    with LogContext(user_id=user.id, section=section):
        profile = repo.get_by_user_id(user.id)
        if profile is None:
            raise ProfileNotFoundError(user.id)
        repo.prepend_entry(profile, section, entry)
        db.commit()
        logger.info("profile_entry_added", entry_id=entry["id"])
    return profile


def remove_entry(db: Session, user: User, section: str, entry_id: str) -> Profile:
    """
    Remove an entry by id; an unknown id leaves the profile unchanged.

    Raises:
        ProfileNotFoundError: when the user has no profile yet.
    """
    repo = ProfileRepository(db)
    with LogContext(user_id=user.id, section=section):
        profile = repo.get_by_user_id(user.id)
        if profile is None:
            raise ProfileNotFoundError(user.id)
        if repo.remove_entry(profile, section, entry_id):
            db.commit()
            logger.info("profile_entry_removed", entry_id=entry_id)
        else:
            logger.info("profile_entry_missing", entry_id=entry_id)
    return profile


def add_experience(db: Session, user: User, payload: ExperienceCreateRequest) -> Profile:
    return add_entry(db, user, EXPERIENCE, new_experience_entry(payload))


def add_education(db: Session, user: User, payload: EducationCreateRequest) -> Profile:
    return add_entry(db, user, EDUCATION, new_education_entry(payload))
