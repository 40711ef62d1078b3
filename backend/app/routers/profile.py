"""
Profile endpoints.

Public:  list profiles, profile by user id, GitHub repository listing.
Private: own profile, create/update, delete account, experience/education entries.
"""

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from devconnector.api import GitHubAPIError, get_user_repos
from devconnector.constants import EDUCATION, EXPERIENCE
from devconnector.logging import get_logger

from ..auth.dependencies import get_current_user
from ..database import get_db
from ..models import Profile, User
from ..schemas import (
    EducationCreateRequest,
    EducationResponse,
    ExperienceCreateRequest,
    ExperienceResponse,
    MessageResponse,
    ProfileResponse,
    ProfileUpdateRequest,
    ProfileUserResponse,
)
from ..services import profile_service
from ..services.profile_service import ProfileNotFoundError
from ..validation import require_fields

logger = get_logger("profile")

router = APIRouter(prefix="/profile", tags=["profile"])

NO_PROFILE_FOR_USER = "There is no profile for this user"
PROFILE_NOT_FOUND = "Profile not found"
NO_GITHUB_PROFILE = "No Github profile found"
SERVER_ERROR = "Server Error"


def _profile_to_response(profile: Profile) -> ProfileResponse:
    """Convert Profile to response, joining the owner's name and avatar."""
    return ProfileResponse(
        id=profile.id,
        user=ProfileUserResponse.model_validate(profile.user),
        company=profile.company,
        website=profile.website,
        location=profile.location,
        bio=profile.bio,
        status=profile.status,
        githubusername=profile.githubusername,
        skills=profile.skills or [],
        social=profile.social or {},
        experience=[ExperienceResponse.model_validate(e) for e in profile.experience or []],
        education=[EducationResponse.model_validate(e) for e in profile.education or []],
        date=profile.created_at,
    )


def _entry_server_error(exc: ProfileNotFoundError) -> HTTPException:
    # Entry edits need an existing profile; the API reports its absence as a server error
    logger.error("profile_entry_without_profile", user_id=exc.user_id)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=SERVER_ERROR,
    )


@router.get("/me", response_model=ProfileResponse)
def get_my_profile(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Get current user's profile."""
    profile = profile_service.get_profile(db, current_user.id)
    if not profile:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=NO_PROFILE_FOR_USER,
        )
    return _profile_to_response(profile)


@router.post("", response_model=ProfileResponse)
def create_or_update_profile(
    payload: ProfileUpdateRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Create or update the current user's profile.

    ``status`` and ``skills`` are required; ``skills`` is comma separated text.
    """
    require_fields(payload)
    profile = profile_service.upsert_profile(db, current_user, payload)
    return _profile_to_response(profile)


@router.get("", response_model=list[ProfileResponse])
def list_profiles(db: Session = Depends(get_db)):
    """Get all profiles."""
    return [_profile_to_response(p) for p in profile_service.list_profiles(db)]


@router.get("/user/{user_id}", response_model=ProfileResponse)
def get_profile_by_user_id(user_id: str, db: Session = Depends(get_db)):
    """Get a profile by user id. Malformed and unknown ids look the same."""
    parsed = profile_service.parse_user_id(user_id)
    if parsed is None:
        logger.info("malformed_user_id", user_id=user_id[:64])
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=PROFILE_NOT_FOUND)

    profile = profile_service.get_profile(db, parsed)
    if not profile:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=PROFILE_NOT_FOUND)
    return _profile_to_response(profile)


@router.delete("/delete", response_model=MessageResponse)
def delete_account(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Delete the current user's profile and user record."""
    profile_service.delete_account(db, current_user)
    return MessageResponse(msg="User deleted")


@router.put("/experience", response_model=ProfileResponse)
def add_experience(
    payload: ExperienceCreateRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Add an experience entry at the front of the profile's list."""
    require_fields(payload)
    try:
        profile = profile_service.add_experience(db, current_user, payload)
    except ProfileNotFoundError as exc:
        raise _entry_server_error(exc) from exc
    return _profile_to_response(profile)


@router.delete("/experience/{exp_id}", response_model=ProfileResponse)
def delete_experience(
    exp_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Remove an experience entry by id."""
    try:
        profile = profile_service.remove_entry(db, current_user, EXPERIENCE, exp_id)
    except ProfileNotFoundError as exc:
        raise _entry_server_error(exc) from exc
    return _profile_to_response(profile)


@router.put("/education", response_model=ProfileResponse)
def add_education(
    payload: EducationCreateRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Add an education entry at the front of the profile's list."""
    require_fields(payload)
    try:
        profile = profile_service.add_education(db, current_user, payload)
    except ProfileNotFoundError as exc:
        raise _entry_server_error(exc) from exc
    return _profile_to_response(profile)


@router.delete("/education/{edu_id}", response_model=ProfileResponse)
def delete_education(
    edu_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Remove an education entry by id."""
    try:
        profile = profile_service.remove_entry(db, current_user, EDUCATION, edu_id)
    except ProfileNotFoundError as exc:
        raise _entry_server_error(exc) from exc
    return _profile_to_response(profile)


@router.get("/github/{username}", response_model=list[dict[str, Any]])
def get_github_repos(username: str):
    """List a GitHub user's repositories. Every upstream failure is a 404."""
    try:
        return get_user_repos(username)
    except GitHubAPIError as exc:
        logger.warning("github_repos_failed", username=username, error=str(exc))
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=NO_GITHUB_PROFILE,
        ) from exc
