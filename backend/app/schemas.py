"""
Pydantic schemas for request and response validation.

Wire names follow the public API (``githubusername``, ``fieldofstudy``,
``from``/``to``); Python attribute names differ only where the wire name is
a keyword.
"""

from datetime import date, datetime
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from devconnector.constants import SKILLS_SEPARATOR


class RequestBody(BaseModel):
    """Request body whose blank strings count as missing."""

    model_config = ConfigDict(populate_by_name=True)

    # Field name -> message reported when the field is missing or blank
    required_fields: ClassVar[dict[str, str]] = {}

    @field_validator("*", mode="before")
    @classmethod
    def blank_to_none(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v


class ProfileUpdateRequest(RequestBody):
    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    status: str | None = None
    githubusername: str | None = None
    skills: str | None = None
    youtube: str | None = None
    twitter: str | None = None
    facebook: str | None = None
    linkedin: str | None = None
    instagram: str | None = None

    required_fields: ClassVar[dict[str, str]] = {
        "status": "Status is required",
        "skills": "Skills is required",
    }

    @field_validator("skills")
    @classmethod
    def skills_without_items_are_missing(cls, v: str | None) -> str | None:
        if v is not None and not any(s.strip() for s in v.split(SKILLS_SEPARATOR)):
            return None
        return v


class ExperienceCreateRequest(RequestBody):
    title: str | None = None
    company: str | None = None
    location: str | None = None
    from_date: date | None = Field(default=None, alias="from")
    to_date: date | None = Field(default=None, alias="to")
    current: bool | None = None
    description: str | None = None

    required_fields: ClassVar[dict[str, str]] = {
        "title": "Title is required",
        "company": "Company is required",
        "from_date": "From date is required",
    }


class EducationCreateRequest(RequestBody):
    school: str | None = None
    degree: str | None = None
    fieldofstudy: str | None = None
    from_date: date | None = Field(default=None, alias="from")
    to_date: date | None = Field(default=None, alias="to")
    current: bool | None = None
    description: str | None = None

    required_fields: ClassVar[dict[str, str]] = {
        "school": "School is required",
        "degree": "Degree is required",
        "fieldofstudy": "Field of study is required",
        "from_date": "From date is required",
    }


class ProfileUserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    avatar: str | None = None


class ExperienceResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    company: str
    location: str | None = None
    from_date: date = Field(alias="from")
    to_date: date | None = Field(default=None, alias="to")
    current: bool = False
    description: str | None = None


class EducationResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    school: str
    degree: str
    fieldofstudy: str
    from_date: date = Field(alias="from")
    to_date: date | None = Field(default=None, alias="to")
    current: bool = False
    description: str | None = None


class ProfileResponse(BaseModel):
    id: int
    user: ProfileUserResponse
    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    status: str
    githubusername: str | None = None
    skills: list[str] = Field(default_factory=list)
    social: dict[str, str] = Field(default_factory=dict)
    experience: list[ExperienceResponse] = Field(default_factory=list)
    education: list[EducationResponse] = Field(default_factory=list)
    date: datetime


class MessageResponse(BaseModel):
    msg: str
