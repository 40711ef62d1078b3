"""
Tests for profile service helpers and request validation.
"""

from datetime import date

import pytest

from backend.app.schemas import (
    EducationCreateRequest,
    ExperienceCreateRequest,
    ProfileUpdateRequest,
)
from backend.app.services.profile_service import (
    build_profile_fields,
    new_education_entry,
    new_experience_entry,
    parse_user_id,
    split_skills,
)
from backend.app.validation import RequestValidationFailed, require_fields


class TestSplitSkills:
    def test_trims_and_keeps_order(self):
        assert split_skills("node, react , css") == ["node", "react", "css"]

    def test_single_skill(self):
        assert split_skills("python") == ["python"]

    def test_drops_blank_items(self):
        assert split_skills("go,, rust ,") == ["go", "rust"]


class TestBuildProfileFields:
    def test_only_non_empty_fields_are_written(self):
        payload = ProfileUpdateRequest(status="Developer", skills="a,b", company="", bio="Hi")

        fields = build_profile_fields(payload)

        assert fields["status"] == "Developer"
        assert fields["skills"] == ["a", "b"]
        assert fields["bio"] == "Hi"
        assert "company" not in fields
        assert "website" not in fields

    def test_social_is_sparse_and_always_present(self):
        payload = ProfileUpdateRequest(
            status="Developer", skills="a", youtube="https://youtube.com/x"
        )

        fields = build_profile_fields(payload)

        assert fields["social"] == {"youtube": "https://youtube.com/x"}

    def test_social_empty_when_no_links(self):
        fields = build_profile_fields(ProfileUpdateRequest(status="Developer", skills="a"))

        assert fields["social"] == {}


class TestParseUserId:
    @pytest.mark.parametrize("raw,expected", [("1", 1), ("42", 42), (str(2**63 - 1), 2**63 - 1)])
    def test_valid(self, raw, expected):
        assert parse_user_id(raw) == expected

    @pytest.mark.parametrize(
        "raw",
        [
            "",
            "abc",
            "-1",
            "0",
            "1.5",
            "5e9f8f8f8f8f8f8f8f8f8f8f",
            "\u00b2",
            "\u0661\u0662",
            str(2**63),
            "99999999999999999999999",
        ],
    )
    def test_malformed(self, raw):
        assert parse_user_id(raw) is None


class TestEntries:
    def test_experience_entry_shape(self):
        payload = ExperienceCreateRequest.model_validate(
            {"title": "Dev", "company": "Acme", "from": "2020-01-15"}
        )

        entry = new_experience_entry(payload)

        assert entry["from"] == "2020-01-15"
        assert entry["to"] is None
        assert entry["current"] is False
        assert len(entry["id"]) == 32

    def test_education_entry_shape(self):
        payload = EducationCreateRequest.model_validate(
            {
                "school": "MIT",
                "degree": "BSc",
                "fieldofstudy": "Physics",
                "from": "2010-09-01",
                "to": "2014-06-01",
                "current": True,
            }
        )

        entry = new_education_entry(payload)

        assert entry["to"] == "2014-06-01"
        assert entry["current"] is True

    def test_entry_ids_are_unique(self):
        payload = ExperienceCreateRequest.model_validate(
            {"title": "Dev", "company": "Acme", "from": "2020-01-15"}
        )

        assert new_experience_entry(payload)["id"] != new_experience_entry(payload)["id"]


class TestRequireFields:
    def test_passes_when_present(self):
        require_fields(ProfileUpdateRequest(status="Developer", skills="go"))

    def test_reports_every_missing_field(self):
        with pytest.raises(RequestValidationFailed) as exc_info:
            require_fields(ExperienceCreateRequest(company="Acme"))

        errors = exc_info.value.errors
        assert [e["param"] for e in errors] == ["title", "from"]
        assert errors[0] == {
            "value": None,
            "msg": "Title is required",
            "param": "title",
            "location": "body",
        }

    def test_blank_strings_count_as_missing(self):
        payload = ProfileUpdateRequest(status="   ", skills="")

        assert payload.status is None
        with pytest.raises(RequestValidationFailed):
            require_fields(payload)

    def test_skills_without_items_count_as_missing(self):
        payload = ProfileUpdateRequest(status="Developer", skills=" , ,")

        assert payload.skills is None
        with pytest.raises(RequestValidationFailed) as exc_info:
            require_fields(payload)

        assert [e["param"] for e in exc_info.value.errors] == ["skills"]

    def test_alias_and_name_both_accepted(self):
        by_alias = ExperienceCreateRequest.model_validate({"from": "2020-01-01"})
        by_name = ExperienceCreateRequest(from_date=date(2020, 1, 1))

        assert by_alias.from_date == by_name.from_date
