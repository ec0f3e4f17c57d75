"""Data models for candidate profiles, job postings and scored results."""
from __future__ import annotations

from dataclasses import dataclass, field
from collections.abc import Mapping
from typing import Any


class InvalidInputError(ValueError):
    """A profile or job record does not have the expected shape."""


def _text(data: Mapping[str, Any], key: str, owner: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise InvalidInputError(f"{owner}.{key} must be a string, got {type(value).__name__}")
    return value


def _optional_text(data: Mapping[str, Any], key: str, owner: str) -> str | None:
    value = _text(data, key, owner)
    return value or None


def _strings(data: Mapping[str, Any], key: str, owner: str) -> tuple[str, ...]:
    value = data.get(key)
    if value is None:
        return ()
    if isinstance(value, (str, bytes)) or not isinstance(value, (list, tuple)):
        raise InvalidInputError(f"{owner}.{key} must be a list of strings")
    for item in value:
        if not isinstance(item, str):
            raise InvalidInputError(f"{owner}.{key} must contain only strings")
    return tuple(value)


def _mapping(value: Any, owner: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise InvalidInputError(f"{owner} must be a mapping, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class Experience:
    title: str = ""
    company: str = ""
    duration: str = ""
    description: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> Experience:
        data = _mapping(data, "experience entry")
        return cls(
            title=_text(data, "title", "experience"),
            company=_text(data, "company", "experience"),
            duration=_text(data, "duration", "experience"),
            description=_text(data, "description", "experience"),
        )


@dataclass(frozen=True)
class CandidateProfile:
    """The jobseeker side of matching. Every field is optional."""

    skills: tuple[str, ...] = ()
    location: str | None = None
    expected_salary: str | None = None
    headline: str | None = None
    experience: tuple[Experience, ...] = ()
    # Not used by scoring yet.
    languages: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> CandidateProfile:
        data = _mapping(data, "profile")
        raw_exp = data.get("experience")
        if raw_exp is None:
            raw_exp = []
        if not isinstance(raw_exp, (list, tuple)):
            raise InvalidInputError("profile.experience must be a list")
        return cls(
            skills=_strings(data, "skills", "profile"),
            location=_optional_text(data, "location", "profile"),
            expected_salary=_optional_text(data, "expectedSalary", "profile"),
            headline=_optional_text(data, "headline", "profile"),
            experience=tuple(Experience.from_dict(e) for e in raw_exp),
            languages=_strings(data, "languages", "profile"),
        )


@dataclass(frozen=True)
class JobPosting:
    id: str
    title: str = ""
    description: str = ""
    company: str = ""
    location: str = ""
    salary: str = ""
    type: str = ""
    requirements: tuple[str, ...] = ()
    employer_id: str = ""
    created_at: int = 0  # epoch milliseconds
    status: str = "active"

    @classmethod
    def from_dict(cls, data: Any) -> JobPosting:
        data = _mapping(data, "job")
        job_id = data.get("id")
        if isinstance(job_id, bool) or not isinstance(job_id, (str, int)):
            raise InvalidInputError("job.id must be a string")
        created_at = data.get("createdAt")
        if created_at is None:
            created_at = 0
        if isinstance(created_at, bool) or not isinstance(created_at, int):
            raise InvalidInputError("job.createdAt must be an integer (epoch ms)")
        return cls(
            id=str(job_id),
            title=_text(data, "title", "job"),
            description=_text(data, "description", "job"),
            company=_text(data, "company", "job"),
            location=_text(data, "location", "job"),
            salary=_text(data, "salary", "job"),
            type=_text(data, "type", "job"),
            requirements=_strings(data, "requirements", "job"),
            employer_id=_text(data, "employerId", "job"),
            created_at=created_at,
            status=_text(data, "status", "job") or "active",
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "company": self.company,
            "location": self.location,
            "salary": self.salary,
            "type": self.type,
            "requirements": list(self.requirements or ()),
            "employerId": self.employer_id,
            "createdAt": self.created_at,
            "status": self.status,
        }


@dataclass(frozen=True)
class SubScore:
    points: float = 0.0
    reason: str | None = None


@dataclass(frozen=True)
class ScoredJob:
    job: JobPosting
    match_score: int
    match_reasons: tuple[str, ...] = ()
    breakdown: Mapping[str, float] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        data = self.job.to_dict()
        data["matchScore"] = self.match_score
        data["matchReasons"] = list(self.match_reasons)
        return data
