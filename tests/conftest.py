"""
Pytest configuration and shared fixtures.
"""

import pytest

from jobfeed.models import CandidateProfile, Experience, JobPosting

# 2025-10-09 08:53:20 UTC
NOW = 1_760_000_000_000
HOUR = 60 * 60 * 1000
DAY = 24 * HOUR


@pytest.fixture
def now() -> int:
    return NOW


@pytest.fixture
def make_job():
    """Factory for job postings; unrelated defaults so nothing matches by accident."""
    counter = [0]

    def _make(**overrides) -> JobPosting:
        counter[0] += 1
        fields = {
            "id": f"job-{counter[0]}",
            "title": "Accountant",
            "description": "Maintain ledgers and file returns.",
            "company": "Ledger & Co",
            "location": "Kolkata",
            "salary": "",
            "type": "full-time",
            "requirements": (),
            "employer_id": "emp-1",
            "created_at": NOW - 30 * DAY,
            "status": "active",
        }
        fields.update(overrides)
        return JobPosting(**fields)

    return _make


@pytest.fixture
def make_profile():
    def _make(**overrides) -> CandidateProfile:
        if "experience" in overrides:
            overrides["experience"] = tuple(
                Experience(title=e) if isinstance(e, str) else e for e in overrides["experience"]
            )
        return CandidateProfile(**overrides)

    return _make


@pytest.fixture
def driver_profile(make_profile) -> CandidateProfile:
    return make_profile(
        skills=("Driving License", "Two-wheeler"),
        location="Pune",
        expected_salary="₹18,000/month",
        headline="Delivery Driver",
        experience=("Delivery Driver",),
        languages=("Hindi", "Marathi"),
    )
