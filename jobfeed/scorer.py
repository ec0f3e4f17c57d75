"""Score a single job posting against a candidate profile."""
from __future__ import annotations

import math
import re

from jobfeed.log import get_logger
from jobfeed.models import CandidateProfile, JobPosting, ScoredJob, SubScore
from jobfeed.similarity import normalize, similarity

log = get_logger(__name__)

SKILLS_MAX = 40.0
LOCATION_MAX = 25.0
HEADLINE_MAX = 20.0
EXPERIENCE_MAX = 10.0
EXPERIENCE_DESC_MAX = 8.0
SALARY_MAX = 5.0

# Only the start of a description is compared against headline/experience
DESC_WINDOW = 200

MS_PER_DAY = 24 * 60 * 60 * 1000

# (max age in days, bonus); first bracket the job falls under wins
RECENCY_BRACKETS: list[tuple[float, int]] = [(1, 5), (3, 3), (7, 1)]

_SALARY_TOKEN = re.compile(r"\d[\d,]*")


def parse_salary(salary: str | None) -> float:
    """Mean of all numbers in a free-text salary, or 0 when there are none.

    "₹15,000 - ₹20,000/month" → 17500.0
    """
    if not salary:
        return 0.0
    # Digit runs too long for a float parse to inf and count as unparseable
    numbers = [float(tok.replace(",", "")) for tok in _SALARY_TOKEN.findall(salary)]
    if not numbers:
        return 0.0
    mean = sum(numbers) / len(numbers)
    return mean if math.isfinite(mean) else 0.0


def skills_score(profile: CandidateProfile, job: JobPosting) -> SubScore:
    skills = [s for s in (profile.skills or ()) if normalize(s)]
    requirements = job.requirements or ()
    if not skills or not requirements:
        return SubScore()

    matches = 0.0
    for skill in skills:
        if any(similarity(skill, req) >= 0.6 for req in requirements):
            matches += 1

    desc = normalize(job.description)
    for skill in skills:
        if similarity(skill, job.title) >= 0.5:
            matches += 0.5
        if normalize(skill) in desc:
            matches += 0.3

    points = min(matches / max(len(requirements), 1) * SKILLS_MAX, SKILLS_MAX)
    return SubScore(points, "Skills match" if points >= 15 else None)


def location_score(profile: CandidateProfile, job: JobPosting) -> SubScore:
    if not profile.location or not job.location:
        return SubScore()
    points = similarity(profile.location, job.location) * LOCATION_MAX
    return SubScore(points, "Near you" if points >= 10 else None)


def headline_score(profile: CandidateProfile, job: JobPosting) -> SubScore:
    if not profile.headline:
        return SubScore()
    snippet = (job.description or "")[:DESC_WINDOW]
    best = max(similarity(profile.headline, job.title), similarity(profile.headline, snippet))
    points = best * HEADLINE_MAX
    return SubScore(points, "Matches your profile" if points >= 8 else None)


def experience_score(profile: CandidateProfile, job: JobPosting) -> SubScore:
    snippet = (job.description or "")[:DESC_WINDOW]
    points = 0.0
    for exp in profile.experience or ():
        title_match = similarity(exp.title, job.title)
        if title_match >= 0.5:
            points = max(points, title_match * EXPERIENCE_MAX)
        desc_match = similarity(exp.title, snippet)
        if desc_match >= 0.3:
            points = max(points, desc_match * EXPERIENCE_DESC_MAX)
    return SubScore(points, "Related experience" if points >= 4 else None)


def salary_score(profile: CandidateProfile, job: JobPosting) -> SubScore:
    expected = parse_salary(profile.expected_salary)
    offered = parse_salary(job.salary)
    if not (0 < expected < math.inf and 0 < offered < math.inf):
        return SubScore()
    points = min(expected, offered) / max(expected, offered) * SALARY_MAX
    return SubScore(points, "Salary match" if points >= 3 else None)


def recency_bonus(created_at: int, now: int) -> int:
    """Step bonus for fresh postings; *now* and *created_at* are epoch ms."""
    days = (now - (created_at or 0)) / MS_PER_DAY
    for max_days, bonus in RECENCY_BRACKETS:
        if days < max_days:
            return bonus
    return 0


CALCULATORS = [
    ("skills", skills_score),
    ("location", location_score),
    ("headline", headline_score),
    ("experience", experience_score),
    ("salary", salary_score),
]


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def score_job(job: JobPosting, profile: CandidateProfile, now: int) -> ScoredJob:
    breakdown: dict[str, float] = {}
    reasons: list[str] = []
    for name, calc in CALCULATORS:
        result = calc(profile, job)
        breakdown[name] = result.points
        if result.reason:
            reasons.append(result.reason)
    breakdown["recency"] = float(recency_bonus(job.created_at, now))

    # Not clamped: five sub-scores cap at 100 and recency can add up to 5 more.
    total = round_half_up(sum(breakdown.values()))
    log.debug("Scored %s (%s) → %d %s", job.id, job.title, total, breakdown)
    return ScoredJob(job=job, match_score=total, match_reasons=tuple(reasons), breakdown=breakdown)
