"""Rank a list of job postings for one candidate."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable

from jobfeed.log import get_logger
from jobfeed.models import CandidateProfile, JobPosting, ScoredJob
from jobfeed.scorer import score_job

log = get_logger(__name__)


def now_ms() -> int:
    return int(datetime.now(timezone.utc).timestamp() * 1000)


def rank_jobs(
    jobs: Iterable[JobPosting],
    profile: CandidateProfile | None,
    now: int | None = None,
) -> list[ScoredJob]:
    """Score every job and order them best first.

    Without a profile every job scores 0 and the feed is newest first.
    With one, jobs are ordered by score, then newest first; remaining ties
    keep their input order. *now* (epoch ms) is sampled once per call when
    not given, so all recency comparisons share it.
    """
    jobs = list(jobs)
    if now is None:
        now = now_ms()

    if profile is None:
        result = sorted(
            (ScoredJob(job=j, match_score=0) for j in jobs),
            key=lambda s: -(s.job.created_at or 0),
        )
        log.info("Ranked %d jobs by recency (no profile)", len(result))
        return result

    scored = [score_job(j, profile, now) for j in jobs]
    result = sorted(scored, key=lambda s: (-s.match_score, -(s.job.created_at or 0)))
    log.info(
        "Ranked %d jobs for profile → top score %d",
        len(result), result[0].match_score if result else 0,
    )
    return result
