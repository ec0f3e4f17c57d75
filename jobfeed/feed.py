"""
Job feed pipeline.

Runs: load profile → fetch jobs → status/search filter → rank → report.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

from jobfeed.config import feed_settings, get_env, jobs_path as default_jobs_path, load_profile
from jobfeed.log import get_logger
from jobfeed.models import CandidateProfile, InvalidInputError, JobPosting
from jobfeed.ranking import now_ms, rank_jobs
from jobfeed.report import build_feed_report, write_feed_report
from jobfeed.search import active_only, filter_jobs
from jobfeed.sources import get_sources

log = get_logger(__name__)


def _fetch_source(source) -> list[JobPosting]:
    name = source.__class__.__name__
    try:
        results = source.fetch()
        log.info("[%s] returned %d jobs", name, len(results))
        return results
    except Exception as exc:
        log.error("[%s] FAILED: %s", name, exc)
        return []


def _load_profile_or_none(path: Path | None) -> CandidateProfile | None:
    try:
        return load_profile(path)
    except InvalidInputError as exc:
        log.error("Invalid profile, ranking by recency only: %s", exc)
        return None


def run(
    *,
    profile_path: Path | None = None,
    jobs_path: Path | None = None,
    query: str = "",
    location: str = "",
    top: int | None = None,
    write_report: bool = True,
    now: int | None = None,
) -> dict[str, Any]:
    settings = feed_settings()
    top_n = top if top is not None else settings["top_n"]
    now = now if now is not None else now_ms()

    profile = _load_profile_or_none(profile_path)

    # 1. Fetch, de-duplicating by id across sources
    all_jobs: list[JobPosting] = []
    seen: set[str] = set()
    explicit_path = jobs_path is not None or bool(get_env("JOBFEED_JOBS"))
    sources = get_sources(jobs_path or default_jobs_path(), get_env, now=now, explicit_path=explicit_path)
    for source in sources:
        for job in _fetch_source(source):
            if job.id not in seen:
                seen.add(job.id)
                all_jobs.append(job)
    log.info("Total unique jobs: %d", len(all_jobs))

    # 2. Filter
    jobs = active_only(all_jobs, settings["status"])
    jobs = filter_jobs(jobs, query=query, location=location)
    if len(jobs) != len(all_jobs):
        log.info("Filtered to %d jobs (status=%s, q=%r, location=%r)",
                 len(jobs), settings["status"], query, location)

    # 3. Rank
    ranked = rank_jobs(jobs, profile, now=now)

    # 4. Report
    report_content = build_feed_report(ranked, now, top=top_n)
    report_path = write_feed_report(report_content) if write_report else None

    log.info(
        "Run complete — loaded=%d, ranked=%d, profile=%s",
        len(all_jobs), len(ranked), "yes" if profile else "no",
    )

    return {
        "jobs_loaded": len(all_jobs),
        "jobs_ranked": len(ranked),
        "profile_used": profile is not None,
        "top": [s.to_dict() for s in ranked[:top_n]],
        "report_path": str(report_path) if report_path else None,
        "report_preview": report_content[:2000] + "..." if len(report_content) > 2000 else report_content,
    }
