"""Status and keyword filters applied to the job list before ranking."""
from __future__ import annotations

from typing import Iterable

from jobfeed.models import JobPosting


def active_only(jobs: Iterable[JobPosting], status: str = "active") -> list[JobPosting]:
    wanted = status.lower()
    return [j for j in jobs if (j.status or "").lower() == wanted]


def matches_search(text: str, query: str) -> bool:
    """True when every word of *query* appears somewhere in *text*."""
    if not query:
        return True
    terms = query.lower().split()
    text_lower = (text or "").lower()
    words = text_lower.split()
    return all(any(term in w for w in words) or term in text_lower for term in terms)


def _searchable_text(job: JobPosting) -> str:
    parts = [job.title, job.company, job.description, " ".join(job.requirements or ())]
    return " ".join(p or "" for p in parts)


def filter_jobs(
    jobs: Iterable[JobPosting], query: str = "", location: str = ""
) -> list[JobPosting]:
    return [
        j for j in jobs
        if matches_search(_searchable_text(j), query) and matches_search(j.location or "", location)
    ]
