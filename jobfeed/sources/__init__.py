from pathlib import Path

from .base import JobSource
from .http import HttpJsonSource
from .json_file import JsonFileSource, parse_jobs
from .mock import MockSource

from jobfeed.log import get_logger

log = get_logger(__name__)

__all__ = [
    "JobSource", "HttpJsonSource", "JsonFileSource", "MockSource",
    "parse_jobs", "get_sources",
]


def get_sources(
    jobs_path: Path, env_getter, now: int | None = None, *, explicit_path: bool = False,
) -> list[JobSource]:
    """Sources to read jobs from.

    MockSource is only a fallback for runs with no job store and no export
    configured. An export path the caller named is always registered, even
    when missing, so the failure surfaces instead of demo jobs.
    """
    sources: list[JobSource] = []

    url = env_getter("JOBFEED_JOBS_URL")
    if url:
        sources.append(HttpJsonSource(url, token=env_getter("JOBFEED_JOBS_TOKEN")))
        log.info("Registered source: job store at %s", url)

    if explicit_path or jobs_path.exists():
        sources.append(JsonFileSource(jobs_path))
        log.info("Registered source: %s", jobs_path)

    if not sources:
        sources.append(MockSource(now))
        log.info("No job store or export found — using MockSource")

    return sources
