"""Job postings stored as a JSON export on disk."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from jobfeed.log import get_logger
from jobfeed.models import InvalidInputError, JobPosting
from jobfeed.sources.base import JobSource

log = get_logger(__name__)


def parse_jobs(data: Any) -> list[JobPosting]:
    """Accept either a bare list of job dicts or ``{"jobs": [...]}``."""
    if isinstance(data, dict):
        data = data.get("jobs", [])
    if not isinstance(data, list):
        raise InvalidInputError("job list must be a JSON array")
    return [JobPosting.from_dict(row) for row in data]


class JsonFileSource(JobSource):
    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def fetch(self) -> list[JobPosting]:
        with self.path.open("r", encoding="utf-8") as f:
            data = json.load(f)
        jobs = parse_jobs(data)
        log.info("Loaded %d jobs from %s", len(jobs), self.path.name)
        return jobs
