"""Job postings served as JSON by a remote job store."""
from __future__ import annotations

import requests

from jobfeed.log import get_logger
from jobfeed.models import JobPosting
from jobfeed.retry import retry
from jobfeed.sources.base import JobSource
from jobfeed.sources.json_file import parse_jobs

log = get_logger(__name__)


class HttpJsonSource(JobSource):
    def __init__(self, url: str, token: str = "", timeout: float = 15.0) -> None:
        self.url = url
        self.token = token
        self.timeout = timeout

    @retry(max_attempts=3, base_delay=1.5, retryable=(requests.RequestException, OSError))
    def fetch(self) -> list[JobPosting]:
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        r = requests.get(self.url, headers=headers, timeout=self.timeout)
        r.raise_for_status()
        jobs = parse_jobs(r.json())
        log.info("Fetched %d jobs from %s", len(jobs), self.url)
        return jobs
