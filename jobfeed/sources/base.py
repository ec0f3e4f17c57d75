from abc import ABC, abstractmethod

from jobfeed.models import JobPosting


class JobSource(ABC):
    """Where job postings come from. Sources fetch; they never rank."""

    @abstractmethod
    def fetch(self) -> list[JobPosting]:
        pass
