from .models import CandidateProfile, Experience, InvalidInputError, JobPosting, ScoredJob, SubScore
from .ranking import rank_jobs
from .scorer import parse_salary, score_job
from .similarity import similarity

__all__ = [
    "CandidateProfile", "Experience", "InvalidInputError", "JobPosting", "ScoredJob", "SubScore",
    "rank_jobs", "score_job", "parse_salary", "similarity",
]
