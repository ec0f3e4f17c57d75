"""Load the candidate profile and env configuration."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from jobfeed.log import get_logger
from jobfeed.models import CandidateProfile, InvalidInputError

log = get_logger(__name__)

load_dotenv()

ROOT_DIR: Path = Path(__file__).resolve().parent.parent
CONFIG_DIR: Path = ROOT_DIR / "config"
PROFILE_PATH: Path = CONFIG_DIR / "profile.yaml"
DATA_DIR: Path = ROOT_DIR / "data"
JOBS_PATH: Path = DATA_DIR / "jobs.json"
REPORTS_DIR: Path = ROOT_DIR / "reports"


def get_env(key: str, default: str = "") -> str:
    return os.environ.get(key, default).strip()


def profile_path() -> Path:
    override = get_env("JOBFEED_PROFILE")
    return Path(override) if override else PROFILE_PATH


def jobs_path() -> Path:
    override = get_env("JOBFEED_JOBS")
    return Path(override) if override else JOBS_PATH


def load_profile(path: Path | None = None) -> CandidateProfile | None:
    """Read the YAML profile; None when there is nothing to read.

    A missing or empty file means the feed runs without a profile.
    """
    path = path or profile_path()
    if not path.exists():
        log.warning("No profile at %s — ranking by recency only", path)
        return None

    with open(path, "r", encoding="utf-8") as f:
        data: Any = yaml.safe_load(f)

    if data is None:
        log.warning("Profile %s is empty — ranking by recency only", path)
        return None
    if not isinstance(data, dict):
        raise InvalidInputError(f"{path.name} must contain a mapping")

    # Accept profiles nested under a top-level "profile:" key
    if isinstance(data.get("profile"), dict):
        data = data["profile"]

    return CandidateProfile.from_dict(data)


def feed_settings() -> dict[str, Any]:
    top = get_env("FEED_TOP_N", "15")
    try:
        top_n = int(top)
    except ValueError:
        log.warning("FEED_TOP_N=%r is not an integer, using 15", top)
        top_n = 15
    return {
        "top_n": top_n,
        "status": get_env("FEED_STATUS", "active") or "active",
    }


def ensure_dirs() -> None:
    for d in (DATA_DIR, REPORTS_DIR):
        d.mkdir(parents=True, exist_ok=True)
