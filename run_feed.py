#!/usr/bin/env python3
"""Entry point: rank the job feed for the configured candidate profile."""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent))

from jobfeed.log import get_logger

log = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Rank open jobs for a candidate profile")
    parser.add_argument("--profile", type=Path, default=None,
                        help="Profile YAML (default: config/profile.yaml)")
    parser.add_argument("--jobs", type=Path, default=None,
                        help="Jobs JSON export (default: data/jobs.json)")
    parser.add_argument("-q", "--query", default="", help="Keyword filter")
    parser.add_argument("-l", "--location", default="", help="Location filter")
    parser.add_argument("--top", type=int, default=None, help="Number of jobs to show")
    parser.add_argument("--no-report", action="store_true", help="Skip writing the Markdown report")
    parser.add_argument("--json", action="store_true", help="Print the ranked jobs as JSON")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    from jobfeed.feed import run

    result = run(
        profile_path=args.profile,
        jobs_path=args.jobs,
        query=args.query,
        location=args.location,
        top=args.top,
        write_report=not args.no_report,
    )
    if result["jobs_loaded"] == 0:
        log.error("No jobs could be loaded")
        return 1

    if args.json:
        print(json.dumps(result["top"], indent=2, ensure_ascii=False))
        return 0

    log.info("Run complete.")
    log.info("  Jobs loaded: %d", result["jobs_loaded"])
    log.info("  Jobs ranked: %d", result["jobs_ranked"])
    log.info("  Profile used: %s", "yes" if result["profile_used"] else "no (recency only)")
    for i, job in enumerate(result["top"], 1):
        reasons = ", ".join(job["matchReasons"]) or "—"
        log.info("  %2d. [%3d] %s @ %s  (%s)", i, job["matchScore"], job["title"], job["company"], reasons)
    if result["report_path"]:
        log.info("  Report: %s", result["report_path"])
    return 0


if __name__ == "__main__":
    sys.exit(main())
