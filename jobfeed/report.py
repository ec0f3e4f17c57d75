"""Render a ranked feed as a Markdown report."""
from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from jobfeed.config import REPORTS_DIR
from jobfeed.log import get_logger
from jobfeed.models import ScoredJob

log = get_logger(__name__)

_MS_PER_HOUR = 60 * 60 * 1000


def format_posted(created_at: int, now: int) -> str:
    """Human label for how long ago a job was posted."""
    hours = (now - created_at) // _MS_PER_HOUR
    days = hours // 24
    if hours < 1:
        return "Just now"
    if hours < 24:
        return f"{hours}h ago"
    if days == 1:
        return "Yesterday"
    if days < 7:
        return f"{days}d ago"
    return datetime.fromtimestamp(created_at / 1000, tz=timezone.utc).strftime("%b %d")


def _clip(text: str, width: int) -> str:
    return text[:width] + ("…" if len(text) > width else "")


def build_feed_report(scored_jobs: list[ScoredJob], now: int, *, top: int = 15) -> str:
    date = datetime.fromtimestamp(now / 1000, tz=timezone.utc).strftime("%Y-%m-%d")
    lines: list[str] = [f"# Job Feed — {date}", ""]

    shown = scored_jobs[:top]
    lines.append(f"**{len(scored_jobs)}** jobs ranked | showing top **{len(shown)}**")
    lines.append("")

    if not shown:
        lines.append("_No jobs found. Check back later for new opportunities._")
        lines.append("")
        return "\n".join(lines)

    lines.append("## Top Matches")
    lines.append("")
    for s in shown:
        job = s.job
        lines.append(f"### {job.title} @ {job.company}")
        lines.append(f"- **Match:** {s.match_score}")
        lines.append(f"- **Location:** {job.location or '—'}")
        if job.salary:
            lines.append(f"- **Salary:** {job.salary}")
        lines.append(f"- **Posted:** {format_posted(job.created_at, now)}")
        if s.match_reasons:
            lines.append(f"- **Why:** {', '.join(s.match_reasons)}")
        if job.requirements:
            lines.append(f"- **Requires:** {', '.join(job.requirements[:2])}")
        lines.append("")

    lines.append("---")
    lines.append("")
    lines.append("## Quick Reference")
    lines.append("")
    lines.append("| # | Role | Company | Location | Match | Posted |")
    lines.append("|--:|------|---------|----------|------:|--------|")
    for i, s in enumerate(shown, 1):
        job = s.job
        loc = job.location.split(",")[0][:18]
        lines.append(
            f"| {i} | {_clip(job.title, 40)} | {_clip(job.company, 22)} | {loc} "
            f"| {s.match_score} | {format_posted(job.created_at, now)} |"
        )
    lines.append("")

    log.info("Built feed report: %d jobs, %d shown", len(scored_jobs), len(shown))
    return "\n".join(lines)


def write_feed_report(content: str, reports_dir: Path | None = None) -> Path:
    reports_dir = reports_dir or REPORTS_DIR
    reports_dir.mkdir(parents=True, exist_ok=True)
    date = datetime.now(timezone.utc).strftime("%Y-%m-%d")
    path = reports_dir / f"feed_{date}.md"
    path.write_text(content, encoding="utf-8")
    log.info("Report written → %s", path)
    return path
