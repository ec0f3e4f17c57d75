"""End-to-end tests for the feed pipeline and CLI."""

import json

import pytest

import run_feed
from jobfeed import feed
from tests.conftest import DAY, HOUR, NOW

JOBS = [
    {"id": "drv", "title": "Delivery Driver", "location": "Pune", "company": "QuickShip",
     "requirements": ["Driving License"], "createdAt": NOW - 10 * DAY},
    {"id": "cook", "title": "Head Cook", "location": "Mumbai", "company": "Spice Route",
     "requirements": ["Cooking"], "createdAt": NOW - HOUR},
    {"id": "closed", "title": "Delivery Driver", "location": "Pune", "status": "inactive",
     "createdAt": NOW},
]


@pytest.fixture
def workspace(tmp_path, monkeypatch):
    jobs_path = tmp_path / "jobs.json"
    jobs_path.write_text(json.dumps(JOBS), encoding="utf-8")
    profile_path = tmp_path / "profile.yaml"
    profile_path.write_text(
        "skills: [Driving License]\nlocation: Pune\nheadline: Delivery Driver\n",
        encoding="utf-8",
    )
    monkeypatch.setattr(feed, "write_feed_report", lambda content: tmp_path / "feed.md")
    monkeypatch.delenv("JOBFEED_JOBS_URL", raising=False)
    monkeypatch.delenv("FEED_STATUS", raising=False)
    return profile_path, jobs_path


class TestRun:
    def test_ranks_active_jobs_for_profile(self, workspace):
        profile_path, jobs_path = workspace
        result = feed.run(profile_path=profile_path, jobs_path=jobs_path, now=NOW)
        assert result["jobs_loaded"] == 3
        assert result["jobs_ranked"] == 2
        assert result["profile_used"] is True
        assert [j["id"] for j in result["top"]] == ["drv", "cook"]
        assert "Skills match" in result["top"][0]["matchReasons"]

    def test_without_profile_orders_by_recency(self, workspace, tmp_path):
        _, jobs_path = workspace
        result = feed.run(profile_path=tmp_path / "missing.yaml", jobs_path=jobs_path, now=NOW)
        assert result["profile_used"] is False
        assert [j["id"] for j in result["top"]] == ["cook", "drv"]
        assert {j["matchScore"] for j in result["top"]} == {0}

    def test_invalid_profile_falls_back_to_recency(self, workspace):
        profile_path, jobs_path = workspace
        profile_path.write_text("skills: Driving License\n", encoding="utf-8")
        result = feed.run(profile_path=profile_path, jobs_path=jobs_path, now=NOW)
        assert result["profile_used"] is False
        assert result["top"][0]["id"] == "cook"

    def test_query_filter(self, workspace):
        profile_path, jobs_path = workspace
        result = feed.run(profile_path=profile_path, jobs_path=jobs_path, query="cook", now=NOW)
        assert [j["id"] for j in result["top"]] == ["cook"]

    def test_no_report(self, workspace):
        profile_path, jobs_path = workspace
        result = feed.run(profile_path=profile_path, jobs_path=jobs_path,
                          write_report=False, now=NOW)
        assert result["report_path"] is None
        assert result["report_preview"].startswith("# Job Feed")

    def test_broken_source_is_skipped(self, workspace, tmp_path):
        profile_path, _ = workspace
        bad = tmp_path / "bad.json"
        bad.write_text("{not json", encoding="utf-8")
        result = feed.run(profile_path=profile_path, jobs_path=bad, now=NOW)
        assert result["jobs_loaded"] == 0
        assert result["top"] == []


class TestCli:
    def test_json_output(self, workspace, capsys):
        profile_path, jobs_path = workspace
        code = run_feed.main(["--profile", str(profile_path), "--jobs", str(jobs_path),
                              "--json", "--no-report"])
        assert code == 0
        out = json.loads(capsys.readouterr().out)
        assert out[0]["id"] == "drv"

    def test_no_jobs_exit_code(self, workspace, tmp_path):
        profile_path, _ = workspace
        bad = tmp_path / "bad.json"
        bad.write_text("[1, 2", encoding="utf-8")
        assert run_feed.main(["--profile", str(profile_path), "--jobs", str(bad), "--no-report"]) == 1

    def test_missing_jobs_file_is_an_error(self, workspace, tmp_path, capsys):
        profile_path, _ = workspace
        code = run_feed.main(["--profile", str(profile_path), "--jobs", str(tmp_path / "typo.json"),
                              "--json", "--no-report"])
        assert code == 1
        assert "mock-" not in capsys.readouterr().out
