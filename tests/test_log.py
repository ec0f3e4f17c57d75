"""Tests for logging setup."""

import logging

from jobfeed import log as jobfeed_log


def test_log_dir_from_env(tmp_path, monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setenv("JOBFEED_LOG_DIR", str(tmp_path / "logs"))

    jobfeed_log._configure()
    try:
        file_handlers = [h for h in root.handlers if isinstance(h, logging.FileHandler)]
        assert len(file_handlers) == 1
        assert file_handlers[0].baseFilename.startswith(str(tmp_path / "logs" / "jobfeed_"))
    finally:
        for handler in root.handlers:
            handler.close()


def test_get_logger_returns_named_logger():
    assert jobfeed_log.get_logger("jobfeed.test").name == "jobfeed.test"
