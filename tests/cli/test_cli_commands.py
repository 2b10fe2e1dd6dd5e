"""Tests for the trendcraft CLI commands."""

import json
import logging

import pytest
from typer.testing import CliRunner

from trendcraft.cli.app import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def log_dir(monkeypatch, tmp_path):
    """Send CLI log files to a temp dir and restore loggers afterwards."""
    monkeypatch.setenv("TRENDCRAFT_LOG_DIR", str(tmp_path))
    root_level = logging.getLogger().level
    yield tmp_path
    logging.getLogger().setLevel(root_level)
    for name in ("ai_calls", "content_generator"):
        logger = logging.getLogger(name)
        for handler in logger.handlers:
            handler.close()
        logger.handlers = []
        logger.propagate = True


class TestGenerateCommand:
    """Test `trendcraft generate`."""

    def test_offline_json(self):
        result = runner.invoke(app, ["generate", "coffee", "--tone", "humorous", "--offline", "--json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["platform"] == "twitter"
        assert data["usedFallback"] is True
        assert "coffee" in data["content"]
        assert 2 <= len(data["hashtags"]) <= 5
        assert 0 <= data["viralScore"] <= 100

    def test_offline_no_hashtags(self):
        result = runner.invoke(app, ["generate", "coffee", "--offline", "--json", "--no-hashtags"])

        assert result.exit_code == 0
        assert json.loads(result.stdout)["hashtags"] == []

    def test_offline_rich_output(self):
        result = runner.invoke(app, ["generate", "coffee", "-p", "linkedin", "--offline"])

        assert result.exit_code == 0
        assert "Viral score" in result.stdout
        assert "template fallback" in result.stdout

    def test_unknown_platform_warns(self):
        result = runner.invoke(app, ["generate", "coffee", "-p", "bluesky", "--offline"])

        assert result.exit_code == 0
        assert "Unknown platform 'bluesky'" in result.stdout

    def test_blank_topic_fails(self):
        result = runner.invoke(app, ["generate", "   ", "--offline"])

        assert result.exit_code == 1
        assert "Invalid request" in result.stdout

    def test_fallback_written_to_log_file(self, log_dir):
        runner.invoke(app, ["generate", "coffee", "--offline", "--json"])

        log_text = (log_dir / "content_generator.log").read_text(encoding="utf-8")
        assert "FALLBACK | reason:no_provider" in log_text


class TestScoreCommand:
    """Test `trendcraft score`."""

    def test_score_with_breakdown(self):
        result = runner.invoke(app, ["score", "Is AI the future? Yes!!! #AI"])

        assert result.exit_code == 0
        assert "Viral score: 78" in result.stdout
        assert "question" in result.stdout


class TestHashtagsCommand:
    """Test `trendcraft hashtags`."""

    def test_instagram_business(self):
        result = runner.invoke(app, ["hashtags", "Remote Work", "-p", "instagram", "-c", "business"])

        assert result.exit_code == 0
        assert result.stdout.startswith("#RemoteWork")
        assert "11/11 optimal hashtags" in result.stdout


class TestPlatformCommand:
    """Test `trendcraft platform`."""

    def test_known_platform(self):
        result = runner.invoke(app, ["platform", "tiktok"])

        assert result.exit_code == 0
        assert "TikTok Limits" in result.stdout
        assert "2200" in result.stdout

    def test_unknown_platform_shows_defaults(self):
        result = runner.invoke(app, ["platform", "bluesky"])

        assert result.exit_code == 0
        assert "Unknown platform 'bluesky'" in result.stdout
        assert "280" in result.stdout


class TestNextRunCommand:
    """Test `trendcraft next-run`."""

    def test_weekly(self):
        result = runner.invoke(app, ["next-run", "2024-01-01", "weekly", "--now", "2024-01-20"])

        assert result.exit_code == 0
        assert "Next weekly run: 2024-01-22T00:00:00" in result.stdout

    def test_ended_schedule(self):
        result = runner.invoke(
            app, ["next-run", "2024-01-01", "weekly", "--now", "2024-01-20", "--end", "2024-01-21"]
        )

        assert result.exit_code == 0
        assert "No further occurrences" in result.stdout

    def test_invalid_timestamp(self):
        result = runner.invoke(app, ["next-run", "someday", "daily"])

        assert result.exit_code == 1
        assert "Unrecognised timestamp" in result.stdout

    def test_mixed_timezones(self):
        result = runner.invoke(app, ["next-run", "2024-01-01T00:00:00Z", "daily", "--now", "2024-01-05"])

        assert result.exit_code == 1
        assert "timezone" in result.stdout

    def test_invalid_period(self):
        result = runner.invoke(app, ["next-run", "2024-01-01", "yearly"])

        assert result.exit_code != 0
