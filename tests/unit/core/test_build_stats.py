"""
Tests for BuildStats and CLI logger setup.
"""
import pytest
from datetime import datetime, timedelta

from lifeblog.core.cli import BuildStats, setup_logger
from lifeblog.core.logging_manager import BlogLogger


class TestBuildStats:
    """Tests for the BuildStats dataclass."""

    def test_defaults_are_zero(self) -> None:
        stats = BuildStats()
        assert stats.pages_written == 0
        assert stats.errors == 0
        assert stats.failed == []

    def test_negative_counts_rejected(self) -> None:
        with pytest.raises(ValueError, match="pages_written"):
            BuildStats(pages_written=-1)

    def test_record_error(self) -> None:
        """Each failure is counted and its source remembered."""
        stats = BuildStats()
        stats.record_error("content/blog/bad.md")
        stats.record_error("content/blog/worse.md")
        assert stats.errors == 2
        assert stats.failed == ["content/blog/bad.md", "content/blog/worse.md"]

    def test_finish_freezes_duration(self) -> None:
        """After finish() the duration no longer changes."""
        stats = BuildStats(start_time=datetime.now() - timedelta(seconds=2))
        elapsed = stats.finish()
        assert elapsed >= 2
        assert stats.duration() == elapsed
        assert stats.finish() == elapsed

    def test_summary(self) -> None:
        stats = BuildStats(articles_loaded=3, pages_written=4, assets_copied=2)
        stats.finish()
        summary = stats.summary()
        assert summary.startswith("3 articles, 4 pages written, 0 unchanged, 2 assets")
        assert "drafts skipped" not in summary
        assert "0 errors" in summary

    def test_summary_mentions_drafts(self) -> None:
        assert "1 drafts skipped" in BuildStats(drafts_skipped=1).summary()

    def test_summary_mentions_removed_pages(self) -> None:
        assert "2 removed" in BuildStats(pages_removed=2).summary()
        assert "removed" not in BuildStats().summary()

    def test_to_dict(self) -> None:
        stats = BuildStats(articles_loaded=1)
        stats.record_error("x.md")
        data = stats.to_dict()
        assert data["articles_loaded"] == 1
        assert data["errors"] == 1
        assert data["failed"] == ["x.md"]
        assert "duration" in data


class TestSetupLogger:
    """Tests for setup_logger."""

    def test_returns_component_logger(self, tmp_path) -> None:
        logger = setup_logger(tmp_path / "logs", "build")
        try:
            assert isinstance(logger, BlogLogger)
            assert logger.component_name == "build"
            assert (tmp_path / "logs").is_dir()
        finally:
            logger.close()
