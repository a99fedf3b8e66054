#!/usr/bin/env python3
"""
cli.py
------
Shared CLI helpers and build statistics.

Functions:
    setup_logger: Initialize a BlogLogger for a CLI component

Classes:
    BuildStats: Counters for a site build (pages written, unchanged, errors)

Usage:
    from lifeblog.core.cli import setup_logger, BuildStats

    logger = setup_logger(log_dir, "build")
    stats = BuildStats()
    stats.pages_written += 1
    print(stats.summary())
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

# --- Local imports ---
from lifeblog.core.logging_manager import BlogLogger


# ═══════════════════════════════════════════════════════════════════════════
# LOGGER SETUP
# ═══════════════════════════════════════════════════════════════════════════

def setup_logger(log_dir: Path, component_name: str) -> BlogLogger:
    """
    Setup logging for a CLI command.

    Args:
        log_dir: Base log directory (typically paths.LOG_DIR)
        component_name: Component identifier ('build', 'serve', 'new')

    Returns:
        Configured BlogLogger writing under ``log_dir``
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    return BlogLogger(log_dir, component_name=component_name)


# ═══════════════════════════════════════════════════════════════════════════
# STATISTICS
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class BuildStats:
    """
    Statistics for one site build.

    Attributes:
        articles_loaded: Articles parsed from the content directory
        drafts_skipped: Draft articles left out of the build
        pages_written: HTML pages written (new or changed)
        pages_unchanged: HTML pages whose content was already up to date
        pages_removed: Stale article pages deleted from the output
        assets_copied: Static and public files copied
        errors: Articles or pages that failed
        failed: Source paths of failed articles
        start_time: Build start timestamp
    """
    articles_loaded: int = 0
    drafts_skipped: int = 0
    pages_written: int = 0
    pages_unchanged: int = 0
    pages_removed: int = 0
    assets_copied: int = 0
    errors: int = 0
    failed: List[str] = field(default_factory=list)
    start_time: datetime = field(default_factory=datetime.now)
    _duration_cached: Optional[float] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        for name in (
            "articles_loaded",
            "drafts_skipped",
            "pages_written",
            "pages_unchanged",
            "pages_removed",
            "assets_copied",
            "errors",
        ):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")

    def record_error(self, source: str) -> None:
        self.errors += 1
        self.failed.append(source)

    def finish(self) -> float:
        """Freeze and return the elapsed build time in seconds."""
        if self._duration_cached is None:
            self._duration_cached = (datetime.now() - self.start_time).total_seconds()
        return self._duration_cached

    def duration(self) -> float:
        if self._duration_cached is not None:
            return self._duration_cached
        return (datetime.now() - self.start_time).total_seconds()

    def summary(self) -> str:
        """Get a one-line human readable summary."""
        parts = [
            f"{self.articles_loaded} articles",
            f"{self.pages_written} pages written",
            f"{self.pages_unchanged} unchanged",
            f"{self.assets_copied} assets",
        ]
        if self.pages_removed:
            parts.append(f"{self.pages_removed} removed")
        if self.drafts_skipped:
            parts.append(f"{self.drafts_skipped} drafts skipped")
        parts.append(f"{self.errors} errors")
        parts.append(f"{self.duration():.2f}s")
        return ", ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "articles_loaded": self.articles_loaded,
            "drafts_skipped": self.drafts_skipped,
            "pages_written": self.pages_written,
            "pages_unchanged": self.pages_unchanged,
            "pages_removed": self.pages_removed,
            "assets_copied": self.assets_copied,
            "errors": self.errors,
            "failed": list(self.failed),
            "duration": self.duration(),
        }
