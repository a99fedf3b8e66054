#!/usr/bin/env python3
"""
validators.py
--------------------
Normalization helpers for front matter and configuration values.
"""
from __future__ import annotations

from datetime import date, datetime
from typing import Any, Dict, List, Optional, Tuple

from .exceptions import ValidationError


# Accepted textual date layouts, tried in order
DATE_FORMATS = (
    "%Y-%m-%d",
    "%b %d %Y",
    "%B %d %Y",
    "%b %d, %Y",
    "%B %d, %Y",
    "%d %b %Y",
)


class DataValidator:
    """Centralized validation for article and config data."""

    @staticmethod
    def validate_required_fields(
        data: Dict[str, Any], required_fields: List[str]
    ) -> None:
        """
        Validate that required fields are present and non-empty.

        Raises:
            ValidationError: Naming the first missing field
        """
        for field in required_fields:
            if field not in data or data[field] in (None, ""):
                raise ValidationError(f"Required field '{field}' missing or empty")

    @staticmethod
    def normalize_date(date_value: Any) -> Optional[date]:
        """
        Normalize a front matter date to a ``date``.

        PyYAML already turns unquoted ``2024-03-02`` into a date and
        ``2024-03-02T10:00:00`` into a datetime; quoted strings are
        parsed against ISO 8601 and the ``DATE_FORMATS`` layouts
        (``Jul 08 2022``, ``July 8, 2022``...).

        Args:
            date_value: date, datetime, string or None

        Returns:
            Normalized date, or None when the value is None/empty

        Raises:
            ValidationError: If a value is given but is not a valid date

        Examples:
            >>> DataValidator.normalize_date("Jul 08 2022")
            datetime.date(2022, 7, 8)
        """
        if date_value is None or date_value == "":
            return None
        # datetime is a date subclass, check it first
        if isinstance(date_value, datetime):
            return date_value.date()
        if isinstance(date_value, date):
            return date_value
        if isinstance(date_value, str):
            text = " ".join(date_value.strip().split())
            try:
                return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
            except ValueError:
                pass
            for fmt in DATE_FORMATS:
                try:
                    return datetime.strptime(text, fmt).date()
                except ValueError:
                    continue
            raise ValidationError(f"Invalid date: '{date_value}'")
        raise ValidationError(
            f"Invalid date type {type(date_value).__name__}: {date_value!r}"
        )

    @staticmethod
    def normalize_string(value: Any) -> Optional[str]:
        if value is None:
            return None
        text = str(value).strip()
        return text or None

    @staticmethod
    def normalize_bool(value: Any) -> bool:
        """
        Convert YAML-ish truthy values to bool.

        Raises:
            ValidationError: For strings that are neither true nor false words
        """
        if isinstance(value, bool):
            return value
        if value is None:
            return False
        if isinstance(value, (int, float)):
            return value != 0
        if isinstance(value, str):
            if value.lower() in ("true", "1", "yes", "on"):
                return True
            if value.lower() in ("false", "0", "no", "off", ""):
                return False
        raise ValidationError(f"Cannot convert '{value}' to boolean")

    @staticmethod
    def normalize_tags(value: Any) -> Tuple[str, ...]:
        """
        Normalize a tag field into a tuple of unique short labels.

        Accepts a YAML list or a comma-separated string. Tags are
        stripped and lowercased; duplicates collapse keeping the order
        of first appearance.

        Raises:
            ValidationError: For non-string tags or tags containing whitespace

        Examples:
            >>> DataValidator.normalize_tags(["Rust", "axum", "rust"])
            ('rust', 'axum')
            >>> DataValidator.normalize_tags("rust, wasm")
            ('rust', 'wasm')
        """
        if value is None:
            return ()
        if isinstance(value, str):
            items: List[Any] = [part for part in value.split(",")]
        elif isinstance(value, (list, tuple)):
            items = list(value)
        else:
            raise ValidationError(f"Tags must be a list, got {type(value).__name__}")

        tags: List[str] = []
        for item in items:
            if not isinstance(item, (str, int, float)) or isinstance(item, bool):
                raise ValidationError(f"Invalid tag: {item!r}")
            tag = str(item).strip().lower()
            if not tag:
                continue
            if any(ch.isspace() for ch in tag):
                raise ValidationError(f"Tag must be a single short label: '{tag}'")
            if tag not in tags:
                tags.append(tag)
        return tuple(tags)
