#!/usr/bin/env python3
"""
exceptions.py
--------------------
Custom exception classes for the lifeblog project.

Exception Hierarchy:
    Exception (built-in)
    └── BlogError - Base for every lifeblog error
        ├── ConfigError - Site configuration could not be loaded
        ├── ValidationError - Data validation failures
        ├── ContentError - Base for article content errors
        │   ├── ArticleParseError - Front matter could not be parsed
        │   └── ArticleValidationError - Front matter is missing or invalid
        ├── BuildError - Site build failures
        ├── EmbedError - Embedded module bridge misuse
        └── StorageUnavailableError - Browser storage access is blocked

Usage:
    from lifeblog.core.exceptions import ArticleParseError, BuildError

    try:
        article = Article.from_file(path)
    except ArticleParseError as e:
        logger.log_error(e, {"file": str(path)})
"""


class BlogError(Exception):
    """
    Base exception for lifeblog errors.

    Catch this to handle any error raised by the generator, or catch
    specific subclasses for more granular handling.
    """

    pass


class ConfigError(BlogError):
    """
    Exception for site configuration failures.

    Raised when ``site.yaml`` exists but cannot be read or parsed, or
    when a configured value has the wrong shape.

    Examples:
        >>> raise ConfigError("site.yaml: expected a mapping at top level")
        >>> raise ConfigError("tag_colors must map tag names to colours")
    """

    pass


class ValidationError(BlogError):
    """
    Exception for data validation failures.

    Raised when a value cannot be normalized:
    - Invalid date formats
    - Missing required fields
    - Type mismatches

    Examples:
        >>> raise ValidationError("Invalid date format: 'next tuesday'")
        >>> raise ValidationError("Required field 'title' missing or empty")
    """

    pass


class ContentError(BlogError):
    """Base exception for article content errors."""

    pass


class ArticleParseError(ContentError):
    """
    Exception for article parsing failures.

    Raised when reading an article file fails:
    - YAML front matter syntax errors
    - Front matter that is not a mapping
    - File reading or encoding errors

    Examples:
        >>> raise ArticleParseError("Cannot parse YAML front matter: invalid syntax")
        >>> raise ArticleParseError("Front matter must be a mapping, got list")
    """

    pass


class ArticleValidationError(ContentError):
    """
    Exception for article metadata validation failures.

    Raised when the front matter parses but does not describe a valid
    article (missing title, unparseable publish date, bad tags).

    Examples:
        >>> raise ArticleValidationError("hello-world: missing required field 'pubDate'")
    """

    pass


class BuildError(BlogError):
    """
    Exception for site build failures.

    Raised when output cannot be written or when a strict build
    encountered article errors.
    """

    pass


class EmbedError(BlogError):
    """
    Exception for embedded module bridge misuse.

    Raised when the page asks the host object for something the loaded
    program has not provided yet, such as fullscreen before readiness.
    """

    pass


class StorageUnavailableError(BlogError):
    """
    Exception for blocked browser storage.

    Raised by the local storage model when storage is disabled. Callers
    treat it as a degraded state, never as a failure.
    """

    pass
