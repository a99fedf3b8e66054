"""
Blog content: articles and the collection they form.
"""

from .article import Article
from .collection import LoadResult, collect_tags, load_articles, sort_articles

__all__ = ["Article", "LoadResult", "collect_tags", "load_articles", "sort_articles"]
