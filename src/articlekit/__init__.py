"""Text utilities and article processing."""

from articlekit.content import (
    Article,
    ProcessedArticle,
    find_article_by_slug,
    process_article,
    process_articles,
)
from articlekit.text import capitalize, count_words, slugify, truncate

__all__ = [
    "Article",
    "ProcessedArticle",
    "capitalize",
    "count_words",
    "find_article_by_slug",
    "process_article",
    "process_articles",
    "slugify",
    "truncate",
]
