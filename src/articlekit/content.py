"""Article records and the field-wise transforms applied to them.

An :class:`Article` is the raw input a hosting application supplies; a
:class:`ProcessedArticle` is the display-ready copy produced from it.
Nothing here holds state — every function builds and returns new values.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING

from articlekit.text import DEFAULT_SUFFIX, capitalize, slugify, truncate

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

DEFAULT_EXCERPT_LENGTH = 100


@dataclass(frozen=True)
class Article:
    """Raw article as supplied by the caller.  Never mutated."""

    title: str
    body: str
    author: str


@dataclass(frozen=True)
class ProcessedArticle:
    """Display record derived from an :class:`Article`.

    ``slug`` only ever contains lowercase ASCII letters, digits and single
    inner hyphens.
    """

    title: str
    slug: str
    excerpt: str
    author: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


def process_article(
    article: Article,
    excerpt_length: int = DEFAULT_EXCERPT_LENGTH,
    *,
    suffix: str = DEFAULT_SUFFIX,
) -> ProcessedArticle:
    """Build the display record for a single article."""
    return ProcessedArticle(
        title=capitalize(article.title),
        slug=slugify(article.title),
        excerpt=truncate(article.body, excerpt_length, suffix),
        author=capitalize(article.author),
    )


def process_articles(
    articles: Iterable[Article],
    excerpt_length: int = DEFAULT_EXCERPT_LENGTH,
    *,
    suffix: str = DEFAULT_SUFFIX,
) -> list[ProcessedArticle]:
    """Process every article, preserving input order and count."""
    return [process_article(a, excerpt_length, suffix=suffix) for a in articles]


def find_article_by_slug(
    articles: Sequence[ProcessedArticle],
    slug: str,
) -> ProcessedArticle | None:
    """Return the first article whose slug equals *slug* exactly, else ``None``.

    When several articles share a slug only the earliest is reachable;
    callers that need unique slugs must deduplicate upstream.
    """
    for article in articles:
        if article.slug == slug:
            return article
    return None


def find_slug_collisions(articles: Sequence[ProcessedArticle]) -> dict[str, int]:
    """Map each slug that occurs more than once to its occurrence count."""
    counts = Counter(a.slug for a in articles)
    return {slug: n for slug, n in counts.items() if n > 1}
