"""Global test configuration — shared factories for articles and settings.

This conftest provides:

1. **Record factories** — ``make_article`` builds raw :class:`Article`
   instances with sensible defaults so each test only spells out the
   fields it cares about.

2. **Settings factory** — ``make_settings`` returns a :class:`Settings`
   whose output directory is rooted under ``tmp_path`` so exporters
   never write into the working tree.

3. **Articles-file factory** — ``write_articles`` serialises article
   dicts to a ``.json`` or ``.jsonl`` file under ``tmp_path`` for loader,
   runner, and CLI tests.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from articlekit.config import OutputConfig, ProcessingConfig, Settings
from articlekit.content import Article

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def make_article():
    """Factory fixture — returns a callable that produces an Article.

    Usage::

        def test_something(make_article):
            article = make_article()
            article = make_article(title="Another Post", body="x" * 500)
    """

    def _factory(
        title: str = "Hello world: my first post",
        body: str = "This is the body of my very first post.",
        author: str = "jane doe",
    ) -> Article:
        return Article(title=title, body=body, author=author)

    return _factory


@pytest.fixture
def make_settings(tmp_path: Path):
    """Factory fixture — returns a callable that produces a Settings instance.

    The output directory is always ``tmp_path / "output"``.
    """

    def _factory(
        excerpt_length: int = 100,
        suffix: str = "...",
        default_format: str = "markdown",
    ) -> Settings:
        return Settings(
            processing=ProcessingConfig(excerpt_length=excerpt_length, suffix=suffix),
            output=OutputConfig(
                default_format=default_format,
                output_dir=str(tmp_path / "output"),
            ),
        )

    return _factory


@pytest.fixture
def write_articles(tmp_path: Path):
    """Factory fixture — writes article dicts to disk and returns the path.

    ``.jsonl`` names produce one object per line; anything else is
    written as a single JSON array.
    """

    def _factory(records: list[object], name: str = "articles.json") -> Path:
        path = tmp_path / name
        if path.suffix == ".jsonl":
            path.write_text(
                "".join(json.dumps(r) + "\n" for r in records),
                encoding="utf-8",
            )
        else:
            path.write_text(json.dumps(records), encoding="utf-8")
        return path

    return _factory
