"""Processing runner — articles file → processed records → export.

The ProcessingRunner ties the layers together:

1. Load and validate the articles file
2. Apply the configured excerpt length and suffix to every article
3. Summarise the run (word totals, truncations, slug collisions)
4. Export in the requested format

The runner owns the control flow but delegates all domain logic to
the content layer, the loader, and the exporters.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from articlekit.content import find_slug_collisions, process_articles
from articlekit.errors import ActionableError
from articlekit.export import EXPORTERS, FILE_NAMES
from articlekit.loader import load_articles
from articlekit.text import count_words

if TYPE_CHECKING:
    from articlekit.config import Settings
    from articlekit.content import Article, ProcessedArticle

logger = logging.getLogger(__name__)


@dataclass
class ProcessSummary:
    """Statistics from a processing run, used in export summaries."""

    total_articles: int = 0
    total_words: int = 0
    truncated_excerpts: int = 0
    slug_collisions: dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_articles": self.total_articles,
            "total_words": self.total_words,
            "truncated_excerpts": self.truncated_excerpts,
            "slug_collisions": dict(self.slug_collisions),
        }


@dataclass
class RunResult:
    """Results from a processing run, consumed by exporters and CLI."""

    articles: list[ProcessedArticle] = field(default_factory=list)
    summary: ProcessSummary = field(default_factory=ProcessSummary)


class ProcessingRunner:
    """Top-level orchestrator for turning raw articles into display records."""

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    @property
    def settings(self) -> Settings:
        return self._settings

    def run(self, articles: list[Article]) -> RunResult:
        """Process *articles* with the configured excerpt settings.

        Returns:
            A :class:`RunResult` holding the processed articles in input
            order and summary statistics.
        """
        processing = self._settings.processing
        processed = process_articles(
            articles,
            processing.excerpt_length,
            suffix=processing.suffix,
        )

        collisions = find_slug_collisions(processed)
        for slug, count in collisions.items():
            logger.warning(
                "Slug '%s' is shared by %d articles — only the first is reachable by slug",
                slug,
                count,
            )

        summary = ProcessSummary(
            total_articles=len(processed),
            total_words=sum(count_words(a.body) for a in articles),
            truncated_excerpts=sum(
                1 for raw, done in zip(articles, processed) if done.excerpt != raw.body
            ),
            slug_collisions=collisions,
        )
        logger.info(
            "Processed %d articles (%d truncated excerpts)",
            summary.total_articles,
            summary.truncated_excerpts,
        )
        return RunResult(articles=processed, summary=summary)

    def run_file(self, path: str | Path) -> RunResult:
        """Load articles from *path* and :meth:`run` them."""
        return self.run(load_articles(path))

    def export(self, result: RunResult, fmt: str | None = None) -> Path:
        """Write *result* to the output directory and return the file path.

        *fmt* defaults to ``[output].default_format``.
        Filesystem failures while creating the directory or writing the file
        are raised as :class:`~articlekit.errors.ActionableError`.
        """
        fmt = fmt or self._settings.output.default_format
        if fmt not in EXPORTERS:
            raise ActionableError.validation(
                field_name="format",
                reason=f"'{fmt}' is not one of {', '.join(EXPORTERS)}",
            )

        out_dir = Path(self._settings.output.output_dir)
        output_path = out_dir / FILE_NAMES[fmt]

        try:
            out_dir.mkdir(parents=True, exist_ok=True)
            EXPORTERS[fmt]().export(result.articles, str(output_path), summary=result.summary)
        except OSError as exc:
            raise ActionableError.from_exception(
                exc,
                str(output_path),
                "export",
                suggestion=f"Check that [output].output_dir ({out_dir}) is a writable directory",
            ) from None
        logger.info("Exported %d articles → %s", len(result.articles), output_path)
        return output_path
