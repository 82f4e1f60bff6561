"""Markdown table export."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from articlekit.content import ProcessedArticle
    from articlekit.pipeline.runner import ProcessSummary

logger = logging.getLogger(__name__)


def _cell(value: str) -> str:
    """Make *value* safe for a single Markdown table cell."""
    return value.replace("|", "\\|").replace("\n", " ")


class MarkdownExporter:
    """Renders processed articles as a human-readable Markdown report."""

    def export(
        self,
        articles: list[ProcessedArticle],
        output_path: str,
        *,
        summary: ProcessSummary | None = None,
    ) -> None:
        """Write a Markdown file with run summary and article table.

        Articles keep their input order.
        """
        lines: list[str] = []

        # --- Run summary ---
        if summary is not None:
            lines.append("# Run Summary\n")
            lines.append(f"- **Articles:** {summary.total_articles}")
            lines.append(f"- **Total words:** {summary.total_words}")
            lines.append(f"- **Truncated excerpts:** {summary.truncated_excerpts}")
            if summary.slug_collisions:
                collisions = ", ".join(
                    f"{slug} ({n}×)" for slug, n in summary.slug_collisions.items()
                )
                lines.append(f"- **Slug collisions:** {collisions}")
            lines.append("")

        if not articles:
            lines.append("No articles to display.\n")
            with open(output_path, "w", encoding="utf-8") as f:
                f.write("\n".join(lines))
            return

        # --- Article table ---
        lines.append("## Articles\n")
        lines.append("| # | Title | Author | Slug | Excerpt |")
        lines.append("|---|-------|--------|------|---------|")

        for index, a in enumerate(articles, start=1):
            lines.append(
                f"| {index} "
                f"| {_cell(a.title)} "
                f"| {_cell(a.author)} "
                f"| {a.slug} "
                f"| {_cell(a.excerpt)} |"
            )

        lines.append("")

        with open(output_path, "w", encoding="utf-8") as f:
            f.write("\n".join(lines))
        logger.debug("Wrote %d articles to %s", len(articles), output_path)
