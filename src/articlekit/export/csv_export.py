"""CSV export."""

from __future__ import annotations

import csv
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from articlekit.content import ProcessedArticle
    from articlekit.pipeline.runner import ProcessSummary

logger = logging.getLogger(__name__)

_COLUMNS = ["title", "slug", "author", "excerpt"]


class CSVExporter:
    """Renders processed articles as a CSV file suitable for spreadsheet import."""

    def export(
        self,
        articles: list[ProcessedArticle],
        output_path: str,
        *,
        summary: ProcessSummary | None = None,
    ) -> None:
        """Write a CSV with header row, one row per article in input order.

        The summary has no tabular form and is ignored.
        """
        with open(output_path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(_COLUMNS)

            for a in articles:
                writer.writerow([a.title, a.slug, a.author, a.excerpt])

        logger.debug("Wrote %d CSV rows to %s", len(articles), output_path)
