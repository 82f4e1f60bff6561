"""JSON export."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from articlekit.content import ProcessedArticle
    from articlekit.pipeline.runner import ProcessSummary

logger = logging.getLogger(__name__)


class JSONExporter:
    """Renders processed articles as a single JSON document.

    Layout::

        {"summary": {...} | null, "articles": [{"title": ..., ...}, ...]}
    """

    def export(
        self,
        articles: list[ProcessedArticle],
        output_path: str,
        *,
        summary: ProcessSummary | None = None,
    ) -> None:
        document = {
            "summary": summary.to_dict() if summary is not None else None,
            "articles": [a.to_dict() for a in articles],
        }
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(document, f, indent=2, ensure_ascii=False)
            f.write("\n")

        logger.debug("Wrote %d articles as JSON to %s", len(articles), output_path)
