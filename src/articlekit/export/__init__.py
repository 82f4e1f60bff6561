"""Export layer — Markdown, CSV, and JSON output."""

from articlekit.export.csv_export import CSVExporter
from articlekit.export.json_export import JSONExporter
from articlekit.export.markdown import MarkdownExporter

# Format name (as used in settings.toml and on the CLI) → exporter class
EXPORTERS: dict[str, type[CSVExporter | JSONExporter | MarkdownExporter]] = {
    "markdown": MarkdownExporter,
    "csv": CSVExporter,
    "json": JSONExporter,
}

FILE_NAMES: dict[str, str] = {
    "markdown": "articles.md",
    "csv": "articles.csv",
    "json": "articles.json",
}

__all__ = ["EXPORTERS", "FILE_NAMES", "CSVExporter", "JSONExporter", "MarkdownExporter"]
