"""Article file loading.

Accepts either a JSON array of article objects (``.json``) or one object
per line (``.jsonl``).  Every record must carry string ``title``,
``body`` and ``author`` fields; anything else is rejected up front so a
bad record never reaches the processing layer.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from articlekit.content import Article
from articlekit.errors import ActionableError

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = ("title", "body", "author")


def load_articles(path: str | Path) -> list[Article]:
    """Read and validate the articles stored at *path*.

    Raises :class:`~articlekit.errors.ActionableError`:
      - INPUT if the file is missing or has an unsupported extension
      - PARSE if the JSON is malformed or the top level is not an array
      - VALIDATION if a record is missing a field or has a non-string one
    """
    filepath = Path(path)
    if not filepath.is_file():
        raise ActionableError.input_file(str(filepath), "file not found")

    suffix = filepath.suffix.lower()
    if suffix == ".json":
        records = _read_json(filepath)
    elif suffix == ".jsonl":
        records = _read_jsonl(filepath)
    else:
        raise ActionableError.input_file(
            str(filepath),
            f"unsupported extension '{filepath.suffix}'",
        )

    articles = [_to_article(record, index) for index, record in enumerate(records)]
    logger.info("Loaded %d articles from %s", len(articles), filepath)
    return articles


def _read_text(filepath: Path) -> str:
    """Read *filepath* as UTF-8, mapping undecodable bytes to a PARSE error."""
    try:
        return filepath.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ActionableError.parse(
            source=str(filepath),
            location=f"byte {exc.start}",
            raw_error=exc.reason,
            suggestion=f"Re-save {filepath} as UTF-8",
        ) from None


def _read_json(filepath: Path) -> list[object]:
    text = _read_text(filepath)
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ActionableError.parse(
            source=str(filepath),
            location=f"line {exc.lineno}, column {exc.colno}",
            raw_error=exc.msg,
        ) from None
    if not isinstance(data, list):
        raise ActionableError.parse(
            source=str(filepath),
            location="top level",
            raw_error=f"expected a JSON array, got {type(data).__name__}",
            suggestion="Wrap the article objects in [ ... ] or use a .jsonl file",
        )
    return data


def _read_jsonl(filepath: Path) -> list[object]:
    records: list[object] = []
    for lineno, line in enumerate(_read_text(filepath).split("\n"), start=1):
        if not line.strip():
            continue
        try:
            records.append(json.loads(line))
        except json.JSONDecodeError as exc:
            raise ActionableError.parse(
                source=str(filepath),
                location=f"line {lineno}",
                raw_error=exc.msg,
            ) from None
    return records


def _to_article(record: object, index: int) -> Article:
    """Convert one decoded record into an :class:`Article`."""
    if not isinstance(record, dict):
        raise ActionableError.validation(
            field_name=f"articles[{index}]",
            reason=f"must be an object, not {type(record).__name__}",
        )
    for name in _REQUIRED_FIELDS:
        value = record.get(name)
        if value is None:
            raise ActionableError.validation(
                field_name=f"articles[{index}].{name}",
                reason="is missing",
                suggestion=f"Add a '{name}' string to article #{index}",
            )
        if not isinstance(value, str):
            raise ActionableError.validation(
                field_name=f"articles[{index}].{name}",
                reason=f"must be a string, not {type(value).__name__}",
            )
    return Article(title=record["title"], body=record["body"], author=record["author"])
