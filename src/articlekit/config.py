"""Configuration loading and validation.

Loads ``settings.toml`` and validates all fields at startup, before any
article file is read.  Both sections are optional; anything omitted
falls back to the defaults below.

The validated config is exposed as a :class:`Settings` dataclass with
typed fields for each section: ``processing`` and ``output``.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from articlekit.content import DEFAULT_EXCERPT_LENGTH
from articlekit.errors import ActionableError
from articlekit.text import DEFAULT_SUFFIX

# ---------------------------------------------------------------------------
# Config dataclasses
# ---------------------------------------------------------------------------

OUTPUT_FORMATS = ("markdown", "csv", "json")


@dataclass
class ProcessingConfig:
    """Article transform settings from ``[processing]``."""

    excerpt_length: int = DEFAULT_EXCERPT_LENGTH
    suffix: str = DEFAULT_SUFFIX


@dataclass
class OutputConfig:
    """Output settings from ``[output]``."""

    default_format: str = "markdown"
    output_dir: str = "./output"


@dataclass
class Settings:
    """Top-level validated configuration."""

    processing: ProcessingConfig = field(default_factory=ProcessingConfig)
    output: OutputConfig = field(default_factory=OutputConfig)


# ---------------------------------------------------------------------------
# Default settings path
# ---------------------------------------------------------------------------

DEFAULT_SETTINGS_PATH = Path("config/settings.toml")


# ---------------------------------------------------------------------------
# Loading and validation
# ---------------------------------------------------------------------------


def default_settings() -> Settings:
    """Return settings with every field at its default."""
    return Settings()


def load_settings(path: str | Path = DEFAULT_SETTINGS_PATH) -> Settings:
    """Load and validate settings from a TOML file.

    Raises :class:`~articlekit.errors.ActionableError`:
      - CONFIG if the file is missing or a section is not a table
      - VALIDATION if field values are out of range
      - PARSE if the TOML is malformed

    Returns a fully validated :class:`Settings` instance.
    """
    filepath = Path(path)
    if not filepath.exists():
        raise ActionableError.config(
            field_name="settings_path",
            reason=f"Settings file not found: {filepath}",
            suggestion=f"Create {filepath} or copy from config/settings.toml",
        )

    try:
        raw_text = filepath.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ActionableError.parse(
            source=str(filepath),
            location=f"byte {exc.start}",
            raw_error=exc.reason,
            suggestion=f"Re-save {filepath} as UTF-8",
        ) from None

    try:
        data = tomllib.loads(raw_text)
    except tomllib.TOMLDecodeError as exc:
        raise ActionableError.parse(
            source=str(filepath),
            location="TOML syntax",
            raw_error=str(exc),
            suggestion=f"Fix TOML syntax in {filepath}",
        ) from None

    return _validate(data)


def _validate(data: dict[str, object]) -> Settings:
    """Validate raw TOML data and return a Settings instance."""

    # -- processing section --------------------------------------------------
    processing_data = _optional_section(data, "processing")

    suffix = processing_data.get("suffix", DEFAULT_SUFFIX)
    if not isinstance(suffix, str):
        raise ActionableError.validation(
            field_name="processing.suffix",
            reason=f"is {suffix!r} — must be a string",
            suggestion='Set [processing].suffix to a quoted string such as "..."',
        )

    excerpt_length = processing_data.get("excerpt_length", DEFAULT_EXCERPT_LENGTH)
    # bool is an int subclass; reject it explicitly
    if isinstance(excerpt_length, bool) or not isinstance(excerpt_length, int):
        raise ActionableError.validation(
            field_name="processing.excerpt_length",
            reason=f"is {excerpt_length!r} — must be an integer",
            suggestion="Set [processing].excerpt_length to a whole number",
        )
    if excerpt_length < len(suffix):
        raise ActionableError.validation(
            field_name="processing.excerpt_length",
            reason=f"is {excerpt_length} — must be >= {len(suffix)} (length of the suffix)",
            suggestion="Raise [processing].excerpt_length or shorten [processing].suffix",
        )

    processing = ProcessingConfig(excerpt_length=excerpt_length, suffix=suffix)

    # -- output section ------------------------------------------------------
    output_data = _optional_section(data, "output")

    default_format = str(output_data.get("default_format", "markdown"))
    if default_format not in OUTPUT_FORMATS:
        raise ActionableError.validation(
            field_name="output.default_format",
            reason=f"'{default_format}' is not one of {', '.join(OUTPUT_FORMATS)}",
            suggestion="Set [output].default_format to markdown, csv, or json",
        )

    output = OutputConfig(
        default_format=default_format,
        output_dir=str(output_data.get("output_dir", "./output")),
    )

    return Settings(processing=processing, output=output)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _optional_section(data: dict[str, object], name: str) -> dict[str, object]:
    """Return a top-level section, ``{}`` if absent, or raise CONFIG if malformed."""
    section = data.get(name, {})
    if not isinstance(section, dict):
        raise ActionableError.config(
            field_name=name,
            reason=f"[{name}] must be a table, not {type(section).__name__}",
            suggestion=f"Define [{name}] as a TOML table",
        )
    return section
