"""CLI command handlers for articlekit.

Each public ``handle_*`` function corresponds to a CLI subcommand and
encapsulates the wiring, orchestration, and output for that command.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from articlekit.config import (
    DEFAULT_SETTINGS_PATH,
    OUTPUT_FORMATS,
    Settings,
    default_settings,
    load_settings,
)
from articlekit.content import find_article_by_slug
from articlekit.errors import ActionableError
from articlekit.logging import LOG_LEVELS, configure_file_logging, logger, set_console_level
from articlekit.pipeline import ProcessingRunner
from articlekit.text import count_words, slugify


def resolve_settings(args: argparse.Namespace) -> Settings:
    """Load settings for this invocation and apply CLI overrides.

    An explicit ``--settings`` path must exist.  Without one, the default
    ``config/settings.toml`` is used when present, otherwise built-in
    defaults apply.
    """
    if args.settings is not None:
        settings = load_settings(args.settings)
    elif DEFAULT_SETTINGS_PATH.exists():
        settings = load_settings(DEFAULT_SETTINGS_PATH)
    else:
        settings = default_settings()

    excerpt_length = getattr(args, "excerpt_length", None)
    if excerpt_length is not None:
        if excerpt_length < len(settings.processing.suffix):
            raise ActionableError.validation(
                field_name="--excerpt-length",
                reason=(
                    f"is {excerpt_length} — must be >= {len(settings.processing.suffix)}"
                    " (length of the suffix)"
                ),
            )
        settings.processing = replace(settings.processing, excerpt_length=excerpt_length)

    output_dir = getattr(args, "output_dir", None)
    if output_dir is not None:
        settings.output = replace(settings.output, output_dir=output_dir)

    return settings


def handle_process(args: argparse.Namespace) -> None:
    """Process an articles file, print a summary, and export the result."""
    settings = resolve_settings(args)
    runner = ProcessingRunner(settings)

    result = runner.run_file(args.input)
    summary = result.summary

    print(f"\n{'=' * 60}")
    print(" Processing Summary")
    print(f"{'=' * 60}")
    print(f" Articles:           {summary.total_articles}")
    print(f" Total words:        {summary.total_words}")
    print(f" Truncated excerpts: {summary.truncated_excerpts}")
    if summary.slug_collisions:
        print(f" Slug collisions:    {', '.join(summary.slug_collisions)}")
    print(f"{'=' * 60}\n")

    output_path = runner.export(result, args.format)
    print(f"Exported {args.format or settings.output.default_format} → {output_path}")


def handle_find(args: argparse.Namespace) -> None:
    """Process an articles file and look one article up by slug."""
    settings = resolve_settings(args)
    runner = ProcessingRunner(settings)

    result = runner.run_file(args.input)
    article = find_article_by_slug(result.articles, args.slug)
    if article is None:
        print(f"No article found with slug '{args.slug}'")
        sys.exit(1)

    print(f"Title:   {article.title}")
    print(f"Slug:    {article.slug}")
    print(f"Author:  {article.author}")
    print(f"Excerpt: {article.excerpt}")


def handle_slug(args: argparse.Namespace) -> None:
    """Print the slug for the given text."""
    print(slugify(" ".join(args.text)))


def handle_words(args: argparse.Namespace) -> None:
    """Print the word count for the given text."""
    print(count_words(" ".join(args.text)))


_HANDLERS = {
    "process": handle_process,
    "find": handle_find,
    "slug": handle_slug,
    "words": handle_words,
}


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="articlekit",
        description="Slugs, excerpts, and display records for article collections",
    )
    parser.add_argument(
        "--settings",
        type=Path,
        default=None,
        metavar="PATH",
        help=f"Settings TOML file (default: {DEFAULT_SETTINGS_PATH} if present)",
    )
    parser.add_argument(
        "--log-dir",
        type=str,
        default=None,
        metavar="DIR",
        help="Also write a timestamped log file to DIR",
    )
    parser.add_argument(
        "--log-level",
        choices=list(LOG_LEVELS),
        default="INFO",
        type=str.upper,
        help="Minimum level printed to stderr (default: INFO)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # -- process -------------------------------------------------------------
    process_p = sub.add_parser("process", help="Process an articles file and export the result")
    process_p.add_argument("input", type=Path, help="Articles file (.json or .jsonl)")
    process_p.add_argument(
        "--excerpt-length",
        type=int,
        default=None,
        metavar="N",
        help="Maximum excerpt length (default: [processing].excerpt_length)",
    )
    process_p.add_argument(
        "--format",
        choices=list(OUTPUT_FORMATS),
        default=None,
        help="Output format (default: [output].default_format)",
    )
    process_p.add_argument(
        "--output-dir",
        type=str,
        default=None,
        metavar="DIR",
        help="Output directory (default: [output].output_dir)",
    )

    # -- find ----------------------------------------------------------------
    find_p = sub.add_parser("find", help="Look up a processed article by slug")
    find_p.add_argument("input", type=Path, help="Articles file (.json or .jsonl)")
    find_p.add_argument("--slug", type=str, required=True, help="Exact slug to look up")
    find_p.add_argument(
        "--excerpt-length",
        type=int,
        default=None,
        metavar="N",
        help="Maximum excerpt length (default: [processing].excerpt_length)",
    )

    # -- slug ----------------------------------------------------------------
    slug_p = sub.add_parser("slug", help="Print the slug for TEXT")
    slug_p.add_argument("text", nargs="+", help="Text to slugify")

    # -- words ---------------------------------------------------------------
    words_p = sub.add_parser("words", help="Print the word count for TEXT")
    words_p.add_argument("text", nargs="+", help="Text to count")

    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse *argv*, dispatch to the handler, and report actionable errors."""
    parser = build_parser()
    args = parser.parse_args(argv)

    console = set_console_level(args.log_level)
    if args.log_dir:
        configure_file_logging(args.log_dir, level=min(console, logging.INFO))

    try:
        _HANDLERS[args.command](args)
    except ActionableError as exc:
        logger.error("%s failed: %s", args.command, exc.error)
        print(f"Error: {exc.error}", file=sys.stderr)
        if exc.suggestion:
            print(f"  Suggestion: {exc.suggestion}", file=sys.stderr)
        sys.exit(1)
