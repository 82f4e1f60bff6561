"""Shared text-processing utilities.

Pure functions with no domain dependencies — safe to import from any
layer (CLI, pipeline, export).  Word characters are ASCII-only while any
Unicode whitespace counts as a separator, so a slug never contains
anything outside ``[a-z0-9-]``.
"""

from __future__ import annotations

import re

from articlekit.errors import ActionableError

DEFAULT_SUFFIX = "..."

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9_\s-]")
_SEPARATOR_RUNS = re.compile(r"[\s_-]+")


def slugify(text: str) -> str:
    """Convert *text* to a URL-safe slug.

    Lowercases, trims, strips everything that is not an ASCII word character,
    whitespace or hyphen, collapses whitespace/underscore/hyphen runs to
    single hyphens, and trims leading/trailing hyphens.

    >>> slugify("Hello, World!")
    'hello-world'
    >>> slugify("Ten Tips for Better Sourdough (2nd Edition)")
    'ten-tips-for-better-sourdough-2nd-edition'
    """
    slug = text.lower().strip()
    slug = _UNSAFE_CHARS.sub("", slug)
    slug = _SEPARATOR_RUNS.sub("-", slug)
    return slug.strip("-")


def truncate(text: str, max_length: int, suffix: str = DEFAULT_SUFFIX) -> str:
    """Bound *text* to at most *max_length* characters.

    Text that already fits is returned unchanged.  Longer text is cut so
    that the result, *suffix* included, is exactly *max_length* long.

    Raises :class:`~articlekit.errors.ActionableError` (VALIDATION) when
    the text must be cut but *suffix* alone is longer than *max_length*.

    >>> truncate("Hello World", 8)
    'Hello...'
    """
    if len(text) <= max_length:
        return text
    keep = max_length - len(suffix)
    if keep < 0:
        raise ActionableError.validation(
            field_name="max_length",
            reason=f"is {max_length} — must be >= {len(suffix)} (length of suffix {suffix!r})",
            suggestion="Use a max_length at least as long as the truncation suffix",
        )
    return text[:keep] + suffix


def capitalize(text: str) -> str:
    """Uppercase the first character and lowercase the rest.

    >>> capitalize("hELLO")
    'Hello'
    """
    if not text:
        return ""
    return text[0].upper() + text[1:].lower()


def count_words(text: str) -> int:
    """Count whitespace-delimited tokens in *text*."""
    return len(text.split())
