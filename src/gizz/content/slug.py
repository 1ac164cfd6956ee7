"""
Title to URL slug conversion.

Album pages live at ``/albums/<slug>``. When a page only knows a display
title (e.g. a "next album" recommendation), the link target is computed
with :func:`kebabify`.
"""

from __future__ import annotations

import re
import unicodedata

_SEPARATORS = re.compile(r"-+")
_NOT_WORD = re.compile(r"[^A-Za-z0-9\s]")
_WHITESPACE = re.compile(r"\s+")


def kebabify(text: str) -> str:
    """Convert a title to a lowercase, hyphen-separated slug.

    Accents are folded to their ASCII base letter and characters without one
    are dropped. Punctuation is removed outright (``&`` included, there is no
    "and" substitution); hyphens act as word separators. Non-string input
    yields an empty string.

    Examples:
        >>> kebabify("Flying Microtonal Banana")
        'flying-microtonal-banana'
        >>> kebabify("I'm In Your Mind Fuzz")
        'im-in-your-mind-fuzz'
        >>> kebabify("K.G.")
        'kg'
    """
    if not isinstance(text, str):
        return ""

    normalized = unicodedata.normalize("NFKD", text)
    ascii_text = normalized.encode("ascii", "ignore").decode("ascii")

    slug = _SEPARATORS.sub(" ", ascii_text)
    slug = _NOT_WORD.sub("", slug)
    slug = _WHITESPACE.sub("-", slug.strip())
    return slug.lower().strip("-")


def is_slug(value: str) -> bool:
    """Return True if *value* is already a non-empty canonical slug."""
    return bool(value) and kebabify(value) == value
