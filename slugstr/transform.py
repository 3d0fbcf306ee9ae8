"""Codepoint-level slug transforms and the canonical normalize pipeline.

Every function takes text and returns new text; none of them keep state
between calls. :class:`slugstr.slug_string.SlugString` wraps these.
"""

from __future__ import annotations

import re
from collections.abc import Mapping

from slugstr import characters
from slugstr.utf8 import UTF8Backend, get_backend

DEFAULT_MAX_BYTES = 255

_WHITESPACE_RUN = re.compile(r"\s+")
_WHITESPACE = re.compile(r"\s")
_NON_ASCII = re.compile(r"[^\x00-\x7f]")

_STRIP_TABLE = dict.fromkeys(characters.STRIPPABLE)


def approximate_ascii(text: str, overrides: str | Mapping[str, str] | None = None) -> str:
    """Replace accented Latin letters with ASCII look-alikes.

    *overrides* is a locale name ("german", "spanish", ...) or a mapping
    consulted before the default ``latin`` table. Unknown locale names are
    ignored. Characters with no approximation are kept, so this does not
    make the text ASCII on its own:

        approximate_ascii("Jürgen Müller")            -> "Jurgen Muller"
        approximate_ascii("Jürgen Müller", "german")  -> "Juergen Mueller"
        approximate_ascii("日本")                      -> "日本"
    """
    table = _override_table(overrides)
    latin = characters.approximations(characters.DEFAULT_LOCALE) or {}

    def replace(char: str) -> str:
        if char in table:
            return table[char]
        return latin.get(char, char)

    return "".join(replace(char) for char in text)


def word_chars(text: str) -> str:
    """Remove non-word characters (punctuation, symbols, controls).

    Letters, digits, whitespace and the ASCII "-" survive; "_" and
    punctuation from any script do not.
    """
    return text.translate(_STRIP_TABLE)


def clean(text: str) -> str:
    """Turn dashes into spaces, collapse whitespace runs and strip the ends."""
    return _WHITESPACE_RUN.sub(" ", text.replace("-", " ")).strip()


def to_ascii(text: str) -> str:
    """Delete every non-ASCII character. Nothing is transliterated."""
    return _NON_ASCII.sub("", text)


def upcase(text: str, backend: UTF8Backend | None = None) -> str:
    return (backend or get_backend()).upcase(text)


def downcase(text: str, backend: UTF8Backend | None = None) -> str:
    return (backend or get_backend()).downcase(text)


def truncate(text: str, max_chars: int) -> str:
    """Keep the first *max_chars* characters.

    >>> truncate("üéøá", 3)
    'üéø'
    """
    return text[:_check_bound(max_chars)]


def truncate_bytes(text: str, max_bytes: int) -> str:
    """Keep the longest prefix whose UTF-8 encoding fits in *max_bytes*.

    Multi-byte characters are never split, so the result may be shorter
    than *max_bytes*:

    >>> truncate_bytes("üéøá", 3)
    'ü'
    """
    _check_bound(max_bytes)
    encoded = text.encode("utf-8")
    if len(encoded) <= max_bytes:
        return text
    # Dropping the trailing partial sequence leaves a codepoint-aligned prefix.
    return encoded[:max_bytes].decode("utf-8", "ignore")


def with_dashes(text: str) -> str:
    """Replace every whitespace character with a dash."""
    return _WHITESPACE.sub("-", text)


def normalize(
    text: str,
    ascii: bool = False,
    *,
    locale: str | Mapping[str, str] | None = None,
    max_bytes: int = DEFAULT_MAX_BYTES,
    backend: UTF8Backend | None = None,
) -> str:
    """Run the full slug pipeline.

    Order matters:
    1. Approximate then drop non-ASCII (only if *ascii*)
    2. Clean
    3. Strip non-word characters
    4. Clean again (stripping leaves double spaces behind)
    5. Downcase
    6. Truncate to *max_bytes*
    7. Whitespace to dashes

    Truncation happens before dashing, so a cut that lands on a space
    leaves a trailing dash.
    """
    if ascii:
        text = approximate_ascii(text, locale)
        text = to_ascii(text)
    text = clean(text)
    text = word_chars(text)
    text = clean(text)
    text = downcase(text, backend)
    text = truncate_bytes(text, max_bytes)
    return with_dashes(text)


def _override_table(overrides: str | Mapping[str, str] | None) -> Mapping[str, str]:
    if overrides is None:
        return {}
    if isinstance(overrides, str):
        return characters.approximations(overrides) or {}
    return overrides


def _check_bound(limit: int) -> int:
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 0:
        raise ValueError(f"Truncation bound must be a non-negative integer, got {limit!r}")
    return limit
