"""Static character data: the strippable set and the approximation tables.

Approximation maps are keyed by single characters and hold ASCII
replacement strings. ``latin`` is the default map; other named maps act as
overrides on top of it:

    approximations("german")["ü"]   ->  "ue"
    approximations("latin")["ü"]    ->  "u"

Maps can be extended at runtime with :func:`add_approximations`.
"""

from __future__ import annotations

import re
import sys
import threading
import unicodedata
from collections.abc import Mapping

DEFAULT_LOCALE = "latin"


def _codepoints(*spans: int | tuple[int, int]) -> frozenset[int]:
    points: set[int] = set()
    for span in spans:
        if isinstance(span, tuple):
            points.update(range(span[0], span[1] + 1))
        else:
            points.add(span)
    return frozenset(points)


# Kept word separators: tab, LF, CR and the ASCII dash.
_KEEP = frozenset((0x09, 0x0A, 0x0D, 0x2D))

# Punctuation, symbols, controls and format characters in any script.
_STRIP_CATEGORIES = ("P", "S", "Cc", "Cf")


def _by_category() -> frozenset[int]:
    return frozenset(
        point for point in range(sys.maxunicode + 1)
        if point not in _KEEP
        and unicodedata.category(chr(point)).startswith(_STRIP_CATEGORIES)
    )


# Everything classified as punctuation or symbol, plus the ASCII controls
# except tab/LF/CR, the whole C1 and Latin-1 punctuation block (which also
# holds ª º µ ¹ ² ³ ¼ ½ ¾), and a few invisible separators.
STRIPPABLE: frozenset[int] = _by_category() | _codepoints(
    (0x00, 0x08),
    (0x0B, 0x0C),
    (0x0E, 0x1F),
    (0x21, 0x2C),
    (0x2E, 0x2F),
    (0x3A, 0x40),
    (0x5B, 0x60),
    (0x7B, 0x7F),
    (0x80, 0xBF),
    0xD7,
    0xF7,
    (0x200B, 0x200D),
    0x202F,
    0xFEFF,
)

_LATIN = {
    "À": "A", "Á": "A", "Â": "A", "Ã": "A", "Ä": "A", "Å": "A", "Æ": "AE",
    "Ç": "C", "È": "E", "É": "E", "Ê": "E", "Ë": "E", "Ì": "I", "Í": "I",
    "Î": "I", "Ï": "I", "Ð": "D", "Ñ": "N", "Ò": "O", "Ó": "O", "Ô": "O",
    "Õ": "O", "Ö": "O", "Ø": "O", "Ù": "U", "Ú": "U", "Û": "U", "Ü": "U",
    "Ý": "Y", "Þ": "Th", "ß": "ss",
    "à": "a", "á": "a", "â": "a", "ã": "a", "ä": "a", "å": "a", "æ": "ae",
    "ç": "c", "è": "e", "é": "e", "ê": "e", "ë": "e", "ì": "i", "í": "i",
    "î": "i", "ï": "i", "ð": "d", "ñ": "n", "ò": "o", "ó": "o", "ô": "o",
    "õ": "o", "ö": "o", "ø": "o", "ù": "u", "ú": "u", "û": "u", "ü": "u",
    "ý": "y", "þ": "th", "ÿ": "y",
    "Ā": "A", "ā": "a", "Ă": "A", "ă": "a", "Ą": "A", "ą": "a",
    "Ć": "C", "ć": "c", "Ĉ": "C", "ĉ": "c", "Ċ": "C", "ċ": "c", "Č": "C",
    "č": "c", "Ď": "D", "ď": "d", "Đ": "D", "đ": "d",
    "Ē": "E", "ē": "e", "Ĕ": "E", "ĕ": "e", "Ė": "E", "ė": "e", "Ę": "E",
    "ę": "e", "Ě": "E", "ě": "e",
    "Ĝ": "G", "ĝ": "g", "Ğ": "G", "ğ": "g", "Ġ": "G", "ġ": "g", "Ģ": "G",
    "ģ": "g", "Ĥ": "H", "ĥ": "h", "Ħ": "H", "ħ": "h",
    "Ĩ": "I", "ĩ": "i", "Ī": "I", "ī": "i", "Ĭ": "I", "ĭ": "i", "Į": "I",
    "į": "i", "İ": "I", "ı": "i", "Ĳ": "IJ", "ĳ": "ij", "Ĵ": "J", "ĵ": "j",
    "Ķ": "K", "ķ": "k", "ĸ": "k",
    "Ĺ": "L", "ĺ": "l", "Ļ": "L", "ļ": "l", "Ľ": "L", "ľ": "l", "Ŀ": "L",
    "ŀ": "l", "Ł": "L", "ł": "l",
    "Ń": "N", "ń": "n", "Ņ": "N", "ņ": "n", "Ň": "N", "ň": "n", "ŉ": "n",
    "Ŋ": "NG", "ŋ": "ng",
    "Ō": "O", "ō": "o", "Ŏ": "O", "ŏ": "o", "Ő": "O", "ő": "o", "Œ": "OE",
    "œ": "oe",
    "Ŕ": "R", "ŕ": "r", "Ŗ": "R", "ŗ": "r", "Ř": "R", "ř": "r",
    "Ś": "S", "ś": "s", "Ŝ": "S", "ŝ": "s", "Ş": "S", "ş": "s", "Š": "S",
    "š": "s", "Ș": "S", "ș": "s",
    "Ţ": "T", "ţ": "t", "Ť": "T", "ť": "t", "Ŧ": "T", "ŧ": "t", "Ț": "T",
    "ț": "t",
    "Ũ": "U", "ũ": "u", "Ū": "U", "ū": "u", "Ŭ": "U", "ŭ": "u", "Ů": "U",
    "ů": "u", "Ű": "U", "ű": "u", "Ų": "U", "ų": "u",
    "Ŵ": "W", "ŵ": "w", "Ŷ": "Y", "ŷ": "y", "Ÿ": "Y",
    "Ź": "Z", "ź": "z", "Ż": "Z", "ż": "z", "Ž": "Z", "ž": "z",
}

_GERMAN = {"ä": "ae", "ö": "oe", "ü": "ue", "Ä": "Ae", "Ö": "Oe", "Ü": "Ue"}

_SPANISH = {"ñ": "ni", "Ñ": "Ni"}

_SURROGATE = re.compile("[\ud800-\udfff]")

_lock = threading.Lock()
_tables: dict[str, dict[str, str]] = {
    DEFAULT_LOCALE: _LATIN,
    "german": _GERMAN,
    "spanish": _SPANISH,
}


def approximations(name: str) -> dict[str, str] | None:
    """Return the approximation map registered under *name*, if any.

    The returned dict must be treated as read-only; use
    :func:`add_approximations` to change it.
    """
    return _tables.get(name)


def locales() -> list[str]:
    """Names of all registered approximation maps."""
    return sorted(_tables)


def add_approximations(name: str, mapping: Mapping[str | int, str]) -> None:
    """Add entries to the map *name*, creating it if needed.

    Keys are single characters or integer codepoints. Existing entries are
    overwritten. The updated map replaces the old one in a single
    assignment so concurrent lookups see either the old or the new table.
    """
    entries = {_char_key(key): _replacement(value) for key, value in mapping.items()}
    with _lock:
        table = dict(_tables.get(name, {}))
        table.update(entries)
        _tables[name] = table


def _char_key(key: str | int) -> str:
    if isinstance(key, int) and not isinstance(key, bool):
        if not 0 <= key <= 0x10FFFF:
            raise ValueError(f"Codepoint out of range: {key!r}")
        return chr(key)
    if isinstance(key, str) and len(key) == 1:
        return key
    raise ValueError(f"Approximation key must be a single character or codepoint: {key!r}")


def _replacement(value: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"Approximation value must be a string, got {type(value).__name__}")
    if _SURROGATE.search(value):
        raise ValueError(f"Approximation value is not encodable as UTF-8: {value!r}")
    return value
