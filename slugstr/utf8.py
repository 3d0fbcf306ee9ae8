"""UTF-8 support backends: byte tidying, composition and case mapping.

Every SlugString goes through a backend on construction, so the backend is
what guarantees the wrapped text is always well-formed.
"""

from __future__ import annotations

import codecs
import functools
import re
import unicodedata
from typing import Protocol

REPLACEMENT_CHARACTER = "\ufffd"
TIDY_ERRORS = "slugstr-cp1252"

# Byte value -> CP1252 character. 0xA0-0xFF coincide with Latin-1; the five
# bytes CP1252 leaves undefined map to U+FFFD.
_CP1252 = tuple(bytes([b]).decode("cp1252", "replace") for b in range(256))

# Lone surrogates; U+DC80-U+DCFF are bytes smuggled in by "surrogateescape".
_SURROGATES = re.compile("[\ud800-\udfff]")


def _repair_cp1252(exc: UnicodeError) -> tuple[str, int]:
    """Decode error handler reading undecodable bytes as CP1252."""
    if not isinstance(exc, UnicodeDecodeError):
        raise exc
    bad = exc.object[exc.start:exc.end]
    return "".join(_CP1252[b] for b in bad), exc.end


codecs.register_error(TIDY_ERRORS, _repair_cp1252)


def _repair_surrogate(match: re.Match) -> str:
    point = ord(match.group(0))
    if 0xDC80 <= point <= 0xDCFF:
        return _CP1252[point - 0xDC00]
    return REPLACEMENT_CHARACTER


def tidy_bytes(value: bytes | bytearray | memoryview | str) -> str:
    """Return well-formed text for *value*, repairing CP1252/Latin-1 bytes.

    Valid UTF-8 is decoded untouched. Bytes that are not part of a valid
    UTF-8 sequence are read as CP1252, so ``b"caf\\xe9"`` becomes
    ``"café"``. For ``str`` input only lone surrogates need repair: escaped
    bytes (U+DC80-U+DCFF) go through the same CP1252 mapping, any other
    surrogate becomes U+FFFD.
    """
    if isinstance(value, str):
        if _SURROGATES.search(value) is None:
            return value
        return _SURROGATES.sub(_repair_surrogate, value)
    return bytes(value).decode("utf-8", TIDY_ERRORS)


class UTF8Backend(Protocol):
    name: str

    def tidy_bytes(self, value: bytes | str) -> str: ...

    def normalize_utf8(self, text: str) -> str: ...

    def upcase(self, text: str) -> str: ...

    def downcase(self, text: str) -> str: ...


class UnicodedataBackend:
    """Default backend on top of :mod:`unicodedata` and :mod:`codecs`."""

    name = "unicodedata"

    def tidy_bytes(self, value: bytes | str) -> str:
        return tidy_bytes(value)

    def normalize_utf8(self, text: str) -> str:
        return unicodedata.normalize("NFC", text)

    def upcase(self, text: str) -> str:
        return text.upper()

    def downcase(self, text: str) -> str:
        return text.lower()

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class CachingBackend(UnicodedataBackend):
    """Default behaviour, memoizing composition and case mapping per string.

    Pays off when the same titles are slugged over and over, e.g. in batch
    jobs over a catalogue with repeated names.
    """

    name = "cached"

    def __init__(self, maxsize: int = 4096):
        self.maxsize = maxsize
        self.normalize_utf8 = functools.lru_cache(maxsize)(super().normalize_utf8)
        self.upcase = functools.lru_cache(maxsize)(super().upcase)
        self.downcase = functools.lru_cache(maxsize)(super().downcase)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(maxsize={self.maxsize})"


BACKENDS: dict[str, type[UnicodedataBackend]] = {
    UnicodedataBackend.name: UnicodedataBackend,
    CachingBackend.name: CachingBackend,
}

_default_backend: UTF8Backend = UnicodedataBackend()


def get_backend() -> UTF8Backend:
    """Return the process-wide default backend."""
    return _default_backend


def set_backend(backend: UTF8Backend) -> None:
    """Replace the process-wide default backend. Call at startup."""
    global _default_backend
    _default_backend = backend


def backend_for(name: str) -> UTF8Backend:
    """Instantiate a built-in backend by name."""
    try:
        return BACKENDS[name]()
    except KeyError:
        raise ValueError(
            f"Unknown backend {name!r} (expected one of: {', '.join(sorted(BACKENDS))})"
        ) from None
