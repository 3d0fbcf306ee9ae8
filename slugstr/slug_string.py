"""SlugString: a mutable string wrapper with slug-specific transforms.

Each transform comes in two forms. ``*_inplace`` methods replace the
wrapped text and return it as a plain ``str``; the bare-named methods
leave the receiver alone and return a new SlugString, so calls chain:

    >>> slug = SlugString("hello world")
    >>> slug.with_dashes_inplace()
    'hello-world'
    >>> SlugString("Jürgen Müller").approximate_ascii("german").to_ascii().normalize()
    SlugString('juergen-mueller')
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from slugstr import transform
from slugstr.utf8 import UTF8Backend, get_backend


class SlugString:
    __slots__ = ("_wrapped", "_backend")

    __hash__ = None  # mutable

    def __init__(self, value: Any, *, backend: UTF8Backend | None = None):
        if isinstance(value, SlugString):
            backend = backend or value._backend
            value = value._wrapped
        elif value is None:
            value = ""
        elif not isinstance(value, (str, bytes, bytearray, memoryview)):
            value = str(value)
        self._backend = backend
        self._wrapped = value
        self.tidy_bytes_inplace()
        self.normalize_utf8_inplace()

    @property
    def wrapped_string(self) -> str:
        return self._wrapped

    @property
    def backend(self) -> UTF8Backend:
        """The backend this instance uses, falling back to the global default."""
        return self._backend or get_backend()

    def to_slug(self) -> SlugString:
        return self

    # -- mutating transforms ------------------------------------------------

    def approximate_ascii_inplace(self, overrides: str | Mapping[str, str] | None = None) -> str:
        """Approximate accented Latin letters with ASCII.

        See :func:`slugstr.transform.approximate_ascii`. Non-Latin text and
        punctuation such as "¡" are left alone; follow with
        :meth:`to_ascii_inplace` to drop them.
        """
        return self._replace(transform.approximate_ascii(self._wrapped, overrides))

    def clean_inplace(self) -> str:
        """Dashes to spaces, single spaces, no leading/trailing whitespace."""
        return self._replace(transform.clean(self._wrapped))

    def word_chars_inplace(self) -> str:
        """Drop everything but letters, digits, whitespace and "-"."""
        return self._replace(transform.word_chars(self._wrapped))

    def normalize_inplace(
        self,
        ascii: bool = False,
        *,
        locale: str | Mapping[str, str] | None = None,
        max_bytes: int = transform.DEFAULT_MAX_BYTES,
    ) -> str:
        """Turn the string into a slug.

        Cleans, strips non-word characters, downcases, truncates to
        *max_bytes* bytes and turns whitespace into dashes. With *ascii*,
        approximates (using *locale* overrides) and deletes non-ASCII first.
        """
        return self._replace(
            transform.normalize(
                self._wrapped, ascii, locale=locale, max_bytes=max_bytes, backend=self.backend,
            )
        )

    def to_ascii_inplace(self) -> str:
        return self._replace(transform.to_ascii(self._wrapped))

    def truncate_inplace(self, max_chars: int) -> str:
        return self._replace(transform.truncate(self._wrapped, max_chars))

    def truncate_bytes_inplace(self, max_bytes: int) -> str:
        """Truncate to at most *max_bytes* UTF-8 bytes without splitting characters.

        Handy for values that must fit a byte-limited database column.
        """
        return self._replace(transform.truncate_bytes(self._wrapped, max_bytes))

    def with_dashes_inplace(self) -> str:
        return self._replace(transform.with_dashes(self._wrapped))

    def upcase_inplace(self) -> str:
        return self._replace(transform.upcase(self._wrapped, self.backend))

    def downcase_inplace(self) -> str:
        return self._replace(transform.downcase(self._wrapped, self.backend))

    def normalize_utf8_inplace(self) -> str:
        """Apply Unicode canonical composition (NFC)."""
        return self._replace(self.backend.normalize_utf8(self._wrapped))

    def tidy_bytes_inplace(self) -> str:
        """Repair CP1252/Latin-1 bytes into well-formed text."""
        return self._replace(self.backend.tidy_bytes(self._wrapped))

    # -- copying transforms -------------------------------------------------

    def approximate_ascii(self, overrides: str | Mapping[str, str] | None = None) -> SlugString:
        return self._copy_and_apply("approximate_ascii_inplace", overrides)

    def clean(self) -> SlugString:
        return self._copy_and_apply("clean_inplace")

    def word_chars(self) -> SlugString:
        return self._copy_and_apply("word_chars_inplace")

    def normalize(
        self,
        ascii: bool = False,
        *,
        locale: str | Mapping[str, str] | None = None,
        max_bytes: int = transform.DEFAULT_MAX_BYTES,
    ) -> SlugString:
        return self._copy_and_apply("normalize_inplace", ascii, locale=locale, max_bytes=max_bytes)

    def to_ascii(self) -> SlugString:
        return self._copy_and_apply("to_ascii_inplace")

    def truncate(self, max_chars: int) -> SlugString:
        return self._copy_and_apply("truncate_inplace", max_chars)

    def truncate_bytes(self, max_bytes: int) -> SlugString:
        return self._copy_and_apply("truncate_bytes_inplace", max_bytes)

    def with_dashes(self) -> SlugString:
        return self._copy_and_apply("with_dashes_inplace")

    def upcase(self) -> SlugString:
        return self._copy_and_apply("upcase_inplace")

    def downcase(self) -> SlugString:
        return self._copy_and_apply("downcase_inplace")

    def normalize_utf8(self) -> SlugString:
        return self._copy_and_apply("normalize_utf8_inplace")

    def tidy_bytes(self) -> SlugString:
        return self._copy_and_apply("tidy_bytes_inplace")

    # -- str passthroughs ---------------------------------------------------

    def __str__(self) -> str:
        return self._wrapped

    def __repr__(self) -> str:
        return f"SlugString({self._wrapped!r})"

    def __bytes__(self) -> bytes:
        return self._wrapped.encode("utf-8")

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SlugString):
            return self._wrapped == other._wrapped
        if isinstance(other, str):
            return self._wrapped == other
        return NotImplemented

    def __len__(self) -> int:
        return len(self._wrapped)

    def __contains__(self, item: str) -> bool:
        return str(item) in self._wrapped

    def __add__(self, other: object) -> SlugString:
        if isinstance(other, (SlugString, str)):
            return SlugString(self._wrapped + str(other), backend=self._backend)
        return NotImplemented

    def __radd__(self, other: object) -> SlugString:
        if isinstance(other, str):
            return SlugString(other + self._wrapped, backend=self._backend)
        return NotImplemented

    # -- internals ----------------------------------------------------------

    def _replace(self, value: str) -> str:
        self._wrapped = value
        return value

    def _copy_and_apply(self, method: str, *args: Any, **kwargs: Any) -> SlugString:
        """Run the mutating *method* on a copy of this instance and return the copy."""
        copy = SlugString(self)
        getattr(copy, method)(*args, **kwargs)
        return copy
