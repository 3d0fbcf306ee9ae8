"""slugstr – turn arbitrary text into URL-safe slugs.

Public API:

* :class:`slugstr.SlugString` – a mutable string wrapper with chainable
  slug transforms (``clean``, ``approximate_ascii``, ``normalize`` ...).
* :func:`slugstr.to_slug` / :func:`slugstr.slugify` – one-call shortcuts.
* :func:`slugstr.register_approximations` – extend the per-locale
  transliteration tables.
"""

from __future__ import annotations

from collections.abc import Mapping
from importlib.metadata import version, PackageNotFoundError
from typing import Any

from slugstr.characters import add_approximations as register_approximations
from slugstr.slug_string import SlugString
from slugstr.transform import DEFAULT_MAX_BYTES
from slugstr.utf8 import UTF8Backend, get_backend, set_backend


def to_slug(value: Any, *, backend: UTF8Backend | None = None) -> SlugString:
    """Wrap *value* in a :class:`SlugString`."""
    return SlugString(value, backend=backend)


def slugify(
    value: Any,
    ascii: bool = False,
    *,
    locale: str | Mapping[str, str] | None = None,
    max_bytes: int = DEFAULT_MAX_BYTES,
) -> str:
    """Return the normalized slug for *value* as a plain string."""
    return SlugString(value).normalize_inplace(ascii, locale=locale, max_bytes=max_bytes)


def __getattr__(name):  # pragma: no cover – lazy, avoids hard failure
    if name == "__version__":
        try:
            return version(__name__)
        except PackageNotFoundError:
            return "0.0.0"
    raise AttributeError(name)


__all__ = [
    "SlugString",
    "get_backend",
    "register_approximations",
    "set_backend",
    "slugify",
    "to_slug",
]
