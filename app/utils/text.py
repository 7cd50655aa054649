"""Text normalization helpers."""

from __future__ import annotations

import re
import unicodedata

_SLUG_MAX_LENGTH = 95
_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(value: str, *, max_length: int = _SLUG_MAX_LENGTH) -> str:
    """Return an ASCII, dash separated slug for ``value``.

    Accents are stripped, every run of characters outside ``[a-z0-9]`` becomes
    a single dash and the result never starts or ends with a dash.
    """

    decomposed = unicodedata.normalize("NFD", (value or "").lower())
    stripped = "".join(char for char in decomposed if not unicodedata.combining(char))
    slug = _NON_ALNUM.sub("-", stripped).strip("-")
    return slug[:max_length].rstrip("-") or "annonce"


__all__ = ["slugify"]
