"""Category helpers."""

from __future__ import annotations

import re

from unidecode import unidecode

from ..models import SLUG_MAX_LENGTH

_UNSAFE_CHARS = re.compile(r"[^a-z0-9\-_]+", re.IGNORECASE)
_NON_DIGIT = re.compile(r"\D")


def parameterize(text: str, separator: str = "-") -> str:
    """Turn free text into a lowercase, ``separator``-delimited URL token.

    Non-ASCII characters are transliterated first, then every run of
    characters outside ``[a-z0-9-_]`` becomes a single separator. Repeated
    separators collapse and leading/trailing ones are dropped.

    Transliteration goes through Unidecode, so scripts without a Latin
    spelling still produce a token: ``"日本"`` becomes ``"ri-ben"``. Rails'
    ``parameterize`` drops such characters and would return ``""`` there.
    """

    ascii_text = unidecode(text)
    token = _UNSAFE_CHARS.sub(separator, ascii_text)
    if separator:
        sep = re.escape(separator)
        token = re.sub(f"{sep}{{2,}}", separator, token)
        token = re.sub(f"^{sep}|{sep}$", "", token)
    return token.lower()


def slug_candidate(name: str, max_length: int = SLUG_MAX_LENGTH) -> str:
    """Derive a slug for a category from its display name.

    Returns an empty string when the name yields nothing usable, including
    tokens made only of digits.
    """

    slug = parameterize(name).replace("_", "-")
    slug = re.sub(r"-{2,}", "-", slug).strip("-")
    slug = slug[:max_length]
    if not _NON_DIGIT.search(slug):
        return ""
    return slug


__all__ = ["parameterize", "slug_candidate"]
