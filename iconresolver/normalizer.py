"""Turn a raw identifier into the syntactic filename variants worth probing."""
from __future__ import annotations

import re
from typing import List

from .utils import dedupe_preserve_order

_WHITESPACE = re.compile(r"\s+")
_NOT_SLUG_CHAR = re.compile(r"[^a-z0-9_-]")
_NOT_SLUG_CHAR_ANY_CASE = re.compile(r"[^A-Za-z0-9_-]")


def underscore_slug(value: str) -> str:
    """Replace every character outside ``[A-Za-z0-9_-]`` with ``_`` and lower-case.

    This matches the basenames produced by the icon optimizer, so it is the
    primary normalized key.
    """
    return _NOT_SLUG_CHAR_ANY_CASE.sub("_", value).lower()


def slugify(value: str) -> str:
    """Looser slug: lower-case, whitespace runs to ``-``, drop anything else."""
    value = _WHITESPACE.sub("-", value.lower())
    return _NOT_SLUG_CHAR.sub("", value)


def base_forms(cleaned: str) -> List[str]:
    """The trimmed identifier with its whitespace kept, hyphenated, underscored and removed."""
    return [
        cleaned,
        _WHITESPACE.sub("-", cleaned),
        _WHITESPACE.sub("_", cleaned),
        _WHITESPACE.sub("", cleaned),
    ]


def variants(raw: str) -> List[str]:
    """Return the ordered, de-duplicated filename variants for ``raw``.

    Order: the underscore slug and its ``-``/space swaps, the slugged base
    forms, the lower-cased original, and finally the base forms verbatim.
    An empty or blank input yields an empty list.
    """
    cleaned = (raw or "").strip()
    if not cleaned:
        return []

    primary = underscore_slug(cleaned)
    forms: List[str] = [primary]
    if "_" in primary:
        forms.append(primary.replace("_", "-"))
        forms.append(primary.replace("_", " "))
    if "-" in primary:
        forms.append(primary.replace("-", "_"))
        forms.append(primary.replace("-", " "))

    bases = base_forms(cleaned)
    forms.extend(slugify(form) for form in bases)
    forms.append(cleaned.lower())
    # Case-preserving forms come last for hosts with mismatched filename casing.
    forms.extend(bases)

    return dedupe_preserve_order(forms)
