"""Compose synonym overrides and normalized variants into one candidate list."""
from __future__ import annotations

from typing import List, Optional

from .normalizer import variants
from .synonyms import SynonymTable
from .utils import dedupe_preserve_order


def build_candidates(identifier: str, table: Optional[SynonymTable] = None) -> List[str]:
    """Return the ordered filename stems to try for ``identifier``.

    A synonym override, when present, is always the first candidate; the
    normalized variants follow in their fixed order. No stem appears twice.
    """
    cleaned = (identifier or "").strip()
    if not cleaned:
        return []

    candidates: List[str] = []
    override = table.lookup(cleaned) if table is not None else None
    if override:
        candidates.append(override)
    candidates.extend(variants(cleaned))
    return dedupe_preserve_order(candidates)
