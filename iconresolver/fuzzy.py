"""Edit-distance suggestions for identifiers the resolver cannot match.

Suggestions are written out for a human to review and fold into a synonym
file; they are never consulted by the resolver directly.
"""
from __future__ import annotations

import os
import pathlib
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Set

from .models import FuzzySuggestion
from .synonyms import normalize_lookup_key
from .utils import get_logger

LOGGER = get_logger(__name__)

IMAGE_EXTENSIONS = {".png", ".webp", ".svg", ".jpg", ".jpeg"}
MIN_SCORE = 0.6
HIGH_SCORE = 0.82

_NON_ALNUM = re.compile(r"[^a-z0-9]")


@dataclass(frozen=True)
class Match:
    stem: str
    score: float
    distance: int


def normalize_key(value: str) -> str:
    return _NON_ALNUM.sub("", (value or "").lower())


def levenshtein(a: str, b: str) -> int:
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)

    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            cost = 0 if char_a == char_b else 1
            current.append(min(previous[j] + 1, current[j - 1] + 1, previous[j - 1] + cost))
        previous = current
    return previous[-1]


def similarity(a: str, b: str) -> float:
    """Score in ``[0, 1]`` between the normalized forms of ``a`` and ``b``."""
    na, nb = normalize_key(a), normalize_key(b)
    if not na or not nb:
        return 0.0
    return 1.0 - levenshtein(na, nb) / max(len(na), len(nb))


def collect_basenames(root: str | os.PathLike[str]) -> List[str]:
    """Recursively gather the stems of every image file below ``root``."""
    directory = pathlib.Path(root)
    if not directory.is_dir():
        LOGGER.warning("Icon directory %s does not exist", directory)
        return []

    stems: Set[str] = set()
    for path in directory.rglob("*"):
        if path.name.startswith(".") or not path.is_file():
            continue
        if path.suffix.lower() in IMAGE_EXTENSIONS:
            stems.add(path.stem)
    return sorted(stems)


def rank_matches(identifier: str, basenames: Iterable[str], top: int = 5) -> List[Match]:
    """Best-first matches for ``identifier``; ties are broken by stem."""
    target = normalize_key(identifier)
    matches: List[Match] = []
    for stem in basenames:
        key = normalize_key(stem)
        if not key or not target:
            continue
        distance = levenshtein(target, key)
        score = 1.0 - distance / max(len(target), len(key))
        matches.append(Match(stem=stem, score=score, distance=distance))
    matches.sort(key=lambda m: (-m.score, m.distance, m.stem))
    return matches[:top]


def suggest(
    identifiers: Iterable[str],
    basenames: Iterable[str],
    table: Optional[Mapping] = None,
    min_score: float = MIN_SCORE,
    high_score: float = HIGH_SCORE,
) -> List[FuzzySuggestion]:
    """Propose the closest icon stem for every identifier not already in ``table``.

    A suggestion is kept when its score reaches ``min_score`` and flagged high
    confidence at ``high_score`` or when it is a single edit away.
    """
    stems = list(basenames)
    existing = table or {}
    suggestions: List[FuzzySuggestion] = []
    for identifier in sorted(set(identifiers)):
        if normalize_lookup_key(identifier) in existing:
            continue
        ranked = rank_matches(identifier, stems, top=1)
        if not ranked:
            continue
        best = ranked[0]
        high = best.score >= high_score or best.distance <= 1
        if best.score < min_score and not high:
            LOGGER.debug("No suggestion for %s (best %s at %.2f)", identifier, best.stem, best.score)
            continue
        suggestions.append(
            FuzzySuggestion(
                identifier=identifier,
                icon=best.stem,
                score=round(best.score, 4),
                distance=best.distance,
                high=high,
            )
        )
    return suggestions


def exact_suggestions(identifiers: Iterable[str], basenames: Iterable[str]) -> Dict[str, str]:
    """Map identifiers to the first stem sharing their normalized key."""
    by_key: Dict[str, str] = {}
    for stem in sorted(basenames):
        by_key.setdefault(normalize_key(stem), stem)
    by_key.pop("", None)

    found: Dict[str, str] = {}
    for identifier in sorted(set(identifiers)):
        stem = by_key.get(normalize_key(identifier))
        if stem:
            found[identifier] = stem
    return found


def suggestions_to_mapping(
    suggestions: Iterable[FuzzySuggestion], high_only: bool = False
) -> Dict[str, str]:
    return {s.identifier: s.icon for s in suggestions if s.high or not high_only}


def pending_additions(suggestions: Mapping, table: Mapping) -> Dict[str, str]:
    """Suggested entries whose key is not yet present in ``table``."""
    return {
        key: value
        for key, value in suggestions.items()
        if normalize_lookup_key(key) not in table
    }
