"""Synonym tables mapping identifiers to authoritative icon filename stems."""
from __future__ import annotations

import os
import pathlib
from collections.abc import Mapping
from typing import Any, Dict, Iterable, Iterator, Optional

from .utils import PipelineError, get_logger, load_json_file, write_json_file

LOGGER = get_logger(__name__)

# Registry ids whose icon files were named independently of the id.
BUILTIN_SYNONYMS: Dict[str, str] = {
    "bait_switch": "baitandswitch",
    "stolen_valor": "stolenvalor",
    "creative_accounting": "creativeaccounting",
    "martial_law": "martiallaw",
    "path_least_resistance": "pathofleastresistance",
    "gift_gab": "giftofgab",
    "beginners_luck": "beginnersluck",
    "diplomatic_immunity": "diplomaticimmunity",
    "angel_investor": "angelinvestor",
    "bag_of_holding": "bagofholding",
    "street_smarts": "streetsmarts",
    "legitimate_business": "legitimatebusiness",
    "liquid_assets": "liquidassets",
    "fountain_youth": "fountainofyouth",
    "insider_trading": "insidertrading",
    "daruma_karma": "duarmakarma",  # matches the filename typo
    "golden_parachute": "goldenparachute",
    "alchemist": "alchemy",
    "fog-of-war": "fogofwar",
    "moon-toad-cheeks": "moontoadcheeks",
}


def normalize_lookup_key(value: str) -> str:
    return value.strip().lower()


class SynonymTable(Mapping):
    """Read-only merged lookup of ``lookup key -> filename stem``."""

    def __init__(self, entries: Optional[Mapping[str, str]] = None) -> None:
        self._entries: Dict[str, str] = dict(entries or {})

    def __getitem__(self, key: str) -> str:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"SynonymTable({len(self._entries)} entries)"

    def lookup(self, identifier: str) -> Optional[str]:
        """Return the override stem for ``identifier`` if one is defined."""
        if not identifier:
            return None
        return self._entries.get(normalize_lookup_key(identifier))

    def to_dict(self) -> Dict[str, str]:
        return dict(sorted(self._entries.items()))


def merge_synonyms(
    sources: Iterable[Mapping[str, Any]], include_builtin: bool = True
) -> SynonymTable:
    """Merge synonym sources into one table, earlier sources taking precedence.

    The built-in table is merged ahead of every supplied source unless
    ``include_builtin`` is false. Entries with an empty key or value are skipped.
    """
    ordered = [BUILTIN_SYNONYMS] if include_builtin else []
    ordered.extend(sources)

    merged: Dict[str, str] = {}
    for index, source in enumerate(ordered):
        for raw_key, raw_value in source.items():
            if not isinstance(raw_key, str) or not isinstance(raw_value, str):
                LOGGER.debug("Skipping non-text synonym entry %r in source %d", raw_key, index)
                continue
            key = normalize_lookup_key(raw_key)
            value = raw_value.strip()
            if not key or not value:
                LOGGER.debug("Skipping empty synonym entry %r in source %d", raw_key, index)
                continue
            if key in merged:
                if merged[key] != value:
                    LOGGER.debug(
                        "Keeping %s -> %s over %s from source %d", key, merged[key], value, index
                    )
                continue
            merged[key] = value
    return SynonymTable(merged)


# ------------------------------------------------------------------
def parse_synonym_source(data: Any) -> Dict[str, str]:
    """Extract ``key -> stem`` pairs from a parsed synonym document.

    Accepts a flat mapping, or an object holding a ``synonyms`` or
    ``suggestions`` mapping whose values are stems or ``{"icon": stem}``
    objects. Anything else inside the mapping is dropped.
    """
    if not isinstance(data, dict):
        raise PipelineError("Synonym source must contain a JSON object")

    body: Any = data
    for wrapper in ("synonyms", "suggestions"):
        if isinstance(data.get(wrapper), dict):
            body = data[wrapper]
            break

    pairs: Dict[str, str] = {}
    for key, value in body.items():
        if isinstance(value, dict):
            value = value.get("icon")
        if isinstance(key, str) and isinstance(value, str):
            pairs[key] = value
    return pairs


def load_synonym_source(path: str | os.PathLike[str]) -> Dict[str, str]:
    source_path = pathlib.Path(path)
    pairs = parse_synonym_source(load_json_file(source_path))
    LOGGER.debug("Loaded %d synonym entries from %s", len(pairs), source_path)
    return pairs


def build_synonym_table(
    paths: Iterable[str | os.PathLike[str]], include_builtin: bool = True
) -> SynonymTable:
    """Load every synonym file in order and merge them once for the run."""
    sources = [load_synonym_source(path) for path in paths]
    table = merge_synonyms(sources, include_builtin=include_builtin)
    LOGGER.info("Merged synonym table with %d entries from %d file(s)", len(table), len(sources))
    return table


def write_synonym_document(
    path: str | os.PathLike[str], mapping: Mapping[str, str]
) -> pathlib.Path:
    """Write ``mapping`` as a sorted JSON object that loads back as a synonym source."""
    output_path = write_json_file(path, dict(mapping))
    LOGGER.info("Wrote %d synonym entries to %s", len(mapping), output_path)
    return output_path
