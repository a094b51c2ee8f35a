"""Probe storage tiers for the first existing icon asset."""
from __future__ import annotations

import os
import pathlib
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Union

from .utils import get_logger

LOGGER = get_logger(__name__)

DEFAULT_TRACE_LIMIT = 5


@dataclass(frozen=True)
class StorageTier:
    """One directory and file extension combination to probe."""

    directory: pathlib.Path
    extension: str

    def path_for(self, stem: str) -> pathlib.Path:
        return self.directory / f"{stem}{self.extension}"


@dataclass(frozen=True)
class Found:
    path: pathlib.Path
    stem: str
    tier: StorageTier


@dataclass(frozen=True)
class Missing:
    tried: List[str] = field(default_factory=list)


ResolutionResult = Union[Found, Missing]

# (subdirectory relative to the icons root, extension), most preferred first.
DEFAULT_TIER_LAYOUT = [
    ("optimized/48", ".webp"),
    ("optimized/96", ".webp"),
    ("", ".png"),
    ("", ".svg"),
    ("categories", ".png"),
    ("categories", ".svg"),
]


def default_storage_tiers(icons_root: str | os.PathLike[str]) -> List[StorageTier]:
    root = pathlib.Path(icons_root)
    return [
        StorageTier(root / subdir if subdir else root, extension)
        for subdir, extension in DEFAULT_TIER_LAYOUT
    ]


def path_exists(path: pathlib.Path) -> bool:
    """Existence check that treats environment errors as a miss for this path only."""
    try:
        return path.exists()
    except (OSError, ValueError) as error:
        LOGGER.debug("Treating %s as missing: %s", path, error)
        return False


def locate(
    candidates: Sequence[str],
    tiers: Iterable[StorageTier],
    trace_limit: Optional[int] = DEFAULT_TRACE_LIMIT,
) -> ResolutionResult:
    """Return the first existing asset, searching candidate-major and tier-minor.

    A higher priority candidate in a less preferred tier wins over a lower
    priority candidate in a more preferred tier. On a miss the result carries
    the first ``trace_limit`` candidates (all of them when ``None``).
    """
    tier_list = list(tiers)
    for stem in candidates:
        for tier in tier_list:
            path = tier.path_for(stem)
            LOGGER.debug("Trying %s", path)
            if path_exists(path):
                return Found(path=path, stem=stem, tier=tier)

    tried = list(candidates) if trace_limit is None else list(candidates[:trace_limit])
    return Missing(tried=tried)
