"""Resolve effect identifiers to icon assets despite drifting filename conventions."""

from .normalizer import base_forms, slugify, underscore_slug, variants
from .synonyms import (
    BUILTIN_SYNONYMS,
    SynonymTable,
    build_synonym_table,
    load_synonym_source,
    merge_synonyms,
    parse_synonym_source,
    write_synonym_document,
)
from .candidates import build_candidates
from .locator import Found, Missing, StorageTier, default_storage_tiers, locate
from .image_utils import AssetInfo, inspect_asset
from .models import FuzzySuggestion, ResolverConfig, TierConfig, load_config
from .identifiers import load_identifiers
from .reporter import ReportEntry, ResolutionReport, render_console, render_markdown, run
from .fuzzy import exact_suggestions, pending_additions, rank_matches, similarity, suggest
from .utils import PipelineError
from .cli import app, main

__all__ = [
    "base_forms",
    "slugify",
    "underscore_slug",
    "variants",
    "BUILTIN_SYNONYMS",
    "SynonymTable",
    "build_synonym_table",
    "load_synonym_source",
    "merge_synonyms",
    "parse_synonym_source",
    "write_synonym_document",
    "build_candidates",
    "Found",
    "Missing",
    "StorageTier",
    "default_storage_tiers",
    "locate",
    "AssetInfo",
    "inspect_asset",
    "FuzzySuggestion",
    "ResolverConfig",
    "TierConfig",
    "load_config",
    "load_identifiers",
    "ReportEntry",
    "ResolutionReport",
    "render_console",
    "render_markdown",
    "run",
    "exact_suggestions",
    "pending_additions",
    "rank_matches",
    "similarity",
    "suggest",
    "PipelineError",
    "app",
    "main",
]
