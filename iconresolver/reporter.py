"""Run the resolution pipeline over an identifier set and render the outcome."""
from __future__ import annotations

import os
import pathlib
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence

from .candidates import build_candidates
from .image_utils import AssetInfo, inspect_asset
from .locator import DEFAULT_TRACE_LIMIT, Found, Missing, ResolutionResult, StorageTier, locate
from .synonyms import SynonymTable
from .utils import get_logger

LOGGER = get_logger(__name__)


@dataclass
class ReportEntry:
    """Resolution outcome for one identifier plus its diagnostic trace."""

    identifier: str
    result: ResolutionResult
    candidates: List[str] = field(default_factory=list)
    asset_info: Optional[AssetInfo] = None
    asset_error: Optional[str] = None

    @property
    def found(self) -> bool:
        return isinstance(self.result, Found)

    @property
    def path(self) -> Optional[pathlib.Path]:
        return self.result.path if isinstance(self.result, Found) else None

    @property
    def matched_stem(self) -> Optional[str]:
        return self.result.stem if isinstance(self.result, Found) else None


@dataclass
class ResolutionReport:
    found: List[ReportEntry] = field(default_factory=list)
    missing: List[ReportEntry] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.found) + len(self.missing)


def resolve_identifier(
    identifier: str,
    table: SynonymTable,
    tiers: Sequence[StorageTier],
    trace_limit: int = DEFAULT_TRACE_LIMIT,
) -> ReportEntry:
    candidates = build_candidates(identifier, table)
    result = locate(candidates, tiers, trace_limit=trace_limit)
    return ReportEntry(identifier=identifier, result=result, candidates=candidates[:trace_limit])


def _attach_asset_info(entry: ReportEntry) -> None:
    if entry.path is None:
        return
    try:
        entry.asset_info = inspect_asset(entry.path)
    except OSError as error:
        LOGGER.warning("Could not read icon for %s at %s: %s", entry.identifier, entry.path, error)
        entry.asset_error = str(error)


def run(
    identifiers: Iterable[str],
    table: SynonymTable,
    tiers: Sequence[StorageTier],
    trace_limit: int = DEFAULT_TRACE_LIMIT,
    inspect: bool = False,
) -> ResolutionReport:
    """Resolve every identifier and partition the results into found and missing.

    Identifiers are sorted before processing so the report is reproducible.
    """
    tier_list = list(tiers)
    report = ResolutionReport()
    for identifier in sorted(set(identifiers)):
        entry = resolve_identifier(identifier, table, tier_list, trace_limit)
        if entry.found:
            if inspect:
                _attach_asset_info(entry)
            report.found.append(entry)
        else:
            report.missing.append(entry)
    LOGGER.info(
        "Resolved %d of %d identifiers (%d missing)",
        len(report.found),
        report.total,
        len(report.missing),
    )
    return report


# ------------------------------------------------------------------
def _display_path(path: pathlib.Path, relative_to: Optional[pathlib.Path]) -> str:
    if relative_to is not None:
        try:
            return os.path.relpath(path, relative_to)
        except ValueError:
            pass
    return str(path)


def _format_trace(candidates: Sequence[str]) -> str:
    return "[" + ", ".join(repr(c) for c in candidates) + "]"


def render_console(
    report: ResolutionReport,
    relative_to: Optional[pathlib.Path] = None,
    max_rows: Optional[int] = None,
) -> str:
    """Render the found/missing listing as plain text."""
    lines: List[str] = [f"Found {report.total} effect ids", ""]

    lines.append(f"-- FOUND ICONS ({len(report.found)}) --")
    for entry in report.found[:max_rows]:
        line = f"{entry.identifier} -> {_display_path(entry.path, relative_to)}"
        if entry.asset_info is not None:
            line += f" ({entry.asset_info.size_label})"
        elif entry.asset_error:
            line += " (unreadable)"
        lines.append(line)

    lines.append("")
    lines.append(f"-- MISSING ICONS ({len(report.missing)}) --")
    for entry in report.missing[:max_rows]:
        lines.append(f"{entry.identifier} candidates: {_format_trace(entry.result.tried)}")
    return "\n".join(lines)


def md_table(headers: List[str], rows: List[List[str]]) -> str:
    """Generate a two-line-header Markdown table."""
    out = [
        " | ".join(headers),
        " | ".join(["---"] * len(headers)),
    ]
    out.extend(" | ".join(cell.replace("|", "\\|") for cell in row) for row in rows)
    return "\n".join(out)


def render_markdown(report: ResolutionReport) -> str:
    """Render missing identifiers and their top candidates as a Markdown document."""
    rows = [
        [entry.identifier, ", ".join(_missing_trace(entry))]
        for entry in report.missing
    ]
    lines = [
        "# Missing Icons",
        "",
        md_table(["Effect ID", "Suggested filenames (top candidates)"], rows),
    ]
    return "\n".join(lines) + "\n"


def _missing_trace(entry: ReportEntry) -> List[str]:
    result = entry.result
    return list(result.tried) if isinstance(result, Missing) else list(entry.candidates)
