#!/usr/bin/env python3
"""Command-line interface for resolving effect identifiers to icon files."""

import json
from pathlib import Path
from typing import List, Optional

import typer

from .candidates import build_candidates
from .fuzzy import (
    HIGH_SCORE,
    MIN_SCORE,
    collect_basenames,
    exact_suggestions,
    pending_additions,
    suggest,
    suggestions_to_mapping,
)
from .identifiers import load_identifiers
from .models import ResolverConfig, load_config
from .reporter import render_console, render_markdown, run
from .synonyms import build_synonym_table, merge_synonyms, load_synonym_source, write_synonym_document
from .utils import PipelineError, ensure_directory, get_logger, set_verbose, write_json_file

LOGGER = get_logger(__name__)

app = typer.Typer(help="Resolve effect identifiers to icon assets and report the gaps.")

SAMPLE_IDS = ["maneki-neko", "bait_switch", "tortoiseshell"]


def _settings(
    config_path: Optional[Path],
    icons_root: Optional[Path],
    synonyms: Optional[List[Path]],
    no_builtin: bool,
    trace_limit: Optional[int],
) -> ResolverConfig:
    """Load the config file and apply command-line overrides on top."""
    config = load_config(config_path)
    if icons_root is not None:
        config.icons_root = icons_root.expanduser()
    if synonyms:
        config.synonym_files = [p.expanduser() for p in synonyms]
    if no_builtin:
        config.include_builtin_synonyms = False
    if trace_limit is not None:
        config.trace_limit = trace_limit
    return config


def _fail(error: Exception) -> None:
    LOGGER.error("%s", error)
    typer.echo(f"ERROR: {error}", err=True)
    raise typer.Exit(code=1)


ConfigOption = typer.Option(None, "--config", help="JSON configuration file.")
IconsRootOption = typer.Option(None, "--icons-root", help="Directory holding the icon tree.")
SynonymsOption = typer.Option(
    None,
    "--synonyms",
    help="Synonym JSON file; repeat in precedence order (earlier wins).",
)
NoBuiltinOption = typer.Option(
    False, "--no-builtin", help="Do not merge the built-in synonym table.", show_default=False
)
TraceLimitOption = typer.Option(
    None, "--trace-limit", min=0, help="Candidates kept per entry for diagnostics."
)
VerboseOption = typer.Option(False, "--verbose", help="Enable debug logging.", show_default=False)


@app.command()
def check(
    identifiers_path: Path = typer.Argument(..., help="Identifier source (.json or one id per line)."),
    markdown: Optional[Path] = typer.Option(
        None, "--markdown", help="Write the missing icons as a Markdown table to this path."
    ),
    inspect: bool = typer.Option(
        False, "--inspect", help="Report dimensions of each found raster icon.", show_default=False
    ),
    max_rows: Optional[int] = typer.Option(
        200, "--max-rows", min=1, help="Rows printed per section of the console listing."
    ),
    fail_on_missing: bool = typer.Option(
        False, "--fail-on-missing", help="Exit with status 1 if any icon is missing.", show_default=False
    ),
    config_path: Optional[Path] = ConfigOption,
    icons_root: Optional[Path] = IconsRootOption,
    synonyms: Optional[List[Path]] = SynonymsOption,
    no_builtin: bool = NoBuiltinOption,
    trace_limit: Optional[int] = TraceLimitOption,
    verbose: bool = VerboseOption,
) -> None:
    """Resolve every identifier and list found and missing icons."""
    set_verbose(verbose)
    try:
        config = _settings(config_path, icons_root, synonyms, no_builtin, trace_limit)
        ids = load_identifiers(identifiers_path)
        table = build_synonym_table(config.synonym_files, config.include_builtin_synonyms)
    except PipelineError as error:
        _fail(error)

    report = run(
        ids,
        table,
        config.storage_tiers(),
        trace_limit=config.trace_limit,
        inspect=inspect,
    )
    typer.echo(render_console(report, relative_to=config.icons_root, max_rows=max_rows))

    if markdown is not None:
        ensure_directory(markdown.parent)
        markdown.write_text(render_markdown(report), encoding="utf8")
        typer.echo(f"\nWrote {len(report.missing)} missing entries to {markdown}")

    if fail_on_missing and report.missing:
        raise typer.Exit(code=1)


@app.command()
def candidates(
    names: Optional[List[str]] = typer.Argument(None, help="Identifiers to expand."),
    config_path: Optional[Path] = ConfigOption,
    synonyms: Optional[List[Path]] = SynonymsOption,
    no_builtin: bool = NoBuiltinOption,
    verbose: bool = VerboseOption,
) -> None:
    """Print the ordered candidate stems for sample identifiers."""
    set_verbose(verbose)
    try:
        config = _settings(config_path, None, synonyms, no_builtin, None)
        table = build_synonym_table(config.synonym_files, config.include_builtin_synonyms)
    except PipelineError as error:
        _fail(error)

    for name in names or SAMPLE_IDS:
        typer.echo(f"{name} {json.dumps(build_candidates(name, table))}")


@app.command("suggest")
def suggest_command(
    identifiers_path: Path = typer.Argument(..., help="Identifier source (.json or one id per line)."),
    out: Path = typer.Option(
        Path("icon-mapping-fuzzy.json"), "--out", help="Where to write every suggestion."
    ),
    high_out: Optional[Path] = typer.Option(
        None, "--high-out", help="Optional synonym file with only high-confidence suggestions."
    ),
    exact: bool = typer.Option(
        False, "--exact", help="Only propose stems whose normalized key is identical.", show_default=False
    ),
    min_score: float = typer.Option(MIN_SCORE, "--min-score", min=0.0, max=1.0),
    high_score: float = typer.Option(HIGH_SCORE, "--high-score", min=0.0, max=1.0),
    config_path: Optional[Path] = ConfigOption,
    icons_root: Optional[Path] = IconsRootOption,
    synonyms: Optional[List[Path]] = SynonymsOption,
    no_builtin: bool = NoBuiltinOption,
    verbose: bool = VerboseOption,
) -> None:
    """Propose synonym entries for review from edit distance to existing icon files."""
    set_verbose(verbose)
    try:
        config = _settings(config_path, icons_root, synonyms, no_builtin, None)
        ids = load_identifiers(identifiers_path)
        table = build_synonym_table(config.synonym_files, config.include_builtin_synonyms)
    except PipelineError as error:
        _fail(error)

    basenames = collect_basenames(config.icons_root)

    if exact:
        proposed = pending_additions(exact_suggestions(ids, basenames), table)
        write_synonym_document(out, proposed)
        typer.echo(f"Wrote {len(proposed)} exact suggestions to {out}")
        return

    found = suggest(ids, basenames, table, min_score=min_score, high_score=high_score)
    payload = {
        s.identifier: s.model_dump(exclude={"identifier"}) for s in found
    }
    write_json_file(out, {"suggestions": payload})
    high = suggestions_to_mapping(found, high_only=True)
    typer.echo(f"Found {len(found)} fuzzy suggestions (>={min_score})")
    typer.echo(f"High-confidence (>={high_score} or one edit away): {len(high)}")

    if high_out is not None:
        write_synonym_document(high_out, high)
        typer.echo(f"Wrote high-confidence suggestions to {high_out}")


@app.command("merge-synonyms")
def merge_synonyms_command(
    sources: List[Path] = typer.Argument(..., help="Synonym files, highest precedence first."),
    out: Path = typer.Option(..., "--out", help="Where to write the merged synonym file."),
    with_builtin: bool = typer.Option(
        False, "--with-builtin", help="Merge the built-in table ahead of the sources.", show_default=False
    ),
    verbose: bool = VerboseOption,
) -> None:
    """Merge synonym files, keeping the first value seen for each key."""
    set_verbose(verbose)
    try:
        loaded = [load_synonym_source(path) for path in sources]
    except PipelineError as error:
        _fail(error)

    merged = merge_synonyms(loaded, include_builtin=with_builtin)
    write_synonym_document(out, merged.to_dict())
    typer.echo(f"Wrote merged synonyms to {out} entries={len(merged)}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
