"""Utility helpers shared by the icon resolver."""
from __future__ import annotations

import json
import logging
import os
import pathlib
from typing import Any, Iterable, List, Optional

LOGGER_NAME = "iconresolver"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module level logger that reports through the package handler."""
    package_logger = logging.getLogger(LOGGER_NAME)
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "[%(levelname)s] %(name)s: %(message)s"
        )
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)
        package_logger.setLevel(logging.INFO)
    return logging.getLogger(name or LOGGER_NAME)


def set_verbose(verbose: bool) -> None:
    get_logger().setLevel(logging.DEBUG if verbose else logging.INFO)


def ensure_directory(path: str | os.PathLike[str]) -> pathlib.Path:
    """Create *path* if it does not already exist and return it as Path."""
    directory = pathlib.Path(path)
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def load_json_file(path: str | os.PathLike[str]) -> Any:
    """Load JSON data from *path*, raising :class:`PipelineError` when it cannot be read."""
    file_path = pathlib.Path(path)
    if not file_path.is_file():
        raise PipelineError(f"File not found: {file_path}")
    try:
        with file_path.open("r", encoding="utf8") as handle:
            return json.load(handle)
    except (OSError, ValueError) as error:
        raise PipelineError(f"Could not read {file_path}: {error}") from error


def write_json_file(path: str | os.PathLike[str], payload: Any) -> pathlib.Path:
    output_path = pathlib.Path(path)
    ensure_directory(output_path.parent)
    with output_path.open("w", encoding="utf8") as handle:
        json.dump(payload, handle, indent=2, ensure_ascii=False, sort_keys=True)
        handle.write("\n")
    return output_path


class PipelineError(RuntimeError):
    """Raised when the resolver encounters an unrecoverable configuration error."""


def dedupe_preserve_order(values: Iterable[str]) -> List[str]:
    """Drop empty strings and exact repeats, keeping first occurrences.

    Comparison is case-sensitive because asset filenames are case-sensitive on
    some hosts.
    """
    seen: set[str] = set()
    result: List[str] = []
    for value in values:
        if not value or value in seen:
            continue
        seen.add(value)
        result.append(value)
    return result
