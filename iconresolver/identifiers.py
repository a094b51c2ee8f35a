"""Load the working set of effect identifiers from a structured document.

Two shapes are understood:

* ``.json`` files holding a list of identifiers, a list of objects with an
  ``id`` field, or an object wrapping either list under ``effects`` or ``ids``
* any other file, read as one identifier per line (``#`` starts a comment line)
"""
from __future__ import annotations

import os
import pathlib
from typing import Any, Iterable, List

from .utils import PipelineError, get_logger, load_json_file

LOGGER = get_logger(__name__)


def _ids_from_items(items: Iterable[Any]) -> List[str]:
    ids: List[str] = []
    for item in items:
        if isinstance(item, dict):
            item = item.get("id")
        if isinstance(item, str):
            ids.append(item)
        else:
            LOGGER.debug("Ignoring identifier entry %r", item)
    return ids


def _ids_from_json(data: Any, source: pathlib.Path) -> List[str]:
    if isinstance(data, dict):
        for key in ("effects", "ids"):
            if isinstance(data.get(key), list):
                return _ids_from_items(data[key])
        raise PipelineError(f"{source} has no 'effects' or 'ids' list")
    if isinstance(data, list):
        return _ids_from_items(data)
    raise PipelineError(f"{source} must contain a JSON list or object")


def _ids_from_text(source: pathlib.Path) -> List[str]:
    try:
        text = source.read_text(encoding="utf8")
    except (OSError, UnicodeDecodeError) as error:
        raise PipelineError(f"Could not read {source}: {error}") from error
    return [line for line in text.splitlines() if not line.strip().startswith("#")]


def load_identifiers(path: str | os.PathLike[str]) -> List[str]:
    """Return the sorted, unique, trimmed identifiers declared in ``path``."""
    source = pathlib.Path(path)
    if not source.is_file():
        raise PipelineError(f"Identifier source not found: {source}")

    if source.suffix.lower() == ".json":
        raw_ids = _ids_from_json(load_json_file(source), source)
    else:
        raw_ids = _ids_from_text(source)

    identifiers = sorted({value.strip() for value in raw_ids if value.strip()})
    LOGGER.info("Loaded %d identifiers from %s", len(identifiers), source)
    return identifiers
