from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from .locator import DEFAULT_TIER_LAYOUT, DEFAULT_TRACE_LIMIT, StorageTier
from .utils import PipelineError, load_json_file


class TierConfig(BaseModel):
    """A storage tier as written in the configuration file.

    - directory: relative to ``icons_root`` unless absolute ("" is the root itself).
    - extension: with or without the leading dot.
    """

    directory: str = ""
    extension: str

    @field_validator("extension")
    @classmethod
    def _dotted_extension(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("extension must not be empty")
        return value if value.startswith(".") else f".{value}"


def _default_tiers() -> List[TierConfig]:
    return [TierConfig(directory=subdir, extension=ext) for subdir, ext in DEFAULT_TIER_LAYOUT]


class ResolverConfig(BaseModel):
    """Settings for one resolution run."""

    icons_root: Path = Path("public/icons")
    tiers: List[TierConfig] = Field(default_factory=_default_tiers)

    # Earlier files take precedence over later ones.
    synonym_files: List[Path] = Field(default_factory=list)
    include_builtin_synonyms: bool = True

    # How many candidates to keep for diagnostics on each entry.
    trace_limit: int = Field(default=DEFAULT_TRACE_LIMIT, ge=0)

    def storage_tiers(self) -> List[StorageTier]:
        tiers: List[StorageTier] = []
        for tier in self.tiers:
            directory = Path(tier.directory) if tier.directory else Path()
            if not directory.is_absolute():
                directory = self.icons_root / directory
            tiers.append(StorageTier(directory=directory, extension=tier.extension))
        return tiers


class FuzzySuggestion(BaseModel):
    """A proposed synonym awaiting human review."""

    identifier: str
    icon: str
    score: float = Field(..., ge=0.0, le=1.0)
    distance: int = Field(..., ge=0)
    high: bool = False


def load_config(path: Optional[Path]) -> ResolverConfig:
    """Load a JSON configuration file, or return defaults when ``path`` is ``None``."""
    if path is None:
        return ResolverConfig()
    data = load_json_file(path)
    if not isinstance(data, dict):
        raise PipelineError(f"Configuration file {path} must contain a JSON object")
    try:
        config = ResolverConfig.model_validate(data)
    except ValidationError as exc:
        raise PipelineError(f"Invalid configuration in {path}:\n{exc}") from exc

    # Relative paths in the file are anchored at the file's own directory.
    base = Path(path).resolve().parent
    if not config.icons_root.is_absolute():
        config.icons_root = base / config.icons_root
    config.synonym_files = [p if p.is_absolute() else base / p for p in config.synonym_files]
    return config
