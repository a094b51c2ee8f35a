import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from iconresolver.locator import StorageTier
from iconresolver.models import FuzzySuggestion, ResolverConfig, TierConfig, load_config
from iconresolver.utils import PipelineError


def test_defaults_match_builtin_tier_layout():
    config = load_config(None)

    assert config.include_builtin_synonyms is True
    assert config.trace_limit == 5
    assert config.storage_tiers()[0] == StorageTier(Path("public/icons/optimized/48"), ".webp")
    assert len(config.storage_tiers()) == 6


def test_tier_extension_gains_leading_dot():
    assert TierConfig(directory="sprites", extension="png").extension == ".png"
    with pytest.raises(ValidationError):
        TierConfig(extension="  ")


def test_load_config_anchors_relative_paths(tmp_path: Path):
    config_path = tmp_path / "resolver.json"
    config_path.write_text(
        json.dumps(
            {
                "icons_root": "assets",
                "tiers": [{"directory": "", "extension": "svg"}, {"directory": "/abs", "extension": ".png"}],
                "synonym_files": ["synonyms.json"],
                "include_builtin_synonyms": False,
                "trace_limit": 2,
            }
        ),
        encoding="utf8",
    )

    config = load_config(config_path)
    base = tmp_path.resolve()

    assert config.storage_tiers() == [
        StorageTier(base / "assets", ".svg"),
        StorageTier(Path("/abs"), ".png"),
    ]
    assert config.synonym_files == [base / "synonyms.json"]
    assert config.include_builtin_synonyms is False


def test_invalid_config_is_fatal(tmp_path: Path):
    config_path = tmp_path / "resolver.json"
    config_path.write_text(json.dumps({"trace_limit": -1}), encoding="utf8")

    with pytest.raises(PipelineError):
        load_config(config_path)


def test_missing_config_is_fatal(tmp_path: Path):
    with pytest.raises(PipelineError):
        load_config(tmp_path / "absent.json")


def test_fuzzy_suggestion_bounds_score():
    with pytest.raises(ValidationError):
        FuzzySuggestion(identifier="a", icon="b", score=1.5, distance=0)

    assert ResolverConfig().icons_root == Path("public/icons")
