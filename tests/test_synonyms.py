import json
from pathlib import Path

import pytest

from iconresolver.synonyms import (
    BUILTIN_SYNONYMS,
    SynonymTable,
    build_synonym_table,
    load_synonym_source,
    merge_synonyms,
    parse_synonym_source,
    write_synonym_document,
)
from iconresolver.utils import PipelineError


def test_first_source_wins_on_conflict():
    table = merge_synonyms([{"bait_switch": "x"}, {"bait_switch": "y"}], include_builtin=False)

    assert table["bait_switch"] == "x"


def test_builtin_table_outranks_external_sources():
    table = merge_synonyms([{"bait_switch": "a"}, {"bait_switch": "b", "new_key": "b"}])

    assert table["bait_switch"] == BUILTIN_SYNONYMS["bait_switch"]
    assert table["new_key"] == "b"


def test_keys_are_trimmed_and_lower_cased_but_keep_inner_spaces():
    table = merge_synonyms([{"  Hand Size ": " hand size "}], include_builtin=False)

    assert list(table) == ["hand size"]
    assert table.lookup("HAND SIZE") == "hand size"


def test_case_variants_of_a_key_collide():
    table = merge_synonyms([{"Coin": "coin"}, {"COIN": "coins"}], include_builtin=False)

    assert table.lookup("coin") == "coin"
    assert len(table) == 1


def test_malformed_entries_are_skipped():
    table = merge_synonyms(
        [{"": "x", "empty": "   ", "number": 3, "ok": "fine"}], include_builtin=False
    )

    assert table.to_dict() == {"ok": "fine"}


def test_table_is_read_only():
    table = SynonymTable({"a": "b"})

    with pytest.raises(TypeError):
        table["c"] = "d"  # type: ignore[index]


def test_parse_synonym_source_accepts_suggestion_documents():
    data = {
        "suggestions": {
            "angel_investor": {"icon": "angelinvestor", "score": 0.91},
            "gift_gab": "giftofgab",
            "broken": {"score": 0.7},
        }
    }

    assert parse_synonym_source(data) == {
        "angel_investor": "angelinvestor",
        "gift_gab": "giftofgab",
    }


def test_parse_synonym_source_rejects_non_objects():
    with pytest.raises(PipelineError):
        parse_synonym_source(["not", "a", "mapping"])


def test_missing_synonym_file_is_fatal(tmp_path: Path):
    with pytest.raises(PipelineError):
        load_synonym_source(tmp_path / "nope.json")


def test_build_synonym_table_respects_file_order(tmp_path: Path):
    first = tmp_path / "curated.json"
    second = tmp_path / "fuzzy.json"
    first.write_text(json.dumps({"synonyms": {"tortoiseshell": "tortoise_shell"}}), encoding="utf8")
    second.write_text(json.dumps({"tortoiseshell": "tortoise", "koi": "koi-fish"}), encoding="utf8")

    table = build_synonym_table([first, second], include_builtin=False)

    assert table.to_dict() == {"koi": "koi-fish", "tortoiseshell": "tortoise_shell"}


def test_written_document_loads_back(tmp_path: Path):
    out = write_synonym_document(tmp_path / "out" / "merged.json", {"b": "2", "a": "1"})

    assert load_synonym_source(out) == {"a": "1", "b": "2"}
    assert out.read_text(encoding="utf8").endswith("\n")
