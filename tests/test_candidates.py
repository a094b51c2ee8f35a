from iconresolver.candidates import build_candidates
from iconresolver.normalizer import variants
from iconresolver.synonyms import merge_synonyms


def test_synonym_override_is_first_candidate():
    table = merge_synonyms([])

    result = build_candidates("bait_switch", table)

    assert result[0] == "baitandswitch"
    assert result[1:] == variants("bait_switch")


def test_synonym_lookup_ignores_case_and_padding():
    table = merge_synonyms([{"koi": "koi-fish"}], include_builtin=False)

    assert build_candidates("  KOI ", table)[0] == "koi-fish"


def test_override_equal_to_a_variant_is_not_repeated():
    table = merge_synonyms([{"Maneki-Neko": "maneki_neko"}], include_builtin=False)

    result = build_candidates("Maneki-Neko", table)

    assert result == ["maneki_neko", "maneki-neko", "maneki neko", "Maneki-Neko"]


def test_without_synonym_candidates_are_the_variants():
    table = merge_synonyms([], include_builtin=False)

    result = build_candidates("Maneki-Neko", table)

    assert {"maneki-neko", "maneki_neko", "maneki neko"} <= set(result)
    assert result == variants("Maneki-Neko")


def test_case_sensitive_dedup_keeps_both_casings():
    result = build_candidates("Koi", None)

    assert "koi" in result
    assert "Koi" in result
    assert len(result) == len(set(result))


def test_candidates_are_deterministic():
    table = merge_synonyms([{"fog of war": "fog"}])

    assert build_candidates("Fog of War", table) == build_candidates("Fog of War", table)


def test_empty_identifier_has_no_candidates():
    assert build_candidates("", merge_synonyms([])) == []
