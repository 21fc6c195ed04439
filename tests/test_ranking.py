"""Tests for matching.ranking."""

from matching.ranking import is_good_match, rank_voices


def _ids(matches):
    return [m.voice.id for m in matches]


def test_ranks_best_match_first(catalog):
    matches = rank_voices("young British male", catalog)
    assert _ids(matches) == ["v1"]
    assert matches[0].score == 70
    assert matches[0].attributes.accent == "British"


def test_character_requires_voice_with_that_character(catalog):
    matches = rank_voices("old British pirate man", catalog)
    assert _ids(matches) == ["v9"]
    assert matches[0].score == 70


def test_gender_filter_drops_opposite_and_neutral(catalog):
    matches = rank_voices("young female", catalog)
    assert _ids(matches) == ["v3", "v4"]
    assert all(m.score == 45 for m in matches)


def test_max_results_and_threshold(catalog):
    assert _ids(rank_voices("young female", catalog, max_results=1)) == ["v3"]
    assert rank_voices("young female", catalog, threshold=45) == []


def test_unknown_accent_without_regional_fallback(catalog):
    assert rank_voices("French woman", catalog) == []


def test_regional_fallback_serves_similar_accent(catalog):
    matches = rank_voices("Ukrainian man", catalog)
    assert _ids(matches) == ["v7"]
    assert matches[0].score == 30


def test_south_african_never_returns_us_southern(catalog):
    matches = rank_voices("South African man", catalog)
    assert _ids(matches) == ["v5"]
    assert matches[0].score == 55


def test_empty_inputs(catalog):
    assert rank_voices("", catalog) == []
    assert rank_voices("young British male", []) == []


def test_good_match_threshold():
    assert is_good_match(21)
    assert not is_good_match(20)
    assert is_good_match(11, threshold=10)
