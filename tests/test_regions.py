"""Tests for matching.regions."""

from matching.regions import accents_excluded, accents_similar, normalize_accent, similar_accents


def test_normalize_folds_us_southern_variants():
    assert normalize_accent("US Southern") == "southern american"
    assert normalize_accent(" southern-us ") == "southern american"
    assert normalize_accent("British") == "british"


def test_similar_accents_share_a_region():
    assert "british" in similar_accents("irish")
    assert "eastern european" in similar_accents("ukrainian")
    assert similar_accents("klingon") == []


def test_regional_similarity():
    assert accents_similar("Ukrainian", "Russian")
    assert accents_similar("African", "Nigerian")
    assert accents_similar("British", "british")
    assert not accents_similar("British", "Russian")


def test_south_african_never_matches_us_south():
    assert accents_excluded("South African", "US Southern")
    assert accents_excluded("Southern American", "South African")
    assert not accents_similar("South African", "Southern American")
    assert not accents_similar("Southern", "African")


def test_eastern_european_never_matches_british():
    assert accents_excluded("Russian", "English")
    assert not accents_similar("Ukrainian", "British")
