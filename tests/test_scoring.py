"""Tests for matching.scoring."""

import pytest

from extraction.models import ParsedAttributes
from matching.scoring import score_breakdown, score_voice_match
from models import CatalogVoice


def test_full_profile_example():
    """gender 30 + accent 20 + age 10 + bonus for three matches 10."""
    attrs = ParsedAttributes(gender="female", accent="British", age_group="young")
    voice = CatalogVoice(gender="female", accent="British", age_group="young", language="en")
    assert score_voice_match(voice, attrs) == 70


def test_score_is_clamped_to_100():
    attrs = ParsedAttributes(language="en", gender="female", accent="British", age_group="young")
    voice = CatalogVoice(gender="female", accent="British", age_group="young", language="en")
    breakdown = score_breakdown(voice, attrs)
    assert breakdown.language + breakdown.gender + breakdown.accent + breakdown.age + breakdown.bonus == 110
    assert breakdown.total == 100
    assert score_voice_match(voice, attrs) == 100


@pytest.mark.parametrize("voice_language,expected", [
    ("en", 40),
    ("EN", 40),
    ("en-US", 30),
    ("es", 0),
    (None, 0),
])
def test_language_points(voice_language, expected):
    attrs = ParsedAttributes(language="en")
    assert score_voice_match(CatalogVoice(language=voice_language), attrs) == expected


@pytest.mark.parametrize("voice_gender,expected", [
    ("male", 30),
    ("Male", 30),
    ("man", 25),
    ("guy", 25),
    (None, 10),
    ("female", 0),
    ("neutral", 0),
])
def test_gender_points(voice_gender, expected):
    attrs = ParsedAttributes(gender="male")
    assert score_voice_match(CatalogVoice(gender=voice_gender), attrs) == expected


@pytest.mark.parametrize("voice_accent,wanted,expected", [
    ("British", "British", 20),
    ("UK", "British", 20),
    ("England", "British", 20),
    ("Southern American", "Southern", 15),
    ("Mexican-American", "Latin American", 10),
    ("Russian", "British", 0),
    (None, "British", 0),
])
def test_accent_points(voice_accent, wanted, expected):
    attrs = ParsedAttributes(accent=wanted)
    assert score_voice_match(CatalogVoice(accent=voice_accent), attrs) == expected


def test_age_match_is_case_insensitive():
    attrs = ParsedAttributes(age_group="young")
    assert score_voice_match(CatalogVoice(age_group="Young"), attrs) == 10
    assert score_voice_match(CatalogVoice(age_group="older"), attrs) == 0


def test_two_matches_earn_one_bonus():
    attrs = ParsedAttributes(gender="male", age_group="older")
    voice = CatalogVoice(gender="male", age_group="older")
    breakdown = score_breakdown(voice, attrs)
    assert breakdown.matches == 2
    assert breakdown.bonus == 5
    assert breakdown.total == 45


def test_language_is_not_counted_for_bonus():
    attrs = ParsedAttributes(language="en", gender="male")
    voice = CatalogVoice(language="en", gender="male")
    breakdown = score_breakdown(voice, attrs)
    assert breakdown.matches == 1
    assert breakdown.bonus == 0
    assert breakdown.total == 70


def test_synonym_gender_does_not_count_for_bonus():
    attrs = ParsedAttributes(gender="male", age_group="older")
    breakdown = score_breakdown(CatalogVoice(gender="man", age_group="older"), attrs)
    assert breakdown.gender == 25
    assert breakdown.matches == 1


def test_empty_attributes_score_zero(catalog):
    for voice in catalog:
        assert score_voice_match(voice, ParsedAttributes()) == 0


def test_scores_stay_in_bounds(catalog):
    attribute_sets = [
        ParsedAttributes(language="en", gender="male", accent="British", age_group="older"),
        ParsedAttributes(language="es", gender="female", accent="Latin American", age_group="young"),
        ParsedAttributes(accent="Indian", gender="female"),
        ParsedAttributes(gender="female"),
    ]
    for attrs in attribute_sets:
        for voice in catalog:
            assert 0 <= score_voice_match(voice, attrs) <= 100
