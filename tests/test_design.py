"""Tests for extraction.design."""

from extraction.design import VoiceDesignParams, normalize_voice_description
from extraction.models import ParsedAttributes


def test_maps_attributes_and_timbre_cues():
    attrs = ParsedAttributes(age_group="older", gender="male", accent="British")
    params = normalize_voice_description(attrs, "old British man with a deep voice")
    assert params.age == "elderly"
    assert params.gender == "male"
    assert params.accent == "British"
    assert params.timbre == "deep"
    assert params.pitch == "low"
    assert params.style == "neutral"


def test_defaults_without_description():
    params = normalize_voice_description(ParsedAttributes())
    assert params.age == "adult"
    assert params.gender == "neutral"
    assert params.accent is None
    assert params.timbre is None
    assert params.style == "neutral"
    assert params.pitch == "medium"
    assert params.stability == 0.8
    assert params.similarity_boost == 0.7


def test_uses_words_the_personality_filter_removes():
    params = normalize_voice_description(ParsedAttributes(age_group="young"), "warm and calm")
    assert params.age == "young adult"
    assert params.timbre == "warm"
    assert params.style == "calm"


def test_deeply_is_not_deep():
    assert normalize_voice_description(ParsedAttributes(), "deeply soothing").timbre is None


def test_design_prompt():
    params = VoiceDesignParams(age="elderly", gender="male", accent="British", timbre="deep", pitch="low")
    assert params.to_design_prompt() == "elderly male voice, British accent, deep timbre, low pitch"


def test_light_needs_a_whole_word():
    assert normalize_voice_description(ParsedAttributes(), "a delight to hear").timbre is None
    assert normalize_voice_description(ParsedAttributes(), "light and airy").timbre == "bright"
