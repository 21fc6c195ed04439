"""Score how well one catalog voice matches a set of parsed attributes (0-100).

Weights: language 40, gender 30, accent 20, age group 10. On top of that,
every matched attribute beyond the first among gender/accent/age adds a
bonus of 5 points. Missing fields on either side simply score nothing.
"""

import re
from dataclasses import dataclass
from typing import Optional

from config import (
    ACCENT_WEIGHT,
    AGE_WEIGHT,
    GENDER_WEIGHT,
    LANGUAGE_WEIGHT,
    MAX_SCORE,
    MULTI_MATCH_BONUS,
)
from extraction.models import ParsedAttributes
from models import CatalogVoice

LANGUAGE_PREFIX_POINTS = 30
GENDER_SYNONYM_POINTS = 25
GENDER_UNLABELED_POINTS = 10
ACCENT_CONTAINS_POINTS = 15
ACCENT_SHARED_WORD_POINTS = 10

_GENDER_SYNONYMS: dict[str, frozenset[str]] = {
    "male": frozenset({"man", "men", "guy", "boy"}),
    "female": frozenset({"woman", "women", "girl", "lady"}),
}

# Canonical accent -> spellings that count as the same accent
_ACCENT_VARIATIONS: dict[str, tuple[str, ...]] = {
    "british": ("uk", "english", "england", "british"),
    "american": ("us", "usa", "united states", "american"),
    "australian": ("australia", "aussie", "australian"),
    "canadian": ("canada", "canadian"),
    "indian": ("india", "indian"),
    "spanish": ("spain", "spanish"),
    "french": ("france", "french"),
    "german": ("germany", "german"),
    "italian": ("italy", "italian"),
}

_ACCENT_SPLIT_RE = re.compile(r"[- ]+")


@dataclass(frozen=True)
class ScoreBreakdown:
    language: int = 0
    gender: int = 0
    accent: int = 0
    age: int = 0
    matches: int = 0  # gender/accent/age matches counted for the bonus
    bonus: int = 0

    @property
    def total(self) -> int:
        raw = self.language + self.gender + self.accent + self.age + self.bonus
        return max(0, min(raw, MAX_SCORE))


def _norm(value: Optional[str]) -> str:
    return (value or "").strip().lower()


def _language_points(voice_language: str, wanted: str) -> int:
    if not wanted or not voice_language:
        return 0
    if voice_language == wanted:
        return LANGUAGE_WEIGHT
    if voice_language.startswith(wanted) or wanted.startswith(voice_language):
        return LANGUAGE_PREFIX_POINTS  # "en" vs "en-us"
    return 0


def _gender_points(voice_gender: str, wanted: str) -> int:
    if not wanted:
        return 0
    if not voice_gender:
        return GENDER_UNLABELED_POINTS
    if voice_gender == wanted:
        return GENDER_WEIGHT
    if wanted in _GENDER_SYNONYMS.get(voice_gender, ()) or voice_gender in _GENDER_SYNONYMS.get(wanted, ()):
        return GENDER_SYNONYM_POINTS
    return 0


def _is_accent_variation(voice_accent: str, wanted: str) -> bool:
    for key, variations in _ACCENT_VARIATIONS.items():
        if (wanted in variations and key in voice_accent) or (voice_accent in variations and key in wanted):
            return True
    return False


def _accent_points(voice_accent: str, wanted: str) -> int:
    if not wanted or not voice_accent:
        return 0
    if voice_accent == wanted or _is_accent_variation(voice_accent, wanted):
        return ACCENT_WEIGHT
    if voice_accent in wanted or wanted in voice_accent:
        return ACCENT_CONTAINS_POINTS
    voice_words = {w for w in _ACCENT_SPLIT_RE.split(voice_accent) if len(w) > 2}
    wanted_words = {w for w in _ACCENT_SPLIT_RE.split(wanted) if len(w) > 2}
    if voice_words & wanted_words:
        return ACCENT_SHARED_WORD_POINTS
    return 0


def score_breakdown(voice: CatalogVoice, attributes: ParsedAttributes) -> ScoreBreakdown:
    """Per-attribute points, match count and bonus for one voice."""
    voice_gender = _norm(voice.gender)
    wanted_gender = _norm(attributes.gender)
    wanted_age = _norm(attributes.age_group)

    language = _language_points(_norm(voice.language), _norm(attributes.language))
    gender = _gender_points(voice_gender, wanted_gender)
    accent = _accent_points(_norm(voice.accent), _norm(attributes.accent))
    age = AGE_WEIGHT if wanted_age and _norm(voice.age_group) == wanted_age else 0

    # Language is left out of the bonus count
    matches = sum([
        bool(wanted_gender) and voice_gender == wanted_gender,
        accent > 0,
        age > 0,
    ])
    bonus = (matches - 1) * MULTI_MATCH_BONUS if matches >= 2 else 0

    return ScoreBreakdown(
        language=language, gender=gender, accent=accent, age=age,
        matches=matches, bonus=bonus,
    )


def score_voice_match(voice: CatalogVoice, attributes: ParsedAttributes) -> int:
    """Return an integer match score in [0, 100]."""
    return score_breakdown(voice, attributes).total
