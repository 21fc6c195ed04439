"""Rank catalog voices against a free-text description.

Pipeline: parse the description against the catalog, drop voices that
contradict a requested attribute, score the rest and keep the ones above the
good-match threshold, best first.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

import pandas as pd

from config import GOOD_MATCH_THRESHOLD, MAX_RESULTS
from extraction.extractor import extract_voice_attributes
from extraction.models import ParsedAttributes
from matching.regions import accents_excluded, accents_similar, similar_accents
from matching.scoring import score_voice_match
from models import CatalogVoice

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VoiceMatch:
    voice: CatalogVoice
    score: int
    attributes: ParsedAttributes


def is_good_match(score: int, threshold: Optional[int] = None) -> bool:
    """A score counts as a good match only when strictly above the threshold."""
    return score > (GOOD_MATCH_THRESHOLD if threshold is None else threshold)


def _accent_available(accent: str, catalog: list[CatalogVoice]) -> bool:
    available = {v.accent.strip().lower() for v in catalog if v.accent}
    wanted = accent.strip().lower()
    if wanted in available:
        return True
    return any(similar in available for similar in similar_accents(wanted))


def _has_character(voice: CatalogVoice, character: str) -> bool:
    tags = [t.lower() for t in voice.tags]
    return any(character in tag for tag in tags) or character in voice.description.lower()


def _passes_filters(voice: CatalogVoice, attrs: ParsedAttributes) -> bool:
    """Hard requirements: a requested attribute the voice contradicts rules it out."""
    if attrs.character and not _has_character(voice, attrs.character):
        return False

    if attrs.age_group and (voice.age_group or "").lower() != attrs.age_group:
        return False

    if attrs.gender and voice.gender:
        voice_gender = voice.gender.lower()
        # Neutral voices are dropped too when a gender is requested
        if voice_gender != attrs.gender:
            logger.debug(f"Filtered {voice.name or voice.id}: gender {voice.gender} != {attrs.gender}")
            return False

    if attrs.accent:
        if not voice.accent:
            return False
        if accents_excluded(attrs.accent, voice.accent):
            logger.debug(f"Filtered {voice.name or voice.id}: accent {voice.accent} excluded for {attrs.accent}")
            return False
        if not accents_similar(voice.accent, attrs.accent):
            return False

    return True


def rank_voices(
    description: str,
    catalog: Iterable[CatalogVoice],
    max_results: Optional[int] = None,
    threshold: Optional[int] = None,
) -> list[VoiceMatch]:
    """Return the best catalog matches for ``description``, highest score first.

    Ties keep catalog order. Only voices scoring above ``threshold``
    (default ``config.GOOD_MATCH_THRESHOLD``) are returned, at most
    ``max_results`` (default ``config.MAX_RESULTS``) of them.
    """
    max_results = MAX_RESULTS if max_results is None else max_results
    threshold = GOOD_MATCH_THRESHOLD if threshold is None else threshold

    if not isinstance(description, str) or not description.strip():
        return []

    catalog = list(catalog)
    if not catalog:
        logger.warning("No catalog voices available")
        return []

    attrs = extract_voice_attributes(description, catalog)

    if attrs.accent and not _accent_available(attrs.accent, catalog):
        logger.info(f"Accent '{attrs.accent}' not in catalog and no regional fallback, no matches")
        return []

    candidates = [v for v in catalog if _passes_filters(v, attrs)]
    logger.debug(f"Pre-filtered {len(candidates)} of {len(catalog)} voices")
    if not candidates:
        return []

    df = pd.DataFrame({
        "position": range(len(candidates)),
        "score": [score_voice_match(v, attrs) for v in candidates],
    })
    df = df[df["score"] > threshold]
    df = df.sort_values(["score", "position"], ascending=[False, True]).head(max_results)

    matches = [
        VoiceMatch(voice=candidates[int(pos)], score=int(score), attributes=attrs)
        for pos, score in zip(df["position"], df["score"])
    ]
    logger.info(f"{len(matches)} matches for '{description}'")
    return matches
