"""Voice attribute extraction: static rules, optionally driven by a catalog.

When a catalog is supplied, gender and age group are only accepted if the
catalog actually has them, and accents are first matched against the
catalog's own accent values so new catalog entries work without code
changes. Anything the catalog cannot resolve falls back to the static tables
in ``extraction.rules``.
"""

import logging
import re
from typing import Optional, Sequence

from extraction.catalog_index import CatalogAttributeIndex, build_catalog_index, original_value
from extraction.models import ParsedAttributes
from extraction.personality import filter_personality_traits
from extraction.rules import (
    ACCENT_PHRASE_RES,
    DEEP_TIMBRE_RE,
    LATIN_AMERICAN,
    LATINA_RE,
    LATINO_RE,
    LGBTQ_TAG,
    extract_age_group,
    extract_character,
    extract_free_accent,
    extract_gender,
    extract_language,
    extract_static_accent,
    has_lgbtq_terms,
)
from extraction.term_matcher import resolve_catalog_value
from models import CatalogVoice

logger = logging.getLogger(__name__)

# Words never fed to the catalog accent matcher on their own
_ACCENT_SKIP_WORDS = frozenset({
    "deep", "latino", "latina", "latinos", "latinas",
    "the", "and", "with", "like", "for", "from", "that", "this", "has", "have",
    "are", "was", "were", "been", "being", "does", "did", "will", "would",
    "should", "could", "may", "might", "must", "can", "who", "sounds", "sounding",
    "voice", "accent", "tone", "speaking",
    "man", "men", "male", "males", "woman", "women", "female", "females",
    "guy", "guys", "boy", "boys", "girl", "girls", "lady", "ladies",
})
_WORD_STRIP_RE = re.compile(r"^[^\w]+|[^\w]+$")
_WORD_SPLIT_RE = re.compile(r"[- ]+")
# "south african", "north korean": the compass word belongs to the next word
_COMPASS_WORDS = frozenset({"south", "north"})
_NATIONALITY_RE = re.compile(r"\w{2,}(?:an|ese|ish)$")


def _ordered_values(catalog: Sequence[CatalogVoice], known: frozenset[str]) -> list[str]:
    """Catalog accents in first-seen order, so ties go to the earlier record."""
    seen: dict[str, None] = {}
    for voice in catalog:
        if voice.accent and voice.accent.lower() in known:
            seen.setdefault(voice.accent.lower(), None)
    return list(seen)


def _latin_accent(
    catalog: Sequence[CatalogVoice], index: CatalogAttributeIndex
) -> str:
    """Accent for latino/latina: Latin American, or Spanish if the catalog lacks it."""
    if not index.accents:
        return LATIN_AMERICAN
    # Only a value naming "latin" counts; a plain "American" must not win
    for value in _ordered_values(catalog, index.accents):
        if "latin" in _WORD_SPLIT_RE.split(value):
            return original_value(value, "accent", catalog) or LATIN_AMERICAN
    if "spanish" in index.accents:
        return original_value("spanish", "accent", catalog) or "Spanish"
    return LATIN_AMERICAN


def _match_catalog_accent(
    text: str, catalog: Sequence[CatalogVoice], index: CatalogAttributeIndex
) -> Optional[str]:
    """Resolve an accent from the description against the catalog's accents."""
    known = _ordered_values(catalog, index.accents)
    words = [_WORD_STRIP_RE.sub("", w) for w in text.split()]

    # Two-word compounds the catalog spells out ("indian american" vs "Indian-American")
    for first, second in zip(words, words[1:]):
        pair = f"{first} {second}"
        for value in known:
            if value.replace("-", " ") == pair:
                return original_value(value, "accent", catalog)

    for i, word in enumerate(words):
        if len(word) <= 2 or word in _ACCENT_SKIP_WORDS:
            continue
        following = words[i + 1] if i + 1 < len(words) else ""
        if word in _COMPASS_WORDS and _NATIONALITY_RE.fullmatch(following):
            continue
        resolved = resolve_catalog_value(word, "accent", known, catalog)
        if resolved:
            return resolved

    for phrase_re in ACCENT_PHRASE_RES:
        m = phrase_re.search(text)
        if not m:
            continue
        phrase = m.group(1).strip()
        if "deep" in phrase:
            continue
        resolved = resolve_catalog_value(phrase, "accent", known, catalog)
        if resolved:
            return resolved

    return None


def extract_voice_attributes(
    description: object, catalog: Optional[Sequence[CatalogVoice]] = None
) -> ParsedAttributes:
    """Parse a free-text voice description into structured attributes.

    Examples:
        "Young female with Indian-American accent speaking English"
        "Middle-aged male with Mexican-American accent speaking Spanish"
        "Older woman with British accent"

    Never raises: a non-string or blank description gives empty attributes.
    """
    if not isinstance(description, str) or not description.strip():
        return ParsedAttributes()

    text = filter_personality_traits(description).lower()
    catalog = list(catalog or [])
    index = build_catalog_index(catalog)

    language = extract_language(text)

    gender, implies_young = extract_gender(text, index.genders or None)
    age_group = "young" if implies_young else None

    if age_group is None:
        age_group = extract_age_group(text, index.age_groups or None)

    tags = (LGBTQ_TAG,) if has_lgbtq_terms(text) else None

    character = extract_character(text)

    deep_timbre = bool(DEEP_TIMBRE_RE.search(text))
    accent = None

    # latino/latina set both accent and gender, overriding the gender keywords
    if LATINA_RE.search(text):
        accent, gender = _latin_accent(catalog, index), "female"
    elif LATINO_RE.search(text):
        accent, gender = _latin_accent(catalog, index), "male"

    if accent is None and index.accents:
        accent = _match_catalog_accent(text, catalog, index)
        if accent:
            logger.debug(f"Accent '{accent}' matched from catalog")

    if accent is None:
        rule = extract_static_accent(text, deep_timbre)
        if rule:
            accent = rule.accent
            logger.debug(f"Accent '{accent}' matched by static pattern {rule.pattern.pattern!r}")

    if accent is None and not deep_timbre:
        accent = extract_free_accent(text)

    attrs = ParsedAttributes(
        language=language,
        accent=accent,
        age_group=age_group,
        gender=gender,
        tags=tags,
        character=character,
    )
    logger.debug(f"Parsed '{description}' -> {attrs.to_dict()}")
    return attrs
