"""Match description terms against attribute values found in the catalog.

Three tiers are tried in order and the first hit wins:

1. exact (case-insensitive)
2. substring in either direction ("british accent" contains "british")
3. shared significant word, so "Indian-American" matches "indian" and back

Lists and tuples are walked in their own order (catalog order); sets are
sorted first, so ties resolve the same way on every call.
"""

import logging
import re
from typing import Iterable, Optional

from extraction.catalog_index import CatalogField, original_value
from models import CatalogVoice

logger = logging.getLogger(__name__)

_WORD_SPLIT_RE = re.compile(r"[- ]+")
_MIN_WORD_LEN = 3


def _significant_words(value: str) -> list[str]:
    return [w for w in _WORD_SPLIT_RE.split(value) if len(w) >= _MIN_WORD_LEN]


def match_term(candidate: str, known_values: Iterable[str]) -> Optional[str]:
    """Return the lower-cased known value matching ``candidate``, or None."""
    term = candidate.strip().lower()
    if not term:
        return None
    values = list(known_values) if isinstance(known_values, (list, tuple)) else sorted(known_values)

    if term in values:
        return term

    for value in values:
        if term in value or value in term:
            return value

    term_words = _significant_words(term)
    if not term_words:
        return None
    for value in values:
        for value_word in _significant_words(value):
            if any(w == value_word or w in value_word or value_word in w for w in term_words):
                return value

    return None


def resolve_catalog_value(
    candidate: str,
    field: CatalogField,
    known_values: Iterable[str],
    catalog: Iterable[CatalogVoice],
) -> Optional[str]:
    """Match ``candidate`` and map the hit back to the catalog's original casing."""
    matched = match_term(candidate, known_values)
    if matched is None:
        return None
    resolved = original_value(matched, field, catalog)
    if resolved:
        logger.debug(f"'{candidate}' matched catalog {field} '{resolved}'")
    return resolved
