"""Distinct attribute values present in a voice catalog."""

from dataclasses import dataclass
from typing import Iterable, Literal, Optional

from models import CatalogVoice

CatalogField = Literal["accent", "gender", "age_group"]


@dataclass(frozen=True)
class CatalogAttributeIndex:
    accents: frozenset[str] = frozenset()
    genders: frozenset[str] = frozenset()
    age_groups: frozenset[str] = frozenset()

    @property
    def is_empty(self) -> bool:
        return not (self.accents or self.genders or self.age_groups)


def build_catalog_index(catalog: Optional[Iterable[CatalogVoice]]) -> CatalogAttributeIndex:
    """Collect lower-cased accents, genders and age groups in one pass."""
    accents: set[str] = set()
    genders: set[str] = set()
    age_groups: set[str] = set()

    for voice in catalog or ():
        if voice.accent:
            accents.add(voice.accent.lower())
        if voice.gender:
            genders.add(voice.gender.lower())
        if voice.age_group:
            age_groups.add(voice.age_group.lower())

    return CatalogAttributeIndex(
        accents=frozenset(accents),
        genders=frozenset(genders),
        age_groups=frozenset(age_groups),
    )


def original_value(
    matched_lower: str, field: CatalogField, catalog: Iterable[CatalogVoice]
) -> Optional[str]:
    """Return the catalog's own spelling of a lower-cased value (first record wins)."""
    for voice in catalog:
        value = getattr(voice, field, None)
        if value and value.lower() == matched_lower:
            return value
    return None
