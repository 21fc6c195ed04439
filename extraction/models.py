"""Pydantic models for structured voice attributes."""

from typing import Literal

from pydantic import BaseModel, ConfigDict

Language = Literal["en", "es", "ar"]
AgeGroup = Literal["young", "middle-aged", "older"]
Gender = Literal["male", "female"]


class ParsedAttributes(BaseModel):
    """Structured voice attributes extracted from a free-text description."""

    model_config = ConfigDict(frozen=True)

    language: Language | None = None
    accent: str | None = None  # display string, e.g. "Indian-American"
    age_group: AgeGroup | None = None
    gender: Gender | None = None
    tags: tuple[str, ...] | None = None  # never empty, None instead
    character: str | None = None  # archetype, e.g. "pirate"

    @property
    def is_empty(self) -> bool:
        return not any(
            [self.language, self.accent, self.age_group, self.gender, self.tags, self.character]
        )

    def to_dict(self) -> dict:
        """Present fields only, keyed the way the catalog spells them."""
        data = self.model_dump(exclude_none=True)
        if "age_group" in data:
            data["ageGroup"] = data.pop("age_group")
        if "tags" in data:
            data["tags"] = list(data["tags"])
        return data
