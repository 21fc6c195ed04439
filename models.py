"""Data models for the voice catalog."""

import json
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class CatalogVoice:
    id: str = ""
    name: str = ""
    gender: Optional[str] = None  # 'male' | 'female' | 'neutral'
    accent: Optional[str] = None  # "American", "Indian-American", "British", ...
    age_group: Optional[str] = None  # 'young' | 'middle-aged' | 'older'
    language: Optional[str] = None  # "en", "en-US", "es", ...
    description: str = ""
    tags: tuple[str, ...] = ()
    tone: tuple[str, ...] = ()
    use_cases: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "CatalogVoice":
        """Build a record from camelCase or snake_case catalog JSON."""
        language = data.get("language")
        if not language and data.get("languages"):
            language = data["languages"][0]
        return cls(
            id=str(data.get("id", "")),
            name=data.get("name", ""),
            gender=data.get("gender") or None,
            accent=data.get("accent") or None,
            age_group=data.get("ageGroup") or data.get("age_group") or None,
            language=language or None,
            description=data.get("description") or "",
            tags=tuple(data.get("tags") or ()),
            tone=tuple(data.get("tone") or ()),
            use_cases=tuple(data.get("useCases") or data.get("use_cases") or ()),
        )


def load_catalog(path: str | Path) -> list[CatalogVoice]:
    """Load a catalog from a JSON list or a {"voices": [...]} document."""
    with open(path, encoding="utf-8") as f:
        data = json.load(f)

    if isinstance(data, dict):
        data = data.get("voices")
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a list of voices or a 'voices' key")

    return [CatalogVoice.from_dict(item) for item in data if isinstance(item, dict)]
