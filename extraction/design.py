"""Map parsed attributes onto voice-design request parameters."""

import re
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict

from config import DESIGN_SIMILARITY_BOOST, DESIGN_STABILITY
from extraction.models import ParsedAttributes

_AGES = {
    "young": "young adult",
    "middle-aged": "adult",
    "older": "elderly",
}

# Timbre words, first hit wins. "deep" outranks everything; "deeply" does not count.
_TIMBRES: list[tuple[re.Pattern, str]] = [
    (re.compile(r"deep accent|deep voice|\bdeep\b"), "deep"),
    (re.compile(r"warm|mellow"), "warm"),
    (re.compile(r"\bbright\b|\blight\b"), "bright"),
    (re.compile(r"\blow\b(?! pitch)"), "deep"),
    (re.compile(r"soft|gentle"), "soft"),
    (re.compile(r"raspy|rough|hoarse"), "raspy"),
    (re.compile(r"smooth|clear"), "smooth"),
]
_STYLES: list[tuple[re.Pattern, str]] = [
    (re.compile(r"energetic|exciting|lively"), "energetic"),
    (re.compile(r"calm|relaxed|peaceful"), "calm"),
]
_PITCHES: list[tuple[re.Pattern, str]] = [
    (re.compile(r"low|deep|bass"), "low"),
    (re.compile(r"high|bright|soprano"), "high"),
]


class VoiceDesignParams(BaseModel):
    """Parameters for a voice-design request."""

    model_config = ConfigDict(frozen=True)

    age: Literal["young", "young adult", "adult", "middle-aged", "elderly"] = "adult"
    gender: Literal["male", "female", "neutral"] = "neutral"
    accent: str | None = None
    timbre: Literal["warm", "bright", "deep", "soft", "raspy", "smooth"] | None = None
    style: Literal["energetic", "calm", "neutral"] = "neutral"
    pitch: Literal["low", "medium", "high"] = "medium"
    stability: float = DESIGN_STABILITY
    similarity_boost: float = DESIGN_SIMILARITY_BOOST

    def to_design_prompt(self) -> str:
        """Plain-prose description, e.g. "elderly male voice, British accent, deep timbre"."""
        parts = [f"{self.age} {self.gender} voice"]
        if self.accent:
            parts.append(f"{self.accent} accent")
        if self.timbre:
            parts.append(f"{self.timbre} timbre")
        if self.pitch != "medium":
            parts.append(f"{self.pitch} pitch")
        if self.style != "neutral":
            parts.append(f"{self.style} delivery")
        return ", ".join(parts)


def _first(rules: list[tuple[re.Pattern, str]], text: str) -> Optional[str]:
    for pattern, label in rules:
        if pattern.search(text):
            return label
    return None


def normalize_voice_description(
    attributes: ParsedAttributes, original_description: Optional[str] = None
) -> VoiceDesignParams:
    """Build design parameters from attributes plus timbre/style/pitch cues.

    Timbre, style and pitch come from the unfiltered description, since the
    personality filter strips words like "warm" and "calm".
    """
    text = (original_description or "").lower()
    timbre = _first(_TIMBRES, text) if text else None

    return VoiceDesignParams(
        age=_AGES.get(attributes.age_group, "adult"),
        gender=attributes.gender or "neutral",
        accent=attributes.accent,
        timbre=timbre,
        style=_first(_STYLES, text) or "neutral",
        pitch=_first(_PITCHES, text) or "medium",
    )
