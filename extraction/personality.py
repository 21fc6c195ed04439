"""Strip personality and delivery words that say nothing about the voice itself."""

import re

PERSONALITY_BLACKLIST = frozenset({
    # Personality traits
    "friendly", "happy", "kind", "mean", "funny", "sarcastic",
    "professional", "flirty", "aggressive", "rude", "blunt",
    "arrogant", "sassy", "witty", "confident",
    # Behavior descriptors
    "slow", "fast", "soft-spoken", "clear-minded", "serious",
    "bubbly", "chill",
    # Removed even when they describe tone or timbre rather than behavior
    "energetic", "calm", "warm",
})

_PUNCT_RE = re.compile(r"[.,!?;:]")


def filter_personality_traits(description: str) -> str:
    """Drop blacklisted words and collapse whitespace."""
    kept = [
        word for word in description.split()
        if _PUNCT_RE.sub("", word.lower()) not in PERSONALITY_BLACKLIST
    ]
    return " ".join(kept)
