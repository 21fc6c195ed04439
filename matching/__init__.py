"""Score and rank catalog voices against parsed attributes."""

from matching.ranking import VoiceMatch, rank_voices
from matching.scoring import score_breakdown, score_voice_match

__all__ = ["VoiceMatch", "rank_voices", "score_breakdown", "score_voice_match"]
