"""Settings for the voice finder."""

import os

# Ranking: a voice must score strictly above this to count as a good match
GOOD_MATCH_THRESHOLD = int(os.environ.get("VOICE_FINDER_MATCH_THRESHOLD", "20"))
MAX_RESULTS = int(os.environ.get("VOICE_FINDER_MAX_RESULTS", "5"))

LOG_LEVEL = os.environ.get("VOICE_FINDER_LOG_LEVEL", "INFO")

# Voice design defaults
DESIGN_STABILITY = float(os.environ.get("VOICE_FINDER_DESIGN_STABILITY", "0.8"))
DESIGN_SIMILARITY_BOOST = float(os.environ.get("VOICE_FINDER_DESIGN_SIMILARITY_BOOST", "0.7"))

# Score weights (max points per attribute)
LANGUAGE_WEIGHT = 40
GENDER_WEIGHT = 30
ACCENT_WEIGHT = 20
AGE_WEIGHT = 10
MULTI_MATCH_BONUS = 5  # per matched attribute beyond the first
MAX_SCORE = 100
