"""Rule tables for voice attribute extraction.

Every table is an ordered list evaluated top to bottom and the first hit wins.
Order encodes disambiguation (specific before general), so do not sort them.
All patterns run against lower-cased, personality-filtered text.
"""

import re
from dataclasses import dataclass
from typing import Optional


def _words(*words: str) -> re.Pattern:
    """Whole-word alternation, so "man" never fires inside "german"."""
    return re.compile(r"\b(?:" + "|".join(re.escape(w) for w in words) + r")\b")


# --- Language (priority: Spanish, Arabic, English) ---
_LANGUAGES: list[tuple[re.Pattern, str]] = [
    (re.compile(r"spanish|español|\bes-"), "es"),
    (re.compile(r"arabic|عربي|\bar-"), "ar"),
    (re.compile(r"english|\ben-"), "en"),
]

# --- Gender keywords (female form before its male counterpart) ---
_GENDER_KEYWORDS: list[tuple[str, str]] = [
    ("female", "female"),
    ("male", "male"),
    ("woman", "female"),
    ("man", "male"),
    ("women", "female"),
    ("men", "male"),
    ("girl", "female"),
    ("girls", "female"),
    ("boy", "male"),
    ("boys", "male"),
    ("lady", "female"),
    ("ladies", "female"),
    ("guy", "male"),
    ("guys", "male"),
    ("gentleman", "male"),
    ("miss", "female"),
    ("females", "female"),
    ("males", "male"),
]
_GENDER_RULES: list[tuple[str, re.Pattern, str]] = [
    (keyword, _words(keyword), gender) for keyword, gender in _GENDER_KEYWORDS
]
# Without a catalog every female word is checked before any male word
_FALLBACK_GENDER_RULES = sorted(_GENDER_RULES, key=lambda rule: rule[2] != "female")
# Only these imply youth; "woman"/"man" say nothing about age
_YOUTH_KEYWORDS = frozenset({"girl", "girls", "boy", "boys"})

# --- Age groups ---
_AGE_GROUPS: list[tuple[re.Pattern, str]] = [
    # Generations first: "gen z student" is young, "boomer in his 20s" is older
    (re.compile(r"\bgen[- ]?z\b|\bgeneration z\b|\bz generation\b"), "young"),
    (re.compile(r"\bmillennials?\b|\bgen[- ]y\b|\bgeneration y\b"), "middle-aged"),
    (re.compile(r"\bgen[- ]x\b|\bgeneration x\b"), "middle-aged"),
    (re.compile(r"\b(?:baby )?boomers?\b"), "older"),
    # Decades and descriptive words
    (re.compile(
        r"\b20'?s\b|\btwenties\b|\bteen(?:s|ager|agers)?\b|\byouth\b"
        r"|\byoung(?:er)?\b|\bcollege\b|\bstudents?\b"
    ), "young"),
    (re.compile(
        r"\b30'?s\b|\bthirties\b|\b40'?s\b|\bforties\b"
        r"|\bmiddle[- ]aged?\b|\bmiddle\b"
    ), "middle-aged"),
    (re.compile(
        r"\b50'?s\b|\bfifties\b|\b60'?s\b|\bsixties\b|\b70'?s\b|\bseventies\b"
        r"|\bold(?:er)?\b|\belder(?:ly)?\b|\bseniors?\b|\baged\b"
        r"|\bgrand(?:pa|ma|father|mother)\b"
    ), "older"),
]

# --- Tags ---
# Slurs are listed so they map to the neutral tag; they are never surfaced.
_LGBTQ_RE = _words(
    "gay", "gays", "queer", "fag", "fags", "faggot", "faggots", "homosexual",
    "lesbian", "lesbians", "lesbo", "dyke", "dykes",
)
LGBTQ_TAG = "lgbtq"

# --- Character archetypes (leftmost occurrence wins) ---
_CHARACTER_RE = _words(
    "bodybuilder", "meathead", "detective", "sherlock", "spy", "agent", "hero",
    "villain", "wizard", "warrior", "knight", "pirate", "ninja", "rapper",
    "singer", "artist", "musician", "narrator", "announcer", "host", "podcaster",
    "teacher", "professor", "doctor", "nurse", "lawyer", "judge", "attorney",
    "soldier", "military", "veteran", "coach", "trainer", "instructor",
)

# --- Accents ---
DEEP_TIMBRE_RE = re.compile(r"deep\s+(?:accent|voice)")
LATINA_RE = _words("latina", "latinas")
LATINO_RE = _words("latino", "latinos")
LATIN_AMERICAN = "Latin American"


@dataclass(frozen=True)
class AccentRule:
    pattern: re.Pattern
    accent: str


def _accent(pattern: str, accent: str) -> AccentRule:
    return AccentRule(re.compile(pattern), accent)


ACCENT_RULES: list[AccentRule] = [
    # Nationality + ethnicity compounds before any of their parts
    _accent(r"indian[- ]american", "Indian-American"),
    _accent(r"mexican[- ]american", "Mexican-American"),
    _accent(r"latin american|latino american|latina american", LATIN_AMERICAN),
    _accent(r"african[- ]american|\bblack\b", "African-American"),
    _accent(r"asian[- ]american", "Asian-American"),
    # African countries before the regional "south"/"southern" patterns,
    # otherwise "South African" degrades to "Southern"
    _accent(r"south african", "South African"),
    _accent(r"nigerian|nigeria", "Nigerian"),
    # South Asian countries before the generic "indian" and "asian" patterns
    _accent(r"pakistani|pakistan", "Pakistani"),
    _accent(r"bangladeshi|bangladesh", "Bangladeshi"),
    _accent(r"sri lankan|sri lanka", "Sri Lankan"),
    _accent(r"southern[- ]american|\bus southern\b", "Southern American"),
    _accent(r"northern[- ]american", "Northern American"),
    # Regional, standalone words only
    _accent(r"\bnorth\b|\bnorthern\b", "Northern"),
    _accent(r"\bsouth\b(?!\s+african)|\bsouthern\b(?!\s+american)", "Southern"),
    _accent(r"scottish|scotland|\bscots?\b", "Scottish"),
    _accent(r"irish|ireland", "Irish"),
    _accent(r"welsh|\bwales\b", "Welsh"),
    _accent(r"cockney|london", "Cockney"),
    _accent(r"yorkshire", "Yorkshire"),
    _accent(r"liverpool|scouse", "Liverpool"),
    _accent(r"manchester", "Manchester"),
    _accent(r"texan|texas", "Texan"),
    _accent(r"californian|california", "Californian"),
    _accent(r"new york|\bnyc\b", "New York"),
    _accent(r"boston|bostonian", "Boston"),
    # Single countries, after compounds and regions
    _accent(r"british|\buk\b|england|\bbrits?\b", "British"),
    _accent(r"australian|australia|aussie", "Australian"),
    _accent(r"canadian|canada", "Canadian"),
    _accent(r"indian|india", "Indian"),
    _accent(r"mexican|mexico", "Mexican"),
    _accent(r"spanish|spain|español", "Spanish"),
    _accent(r"\blatin\b", LATIN_AMERICAN),
    _accent(r"arabic|\barabs?\b|middle eastern", "Arabic"),
    _accent(r"french|france", "French"),
    _accent(r"german|germany", "German"),
    _accent(r"italian|italy", "Italian"),
    _accent(r"vietnamese|vietnam", "Vietnamese"),
    _accent(r"\bthai\b|thailand", "Thai"),
    _accent(r"filipino|philippines|philippine", "Filipino"),
    _accent(r"indonesian|indonesia", "Indonesian"),
    _accent(r"malaysian|malaysia", "Malaysian"),
    _accent(r"chinese|china", "Chinese"),
    _accent(r"japanese|japan", "Japanese"),
    _accent(r"korean|korea", "Korean"),
    _accent(r"new zealand|kiwi", "New Zealand"),
    # Umbrella regions only after every country under them
    _accent(r"\basian?\b", "Asian"),
    _accent(r"african|africa", "African"),
    _accent(r"american|\busa?\b", "American"),
    _accent(r"russian|russia", "Russian"),
    _accent(r"ukrainian|ukranian|ukraine", "Ukrainian"),
    _accent(r"polish|poland", "Polish"),
    _accent(r"czech", "Czech"),
    _accent(r"hungarian|hungary", "Hungarian"),
    _accent(r"romanian|romania", "Romanian"),
    _accent(r"bulgarian|bulgaria", "Bulgarian"),
    _accent(r"serbian|serbia", "Serbian"),
    _accent(r"croatian|croatia", "Croatian"),
    _accent(r"eastern european|eastern europe", "Eastern European"),
]

# Phrases that name an accent directly, tried against the catalog in order
ACCENT_PHRASE_RES: list[re.Pattern] = [
    re.compile(r"([a-z\s-]+?)\s+accent"),
    re.compile(r"([a-z\s-]+?)\s+voice"),
    re.compile(r"with\s+([a-z\s-]+?)\s+accent"),
    re.compile(r"has\s+([a-z\s-]+?)\s+accent"),
]
_FREE_ACCENT_RE = re.compile(r"(?:with|has)\s+([a-z\s-]+?)\s+accent")
_LEADING_ARTICLE_RE = re.compile(r"^(?:an?|the)\s+")
_MAX_FREE_ACCENT_LEN = 30


def extract_language(text: str) -> Optional[str]:
    """Return "es", "ar" or "en" for the first language named, by priority."""
    for pattern, language in _LANGUAGES:
        if pattern.search(text):
            return language
    return None


def extract_gender(
    text: str, allowed: Optional[frozenset[str]] = None
) -> tuple[Optional[str], bool]:
    """Return (gender, implies_young).

    With ``allowed`` set, a keyword only counts if its gender is in it.
    """
    rules = _FALLBACK_GENDER_RULES if allowed is None else _GENDER_RULES
    for keyword, pattern, gender in rules:
        if not pattern.search(text):
            continue
        if allowed is not None and gender not in allowed:
            continue
        return gender, keyword in _YOUTH_KEYWORDS
    return None, False


def extract_age_group(text: str, allowed: Optional[frozenset[str]] = None) -> Optional[str]:
    """Return the first age group named; with ``allowed``, skip groups not in it."""
    for pattern, age_group in _AGE_GROUPS:
        if not pattern.search(text):
            continue
        if allowed is not None and age_group not in allowed:
            continue
        return age_group
    return None


def has_lgbtq_terms(text: str) -> bool:
    return bool(_LGBTQ_RE.search(text))


def extract_character(text: str) -> Optional[str]:
    m = _CHARACTER_RE.search(text)
    return m.group(0) if m else None


def extract_static_accent(text: str, deep_timbre: bool = False) -> Optional[AccentRule]:
    """Walk the accent table and return the first rule that fires."""
    for rule in ACCENT_RULES:
        if not rule.pattern.search(text):
            continue
        # "deep" is timbre, never an accent name
        if deep_timbre and "deep" in rule.accent.lower():
            continue
        return rule
    return None


def extract_free_accent(text: str) -> Optional[str]:
    """Last resort: title-case whatever sits in "with/has ... accent"."""
    m = _FREE_ACCENT_RE.search(text)
    if not m:
        return None
    phrase = _LEADING_ARTICLE_RE.sub("", m.group(1).strip())
    if not phrase or "deep" in phrase or len(phrase) >= _MAX_FREE_ACCENT_LEN:
        return None
    return " ".join(word[:1].upper() + word[1:] for word in phrase.split())
