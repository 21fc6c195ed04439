"""Regional accent groups used as fallbacks when ranking a catalog.

A request for "Ukrainian" can be served by a "Russian" or "Polish" voice, but
some pairs share words without sharing a region and must never match:
"South African" is not "Southern American".
"""

REGIONAL_ACCENT_GROUPS: dict[str, list[str]] = {
    # Eastern European
    "eastern european": [
        "russian", "ukrainian", "polish", "czech", "hungarian", "romanian",
        "bulgarian", "serbian", "croatian", "slovak", "slovenian",
    ],
    "russian": ["ukrainian", "polish", "eastern european"],
    "ukrainian": ["russian", "polish", "eastern european"],
    "polish": ["russian", "ukrainian", "eastern european"],
    "czech": ["russian", "ukrainian", "polish", "eastern european"],
    "hungarian": ["russian", "ukrainian", "polish", "eastern european"],
    "romanian": ["russian", "ukrainian", "polish", "eastern european"],
    "bulgarian": ["russian", "ukrainian", "polish", "eastern european"],
    "serbian": ["russian", "ukrainian", "polish", "eastern european"],
    "croatian": ["russian", "ukrainian", "polish", "eastern european"],
    # Latin American / Spanish
    "latin american": [
        "spanish", "mexican", "argentinian", "colombian", "chilean",
        "venezuelan", "peruvian", "latino", "latina",
    ],
    "spanish": ["latin american", "mexican"],
    "mexican": ["spanish", "latin american"],
    "argentinian": ["spanish", "latin american"],
    "colombian": ["spanish", "latin american"],
    "latino": ["latin american", "spanish", "mexican"],
    "latina": ["latin american", "spanish", "mexican"],
    # British Isles
    "british": ["irish", "scottish", "welsh", "english"],
    "irish": ["british", "scottish", "welsh"],
    "scottish": ["british", "irish", "welsh"],
    "welsh": ["british", "irish", "scottish"],
    "english": ["british", "irish", "scottish", "welsh"],
    # North American, kept apart from the African group
    "american": ["canadian"],
    "canadian": ["american"],
    "northern american": ["american", "canadian"],
    "southern american": ["american"],
    "us southern": ["southern american", "american"],
    # Asian
    "chinese": ["mandarin", "cantonese"],
    "japanese": ["korean"],
    "korean": ["japanese"],
    # Middle Eastern
    "arabic": ["middle eastern", "arab"],
    "middle eastern": ["arabic", "arab"],
    "arab": ["arabic", "middle eastern"],
    # African, including African-American
    "african": [
        "nigerian", "south african", "african-american", "kenyan", "ghanaian",
        "ethiopian", "tanzanian", "ugandan", "zimbabwean",
    ],
    "nigerian": ["african", "south african", "african-american"],
    "south african": ["african", "nigerian", "african-american"],
    "african-american": ["african", "nigerian", "south african"],
    "kenyan": ["african", "nigerian", "south african", "african-american"],
    "ghanaian": ["african", "nigerian", "south african", "african-american"],
    # Scandinavian
    "swedish": ["norwegian", "danish", "scandinavian"],
    "norwegian": ["swedish", "danish", "scandinavian"],
    "danish": ["swedish", "norwegian", "scandinavian"],
    "scandinavian": ["swedish", "norwegian", "danish"],
}

# Pairs that never match, whatever words they share
ACCENT_EXCLUSIONS: dict[str, list[str]] = {
    "south african": [
        "southern american", "us southern", "us-southern", "southern",
        "american", "northern american", "us",
    ],
    "african": ["southern american", "us southern", "us-southern", "southern", "northern american", "us"],
    "nigerian": ["southern american", "us southern", "us-southern", "southern", "american", "us"],
    "african-american": ["southern american", "us southern", "us-southern", "southern", "us"],
    "southern american": ["south african", "african", "nigerian", "african-american"],
    "us southern": ["south african", "african", "nigerian", "african-american"],
    "us-southern": ["south african", "african", "nigerian", "african-american"],
    "southern": ["south african", "african", "nigerian", "african-american"],
    "ukrainian": ["british", "irish", "scottish", "welsh", "english"],
    "russian": ["british", "irish", "scottish", "welsh", "english"],
    "eastern european": ["british", "irish", "scottish", "welsh", "english"],
}

_SOUTHERN_US_VARIANTS = frozenset({"us southern", "us-southern", "southern us", "southern-us"})


def normalize_accent(accent: str) -> str:
    """Lower-case and fold spelling variants ("US Southern" -> "southern american")."""
    normalized = accent.strip().lower()
    if normalized in _SOUTHERN_US_VARIANTS:
        return "southern american"
    return normalized


def similar_accents(accent: str) -> list[str]:
    """Accents in the same regional group, including the group name itself."""
    normalized = normalize_accent(accent)
    raw = accent.strip().lower()

    similar: dict[str, None] = {}
    for key in (normalized, raw):
        for other in REGIONAL_ACCENT_GROUPS.get(key, []):
            similar.setdefault(other, None)

    # An accent listed under a group is similar to everything in that group
    for group, members in REGIONAL_ACCENT_GROUPS.items():
        if normalized in members or raw in members:
            merged = dict.fromkeys(members)
            merged.setdefault(group, None)
            merged.update(similar)
            return list(merged)

    return list(similar)


def accents_excluded(first: str, second: str) -> bool:
    pairs = [
        (normalize_accent(first), normalize_accent(second)),
        (first.strip().lower(), second.strip().lower()),
    ]
    for a, b in pairs:
        if b in ACCENT_EXCLUSIONS.get(a, []) or a in ACCENT_EXCLUSIONS.get(b, []):
            return True
    return False


def accents_similar(first: str, second: str) -> bool:
    """Same accent or same regional group; exclusions always win."""
    a, b = normalize_accent(first), normalize_accent(second)
    if accents_excluded(a, b):
        return False
    if a == b:
        return True
    return b in similar_accents(a) or a in similar_accents(b)
