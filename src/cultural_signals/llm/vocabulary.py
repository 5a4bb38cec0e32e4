"""Controlled vocabularies for the theme, category, and conflict fields.

Grouped term lists are the single source of truth: the system prompt is
rendered from them and out-of-vocabulary checks read them.
"""

CONFLICT_VOCABULARY: dict[str, list[str]] = {
    "Economic": [
        "access vs. exclusivity", "affordability vs. margin", "speed vs. protection",
        "abundance vs. scarcity", "price vs. value", "free vs. premium",
    ],
    "Cultural": [
        "authenticity vs. imitation", "human vs. AI", "effort vs. ease",
        "curation vs. overload", "privacy vs. surveillance", "intimacy vs. performance",
    ],
    "Structural": [
        "creator vs. platform", "individual vs. algorithm", "linear vs. loop",
        "centralized vs. distributed", "ownership vs. access", "permanence vs. disposability",
    ],
    "Social": [
        "community vs. transaction", "belonging vs. consumption", "identity vs. entertainment",
        "reputation vs. anonymity", "local vs. global",
    ],
    "Power": [
        "brand authority vs. creator authority", "institutional vs. grassroots",
        "legacy vs. emerging", "gatekeeping vs. democratization",
    ],
    "Temporal": ["nostalgia vs. futurism", "patience vs. immediacy", "longevity vs. churn"],
}

THEME_VOCABULARY: dict[str, list[str]] = {
    "Cultural Dynamics": [
        "value erosion", "aesthetic churn", "fandom as identity",
        "status recalibration", "taste collapse", "cultural exhaustion",
    ],
    "Economic Structures": [
        "creator economics", "platform dependency", "margin compression",
        "pricing transparency", "access inequality",
    ],
    "Behavioral Patterns": [
        "consumption fragmentation", "attention collapse", "loyalty dissolution",
        "impulse mechanics", "research intensification",
    ],
    "Identity and Belonging": [
        "community infrastructure", "generational handoff", "identity performance",
        "belonging economics",
    ],
    "System Dynamics": [
        "algorithmic mediation", "speed vs. quality", "visibility as vulnerability",
        "legibility crisis",
    ],
}

CATEGORY_VOCABULARY: dict[str, list[str]] = {
    "Industries": [
        "Fashion business", "Beauty industry", "Music industry", "Gaming", "Publishing", "Film/TV",
    ],
    "Domains": [
        "Creator economy", "Platform economics", "Youth culture", "Gen Z behavior",
        "Millennial behavior", "Fandom culture",
    ],
    "Practice Areas": [
        "Brand strategy", "Marketing infrastructure", "Social commerce",
        "Community building", "Content creation", "IP protection",
    ],
    "Technologies": ["AI/automation", "Algorithm culture", "E-commerce", "Streaming"],
}

CONTROLLED_TAGS: dict[str, list[str]] = {
    "Demographics": ["Gen Z", "Gen Alpha", "Millennials", "Gen X"],
    "Platforms": ["TikTok", "Instagram", "YouTube", "Amazon", "Substack"],
    "Behaviors": [
        "dupe culture", "deinfluencing", "UGC", "algorithmic trust",
        "impulse buying", "research behavior",
    ],
    "Economics": [
        "ultra-fast fashion", "pricing skepticism", "margin pressure", "subscription fatigue",
    ],
}

_NEW_TERM_FLAG = "[new]"


def all_terms(vocabulary: dict[str, list[str]]) -> list[str]:
    """Flatten a grouped vocabulary into a single term list."""
    return [term for terms in vocabulary.values() for term in terms]


def render_vocabulary(vocabulary: dict[str, list[str]]) -> str:
    """Render grouped terms as prompt lines: ``Group: a / b / c``."""
    return "\n\n".join(f"{group}: {' / '.join(terms)}" for group, terms in vocabulary.items())


def find_unknown_terms(value: str, vocabulary: dict[str, list[str]]) -> list[str]:
    """Return the slash-separated terms in ``value`` that the vocabulary lacks.

    Known terms are blanked out longest-first before splitting, so terms
    that themselves contain a slash ("Film/TV", "AI/automation") survive.
    Pure function; matching is case-insensitive.
    """
    remaining = value.lower().replace(_NEW_TERM_FLAG, "")
    for term in sorted(all_terms(vocabulary), key=len, reverse=True):
        remaining = remaining.replace(term.lower(), "/")
    return [part.strip() for part in remaining.split("/") if part.strip()]
