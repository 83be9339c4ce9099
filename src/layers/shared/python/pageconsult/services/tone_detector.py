"""Tone detection and typography selection.

Scores conversation text against five tone lexicons and maps the resulting
tone profile to a heading/body font pairing.
"""

import re

import structlog

from pageconsult.models.design_intelligence import (
    ToneLabel,
    ToneProfile,
    TypographyRecommendation,
)

logger = structlog.get_logger()

# Evaluation order doubles as the tie-break when tones score equally
TONE_ORDER: tuple[ToneLabel, ...] = (
    ToneLabel.AUTHORITATIVE,
    ToneLabel.URGENT,
    ToneLabel.CONSULTATIVE,
    ToneLabel.INNOVATIVE,
    ToneLabel.WARM,
)

TONE_MARKERS: dict[ToneLabel, tuple[str, ...]] = {
    ToneLabel.AUTHORITATIVE: (
        "compliance", "regulations", "regulatory", "certification", "certified",
        "standards", "audit", "audits", "HIPAA", "SOC-2", "ISO", "legal",
        "requirements", "mandated", "policy", "governance", "framework",
    ),
    ToneLabel.URGENT: (
        "risk", "threat", "breach", "fine", "fines", "penalty", "deadline",
        "career-ending", "losing jobs", "fired", "blame", "lawsuit", "immediately",
        "before it's too late", "critical", "urgent", "emergency", "crisis",
    ),
    ToneLabel.CONSULTATIVE: (
        "we help", "we guide", "partner", "alongside", "advisory", "consultant",
        "work with", "collaborate", "support", "assist", "recommend", "suggest",
        "tailored", "customized", "personalized",
    ),
    ToneLabel.INNOVATIVE: (
        "AI", "artificial intelligence", "machine learning", "automated",
        "revolutionary", "disruptive", "first to market", "cutting-edge",
        "next-generation", "breakthrough", "transform", "reimagine",
    ),
    ToneLabel.WARM: (
        "peace of mind", "sleep better", "trust", "relationship", "care",
        "understand", "empathy", "support", "comfort", "confidence", "reassure",
        "family", "community", "together",
    ),
}

# Secondary tone needs strictly more hits than this
SECONDARY_MIN_COUNT = 2
# Combined typography keys only apply above this confidence
COMBINED_MIN_CONFIDENCE = 0.6
NEUTRAL_CONFIDENCE = 0.5
CONFIDENCE_BOOST = 0.3
MAX_MARKERS = 5

DEFAULT_TYPOGRAPHY_KEY = ToneLabel.AUTHORITATIVE.value

TYPOGRAPHY_MAPPINGS: dict[str, TypographyRecommendation] = {
    "authoritative": TypographyRecommendation(
        heading_font="Inter",
        body_font="Inter",
        heading_weight=700,
        body_weight=400,
        reasoning="Geometric sans-serif conveys competence and authority (Monotype research)",
    ),
    "authoritative+traditional": TypographyRecommendation(
        heading_font="Playfair Display",
        body_font="Source Sans Pro",
        heading_weight=700,
        body_weight=400,
        reasoning="Serif headings increase perceived trust by ~13% (Morris/NYT study)",
    ),
    "urgent": TypographyRecommendation(
        heading_font="Space Grotesk",
        body_font="DM Sans",
        heading_weight=700,
        body_weight=400,
        reasoning="Geometric tension with condensed feel creates urgency without alarm",
    ),
    "consultative": TypographyRecommendation(
        heading_font="Playfair Display",
        body_font="Source Sans Pro",
        heading_weight=600,
        body_weight=400,
        reasoning="Humanist warmth combined with serif expertise signals advisory relationship",
    ),
    "innovative": TypographyRecommendation(
        heading_font="Space Grotesk",
        body_font="Inter",
        heading_weight=600,
        body_weight=400,
        reasoning="Modern geometric forms signal innovation and technical sophistication",
    ),
    "warm": TypographyRecommendation(
        heading_font="Libre Baskerville",
        body_font="Source Sans Pro",
        heading_weight=400,
        body_weight=400,
        reasoning="Humanist serif with high x-height balances friendliness with credibility",
    ),
    "authoritative+urgent": TypographyRecommendation(
        heading_font="Inter",
        body_font="DM Sans",
        heading_weight=700,
        body_weight=400,
        reasoning="Clean authority with modern urgency - compliance meets consequence",
    ),
}


def count_occurrences(text: str, marker: str) -> int:
    """Count non-overlapping substring hits of a marker in lowercased text."""
    return len(re.findall(re.escape(marker.lower()), text))


def detect_tone(conversation_text: str) -> ToneProfile:
    """Classify the dominant tone of the conversation.

    Ties (including the all-zero case) resolve in TONE_ORDER, so empty text
    yields an authoritative profile with neutral confidence.

    Args:
        conversation_text: Concatenated user-authored text, may be empty.

    Returns:
        Fresh ToneProfile.
    """
    text = (conversation_text or "").lower()

    counts: dict[ToneLabel, int] = {}
    markers: dict[ToneLabel, list[str]] = {}
    for tone in TONE_ORDER:
        counts[tone] = 0
        markers[tone] = []
        for marker in TONE_MARKERS[tone]:
            hits = count_occurrences(text, marker)
            if hits:
                counts[tone] += hits
                if marker not in markers[tone]:
                    markers[tone].append(marker)

    ranked = sorted(TONE_ORDER, key=lambda t: (-counts[t], TONE_ORDER.index(t)))
    primary, runner_up = ranked[0], ranked[1]
    secondary = runner_up if counts[runner_up] > SECONDARY_MIN_COUNT else None

    total = sum(counts.values())
    if total > 0:
        confidence = min(counts[primary] / total + CONFIDENCE_BOOST, 1.0)
    else:
        confidence = NEUTRAL_CONFIDENCE

    logger.debug(
        "Tone detected",
        primary=primary.value,
        secondary=secondary.value if secondary else None,
        confidence=confidence,
        scores={t.value: c for t, c in counts.items()},
    )

    return ToneProfile(
        primary=primary,
        secondary=secondary,
        confidence=confidence,
        markers=markers[primary][:MAX_MARKERS],
    )


def get_typography_recommendation(tone: ToneProfile) -> TypographyRecommendation:
    """Pick the font pairing for a tone profile.

    A combined `primary+secondary` entry wins when the profile is confident
    enough; otherwise the primary tone entry is used, falling back to the
    authoritative pairing.
    """
    if tone.secondary and tone.confidence > COMBINED_MIN_CONFIDENCE:
        combined = f"{tone.primary}+{tone.secondary}"
        if combined in TYPOGRAPHY_MAPPINGS:
            logger.debug("Typography selected", key=combined)
            return TYPOGRAPHY_MAPPINGS[combined].model_copy()

    key = str(tone.primary)
    if key not in TYPOGRAPHY_MAPPINGS:
        logger.warning("No typography mapping for tone, using default", tone=key)
        key = DEFAULT_TYPOGRAPHY_KEY

    logger.debug("Typography selected", key=key)
    return TYPOGRAPHY_MAPPINGS[key].model_copy()
