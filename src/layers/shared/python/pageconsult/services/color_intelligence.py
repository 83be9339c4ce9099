"""Color intelligence.

Industry detection, emotional driver detection, and industry palettes with
emotional accent overrides.
"""

from typing import Any

import structlog

from pageconsult.models.design_intelligence import (
    ColorPalette,
    EmotionalAccent,
    EmotionalDriver,
    Industry,
)

logger = structlog.get_logger()

DEFAULT_INDUSTRY = Industry.SAAS

# Declaration order is priority: more specific groups first, so creative
# branding wins ties against generic agency/consulting keywords.
INDUSTRY_KEYWORDS: tuple[tuple[Industry, tuple[str, ...]], ...] = (
    (Industry.CREATIVE, (
        "branding", "brand agency", "creative agency", "design agency", "brand strategy",
        "visual identity", "brand identity", "translate into brands", "brand studio",
        "creative studio", "brand design", "brand consultancy", "rebranding", "rebrand",
    )),
    (Industry.AGENCY, ("agency", "advertising", "marketing agency", "digital agency")),
    (Industry.HEALTHCARE, (
        "healthcare", "hospital", "clinic", "patient", "medical", "HIPAA", "health",
        "clinical", "physician",
    )),
    (Industry.CYBERSECURITY, (
        "cybersecurity", "security", "penetration", "vulnerability", "breach", "hacker",
        "threat", "SOC",
    )),
    (Industry.FINANCE, (
        "finance", "financial", "bank", "investment", "wealth", "insurance", "fintech",
        "trading",
    )),
    (Industry.SAAS, ("SaaS", "software", "platform", "app", "subscription", "cloud", "API")),
    (Industry.CONSULTING, ("consulting", "consultant", "advisory", "management consulting")),
    (Industry.MANUFACTURING, (
        "manufacturing", "factory", "production", "supply chain", "industrial", "warehouse",
    )),
    (Industry.COACHING, ("coaching", "coach", "mentor", "training", "development", "leadership")),
    (Industry.TECHNOLOGY, ("tech", "developer", "devops", "engineering", "startup")),
)

# Declaration order breaks ties between drivers with equal match counts
EMOTIONAL_PATTERNS: tuple[tuple[EmotionalDriver, tuple[str, ...]], ...] = (
    (EmotionalDriver.URGENCY, (
        "risk", "fine", "penalty", "deadline", "urgent", "critical", "immediately",
        "before", "breach", "threat",
    )),
    (EmotionalDriver.PROTECTION, (
        "protect", "secure", "shield", "prevent", "safe", "guard", "defense", "compliance",
    )),
    (EmotionalDriver.GROWTH, (
        "grow", "increase", "scale", "expand", "revenue", "profit", "ROI", "improve",
    )),
    (EmotionalDriver.TRANSFORMATION, (
        "transform", "change", "evolve", "breakthrough", "reimagine", "revolutionize",
    )),
    (EmotionalDriver.PREMIUM, (
        "exclusive", "boutique", "premium", "luxury", "high-end", "elite", "select",
    )),
)

# A single incidental mention must not trigger a driver
DRIVER_MIN_MATCHES = 2

INDUSTRY_PALETTES: dict[str, ColorPalette] = {
    "healthcare": ColorPalette(
        mode="light",
        primary="#0D9488",  # teal, clinical trust
        secondary="#1E3A5F",  # navy, stability
        accent="#10B981",  # green, positive outcomes
        background="#F8FAFC",
        foreground="#0F172A",
        muted="#64748B",
        cta_background="#0D9488",
        cta_text="#FFFFFF",
        reasoning="Cool, muted tones increase perceived trust and privacy in healthcare contexts",
    ),
    "cybersecurity": ColorPalette(
        mode="dark",
        primary="#3B82F6",  # blue, protection
        secondary="#1E3A5F",  # navy, security authority
        accent="#06B6D4",  # cyan, modern tech
        background="#0F172A",
        foreground="#F1F5F9",
        muted="#94A3B8",
        cta_background="#10B981",
        cta_text="#FFFFFF",
        reasoning="Dark mode signals technical sophistication; blue conveys protection",
    ),
    "finance": ColorPalette(
        mode="light",
        primary="#1E3A5F",  # navy, stability
        secondary="#0F766E",  # teal, growth
        accent="#10B981",  # green, positive financial
        background="#FFFFFF",
        foreground="#0F172A",
        muted="#64748B",
        cta_background="#1E3A5F",
        cta_text="#FFFFFF",
        reasoning="Blue dominates finance for trust/stability; green signals growth",
    ),
    "saas": ColorPalette(
        mode="dark",
        primary="#7C3AED",  # purple, innovation
        secondary="#1E293B",  # slate, professional
        accent="#06B6D4",  # cyan, modern tech
        background="#0F172A",
        foreground="#F1F5F9",
        muted="#94A3B8",
        cta_background="#7C3AED",
        cta_text="#FFFFFF",
        reasoning="Purple/cyan signal innovation while maintaining professionalism",
    ),
    "consulting": ColorPalette(
        mode="light",
        primary="#1E3A5F",  # navy, authority
        secondary="#374151",  # gray, seriousness
        accent="#D97706",  # gold, subtle premium
        background="#FFFFFF",
        foreground="#0F172A",
        muted="#6B7280",
        cta_background="#1E3A5F",
        cta_text="#FFFFFF",
        reasoning="Navy + charcoal builds authority; gold accent for premium positioning",
    ),
    "manufacturing": ColorPalette(
        mode="light",
        primary="#0369A1",  # industrial blue
        secondary="#374151",  # steel gray
        accent="#EA580C",  # safety orange
        background="#F8FAFC",
        foreground="#0F172A",
        muted="#6B7280",
        cta_background="#0369A1",
        cta_text="#FFFFFF",
        reasoning="Industrial palette signals capability, reliability, and safety",
    ),
    "creative": ColorPalette(
        mode="dark",
        primary="#8B5CF6",  # purple, creativity
        secondary="#0F172A",  # deep slate
        accent="#F97316",  # orange, bold expression
        background="#0A0A0F",  # near-black, gallery feel
        foreground="#F8FAFC",
        muted="#94A3B8",
        cta_background="#8B5CF6",
        cta_text="#FFFFFF",
        reasoning="Dark mode signals creative sophistication; purple conveys creativity and transformation",
    ),
    "agency": ColorPalette(
        mode="dark",
        primary="#8B5CF6",  # purple, creativity
        secondary="#1E293B",  # slate, professional
        accent="#06B6D4",  # cyan, digital
        background="#0F172A",
        foreground="#F1F5F9",
        muted="#94A3B8",
        cta_background="#8B5CF6",
        cta_text="#FFFFFF",
        reasoning="Creative agency palette with dark sophistication and vibrant accents",
    ),
    "coaching": ColorPalette(
        mode="warm",
        primary="#7C3AED",  # purple, transformation
        secondary="#4F46E5",  # indigo, depth
        accent="#F59E0B",  # warm amber, energy
        background="#FFFBEB",
        foreground="#1F2937",
        muted="#6B7280",
        cta_background="#7C3AED",
        cta_text="#FFFFFF",
        reasoning="Warmer tones signal transformation and human connection",
    ),
    "technology": ColorPalette(
        mode="dark",
        primary="#3B82F6",  # blue, trust
        secondary="#1E293B",  # slate
        accent="#10B981",  # green, growth
        background="#0F172A",
        foreground="#F1F5F9",
        muted="#94A3B8",
        cta_background="#3B82F6",
        cta_text="#FFFFFF",
        reasoning="Tech-forward dark mode with trust-building blue",
    ),
}

EMOTIONAL_ACCENTS: dict[str, EmotionalAccent] = {
    "urgency": EmotionalAccent(
        color="#F59E0B",  # amber, urgency without alarm
        reasoning="Amber creates urgency without the anxiety spike of red",
    ),
    "protection": EmotionalAccent(
        color="#3B82F6",
        reasoning="Blue conveys protection and security",
    ),
    "growth": EmotionalAccent(
        color="#10B981",
        reasoning="Green signals growth and positive financial/business outcomes",
    ),
    "transformation": EmotionalAccent(
        color="#7C3AED",
        reasoning="Purple represents transformation and breakthrough",
    ),
    "premium": EmotionalAccent(
        color="#D97706",
        reasoning="Gold suggests premium positioning and exclusivity",
    ),
}

HYBRID_HEALTHCARE_SECURITY_REASONING = (
    "Healthcare trust requirement overrides cybersecurity dark mode; "
    "navy adds security authority"
)
LIGHT_MODE_URGENCY_REASONING = "CTA uses amber for urgency without anxiety."


def _keyword_hits(text: str, keywords: tuple[str, ...]) -> int:
    """Number of distinct keywords present in already-lowercased text."""
    return sum(1 for kw in keywords if kw.lower() in text)


def detect_industry(text: str) -> str:
    """Classify the industry of the conversation text.

    The industry with the most distinct keyword hits wins; equal scores go
    to the group declared first in INDUSTRY_KEYWORDS. No hits at all
    defaults to saas.
    """
    lowered = (text or "").lower()

    best = DEFAULT_INDUSTRY
    best_score = 0
    scores: dict[str, int] = {}
    for industry, keywords in INDUSTRY_KEYWORDS:
        score = _keyword_hits(lowered, keywords)
        scores[industry.value] = score
        if score > best_score:
            best, best_score = industry, score

    logger.debug("Industry detected", industry=best.value, scores=scores)
    return best.value


def detect_emotional_drivers(text: str) -> list[EmotionalDriver]:
    """Detect emotional drivers with at least two matching keywords.

    Returns drivers ordered by descending match count; the first one is the
    primary driver used for accent overrides.
    """
    lowered = (text or "").lower()

    matched: list[tuple[int, int, EmotionalDriver]] = []
    for position, (driver, patterns) in enumerate(EMOTIONAL_PATTERNS):
        hits = _keyword_hits(lowered, patterns)
        if hits >= DRIVER_MIN_MATCHES:
            matched.append((-hits, position, driver))

    detected = [driver for _, _, driver in sorted(matched)]
    logger.debug("Emotional drivers detected", drivers=[d.value for d in detected])
    return detected


def _emotional_overrides(
    palette: ColorPalette,
    drivers: list[EmotionalDriver],
    reasoning: str,
) -> dict[str, Any]:
    """Field updates contributed by the primary emotional driver."""
    if not drivers:
        return {}

    primary_driver = getattr(drivers[0], "value", drivers[0])
    accent = EMOTIONAL_ACCENTS.get(primary_driver)
    if accent is None:
        return {}

    # Warm hues stay off large light-mode surfaces; confine them to the CTA
    if palette.mode == "light" and primary_driver == EmotionalDriver.URGENCY.value:
        return {
            "cta_background": EMOTIONAL_ACCENTS["urgency"].color,
            "reasoning": f"{reasoning}. {LIGHT_MODE_URGENCY_REASONING}",
        }

    return {
        "accent": accent.color,
        "reasoning": f"{reasoning}. {accent.reasoning}",
    }


def get_color_palette(
    industry: str,
    target_market: str | None = None,
    emotional_drivers: list[EmotionalDriver] | None = None,
) -> ColorPalette:
    """Build the page palette for an industry.

    Healthcare (as the industry or mentioned in the target market) forces
    the light healthcare palette; a cybersecurity industry in that context
    keeps its navy secondary. The primary emotional driver then adjusts the
    accent, or the CTA background for light-mode urgency. Overrides only
    append to the base reasoning.

    Args:
        industry: Detected or pre-classified industry.
        target_market: Free-text target market hint.
        emotional_drivers: Drivers ordered by strength.

    Returns:
        A fresh palette; the lookup tables are never modified.
    """
    drivers = emotional_drivers or []
    base_industry = industry
    updates: dict[str, Any] = {}

    healthcare_context = industry == Industry.HEALTHCARE.value or (
        target_market is not None and "healthcare" in target_market.lower()
    )
    if healthcare_context:
        base_industry = Industry.HEALTHCARE.value

    if base_industry in INDUSTRY_PALETTES:
        base = INDUSTRY_PALETTES[base_industry]
    else:
        logger.debug("No palette for industry, using default", industry=industry)
        base_industry = DEFAULT_INDUSTRY.value
        base = INDUSTRY_PALETTES[base_industry]

    reasoning = base.reasoning
    if healthcare_context and industry == Industry.CYBERSECURITY.value:
        reasoning = f"{reasoning}. {HYBRID_HEALTHCARE_SECURITY_REASONING}"
        updates["secondary"] = INDUSTRY_PALETTES["cybersecurity"].secondary
        updates["reasoning"] = reasoning

    updates.update(_emotional_overrides(base, drivers, reasoning))

    logger.debug(
        "Color palette selected",
        industry=industry,
        base_industry=base_industry,
        overrides=sorted(updates),
    )
    return base.model_copy(update=updates, deep=True)
