"""Section selection driven by design intelligence.

Turns a design recommendation into the concrete list of renderable page
sections, based on buyer awareness, proof density, and emotional drivers.
"""

import structlog

from pageconsult.models.design_intelligence import (
    AwarenessLevel,
    DesignIntelligenceOutput,
    EmotionalDriver,
    ProofDensity,
    SectionSelection,
)

logger = structlog.get_logger()

BETA_SECTIONS = ["beta-hero-teaser", "features", "founder", "waitlist-proof", "final-cta"]
DEFAULT_SECTIONS = ["hero", "stats-bar", "problem-solution", "features", "faq", "final-cta"]

# Sections that only make sense with real evidence behind them
PROOF_SECTIONS = frozenset({"stats-bar", "social-proof", "credibility-strip"})

# awareness -> (sections, hero variant, reasoning)
AWARENESS_SECTIONS: dict[AwarenessLevel, tuple[tuple[str, ...], str, str]] = {
    AwarenessLevel.UNAWARE: (
        ("hero", "stakes-amplify", "social-proof", "problem-solution", "features", "final-cta"),
        "default",
        "Unaware audience: leading with relatable situation before introducing problem",
    ),
    AwarenessLevel.PROBLEM_AWARE: (
        ("hero", "stakes-amplify", "problem-solution", "social-proof", "features", "faq", "final-cta"),
        "problem",
        "Problem-aware: validating pain before showing solution path",
    ),
    AwarenessLevel.SOLUTION_AWARE: (
        ("hero", "comparison", "features", "stats-bar", "social-proof", "faq", "final-cta"),
        "mechanism",
        "Solution-aware: differentiating approach with comparison",
    ),
    AwarenessLevel.PRODUCT_AWARE: (
        ("hero", "credibility-strip", "stats-bar", "features", "social-proof", "faq", "final-cta"),
        "default",
        "Product-aware: heavy proof and credibility to drive conversion",
    ),
    AwarenessLevel.MOST_AWARE: (
        ("hero", "risk-reversal", "social-proof", "final-cta"),
        "offer",
        "Most-aware: minimal friction, offer-focused with strong guarantee",
    ),
}


def _hero_index(sections: list[str]) -> int:
    for i, section in enumerate(sections):
        if section == "hero" or section.startswith("hero-"):
            return i
    return -1


def select_sections(
    sdi: DesignIntelligenceOutput | None,
    is_beta_page: bool = False,
) -> SectionSelection:
    """Select page sections from a design recommendation.

    Args:
        sdi: Design intelligence output, or None when none was generated.
        is_beta_page: Beta waitlist pages use a fixed structure.

    Returns:
        Ordered sections, hero variant and reasoning.
    """
    if is_beta_page:
        logger.debug("Beta page, using fixed section structure")
        return SectionSelection(
            sections=list(BETA_SECTIONS),
            hero_variant="default",
            reasoning="Beta page uses fixed structure optimized for signups",
        )

    if sdi is None:
        logger.debug("No design intelligence, using default section structure")
        return SectionSelection(
            sections=list(DEFAULT_SECTIONS),
            hero_variant="default",
            reasoning="No design intelligence available - using balanced default structure",
        )

    awareness = AwarenessLevel(sdi.awareness_level)
    base_sections, hero_variant, reasoning = AWARENESS_SECTIONS[awareness]
    sections = list(base_sections)

    density = ProofDensity(sdi.proof_density)
    if density == ProofDensity.SPARSE:
        kept = [s for s in sections if s not in PROOF_SECTIONS]
        if len(kept) < len(sections):
            reasoning += ". Removed proof sections due to sparse data."
        sections = kept
    elif density == ProofDensity.RICH:
        if "stats-bar" not in sections:
            hero = _hero_index(sections)
            if hero != -1:
                sections.insert(hero + 1, "stats-bar")
        if "social-proof" not in sections and "final-cta" in sections:
            sections.insert(sections.index("final-cta"), "social-proof")
        reasoning += ". Enhanced with additional proof sections."

    drivers = set(sdi.emotional_drivers)
    if (
        EmotionalDriver.URGENCY.value in drivers
        and "stakes-amplify" not in sections
        and awareness != AwarenessLevel.MOST_AWARE
    ):
        hero = _hero_index(sections)
        if hero != -1 and hero < len(sections) - 1:
            sections.insert(hero + 1, "stakes-amplify")

    if (
        EmotionalDriver.PROTECTION.value in drivers
        and "risk-reversal" not in sections
        and "final-cta" in sections
    ):
        sections.insert(sections.index("final-cta"), "risk-reversal")

    logger.debug(
        "Sections selected",
        sections=sections,
        hero_variant=hero_variant,
        awareness_level=awareness.value,
        proof_density=density.value,
    )
    return SectionSelection(sections=sections, hero_variant=hero_variant, reasoning=reasoning)
