"""Buyer awareness detection.

Based on Eugene Schwartz's five levels of awareness. The detected level
decides page structure and CTA strategy.
"""

import re

import structlog

from pageconsult.models.design_intelligence import AwarenessLevel, PageStructure

logger = structlog.get_logger()

# Consultation visitors are at least problem-aware when they give no signal
DEFAULT_AWARENESS = AwarenessLevel.PROBLEM_AWARE

# Patterns are regular expressions; declaration order breaks ties
AWARENESS_SIGNALS: tuple[tuple[AwarenessLevel, tuple[str, ...]], ...] = (
    (AwarenessLevel.UNAWARE, (
        r"not sure if we need",
        r"exploring options",
        r"what does .* mean",
        r"never heard of",
        r"just curious",
        r"learning about",
    )),
    (AwarenessLevel.PROBLEM_AWARE, (
        r"struggling with",
        r"pain point",
        r"biggest challenge",
        r"keeps us up",
        r"frustrated by",
        r"problem is",
        r"issue with",
        r"can't seem to",
        r"failing to",
    )),
    (AwarenessLevel.SOLUTION_AWARE, (
        r"looking for a solution",
        r"comparing options",
        r"what makes you different",
        r"vs competitors",
        r"alternatives",
        r"which solution",
        r"evaluating",
    )),
    (AwarenessLevel.PRODUCT_AWARE, (
        r"heard about you",
        r"saw your demo",
        r"colleague recommended",
        r"read your case study",
        r"found you on",
        r"been following",
    )),
    (AwarenessLevel.MOST_AWARE, (
        r"ready to start",
        r"what's the pricing",
        r"when can we begin",
        r"sign up",
        r"get started",
        r"pricing page",
        r"how much",
    )),
)

_COMPILED_SIGNALS: tuple[tuple[AwarenessLevel, tuple[re.Pattern[str], ...]], ...] = tuple(
    (level, tuple(re.compile(p, re.IGNORECASE) for p in patterns))
    for level, patterns in AWARENESS_SIGNALS
)

PAGE_STRUCTURES: dict[AwarenessLevel, PageStructure] = {
    AwarenessLevel.UNAWARE: PageStructure(
        sections=[
            "hero-story",
            "problem-agitation",
            "social-proof-soft",
            "solution-intro",
            "features-light",
            "cta-content",
            "cta-demo-secondary",
        ],
        hero_style="story",
        cta_strategy="content-first",
        proof_placement="late",
        reasoning="Unaware visitors need education before selling. Lead with story, defer product.",
    ),
    AwarenessLevel.PROBLEM_AWARE: PageStructure(
        sections=[
            "hero-problem",
            "credibility-bar",
            "stakes-amplify",
            "solution-bridge",
            "proof-before-after",
            "features-benefits",
            "testimonial",
            "faq-objections",
            "cta-discovery",
            "cta-demo-primary",
        ],
        hero_style="problem",
        cta_strategy="discovery",
        proof_placement="mid",
        reasoning="Problem-aware visitors need validation of their pain, then a bridge to solution.",
    ),
    AwarenessLevel.SOLUTION_AWARE: PageStructure(
        sections=[
            "hero-mechanism",
            "credibility-bar",
            "old-vs-new",
            "differentiators",
            "proof-quantified",
            "features-comparison",
            "case-study",
            "faq-criteria",
            "cta-demo-primary",
        ],
        hero_style="mechanism",
        cta_strategy="demo",
        proof_placement="mid",
        reasoning="Solution-aware visitors are comparing. Show your unique mechanism and proof.",
    ),
    AwarenessLevel.PRODUCT_AWARE: PageStructure(
        sections=[
            "hero-product",
            "proof-heavy",
            "features-deep",
            "case-studies",
            "testimonials-detailed",
            "pricing-preview",
            "faq-objections",
            "cta-trial-primary",
            "cta-demo-secondary",
        ],
        hero_style="product",
        cta_strategy="trial",
        proof_placement="early",
        reasoning="Product-aware visitors know you. Heavy proof and clear path to trial.",
    ),
    AwarenessLevel.MOST_AWARE: PageStructure(
        sections=[
            "hero-offer",
            "risk-reversal",
            "proof-minimal",
            "trust-badges",
            "cta-transaction",
        ],
        hero_style="offer",
        cta_strategy="transaction",
        proof_placement="prominent",
        reasoning="Most-aware visitors are ready. Remove friction, present offer clearly.",
    ),
}


def detect_awareness_level(conversation_text: str) -> AwarenessLevel:
    """Detect the buyer awareness stage of the conversation.

    Each stage scores the total number of pattern matches. Without any
    signal the visitor is assumed problem-aware; otherwise the top stage
    wins, ties going to the earlier stage.
    """
    text = (conversation_text or "").lower()

    scores: dict[AwarenessLevel, int] = {}
    for level, patterns in _COMPILED_SIGNALS:
        scores[level] = sum(len(p.findall(text)) for p in patterns)

    if all(score == 0 for score in scores.values()):
        logger.debug("Awareness defaulted", awareness=DEFAULT_AWARENESS.value)
        return DEFAULT_AWARENESS

    detected = DEFAULT_AWARENESS
    best_score = 0
    for level, _ in _COMPILED_SIGNALS:
        if scores[level] > best_score:
            detected, best_score = level, scores[level]

    logger.debug(
        "Awareness level detected",
        awareness=detected.value,
        scores={level.value: score for level, score in scores.items()},
    )
    return detected


def get_page_structure(awareness: AwarenessLevel) -> PageStructure:
    """Look up the page structure for an awareness level."""
    return PAGE_STRUCTURES[AwarenessLevel(awareness)].model_copy(deep=True)
