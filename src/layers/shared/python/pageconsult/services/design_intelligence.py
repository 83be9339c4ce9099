"""Strategic Design Intelligence engine.

Combines the detectors into one design recommendation. The user never picks
fonts, colors, or layouts; everything is inferred through a fixed pipeline:

1. Tone -> typography
2. Industry (trusted upstream classification or text detection)
3. Emotional drivers
4. Color palette
5. Buyer awareness -> page structure
6. Proof points -> proof density -> visual weight
7. Summary and key decisions

The engine is pure and synchronous: no network, no storage, no randomness.
"""

from typing import Any

import structlog

from pageconsult.models.design_intelligence import (
    AwarenessLevel,
    ColorPalette,
    DesignIntelligenceInput,
    DesignIntelligenceOutput,
    DesignSummary,
    PageStructure,
    ProofDensity,
    ToneProfile,
    TypographyRecommendation,
    VisualWeightConfig,
)
from pageconsult.services.awareness_detector import detect_awareness_level, get_page_structure
from pageconsult.services.color_intelligence import (
    detect_emotional_drivers,
    detect_industry,
    get_color_palette,
)
from pageconsult.services.proof_density_analyzer import (
    analyze_proof_density,
    extract_proof_points,
    get_visual_weight_config,
)
from pageconsult.services.tone_detector import detect_tone, get_typography_recommendation

logger = structlog.get_logger()

# Upstream classifications at this confidence are re-detected from text
UNTRUSTED_CONFIDENCE = "low"


class DesignIntelligenceEngine:
    """Runs the design intelligence pipeline."""

    def generate(self, request: DesignIntelligenceInput) -> DesignIntelligenceOutput:
        """Produce a complete design recommendation.

        Args:
            request: Conversation text, intelligence record and optional
                upstream industry classification.

        Returns:
            DesignIntelligenceOutput; never raises for well-typed input,
            including empty text and a missing intelligence record.
        """
        text = request.conversation_text or ""

        logger.info(
            "Starting design intelligence analysis",
            text_length=len(text),
            has_intelligence=request.extracted_intelligence is not None,
            has_industry_category=bool(request.industry_category),
        )

        # Stage 1: Tone and typography
        tone = detect_tone(text)
        typography = get_typography_recommendation(tone)

        # Stage 2: Industry
        industry = self._resolve_industry(request, text)

        # Stages 3-4: Emotional drivers and palette
        emotional_drivers = detect_emotional_drivers(text)
        colors = get_color_palette(industry, request.target_market, emotional_drivers)

        # Stage 5: Buyer awareness
        awareness_level = detect_awareness_level(text)
        page_structure = get_page_structure(awareness_level)

        # Stage 6: Proof density
        proof_points = extract_proof_points(request.extracted_intelligence)
        proof_density = analyze_proof_density(proof_points)
        visual_weight = get_visual_weight_config(proof_density)

        # Stage 7: Summary
        summary = self._build_summary(
            tone=tone,
            industry=industry,
            awareness_level=awareness_level,
            proof_density=proof_density,
            typography=typography,
            colors=colors,
            page_structure=page_structure,
            visual_weight=visual_weight,
        )

        output = DesignIntelligenceOutput(
            tone=tone,
            industry=industry,
            emotional_drivers=emotional_drivers,
            awareness_level=awareness_level,
            proof_density=proof_density,
            proof_points=proof_points,
            typography=typography,
            colors=colors,
            page_structure=page_structure,
            visual_weight=visual_weight,
            summary=summary,
        )

        logger.info(
            "Design intelligence complete",
            tone=output.tone.primary,
            industry=output.industry,
            awareness_level=output.awareness_level,
            proof_density=output.proof_density,
        )
        return output

    def _resolve_industry(self, request: DesignIntelligenceInput, text: str) -> str:
        """Trust the upstream industry unless it is missing or low confidence."""
        if request.industry_category and request.industry_confidence != UNTRUSTED_CONFIDENCE:
            logger.debug(
                "Using pre-detected industry",
                industry=request.industry_category,
                confidence=request.industry_confidence,
            )
            return request.industry_category

        return detect_industry(text)

    def _build_summary(
        self,
        tone: ToneProfile,
        industry: str,
        awareness_level: AwarenessLevel,
        proof_density: ProofDensity,
        typography: TypographyRecommendation,
        colors: ColorPalette,
        page_structure: PageStructure,
        visual_weight: VisualWeightConfig,
    ) -> DesignSummary:
        """Template the rationale sentence and one key decision per advisor."""
        awareness = getattr(awareness_level, "value", awareness_level)
        density = getattr(proof_density, "value", proof_density)

        key_decisions = [
            f"Typography: {typography.heading_font}/{typography.body_font} - {typography.reasoning}",
            f"Colors: {colors.mode} mode with {colors.primary} primary - {colors.reasoning}",
            (
                f"Layout: {page_structure.hero_style} hero, {page_structure.cta_strategy} "
                f"CTA strategy - {page_structure.reasoning}"
            ),
            (
                f"Visual Weight: {visual_weight.stats_bar} stats, "
                f"{visual_weight.testimonial_style} testimonials - {visual_weight.reasoning}"
            ),
        ]

        return DesignSummary(
            design_rationale=(
                f"Detected {tone.primary} tone in {industry} context with {awareness} "
                f"buyer awareness. {density} proof density available."
            ),
            key_decisions=key_decisions,
        )


def generate_design_intelligence(
    request: DesignIntelligenceInput | dict[str, Any],
) -> DesignIntelligenceOutput:
    """Generate a design recommendation.

    Accepts the input model or a plain dict using either camelCase or
    snake_case keys.
    """
    if not isinstance(request, DesignIntelligenceInput):
        request = DesignIntelligenceInput.model_validate(request)
    return DesignIntelligenceEngine().generate(request)
