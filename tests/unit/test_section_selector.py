"""Tests for section selection."""

import pytest

from pageconsult.services.design_intelligence import generate_design_intelligence
from pageconsult.services.section_selector import (
    BETA_SECTIONS,
    DEFAULT_SECTIONS,
    select_sections,
)


@pytest.fixture
def sdi_factory():
    """Build a design recommendation with selected fields overridden."""
    base = generate_design_intelligence({})

    def _create(awareness="problemAware", density="sparse", drivers=None):
        return base.model_copy(
            update={
                "awareness_level": awareness,
                "proof_density": density,
                "emotional_drivers": drivers or [],
            }
        )

    return _create


class TestSelectSections:
    """Tests for select_sections."""

    def test_no_intelligence_uses_default(self):
        """Test the balanced default structure."""
        selection = select_sections(None)

        assert selection.sections == DEFAULT_SECTIONS
        assert selection.hero_variant == "default"
        assert selection.reasoning.startswith("No design intelligence available")

    def test_beta_page_fixed_structure(self, sdi_factory):
        """Test that beta pages ignore the recommendation."""
        selection = select_sections(sdi_factory("mostAware", "rich"), is_beta_page=True)

        assert selection.sections == BETA_SECTIONS
        assert selection.hero_variant == "default"

    def test_default_list_not_shared(self):
        """Test callers get their own list."""
        select_sections(None).sections.append("injected")

        assert "injected" not in DEFAULT_SECTIONS

    def test_problem_aware_sparse(self, sdi_factory):
        """Test sparse proof drops social proof for problem-aware visitors."""
        selection = select_sections(sdi_factory("problemAware", "sparse"))

        assert selection.sections == [
            "hero",
            "stakes-amplify",
            "problem-solution",
            "features",
            "faq",
            "final-cta",
        ]
        assert selection.hero_variant == "problem"
        assert selection.reasoning.endswith("Removed proof sections due to sparse data.")

    def test_product_aware_sparse_removes_every_proof_section(self, sdi_factory):
        """Test that stats, credibility and social proof all go."""
        selection = select_sections(sdi_factory("productAware", "sparse"))

        assert selection.sections == ["hero", "features", "faq", "final-cta"]

    def test_sparse_without_proof_sections_keeps_reasoning(self, sdi_factory):
        """Test nothing is noted when there was nothing to remove."""
        selection = select_sections(sdi_factory("mostAware", "moderate"))

        assert selection.sections == ["hero", "risk-reversal", "social-proof", "final-cta"]
        assert selection.reasoning == (
            "Most-aware: minimal friction, offer-focused with strong guarantee"
        )

    def test_most_aware_rich_adds_stats_after_hero(self, sdi_factory):
        """Test rich proof inserts a stats bar right after the hero."""
        selection = select_sections(sdi_factory("mostAware", "rich"))

        assert selection.sections == [
            "hero",
            "stats-bar",
            "risk-reversal",
            "social-proof",
            "final-cta",
        ]
        assert selection.hero_variant == "offer"
        assert selection.reasoning.endswith("Enhanced with additional proof sections.")

    def test_rich_keeps_existing_proof_sections(self, sdi_factory):
        """Test rich proof does not duplicate sections already present."""
        selection = select_sections(sdi_factory("solutionAware", "rich"))

        assert selection.sections.count("stats-bar") == 1
        assert selection.sections.count("social-proof") == 1

    def test_urgency_adds_stakes_after_hero(self, sdi_factory):
        """Test urgency inserts a stakes section after the hero."""
        selection = select_sections(sdi_factory("solutionAware", "moderate", ["urgency"]))

        assert selection.sections[:3] == ["hero", "stakes-amplify", "comparison"]
        assert selection.hero_variant == "mechanism"

    def test_urgency_ignored_for_most_aware(self, sdi_factory):
        """Test most-aware pages stay minimal under urgency."""
        selection = select_sections(sdi_factory("mostAware", "moderate", ["urgency"]))

        assert "stakes-amplify" not in selection.sections

    def test_urgency_not_duplicated(self, sdi_factory):
        """Test pages that already amplify stakes are unchanged."""
        selection = select_sections(sdi_factory("problemAware", "moderate", ["urgency"]))

        assert selection.sections.count("stakes-amplify") == 1

    def test_protection_adds_risk_reversal_before_final_cta(self, sdi_factory):
        """Test protection inserts risk reversal ahead of the closing CTA."""
        selection = select_sections(sdi_factory("unaware", "moderate", ["protection"]))

        assert selection.sections[-2:] == ["risk-reversal", "final-cta"]

    def test_unaware_rich_with_both_drivers(self, sdi_factory):
        """Test proof and driver adjustments combine."""
        selection = select_sections(
            sdi_factory("unaware", "rich", ["urgency", "protection"])
        )

        assert selection.sections == [
            "hero",
            "stats-bar",
            "stakes-amplify",
            "social-proof",
            "problem-solution",
            "features",
            "risk-reversal",
            "final-cta",
        ]

    def test_from_generated_brief(self, compliance_conversation):
        """Test selection from a real recommendation."""
        sdi = generate_design_intelligence({"conversationText": compliance_conversation})

        selection = select_sections(sdi)

        assert selection.hero_variant == "problem"
        assert "social-proof" not in selection.sections
        assert selection.sections[0] == "hero"
