"""Tests for tone detection and typography selection."""

import pytest

from pageconsult.models.design_intelligence import ToneLabel, ToneProfile
from pageconsult.services.tone_detector import (
    TYPOGRAPHY_MAPPINGS,
    detect_tone,
    get_typography_recommendation,
)


class TestDetectTone:
    """Tests for detect_tone."""

    @pytest.mark.parametrize("text", ["", "   ", "hello there", None])
    def test_unmatched_text_returns_authoritative_default(self, text):
        """Test that text without markers resolves to the first declared tone."""
        tone = detect_tone(text)

        assert tone.primary == "authoritative"
        assert tone.secondary is None
        assert tone.confidence == 0.5
        assert tone.markers == []

    def test_single_tone_full_confidence(self):
        """Test that a single matching tone reaches full confidence."""
        tone = detect_tone("Compliance, regulations and every audit we pass")

        assert tone.primary == "authoritative"
        assert tone.confidence == 1.0
        assert tone.markers == ["compliance", "regulations", "audit"]

    def test_case_insensitive_matching(self):
        """Test that markers match regardless of case."""
        tone = detect_tone("BREACH. Breach. LAWSUIT")

        assert tone.primary == "urgent"
        assert tone.markers == ["breach", "lawsuit"]

    def test_secondary_requires_more_than_two_hits(self):
        """Test that the runner-up tone needs at least three hits."""
        with_secondary = detect_tone(
            "compliance compliance compliance compliance. risk risk risk"
        )
        without_secondary = detect_tone("compliance compliance compliance. risk risk")

        assert with_secondary.primary == "authoritative"
        assert with_secondary.secondary == "urgent"
        assert without_secondary.secondary is None

    def test_confidence_formula(self):
        """Test confidence is the top share plus 0.3."""
        tone = detect_tone("compliance compliance compliance compliance. risk risk risk")

        assert tone.confidence == pytest.approx(4 / 7 + 0.3)

    def test_tie_goes_to_declaration_order(self):
        """Test that equal scores resolve to the earlier declared tone."""
        tone = detect_tone("risk partner")

        assert tone.primary == "urgent"
        assert tone.confidence == pytest.approx(0.8)

    def test_markers_capped_at_five(self):
        """Test that at most five markers are reported."""
        tone = detect_tone(
            "compliance regulatory certified standards audit legal governance"
        )

        assert tone.primary == "authoritative"
        assert tone.markers == ["compliance", "regulatory", "certified", "standards", "audit"]

    def test_idempotent(self, compliance_conversation):
        """Test that repeated calls return identical profiles."""
        assert detect_tone(compliance_conversation) == detect_tone(compliance_conversation)

    def test_primary_always_in_enumeration(self, compliance_conversation):
        """Test that the primary tone is a known label."""
        for text in ["", compliance_conversation, "we help families together"]:
            assert ToneLabel(detect_tone(text).primary)


class TestTypographyRecommendation:
    """Tests for get_typography_recommendation."""

    def test_primary_lookup(self):
        """Test the single-tone mapping."""
        tone = ToneProfile(primary="warm", confidence=0.9, markers=[])

        typography = get_typography_recommendation(tone)

        assert typography.heading_font == "Libre Baskerville"
        assert typography.body_font == "Source Sans Pro"
        assert typography.reasoning == TYPOGRAPHY_MAPPINGS["warm"].reasoning

    def test_combined_key_when_confident(self):
        """Test that a confident primary+secondary uses the combined mapping."""
        tone = ToneProfile(primary="authoritative", secondary="urgent", confidence=0.87)

        typography = get_typography_recommendation(tone)

        assert typography.heading_font == "Inter"
        assert typography.body_font == "DM Sans"
        assert typography.reasoning.startswith("Clean authority with modern urgency")

    def test_combined_key_ignored_at_low_confidence(self):
        """Test that confidence must exceed 0.6 for combined mappings."""
        tone = ToneProfile(primary="authoritative", secondary="urgent", confidence=0.6)

        typography = get_typography_recommendation(tone)

        assert typography == TYPOGRAPHY_MAPPINGS["authoritative"]

    def test_missing_combination_falls_back_to_primary(self):
        """Test that an unmapped combination uses the primary tone."""
        tone = ToneProfile(primary="warm", secondary="urgent", confidence=0.9)

        typography = get_typography_recommendation(tone)

        assert typography == TYPOGRAPHY_MAPPINGS["warm"]

    def test_unknown_primary_falls_back_to_authoritative(self):
        """Test the defensive default for an unmapped primary tone."""
        tone = ToneProfile.model_construct(
            primary="mystical", secondary=None, confidence=0.5, markers=[]
        )

        typography = get_typography_recommendation(tone)

        assert typography == TYPOGRAPHY_MAPPINGS["authoritative"]

    def test_every_tone_has_mapping(self):
        """Test that the mapping table covers the whole tone enumeration."""
        for label in ToneLabel:
            tone = ToneProfile(primary=label, confidence=0.5)
            assert get_typography_recommendation(tone) == TYPOGRAPHY_MAPPINGS[label.value]

    def test_detected_tone_end_to_end(self, compliance_conversation):
        """Test typography for a compliance-heavy conversation under deadline pressure."""
        tone = detect_tone(compliance_conversation)

        typography = get_typography_recommendation(tone)

        assert tone.primary == "authoritative"
        assert tone.secondary == "urgent"
        assert tone.confidence > 0.6
        assert (typography.heading_font, typography.body_font) == ("Inter", "DM Sans")
