"""Pydantic models for PageConsult design intelligence."""

from pageconsult.models.base import BaseModel
from pageconsult.models.design_intelligence import (
    AwarenessLevel,
    CaseStudy,
    ColorPalette,
    DesignIntelligenceInput,
    DesignIntelligenceOutput,
    DesignSummary,
    EmotionalAccent,
    EmotionalDriver,
    Industry,
    PageStructure,
    ProofDensity,
    ProofPoints,
    SectionSelection,
    Testimonial,
    ToneLabel,
    ToneProfile,
    TypographyRecommendation,
    VisualWeightConfig,
)

__all__ = [
    "AwarenessLevel",
    "BaseModel",
    "CaseStudy",
    "ColorPalette",
    "DesignIntelligenceInput",
    "DesignIntelligenceOutput",
    "DesignSummary",
    "EmotionalAccent",
    "EmotionalDriver",
    "Industry",
    "PageStructure",
    "ProofDensity",
    "ProofPoints",
    "SectionSelection",
    "Testimonial",
    "ToneLabel",
    "ToneProfile",
    "TypographyRecommendation",
    "VisualWeightConfig",
]
