"""Strategic design intelligence data models.

Defines the value types produced by the design intelligence detectors and
advisors, and the aggregate recommendation handed to the page renderer.
"""

from enum import Enum
from typing import Any, Literal

from pydantic import Field, field_validator

from pageconsult.models.base import BaseModel

HEX_COLOR = r"^#[0-9A-Fa-f]{6}$"


class ToneLabel(str, Enum):
    """Dominant persuasive register of the conversation."""

    AUTHORITATIVE = "authoritative"
    URGENT = "urgent"
    CONSULTATIVE = "consultative"
    INNOVATIVE = "innovative"
    WARM = "warm"


class Industry(str, Enum):
    """Industries the text classifier can detect."""

    CREATIVE = "creative"
    AGENCY = "agency"
    HEALTHCARE = "healthcare"
    CYBERSECURITY = "cybersecurity"
    FINANCE = "finance"
    SAAS = "saas"
    CONSULTING = "consulting"
    MANUFACTURING = "manufacturing"
    COACHING = "coaching"
    TECHNOLOGY = "technology"


class EmotionalDriver(str, Enum):
    """Persuasive motivator used to bias accent and CTA colors."""

    URGENCY = "urgency"
    PROTECTION = "protection"
    GROWTH = "growth"
    TRANSFORMATION = "transformation"
    PREMIUM = "premium"


class AwarenessLevel(str, Enum):
    """Schwartz buyer awareness stage."""

    UNAWARE = "unaware"
    PROBLEM_AWARE = "problemAware"
    SOLUTION_AWARE = "solutionAware"
    PRODUCT_AWARE = "productAware"
    MOST_AWARE = "mostAware"


class ProofDensity(str, Enum):
    """How much verifiable evidence backs the page."""

    SPARSE = "sparse"
    MODERATE = "moderate"
    RICH = "rich"


class ToneProfile(BaseModel):
    """Tone classification of the conversation text."""

    primary: ToneLabel
    secondary: ToneLabel | None = None
    confidence: float = Field(..., ge=0, le=1)
    markers: list[str] = Field(default_factory=list, max_length=5)


class TypographyRecommendation(BaseModel):
    """Font pairing chosen from the tone profile."""

    heading_font: str
    body_font: str
    heading_weight: int
    body_weight: int
    reasoning: str


class ColorPalette(BaseModel):
    """Page color palette."""

    mode: Literal["light", "dark", "warm"]
    primary: str = Field(..., pattern=HEX_COLOR)
    secondary: str = Field(..., pattern=HEX_COLOR)
    accent: str = Field(..., pattern=HEX_COLOR)
    background: str = Field(..., pattern=HEX_COLOR)
    foreground: str = Field(..., pattern=HEX_COLOR)
    muted: str = Field(..., pattern=HEX_COLOR)
    cta_background: str = Field(..., pattern=HEX_COLOR)
    cta_text: str = Field(..., pattern=HEX_COLOR)
    reasoning: str


class EmotionalAccent(BaseModel):
    """Accent color associated with an emotional driver."""

    color: str = Field(..., pattern=HEX_COLOR)
    reasoning: str


class PageStructure(BaseModel):
    """Ordered page sections and CTA strategy for an awareness level."""

    sections: list[str]
    hero_style: Literal["story", "problem", "mechanism", "product", "offer"]
    cta_strategy: Literal["content-first", "discovery", "demo", "trial", "transaction"]
    proof_placement: Literal["late", "mid", "early", "prominent"]
    reasoning: str


class Testimonial(BaseModel):
    """A customer quote."""

    quote: str
    author: str | None = None
    title: str | None = None


class CaseStudy(BaseModel):
    """A customer success story."""

    title: str
    result: str
    detail: str | None = None


class ProofPoints(BaseModel):
    """Evidence found in the intelligence record.

    Every field is optional. A missing field scores zero but must never be
    displayed as zero.
    """

    client_count: str | None = None
    years_in_business: str | None = None
    specific_results: list[str] | None = None
    percentage_stats: list[str] | None = None
    dollar_stats: list[str] | None = None
    testimonials: list[Testimonial] | None = None
    case_studies: list[CaseStudy] | None = None
    certifications: list[str] | None = None
    client_logos: list[str] | None = None


class VisualWeightConfig(BaseModel):
    """Prominence of proof-dependent sections.

    `hidden` is a hard suppression instruction for the renderer.
    """

    stats_bar: Literal["hidden", "standard", "prominent"]
    testimonial_style: Literal["hidden", "inline", "featured"]
    case_study_style: Literal["hidden", "summary", "detailed"]
    features_style: Literal["prominent", "standard", "compact"]
    hero_style: Literal["image-heavy", "balanced", "text-focused"]
    reasoning: str


class DesignSummary(BaseModel):
    """Human-readable rationale for the brief."""

    design_rationale: str
    key_decisions: list[str] = Field(default_factory=list)


class DesignIntelligenceInput(BaseModel):
    """Input to the design intelligence engine."""

    conversation_text: str = Field(default="", description="User-authored consultation text")
    extracted_intelligence: Any = Field(
        default=None, description="Loosely structured market/persona intelligence record"
    )
    target_market: str | None = None
    industry_category: str | None = Field(
        default=None, description="Industry already classified upstream"
    )
    industry_confidence: Literal["high", "medium", "low"] | None = None

    @field_validator("conversation_text", mode="before")
    @classmethod
    def default_missing_text(cls, v: str | None) -> str:
        """Treat a null conversation as empty text."""
        return "" if v is None else v


class DesignIntelligenceOutput(BaseModel):
    """Complete design recommendation."""

    # Detection results
    tone: ToneProfile
    industry: str
    emotional_drivers: list[EmotionalDriver] = Field(default_factory=list)
    awareness_level: AwarenessLevel
    proof_density: ProofDensity
    proof_points: ProofPoints

    # Design recommendations
    typography: TypographyRecommendation
    colors: ColorPalette
    page_structure: PageStructure
    visual_weight: VisualWeightConfig

    summary: DesignSummary


class SectionSelection(BaseModel):
    """Concrete renderable section list derived from a recommendation."""

    sections: list[str]
    hero_variant: Literal["default", "problem", "mechanism", "offer"] = "default"
    reasoning: str = ""
