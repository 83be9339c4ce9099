"""Service modules for design intelligence."""

from pageconsult.services.awareness_detector import detect_awareness_level, get_page_structure
from pageconsult.services.color_intelligence import (
    detect_emotional_drivers,
    detect_industry,
    get_color_palette,
)
from pageconsult.services.design_intelligence import (
    DesignIntelligenceEngine,
    generate_design_intelligence,
)
from pageconsult.services.proof_density_analyzer import (
    analyze_proof_density,
    extract_proof_points,
    get_visual_weight_config,
)
from pageconsult.services.section_selector import select_sections
from pageconsult.services.tone_detector import detect_tone, get_typography_recommendation

__all__ = [
    "DesignIntelligenceEngine",
    "analyze_proof_density",
    "detect_awareness_level",
    "detect_emotional_drivers",
    "detect_industry",
    "detect_tone",
    "extract_proof_points",
    "generate_design_intelligence",
    "get_color_palette",
    "get_page_structure",
    "get_typography_recommendation",
    "get_visual_weight_config",
    "select_sections",
]
