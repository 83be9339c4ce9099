"""Proof density analysis.

Extracts evidence from a loosely structured intelligence record, scores how
much of it there is, and decides how much visual weight proof sections get.
Sparse evidence hides proof sections entirely so nothing is fabricated.
"""

import json
import re
from collections.abc import Mapping
from typing import Any

import structlog
from pydantic import BaseModel as PydanticBaseModel

from pageconsult.models.design_intelligence import (
    CaseStudy,
    ProofDensity,
    ProofPoints,
    Testimonial,
    VisualWeightConfig,
)

logger = structlog.get_logger()

CLIENT_COUNT_PATTERN = re.compile(
    r"(\d+)\+?\s*(clients?|customers?|organizations?|companies)", re.IGNORECASE
)
YEARS_PATTERN = re.compile(r"(\d+)\+?\s*years?", re.IGNORECASE)
# e.g. "94% pass rate"
PERCENT_PATTERN = re.compile(r"\d+%[^.]*[a-z]+", re.IGNORECASE)
# e.g. "$31k savings", "$1.5 million fines"
DOLLAR_PATTERN = re.compile(r"\$[\d,.]+[kmb]?\s*[^.]*[a-z]+", re.IGNORECASE)

MAX_PERCENT_STATS = 4
MAX_DOLLAR_STATS = 3
MAX_LOGO_POINTS = 3

RICH_THRESHOLD = 10
MODERATE_THRESHOLD = 5

# Score weights per piece of evidence
WEIGHT_CLIENT_COUNT = 2
WEIGHT_YEARS = 1
WEIGHT_RESULT = 1
WEIGHT_PERCENT = 2
WEIGHT_DOLLAR = 2
WEIGHT_TESTIMONIAL = 2
WEIGHT_CASE_STUDY = 3
WEIGHT_CERTIFICATION = 1
WEIGHT_LOGO = 1

VISUAL_WEIGHT_CONFIGS: dict[ProofDensity, VisualWeightConfig] = {
    ProofDensity.RICH: VisualWeightConfig(
        stats_bar="prominent",
        testimonial_style="featured",
        case_study_style="detailed",
        features_style="compact",
        hero_style="text-focused",
        reasoning="Rich proof data available - emphasize stats and testimonials, let proof carry the page",
    ),
    ProofDensity.MODERATE: VisualWeightConfig(
        stats_bar="standard",
        testimonial_style="inline",
        case_study_style="summary",
        features_style="standard",
        hero_style="balanced",
        reasoning="Moderate proof - balanced layout between features and proof points",
    ),
    ProofDensity.SPARSE: VisualWeightConfig(
        stats_bar="hidden",
        testimonial_style="hidden",
        case_study_style="hidden",
        features_style="prominent",
        hero_style="image-heavy",
        reasoning="Limited proof data - hide empty sections, emphasize features and visual interest instead",
    ),
}


def _first_present(record: Mapping[str, Any], *keys: str) -> Any:
    """Value of the first key holding a truthy value."""
    for key in keys:
        value = record.get(key)
        if value:
            return value
    return None


def _to_text(value: Any) -> str | None:
    """Stringify a scalar list item, dropping empties and containers."""
    if value is None or isinstance(value, (Mapping, list, tuple, set)):
        return None
    text = str(value).strip()
    return text or None


def normalize_string_list(value: Any, split_commas: bool = False) -> list[str] | None:
    """Coerce a `str | list[str] | None` field to a list.

    Args:
        value: Raw field value.
        split_commas: Split a single string on commas.

    Returns:
        Non-empty list of strings, or None when nothing usable is present.
    """
    if isinstance(value, str):
        parts = value.split(",") if split_commas else [value]
        items = [p.strip() for p in parts if p.strip()]
    elif isinstance(value, (list, tuple)):
        items = [text for text in (_to_text(v) for v in value) if text]
    else:
        return None
    return items or None


def _to_testimonial(item: Any) -> Testimonial | None:
    if isinstance(item, str):
        return Testimonial(quote=item.strip()) if item.strip() else None
    if isinstance(item, Mapping):
        quote = _to_text(item.get("quote") or item.get("text"))
        if not quote:
            return None
        return Testimonial(
            quote=quote,
            author=_to_text(item.get("author") or item.get("name")),
            title=_to_text(item.get("title") or item.get("role")),
        )
    return None


def _to_case_study(item: Any) -> CaseStudy | None:
    if isinstance(item, str):
        return CaseStudy(title=item.strip(), result="") if item.strip() else None
    if isinstance(item, Mapping):
        title = _to_text(item.get("title") or item.get("name"))
        result = _to_text(item.get("result") or item.get("outcome"))
        if not title and not result:
            return None
        return CaseStudy(
            title=title or "",
            result=result or "",
            detail=_to_text(item.get("detail") or item.get("description")),
        )
    return None


def _normalize_items(value: Any, convert) -> list | None:
    """Coerce a single item or a list of items with `convert`, dropping bad ones."""
    raw = value if isinstance(value, (list, tuple)) else [value]
    items = []
    for entry in raw:
        try:
            converted = convert(entry)
        except (TypeError, ValueError, AttributeError) as e:
            logger.debug("Skipping malformed proof item", error=str(e))
            continue
        if converted is not None:
            items.append(converted)
    return items or None


def _serialize(intelligence: Any) -> str:
    """Serialize the record to compact lowercased JSON for pattern scans.

    Falls back to `str()`, then to an empty string, so an unserializable
    record only loses the pattern-scanned fields.
    """
    try:
        if isinstance(intelligence, PydanticBaseModel):
            intelligence = intelligence.model_dump(mode="json")
        text = json.dumps(
            intelligence, default=str, ensure_ascii=False, separators=(",", ":")
        )
    except (TypeError, ValueError, RecursionError) as e:
        # Circular references, unsupported keys or excessive nesting
        logger.debug("Intelligence record not JSON serializable", error=str(e))
        try:
            text = str(intelligence)
        except RecursionError:
            logger.warning("Intelligence record too deeply nested to scan")
            text = ""
    return text.lower()


def extract_proof_points(intelligence: Any) -> ProofPoints:
    """Extract proof points from an intelligence record.

    Scans the serialized record for client counts, years in business,
    percentage and currency claims, then reads the named evidence fields
    directly. Anything unreadable is left absent.

    Args:
        intelligence: Loosely structured record, may be None.

    Returns:
        ProofPoints with only the fields that have evidence.
    """
    if not intelligence:
        logger.debug("No intelligence data for proof extraction")
        return ProofPoints()

    proof: dict[str, Any] = {}
    text = _serialize(intelligence)

    client_match = CLIENT_COUNT_PATTERN.search(text)
    if client_match:
        proof["client_count"] = client_match.group(0)

    years_match = YEARS_PATTERN.search(text)
    if years_match:
        proof["years_in_business"] = years_match.group(0)

    percent_stats = [m.group(0) for m in PERCENT_PATTERN.finditer(text)]
    if percent_stats:
        proof["percentage_stats"] = percent_stats[:MAX_PERCENT_STATS]

    dollar_stats = [m.group(0) for m in DOLLAR_PATTERN.finditer(text)]
    if dollar_stats:
        proof["dollar_stats"] = dollar_stats[:MAX_DOLLAR_STATS]

    if isinstance(intelligence, PydanticBaseModel):
        intelligence = intelligence.model_dump()
    if isinstance(intelligence, Mapping):
        proof.update(_extract_fields(intelligence))

    points = ProofPoints(**proof)
    logger.debug("Extracted proof points", fields=sorted(proof))
    return points


def _extract_fields(intelligence: Mapping[str, Any]) -> dict[str, Any]:
    """Read the named evidence fields of a mapping-shaped record."""
    fields: dict[str, Any] = {}

    nested = intelligence.get("proofPoints")
    results = _first_present(intelligence, "results")
    if results is None and isinstance(nested, Mapping):
        results = nested.get("results") or None
    specific_results = normalize_string_list(results)
    if specific_results:
        fields["specific_results"] = specific_results

    testimonials = _first_present(intelligence, "testimonials", "socialProof")
    if testimonials is not None:
        items = _normalize_items(testimonials, _to_testimonial)
        if items:
            fields["testimonials"] = items

    case_studies = _first_present(intelligence, "caseStudies", "successStories")
    if case_studies is not None:
        items = _normalize_items(case_studies, _to_case_study)
        if items:
            fields["case_studies"] = items

    certifications = normalize_string_list(
        _first_present(intelligence, "certifications", "credentials"), split_commas=True
    )
    if certifications:
        fields["certifications"] = certifications

    logos = normalize_string_list(
        _first_present(intelligence, "clientLogos"), split_commas=True
    )
    if logos:
        fields["client_logos"] = logos

    return fields


def score_proof_points(proof: ProofPoints) -> int:
    """Weighted evidence score of a set of proof points."""
    score = 0
    if proof.client_count:
        score += WEIGHT_CLIENT_COUNT
    if proof.years_in_business:
        score += WEIGHT_YEARS
    score += WEIGHT_RESULT * len(proof.specific_results or [])
    score += WEIGHT_PERCENT * len(proof.percentage_stats or [])
    score += WEIGHT_DOLLAR * len(proof.dollar_stats or [])
    score += WEIGHT_TESTIMONIAL * len(proof.testimonials or [])
    score += WEIGHT_CASE_STUDY * len(proof.case_studies or [])
    score += WEIGHT_CERTIFICATION * len(proof.certifications or [])
    score += WEIGHT_LOGO * min(len(proof.client_logos or []), MAX_LOGO_POINTS)
    return score


def density_for_score(score: int) -> ProofDensity:
    """Bucket an evidence score."""
    if score >= RICH_THRESHOLD:
        return ProofDensity.RICH
    if score >= MODERATE_THRESHOLD:
        return ProofDensity.MODERATE
    return ProofDensity.SPARSE


def analyze_proof_density(proof: ProofPoints) -> ProofDensity:
    """Classify how much evidence backs the page."""
    score = score_proof_points(proof)
    density = density_for_score(score)
    logger.debug("Proof density scored", score=score, density=density.value)
    return density


def get_visual_weight_config(density: ProofDensity) -> VisualWeightConfig:
    """Look up the visual weight configuration for a proof density."""
    return VISUAL_WEIGHT_CONFIGS[ProofDensity(density)].model_copy()
