"""Design intelligence API handler.

Provides endpoints for:
- Full design recommendation from consultation text and intelligence
- Section selection for the page builder
"""

import json
from typing import Any

import structlog
from pydantic import ValidationError as PydanticValidationError

from pageconsult.models.design_intelligence import DesignIntelligenceInput
from pageconsult.services.design_intelligence import generate_design_intelligence
from pageconsult.services.section_selector import select_sections
from pageconsult.utils.exceptions import PageConsultError, ValidationError
from pageconsult.utils.responses import error, success, validation_error

logger = structlog.get_logger()


def handler(event: dict[str, Any], context: Any) -> dict:
    """Handle design intelligence API requests.

    Routes:
        POST /design-intelligence           - Generate design recommendation
        POST /design-intelligence/sections  - Recommendation plus section selection
    """
    headers = event.get("headers") or {}
    origin = headers.get("origin") or headers.get("Origin")

    try:
        http_method = event.get("httpMethod", "").upper()
        path = event.get("path", "").rstrip("/")

        if http_method != "POST":
            return error("Not found", 404, request_origin=origin)

        if path.endswith("/design-intelligence/sections"):
            return generate_sections(event, origin)
        elif path.endswith("/design-intelligence"):
            return generate(event, origin)
        else:
            return error("Not found", 404, request_origin=origin)

    except PydanticValidationError as e:
        exc = ValidationError.from_pydantic(e)
        return validation_error(exc.errors, request_origin=origin)
    except PageConsultError as e:
        return error(e.message, e.status_code, e.error_code, e.details, request_origin=origin)
    except Exception as e:
        logger.exception("Design intelligence handler error", error=str(e))
        return error("Internal server error", 500, request_origin=origin)


def _parse_body(event: dict) -> dict:
    """Parse the JSON request body into a dict."""
    raw = event.get("body") or "{}"
    try:
        body = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValidationError(message=f"Invalid JSON body: {e.msg}") from e

    if not isinstance(body, dict):
        raise ValidationError(message="Request body must be a JSON object")
    return body


def generate(event: dict, origin: str | None = None) -> dict:
    """Generate a design recommendation."""
    body = _parse_body(event)
    request = DesignIntelligenceInput.model_validate(body)

    output = generate_design_intelligence(request)
    return success(output, request_origin=origin)


def generate_sections(event: dict, origin: str | None = None) -> dict:
    """Generate a design recommendation and the page sections it implies."""
    body = _parse_body(event)
    is_beta_page = bool(body.pop("isBetaPage", body.pop("is_beta_page", False)))
    request = DesignIntelligenceInput.model_validate(body)

    output = generate_design_intelligence(request)
    selection = select_sections(output, is_beta_page=is_beta_page)

    logger.info(
        "Sections generated",
        sections_count=len(selection.sections),
        hero_variant=selection.hero_variant,
        is_beta_page=is_beta_page,
    )

    return success(
        {
            "designIntelligence": output.to_dict(),
            "sectionSelection": selection.to_dict(),
        },
        request_origin=origin,
    )
