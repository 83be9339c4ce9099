"""Pytest configuration and fixtures."""

import json
import os

import pytest

# Set environment variables before imports
os.environ["STAGE"] = "test"
os.environ["SERVICE_NAME"] = "pageconsult"
os.environ["CORS_ALLOWED_ORIGIN"] = "https://test.pageconsult.ai"


@pytest.fixture
def api_gateway_event():
    """Create a sample API Gateway event."""
    def _create_event(
        method: str = "POST",
        path: str = "/design-intelligence",
        body: dict | str | None = None,
        origin: str | None = None,
    ):
        headers = {"Content-Type": "application/json"}
        if origin:
            headers["origin"] = origin

        return {
            "httpMethod": method,
            "path": path,
            "pathParameters": {},
            "queryStringParameters": {},
            "body": body if isinstance(body, str) else (
                json.dumps(body) if body is not None else None
            ),
            "headers": headers,
        }

    return _create_event


@pytest.fixture
def compliance_conversation():
    """Consultation text from a healthcare security buyer under regulatory pressure."""
    return (
        "We run a cybersecurity practice for hospitals. Our clients worry about "
        "HIPAA compliance, audit findings and regulatory penalty exposure. "
        "A single breach can mean a fine in the millions and a deadline to remediate. "
        "We are struggling with explaining our framework to boards."
    )


@pytest.fixture
def rich_intelligence():
    """Intelligence record with plenty of verifiable evidence."""
    return {
        "companyName": "Shieldwall",
        "results": ["Cut audit prep from 6 weeks to 9 days", "Zero failed audits"],
        "testimonials": [
            {"quote": "They saved our audit", "author": "Dana Ruiz", "title": "CISO"},
            "Best security partner we have had",
        ],
        "caseStudies": [
            {"title": "Regional hospital", "result": "Passed OCR audit", "detail": "12 sites"},
        ],
        "certifications": "SOC 2, ISO 27001, HITRUST",
    }


@pytest.fixture
def sparse_intelligence():
    """Intelligence record with no usable evidence."""
    return {"companyName": "Newco", "description": "An early stage studio"}
