"""Tests for API response helpers."""

import json
from unittest.mock import patch

import pytest

from pageconsult.models.design_intelligence import SectionSelection
from pageconsult.utils.responses import error, get_cors_headers, success


class TestSuccess:
    """Tests for success responses."""

    def test_nested_models_use_wire_names(self):
        """Test models inside plain dicts serialize with camelCase names."""
        selection = SectionSelection(sections=["hero"], hero_variant="offer")

        response = success({"sectionSelection": selection})

        body = json.loads(response["body"])
        assert body == {
            "sectionSelection": {"sections": ["hero"], "heroVariant": "offer", "reasoning": ""}
        }

    def test_unserializable_value_raises(self):
        """Test arbitrary objects are not silently stringified."""
        with pytest.raises(TypeError):
            success({"value": object()})


class TestError:
    """Tests for error responses."""

    def test_error_body(self):
        """Test error code and details are included when given."""
        response = error("Bad", 400, "VALIDATION_ERROR", {"errors": []})

        body = json.loads(response["body"])
        assert response["statusCode"] == 400
        assert body["error_code"] == "VALIDATION_ERROR"
        assert body["details"] == {"errors": []}


class TestCorsHeaders:
    """Tests for CORS origin selection."""

    def test_configured_origin(self):
        """Test the configured origin outside dev."""
        headers = get_cors_headers("http://localhost:3000")

        assert headers["Access-Control-Allow-Origin"] == "https://test.pageconsult.ai"

    def test_localhost_echoed_in_dev(self):
        """Test local origins are echoed back in dev."""
        with patch("pageconsult.utils.responses._STAGE", "dev"):
            headers = get_cors_headers("http://localhost:3000")

        assert headers["Access-Control-Allow-Origin"] == "http://localhost:3000"
