"""Tests for API error types."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from pageconsult.models.design_intelligence import DesignIntelligenceInput
from pageconsult.utils.exceptions import PageConsultError, ValidationError


class TestPageConsultError:
    """Tests for PageConsultError."""

    def test_defaults(self):
        """Test default code and status."""
        exc = PageConsultError("Something broke")

        assert exc.error_code == "INTERNAL_ERROR"
        assert exc.status_code == 500
        assert exc.to_dict() == {
            "error": True,
            "error_code": "INTERNAL_ERROR",
            "message": "Something broke",
        }


class TestValidationError:
    """Tests for ValidationError."""

    def test_without_errors(self):
        """Test a message-only validation error has no details."""
        exc = ValidationError("Request body must be a JSON object")

        assert exc.status_code == 400
        assert exc.error_code == "VALIDATION_ERROR"
        assert "details" not in exc.to_dict()

    def test_from_pydantic(self):
        """Test conversion of pydantic errors to field errors."""
        with pytest.raises(PydanticValidationError) as exc_info:
            DesignIntelligenceInput.model_validate({"industryConfidence": "certain"})

        exc = ValidationError.from_pydantic(exc_info.value)

        assert exc.errors[0]["field"] == "industryConfidence"
        assert exc.errors[0]["type"] == "literal_error"
        assert exc.to_dict()["details"]["errors"] == exc.errors
