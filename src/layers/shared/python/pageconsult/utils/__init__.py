"""Utility functions and helpers."""

from pageconsult.utils.exceptions import PageConsultError, ValidationError
from pageconsult.utils.responses import error, get_cors_headers, success, validation_error

__all__ = [
    # Response helpers
    "success",
    "error",
    "validation_error",
    "get_cors_headers",
    # Exceptions
    "PageConsultError",
    "ValidationError",
]
