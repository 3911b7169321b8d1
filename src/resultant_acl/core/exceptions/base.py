"""Base exceptions for resultant-acl.

All exceptions inherit from PermissionsError and carry an error code,
structured details, and an HTTP status code mapping for API responses.
"""

from typing import Any, Dict, Optional


class PermissionsError(Exception):
    """Base exception for all resultant-acl errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


def get_http_status_code(exception: Exception) -> int:
    """Get HTTP status code for exception.

    Args:
        exception: The exception instance

    Returns:
        HTTP status code
    """
    from .http_mapping import get_http_status_code as _mapped_status_code
    return _mapped_status_code(exception)


def create_error_response(exception: PermissionsError) -> Dict[str, Any]:
    """Create standardized error response from exception.

    Args:
        exception: The resultant-acl exception

    Returns:
        Error response dictionary
    """
    return {
        "error": {
            "code": exception.error_code,
            "message": exception.message,
            "details": exception.details,
            "type": exception.__class__.__name__,
        }
    }
