"""ACL loading and authorization exceptions."""

from typing import Any, List, Optional

from .base import PermissionsError


class ACLLoadError(PermissionsError):
    """Base exception for failures while loading the resultant ACL."""
    pass


class FetchFailureError(ACLLoadError):
    """Raised when the ACL source cannot be reached (network/transport)."""

    def __init__(
        self,
        message: str = "Failed to fetch ACL",
        source: Optional[str] = None,
    ):
        super().__init__(message, "ACL_FETCH_FAILED")
        self.details["source"] = source


class AuthFailureError(ACLLoadError):
    """Raised when the identity may not query the ACL endpoint itself."""

    def __init__(self, message: str = "Not authorized to read ACL"):
        super().__init__(message, "ACL_AUTH_FAILED")


class MalformedResponseError(ACLLoadError):
    """Raised when the ACL source response violates the expected contract."""

    def __init__(
        self,
        message: str = "Malformed ACL response",
        errors: Optional[List[Any]] = None,
    ):
        super().__init__(message, "ACL_MALFORMED_RESPONSE")
        self.details["errors"] = errors or []


class PermissionDeniedError(PermissionsError):
    """Raised when a gated operation is invoked without access to its path."""

    def __init__(self, path_name: str, message: Optional[str] = None):
        super().__init__(
            message or f"Permission denied: {path_name}",
            "PERMISSION_DENIED",
        )
        self.path_name = path_name
        self.details["path"] = path_name
