"""Exception hierarchy for resultant-acl."""

from .base import (
    PermissionsError,
    get_http_status_code,
    create_error_response,
)
from .acl import (
    ACLLoadError,
    FetchFailureError,
    AuthFailureError,
    MalformedResponseError,
    PermissionDeniedError,
)

__all__ = [
    "PermissionsError",
    "get_http_status_code",
    "create_error_response",
    "ACLLoadError",
    "FetchFailureError",
    "AuthFailureError",
    "MalformedResponseError",
    "PermissionDeniedError",
]
