"""HTTP status code mapping for exceptions."""

from typing import Dict, Type

from .acl import (
    AuthFailureError,
    FetchFailureError,
    MalformedResponseError,
    PermissionDeniedError,
)


HTTP_STATUS_MAP: Dict[Type[Exception], int] = {
    # 403 Forbidden
    AuthFailureError: 403,
    PermissionDeniedError: 403,

    # 502 Bad Gateway
    MalformedResponseError: 502,

    # 503 Service Unavailable
    FetchFailureError: 503,
}


def get_http_status_code(exception: Exception) -> int:
    """Get HTTP status code for exception, walking the class hierarchy.

    Args:
        exception: The exception instance

    Returns:
        HTTP status code (500 when no mapping applies)
    """
    for exc_type in type(exception).__mro__:
        if exc_type in HTTP_STATUS_MAP:
            return HTTP_STATUS_MAP[exc_type]
    return 500
