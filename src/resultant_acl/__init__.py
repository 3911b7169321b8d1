"""resultant-acl - session-scoped cache of a user's resultant ACL.

Fetches the effective access-control list of the current identity once,
caches it for the session, and answers synchronous path permission checks.
"""

from .__version__ import __version__

from .config import (
    PermissionSettings,
    get_permission_settings,
    setup_logging,
)

from .core.exceptions import (
    PermissionsError,
    ACLLoadError,
    FetchFailureError,
    AuthFailureError,
    MalformedResponseError,
    PermissionDeniedError,
    get_http_status_code,
    create_error_response,
)

from .domain import (
    ACLSnapshot,
    CapabilitySet,
    StoreState,
    ACLSourceProtocol,
)

from .infrastructure import StaticACLSource, CallableACLSource

from .application import PermissionStore, create_permission_store

from .interfaces import permission_required

__all__ = [
    "__version__",
    # Configuration
    "PermissionSettings",
    "get_permission_settings",
    "setup_logging",
    # Exceptions
    "PermissionsError",
    "ACLLoadError",
    "FetchFailureError",
    "AuthFailureError",
    "MalformedResponseError",
    "PermissionDeniedError",
    "get_http_status_code",
    "create_error_response",
    # Domain
    "ACLSnapshot",
    "CapabilitySet",
    "StoreState",
    "ACLSourceProtocol",
    # Sources
    "StaticACLSource",
    "CallableACLSource",
    # Store
    "PermissionStore",
    "create_permission_store",
    "permission_required",
]
