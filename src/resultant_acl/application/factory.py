"""
Permission store factory.

Factory functions for creating permission stores with proper dependency
injection and configuration.
"""
from typing import Any, Awaitable, Callable, Mapping, Optional, Union

from ..config.settings import PermissionSettings
from ..domain.protocols.source_protocols import ACLSourceProtocol
from ..infrastructure.sources import CallableACLSource
from .services.permission_store import PermissionStore


def create_permission_store(
    source: Union[ACLSourceProtocol, Callable[[], Awaitable[Mapping[str, Any]]]],
    settings: Optional[PermissionSettings] = None,
) -> PermissionStore:
    """
    Create a permission store for one session.

    Args:
        source: ACL source, or a zero-argument coroutine function returning
            the ACL response body
        settings: Optional settings, defaults to environment-derived settings

    Returns:
        Empty PermissionStore; call ``await store.load()`` to populate it
    """
    if not isinstance(source, ACLSourceProtocol):
        source = CallableACLSource(source)

    return PermissionStore(source=source, settings=settings)
