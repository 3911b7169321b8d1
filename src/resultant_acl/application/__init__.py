"""
Application layer.

Services:
    - PermissionStore: session-scoped resultant ACL cache
"""

from .services import PermissionStore, StateListener
from .factory import create_permission_store

__all__ = ["PermissionStore", "StateListener", "create_permission_store"]
