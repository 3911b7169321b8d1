"""Application services."""

from .permission_store import PermissionStore, StateListener

__all__ = ["PermissionStore", "StateListener"]
