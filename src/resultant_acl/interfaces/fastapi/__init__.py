"""FastAPI integration."""

from .dependencies import (
    permission_store_lifespan,
    get_permission_store,
    RequirePathPermission,
    permissions_error_handler,
    register_error_handlers,
)

__all__ = [
    "permission_store_lifespan",
    "get_permission_store",
    "RequirePathPermission",
    "permissions_error_handler",
    "register_error_handlers",
]
