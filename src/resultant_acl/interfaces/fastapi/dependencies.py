"""
FastAPI integration for the permission store.

Provides a lifespan that loads the ACL at startup, dependencies that gate
routes on a path permission, and an exception handler rendering
PermissionsError as the standard error envelope.
"""
import logging
from contextlib import asynccontextmanager
from typing import AsyncContextManager, AsyncIterator, Callable

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse

from ...application.services.permission_store import PermissionStore
from ...core.exceptions import (
    ACLLoadError,
    PermissionDeniedError,
    PermissionsError,
    create_error_response,
    get_http_status_code,
)

logger = logging.getLogger(__name__)

STATE_ATTRIBUTE = "permission_store"


def permission_store_lifespan(
    store: PermissionStore,
    raise_on_error: bool = True,
) -> Callable[[FastAPI], AsyncContextManager[None]]:
    """
    Build a lifespan that attaches the store to the app and loads the ACL.

    Args:
        store: Permission store for this application
        raise_on_error: Abort startup when the ACL cannot be loaded. When
            False the app starts with an empty store and every check denies
            until a later load succeeds.
    """
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        setattr(app.state, STATE_ATTRIBUTE, store)
        try:
            await store.load()
        except ACLLoadError as e:
            if raise_on_error:
                raise
            logger.warning(f"Starting with an empty permission store: {e.message}")
        yield

    return lifespan


def get_permission_store(request: Request) -> PermissionStore:
    """Get the permission store attached to the application."""
    store = getattr(request.app.state, STATE_ATTRIBUTE, None)
    if store is None:
        raise RuntimeError(
            "No permission store configured; use permission_store_lifespan "
            f"or set app.state.{STATE_ATTRIBUTE}"
        )
    return store


class RequirePathPermission:
    """
    Dependency requiring access to an ACL path.

    Usage:
        @app.get("/policies", dependencies=[Depends(RequirePathPermission("sys/policies"))])
        async def list_policies():
            ...
    """

    def __init__(self, path_name: str, load_if_needed: bool = True):
        self.path_name = path_name
        self.load_if_needed = load_if_needed

    async def __call__(self, request: Request) -> None:
        store = get_permission_store(request)

        if self.load_if_needed and not store.is_loaded:
            try:
                await store.load()
            except ACLLoadError as e:
                raise HTTPException(
                    status_code=get_http_status_code(e),
                    detail=create_error_response(e)["error"],
                ) from e

        if not store.has_permission(self.path_name):
            denied = PermissionDeniedError(self.path_name)
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=create_error_response(denied)["error"],
            )


async def permissions_error_handler(request: Request, exc: PermissionsError) -> JSONResponse:
    """Render a PermissionsError raised inside a route."""
    return JSONResponse(
        status_code=get_http_status_code(exc),
        content=create_error_response(exc),
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register the PermissionsError handler on an application."""
    app.add_exception_handler(PermissionsError, permissions_error_handler)
