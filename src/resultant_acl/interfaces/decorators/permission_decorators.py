"""
Permission decorators for gating callables on a cached ACL.

Decorated callables run only when the store grants the path; otherwise they
return a fallback value or raise PermissionDeniedError.
"""
import functools
import inspect
import logging
from typing import Any, Callable

from ...application.services.permission_store import PermissionStore
from ...core.exceptions import PermissionDeniedError

logger = logging.getLogger(__name__)

_NO_FALLBACK = object()


def permission_required(
    store: PermissionStore,
    path_name: str,
    fallback: Any = _NO_FALLBACK,
):
    """
    Decorator to require access to a path before running a function.

    The check never loads the ACL; an unloaded store denies.

    Args:
        store: Permission store to consult
        path_name: ACL path the caller must have access to
        fallback: Value returned when denied; raise when omitted

    Usage:
        @permission_required(store, "sys/policies")
        def render_policies_link():
            return "<a href='/policies'>Policies</a>"
    """
    def decorator(func: Callable) -> Callable:
        def _deny() -> Any:
            logger.debug(f"Access to {path_name} denied for {func.__qualname__}")
            if fallback is _NO_FALLBACK:
                raise PermissionDeniedError(path_name)
            return fallback

        if inspect.iscoroutinefunction(func):
            @functools.wraps(func)
            async def async_wrapper(*args, **kwargs) -> Any:
                if not store.has_permission(path_name):
                    return _deny()
                return await func(*args, **kwargs)
            return async_wrapper

        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> Any:
            if not store.has_permission(path_name):
                return _deny()
            return func(*args, **kwargs)
        return wrapper

    return decorator
