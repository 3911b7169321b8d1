"""Permission decorators."""

from .permission_decorators import permission_required

__all__ = ["permission_required"]
