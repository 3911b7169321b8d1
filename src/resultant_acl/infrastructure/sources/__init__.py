"""ACL source implementations."""

from .static_source import StaticACLSource
from .callable_source import CallableACLSource

__all__ = ["StaticACLSource", "CallableACLSource"]
