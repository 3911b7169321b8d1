"""
Infrastructure layer.

Provides concrete ACL sources implementing ACLSourceProtocol.
"""

from .sources import StaticACLSource, CallableACLSource

__all__ = ["StaticACLSource", "CallableACLSource"]
