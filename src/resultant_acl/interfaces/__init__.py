"""
Interface layer for consumers of the permission store.

The FastAPI helpers live in ``resultant_acl.interfaces.fastapi`` and are
imported explicitly so the core does not require FastAPI at import time.
"""

from .decorators import permission_required

__all__ = ["permission_required"]
