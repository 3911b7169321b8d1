"""
Permission domain layer.

Domain entities:
    - ACLSnapshot: immutable resultant ACL grouped by path category

Value objects:
    - StoreState: permission store lifecycle

Protocols:
    - ACLSourceProtocol: fetches the resultant ACL
"""

from .entities import ACLSnapshot, CapabilitySet, PathEntry, PathCapabilities
from .value_objects import StoreState
from .protocols import ACLSourceProtocol

__all__ = [
    "ACLSnapshot",
    "CapabilitySet",
    "PathEntry",
    "PathCapabilities",
    "StoreState",
    "ACLSourceProtocol",
]
