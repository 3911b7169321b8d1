"""Domain entities."""

from .acl_snapshot import ACLSnapshot, CapabilitySet, PathEntry, PathCapabilities

__all__ = ["ACLSnapshot", "CapabilitySet", "PathEntry", "PathCapabilities"]
