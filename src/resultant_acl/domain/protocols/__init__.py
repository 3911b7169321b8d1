"""Domain protocols."""

from .source_protocols import ACLSourceProtocol

__all__ = ["ACLSourceProtocol"]
