"""
Source protocol interfaces for the permission store.

Defines the contract for whatever fetches the resultant ACL. Transport,
authentication headers and endpoint selection belong to implementations.
"""
from typing import Any, Mapping, Protocol, runtime_checkable


@runtime_checkable
class ACLSourceProtocol(Protocol):
    """Protocol for fetching the resultant ACL of the current identity."""

    async def fetch(self) -> Mapping[str, Any]:
        """
        Fetch the resultant ACL response body.

        Returns:
            JSON-like body with a top-level ``data`` field mapping
            category -> path -> {"capabilities": [...]}

        Raises:
            AuthFailureError: Identity may not read its ACL
            FetchFailureError: Transport failure
            MalformedResponseError: Response violates the contract
        """
        ...
