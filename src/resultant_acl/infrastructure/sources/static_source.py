"""
In-memory ACL source.

Serves a fixed response body. Used for fixtures, offline mode, and for
bootstrapping a store from an ACL embedded in a server-rendered page.
"""
import asyncio
import copy
from typing import Any, Mapping, Optional


class StaticACLSource:
    """
    ACL source returning a fixed response body.

    Features:
    - Deep-copies the body on every fetch so callers cannot share state
    - Optional simulated latency
    - Optional error raised instead of returning the body
    - Fetch counter for observing dedupe behaviour
    """

    def __init__(
        self,
        body: Optional[Mapping[str, Any]] = None,
        delay: float = 0.0,
        error: Optional[BaseException] = None,
    ):
        self._body = body if body is not None else {"data": {}}
        self._delay = delay
        self.error = error
        self.fetch_count = 0

    async def fetch(self) -> Mapping[str, Any]:
        """Return a copy of the configured body, or raise the configured error."""
        self.fetch_count += 1
        if self._delay:
            await asyncio.sleep(self._delay)
        if self.error is not None:
            raise self.error
        return copy.deepcopy(self._body)

    def __repr__(self) -> str:
        return f"StaticACLSource(fetch_count={self.fetch_count})"
