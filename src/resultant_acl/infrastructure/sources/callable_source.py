"""
Adapter turning a zero-argument coroutine function into an ACL source.
"""
from typing import Any, Awaitable, Callable, Mapping


class CallableACLSource:
    """ACL source that delegates to an async callable."""

    def __init__(self, fetcher: Callable[[], Awaitable[Mapping[str, Any]]]):
        if not callable(fetcher):
            raise TypeError("fetcher must be callable")
        self._fetcher = fetcher

    async def fetch(self) -> Mapping[str, Any]:
        return await self._fetcher()

    def __repr__(self) -> str:
        name = getattr(self._fetcher, "__qualname__", repr(self._fetcher))
        return f"CallableACLSource({name})"
