"""
Permission store - session-scoped cache of the resultant ACL.

Fetches the ACL of the current identity once, keeps it for the lifetime of
the store, and answers synchronous path permission checks against it.
"""
import asyncio
import logging
from typing import Any, Callable, FrozenSet, List, Mapping, Optional, Union

from ...config.settings import PermissionSettings, get_permission_settings
from ...core.exceptions import ACLLoadError, FetchFailureError
from ...domain.entities.acl_snapshot import ACLSnapshot
from ...domain.protocols.source_protocols import ACLSourceProtocol
from ...domain.value_objects.store_state import StoreState

logger = logging.getLogger(__name__)

StateListener = Callable[[StoreState, StoreState], None]


class PermissionStore:
    """
    Session-scoped resultant ACL cache.

    Features:
    - Single fetch per store lifetime; concurrent loads share one fetch
    - Failed fetches are not cached, so the next load retries
    - Synchronous, fail-closed permission checks
    - State change listeners for consumers that re-render on load
    """

    def __init__(
        self,
        source: ACLSourceProtocol,
        settings: Optional[PermissionSettings] = None,
    ):
        self.source = source
        self.settings = settings or get_permission_settings()

        self._snapshot: Optional[ACLSnapshot] = None
        self._pending: Optional["asyncio.Task[None]"] = None
        self._state = StoreState.EMPTY
        self._listeners: List[StateListener] = []

    @property
    def state(self) -> StoreState:
        """Current lifecycle state."""
        return self._state

    @property
    def snapshot(self) -> Optional[ACLSnapshot]:
        """Cached ACL snapshot, or None before the first successful load."""
        return self._snapshot

    @property
    def is_loaded(self) -> bool:
        return self._snapshot is not None

    async def load(self) -> None:
        """
        Load the resultant ACL into the cache.

        Returns immediately when already loaded. When a load is in flight the
        caller waits on that same load instead of starting a new fetch.
        Cancelling a waiting caller does not cancel the shared fetch.

        Raises:
            AuthFailureError: Identity may not read its ACL
            FetchFailureError: Transport failure or unexpected source error
            MalformedResponseError: Response violates the contract
        """
        if self._snapshot is not None:
            logger.debug("ACL already cached, skipping fetch")
            return

        pending = self._pending
        if pending is None:
            self._transition(StoreState.LOADING)
            pending = asyncio.get_running_loop().create_task(self._fetch_and_cache())
            pending.add_done_callback(_consume_task_result)
            # An eagerly executed task may already have finished and cleared the handle
            if not pending.done():
                self._pending = pending
        else:
            logger.debug("Joining in-flight ACL load")

        await asyncio.shield(pending)

    async def _fetch_and_cache(self) -> None:
        """Fetch, validate and cache the ACL. Runs inside the shared task."""
        try:
            try:
                body = await self.source.fetch()
                snapshot = self._parse(body)
            except Exception as e:
                if self._snapshot is not None:
                    logger.debug(f"ACL seeded while fetch was in flight, ignoring fetch failure: {e}")
                    return
                if isinstance(e, ACLLoadError):
                    logger.warning(f"ACL load failed ({e.error_code}): {e.message}")
                    raise
                logger.warning(f"ACL source {self.source!r} raised {type(e).__name__}: {e}")
                raise FetchFailureError(
                    f"ACL source raised {type(e).__name__}: {e}",
                    source=repr(self.source),
                ) from e

            if self._snapshot is not None:
                logger.debug("ACL seeded while fetch was in flight, discarding fetched copy")
                return

            self._install(snapshot)
            logger.info(
                f"ACL loaded: {len(snapshot.categories)} categories, "
                f"{snapshot.path_count} paths"
            )
        finally:
            self._pending = None
            # Failed or cancelled fetch: back to EMPTY so the next load retries
            if self._snapshot is None:
                self._transition(StoreState.EMPTY)

    def _parse(self, body: Any) -> ACLSnapshot:
        return ACLSnapshot.from_response(
            body,
            data_field=self.settings.data_field,
            known_capabilities=self.settings.known_capabilities,
            strict_capabilities=self.settings.strict_capabilities,
        )

    def set_snapshot(self, snapshot: Union[ACLSnapshot, Mapping[str, Any]]) -> None:
        """
        Install a snapshot directly, bypassing the source.

        Args:
            snapshot: An ACLSnapshot or a raw ``data`` mapping

        Raises:
            MalformedResponseError: If a raw mapping fails validation
        """
        if not isinstance(snapshot, ACLSnapshot):
            snapshot = ACLSnapshot.from_data(
                snapshot,
                known_capabilities=self.settings.known_capabilities,
                strict_capabilities=self.settings.strict_capabilities,
            )
        self._install(snapshot)

    def _install(self, snapshot: ACLSnapshot) -> None:
        # Single assignment; readers never observe a partially built cache
        self._snapshot = snapshot
        self._transition(StoreState.LOADED)

    def has_permission(self, path_name: str) -> bool:
        """
        Check whether the current identity has any capability on a path.

        A path counts as permitted when it is listed in any category of the
        cached ACL, whatever capabilities it lists. Always False before the
        ACL is loaded.
        """
        snapshot = self._snapshot
        if snapshot is None or not isinstance(path_name, str):
            return False
        return snapshot.contains(path_name, empty_grants=self.settings.empty_capabilities_grant)

    def capabilities(self, path_name: str) -> FrozenSet[str]:
        """Capabilities granted on a path, empty when unknown or not loaded."""
        snapshot = self._snapshot
        if snapshot is None or not isinstance(path_name, str):
            return frozenset()
        return snapshot.capabilities_for(path_name)

    def has_capability(self, path_name: str, capability: str) -> bool:
        """Check whether a specific capability is granted on a path."""
        return capability in self.capabilities(path_name)

    def add_listener(self, listener: StateListener) -> None:
        """Register a callback invoked with (old_state, new_state) on transitions."""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: StateListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _transition(self, new_state: StoreState) -> None:
        old_state = self._state
        if old_state is new_state:
            return
        self._state = new_state
        logger.debug(f"Permission store {old_state.value} -> {new_state.value}")

        for listener in list(self._listeners):
            try:
                listener(old_state, new_state)
            except Exception:
                logger.exception(f"Permission store listener {listener!r} failed")

    def __repr__(self) -> str:
        return f"PermissionStore(state={self._state.value}, source={self.source!r})"


def _consume_task_result(task: "asyncio.Task[None]") -> None:
    # Waiters may all have been cancelled; mark the outcome as retrieved
    if not task.cancelled():
        task.exception()
