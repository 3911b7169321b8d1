"""
Permission store lifecycle states.
"""
from enum import Enum


class StoreState(str, Enum):
    """Lifecycle of a single PermissionStore instance.

    EMPTY -> LOADING -> LOADED, with LOADING -> EMPTY when a fetch fails.
    LOADED is terminal.
    """
    EMPTY = "empty"
    LOADING = "loading"
    LOADED = "loaded"
