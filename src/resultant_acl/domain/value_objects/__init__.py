"""Domain value objects."""

from .store_state import StoreState

__all__ = ["StoreState"]
