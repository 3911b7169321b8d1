"""
ACL snapshot entity - the resultant ACL of one identity.

A snapshot groups paths by category (``exact_paths``, ``glob_paths``) and
maps each path to the set of capabilities granted on it. Snapshots are
validated on construction and are read-only afterwards.
"""
import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterable, Iterator, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr, TypeAdapter, ValidationError

from ...core.exceptions import MalformedResponseError

logger = logging.getLogger(__name__)

CapabilitySet = FrozenSet[str]
PathEntry = Mapping[str, CapabilitySet]


class PathCapabilities(BaseModel):
    """Wire shape of a single path entry: ``{"capabilities": [...]}``."""

    model_config = ConfigDict(extra="allow", frozen=True)

    capabilities: List[StrictStr] = Field(default_factory=list)


_ACL_DATA = TypeAdapter(Dict[StrictStr, Dict[StrictStr, PathCapabilities]])


def _require_mapping(name: str, value: Any) -> Mapping:
    if not isinstance(value, Mapping):
        raise MalformedResponseError(
            f"ACL entry '{name}' must be a mapping, got {type(value).__name__}"
        )
    return value


def _freeze_capabilities(category: str, path: str, capabilities: Any) -> CapabilitySet:
    # A bare string is iterable but would split into characters
    if isinstance(capabilities, (str, bytes)) or not isinstance(capabilities, Iterable):
        raise MalformedResponseError(
            f"Capabilities of '{path}' in '{category}' must be a collection of strings"
        )
    frozen = frozenset(capabilities)
    if not all(isinstance(capability, str) for capability in frozen):
        raise MalformedResponseError(
            f"Capabilities of '{path}' in '{category}' must be strings"
        )
    return frozen


@dataclass(frozen=True)
class ACLSnapshot:
    """
    Immutable resultant ACL as returned by one fetch.

    Examples:
        >>> snapshot = ACLSnapshot.from_data(
        ...     {"exact_paths": {"foo": {"capabilities": ["read"]}}}
        ... )
        >>> snapshot.contains("foo")
        True
    """
    categories: Mapping[str, PathEntry] = field(default_factory=dict)

    def __post_init__(self):
        """Freeze nested mappings so cached data cannot be edited in place."""
        frozen = MappingProxyType({
            category: MappingProxyType({
                path: _freeze_capabilities(category, path, capabilities)
                for path, capabilities in _require_mapping(category, paths).items()
            })
            for category, paths in _require_mapping("categories", self.categories).items()
        })
        object.__setattr__(self, "categories", frozen)

    @classmethod
    def empty(cls) -> "ACLSnapshot":
        """Snapshot with no categories (an identity without any grants)."""
        return cls({})

    @classmethod
    def from_data(
        cls,
        data: Any,
        known_capabilities: Optional[Iterable[str]] = None,
        strict_capabilities: bool = False,
    ) -> "ACLSnapshot":
        """
        Build a snapshot from the ``data`` payload of an ACL response.

        Args:
            data: Mapping of category -> path -> {"capabilities": [...]}
            known_capabilities: Vocabulary of recognised capability tokens
            strict_capabilities: Reject unknown tokens instead of warning

        Returns:
            Validated ACLSnapshot

        Raises:
            MalformedResponseError: If the payload does not match the contract
        """
        try:
            parsed = _ACL_DATA.validate_python(data)
        except ValidationError as e:
            raise MalformedResponseError(
                f"ACL data failed validation with {e.error_count()} error(s)",
                errors=e.errors(include_url=False),
            ) from e

        categories = {
            category: {
                path: frozenset(entry.capabilities)
                for path, entry in paths.items()
            }
            for category, paths in parsed.items()
        }

        if known_capabilities is not None:
            cls._check_vocabulary(categories, frozenset(known_capabilities), strict_capabilities)

        return cls(categories)

    @classmethod
    def from_response(
        cls,
        body: Any,
        data_field: str = "data",
        known_capabilities: Optional[Iterable[str]] = None,
        strict_capabilities: bool = False,
    ) -> "ACLSnapshot":
        """
        Build a snapshot from a full ACL response body.

        Raises:
            MalformedResponseError: If the body is not a mapping, lacks the
                data field, or the data does not match the contract
        """
        if not isinstance(body, Mapping):
            raise MalformedResponseError(
                f"ACL response must be an object, got {type(body).__name__}"
            )
        if data_field not in body:
            raise MalformedResponseError(f"ACL response is missing '{data_field}'")

        return cls.from_data(
            body[data_field],
            known_capabilities=known_capabilities,
            strict_capabilities=strict_capabilities,
        )

    @staticmethod
    def _check_vocabulary(
        categories: Dict[str, Dict[str, CapabilitySet]],
        known: FrozenSet[str],
        strict: bool,
    ) -> None:
        unknown = sorted({
            capability
            for paths in categories.values()
            for capabilities in paths.values()
            for capability in capabilities
            if capability not in known
        })
        if not unknown:
            return
        if strict:
            raise MalformedResponseError(
                f"ACL response contains unknown capabilities: {', '.join(unknown)}",
                errors=unknown,
            )
        logger.warning(f"ACL response contains unknown capabilities: {', '.join(unknown)}")

    @property
    def path_count(self) -> int:
        """Number of path entries across all categories."""
        return sum(len(paths) for paths in self.categories.values())

    def paths(self) -> Iterator[str]:
        """Iterate over every path name, once per category it appears in."""
        for paths in self.categories.values():
            yield from paths

    def contains(self, path_name: str, empty_grants: bool = True) -> bool:
        """
        Check whether a path is listed in any category.

        Presence of the key decides the result; the capability contents are
        only consulted when ``empty_grants`` is False, in which case an entry
        with no capabilities is ignored.
        """
        for paths in self.categories.values():
            if path_name in paths:
                if empty_grants or paths[path_name]:
                    return True
        return False

    def capabilities_for(self, path_name: str) -> CapabilitySet:
        """Union of capabilities granted on a path across all categories."""
        granted: FrozenSet[str] = frozenset()
        for paths in self.categories.values():
            granted = granted | paths.get(path_name, frozenset())
        return granted

    def to_dict(self) -> Dict[str, Dict[str, Dict[str, List[str]]]]:
        """Render back to the wire shape with sorted capability lists."""
        return {
            category: {
                path: {"capabilities": sorted(capabilities)}
                for path, capabilities in paths.items()
            }
            for category, paths in self.categories.items()
        }
