"""Domain models for hierarchical sort results and settings.

This module defines the row type returned by the sort functions, the
diagnostic report, and the options object used by configuration files and
the command line. Result classes are frozen dataclasses or named tuples.
"""

from dataclasses import dataclass, field, fields
from typing import Any, Callable, Dict, List, NamedTuple, Optional, Union

from hierarchy_sort.exceptions import InvalidOptionError

# A field name, or a callable reading the value from an item.
Selector = Union[str, Callable[[Any], Any]]

ORPHAN_DROP = 'drop'
ORPHAN_RAISE = 'raise'
ORPHAN_POLICIES = (ORPHAN_DROP, ORPHAN_RAISE)


class HierarchyRow(NamedTuple):
    """A single item in hierarchical order.

    Compares equal to a plain ``(item, depth)`` tuple.

    Attributes:
        item: The caller's item, unchanged.
        depth: Nesting depth; 1 is the top level.
    """

    item: Any
    depth: int


@dataclass(frozen=True)
class SortReport:
    """Rows of a hierarchical sort together with what was left out.

    Attributes:
        rows: Items in hierarchical order with their depths.
        dangling: Items whose parent id matched no item.
        unreachable: Items attached under a parent chain that never
            reaches the top level (parent cycles and their descendants).
        duplicate_ids: Ids carried by more than one item.
    """

    rows: List[HierarchyRow] = field(default_factory=list)
    dangling: List[Any] = field(default_factory=list)
    unreachable: List[Any] = field(default_factory=list)
    duplicate_ids: List[Any] = field(default_factory=list)

    @property
    def dropped(self) -> List[Any]:
        """Returns every input item absent from rows."""
        return self.dangling + self.unreachable

    @property
    def is_complete(self) -> bool:
        """Returns True if no item was dropped."""
        return not self.dangling and not self.unreachable


@dataclass(frozen=True)
class SortOptions:
    """Settings for a hierarchical sort call.

    Attributes:
        id_key: Selector for an item's id.
        parent_key: Selector for an item's parent id.
        sort_key: Sibling order key; None uses the items' own ordering.
        reverse: Sort siblings in descending order.
        on_orphan: "drop" silently omits dangling and cyclic items,
            "raise" turns them into errors.
    """

    id_key: Selector = 'id'
    parent_key: Selector = 'parent_id'
    sort_key: Optional[Selector] = None
    reverse: bool = False
    on_orphan: str = ORPHAN_DROP

    def __post_init__(self) -> None:
        check_selector('id_key', self.id_key)
        check_selector('parent_key', self.parent_key)
        if self.sort_key is not None:
            check_selector('sort_key', self.sort_key)
        if not isinstance(self.reverse, bool):
            raise InvalidOptionError(
                f"reverse must be a boolean, got {self.reverse!r}"
            )
        check_orphan_policy(self.on_orphan)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SortOptions':
        """Creates options from a mapping of field names to values.

        Args:
            data: Mapping such as a parsed YAML document.

        Returns:
            SortOptions instance.

        Raises:
            InvalidOptionError: If a key is unknown or a value invalid.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(str(key) for key in data if key not in known)
        if unknown:
            raise InvalidOptionError(
                f"Unknown sort options: {', '.join(unknown)}"
            )
        return cls(**data)

    def to_kwargs(self) -> Dict[str, Any]:
        """Returns keyword arguments for the sort functions."""
        return {
            'parent_key': self.parent_key,
            'id_key': self.id_key,
            'sort_key': self.sort_key,
            'reverse': self.reverse,
            'on_orphan': self.on_orphan,
        }


def check_selector(name: str, selector: Any) -> None:
    """Raises InvalidOptionError unless selector is a field name or callable."""
    if isinstance(selector, str):
        if not selector:
            raise InvalidOptionError(f"{name} must not be empty")
        return
    if not callable(selector):
        raise InvalidOptionError(
            f"{name} must be a field name or callable, got {selector!r}"
        )


def check_orphan_policy(on_orphan: Any) -> None:
    """Raises InvalidOptionError for an unknown orphan policy."""
    if on_orphan not in ORPHAN_POLICIES:
        raise InvalidOptionError(
            f"Invalid on_orphan '{on_orphan}'. "
            f"Must be one of: {', '.join(ORPHAN_POLICIES)}"
        )
