"""Helpers turning field names into value readers."""

from collections.abc import Mapping
from typing import Any, Callable, Optional

from hierarchy_sort.models import Selector


def make_getter(selector: Selector) -> Callable[[Any], Any]:
    """Builds a callable that reads a field from an item.

    Args:
        selector: Field name or callable. A field name reads a key from
            mapping items and an attribute from any other item. A missing
            key or attribute reads as None.

    Returns:
        Callable taking an item and returning the selected value.
    """
    if callable(selector):
        return selector

    def get(item: Any) -> Any:
        if isinstance(item, Mapping):
            return item.get(selector)
        return getattr(item, selector, None)

    return get


def make_sort_key(
    sort_key: Optional[Selector]
) -> Optional[Callable[[Any], Any]]:
    """Builds a sort key callable, keeping None for natural order."""
    if sort_key is None:
        return None
    return make_getter(sort_key)
