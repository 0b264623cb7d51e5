"""Custom exceptions for hierarchy_sort library.

This module defines all custom exceptions used throughout the hierarchy_sort
library. The default sort raises none of them; they surface only in strict
mode or when configuration is invalid.
"""

from typing import Any, List


class HierarchySortError(Exception):
    """Base exception for all hierarchy_sort errors."""


class DanglingParentError(HierarchySortError):
    """Raised in strict mode when a parent id matches no item."""

    def __init__(self, item_id: Any, parent_id: Any) -> None:
        self.item_id = item_id
        self.parent_id = parent_id
        super().__init__(
            f"Item {item_id!r} references missing parent {parent_id!r}"
        )


class CycleError(HierarchySortError):
    """Raised in strict mode when items are unreachable due to a cycle."""

    def __init__(self, item_ids: List[Any]) -> None:
        self.item_ids = list(item_ids)
        super().__init__(
            f"Items unreachable from top level (parent cycle): "
            f"{self.item_ids!r}"
        )


class InvalidOptionError(HierarchySortError):
    """Raised when a sort option has an invalid name or value."""


class ConfigError(HierarchySortError):
    """Raised when a configuration or record file cannot be loaded."""
