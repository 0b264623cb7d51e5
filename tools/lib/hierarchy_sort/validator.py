"""Validation checks for parent-linked item collections.

This module provides HierarchyValidator, which reports the conditions that
make hierarchical_sort drop items or link them ambiguously: duplicate ids,
missing parents and parent cycles. Each check returns a ValidationResult
instead of raising.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from hierarchy_sort._internal.selectors import make_getter
from hierarchy_sort.models import Selector


@dataclass
class ValidationResult:
    """Result of a validation check.

    Attributes:
        name: Name of validation check.
        passed: Whether validation passed.
        message: Optional error/warning message.
    """

    name: str
    passed: bool
    message: Optional[str] = None


class HierarchyValidator:
    """Runs integrity checks over a collection of items.

    Usage:
        validator = HierarchyValidator(comments, parent_key='reply_to')
        for result in validator.validate_all():
            if not result.passed:
                print(result.message)
    """

    def __init__(
        self,
        items: Iterable[Any],
        parent_key: Selector = 'parent_id',
        id_key: Selector = 'id'
    ) -> None:
        """Initializes validator.

        Args:
            items: Items to check. Not modified.
            parent_key: Field name or callable giving the parent id.
            id_key: Field name or callable giving the id.
        """
        self._items = list(items)
        self._get_id = make_getter(id_key)
        self._get_parent_id = make_getter(parent_key)

    def validate_ids_unique(self) -> ValidationResult:
        """Validates that no two items share an id.

        Returns:
            ValidationResult indicating uniqueness status.
        """
        all_ids = [self._get_id(item) for item in self._items]
        duplicates = self._find_duplicate_ids(all_ids)

        if not duplicates:
            return ValidationResult(
                name="ids_unique",
                passed=True,
                message=f"All {len(all_ids)} item ids are unique"
            )
        return ValidationResult(
            name="ids_unique",
            passed=False,
            message=f"Duplicate ids found: {duplicates}"
        )

    def _find_duplicate_ids(self, ids: List[Any]) -> List[Any]:
        """Finds ids occurring more than once, in first-repeat order."""
        seen = set()
        duplicates = []
        for item_id in ids:
            if item_id in seen and item_id not in duplicates:
                duplicates.append(item_id)
            seen.add(item_id)
        return duplicates

    def validate_parents_exist(self) -> ValidationResult:
        """Validates that every parent id matches an item id.

        Returns:
            ValidationResult listing items with missing parents.
        """
        known_ids = {self._get_id(item) for item in self._items}
        missing = []
        for item in self._items:
            parent_id = self._get_parent_id(item)
            if parent_id is not None and parent_id not in known_ids:
                missing.append((self._get_id(item), parent_id))

        if not missing:
            return ValidationResult(
                name="parents_exist",
                passed=True,
                message="All parent ids resolve to items"
            )
        details = ', '.join(
            f"{item_id!r} -> {parent_id!r}" for item_id, parent_id in missing
        )
        return ValidationResult(
            name="parents_exist",
            passed=False,
            message=f"Missing parents: {details}"
        )

    def validate_acyclic(self) -> ValidationResult:
        """Validates that no parent chain loops back on itself.

        Returns:
            ValidationResult listing the ids on each cycle found.
        """
        cycles = self._find_cycles()

        if not cycles:
            return ValidationResult(
                name="acyclic",
                passed=True,
                message="No parent cycles found"
            )
        return ValidationResult(
            name="acyclic",
            passed=False,
            message=f"Parent cycles found: {cycles}"
        )

    def _find_cycles(self) -> List[List[Any]]:
        """Follows each parent chain once and collects the loops."""
        parent_of: Dict[Any, Any] = {}
        for item in self._items:
            parent_of[self._get_id(item)] = self._get_parent_id(item)

        done = set()
        cycles = []
        for start in parent_of:
            path: List[Any] = []
            on_path = set()
            current = start
            while current in parent_of and current not in done:
                if current in on_path:
                    cycles.append(path[path.index(current):])
                    break
                on_path.add(current)
                path.append(current)
                current = parent_of[current]
            done.update(path)
        return cycles

    def validate_all(self) -> List[ValidationResult]:
        """Runs all validation checks.

        Returns:
            List of ValidationResults, one per check.
        """
        return [
            self.validate_ids_unique(),
            self.validate_parents_exist(),
            self.validate_acyclic(),
        ]


def validate_hierarchy(
    items: Iterable[Any],
    parent_key: Selector = 'parent_id',
    id_key: Selector = 'id'
) -> List[ValidationResult]:
    """Runs every HierarchyValidator check over items."""
    return HierarchyValidator(items, parent_key, id_key).validate_all()
