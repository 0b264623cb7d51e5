"""Tests for HierarchyValidator."""

import unittest

from hierarchy_sort.validator import (
    HierarchyValidator,
    ValidationResult,
    validate_hierarchy,
)


def record(item_id, parent_id=None):
    return {'id': item_id, 'parent_id': parent_id}


class TestHierarchyValidator(unittest.TestCase):
    """Test suite for HierarchyValidator checks."""

    def test_clean_items_pass_all_checks(self):
        """A well-formed forest should pass every check."""
        items = [record('a'), record('b', 'a'), record('c', 'b'), record('d')]
        results = HierarchyValidator(items).validate_all()

        self.assertEqual(
            [result.name for result in results],
            ['ids_unique', 'parents_exist', 'acyclic'],
        )
        self.assertTrue(all(result.passed for result in results))

    def test_duplicate_ids(self):
        """Repeated ids should be listed once each."""
        items = [record('a'), record('a'), record('a'), record('b')]
        result = HierarchyValidator(items).validate_ids_unique()

        self.assertFalse(result.passed)
        self.assertEqual(result.message, "Duplicate ids found: ['a']")

    def test_unique_ids_message_counts_items(self):
        """The passing message should report the item count."""
        result = HierarchyValidator([record('a')]).validate_ids_unique()

        self.assertTrue(result.passed)
        self.assertEqual(result.message, "All 1 item ids are unique")

    def test_missing_parent(self):
        """Dangling parent ids should be reported with their child."""
        items = [record('a'), record('b', 'ghost')]
        result = HierarchyValidator(items).validate_parents_exist()

        self.assertFalse(result.passed)
        self.assertIn("'b' -> 'ghost'", result.message)

    def test_self_cycle(self):
        """An item that is its own parent is a cycle."""
        result = HierarchyValidator([record('a', 'a')]).validate_acyclic()

        self.assertFalse(result.passed)
        self.assertEqual(result.message, "Parent cycles found: [['a']]")

    def test_cycle_reached_through_a_tail(self):
        """A chain leading into a loop should report only the loop."""
        items = [record('x', 'a'), record('a', 'b'), record('b', 'a')]
        result = HierarchyValidator(items).validate_acyclic()

        self.assertFalse(result.passed)
        self.assertEqual(result.message, "Parent cycles found: [['a', 'b']]")

    def test_missing_parent_is_not_a_cycle(self):
        """A chain ending at an unknown id should pass the cycle check."""
        items = [record('a', 'ghost'), record('b', 'a')]
        result = HierarchyValidator(items).validate_acyclic()

        self.assertTrue(result.passed)

    def test_custom_selectors(self):
        """Field names and callables should select id and parent."""
        items = [('a', None), ('b', 'a')]
        results = validate_hierarchy(
            items,
            parent_key=lambda item: item[1],
            id_key=lambda item: item[0],
        )

        self.assertTrue(all(result.passed for result in results))

    def test_result_defaults(self):
        """ValidationResult message should default to None."""
        self.assertIsNone(ValidationResult(name='x', passed=True).message)


if __name__ == "__main__":
    unittest.main()
