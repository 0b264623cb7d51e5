"""Hierarchical sort library.

This library orders a flat collection of parent-linked items (comments,
pages, tasks) so that every item follows its parent, siblings stay in a
caller-supplied order, and each item carries its nesting depth.

Typical usage example:

    from hierarchy_sort import hierarchical_sort

    rows = hierarchical_sort(comments, 'parent_id', sort_key='created_at')
    for comment, depth in rows:
        print('  ' * (depth - 1) + comment.text)
"""

# Public API exports
__all__ = [
    # Exceptions
    'HierarchySortError',
    'DanglingParentError',
    'CycleError',
    'InvalidOptionError',
    'ConfigError',
    # Models
    'HierarchyRow',
    'SortReport',
    'SortOptions',
    # Sorting
    'hierarchical_sort',
    'iter_hierarchical',
    'hierarchical_sort_report',
    'sort_with_options',
    # Configuration
    'load_options',
    'load_records',
    # Writers
    'JsonWriter',
    'MarkdownWriter',
    # Validation
    'HierarchyValidator',
    'ValidationResult',
    'validate_hierarchy',
]

from hierarchy_sort.exceptions import (
    HierarchySortError,
    DanglingParentError,
    CycleError,
    InvalidOptionError,
    ConfigError,
)

from hierarchy_sort.models import (
    HierarchyRow,
    SortReport,
    SortOptions,
)

from hierarchy_sort.sorter import (
    hierarchical_sort,
    iter_hierarchical,
    hierarchical_sort_report,
    sort_with_options,
)
from hierarchy_sort.config import load_options, load_records
from hierarchy_sort.writers import JsonWriter, MarkdownWriter
from hierarchy_sort.validator import (
    HierarchyValidator,
    ValidationResult,
    validate_hierarchy,
)
