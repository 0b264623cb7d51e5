"""Hierarchical sort of parent-linked items.

This module provides hierarchical_sort, which orders a flat collection of
items so every item follows its parent and precedes the parent's next
sibling, with siblings kept in the caller's order.

Typical usage example:

    rows = hierarchical_sort(comments, 'parent_id', sort_key='created_at')
    for comment, depth in rows:
        print('  ' * (depth - 1) + comment.text)
"""

import logging
from typing import (
    Any,
    Callable,
    Iterable,
    Iterator,
    List,
    NamedTuple,
    Optional,
    Tuple,
)

from hierarchy_sort._internal.hierarchy_builder import (
    build_lookup,
    build_tree,
    find_unreachable,
    iter_tree,
    order_nodes,
)
from hierarchy_sort._internal.selectors import make_getter, make_sort_key
from hierarchy_sort._internal.tree_node import TreeNode
from hierarchy_sort.exceptions import CycleError, DanglingParentError
from hierarchy_sort.models import (
    ORPHAN_DROP,
    ORPHAN_RAISE,
    HierarchyRow,
    Selector,
    SortOptions,
    SortReport,
    check_orphan_policy,
    check_selector,
)

logger = logging.getLogger(__name__)


class _BuiltTree(NamedTuple):
    nodes: List[TreeNode]
    root: TreeNode
    dangling: List[TreeNode]
    duplicate_ids: List[Any]
    get_id: Callable[[Any], Any]


def _build(
    items: Iterable[Any],
    parent_key: Selector,
    id_key: Selector,
    sort_key: Optional[Selector],
    reverse: bool,
    on_orphan: str
) -> _BuiltTree:
    """Validates arguments and runs the order and tree-build stages."""
    check_selector('parent_key', parent_key)
    check_selector('id_key', id_key)
    if sort_key is not None:
        check_selector('sort_key', sort_key)
    check_orphan_policy(on_orphan)

    get_id = make_getter(id_key)
    get_parent_id = make_getter(parent_key)

    nodes = order_nodes(items, make_sort_key(sort_key), reverse)
    lookup, duplicate_ids = build_lookup(nodes, get_id)
    root, dangling = build_tree(nodes, lookup, get_parent_id)

    if on_orphan == ORPHAN_RAISE and dangling:
        item = dangling[0].value
        raise DanglingParentError(get_id(item), get_parent_id(item))

    return _BuiltTree(
        nodes, root, dangling, duplicate_ids, get_id
    )


def _walk(
    tree: _BuiltTree,
    on_orphan: str
) -> Tuple[List[Tuple[TreeNode, int]], List[TreeNode]]:
    """Flattens the tree, enforcing the orphan policy for cycles."""
    visited = list(iter_tree(tree.root))
    unreachable = find_unreachable(
        tree.nodes,
        tree.dangling,
        (node for node, _level in visited)
    )
    if on_orphan == ORPHAN_RAISE and unreachable:
        raise CycleError([tree.get_id(node.value) for node in unreachable])
    return visited, unreachable


def hierarchical_sort(
    items: Iterable[Any],
    parent_key: Selector = 'parent_id',
    *,
    id_key: Selector = 'id',
    sort_key: Optional[Selector] = None,
    reverse: bool = False,
    on_orphan: str = ORPHAN_DROP
) -> List[HierarchyRow]:
    """Sorts items into the order of a hierarchical display.

    1. An item appears after its parent and before the parent's next
       sibling; descendants sit between the two.
    2. Items sharing a parent are in ascending sort order. Ties keep
       their input order.

    By default, items whose parent id matches no item, and items whose
    parent chain loops without reaching the top level, are left out
    silently.

    Args:
        items: Items to sort. Not modified.
        parent_key: Field name or callable giving an item's parent id.
            None means the item is top level.
        id_key: Field name or callable giving an item's id.
        sort_key: Field name or callable used to order siblings. None
            compares the items themselves.
        reverse: Order siblings descending.
        on_orphan: "drop" (default) or "raise".

    Returns:
        List of (item, depth) rows; depth 1 is the top level.

    Raises:
        DanglingParentError: on_orphan is "raise" and a parent is missing.
        CycleError: on_orphan is "raise" and items sit on a parent cycle.
        InvalidOptionError: If a selector or on_orphan is invalid.
    """
    tree = _build(items, parent_key, id_key, sort_key, reverse, on_orphan)
    if on_orphan == ORPHAN_RAISE:
        visited, _unreachable = _walk(tree, on_orphan)
    else:
        visited = iter_tree(tree.root)
    return [HierarchyRow(node.value, level) for node, level in visited]


def iter_hierarchical(
    items: Iterable[Any],
    parent_key: Selector = 'parent_id',
    *,
    id_key: Selector = 'id',
    sort_key: Optional[Selector] = None,
    reverse: bool = False,
    on_orphan: str = ORPHAN_DROP
) -> Iterator[HierarchyRow]:
    """Like hierarchical_sort, but yields rows lazily.

    Sorting and tree building happen on the call, so argument errors and
    dangling parents surface immediately. In strict mode the whole tree is
    walked up front to detect cycles.
    """
    tree = _build(items, parent_key, id_key, sort_key, reverse, on_orphan)
    if on_orphan == ORPHAN_RAISE:
        visited, _unreachable = _walk(tree, on_orphan)
    else:
        visited = iter_tree(tree.root)
    return (HierarchyRow(node.value, level) for node, level in visited)


def hierarchical_sort_report(
    items: Iterable[Any],
    parent_key: Selector = 'parent_id',
    *,
    id_key: Selector = 'id',
    sort_key: Optional[Selector] = None,
    reverse: bool = False,
    on_orphan: str = ORPHAN_DROP
) -> SortReport:
    """Sorts items and reports what was dropped.

    Takes the same arguments as hierarchical_sort.

    Returns:
        SortReport with the rows plus dangling, unreachable and
        duplicate-id diagnostics.
    """
    tree = _build(items, parent_key, id_key, sort_key, reverse, on_orphan)
    visited, unreachable = _walk(tree, on_orphan)

    report = SortReport(
        rows=[HierarchyRow(node.value, level) for node, level in visited],
        dangling=[node.value for node in tree.dangling],
        unreachable=[node.value for node in unreachable],
        duplicate_ids=list(tree.duplicate_ids),
    )
    logger.debug(
        f"Sorted {len(tree.nodes)} items into {len(report.rows)} rows "
        f"({len(report.dangling)} dangling, "
        f"{len(report.unreachable)} unreachable, "
        f"{len(report.duplicate_ids)} duplicate ids)"
    )
    return report


def sort_with_options(
    items: Iterable[Any],
    options: SortOptions
) -> List[HierarchyRow]:
    """Runs hierarchical_sort with settings from a SortOptions."""
    return hierarchical_sort(items, **options.to_kwargs())
