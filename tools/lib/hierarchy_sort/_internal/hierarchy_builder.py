"""Hierarchy tree building utilities.

This module provides the three stages behind hierarchical_sort: ordering
items, linking them into a tree through their parent ids, and walking the
tree back into a flat sequence of (node, depth) pairs.
"""

from typing import (
    Any,
    Callable,
    Dict,
    Iterable,
    Iterator,
    List,
    Optional,
    Tuple,
)

from hierarchy_sort._internal.tree_node import TreeNode


def order_nodes(
    items: Iterable[Any],
    sort_key: Optional[Callable[[Any], Any]] = None,
    reverse: bool = False
) -> List[TreeNode]:
    """Wraps items in nodes sorted in sibling order.

    The sort is stable, so items comparing equal keep their input order,
    including when reverse is set.

    Args:
        items: Items to sort. Not modified.
        sort_key: Key callable; None compares the items themselves.
        reverse: Sort in descending order.

    Returns:
        New list of nodes, one per item.
    """
    nodes = [TreeNode(item) for item in items]
    if sort_key is None:
        return sorted(nodes, key=_node_value, reverse=reverse)
    return sorted(
        nodes,
        key=lambda node: sort_key(node.value),
        reverse=reverse
    )


def _node_value(node: TreeNode) -> Any:
    return node.value


def build_lookup(
    nodes: List[TreeNode],
    get_id: Callable[[Any], Any]
) -> Tuple[Dict[Any, TreeNode], List[Any]]:
    """Maps each item id to its node.

    When several items share an id, the last one in node order keeps the
    slot.

    Args:
        nodes: Nodes in sorted order.
        get_id: Reads the id of an item.

    Returns:
        Tuple of (id to node mapping, duplicate ids in first-seen order).
    """
    lookup: Dict[Any, TreeNode] = {}
    duplicates: List[Any] = []
    seen_duplicates = set()

    for node in nodes:
        item_id = get_id(node.value)
        if item_id in lookup and item_id not in seen_duplicates:
            seen_duplicates.add(item_id)
            duplicates.append(item_id)
        lookup[item_id] = node

    return lookup, duplicates


def build_tree(
    nodes: List[TreeNode],
    lookup: Dict[Any, TreeNode],
    get_parent_id: Callable[[Any], Any]
) -> Tuple[TreeNode, List[TreeNode]]:
    """Attaches every node under its parent or the synthetic root.

    Nodes must arrive in sorted order: appending them one by one is what
    keeps each child list in sibling order.

    Args:
        nodes: Nodes in sorted order.
        lookup: Id to node mapping from build_lookup.
        get_parent_id: Reads the parent id of an item; None means top level.

    Returns:
        Tuple of (synthetic root, nodes whose parent id matched nothing).
        Dangling nodes are not attached anywhere.
    """
    root = TreeNode()
    dangling: List[TreeNode] = []

    for node in nodes:
        parent_id = get_parent_id(node.value)
        if parent_id is None:
            parent = root
        else:
            parent = lookup.get(parent_id)
            if parent is None:
                dangling.append(node)
                continue
        parent.children.append(node)

    return root, dangling


def iter_tree(root: TreeNode) -> Iterator[Tuple[TreeNode, int]]:
    """Walks the tree depth-first, each parent before its children.

    Uses an explicit stack, so arbitrarily deep chains are fine. Only
    nodes reachable from root are visited; the root itself is skipped
    when it holds no value.

    Args:
        root: Node to start from, at level 0.

    Yields:
        (node, level) pairs in hierarchical order.
    """
    stack = [(root, 0)]
    while stack:
        node, level = stack.pop()
        if node.has_value:
            yield node, level
        # Reversed so the first child is popped first.
        for child in reversed(node.children):
            stack.append((child, level + 1))


def find_unreachable(
    nodes: List[TreeNode],
    dangling: List[TreeNode],
    visited: Iterable[TreeNode]
) -> List[TreeNode]:
    """Returns attached nodes that the walk from the root never reached.

    Args:
        nodes: All nodes in sorted order.
        dangling: Nodes dropped by build_tree.
        visited: Nodes yielded by iter_tree.

    Returns:
        Unreachable nodes in sorted order.
    """
    skip = {id(node) for node in dangling}
    skip.update(id(node) for node in visited)
    return [node for node in nodes if id(node) not in skip]
