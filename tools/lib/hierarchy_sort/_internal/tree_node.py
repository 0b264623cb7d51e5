"""Tree node used while building the hierarchy.

Nodes live only for the duration of one sort call.
"""

from typing import Any, List

_NO_VALUE = object()


class TreeNode:
    """Wraps one item and the ordered list of its child nodes.

    The synthetic root is created without a value and is never emitted.
    Children must be appended in sibling order.
    """

    __slots__ = ('value', 'children')

    def __init__(self, value: Any = _NO_VALUE) -> None:
        self.value = value
        self.children: List['TreeNode'] = []

    @property
    def has_value(self) -> bool:
        """Returns True unless this is the synthetic root."""
        return self.value is not _NO_VALUE

    def __repr__(self) -> str:
        if not self.has_value:
            return f'TreeNode(<root>, children={len(self.children)})'
        return f'TreeNode({self.value!r}, children={len(self.children)})'
