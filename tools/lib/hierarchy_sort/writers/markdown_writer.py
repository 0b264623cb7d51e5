"""Markdown outline writer.

This module provides MarkdownWriter, which renders rows as a nested
bullet list indented by depth.
"""

from typing import Any, Iterable, List, Optional, Tuple

from hierarchy_sort._internal.selectors import make_getter
from hierarchy_sort.models import Selector
from hierarchy_sort.writers.base_writer import BaseWriter


class MarkdownWriter(BaseWriter):
    """Renders rows as an indented markdown bullet list.

    Usage:
        writer = MarkdownWriter(label_key='title')
        print(writer.write_to_string(hierarchical_sort(pages)))
    """

    def __init__(
        self,
        label_key: Optional[Selector] = None,
        indent: str = '  '
    ) -> None:
        """Initializes writer.

        Args:
            label_key: Field name or callable giving each bullet's text.
                None uses str(item).
            indent: Indentation added per level below the top.
        """
        self._get_label = (
            make_getter(label_key) if label_key is not None else str
        )
        self.indent = indent

    def write_to_string(
        self,
        rows: Iterable[Tuple[Any, int]],
        **_options
    ) -> str:
        """Serializes rows to a markdown bullet list.

        Args:
            rows: (item, depth) rows in hierarchical order.
            **_options: Additional options (ignored).

        Returns:
            Markdown text, one line per row, newline terminated. Empty
            string when there are no rows.
        """
        lines: List[str] = []
        for item, depth in rows:
            lines.append(self._format_line(item, depth))
        if not lines:
            return ''
        return '\n'.join(lines) + '\n'

    def _format_line(self, item: Any, depth: int) -> str:
        """Formats one bullet line."""
        label = ' '.join(str(self._get_label(item)).split())
        return f"{self.indent * (depth - 1)}- {label}"
