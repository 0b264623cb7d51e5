"""Writers for rendering hierarchically sorted rows."""

from hierarchy_sort.writers.base_writer import BaseWriter
from hierarchy_sort.writers.json_writer import JsonWriter
from hierarchy_sort.writers.markdown_writer import MarkdownWriter

__all__ = [
    'BaseWriter',
    'JsonWriter',
    'MarkdownWriter',
]
