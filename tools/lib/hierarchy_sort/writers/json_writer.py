"""JSON row writer.

This module provides JsonWriter for serializing rows to a JSON array.
"""

import datetime
import json
from typing import Any, Dict, Iterable, List, Optional, Tuple

from hierarchy_sort.writers.base_writer import BaseWriter


class JsonWriter(BaseWriter):
    """Serializes rows to a JSON array of {"depth", "item"} objects.

    Items must be JSON-serializable. Dates and datetimes, as produced by
    YAML record files, are written in ISO 8601 format.
    """

    def __init__(self, indent: Optional[int] = 2) -> None:
        self.indent = indent

    def write_to_string(
        self,
        rows: Iterable[Tuple[Any, int]],
        **_options
    ) -> str:
        """Serializes rows to JSON string.

        Args:
            rows: (item, depth) rows in hierarchical order.
            **_options: Additional options (ignored).

        Returns:
            JSON string representation.

        Raises:
            TypeError: If an item is not JSON-serializable.
        """
        data = self._build_rows_list(rows)
        return json.dumps(
            data,
            ensure_ascii=False,
            indent=self.indent,
            default=_encode_value
        )

    def _build_rows_list(
        self,
        rows: Iterable[Tuple[Any, int]]
    ) -> List[Dict[str, Any]]:
        """Builds the list of row dicts."""
        return [{'depth': depth, 'item': item} for item, depth in rows]


def _encode_value(value: Any) -> Any:
    """Encodes values json cannot serialize natively."""
    if isinstance(value, (datetime.date, datetime.time)):
        return value.isoformat()
    raise TypeError(
        f"Object of type {type(value).__name__} is not JSON serializable"
    )
