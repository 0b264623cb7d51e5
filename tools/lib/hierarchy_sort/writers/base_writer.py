"""Abstract base for row writers.

This module defines BaseWriter, the abstract interface for rendering the
output of hierarchical_sort to different formats.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Iterable, Tuple


class BaseWriter(ABC):
    """Abstract base for row serialization.

    Writers take (item, depth) rows, as produced by hierarchical_sort, and
    serialize them to a specific format.
    """

    def write(
        self,
        rows: Iterable[Tuple[Any, int]],
        output_path: Path,
        **options
    ) -> None:
        """Writes rows to file in specific format.

        Args:
            rows: (item, depth) rows in hierarchical order.
            output_path: Output file path. Parent directories are created.
            **options: Format-specific options.

        Raises:
            IOError: If write fails.
        """
        content = self.write_to_string(rows, **options)
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with output_path.open('w', encoding='utf-8') as f:
            f.write(content)

    @abstractmethod
    def write_to_string(
        self,
        rows: Iterable[Tuple[Any, int]],
        **options
    ) -> str:
        """Serializes rows to string.

        Args:
            rows: (item, depth) rows in hierarchical order.
            **options: Format-specific options.

        Returns:
            Serialized string representation.
        """
