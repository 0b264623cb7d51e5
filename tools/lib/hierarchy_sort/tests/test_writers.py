"""Tests for MarkdownWriter and JsonWriter."""

import datetime
import json
from pathlib import Path

import pytest

from hierarchy_sort import hierarchical_sort
from hierarchy_sort.writers import JsonWriter, MarkdownWriter


@pytest.fixture
def pages():
    """Returns page records forming a small tree."""
    return [
        {'id': 3, 'parent_id': None, 'title': 'Appendix'},
        {'id': 1, 'parent_id': None, 'title': 'Guide'},
        {'id': 2, 'parent_id': 1, 'title': 'Install'},
        {'id': 4, 'parent_id': 2, 'title': 'उपनिषद्'},
    ]


@pytest.fixture
def rows(pages):
    """Returns the pages in hierarchical order."""
    return hierarchical_sort(pages, sort_key='id')


class TestMarkdownWriter:
    """Tests for MarkdownWriter class."""

    def test_indented_outline(self, rows):
        """Tests bullets are indented two spaces per level."""
        text = MarkdownWriter(label_key='title').write_to_string(rows)

        assert text == (
            "- Guide\n"
            "  - Install\n"
            "    - उपनिषद्\n"
            "- Appendix\n"
        )

    def test_default_label_and_custom_indent(self):
        """Tests str(item) labels and a custom indent."""
        writer = MarkdownWriter(indent='\t')

        assert writer.write_to_string([('a', 1), ('b', 2)]) == "- a\n\t- b\n"

    def test_multiline_label_collapsed(self):
        """Tests whitespace in labels is folded to single spaces."""
        writer = MarkdownWriter(label_key=lambda item: item)

        assert writer.write_to_string([('one\ntwo  three', 1)]) == (
            "- one two three\n"
        )

    def test_empty_rows(self):
        """Tests no rows render as an empty string."""
        assert MarkdownWriter().write_to_string([]) == ''

    def test_write_to_file(self, rows, tmp_path: Path):
        """Tests write creates parent directories and writes UTF-8."""
        output_path = tmp_path / 'nested' / 'outline.md'
        MarkdownWriter(label_key='title').write(rows, output_path)

        assert output_path.exists()
        assert 'उपनिषद्' in output_path.read_text(encoding='utf-8')


class TestJsonWriter:
    """Tests for JsonWriter class."""

    def test_write_to_string(self, rows, pages):
        """Tests rows become depth/item objects in order."""
        data = json.loads(JsonWriter().write_to_string(rows))

        assert [entry['depth'] for entry in data] == [1, 2, 3, 1]
        assert data[0]['item'] == pages[1]
        assert data[-1]['item']['title'] == 'Appendix'

    def test_unicode_not_escaped(self, rows):
        """Tests non-ASCII text is written as-is."""
        assert 'उपनिषद्' in JsonWriter().write_to_string(rows)

    def test_compact_output(self):
        """Tests indent=None gives single-line JSON."""
        text = JsonWriter(indent=None).write_to_string([({'id': 1}, 1)])

        assert text == '[{"depth": 1, "item": {"id": 1}}]'

    def test_dates_written_as_iso(self):
        """Tests date and datetime values become ISO 8601 strings."""
        item = {
            'day': datetime.date(2024, 1, 2),
            'at': datetime.datetime(2024, 1, 2, 3, 4, 5),
        }
        data = json.loads(JsonWriter().write_to_string([(item, 1)]))

        assert data[0]['item'] == {
            'day': '2024-01-02',
            'at': '2024-01-02T03:04:05',
        }

    def test_unserializable_item(self):
        """Tests non-JSON items raise TypeError."""
        with pytest.raises(TypeError):
            JsonWriter().write_to_string([(object(), 1)])

    def test_write_to_file(self, rows, tmp_path: Path):
        """Tests write produces a valid JSON file."""
        output_path = tmp_path / 'rows.json'
        JsonWriter().write(rows, output_path)

        with output_path.open('r', encoding='utf-8') as f:
            data = json.load(f)
        assert len(data) == 4
