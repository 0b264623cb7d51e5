"""Tests for configuration and record loading."""

import json
from pathlib import Path

import pytest

from hierarchy_sort.config import load_options, load_records
from hierarchy_sort.exceptions import ConfigError, InvalidOptionError
from hierarchy_sort.models import SortOptions


class TestLoadOptions:
    """Tests for load_options."""

    def test_options_under_section(self, tmp_path: Path):
        """Tests settings nested under hierarchy_sort."""
        path = tmp_path / 'sort.yaml'
        path.write_text(
            "hierarchy_sort:\n"
            "  parent_key: reply_to\n"
            "  sort_key: created_at\n"
            "  reverse: true\n"
            "  on_orphan: raise\n",
            encoding='utf-8'
        )

        options = load_options(path)

        assert options == SortOptions(
            parent_key='reply_to',
            sort_key='created_at',
            reverse=True,
            on_orphan='raise',
        )

    def test_top_level_options(self, tmp_path: Path):
        """Tests settings at the top level of the file."""
        path = tmp_path / 'sort.yml'
        path.write_text("id_key: uid\n", encoding='utf-8')

        assert load_options(path).id_key == 'uid'

    def test_empty_file_gives_defaults(self, tmp_path: Path):
        """Tests an empty file yields default options."""
        path = tmp_path / 'empty.yaml'
        path.write_text('', encoding='utf-8')

        assert load_options(path) == SortOptions()

    def test_unknown_option(self, tmp_path: Path):
        """Tests unknown keys are rejected."""
        path = tmp_path / 'bad.yaml'
        path.write_text("colour: blue\n", encoding='utf-8')

        with pytest.raises(InvalidOptionError, match='colour'):
            load_options(path)

    def test_invalid_value(self, tmp_path: Path):
        """Tests an invalid on_orphan value is rejected."""
        path = tmp_path / 'bad.yaml'
        path.write_text("on_orphan: explode\n", encoding='utf-8')

        with pytest.raises(InvalidOptionError):
            load_options(path)

    def test_not_a_mapping(self, tmp_path: Path):
        """Tests a YAML list is rejected."""
        path = tmp_path / 'list.yaml'
        path.write_text("- a\n- b\n", encoding='utf-8')

        with pytest.raises(ConfigError):
            load_options(path)

    def test_invalid_yaml(self, tmp_path: Path):
        """Tests a parse error becomes ConfigError."""
        path = tmp_path / 'broken.yaml'
        path.write_text("key: [unclosed\n", encoding='utf-8')

        with pytest.raises(ConfigError, match='Invalid YAML'):
            load_options(path)

    def test_missing_file(self, tmp_path: Path):
        """Tests a missing file becomes ConfigError."""
        with pytest.raises(ConfigError, match='File not found'):
            load_options(tmp_path / 'nope.yaml')


class TestLoadRecords:
    """Tests for load_records."""

    def test_json_list(self, tmp_path: Path):
        """Tests a JSON array of records."""
        path = tmp_path / 'records.json'
        path.write_text(json.dumps([{'id': 1}, {'id': 2}]), encoding='utf-8')

        assert load_records(path) == [{'id': 1}, {'id': 2}]

    def test_yaml_items_key(self, tmp_path: Path):
        """Tests a YAML mapping with an items list."""
        path = tmp_path / 'records.yaml'
        path.write_text(
            "items:\n"
            "  - {id: a, parent_id: null}\n"
            "  - {id: b, parent_id: a}\n",
            encoding='utf-8'
        )

        assert load_records(path) == [
            {'id': 'a', 'parent_id': None},
            {'id': 'b', 'parent_id': 'a'},
        ]

    def test_unsupported_suffix(self, tmp_path: Path):
        """Tests an unknown file type is rejected."""
        path = tmp_path / 'records.csv'
        path.write_text('id\n1\n', encoding='utf-8')

        with pytest.raises(ConfigError, match='Unsupported'):
            load_records(path)

    def test_non_mapping_record(self, tmp_path: Path):
        """Tests a scalar record is rejected."""
        path = tmp_path / 'records.json'
        path.write_text('[{"id": 1}, 2]', encoding='utf-8')

        with pytest.raises(ConfigError, match='Record 1'):
            load_records(path)

    def test_invalid_json(self, tmp_path: Path):
        """Tests a JSON parse error becomes ConfigError."""
        path = tmp_path / 'records.json'
        path.write_text('[{', encoding='utf-8')

        with pytest.raises(ConfigError, match='Invalid JSON'):
            load_records(path)
