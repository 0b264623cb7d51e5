"""Loading of sort options and input records from files.

Options files are YAML. Settings may sit at the top level or under a
``hierarchy_sort`` key:

    hierarchy_sort:
      parent_key: reply_to
      sort_key: created_at
      on_orphan: raise
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

import yaml

from hierarchy_sort.exceptions import ConfigError
from hierarchy_sort.models import SortOptions

logger = logging.getLogger(__name__)

OPTIONS_SECTION = 'hierarchy_sort'


def load_options(path: Union[str, Path]) -> SortOptions:
    """Loads SortOptions from a YAML file.

    Args:
        path: Path to the YAML file. An empty file gives the defaults.

    Returns:
        SortOptions instance.

    Raises:
        ConfigError: If the file is missing, unparsable or not a mapping.
        InvalidOptionError: If an option name or value is invalid.
    """
    data = _read_yaml(Path(path))
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Options file {path} must contain a mapping")
    if OPTIONS_SECTION in data:
        data = data[OPTIONS_SECTION] or {}
        if not isinstance(data, dict):
            raise ConfigError(
                f"'{OPTIONS_SECTION}' in {path} must be a mapping"
            )

    logger.debug(f"Loaded sort options from {path}: {sorted(data)}")
    return SortOptions.from_dict(data)


def options_from_mapping(data: Dict[str, Any]) -> SortOptions:
    """Builds SortOptions from a mapping, ignoring None values."""
    return SortOptions.from_dict(
        {key: value for key, value in data.items() if value is not None}
    )


def load_records(path: Union[str, Path]) -> List[Dict[str, Any]]:
    """Loads a list of records from a JSON or YAML file.

    The top level is either a list of records or a mapping with an
    ``items`` list.

    Args:
        path: Path to a .json, .yaml or .yml file.

    Returns:
        List of record dicts.

    Raises:
        ConfigError: If the file cannot be read or has the wrong shape.
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix == '.json':
        data = _read_json(path)
    elif suffix in ('.yaml', '.yml'):
        data = _read_yaml(path)
    else:
        raise ConfigError(
            f"Unsupported record file type '{suffix}' "
            f"(expected .json, .yaml or .yml)"
        )

    if isinstance(data, dict) and 'items' in data:
        data = data['items']
    if not isinstance(data, list):
        raise ConfigError(f"Records in {path} must be a list")
    for index, record in enumerate(data):
        if not isinstance(record, dict):
            raise ConfigError(
                f"Record {index} in {path} is not a mapping: {record!r}"
            )

    logger.debug(f"Loaded {len(data)} records from {path}")
    return data


def _read_yaml(path: Path) -> Any:
    """Parses a YAML file, wrapping errors in ConfigError."""
    if not path.exists():
        raise ConfigError(f"File not found: {path}")
    try:
        with path.open('r', encoding='utf-8') as f:
            return yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e


def _read_json(path: Path) -> Any:
    """Parses a JSON file, wrapping errors in ConfigError."""
    if not path.exists():
        raise ConfigError(f"File not found: {path}")
    try:
        with path.open('r', encoding='utf-8') as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {path}: {e}") from e
