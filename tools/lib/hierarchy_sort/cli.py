"""Command-line interface for hierarchy_sort.

This module provides a CLI for sorting a file of parent-linked records into
hierarchical order and for checking such a file for missing parents,
duplicate ids and cycles.
"""

import argparse
import dataclasses
import logging
import sys
from pathlib import Path
from typing import List, Optional

from hierarchy_sort.config import (
    load_options,
    load_records,
    options_from_mapping,
)
from hierarchy_sort.exceptions import HierarchySortError
from hierarchy_sort.models import ORPHAN_RAISE, SortOptions
from hierarchy_sort.sorter import hierarchical_sort_report
from hierarchy_sort.validator import validate_hierarchy
from hierarchy_sort.writers import JsonWriter, MarkdownWriter

logger = logging.getLogger(__name__)


def build_options(args: argparse.Namespace) -> SortOptions:
    """Merges the config file (if any) with command-line overrides."""
    options = load_options(args.config) if args.config else SortOptions()
    overrides = {
        'id_key': args.id_key,
        'parent_key': args.parent_key,
        'sort_key': args.sort_key,
        'reverse': args.reverse,
    }
    if getattr(args, 'strict', False):
        overrides['on_orphan'] = ORPHAN_RAISE
    merged = dataclasses.asdict(options)
    merged.update(
        {key: value for key, value in overrides.items() if value is not None}
    )
    options = options_from_mapping(merged)
    if options.sort_key is None:
        # Plain records have no natural order.
        options = dataclasses.replace(options, sort_key=options.id_key)
    return options


def cmd_sort(args: argparse.Namespace):
    """Handles the 'sort' command."""
    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Error: Input file not found: {input_path}", file=sys.stderr)
        sys.exit(1)

    try:
        options = build_options(args)
        records = load_records(input_path)
        logger.debug(f"Sorting {len(records)} records with {options}")
        report = hierarchical_sort_report(records, **options.to_kwargs())

        if args.format == 'json':
            writer = JsonWriter()
        else:
            writer = MarkdownWriter(
                label_key=args.label_key or options.id_key
            )

        if args.output:
            writer.write(report.rows, Path(args.output))
            print(f"✓ Wrote {len(report.rows)} rows to {args.output}")
        else:
            sys.stdout.write(writer.write_to_string(report.rows))
    except (HierarchySortError, TypeError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.report:
        print(
            f"Dropped {len(report.dangling)} dangling, "
            f"{len(report.unreachable)} unreachable; "
            f"{len(report.duplicate_ids)} duplicate ids",
            file=sys.stderr
        )


def cmd_validate(args: argparse.Namespace):
    """Handles the 'validate' command."""
    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Error: Input file not found: {input_path}", file=sys.stderr)
        sys.exit(1)

    try:
        options = build_options(args)
        records = load_records(input_path)
        results = validate_hierarchy(
            records,
            parent_key=options.parent_key,
            id_key=options.id_key
        )
    except (HierarchySortError, TypeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    for result in results:
        mark = '✓' if result.passed else '✗'
        print(f"{mark} {result.name}: {result.message}")

    if not all(result.passed for result in results):
        sys.exit(1)


def _add_key_arguments(parser: argparse.ArgumentParser) -> None:
    """Adds the options shared by every command."""
    parser.add_argument('-i', '--input', required=True, help='Path to the input JSON or YAML records file.')
    parser.add_argument('--config', help='YAML file with sort options. Command-line flags take precedence.')
    parser.add_argument('--id-key', help='Record field holding the id. Default: id.')
    parser.add_argument('--parent-key', help='Record field holding the parent id. Default: parent_id.')


def main(argv: Optional[List[str]] = None):
    """The main command-line interface entry point."""
    parser = argparse.ArgumentParser(
        prog='hierarchy-sort',
        description='Sort parent-linked records into hierarchical display order.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print comments as an indented outline, replies under their parents
  hierarchy-sort sort -i comments.json --sort-key created_at --label-key text

  # Write the ordered rows with their depths as JSON
  hierarchy-sort sort -i pages.yaml --format json -o ordered.json

  # Fail instead of silently dropping records with missing parents
  hierarchy-sort sort -i comments.json --strict

  # Check a file for duplicate ids, missing parents and cycles
  hierarchy-sort validate -i comments.json
        """
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging.')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')
    subparsers.required = True

    # sort command
    sort_parser = subparsers.add_parser(
        'sort',
        help='Sort records into hierarchical order.',
        description='Orders records so each follows its parent, with siblings sorted by --sort-key (the id when unset). Records with missing parents or on parent cycles are dropped unless --strict is given.'
    )
    _add_key_arguments(sort_parser)
    sort_parser.add_argument('-o', '--output', help='Output file. Default: standard output.')
    sort_parser.add_argument('--sort-key', help='Record field ordering siblings. Default: the id field.')
    sort_parser.add_argument('--reverse', action='store_true', default=None, help='Sort siblings in descending order.')
    sort_parser.add_argument('--strict', action='store_true', help='Exit with an error on missing parents or cycles.')
    sort_parser.add_argument('--format', default='markdown', choices=['markdown', 'json'], help='Output format. Default: markdown.')
    sort_parser.add_argument('--label-key', help='Record field used as the outline label (markdown only). Default: the id field.')
    sort_parser.add_argument('--report', action='store_true', help='Print a summary of dropped records to stderr.')
    sort_parser.set_defaults(func=cmd_sort)

    # validate command
    validate_parser = subparsers.add_parser(
        'validate',
        help='Check records for duplicate ids, missing parents and cycles.',
        description='Runs every hierarchy check and prints one line per check. Exits with code 0 if all pass, 1 otherwise.'
    )
    _add_key_arguments(validate_parser)
    validate_parser.set_defaults(func=cmd_validate, sort_key=None, reverse=None)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s'
    )
    args.func(args)


if __name__ == '__main__':
    main()
