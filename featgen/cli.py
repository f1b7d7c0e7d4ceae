"""Command-line entry point for the feature scaffolder.

Usage::

    featgen <type> <name> <ticket-id> [output-dir]
    python -m featgen.cli api user-management PROJ-123
"""

from __future__ import annotations

import sys
from pathlib import Path

from .config import default_output_dir
from .scaffolder import (
    FEATURE_TYPES,
    FeatureGenerator,
    FilesystemWriteError,
    ScaffoldError,
    available_types,
)
from .utils import console, print_error, print_rule, print_summary_table, print_warning


def _build_parser():
    import argparse

    types = ", ".join(available_types())
    parser = argparse.ArgumentParser(
        prog="featgen",
        description="Generate boilerplate files for a new feature",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  featgen api user-management PROJ-123\n"
            "  featgen ui login-form PROJ-456 ./src\n"
            f"\nAvailable types: {types}\n"
        ),
    )
    parser.add_argument(
        "--list-types",
        action="store_true",
        help="List the available feature types and exit",
    )
    parser.add_argument("type", nargs="?", help=f"Feature type ({types})")
    parser.add_argument("name", nargs="?", help="Feature name, e.g. user-management")
    parser.add_argument("ticket_id", nargs="?", help="Ticket or issue id, e.g. PROJ-123")
    parser.add_argument(
        "output_dir",
        nargs="?",
        default=None,
        help="Output directory (default: $FEATGEN_OUTPUT_DIR or ./output)",
    )
    return parser


def _print_types() -> None:
    print_summary_table(
        {key: definition.description for key, definition in FEATURE_TYPES.items()},
        title="Feature types",
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``featgen``."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.list_types:
        _print_types()
        return

    if args.ticket_id is None:
        parser.error("the following arguments are required: type, name, ticket_id")

    output_dir = Path(args.output_dir) if args.output_dir else default_output_dir()

    try:
        generator = FeatureGenerator(args.type, args.name, args.ticket_id)
        print_rule(f"{args.type}: {args.name} ({args.ticket_id})")
        generator.generate(output_dir)
    except FilesystemWriteError as exc:
        print_error(f"Error: {exc}")
        if exc.report.files:
            print_warning(f"{exc.report.count} file(s) were written before the failure:")
            for path in exc.report.files:
                console.print(f"  {path}", markup=False)
        sys.exit(1)
    except ScaffoldError as exc:
        print_error(f"Error: {exc}")
        sys.exit(1)


if __name__ == "__main__":
    main()
