"""Command line interface for autorename."""

import argparse
import json
import os
import sys

import structlog

from .config import load_settings
from .exceptions import ConfigurationError
from .executor import FileRenameExecutor
from .logging_config import configure_logging
from .proposal import BatchProcessor, ProposalGenerator, RenameRow, RowState
from .proposal.generator import unique_paths

logger = structlog.get_logger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2

STATE_MARKERS = {
    RowState.READY: " ",
    RowState.UNCHANGED: "=",
    RowState.CONFLICT: "!",
    RowState.RENAMED: "+",
    RowState.ERROR: "x",
}


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="autorename",
        description="Clean up file and directory names: detect the word separator, "
        "turn it into spaces and optionally fix case, brackets and track numbers.",
    )
    parser.add_argument("paths", nargs="+", metavar="PATH", help="Files or directories to rename.")
    parser.add_argument(
        "-s", "--start-upper", action="store_true", help="Start every word with an upper case letter."
    )
    parser.add_argument("-f", "--force", action="store_true", help="Overwrite existing destination files.")
    parser.add_argument(
        "-y", "--yes", action="store_true", help="Apply the renames (default: only list the proposals)."
    )
    parser.add_argument("-b", "--remove-brackets", action="store_true", help="Remove text in (), [], {} and <>.")
    parser.add_argument(
        "-sn", "--remove-starting-number", action="store_true", help="Remove a leading number such as '01.'."
    )
    parser.add_argument(
        "-uc",
        "--upper-case-exceptions",
        metavar="WORDS",
        default=None,
        help="Words kept verbatim when changing case, separated by '|' or ',' (e.g. 'HD|HQ|SD').",
    )
    parser.add_argument("-e", "--show-extension", action="store_true", help="Show extensions in the listing.")
    parser.add_argument("-p", "--full-path", action="store_true", help="Show full paths in the listing.")
    parser.add_argument(
        "-i", "--interactive", action="store_true", help="Ask before overwriting an existing destination."
    )
    parser.add_argument("--explain", action="store_true", help="Show every normalization stage for each path.")
    parser.add_argument("--json", action="store_true", help="Write log events and --explain output as JSON.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def settings_overrides(args: argparse.Namespace) -> dict[str, object]:
    """Map command line flags onto settings fields.

    Only flags that were given override the environment.
    """
    overrides: dict[str, object] = {}
    if args.start_upper:
        overrides["start_with_upper_case"] = True
    if args.force:
        overrides["force_overwrite"] = True
    if args.remove_brackets:
        overrides["remove_brackets"] = True
    if args.remove_starting_number:
        overrides["remove_starting_number"] = True
    if args.upper_case_exceptions is not None:
        overrides["upper_case_exceptions"] = args.upper_case_exceptions
    if args.show_extension:
        overrides["show_extension"] = True
    if args.full_path:
        overrides["show_full_path"] = True
    if args.json:
        overrides["log_json"] = True
    if args.verbose:
        overrides["log_level"] = "DEBUG"
    return overrides


def prompt_overwrite(destination: str) -> bool:
    """Ask the user whether an existing destination may be overwritten."""
    try:
        answer = input(f"Do you want to overwrite {destination}? [y/N] ")
    except EOFError:
        return False
    return answer.strip().lower() in ("y", "yes")


def existing_paths(paths: list[str]) -> list[str]:
    """Keep the paths that exist, warning about the others."""
    found = []
    for path in paths:
        if os.path.lexists(path):
            found.append(path)
        else:
            logger.warning("Skip: path does not exist", path=path)
    return found


def format_row(row: RenameRow) -> str:
    """Format one row of the listing."""
    line = f"{STATE_MARKERS[row.state]} {row.original_view} -> {row.new_view}"
    if row.error and row.alternative_view:
        line += f"  ({row.error}; try {row.alternative_view})"
    elif row.error:
        line += f"  ({row.error})"
    return line


def print_explanation(generator: ProposalGenerator, paths: list[str], as_json: bool = False) -> None:
    """Print the normalization stages of every path, one JSON object per line with ``as_json``."""
    for path in paths:
        components = generator.normalizer.components(path)
        trace = generator.normalizer.trace(components.stem, generator.options, components.is_directory)
        if as_json:
            print(json.dumps({"path": path, **trace.to_dict()}))
            continue
        print(f"{path}: separator={trace.separator.name.lower()}")
        for stage, value in trace.stages:
            print(f"  {stage:<12} {value!r}")


def main(argv: list[str] | None = None) -> int:
    """Run the command line interface."""
    parser = build_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    try:
        settings = load_settings(**settings_overrides(args))
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE

    configure_logging(settings.log_level, settings.log_json)

    paths = existing_paths(unique_paths(args.paths))
    if not paths:
        logger.error("No existing paths given")
        return EXIT_USAGE

    generator = ProposalGenerator.from_settings(settings)
    if args.explain:
        print_explanation(generator, paths, settings.log_json)

    rows = generator.generate(paths)
    if not any(row.state is not RowState.UNCHANGED for row in rows):
        print("Nothing to rename.")
        return EXIT_OK

    if not args.yes:
        print("Dry run (use -y/--yes to apply):")
        for row in rows:
            print(format_row(row))
        return EXIT_OK

    executor = FileRenameExecutor(confirm_overwrite=prompt_overwrite if args.interactive else None)
    processor = BatchProcessor(executor, force_overwrite=settings.force_overwrite)
    result = processor.apply(rows)

    for row in rows:
        if row.state is not RowState.UNCHANGED:
            print(format_row(row))

    print(
        f"\nRenamed: {result.renamed}, conflicts: {result.conflicts}, "
        f"errors: {result.errors}, skipped: {result.skipped}"
    )
    failed = not result.ok or any(row.state in (RowState.ERROR, RowState.CONFLICT) for row in rows)
    return EXIT_FAILED if failed else EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
