"""Command-line entry point for sorting class members in source files."""

import argparse
import logging
import sys
from pathlib import Path

from member_sorter.config_error import ConfigError
from member_sorter.load_config import load_config
from member_sorter.sort_document import sort_document
from member_sorter.sort_options import SortOptions
from member_sorter.sort_report import SortReport
from member_sorter.sort_result import SortResult, SortStatus
from member_sorter.text_document import TextDocument

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NEEDS_SORT = 1
EXIT_ERROR = 2


def _report_outcome(path: Path, result: SortResult) -> None:
    """Surface a sort outcome to the user."""
    if result.status is SortStatus.UNSUPPORTED_LANGUAGE:
        logger.warning("%s: %s", path, result.message)
    else:
        logger.info("%s: %s", path, result.message)


def run_sort(args: argparse.Namespace) -> int:
    """Sort every file named on the command line."""
    try:
        config = load_config(args.config)
        options = SortOptions.from_config(config)
    except ConfigError as exc:
        logger.error("Invalid configuration: %s", exc)
        return EXIT_ERROR

    report = SortReport(options)
    exit_code = EXIT_OK
    for path in args.files:
        try:
            document = TextDocument.from_path(path, args.language, config["languages"])
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("Cannot read %s: %s", path, exc)
            exit_code = EXIT_ERROR
            continue

        result = sort_document(document, options)
        report.add_result(str(path), result)
        _report_outcome(path, result)
        if args.stdout:
            sys.stdout.write(document.get_text())
        if not result.changed:
            continue

        if args.check:
            exit_code = max(exit_code, EXIT_NEEDS_SORT)
        elif not args.stdout:
            try:
                document.save()
            except OSError as exc:
                logger.error("Cannot write %s: %s", path, exc)
                exit_code = EXIT_ERROR

    if args.report:
        report.generate_report(args.report)
        logger.info("Report written to %s", args.report)
    return exit_code


def main(argv: list[str] | None = None) -> int:
    """Parse arguments and run the sort."""
    ap = argparse.ArgumentParser(
        description=(
            "Reorder the members of the first class in each file: fields, then "
            "properties, then methods, each grouped by visibility and name."
        ),
    )
    ap.add_argument(
        "files",
        nargs="+",
        type=Path,
        help="Source files to sort (.cs, .ts, .js)",
    )
    ap.add_argument(
        "--config",
        help="Path to a YAML configuration file (default: ./.member-sort.yml)",
    )
    ap.add_argument(
        "--language",
        help="Language id to use instead of guessing from the file extension",
    )
    ap.add_argument(
        "--check",
        action="store_true",
        help="Do not write files; exit with status 1 if any file needs sorting",
    )
    ap.add_argument(
        "--stdout",
        action="store_true",
        help="Print sorted documents instead of writing them back",
    )
    ap.add_argument(
        "--report",
        help="Write a JSON summary of the run to this path",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug output",
    )
    args = ap.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )
    return run_sort(args)


if __name__ == "__main__":
    raise SystemExit(main())
