"""Command line entry point: parse a Doxygen XML folder and print a report."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from doxygen2md.config import (
    DOXYGEN2MD_IMAGES_OUTPUT_PATH,
    DOXYGEN2MD_LOG_LEVEL,
    DOXYGEN2MD_VERBOSE,
    DOXYGEN2MD_XML_INPUT_PATH,
)
from doxygen2md.data_model import ParseOptions, parse_doxygen_xml
from doxygen2md.exceptions import Doxygen2mdError
from doxygen2md.images import copy_images
from doxygen2md.report import format_report
from doxygen2md.xml_stats import collect_folder_stats


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="doxygen2md",
        description="Parse Doxygen XML output into a typed data model and summarize it.",
    )
    parser.add_argument(
        "--input",
        type=Path,
        default=DOXYGEN2MD_XML_INPUT_PATH,
        help="Folder with the Doxygen XML files (default: %(default)s)",
    )
    parser.add_argument(
        "--images-output",
        type=Path,
        default=DOXYGEN2MD_IMAGES_OUTPUT_PATH,
        help="Destination of the copied images (default: %(default)s)",
    )
    parser.add_argument(
        "--copy-images", action="store_true", help="Copy referenced HTML images"
    )
    parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print element and attribute counts of every XML file instead of parsing",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        default=DOXYGEN2MD_VERBOSE,
        help="Log each file as it is parsed",
    )
    parser.add_argument(
        "--log-level",
        default=DOXYGEN2MD_LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Logging level (default: %(default)s)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    level = "DEBUG" if args.verbose else args.log_level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.stats:
            _print_stats(args.input)
            return 0
        asyncio.run(_run(args))
    except Doxygen2mdError as exc:
        print(f"doxygen2md: {exc}", file=sys.stderr)
        return 1
    return 0


async def _run(args: argparse.Namespace) -> None:
    options = ParseOptions(xml_input_path=args.input, verbose=args.verbose)
    data_model = await parse_doxygen_xml(options)
    if args.copy_images:
        await copy_images(data_model.context, args.input, args.images_output)

    report = format_report(data_model)
    if args.json:
        print(report.model_dump_json(indent=2))
        return
    print(report.summary)
    print()
    print(report.compounds_tree)


def _print_stats(xml_input_path: Path) -> None:
    elements, attributes = collect_folder_stats(sorted(xml_input_path.glob("*.xml")))

    print("Elements:")
    for name, count in elements.most_common():
        print(f"{name}: {count}")

    print("\nAttributes:")
    for name, count in attributes.most_common():
        print(f"{name}: {count}")


if __name__ == "__main__":
    sys.exit(main())
