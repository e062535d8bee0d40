#!/usr/bin/env python3
import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .config import Settings
from .extraction import CatalogCourseMerger, CatalogParser
from .extraction.report import generate_parsing_report, save_courses_csv, save_json
from .utils import CatalogError, handle_extraction_error
from .utils.logger import setup_logger

logger = setup_logger("catalog_extractor")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="catalog-extractor",
        description="Extract structured course data from academic catalogs",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_cmd = subparsers.add_parser("parse", help="Parse one catalog (.pdf or extracted .txt)")
    parse_cmd.add_argument("catalog", type=Path, help="Path to the catalog file")
    parse_cmd.add_argument("-o", "--output", type=Path, help="Parsed catalog JSON (default: OUTPUT_DIR/<name>.json)")
    parse_cmd.add_argument("--csv", type=Path, help="Also write the course table as CSV")
    parse_cmd.add_argument("--report", type=Path, help="Also write a parsing report JSON")

    merge_cmd = subparsers.add_parser("merge", help="Merge courses across parsed catalog-YYYY-MM.json files")
    merge_cmd.add_argument("parsed_dir", type=Path, help="Directory of parsed catalogs")
    merge_cmd.add_argument("-o", "--output", type=Path, required=True, help="Merged courses JSON")

    return parser


def run_parse(args: argparse.Namespace, settings: Settings) -> int:
    catalog_parser = CatalogParser(settings=settings)
    catalog = catalog_parser.parse_file(args.catalog)

    output = args.output or settings.OUTPUT_DIR / f"{args.catalog.stem}.json"
    save_json(catalog.to_dict(), output)

    if args.csv:
        save_courses_csv(catalog, args.csv)
    if args.report:
        save_json(generate_parsing_report(catalog, args.catalog.name), args.report)

    stats = catalog.metadata.statistics
    print(f"{args.catalog.name}: {stats.courses_found} courses, {stats.degree_plans_found} degree plans "
          f"(CCN {stats.ccn_coverage}%, CU {stats.cu_coverage}%) -> {output}")
    return 0


def run_merge(args: argparse.Namespace) -> int:
    merger = CatalogCourseMerger()
    merger.load_directory(args.parsed_dir)
    merged = merger.merge_courses()
    merger.save_to_json(args.output)
    print(f"Merged {len(merged)} courses from {len(merger.catalogs)} catalogs -> {args.output}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = Settings()
    logger.info(f"Running {args.command} command")

    try:
        if args.command == "parse":
            return run_parse(args, settings)
        return run_merge(args)
    except (CatalogError, OSError) as e:
        error = handle_extraction_error(e)
        print(f"Error [{error['code']}]: {error['message']}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
