"""
XML-Attr-Dedup — Remove duplicate attributes from every XML file of a pack.

Pipeline: pack (_packs_inputs, directory or .zip) → parse → drop repeated
attribute names (first occurrence wins) → re-serialize → pack (_packs_outputs).
Configuration and paths live in settings_user.toml (edit that file to change settings).

Copyright (c) 2025

This work is licensed under the Creative Commons Attribution-ShareAlike 4.0
International License. To view a copy of this license, visit
https://creativecommons.org/licenses/by-sa/4.0/ or see the LICENSE file
included with this distribution.
"""
import argparse
from bootstrap.primary_imports import sys
from bootstrap.dependencies import run_runtime_checks

# --- Bootstrap: fail fast if lxml or a TOML parser is missing ---
run_runtime_checks()

# --- Configuration: paths and entry handling (edit settings_user.toml) ---
from config.runtime_settings import (
    SOURCE_PATH,
    DESTINATION_PATH,
    XML_EXTENSIONS,
    COPY_OTHER_FILES,
    PRINT_WARNINGS,
)

# --- Core pipeline ---
from pack import process_pack

# %%  --- Main execution ---


def _build_arg_parser():
    parser = argparse.ArgumentParser(
        description="Remove duplicate XML attributes from every XML file of a pack."
    )
    parser.add_argument("source", nargs="?", default=SOURCE_PATH,
                        help="Pack directory or .zip archive (default: paths.source)")
    parser.add_argument("-o", "--output", default=DESTINATION_PATH,
                        help="Output directory or .zip path (default: paths.destination)")
    parser.add_argument("--report-only", action="store_true",
                        help="Do not write any output, only report failures")
    parser.add_argument("--no-copy", action="store_true",
                        help="Skip non-XML files instead of copying them unchanged")
    return parser


def _print_report(report, print_warnings=True):
    """Print a summary line, then one line per warning and error."""
    failures = report.failures
    print(f"Filtered {len(report.xml)} XML file(s), passed through {len(report.other)} other file(s).")
    print(f"  Warnings: {len(failures.warnings)}")
    print(f"  Errors: {len(failures.errors)}")
    if print_warnings:
        for warning in failures.warnings:
            print(f"WARNING: {warning}")
    for error in failures.errors:
        print(f"ERROR: {error}")


def main(argv=None):
    args = _build_arg_parser().parse_args(argv)
    destination = None if args.report_only else args.output

    print(f"Processing pack: {args.source}")
    try:
        report = process_pack(
            args.source,
            destination,
            copy_other_files=COPY_OTHER_FILES and not args.no_copy,
            xml_extensions=XML_EXTENSIONS,
        )
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    _print_report(report, print_warnings=PRINT_WARNINGS)
    if destination:
        print(f"Wrote cleaned pack: {destination}")
    return 0 if report.ok else 1


if __name__ == "__main__":
    sys.exit(main())
