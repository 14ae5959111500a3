#!/usr/bin/env python3
"""Command line entry point: read Snyk JSON, write SARIF."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, TextIO

from snyk_to_sarif.config import Settings, load_settings
from snyk_to_sarif.errors import InvalidInputError, ReportShapeError
from snyk_to_sarif.reporters.count import count_levels
from snyk_to_sarif.reporters.sarif import convert


def report_error(message: str, error: Exception | None = None, verbose: bool = False) -> None:
    print(message, file=sys.stderr)
    if verbose and error is not None:
        print(f"  {type(error).__name__}: {error}", file=sys.stderr)


def read_input(settings: Settings, stdin: TextIO) -> Any:
    try:
        if settings.input_path:
            p = Path(settings.input_path)
            if not p.is_file():
                raise FileNotFoundError(settings.input_path)
            text = p.read_text(encoding="utf-8")
        else:
            if stdin.isatty():
                raise InvalidInputError("No data or input file provided")
            text = stdin.read()
            if not text.strip():
                raise InvalidInputError("No data or input file provided")
    except UnicodeDecodeError as e:
        raise InvalidInputError("The input data does not appear to be valid") from e

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidInputError("The input data does not appear to be valid") from e


def write_output(sarif: dict, settings: Settings) -> None:
    payload = json.dumps(sarif, indent=2)
    if settings.output_path:
        Path(settings.output_path).write_text(payload + "\n", encoding="utf-8")
    else:
        print(payload)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snyk-to-sarif",
        description="Convert Snyk JSON output (open source or IaC) to SARIF 2.1.0.",
    )
    parser.add_argument("-i", "--input",   help="Snyk JSON file to convert (default: piped stdin)")
    parser.add_argument("-o", "--output",  help="SARIF file to write (default: stdout)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="show error details and a conversion summary")
    return parser


def run(argv: list[str] | None = None, stdin: TextIO | None = None) -> int:
    args     = build_parser().parse_args(argv)
    settings = load_settings(args)
    stdin    = stdin if stdin is not None else sys.stdin

    try:
        data = read_input(settings, stdin)
    except FileNotFoundError as e:
        report_error("Provided input file does not exist", e, settings.verbose)
        return 1
    except OSError as e:
        report_error(f"Could not read input file {settings.input_path}", e, settings.verbose)
        return 1
    except InvalidInputError as e:
        report_error(str(e), e.__cause__ or e, settings.verbose)
        return 1

    try:
        sarif = convert(data)
    except ReportShapeError as e:
        report_error(f"The input data is not a recognised Snyk report: {e}", e, settings.verbose)
        return 1

    try:
        write_output(sarif, settings)
    except OSError as e:
        report_error(f"Could not write SARIF output to {settings.output_path}", e, settings.verbose)
        return 1

    if settings.verbose:
        counts = count_levels(sarif)
        dest   = settings.output_path or "stdout"
        print(
            f"SARIF written to {dest} ({counts['total']} results, {counts['rules']} rules)",
            file=sys.stderr,
        )
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
