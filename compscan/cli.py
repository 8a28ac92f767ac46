"""CLI entrypoint for the compscan command."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from .config import ConfigError, load_config
from .logging import configure_logging
from .models import Report
from .pipeline import ComponentScanner


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from exc
    if number < 1:
        raise argparse.ArgumentTypeError("batch size must be at least 1")
    return number


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="compscan",
        description="Count React components in a project using fast structural heuristics.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the React project (defaults to current directory).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=None,
        help="Show every file with its components and enable debug logging.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the report as JSON instead of a summary.",
    )
    parser.add_argument(
        "--batch-size",
        type=_positive_int,
        default=None,
        help="Number of files read concurrently per batch (default: 50).",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write logs to this file.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for compscan."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    root = Path(args.path)
    try:
        config = load_config(root) if root.is_dir() else None
    except ConfigError as exc:
        parser.exit(1, f"Error: {exc}\n")

    verbose = args.verbose if args.verbose is not None else bool(config and config.verbose)
    batch_size = args.batch_size or (config.batch_size if config else None)

    configure_logging(verbose=verbose, log_file=args.log_file)

    scanner = ComponentScanner(batch_size=batch_size) if batch_size else ComponentScanner()
    try:
        report = scanner.scan(root)
    except (FileNotFoundError, NotADirectoryError) as exc:
        parser.exit(1, f"Error: {exc}\n")

    if args.json:
        print(json.dumps(report.to_dict(), indent=2))
    else:
        print(format_report(report, verbose=verbose))


def format_report(report: Report, *, verbose: bool = False) -> str:
    """Render a report as the human-readable console summary."""
    lines = [
        f"Scan completed in {report.elapsed_ms}ms",
        "",
        "Results:",
        f"   Total Components: {report.total_components}",
        f"   Files with Components: {report.files_with_components}",
    ]

    if verbose and report.findings:
        lines.extend(["", "Components by file:", ""])
        ordered = sorted(report.findings, key=lambda finding: len(finding.names), reverse=True)
        for finding in ordered:
            lines.append(f"   {finding.path}")
            lines.append(f"   └─ {', '.join(finding.names)}")
            lines.append("")

    return "\n".join(lines).rstrip("\n")


if __name__ == "__main__":
    main(sys.argv[1:])
