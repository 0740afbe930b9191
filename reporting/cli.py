#!/usr/bin/env python3
"""
CLI for generating listing valuation reports.

Usage:
    python -m reporting.cli report [listing_file] [--output PATH] [--city CITY]
    python -m reporting.cli sample [--output PATH]
    python -m reporting.cli serve [--host HOST] [--port PORT]

Examples:
    # Report on a listing file (falls back to sample data if unreadable)
    python -m reporting.cli report realestates.txt

    # Report on the built-in sample data, with a PDF copy
    python -m reporting.cli sample --pdf reports/sample.pdf
"""

import argparse
import logging
import sys

import uvicorn

from core.diagnostics import DiagnosticsLog
from sources import FileListingSource, SampleListingSource, load_from_source
from utils.config import Config, configure_logging

from .aggregator import build_report
from .pdf_generator import generate_pdf
from .writer import emit_report


logger = logging.getLogger(__name__)


def _apply_discount(result, percentage: int) -> None:
    """Discount every loaded listing; invalid percentages are logged and skipped."""
    for prop in result.registry:
        prop.make_discount(percentage, diagnostics=result.diagnostics)


def _run(args, source) -> int:
    diagnostics = DiagnosticsLog()
    result = load_from_source(source, diagnostics=diagnostics)

    print(f"Loaded {len(result.registry)} properties from {result.source_name}.")
    if result.fallback_used:
        print("Listing file unavailable, sample data used instead.")

    if args.discount is not None:
        _apply_discount(result, args.discount)

    document = build_report(
        result.registry.snapshot(), city=args.city, diagnostics=result.diagnostics
    )

    print("\n=== REPORT ===\n")
    try:
        output_path = emit_report(document, args.output)
    except OSError as e:
        print(f"Error: Could not write report: {e}", file=sys.stderr)
        return 1
    print(f"\nReport written to {output_path}")

    if args.pdf:
        try:
            pdf_result = generate_pdf(document, args.pdf)
        except OSError as e:
            print(f"Error: Could not write PDF: {e}", file=sys.stderr)
            return 1
        print(f"PDF report written to {pdf_result.path}")

    if len(diagnostics):
        breakdown = ", ".join(
            f"{code}={count}" for code, count in sorted(diagnostics.counts_by_code().items())
        )
        print(f"{len(diagnostics)} diagnostics recorded: {breakdown}")
    return 0


def cmd_report(args):
    """Report on a listing file."""
    return _run(args, FileListingSource(args.listing_file))


def cmd_sample(args):
    """Report on the built-in sample listings."""
    return _run(args, SampleListingSource())


def cmd_serve(args):
    """Serve the report API."""
    print(f"Starting valuation report server on http://{args.host}:{args.port}")
    print("Press Ctrl+C to stop")

    uvicorn.run(
        "web.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=args.log_level,
    )
    return 0


def _add_common_options(parser: argparse.ArgumentParser, config: Config) -> None:
    parser.add_argument(
        "--output",
        default=config.output_file,
        help=f"Report file (default: {config.output_file})",
    )
    parser.add_argument(
        "--city",
        default=config.report_city,
        help=f"City for the most-expensive-property line (default: {config.report_city})",
    )
    parser.add_argument(
        "--pdf",
        default=None,
        help="Also export the report as PDF to this path",
    )
    parser.add_argument(
        "--discount",
        type=int,
        default=None,
        help="Discount percentage (0-100) applied to every listing before reporting",
    )


def main(argv=None):
    """Main CLI entry point."""
    config = Config.load()
    configure_logging(config)
    logger.debug("Configuration: %s", config.to_dict())

    parser = argparse.ArgumentParser(
        description="Real Estate Management System - listing valuation report",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python -m reporting.cli report realestates.txt
    python -m reporting.cli sample --output sample_report.txt
    python -m reporting.cli serve --port 8000

Listing format:
    REALESTATE#<city>#<pricePerSqm>#<areaSqm>#<rooms>#<GENRE>
    PANEL#<city>#<pricePerSqm>#<areaSqm>#<rooms>#<GENRE>#<floor>#<yes|no>
        """,
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # Report command
    report_parser = subparsers.add_parser(
        "report",
        help="Generate a report from a listing file",
    )
    report_parser.add_argument(
        "listing_file",
        nargs="?",
        default=config.input_file,
        help=f"Path to '#'-delimited listing file (default: {config.input_file})",
    )
    _add_common_options(report_parser, config)
    report_parser.set_defaults(func=cmd_report)

    # Sample command
    sample_parser = subparsers.add_parser(
        "sample",
        help="Generate a report from the built-in sample listings",
    )
    _add_common_options(sample_parser, config)
    sample_parser.set_defaults(func=cmd_sample)

    # Serve command
    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the report web API",
    )
    serve_parser.add_argument("--host", default=config.host, help=f"Bind address (default: {config.host})")
    serve_parser.add_argument("--port", type=int, default=config.port, help=f"Port (default: {config.port})")
    serve_parser.add_argument(
        "--reload",
        action="store_true",
        default=config.debug,
        help="Reload on code changes (default: on when DEBUG=true)",
    )
    serve_parser.set_defaults(func=cmd_serve, log_level=config.log_level.lower())

    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
