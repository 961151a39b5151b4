"""
CLI entry point for Copilot Money expense reports.
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Optional

from copilot_expenses.core.exceptions import ExpenseReportError
from copilot_expenses.core.overrides import load_overrides
from copilot_expenses.core.report import build_report, render_report, write_report
from copilot_expenses.models.options import ProcessExpensesOptions
from copilot_expenses.server import run_server
from copilot_expenses.utils.date_utils import parse_period


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    parser = argparse.ArgumentParser(
        prog="copilot-expenses",
        description="Summarize Copilot Money spending by category",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    report = subparsers.add_parser(
        "report", parents=[common], help="Write a category spending report"
    )
    report.add_argument("csv_file_path", type=Path, help="Transactions CSV exported from Copilot Money")
    window = report.add_mutually_exclusive_group(required=True)
    window.add_argument(
        "--period",
        help="Period shorthand: this_month, last_month, last_7_days, "
        "last_30_days, last_90_days, ytd, this_year, last_year",
    )
    window.add_argument("--start-date", help="First day to include (YYYY-MM-DD)")
    report.add_argument("--end-date", help="Last day to include (YYYY-MM-DD)")
    report.add_argument(
        "--overrides",
        type=Path,
        help="JSON file of extra parent categories, e.g. mortgage",
    )
    report.add_argument(
        "--output",
        "-o",
        type=Path,
        default=Path("expenses.json"),
        help="Where to write the report (default: expenses.json)",
    )

    serve = subparsers.add_parser("serve", parents=[common], help="Run the MCP server on stdio")
    serve.add_argument("--ledger", type=Path, required=True, help="Transactions CSV to serve")

    return parser


def run_report(args: argparse.Namespace) -> None:
    """Build the report, write it and echo it on stdout."""
    if args.period:
        start, end = parse_period(args.period)
        start_date, end_date = start.isoformat(), end.isoformat()
    else:
        if not args.end_date:
            raise ExpenseReportError("--end-date is required with --start-date")
        start_date, end_date = args.start_date, args.end_date

    options = ProcessExpensesOptions(
        csv_file_path=args.csv_file_path,
        start_date=start_date,
        end_date=end_date,
    )
    overrides = load_overrides(args.overrides) if args.overrides else None

    totals = build_report(options, overrides)
    write_report(totals, args.output)
    print(render_report(totals))


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the CLI."""
    args = build_parser().parse_args(argv)

    # Configure logging
    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,  # stdout carries the report / MCP protocol
    )

    if args.command == "serve":
        try:
            asyncio.run(run_server(args.ledger))
        except KeyboardInterrupt:
            logging.info("Server stopped by user")
            sys.exit(0)
        except Exception as e:
            logging.exception(f"Server error: {e}")
            sys.exit(1)
        return

    try:
        run_report(args)
    except (ExpenseReportError, ValueError) as e:
        logging.error(f"Error processing expenses: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
