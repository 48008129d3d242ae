"""CLI for managing the cached portfolio and printing projections.

Usage:
    python -m pathwise.cli import portfolio.json
    python -m pathwise.cli export backup.json
    python -m pathwise.cli summary --as-of 2030-01-01
    python -m pathwise.cli schedule <loan-id>
    python -m pathwise.cli clear
"""

import argparse
import logging
import sys
from dataclasses import replace
from datetime import date
from pathlib import Path

from pathwise.config import settings
from pathwise.data.cache import PortfolioCache
from pathwise.data.portfolio_io import (
    PortfolioImportError,
    export_to_json,
    import_from_json,
    merge_data,
)
from pathwise.engine.amortization import (
    generate_amortization_schedule,
    pit_loan,
    with_derived_fields,
    yearly_loan_summary,
)
from pathwise.engine.growth import pit_investment
from pathwise.models.loan import Loan

logger = logging.getLogger(__name__)


def _dollar(v) -> str:
    return f"${float(v):,.2f}"


def _header(title: str) -> None:
    print(f"\n{'=' * 60}")
    print(f"  {title}")
    print(f"{'=' * 60}")


def _load(cache: PortfolioCache):
    cached = cache.load()
    return cached if cached else ([], [])


def _with_schedule(loan: Loan) -> Loan:
    """Fill in a missing payment or schedule, keeping an explicit payment."""
    if loan.monthly_payment is None:
        return with_derived_fields(loan)
    if not loan.amortization_schedule:
        return replace(loan, amortization_schedule=generate_amortization_schedule(loan))
    return loan


def cmd_import(cache: PortfolioCache, args) -> int:
    try:
        loans, investments = import_from_json(Path(args.file).read_text())
    except PortfolioImportError as e:
        print(f"Import failed: {e}", file=sys.stderr)
        return 1

    existing_loans, existing_investments = _load(cache)
    merged_loans, loan_result = merge_data(existing_loans, [_with_schedule(loan) for loan in loans])
    merged_investments, inv_result = merge_data(existing_investments, investments)
    cache.save(merged_loans, merged_investments)
    logger.info("Merged %s into %s", args.file, cache.db_path)

    print(f"Loans:       {loan_result.added} added, {loan_result.updated} updated")
    print(f"Investments: {inv_result.added} added, {inv_result.updated} updated")
    return 0


def cmd_export(cache: PortfolioCache, args) -> int:
    loans, investments = _load(cache)
    Path(args.file).write_text(export_to_json(loans, investments))
    print(f"Exported {len(loans)} loans and {len(investments)} investments to {args.file}")
    return 0


def cmd_summary(cache: PortfolioCache, args) -> int:
    loans, investments = _load(cache)
    as_of = args.as_of or date.today()

    _header(f"Loans as of {as_of.isoformat()}")
    for loan in loans:
        pit = pit_loan(loan, as_of)
        print(f"  {loan.name} ({loan.provider})")
        print(f"    Terms paid / remaining:  {pit.paid_terms} / {pit.remaining_terms}")
        print(f"    Remaining principal:     {_dollar(pit.remaining_principal)}")
        print(f"    Principal paid:          {_dollar(pit.paid_principal)}")
        print(f"    Interest paid:           {_dollar(pit.paid_interest)}")

    _header(f"Investments as of {as_of.isoformat()}")
    for inv in investments:
        pit = pit_investment(inv, as_of)
        print(f"  {inv.name} ({inv.provider})")
        print(f"    Periods:                 {pit.current_periods}")
        print(f"    Contributions:           {_dollar(pit.total_contributions)}")
        print(f"    Interest earned:         {_dollar(pit.total_interest_earned)}")
        print(f"    Current value:           {_dollar(pit.current_value)}")
        print(f"    Return on contributions: {float(pit.projected_annual_return):.2f}%")
    print()
    return 0


def cmd_schedule(cache: PortfolioCache, args) -> int:
    loans, _ = _load(cache)
    loan = next((item for item in loans if item.id == args.loan_id), None)
    if loan is None:
        print(f"No loan with id {args.loan_id}", file=sys.stderr)
        return 1
    loan = _with_schedule(loan)

    _header(f"Amortization: {loan.name}")
    payment = loan.monthly_payment
    print(f"  Monthly payment: {_dollar(payment) if payment is not None else 'N/A'}")
    print()
    for year in yearly_loan_summary(loan.amortization_schedule):
        print(
            f"  Year {int(year['year']):>3}  principal {_dollar(year['principal']):>14}"
            f"  interest {_dollar(year['interest']):>12}"
            f"  balance {_dollar(year['ending_balance']):>14}"
        )
    print()
    return 0


def cmd_clear(cache: PortfolioCache, args) -> int:
    cache.clear()
    print("Cache cleared")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Pathwise portfolio CLI")
    parser.add_argument("--db", default=settings.cache_db_path, help="SQLite cache path")
    sub = parser.add_subparsers(dest="command", required=True)

    p_import = sub.add_parser("import", help="Merge a portfolio JSON file into the cache")
    p_import.add_argument("file")
    p_import.set_defaults(func=cmd_import)

    p_export = sub.add_parser("export", help="Write the cached portfolio to a JSON file")
    p_export.add_argument("file")
    p_export.set_defaults(func=cmd_export)

    p_summary = sub.add_parser("summary", help="Point-in-time view of every asset")
    p_summary.add_argument("--as-of", type=date.fromisoformat, help="Snapshot date (default: today)")
    p_summary.set_defaults(func=cmd_summary)

    p_schedule = sub.add_parser("schedule", help="Yearly amortization summary of a loan")
    p_schedule.add_argument("loan_id")
    p_schedule.set_defaults(func=cmd_schedule)

    p_clear = sub.add_parser("clear", help="Remove the cached portfolio")
    p_clear.set_defaults(func=cmd_clear)

    args = parser.parse_args(argv)
    logging.basicConfig(level=settings.log_level)
    return args.func(PortfolioCache(args.db), args)


if __name__ == "__main__":
    sys.exit(main())
