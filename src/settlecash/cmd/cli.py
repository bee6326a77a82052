"""
Compute settlement-date cash totals for a set of buy/sell instructions and print
the outgoing (buy) and incoming (sell) totals per settlement date. Amounts are
printed with two decimal places, rounded half-up (e.g. ``4344.00``).

This module acts as the CLI orchestrator, delegating responsibilities to SRP modules:
- Trade model and validation: settlecash.model
- Settlement date parsing and weekend rules: settlecash.dates
- Ordering and aggregation: settlecash.reporting.aggregator
- Output writing: settlecash.reporting.report_sink

Usage
-----
    # Sample instructions, chronological ordering, report on stdout
    settlecash

    # Keep the append-or-prepend ordering and write the report to a file
    python -m settlecash.cmd.cli --ordering literal --output ./report.txt -v
"""

from __future__ import annotations

import argparse
import logging
from decimal import ROUND_HALF_UP, Decimal, getcontext
from pathlib import Path

from settlecash.dates import DateFormatError
from settlecash.logging import configure_logging
from settlecash.model import Side, TradeRecord, ValidationError
from settlecash.reporting import CashFlowAggregator, TextReportSink

# Monetary precision and rounding
getcontext().prec = 28
getcontext().rounding = ROUND_HALF_UP

ORDERINGS = ("chronological", "literal")


def sample_trades() -> list[TradeRecord]:
    """Demo instruction set run by the CLI."""
    rows = [
        ("XYZ", Side.BUY, "1.2", "GBP", "1 Mar 2017", "3 Mar 2017", 200, "18.1"),
        ("DEF", Side.BUY, "0.5", "SGP", "27 Feb 2017", "1 Mar 2017", 120, "4.5"),
        ("GHI", Side.BUY, "0.81", "EUR", "27 Feb 2017", "1 Mar 2017", 220, "7"),
        ("ABC", Side.SELL, "0.81", "EUR", "28 Feb 2017", "1 Mar 2017", 80, "11.25"),
        ("FFO", Side.SELL, "0.2", "AED", "2 Mar 2017", "3 Mar 2017", 225, "19"),
    ]
    return [
        TradeRecord(
            counterparty_name=name,
            side=side,
            agreed_rate=Decimal(rate),
            currency_code=ccy,
            instruction_date=instructed,
            raw_settlement_date=settles,
            units=units,
            price_per_unit=Decimal(price),
        )
        for name, side, rate, ccy, instructed, settles, units, price in rows
    ]


def process_trades(args: argparse.Namespace) -> list[str]:
    logger = logging.getLogger(__name__)

    try:
        trades = sample_trades()
        aggregator = CashFlowAggregator(literal_ordering=args.ordering == "literal")
        aggregator.add_many(trades)
        lines = aggregator.render()
    except (ValidationError, DateFormatError) as e:
        logger.error("Cannot build settlement report: %s", e)
        raise SystemExit(2) from e

    logger.info(
        "Aggregated %d trades: %d outgoing, %d incoming (%s ordering)",
        len(trades),
        len(aggregator.outgoing),
        len(aggregator.incoming),
        args.ordering,
    )
    if aggregator.ordering_events:
        logger.info(
            "%d trade(s) placed out of settlement date order",
            len(aggregator.ordering_events),
        )

    out_path = Path(args.output) if args.output else None
    sink = TextReportSink(out_path=out_path)
    written = sink.write(lines)
    if written is not None:
        logger.info("Wrote report to %s", written)
    return lines


def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description=(
            "Settlement-date cash totals for buy/sell instructions. Amounts are "
            "shown with two decimal places, rounded half-up."
        )
    )
    p.add_argument(
        "--ordering",
        type=str,
        default="chronological",
        choices=ORDERINGS,
        help=(
            "How trades are ordered per settlement date: 'chronological' (stable "
            "by date) or 'literal' (append if the date label sorts after the last "
            "one, else prepend)"
        ),
    )
    p.add_argument(
        "--output",
        type=str,
        default=None,
        help="Write the report to this text file instead of stdout",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity: -v (INFO), -vv (DEBUG)",
    )
    return p


def main(argv: list[str] | None = None) -> None:
    parser = build_argparser()
    args = parser.parse_args(argv)

    # Configure logging based on verbosity
    verbosity_map = {
        0: logging.WARNING,  # Default: quiet
        1: logging.INFO,  # -v: informational
        2: logging.DEBUG,  # -vv and above: debug
    }
    level = verbosity_map.get(min(args.verbose, 2), logging.WARNING)
    configure_logging(level=level)

    process_trades(args)


if __name__ == "__main__":
    main()
