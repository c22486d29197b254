"""
pipeline.py — Statement texts in, reconciled StatementResult out.

raw rows → Transactions → Orders → status-resolved Orders → Summary.
Each run starts from scratch; nothing is carried over between calls.
"""

import os
from datetime import date

from loguru import logger

from etsy_payouts.classifier import parse_statement
from etsy_payouts.models import StatementError, StatementResult
from etsy_payouts.orders import group_transactions_by_order
from etsy_payouts.payouts import get_deposits, determine_payout_status
from etsy_payouts.summary import find_misc_transactions, calculate_summary


def process_statements(csv_texts, today=None) -> StatementResult:
    """Reconcile a full set of statement texts.

    Raises StatementError (tagged with the statement's position) if any
    statement can't be read; no partial result is returned in that case.

    ``today`` (default: the current date) drives payout status and also
    stands in for any date that can't be read.
    """
    if today is None:
        today = date.today()
    csv_texts = list(csv_texts)
    all_transactions = []
    for n, text in enumerate(csv_texts, start=1):
        try:
            all_transactions.extend(parse_statement(text, today))
        except StatementError as e:
            raise StatementError(f"statement {n}: {e}") from e

    orders = group_transactions_by_order(all_transactions)
    deposits = get_deposits(all_transactions)
    misc = find_misc_transactions(all_transactions, orders)
    resolved = determine_payout_status(orders, deposits, today=today)
    summary = calculate_summary(resolved, deposits, misc)

    logger.info(
        "Processed {} statement(s): {} transactions, {} orders, {} deposits, {} misc",
        len(csv_texts), len(all_transactions), len(resolved), len(deposits), len(misc),
    )
    return StatementResult(
        orders=resolved,
        deposits=deposits,
        summary=summary,
        all_transactions=all_transactions,
        misc_transactions=misc,
    )


def collect_statement_paths(paths) -> list:
    """Expand directories to their *.csv files (sorted); keep files as given."""
    found = []
    for p in paths:
        if os.path.isdir(p):
            found.extend(sorted(
                os.path.join(p, f) for f in os.listdir(p) if f.lower().endswith(".csv")
            ))
        elif os.path.isfile(p):
            found.append(p)
        else:
            logger.warning("Skipping {}: not a file or directory", p)
    return found


def process_statement_files(paths, today=None) -> StatementResult:
    """Read statement files from disk and reconcile them together."""
    texts = []
    for path in paths:
        try:
            with open(path, "r", encoding="utf-8-sig") as f:
                texts.append(f.read())
        except UnicodeDecodeError as e:
            raise StatementError(f"{os.path.basename(path)} is not valid UTF-8 text") from e
    return process_statements(texts, today=today)
