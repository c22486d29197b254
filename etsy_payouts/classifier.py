"""
classifier.py — Statement CSV → list of Transactions.

Tokenizing is pandas' job; this module checks the header, turns each row
into a Transaction and attaches the order / listing / availability data
pulled out of the free-text columns.
"""

import io

import pandas as pd
from loguru import logger

from etsy_payouts.fields import (
    parse_amount,
    parse_date,
    extract_order_number,
    extract_listing_number,
    extract_availability_date,
)
from etsy_payouts.models import Transaction, StatementError

REQUIRED_COLUMNS = {
    "Date", "Type", "Title", "Info", "Currency", "Amount",
    "Fees & Taxes", "Net", "Tax Details",
}
OPTIONAL_COLUMNS = ("Status", "Availability Date")


def classify_row(row: dict, today=None) -> Transaction:
    """Build a Transaction from one header-keyed row of strings.

    ``today`` stands in for any date that can't be read.
    """
    info = row.get("Info", "") or ""
    availability_date = extract_availability_date(info, today)
    if availability_date is None and row.get("Availability Date"):
        availability_date = parse_date(row["Availability Date"], today)

    return Transaction(
        date=parse_date(row.get("Date", ""), today),
        kind=row.get("Type", ""),
        title=row.get("Title", "") or "",
        info=info,
        currency=row.get("Currency", "") or "",
        amount=parse_amount(row.get("Amount")),
        fees=parse_amount(row.get("Fees & Taxes")),
        net=parse_amount(row.get("Net")),
        tax_details=row.get("Tax Details") or None,
        reserve_status=row.get("Status") or None,
        availability_date=availability_date,
        order_number=extract_order_number(row),
        listing_number=extract_listing_number(row),
    )


def read_statement(csv_text: str) -> pd.DataFrame:
    """Tokenize one statement into an all-string DataFrame.

    Raises StatementError when the text isn't a CSV or lacks a required column.
    """
    if csv_text is None or not str(csv_text).strip():
        raise StatementError("Statement is empty")
    try:
        df = pd.read_csv(
            io.StringIO(str(csv_text).lstrip("\ufeff")),
            dtype=str,
            keep_default_na=False,
            index_col=False,
            skip_blank_lines=True,
        )
    except (pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        raise StatementError(f"Could not parse CSV: {e}") from e

    df.columns = [str(c).strip().lstrip("\ufeff") for c in df.columns]
    missing = REQUIRED_COLUMNS - set(df.columns)
    if missing:
        raise StatementError(f"Missing columns: {', '.join(sorted(missing))}")

    for col in OPTIONAL_COLUMNS:
        if col not in df.columns:
            df[col] = ""
    return df.fillna("")


def parse_statement(csv_text: str, today=None) -> list:
    """One statement's text → Transactions in file order."""
    df = read_statement(csv_text)
    transactions = [classify_row(row, today) for row in df.to_dict("records")]
    logger.debug("Parsed {} rows from statement", len(transactions))
    return transactions


def validate_statement_csv(decoded_bytes):
    """Check an uploaded file without raising. Returns (ok, message, row_count)."""
    try:
        text = decoded_bytes.decode("utf-8-sig")
    except UnicodeDecodeError:
        return False, "File is not valid UTF-8 text", 0
    try:
        df = read_statement(text)
    except StatementError as e:
        return False, str(e), 0
    return True, f"{len(df)} rows", len(df)
