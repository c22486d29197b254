"""Shared test fixtures."""

from __future__ import annotations

import csv
import io
from datetime import date

import pytest

HEADER = [
    "Date", "Type", "Title", "Info", "Currency", "Amount",
    "Fees & Taxes", "Net", "Tax Details", "Status",
]


def make_row(
    date_text: str,
    kind: str,
    title: str,
    info: str = "",
    amount: str = "--",
    fees: str = "--",
    net: str = "--",
    tax_details: str = "--",
    status: str = "",
) -> dict[str, str]:
    return {
        "Date": date_text,
        "Type": kind,
        "Title": title,
        "Info": info,
        "Currency": "USD",
        "Amount": amount,
        "Fees & Taxes": fees,
        "Net": net,
        "Tax Details": tax_details,
        "Status": status,
    }


def make_csv(rows: list[dict[str, str]], header: list[str] | None = None) -> str:
    """Render rows as statement CSV text, quoting like Etsy's export."""
    buf = io.StringIO()
    writer = csv.DictWriter(buf, fieldnames=header or HEADER, quoting=csv.QUOTE_ALL,
                            extrasaction="ignore")
    writer.writeheader()
    writer.writerows(rows)
    return buf.getvalue()


@pytest.fixture
def today() -> date:
    """Fixed clock well after every date used in the sample statements."""
    return date(2026, 6, 1)


@pytest.fixture
def sample_rows() -> list[dict[str, str]]:
    """Paid order, reserve order, refunded order, stray fee, listing fee, deposit."""
    return [
        make_row("March 5, 2026", "Deposit", "Deposit of $42.00 sent to your bank account",
                 info="", amount="--", net="--"),
        make_row("March 1, 2026", "Sale", "Payment for Order #111",
                 info="Funds will be available on March 1, 2026",
                 amount="$50.00", net="$50.00"),
        make_row("March 1, 2026", "Fee", "Transaction fee: Shipping", info="Order #111",
                 fees="-$0.33", net="-$0.33"),
        make_row("March 1, 2026", "Fee", "Transaction fee: Red Mug", info="Order #111",
                 fees="-$3.25", net="-$3.25"),
        make_row("March 1, 2026", "Fee", "Processing fee", info="Order #111",
                 fees="-$1.80", net="-$1.80"),
        make_row("March 1, 2026", "Tax", "Sales tax paid by buyer", info="Order #111",
                 amount="--", fees="-$4.00", net="--"),
        make_row("March 20, 2026", "Sale", "Payment for Order #222",
                 info="$50.99 placed in reserve until April 1, 2026",
                 amount="$60.00", net="$60.00", status="Reserve Applied"),
        make_row("March 20, 2026", "Fee", "Transaction fee: Blue Vase", info="Order #222",
                 fees="-$3.90", net="-$3.90"),
        make_row("February 10, 2026", "Sale", "Payment for Order #333",
                 amount="$20.00", net="$20.00"),
        make_row("February 12, 2026", "Refund", "Refund for Order #333",
                 amount="-$20.00", net="-$20.00"),
        make_row("February 11, 2026", "Fee", "Transaction fee: Tote", info="Order #999",
                 fees="-$1.30", net="-$1.30"),
        make_row("February 1, 2026", "Fee", "Listing fee", info="Listing #12345",
                 fees="-$0.20", net="-$0.20"),
    ]


@pytest.fixture
def sample_csv(sample_rows: list[dict[str, str]]) -> str:
    return make_csv(sample_rows)
