"""
fields.py — Raw statement text → typed values.

Every pattern that depends on the wording of Etsy's CSV export lives here,
so a change in the export format only touches this module.
"""

import re
from datetime import date, datetime

from loguru import logger

# ── Export wording ──────────────────────────────────────────────────────────
ORDER_INFO_RE = re.compile(r"Order #(\d+)")
ORDER_TITLE_RE = re.compile(r"Order #(\d+)")
LISTING_INFO_RE = re.compile(r"Listing #(\d+)")
LISTING_TITLE_RE = re.compile(r"Listing#(\d+)")

FUNDS_AVAILABLE_PHRASE = "Funds will be available on"
RESERVE_PHRASE = "placed in reserve until "
FUNDS_AVAILABLE_RE = re.compile(r"Funds will be available on (.+)")
RESERVE_UNTIL_RE = re.compile(r"placed in reserve until (.+)")
RESERVE_AMOUNT_RE = re.compile(r"(.+) placed in reserve until ")
DEPOSIT_AMOUNT_RE = re.compile(r"\$[\d,]+\.\d+")

# Leading number, the way a lenient float parser reads "50.99 placed in ..."
_LEADING_NUMBER_RE = re.compile(r"\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)")

DATE_FORMATS = ("%B %d, %Y", "%b %d, %Y")


def parse_amount(text) -> float:
    """'$1,234.56' → 1234.56. Empty, '--' and garbage all come back as 0.0."""
    if text is None:
        return 0.0
    text = str(text)
    if text == "" or text == "--":
        return 0.0
    cleaned = text.replace("$", "").replace(",", "")
    m = _LEADING_NUMBER_RE.match(cleaned)
    if not m:
        logger.debug("Unparseable amount {!r}, using 0", text)
        return 0.0
    try:
        return float(m.group(1))
    except ValueError:
        return 0.0


def parse_date(text, fallback=None) -> date:
    """Parse 'March 23, 2026' / 'Mar 23, 2026', then ISO. Never raises.

    Empty or unreadable input gives ``fallback`` (today's date when not
    given) so downstream code always has a real date to compare.
    """
    if fallback is None:
        fallback = date.today()
    if not text:
        return fallback
    text = str(text).strip()
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        logger.debug("Unparseable date {!r}, using {}", text, fallback)
        return fallback


def _search(pattern, text):
    m = pattern.search(text or "")
    return m.group(1) if m else None


def extract_order_number(row: dict):
    """Order number from the Info column, falling back to Title."""
    return (_search(ORDER_INFO_RE, row.get("Info"))
            or _search(ORDER_TITLE_RE, row.get("Title")))


def extract_listing_number(row: dict):
    """Listing number: 'Listing #123' in Info, 'Listing#123' in Title."""
    return (_search(LISTING_INFO_RE, row.get("Info"))
            or _search(LISTING_TITLE_RE, row.get("Title")))


def extract_availability_date(info, fallback=None):
    """Date funds become available, or None if Info doesn't say."""
    if not info:
        return None
    m = None
    if FUNDS_AVAILABLE_PHRASE in info:
        m = FUNDS_AVAILABLE_RE.search(info)
    elif RESERVE_PHRASE in info:
        m = RESERVE_UNTIL_RE.search(info)
    if m:
        return parse_date(m.group(1), fallback)
    return None


def extract_reserve_amount(info):
    """Amount held in reserve, e.g. '$50.99 placed in reserve until Mar 23, 2026'.

    The whole match (amount plus phrase) goes to parse_amount, which reads
    the leading number and ignores the rest.
    """
    m = RESERVE_AMOUNT_RE.search(info or "")
    if not m:
        return None
    return parse_amount(m.group(0))


def extract_deposit_amount(title) -> float:
    """'Deposit of $42.00 sent to ...' → 42.0"""
    m = DEPOSIT_AMOUNT_RE.search(title or "")
    return parse_amount(m.group(0) if m else "0")
