"""
orders.py — Group transactions into Orders.

Transactions stay in one list (the arena); grouping is an insertion-ordered
map from order key to positions in that list.
"""

from loguru import logger

from etsy_payouts.fields import extract_reserve_amount
from etsy_payouts.models import Kind, Order, OrderStatus, RESERVE_APPLIED

SALE_TITLE_PREFIX = "Payment for Order #"
REFUND_TITLE_PREFIX = "Refund for Order #"
ITEM_FEE_PREFIX = "Transaction fee:"
SHIPPING_FEE_PREFIX = "Transaction fee: Shipping"
UNKNOWN_ITEM = "Unknown Item"


def order_key(txn):
    """Key that ties a transaction to its order, or None if it has none."""
    if txn.order_number:
        return txn.order_number
    if txn.kind == Kind.SALE:
        return txn.title.replace(SALE_TITLE_PREFIX, "")
    if txn.kind == Kind.REFUND:
        return txn.title.replace(REFUND_TITLE_PREFIX, "")
    return None


def index_by_order_key(transactions) -> dict[str, list[int]]:
    """order key → positions in ``transactions``, in first-seen order."""
    index: dict[str, list[int]] = {}
    for pos, txn in enumerate(transactions):
        key = order_key(txn)
        if key is not None:
            index.setdefault(key, []).append(pos)
    return index


def _item_title(txns):
    for t in txns:
        if (t.kind == Kind.FEE and ITEM_FEE_PREFIX in t.title
                and SHIPPING_FEE_PREFIX not in t.title):
            return t.title.replace(ITEM_FEE_PREFIX, "").strip()
    return UNKNOWN_ITEM


def build_order(order_number, txns):
    """Fold one group of transactions into an Order; None if there's no Sale."""
    sale = next((t for t in txns if t.kind == Kind.SALE), None)
    if sale is None:
        return None

    fees = sum(t.net for t in txns if t.kind in (Kind.FEE, Kind.BUYER_FEE))
    taxes = sum(t.fees for t in txns if t.kind == Kind.TAX)
    refund = next((t for t in txns if t.kind == Kind.REFUND), None)

    in_reserve = sale.reserve_status == RESERVE_APPLIED
    reserve_amount = extract_reserve_amount(sale.info) if in_reserve else None

    if in_reserve:
        status = OrderStatus.RESERVE
    elif refund is not None:
        status = OrderStatus.REFUNDED
    else:
        status = OrderStatus.UNRESOLVED

    return Order(
        order_number=order_number,
        date=sale.date,
        item_title=_item_title(txns),
        sale_amount=sale.amount,
        total_fees=fees,
        total_taxes=taxes,
        net_amount=sale.net + fees + taxes + (refund.net if refund else 0.0),
        transactions=tuple(txns),
        availability_date=sale.availability_date,
        status=status,
        reserve_amount=reserve_amount,
    )


def group_transactions_by_order(transactions) -> list[Order]:
    """All Orders in the transaction set, most recent first.

    Groups without a Sale (a stray fee whose sale is in another file) are
    dropped; their transactions end up as misc transactions.
    """
    orders = []
    for key, positions in index_by_order_key(transactions).items():
        order = build_order(key, [transactions[p] for p in positions])
        if order is None:
            logger.debug("Order {}: no Sale in {} transaction(s), skipped", key, len(positions))
            continue
        orders.append(order)
    return sorted(orders, key=lambda o: o.date, reverse=True)
