"""
payouts.py — Deposits and per-order payout status.

Etsy releases an order's funds to the shop balance on its availability date
and sweeps the balance to the bank in batches. A deposit dated on or after
the release date is taken as the payout for that order, so several orders
can point at the same deposit and deposit totals are not reconciled
against order totals.
"""

from dataclasses import replace
from datetime import date

from etsy_payouts.fields import extract_deposit_amount
from etsy_payouts.models import Deposit, Kind, OrderStatus


def get_deposits(transactions) -> list[Deposit]:
    """Deposit transactions → Deposits, most recent first."""
    deposits = [
        Deposit(date=t.date, amount=extract_deposit_amount(t.title), description=t.title)
        for t in transactions
        if t.kind == Kind.DEPOSIT
    ]
    return sorted(deposits, key=lambda d: d.date, reverse=True)


def find_payout(deposits_ascending, since: date):
    """Earliest deposit dated on or after ``since``, or None."""
    for d in deposits_ascending:
        if d.date >= since:
            return d
    return None


def resolve_order_status(order, deposits_ascending, today: date):
    """Settle an unresolved order; reserve/refunded orders come back untouched."""
    if order.status is not OrderStatus.UNRESOLVED:
        return order

    if order.availability_date is not None:
        if order.availability_date > today:
            return replace(order, is_paid_out=False, status=OrderStatus.PENDING)
        payout = find_payout(deposits_ascending, order.availability_date)
    else:
        payout = find_payout(deposits_ascending, order.date)

    if payout is not None:
        return replace(order, is_paid_out=True, paid_out_date=payout.date,
                       status=OrderStatus.PAID)
    return replace(order, is_paid_out=False, status=OrderStatus.CURRENT_BALANCE)


def determine_payout_status(orders, deposits, today=None) -> list:
    """New list of orders with every unresolved status filled in.

    ``today`` defaults to the current date; pass one in for repeatable runs.
    """
    if today is None:
        today = date.today()
    ascending = sorted(deposits, key=lambda d: d.date)
    return [resolve_order_status(o, ascending, today) for o in orders]
