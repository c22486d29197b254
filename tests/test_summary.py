"""Tests for misc transactions and the financial summary."""

from __future__ import annotations

from datetime import date

import pytest

from etsy_payouts.models import Deposit, Kind, Order, OrderStatus, Summary, Transaction
from etsy_payouts.summary import calculate_summary, find_misc_transactions


def _txn(kind: str, title: str, fees: float = 0.0) -> Transaction:
    return Transaction(date=date(2026, 3, 1), kind=kind, title=title, info="",
                       currency="USD", amount=0.0, fees=fees, net=fees)


def _order(number: str, status: OrderStatus, *, sale: float, fees: float, taxes: float,
           net: float, reserve: float | None = None) -> Order:
    return Order(order_number=number, date=date(2026, 3, 1), item_title="Mug",
                 sale_amount=sale, total_fees=fees, total_taxes=taxes, net_amount=net,
                 status=status, reserve_amount=reserve)


class TestFindMiscTransactions:
    def test_excludes_order_members_and_deposits(self) -> None:
        sale = _txn(Kind.SALE, "Payment for Order #1")
        listing = _txn(Kind.FEE, "Listing fee", fees=-0.2)
        deposit = _txn(Kind.DEPOSIT, "Deposit of $5.00")
        order = Order(order_number="1", date=date(2026, 3, 1), item_title="Mug",
                      sale_amount=0.0, total_fees=0.0, total_taxes=0.0, net_amount=0.0,
                      transactions=(sale,))

        assert find_misc_transactions([sale, listing, deposit], [order]) == [listing]

    def test_identical_lines_are_distinct(self) -> None:
        a = _txn(Kind.FEE, "Listing fee", fees=-0.2)
        b = _txn(Kind.FEE, "Listing fee", fees=-0.2)
        order = Order(order_number="1", date=date(2026, 3, 1), item_title="Mug",
                      sale_amount=0.0, total_fees=0.0, total_taxes=0.0, net_amount=0.0,
                      transactions=(a,))

        misc = find_misc_transactions([a, b], [order])

        assert len(misc) == 1
        assert misc[0] is b


class TestCalculateSummary:
    def test_all_fields(self) -> None:
        orders = [
            _order("1", OrderStatus.PAID, sale=50.0, fees=-5.0, taxes=-4.0, net=41.0),
            _order("2", OrderStatus.RESERVE, sale=60.0, fees=-4.0, taxes=0.0, net=56.0,
                   reserve=50.0),
            _order("3", OrderStatus.CURRENT_BALANCE, sale=10.0, fees=-1.0, taxes=0.0, net=9.0),
            _order("4", OrderStatus.REFUNDED, sale=20.0, fees=-1.0, taxes=0.0, net=-1.0),
            _order("5", OrderStatus.PENDING, sale=30.0, fees=-2.0, taxes=-1.0, net=27.0),
        ]
        deposits = [Deposit(date=date(2026, 3, 5), amount=42.0, description="d1"),
                    Deposit(date=date(2026, 3, 9), amount=8.0, description="d2")]
        misc = [_txn(Kind.FEE, "Listing fee", fees=-0.2),
                _txn(Kind.TAX, "Tax on fees", fees=-0.05),
                _txn("Marketing", "Etsy Ads", fees=-3.0)]

        s = calculate_summary(orders, deposits, misc)

        assert s.total_sales == pytest.approx(54.0 + 60.0 + 10.0 + 31.0)
        assert s.total_fees == pytest.approx(-13.0 - 0.2)
        assert s.total_taxes == pytest.approx(-5.0 - 0.05)
        assert s.net_revenue == pytest.approx(132.0 - 0.25)
        assert s.total_deposits == pytest.approx(50.0)
        assert s.current_balance == pytest.approx(56.0 + 9.0 - 0.25)
        assert s.reserve_amount == pytest.approx(50.0)
        assert s.available_for_deposit == pytest.approx(s.current_balance - 50.0)
        assert s.orders_count == 5
        assert s.paid_out_orders_count == 1
        assert s.current_balance_orders_count == 2
        assert s.reserve_orders_count == 1

    def test_reserve_without_amount_counts_as_zero(self) -> None:
        orders = [_order("1", OrderStatus.RESERVE, sale=5.0, fees=0.0, taxes=0.0, net=5.0)]

        s = calculate_summary(orders, [], [])

        assert s.reserve_amount == 0
        assert s.available_for_deposit == pytest.approx(5.0)

    def test_empty(self) -> None:
        assert calculate_summary([], [], []) == Summary()
