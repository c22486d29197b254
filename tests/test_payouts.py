"""Tests for deposits and payout status resolution."""

from __future__ import annotations

from datetime import date

import pytest

from etsy_payouts.models import Deposit, Kind, Order, OrderStatus, Transaction
from etsy_payouts.payouts import (
    determine_payout_status,
    find_payout,
    get_deposits,
    resolve_order_status,
)

TODAY = date(2026, 3, 10)


def _order(number: str = "1", *, day: date = date(2026, 3, 1),
           availability_date: date | None = None,
           status: OrderStatus = OrderStatus.UNRESOLVED) -> Order:
    return Order(
        order_number=number, date=day, item_title="Mug", sale_amount=10.0,
        total_fees=-1.0, total_taxes=0.0, net_amount=9.0,
        availability_date=availability_date, status=status,
    )


def _deposit(day: date, amount: float = 100.0) -> Deposit:
    return Deposit(date=day, amount=amount, description=f"Deposit of ${amount:,.2f}")


class TestGetDeposits:
    def test_only_deposits_newest_first(self) -> None:
        txns = [
            Transaction(date=date(2026, 3, 1), kind=Kind.DEPOSIT, title="Deposit of $10.00 sent",
                        info="", currency="USD", amount=0.0, fees=0.0, net=0.0),
            Transaction(date=date(2026, 3, 2), kind=Kind.FEE, title="Listing fee",
                        info="", currency="USD", amount=0.0, fees=-0.2, net=-0.2),
            Transaction(date=date(2026, 3, 8), kind=Kind.DEPOSIT, title="Deposit of $1,250.50 sent",
                        info="", currency="USD", amount=0.0, fees=0.0, net=0.0),
        ]

        deposits = get_deposits(txns)

        assert [d.date for d in deposits] == [date(2026, 3, 8), date(2026, 3, 1)]
        assert deposits[0].amount == pytest.approx(1250.50)
        assert deposits[0].description == "Deposit of $1,250.50 sent"


class TestFindPayout:
    def test_earliest_on_or_after(self) -> None:
        deposits = [_deposit(date(2026, 3, 1)), _deposit(date(2026, 3, 5)), _deposit(date(2026, 3, 9))]

        assert find_payout(deposits, date(2026, 3, 5)).date == date(2026, 3, 5)
        assert find_payout(deposits, date(2026, 3, 6)).date == date(2026, 3, 9)
        assert find_payout(deposits, date(2026, 3, 10)) is None


class TestResolveOrderStatus:
    def test_future_availability_is_pending(self) -> None:
        order = _order(availability_date=date(2026, 3, 11))

        resolved = resolve_order_status(order, [_deposit(date(2026, 3, 12))], TODAY)

        assert resolved.status is OrderStatus.PENDING
        assert resolved.is_paid_out is False
        assert resolved.paid_out_date is None

    def test_availability_today_is_not_pending(self) -> None:
        order = _order(availability_date=TODAY)

        resolved = resolve_order_status(order, [], TODAY)

        assert resolved.status is OrderStatus.CURRENT_BALANCE

    def test_paid_by_deposit_after_availability(self) -> None:
        order = _order(availability_date=date(2026, 3, 3))
        deposits = [_deposit(date(2026, 3, 2)), _deposit(date(2026, 3, 4)), _deposit(date(2026, 3, 8))]

        resolved = resolve_order_status(order, deposits, TODAY)

        assert resolved.status is OrderStatus.PAID
        assert resolved.is_paid_out is True
        assert resolved.paid_out_date == date(2026, 3, 4)

    def test_deposit_same_day_as_availability_counts(self) -> None:
        order = _order(availability_date=date(2026, 3, 4))

        resolved = resolve_order_status(order, [_deposit(date(2026, 3, 4))], TODAY)

        assert resolved.paid_out_date == date(2026, 3, 4)

    def test_available_without_deposit_is_current_balance(self) -> None:
        order = _order(availability_date=date(2026, 3, 3))

        resolved = resolve_order_status(order, [_deposit(date(2026, 3, 1))], TODAY)

        assert resolved.status is OrderStatus.CURRENT_BALANCE
        assert resolved.is_paid_out is False

    def test_no_availability_uses_order_date(self) -> None:
        order = _order(day=date(2026, 3, 2))

        paid = resolve_order_status(order, [_deposit(date(2026, 3, 2))], TODAY)
        unpaid = resolve_order_status(order, [_deposit(date(2026, 3, 1))], TODAY)

        assert paid.status is OrderStatus.PAID
        assert paid.paid_out_date == date(2026, 3, 2)
        assert unpaid.status is OrderStatus.CURRENT_BALANCE

    @pytest.mark.parametrize("status", [OrderStatus.RESERVE, OrderStatus.REFUNDED])
    def test_settled_orders_untouched(self, status: OrderStatus) -> None:
        order = _order(availability_date=date(2026, 3, 3), status=status)

        assert resolve_order_status(order, [_deposit(date(2026, 3, 4))], TODAY) is order


class TestDeterminePayoutStatus:
    def test_does_not_mutate_input(self) -> None:
        orders = [_order("1"), _order("2", availability_date=date(2026, 4, 1))]
        deposits = [_deposit(date(2026, 3, 5))]

        resolved = determine_payout_status(orders, deposits, today=TODAY)

        assert [o.status for o in orders] == [OrderStatus.UNRESOLVED, OrderStatus.UNRESOLVED]
        assert [o.status for o in resolved] == [OrderStatus.PAID, OrderStatus.PENDING]

    def test_unsorted_deposits_are_handled(self) -> None:
        deposits = [_deposit(date(2026, 3, 9)), _deposit(date(2026, 3, 4))]

        (resolved,) = determine_payout_status([_order()], deposits, today=TODAY)

        assert resolved.paid_out_date == date(2026, 3, 4)

    def test_several_orders_can_share_a_deposit(self) -> None:
        orders = [_order("1", day=date(2026, 3, 1)), _order("2", day=date(2026, 3, 2))]

        resolved = determine_payout_status(orders, [_deposit(date(2026, 3, 5))], today=TODAY)

        assert {o.paid_out_date for o in resolved} == {date(2026, 3, 5)}
