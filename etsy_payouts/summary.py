"""Financial summary over resolved orders, deposits and misc transactions."""

from etsy_payouts.models import Kind, OrderStatus, Summary


def find_misc_transactions(transactions, orders) -> list:
    """Transactions that belong to no order and aren't deposits.

    Membership is by identity: two identical statement lines are still two
    separate transactions.
    """
    claimed = {id(t) for o in orders for t in o.transactions}
    return [t for t in transactions
            if id(t) not in claimed and t.kind != Kind.DEPOSIT]


def calculate_summary(orders, deposits, misc_transactions) -> Summary:
    misc_fees = sum(t.fees for t in misc_transactions if t.kind == Kind.FEE)
    misc_taxes = sum(t.fees for t in misc_transactions if t.kind == Kind.TAX)
    misc_total = misc_fees + misc_taxes

    paid = [o for o in orders if o.status is OrderStatus.PAID]
    in_balance = [o for o in orders
                  if o.status in (OrderStatus.CURRENT_BALANCE, OrderStatus.RESERVE)]
    in_reserve = [o for o in orders if o.status is OrderStatus.RESERVE]

    current_balance = sum(o.net_amount for o in in_balance) + misc_total
    reserve_amount = sum(o.reserve_amount or 0.0 for o in in_reserve)

    return Summary(
        total_sales=sum(o.sale_amount - o.total_taxes for o in orders
                        if o.status is not OrderStatus.REFUNDED),
        total_fees=sum(o.total_fees for o in orders) + misc_fees,
        total_taxes=sum(o.total_taxes for o in orders) + misc_taxes,
        net_revenue=sum(o.net_amount for o in orders) + misc_total,
        total_deposits=sum(d.amount for d in deposits),
        current_balance=current_balance,
        reserve_amount=reserve_amount,
        available_for_deposit=current_balance - reserve_amount,
        orders_count=len(orders),
        paid_out_orders_count=len(paid),
        current_balance_orders_count=len(in_balance),
        reserve_orders_count=len(in_reserve),
    )
