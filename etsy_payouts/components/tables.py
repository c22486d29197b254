"""Order, deposit and transaction list builders."""
from dash import html
import dash_bootstrap_components as dbc
from etsy_payouts.theme import *
from etsy_payouts.components.cards import empty_note
from etsy_payouts.formatting import money, short_date, long_date
from etsy_payouts.models import OrderStatus, STATUS_LABELS


def status_badge(status):
    return dbc.Badge(STATUS_LABELS[status], color=STATUS_BADGE[status], className="ms-2")


def _stat(label, value, color=WHITE, bold=False):
    return html.Div([
        html.Div(label, style={"color": GRAY, "fontSize": "11px"}),
        html.Div(value, style={"color": color, "fontFamily": "monospace", "fontSize": "13px",
                               "fontWeight": "bold" if bold else "normal"}),
    ], style={"minWidth": "110px", "marginRight": "16px", "marginBottom": "6px"})


def transaction_row(txn):
    """One statement line: title, info, date and signed net."""
    return html.Div([
        html.Div([
            html.Div(txn.title, style={"color": WHITE, "fontSize": "13px", "fontWeight": "500"}),
            html.Div(txn.info, style={"color": GRAY, "fontSize": "12px"}),
            html.Div(long_date(txn.date), style={"color": DARKGRAY, "fontSize": "11px",
                                                 "marginTop": "2px"}),
        ], style={"flex": "1", "minWidth": "0"}),
        html.Div(money(txn.net), style={"color": RED if txn.net <= 0 else GREEN,
                                        "fontFamily": "monospace", "fontWeight": "bold",
                                        "fontSize": "15px", "whiteSpace": "nowrap"}),
    ], style={"display": "flex", "alignItems": "center", "justifyContent": "space-between",
              "padding": "8px 0", "borderBottom": "1px solid #ffffff10"})


def transactions_list(transactions, empty_text="No misc transactions found in the uploaded statements"):
    if not transactions:
        return empty_note(empty_text)
    return html.Div([transaction_row(t) for t in transactions])


def deposits_list(deposits):
    if not deposits:
        return empty_note("No deposits found in the uploaded statements")
    return html.Div([
        html.Div([
            html.Div([
                html.Div(d.description, style={"color": WHITE, "fontSize": "13px"}),
                html.Div(long_date(d.date), style={"color": DARKGRAY, "fontSize": "11px"}),
            ], style={"flex": "1", "minWidth": "0"}),
            html.Div(money(d.amount), style={"color": GREEN, "fontFamily": "monospace",
                                             "fontWeight": "bold", "fontSize": "16px"}),
        ], style={"display": "flex", "alignItems": "center", "padding": "8px 0",
                  "borderBottom": "1px solid #ffffff10"})
        for d in deposits
    ])


def order_card(order):
    stats = [
        _stat("Order Date", short_date(order.date)),
        _stat("Sale Amount", money(order.sale_amount)),
        _stat("Fees & Taxes", money(order.total_fees + order.total_taxes), color=RED),
    ]
    if order.reserve_amount:
        stats.append(_stat("Reserve Amount", money(order.reserve_amount), color=ORANGE, bold=True))
    stats.append(_stat("Net Amount", money(order.net_amount), color=GREEN, bold=True))

    notes = []
    if order.status is OrderStatus.CURRENT_BALANCE:
        notes.append(dbc.Alert("💵 Currently in your Etsy payment account balance",
                               color="success", className="py-1 px-2 mb-2",
                               style={"fontSize": "12px"}))
    if order.availability_date:
        extra = " (or whenever shipped)" if order.status is OrderStatus.RESERVE else ""
        notes.append(html.Div([
            html.Span("Will be available: ", style={"color": GRAY}),
            html.Span(short_date(order.availability_date), style={"color": WHITE}),
            html.Span(extra, style={"color": DARKGRAY, "fontSize": "11px"}),
        ], style={"fontSize": "12px"}))
    if order.paid_out_date:
        notes.append(html.Div([
            html.Span("Paid out on: ", style={"color": GRAY}),
            html.Span(short_date(order.paid_out_date), style={"color": GREEN}),
        ], style={"fontSize": "12px"}))

    return dbc.Card(dbc.CardBody([
        html.Div([
            html.Div([
                html.Div(order.item_title, style={"color": WHITE, "fontWeight": "600"}),
                html.Div(f"Order #{order.order_number}", style={"color": GRAY, "fontSize": "12px",
                                                                 "fontFamily": "monospace"}),
            ]),
            status_badge(order.status),
        ], style={"display": "flex", "justifyContent": "space-between", "alignItems": "flex-start",
                  "marginBottom": "8px"}),
        html.Div(stats, style={"display": "flex", "flexWrap": "wrap"}),
        *notes,
        dbc.Accordion([
            dbc.AccordionItem(
                transactions_list(order.transactions, empty_text="No transactions"),
                title=f"View Transactions ({len(order.transactions)})",
            ),
        ], start_collapsed=True, flush=True, className="mt-2"),
    ]), className="mb-2", style={"borderLeft": f"3px solid {BLUE}"})


def filter_orders(orders, status_filter="all", sort_by="date"):
    """Orders matching ``status_filter`` ('all' or a status value), sorted newest
    first or by net amount, largest first."""
    if status_filter and status_filter != "all":
        orders = [o for o in orders if o.status.value == status_filter]
    if sort_by == "amount":
        return sorted(orders, key=lambda o: o.net_amount, reverse=True)
    return sorted(orders, key=lambda o: o.date, reverse=True)


def status_counts(orders):
    counts = {"all": len(orders)}
    for o in orders:
        counts[o.status.value] = counts.get(o.status.value, 0) + 1
    return counts


def orders_list(orders):
    if not orders:
        return empty_note("No orders found for this filter")
    return html.Div([order_card(o) for o in orders])
