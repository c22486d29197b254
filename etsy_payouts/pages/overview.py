"""Overview page — upload zone, summary KPIs, orders, deposits, misc transactions."""
from dash import html, dcc
import dash_bootstrap_components as dbc

from etsy_payouts.theme import *
from etsy_payouts.components.cards import section, deposits_chart, empty_note
from etsy_payouts.components.kpi import summary_stats
from etsy_payouts.components.tables import (
    orders_list, deposits_list, transactions_list, filter_orders, status_counts,
)

HIDDEN = {"display": "none"}
SHOWN = {"display": "block"}


def _upload_zone():
    """Multi-file CSV dropzone."""
    return dbc.Card(dbc.CardBody([
        html.Div([
            html.Span("📄", style={"fontSize": "32px", "marginBottom": "8px", "display": "block"}),
            html.H5("Etsy Payment Statements", style={"color": CYAN, "fontWeight": "bold",
                                                      "marginBottom": "4px"}),
            html.P("Drop one or more statement CSVs. Everything is processed in memory.",
                   style={"color": GRAY, "fontSize": "12px", "marginBottom": "12px"}),
        ], style={"textAlign": "center"}),
        dcc.Upload(
            id="upload-statements",
            children=html.Div([
                html.Span("Drag & Drop or "),
                html.A("Click to Browse", style={"color": CYAN, "textDecoration": "underline"}),
            ], style={"color": GRAY, "fontSize": "13px"}),
            style={
                "width": "100%", "borderWidth": "2px", "borderStyle": "dashed",
                "borderColor": f"{CYAN}44", "borderRadius": "10px",
                "textAlign": "center", "padding": "28px",
                "cursor": "pointer",
            },
            accept=".csv,text/csv",
            multiple=True,
            className="upload-zone",
        ),
    ]), style={"borderTop": f"3px solid {CYAN}"}, className="mb-3")


def _how_to():
    return dbc.Alert([
        html.H6("How to use:", style={"fontWeight": "bold"}),
        html.Ol([
            html.Li("Download your Etsy payment statement CSV files from your Etsy seller account"),
            html.Li("Upload one or more CSV files using the area above"),
            html.Li("View your orders, payout status, and financial summary"),
        ], style={"fontSize": "13px", "marginBottom": "0"}),
    ], color="info")


def layout():
    """Build the page. Results are filled in by the upload callbacks."""
    return html.Div([
        dcc.Store(id="statement-store", storage_type="memory"),
        html.Div(id="upload-status"),

        html.Div([_upload_zone(), _how_to()], id="upload-section", style=SHOWN),

        html.Div([
            html.Div(id="summary-stats", className="mb-3"),
            dbc.Row([
                dbc.Col([
                    html.Div([
                        html.H4("Orders", style={"color": WHITE, "margin": "0"}),
                        dbc.Button("Upload New Files", id="reset-button", color="secondary",
                                   outline=True, size="sm"),
                    ], style={"display": "flex", "justifyContent": "space-between",
                              "alignItems": "center", "marginBottom": "12px"}),
                    html.Div([
                        dbc.RadioItems(
                            id="order-filter",
                            options=[{"label": label, "value": value} for value, label in STATUS_FILTERS],
                            value="all",
                            inline=True,
                            className="btn-group flex-wrap",
                            inputClassName="btn-check",
                            labelClassName="btn btn-outline-info btn-sm",
                            labelCheckedClassName="active",
                        ),
                        dbc.Select(
                            id="order-sort",
                            options=[
                                {"label": "Sort by Date", "value": "date"},
                                {"label": "Sort by Amount", "value": "amount"},
                            ],
                            value="date",
                            size="sm",
                            style={"width": "160px"},
                        ),
                    ], style={"display": "flex", "justifyContent": "space-between",
                              "alignItems": "center", "gap": "8px", "marginBottom": "12px"}),
                    html.Div(id="orders-list"),
                ], lg=8),
                dbc.Col([
                    html.Div(id="deposits-section"),
                    html.Div(id="misc-section"),
                ], lg=4),
            ]),
        ], id="results-section", style=HIDDEN),
    ])


def filter_options(orders):
    """Filter buttons labelled with how many orders each one would show."""
    counts = status_counts(orders)
    return [
        {"label": f"{label} ({counts.get(value, 0)})", "value": value}
        for value, label in STATUS_FILTERS
    ]


def render_results(result, status_filter="all", sort_by="date"):
    """Children for every results container, keyed by component id."""
    shown = filter_orders(result.orders, status_filter, sort_by)
    deposits_body = [deposits_list(result.deposits)]
    if result.deposits:
        deposits_body.insert(0, deposits_chart(result.deposits))
    return {
        "summary-stats": summary_stats(result.summary),
        "order-filter": filter_options(result.orders),
        "orders-list": orders_list(shown),
        "deposits-section": section("Deposits", deposits_body, color=PURPLE,
                                    count=len(result.deposits)),
        "misc-section": section("Misc. Transactions",
                                transactions_list(result.misc_transactions),
                                color=TEAL, count=len(result.misc_transactions)),
    }


def empty_results():
    return {
        "summary-stats": None,
        "order-filter": filter_options([]),
        "orders-list": empty_note("No statements loaded"),
        "deposits-section": None,
        "misc-section": None,
    }
