"""KPI pill builders using dash-bootstrap-components."""
from dash import html
import dash_bootstrap_components as dbc
from etsy_payouts.theme import *
from etsy_payouts.formatting import money


def icon_badge(text, color):
    """Colored 36px icon circle with gradient bg for KPI pills."""
    return html.Div(text, style={
        "width": "36px", "height": "36px", "borderRadius": "50%",
        "background": f"linear-gradient(135deg, {color}, {color}88)",
        "color": "#ffffff",
        "display": "inline-flex", "alignItems": "center", "justifyContent": "center",
        "fontSize": "15px", "fontWeight": "bold", "flexShrink": "0",
        "boxShadow": f"0 3px 10px {color}44",
    })


def kpi_pill(icon, label, value, color, subtitle=""):
    """KPI pill with gradient icon, bold value and an optional subtitle."""
    text_children = [
        html.Div(label, style={"color": GRAY, "fontSize": "11px", "fontWeight": "600",
                                "letterSpacing": "1.2px", "textTransform": "uppercase",
                                "lineHeight": "1"}),
        html.Div(value, style={"color": WHITE, "fontSize": "26px", "fontWeight": "bold",
                                "fontFamily": "monospace", "lineHeight": "1.1",
                                "marginTop": "3px",
                                "textShadow": f"0 0 12px {color}33"}),
    ]
    if subtitle:
        text_children.append(html.Div(subtitle, style={"color": DARKGRAY, "fontSize": "11px",
                                                         "marginTop": "2px"}))
    return dbc.Card(
        dbc.CardBody([
            icon_badge(icon, color),
            html.Div(text_children, style={"marginLeft": "12px", "minWidth": "0"}),
        ], style={"display": "flex", "alignItems": "center", "padding": "14px 18px"}),
        style={"borderLeft": f"4px solid {color}", "height": "100%"},
        className="kpi-pill",
    )


def summary_stats(summary):
    """Grid of summary KPI pills, three per row on wide screens."""
    stats = [
        ("$", "Total Sales (after taxes)", money(summary.total_sales), BLUE,
         f"{summary.orders_count} orders"),
        ("−", "Total Fees", money(summary.total_fees), RED, ""),
        ("%", "Total Taxes", money(summary.total_taxes), RED, ""),
        ("=", "Net Revenue", money(summary.net_revenue), GREEN, "After fees & taxes"),
        ("⏳", "In Reserve", money(summary.reserve_amount), ORANGE,
         f"{summary.reserve_orders_count} orders waiting"),
        ("🏦", "Total Deposited", money(summary.total_deposits), PURPLE,
         f"{summary.paid_out_orders_count} orders paid"),
        ("💵", "Current Balance", money(summary.current_balance), TEAL,
         f"{summary.current_balance_orders_count} orders in balance"),
        ("→", "Available for Deposit", money(summary.available_for_deposit), CYAN,
         "Balance minus reserve"),
    ]
    return dbc.Row([
        dbc.Col(kpi_pill(*stat), md=6, lg=4, className="mb-3")
        for stat in stats
    ])
