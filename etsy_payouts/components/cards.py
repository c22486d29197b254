"""Reusable card/section builders."""
from dash import html, dcc
import dash_bootstrap_components as dbc
import plotly.graph_objects as go
from etsy_payouts.theme import *
from etsy_payouts.formatting import money


def section(title, children, color=ORANGE, count=None):
    """Titled section card with colored top border."""
    header = [title]
    if count is not None:
        header.append(html.Span(f" ({count})", style={"color": GRAY, "fontSize": "13px",
                                                        "fontWeight": "normal"}))
    return dbc.Card([
        dbc.CardHeader(header, style={"color": color, "fontWeight": "bold", "fontSize": "16px",
                                      "borderBottom": f"2px solid {color}",
                                      "backgroundColor": "transparent", "padding": "12px 16px"}),
        dbc.CardBody(children, style={"padding": "16px"}),
    ], className="mb-3")


def empty_note(text):
    return html.P(text, style={"color": DARKGRAY, "fontSize": "13px", "textAlign": "center",
                               "padding": "24px 0", "margin": "0"})


def make_chart(fig, height=360, legend_h=True):
    """Apply consistent styling to a Plotly figure."""
    layout = {**CHART_LAYOUT, "height": height}
    if legend_h:
        layout["legend"] = dict(orientation="h", y=1.12, x=0.5, xanchor="center")
    fig.update_layout(**layout)
    return fig


def deposits_chart(deposits):
    """Bar chart of deposit amounts by date (oldest on the left)."""
    ordered = sorted(deposits, key=lambda d: d.date)
    fig = go.Figure(go.Bar(
        x=[d.date for d in ordered],
        y=[d.amount for d in ordered],
        marker_color=PURPLE,
        hovertext=[f"{money(d.amount)}<br>{d.description}" for d in ordered],
        hoverinfo="text",
    ))
    make_chart(fig, 280, legend_h=False)
    fig.update_layout(title="Deposits Over Time", showlegend=False)
    return dcc.Graph(figure=fig, config={"displayModeBar": False})
