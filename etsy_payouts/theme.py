"""
Theme constants — colors, chart layout, status badge colors.
Import from here instead of hardcoding colors anywhere.
"""

from etsy_payouts.models import OrderStatus

# ── Color Palette ────────────────────────────────────────────────────────────
BG = "#0a0a14"
CARD = "#141828"
GREEN = "#2ecc71"
RED = "#e74c3c"
BLUE = "#3498db"
ORANGE = "#f39c12"
PURPLE = "#9b59b6"
TEAL = "#1abc9c"
WHITE = "#ffffff"
GRAY = "#aaaaaa"
DARKGRAY = "#666666"
CYAN = "#00d4ff"

# ── Order status → Bootstrap badge color ────────────────────────────────────
STATUS_BADGE = {
    OrderStatus.PAID: "success",
    OrderStatus.CURRENT_BALANCE: "info",
    OrderStatus.PENDING: "secondary",
    OrderStatus.REFUNDED: "danger",
    OrderStatus.RESERVE: "warning",
    OrderStatus.UNRESOLVED: "light",
}

# Filter buttons, in display order
STATUS_FILTERS = [
    ("all", "All"),
    (OrderStatus.PENDING.value, "Pending"),
    (OrderStatus.RESERVE.value, "Reserve"),
    (OrderStatus.CURRENT_BALANCE.value, "In Balance"),
    (OrderStatus.PAID.value, "Paid"),
    (OrderStatus.REFUNDED.value, "Refunded"),
]

# ── Plotly Chart Layout ──────────────────────────────────────────────────────
CHART_LAYOUT = dict(
    template="plotly_dark",
    paper_bgcolor="rgba(0,0,0,0)",
    plot_bgcolor="rgba(0,0,0,0)",
    font={"color": WHITE},
    margin=dict(t=50, b=30, l=60, r=20),
)

MAX_WIDTH = "1280px"
