"""Display helpers shared by the report and the dashboard."""


def money(val):
    """Format a number as $X,XXX.XX"""
    if val < 0:
        return f"-${abs(val):,.2f}"
    return f"${val:,.2f}"


def short_date(d):
    """Mar 05, 2026"""
    return d.strftime("%b %d, %Y") if d else ""


def long_date(d):
    """March 05, 2026"""
    return d.strftime("%B %d, %Y") if d else ""
