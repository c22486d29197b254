"""
Etsy Payout Tracker — track Etsy orders and bank deposits
Run:  etsy-payouts-dashboard   (or python -m etsy_payouts.app)
Open: http://127.0.0.1:8070
"""

import dash
from dash import html
import dash_bootstrap_components as dbc
from loguru import logger

from etsy_payouts.config import load_settings, configure_logging
from etsy_payouts.theme import BG, GRAY, MAX_WIDTH


def _header():
    return html.Div([
        html.H3("ETSY PAYOUT TRACKER", style={"fontWeight": "bold", "marginBottom": "2px"}),
        html.Div("Track your Etsy orders and bank deposits",
                 style={"color": GRAY, "fontSize": "13px"}),
    ], className="app-header", style={"marginBottom": "24px"})


def serve_layout():
    from etsy_payouts.pages.overview import layout
    return html.Div(
        html.Div([_header(), layout()],
                 style={"maxWidth": MAX_WIDTH, "margin": "0 auto", "padding": "32px 16px"}),
        style={"backgroundColor": BG, "minHeight": "100vh"},
    )


def create_app():
    """Build the Dash app and register its callbacks."""
    app = dash.Dash(
        __name__,
        suppress_callback_exceptions=True,
        external_stylesheets=[
            dbc.themes.DARKLY,
            "https://fonts.googleapis.com/css2?family=Inter:wght@300;400;500;600;700&display=swap",
        ],
        title="Etsy Payout Tracker",
    )
    app.layout = serve_layout

    # Import callback modules AFTER app is created so they can reference `app`
    from etsy_payouts.callbacks import upload_cb
    upload_cb.register_callbacks(app)
    return app


app = create_app()
server = app.server  # For deployment (Gunicorn)


def main():
    settings = load_settings()
    configure_logging(settings.log_level)
    logger.info("Etsy Payout Tracker on http://127.0.0.1:{}", settings.port)
    app.run(debug=settings.debug, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
