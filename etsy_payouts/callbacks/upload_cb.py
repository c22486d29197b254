"""Upload / reset / render callbacks for the overview page."""
import base64
import binascii

from dash import Input, Output, State, ctx, no_update
import dash_bootstrap_components as dbc
from loguru import logger

from etsy_payouts.classifier import validate_statement_csv
from etsy_payouts.models import StatementError
from etsy_payouts.pages.overview import render_results, empty_results, HIDDEN, SHOWN
from etsy_payouts.pipeline import process_statements

PROCESSING_FAILED = "Error processing CSV files. Please check the file format."
RESULT_IDS = ["summary-stats", "order-filter", "orders-list", "deposits-section", "misc-section"]


def decode_upload(contents):
    """dcc.Upload data URL → raw bytes."""
    _content_type, content_string = contents.split(",", 1)
    return base64.b64decode(content_string)


def is_csv_upload(contents, filename):
    name_ok = (filename or "").lower().endswith(".csv")
    return name_ok or (contents or "").startswith("data:text/csv")


def load_uploads(contents_list, filenames):
    """Turn a batch of uploads into statement texts.

    Returns (texts, alert). ``texts`` is None when nothing usable was uploaded
    or the batch failed to process; the alert explains what happened.
    """
    contents_list = contents_list or []
    filenames = filenames or [None] * len(contents_list)
    csv_files = [(c, f) for c, f in zip(contents_list, filenames) if is_csv_upload(c, f)]
    if not csv_files:
        return None, dbc.Alert("Please upload CSV files only", color="warning")

    texts = []
    for contents, filename in csv_files:
        try:
            raw = decode_upload(contents)
        except (ValueError, binascii.Error) as e:
            logger.warning("Unreadable upload {}: {}", filename, e)
            return None, dbc.Alert(f"{PROCESSING_FAILED} ({filename}: unreadable upload)",
                                   color="danger")
        ok, msg, _rows = validate_statement_csv(raw)
        if not ok:
            logger.warning("Rejected upload {}: {}", filename, msg)
            return None, dbc.Alert(f"{PROCESSING_FAILED} ({filename}: {msg})", color="danger")
        texts.append(raw.decode("utf-8-sig"))

    try:
        result = process_statements(texts)
    except StatementError as e:
        logger.warning("Processing failed: {}", e)
        return None, dbc.Alert(PROCESSING_FAILED, color="danger")

    names = ", ".join(f for _c, f in csv_files if f)
    return texts, dbc.Alert(
        f"Loaded {len(texts)} file(s){' — ' + names if names else ''}. "
        f"{len(result.all_transactions)} transactions, {len(result.orders)} orders, "
        f"{len(result.deposits)} deposits.",
        color="success", duration=6000,
    )


def register_callbacks(app):
    @app.callback(
        Output("statement-store", "data"),
        Output("upload-status", "children"),
        Output("upload-statements", "contents"),
        Input("upload-statements", "contents"),
        Input("reset-button", "n_clicks"),
        State("upload-statements", "filename"),
        prevent_initial_call=True,
    )
    def on_upload_or_reset(contents, _reset_clicks, filenames):
        if ctx.triggered_id == "reset-button":
            return None, None, None
        if not contents:
            return no_update, no_update, no_update
        texts, alert = load_uploads(contents, filenames)
        return texts, alert, None

    @app.callback(
        Output("upload-section", "style"),
        Output("results-section", "style"),
        *[Output(cid, "options" if cid == "order-filter" else "children") for cid in RESULT_IDS],
        Input("statement-store", "data"),
        Input("order-filter", "value"),
        Input("order-sort", "value"),
    )
    def render(texts, status_filter, sort_by):
        if not texts:
            parts = empty_results()
            return (SHOWN, HIDDEN, *[parts[cid] for cid in RESULT_IDS])
        try:
            result = process_statements(texts)
        except StatementError:
            parts = empty_results()
            return (SHOWN, HIDDEN, *[parts[cid] for cid in RESULT_IDS])
        parts = render_results(result, status_filter or "all", sort_by or "date")
        return (HIDDEN, SHOWN, *[parts[cid] for cid in RESULT_IDS])
