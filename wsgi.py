"""
WSGI entry point for deployment (Gunicorn):
    gunicorn wsgi:server
"""
from etsy_payouts.app import server  # noqa: F401
