"""Settings from .env / environment, and loguru setup."""

import os
import sys
from dataclasses import dataclass

from dotenv import load_dotenv
from loguru import logger

# BASE_DIR points to the project root (parent of etsy_payouts/)
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = 8070
    debug: bool = False
    log_level: str = "INFO"
    statements_dir: str = os.path.join(BASE_DIR, "data", "etsy_statements")


def load_settings(env_file=None) -> Settings:
    """Read settings, letting a project-root .env fill in anything unset."""
    load_dotenv(env_file or os.path.join(BASE_DIR, ".env"))
    defaults = Settings()

    port = os.environ.get("PORT", "")
    try:
        port = int(port) if port else defaults.port
    except ValueError:
        logger.warning("PORT={!r} is not a number, using {}", port, defaults.port)
        port = defaults.port

    return Settings(
        host=os.environ.get("ETSY_PAYOUTS_HOST", defaults.host),
        port=port,
        debug=os.environ.get("ETSY_PAYOUTS_DEBUG", "").strip().lower() in _TRUTHY,
        log_level=os.environ.get("ETSY_PAYOUTS_LOG_LEVEL", defaults.log_level).upper(),
        statements_dir=os.environ.get("ETSY_PAYOUTS_STATEMENTS_DIR", defaults.statements_dir),
    )


def configure_logging(level="INFO"):
    """Send loguru output to stderr at ``level`` (stdout is for reports)."""
    logger.remove()
    logger.add(sys.stderr, level=level,
               format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}")
