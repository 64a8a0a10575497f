"""Application logger setup, driven by LOG_LEVEL and LOG_FORMAT."""
import logging
import sys

DEFAULT_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"


def resolve_level(value, default=logging.INFO):
    """Accept a level name ('debug', 'WARNING') or number; unknown names fall back to ``default``."""
    if isinstance(value, int):
        return value
    level = logging.getLevelName(str(value).strip().upper())
    return level if isinstance(level, int) else default


def setup_logging(level=logging.INFO, fmt=DEFAULT_FORMAT) -> logging.Logger:
    """Install one stdout handler on the ``donation_site`` logger; later calls only adjust the level."""
    logger = logging.getLogger("donation_site")
    logger.setLevel(resolve_level(level))
    if logger.handlers:
        return logger
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt or DEFAULT_FORMAT))
    logger.addHandler(handler)
    logging.getLogger("aiosmtplib").setLevel(logging.WARNING)
    return logger


def init_app_logging(app) -> logging.Logger:
    return setup_logging(app.config.get('LOG_LEVEL', logging.INFO), app.config.get('LOG_FORMAT'))
