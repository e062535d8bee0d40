# catalog_extractor/utils/logger.py
import logging
from logging.handlers import RotatingFileHandler
import sys
from ..config import Settings

settings = Settings()


def configure_logging(config: Settings) -> None:
    """
    Use the given settings for every logger set up from now on.

    Module-level loggers created at import time keep the environment settings.
    """
    global settings
    settings = config


def setup_logger(name: str) -> logging.Logger:
    """
    Set up logger with a console handler and, when enabled, a rotating file handler
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))

    # Remove existing handlers to avoid duplicates
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if settings.LOG_TO_FILE:
        settings.LOGS_DIR.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            settings.LOGS_DIR / f"{name}.log",
            maxBytes=10*1024*1024,  # 10MB
            backupCount=5
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    return logger
