# app/logging_config.py

import logging

from app.config import get_settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging() -> None:
    logging.basicConfig(
        level=get_settings().log_level,
        format=LOG_FORMAT,
    )
