# moviehub/logging_setup.py

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure a single console handler via logging.basicConfig.
    Unknown level names fall back to INFO.
    """
    level_name = (level or "INFO").upper()
    level_value = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(level=level_value, format=LOG_FORMAT)
