import logging
import os
from typing import Optional


def setup_logging(level: Optional[str] = None) -> None:
    """
    Console logging for the CLI.
    - Uses LOG_LEVEL env if level is None (default INFO).
    - Unknown level names fall back to INFO.
    """
    level_name = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    level_value = getattr(logging, level_name, logging.INFO)
    if not isinstance(level_value, int):
        level_value = logging.INFO

    logging.basicConfig(
        level=level_value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    # httpx logs each request at INFO.
    logging.getLogger("httpx").setLevel(max(level_value, logging.WARNING))
