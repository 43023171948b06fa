import logging
from typing import Union

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] [%(filename)s (%(funcName)s:%(lineno)d)] - %(message)s"


def configure_logging(level: Union[str, int] = logging.INFO) -> logging.Logger:
    """Attach a console handler to the framework logger (idempotent)."""
    logger = logging.getLogger("pagebdd")
    logger.setLevel(level)

    if not any(getattr(h, "_pagebdd_console", False) for h in logger.handlers):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        console_handler._pagebdd_console = True
        logger.addHandler(console_handler)

    return logger
