"""Module: logging."""

import logging
import sys

HANDLER_NAME = "shifolink"
# Third-party loggers that are too chatty at INFO.
NOISY_LOGGERS = ("sqlalchemy.engine", "uvicorn.access", "httpx")


def setup_logging(level: str = "INFO", fmt: str | None = None) -> None:
    root = logging.getLogger()
    root.setLevel(level.upper())

    # Re-running setup (tests, reloads) must not stack handlers.
    for handler in list(root.handlers):
        if handler.get_name() == HANDLER_NAME:
            root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter(fmt or "%(asctime)s %(levelname)s [%(name)s] %(message)s"))
    root.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).info("Logging is set up (level=%s)", level.upper())
