import logging
import os
import sys

import structlog


def _stderr_logger(*args):
    # looked up per call so a swapped sys.stderr is honoured
    return structlog.PrintLogger(sys.stderr)


def setup_logging(log_level: str = None) -> None:
    if log_level is None:
        log_level = os.getenv("LOG_LEVEL", "WARNING").upper()
    else:
        log_level = log_level.upper()

    numeric_level = getattr(logging, log_level, logging.WARNING)

    # stdout carries the report
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=_stderr_logger,
        cache_logger_on_first_use=False,
    )


def get_logger(name: str):
    return structlog.get_logger(name)
