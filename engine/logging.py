# engine/logging.py

import logging

import structlog
from structlog.processors import JSONRenderer, TimeStamper, add_log_level
from structlog.stdlib import add_logger_name, filter_by_level


def render_vectors(logger, method_name, event_dict):
    """Turn vector values (anything with ``as_tuple``) into JSON-friendly [x, y] lists."""
    for key, value in event_dict.items():
        as_tuple = getattr(value, "as_tuple", None)
        if callable(as_tuple):
            event_dict[key] = list(as_tuple())
    return event_dict


def configure_logging(log_level: str = "INFO"):
    """Configure structured logging for GRIDCASTER."""
    logging.basicConfig(format="%(message)s", level=log_level.upper())

    structlog.configure(
        processors=[
            filter_by_level,
            add_log_level,
            add_logger_name,
            TimeStamper(fmt="iso"),
            render_vectors,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str):
    """Get a structured logger instance."""
    return structlog.get_logger(name)
