"""
Logging configuration for inrange using structlog.

inrange never configures logging on import; applications that want its events call `setup_logging` once at startup.
After that, modules log through: logger = structlog.get_logger(__name__)
"""
import logging
import sys

import structlog


def setup_logging(level: int = logging.WARNING, as_json: bool = False):
    """
    Configure structlog for console output.

    :param level: The minimum stdlib level that is emitted; lower events are dropped by the bound logger.
    :param as_json: Render JSON lines instead of the human-readable console format.
    """
    renderer = structlog.processors.JSONRenderer() if as_json else structlog.dev.ConsoleRenderer(colors=False)
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
        context_class=dict,
        cache_logger_on_first_use=False,
    )
