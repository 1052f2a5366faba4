"""Logging setup.

Log records go through structlog to the standard library, so third-party
libraries and fintrack modules share one handler on stderr.
"""

import logging
import sys

import structlog

LOG_LEVEL_ENV = "FINTRACK_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


def configure_default_logging() -> None:
    """Keep library use quiet until ``configure_logging`` is called.

    Leaves an existing structlog configuration alone, so applications that
    embed fintrack keep their own setup.
    """
    if structlog.is_configured():
        return
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING),
    )


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Configure structlog and the root logger.

    Args:
        level: Standard logging level name (DEBUG, INFO, WARNING, ...)
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: '{level}'")

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=numeric_level,
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
