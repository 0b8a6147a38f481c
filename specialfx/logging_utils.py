import logging

import structlog
from structlog.stdlib import add_log_level, add_logger_name


def setup_logging(
    level: int = logging.INFO,
    json_output: bool = False,
    cache_loggers: bool = True,
) -> None:
    """Configure structlog and standard logging for effect diagnostics.

    ``json_output`` switches from the coloured console renderer to one JSON
    object per line, for hosts that ship their logs elsewhere.
    """
    logging.basicConfig(level=level, format="%(message)s")
    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=True)
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            add_logger_name,
            add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=False),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=cache_loggers,
    )
