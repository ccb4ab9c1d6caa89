# bracketsim/utils/observability.py
import logging
import sys
import uuid
from typing import Optional
import structlog
import contextvars

from .logging import setup_logging

# Correlation ID tying together the events of one simulation run
RUN_ID = contextvars.ContextVar('run_id', default=None)


class StructlogConfig:
    """Structured logging configuration."""

    @staticmethod
    def configure(env: str = 'development', log_level: str = 'WARNING', log_format: Optional[str] = None):
        """
        Configure structlog with environment-appropriate settings.

        Production (or log_format='json'): JSON output (machine-readable)
        Development: Console output (human-readable)

        Events are printed to stderr so they never mix with the bracket.
        """
        if log_format is None:
            log_format = "json" if env == "production" else "console"

        shared_processors = [
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt='iso'),
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
        ]

        if log_format == 'json':
            processors = shared_processors + [
                structlog.processors.dict_tracebacks,
                structlog.processors.JSONRenderer(),
            ]
        else:
            processors = shared_processors + [
                structlog.dev.ConsoleRenderer(colors=False),
            ]

        structlog.configure(
            processors=processors,
            wrapper_class=structlog.make_filtering_bound_logger(
                logging.getLevelName(log_level)
            ),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
            cache_logger_on_first_use=False,
        )


class Logger:
    """Wrapper for structured logging with run context."""

    def __init__(self, module_name: str):
        self.logger = structlog.get_logger(module_name)
        self.module_name = module_name

    def with_run_id(self, run_id: Optional[str] = None):
        """Bind a run ID to all subsequent events of this context."""
        run_id = run_id or uuid.uuid4().hex
        RUN_ID.set(run_id)
        return run_id

    def log_event(self, event: str, **kwargs):
        """Log structured event with automatic context."""
        ctx = {'run_id': RUN_ID.get(), 'module': self.module_name}
        ctx.update(kwargs)
        return self.logger.info(event, **ctx)

    def log_error(self, event: str, exc_info=None, **kwargs):
        """Log error with exception details."""
        ctx = {'run_id': RUN_ID.get(), 'module': self.module_name}
        ctx.update(kwargs)
        return self.logger.error(event, exc_info=exc_info, **ctx)


def initialize_observability(environment: str = 'development', log_level: str = 'WARNING',
                             log_format: Optional[str] = None):
    """One-stop initialization for structlog and the stdlib package logger."""
    StructlogConfig.configure(env=environment, log_level=log_level, log_format=log_format)
    setup_logging(level=log_level, environment=environment, log_format=log_format)

    logger = structlog.get_logger(__name__)
    logger.debug(
        'observability_initialized',
        environment=environment,
        log_level=log_level,
    )
