"""Diagnostic logging for the CLI: structlog routed through stdlib logging."""

from __future__ import annotations

import logging
import logging.config
import os
import sys

import structlog

_LEVEL_ENV = "PLUTONIUM_LOG_LEVEL"
_FORMAT_ENV = "PLUTONIUM_LOG_FORMAT"


def resolve_level(verbose: bool = False) -> str:
    """``PLUTONIUM_LOG_LEVEL`` wins; otherwise DEBUG with ``-v`` and WARNING without."""
    level = os.environ.get(_LEVEL_ENV) or ("DEBUG" if verbose else "WARNING")
    level = level.upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"unknown {_LEVEL_ENV} value: {level!r}")
    return level


def _processors(
    log_format: str,
) -> tuple[list[structlog.types.Processor], structlog.types.Processor]:
    """Pre-chain and final renderer for ``console`` or ``json`` output.

    Console output is read by the person running the check, so it carries no
    timestamp; JSON lines are meant for CI log collectors and do.
    """
    chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
    ]
    if log_format == "json":
        chain += [
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
        ]
        return chain, structlog.processors.JSONRenderer()
    if log_format != "console":
        raise ValueError(f"unknown {_FORMAT_ENV} value: {log_format!r}")
    return chain, structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def setup_logging(verbose: bool = False) -> None:
    """Configure structlog and stdlib logging for one CLI invocation.

    Reads from environment variables:
        PLUTONIUM_LOG_LEVEL   diagnostic log level (default: WARNING, DEBUG with -v)
        PLUTONIUM_LOG_FORMAT  console | json (default: console)

    Diagnostics go to stderr so they never mix with the report or ``--json``
    output on stdout.
    """
    log_level = resolve_level(verbose)
    pre_chain, renderer = _processors(os.environ.get(_FORMAT_ENV, "console").lower())

    # Loggers are not cached: the CLI may be invoked several times per process.
    structlog.configure(
        processors=pre_chain + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "structlog": {
                    "()": structlog.stdlib.ProcessorFormatter,
                    "foreign_pre_chain": pre_chain,
                    "processors": [
                        structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                        renderer,
                    ],
                },
            },
            "handlers": {
                "stderr": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stderr",
                    "formatter": "structlog",
                },
            },
            "loggers": {
                "plutonium": {"handlers": ["stderr"], "level": log_level, "propagate": False},
            },
        }
    )
