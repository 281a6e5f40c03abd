"""Structured logging for run reporting, configured through structlog."""

from __future__ import annotations

import logging

import structlog

from . import config


def configure_logging(level: int | str | None = None) -> None:
    """Emit one JSON object per tracker, sink and registry event.

    Parameters
    ----------
    level:
        Numeric level or level name such as ``"DEBUG"``. Defaults to
        ``settings.log_level``, which ``RUNREPORT_LOG_LEVEL`` can set.
    """

    if level is None:
        level = config.settings.log_level
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logging.basicConfig(level=level, format="%(message)s")
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
    )
