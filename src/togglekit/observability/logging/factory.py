"""Observability – JsonLoggerFactory."""
from __future__ import annotations

import logging
from typing import IO, Any

import structlog

from togglekit.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter

Processor = Any


def _redactor(sensitive_fields: frozenset[str]) -> Processor:
    _filter = SensitiveFieldsFilter(sensitive_fields)

    def redact(logger: Any, method: str, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG001
        return _filter.redact_deep(event_dict)

    return redact


def _service_stamp(service: str) -> Processor:
    def stamp(logger: Any, method: str, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG001
        event_dict.setdefault("service", service)
        return event_dict

    return stamp


class JsonLoggerFactory:
    """Route structlog events through the stdlib root logger as one JSON object per line.

    Caller addresses and forwarded-for headers are redacted unless
    *sensitive_fields* says otherwise; pass an empty set to log them verbatim.
    Every event carries ``service`` so toggle decisions can be filtered out of
    a shared log stream.
    """

    @staticmethod
    def configure(
        level: int = logging.INFO,
        sensitive_fields: frozenset[str] = DEFAULT_SENSITIVE_FIELDS,
        *,
        service: str = "togglekit",
        stream: IO[str] | None = None,
    ) -> None:
        processors: list[Processor] = [
            structlog.contextvars.merge_contextvars,
            _service_stamp(service),
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
        ]
        if sensitive_fields:
            processors.insert(1, _redactor(sensitive_fields))

        structlog.configure(
            processors=[*processors, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

        handler = logging.StreamHandler(stream)
        handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                processors=[
                    structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                    structlog.processors.JSONRenderer(),
                ],
            )
        )
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(level)


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["JsonLoggerFactory", "get_logger"]
