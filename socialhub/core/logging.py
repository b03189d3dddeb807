"""
ⒸAngelaMos | 2025
logging.py
"""

import logging
from typing import Any

import structlog


_REDACTED_KEYS = ("password", "token", "secret", "authorization")


def _redact_secrets(
    logger: Any,
    method_name: str,
    event_dict: dict[str,
                     Any],
) -> dict[str,
          Any]:
    """
    Mask values whose key looks like a credential
    """
    for key in list(event_dict.keys()):
        if any(part in key.lower() for part in _REDACTED_KEYS):
            event_dict[key] = "***"
    return event_dict


def configure_logging(
    log_level: str = "INFO",
    json_output: bool = True,
) -> None:
    """
    Configure structlog for console or JSON output
    """
    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt = "iso"),
        _redact_secrets,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_output:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(),
        ]

    structlog.configure(
        processors = processors,
        wrapper_class = structlog.make_filtering_bound_logger(
            getattr(logging,
                    log_level.upper(),
                    logging.INFO)
        ),
        context_class = dict,
        logger_factory = structlog.PrintLoggerFactory(),
        cache_logger_on_first_use = True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger bound to a module name
    """
    return structlog.get_logger(name)
