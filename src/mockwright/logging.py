"""Logging configuration using structlog.

Mockwright emits three families of events:

- ``expectation.*`` when setups are added or replaced (debug)
- ``invocation.*`` for every intercepted call (debug)
- ``verification.failed`` when verify or verify_all fails (warning)

The first two fire once per setup or call and can drown a large test run,
so they can be dropped without lowering the level for everything else.
"""

import logging
import sys
from collections.abc import MutableMapping
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from mockwright.config import MockSettings

PER_CALL_EVENT_PREFIXES = ("expectation.", "invocation.")


def drop_per_call_events(
    logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """Processor dropping expectation and invocation events."""
    event = event_dict.get("event")
    if isinstance(event, str) and event.startswith(PER_CALL_EVENT_PREFIXES):
        raise structlog.DropEvent
    return event_dict


def configure_logging(
    log_level: str = "INFO",
    log_format: str = "console",
    log_invocations: bool = True,
) -> None:
    """Route mockwright's structlog events through stdlib logging on stderr.

    Stderr keeps mock diagnostics apart from whatever the code under test
    or the CLI prints on stdout.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: "json" for JSON lines, "console" for human-readable
        log_invocations: Keep per-call expectation and invocation events
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=numeric_level)

    processors: list[Any] = [structlog.stdlib.filter_by_level]
    if not log_invocations:
        processors.append(drop_per_call_events)
    processors.extend([
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ])

    if log_format == "console":
        processors.append(structlog.dev.ConsoleRenderer())
    else:
        processors.extend([
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ])

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_from_settings(
    settings: "MockSettings | None" = None, log_level: str | None = None
) -> None:
    """Configure logging from mockwright settings.

    Args:
        settings: Settings to read (defaults to the module-level settings)
        log_level: Overrides ``settings.log_level`` when given
    """
    if settings is None:
        from mockwright.config import settings as current

        settings = current
    configure_logging(
        log_level=log_level or settings.log_level,
        log_format=settings.log_format,
        log_invocations=settings.log_invocations,
    )
