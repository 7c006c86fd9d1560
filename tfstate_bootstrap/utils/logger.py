"""Structured logging configuration."""
import logging
import structlog
from typing import Any
from .config import get_settings

LEVEL_COLORS = {
    "DEBUG": "\033[90m",
    "INFO": "\033[36m",
    "WARNING": "\033[33m",
    "ERROR": "\033[31m",
}
RESET_COLOR = "\033[0m"


def human_readable_renderer(logger, method_name, event_dict):
    """Render an event as `[HH:MM:SS] LEVEL | event (key=value, ...)`."""
    timestamp = event_dict.pop("timestamp", "")
    level = event_dict.pop("level", method_name).upper()
    event = event_dict.pop("event", "")
    event_dict.pop("logger", None)
    exception = event_dict.pop("exception", None)

    parts = []
    if timestamp:
        parts.append(f"[{timestamp.split('T')[-1][:8]}]")
    parts.append(f"{LEVEL_COLORS.get(level, '')}{level:8}{RESET_COLOR}")
    if event:
        parts.append(f"| {event}")

    context = [
        f"{key}={value}"
        for key, value in event_dict.items()
        if value is not None and value != ""
    ]
    if context:
        parts.append(f"({', '.join(context)})")

    line = " ".join(parts)
    if exception:
        line = f"{line}\n{exception}"
    return line


def setup_logging() -> None:
    """Configure structured logging for the application."""
    settings = get_settings()

    # stdlib logging writes to stderr, keeping stdout free for the backend block
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, settings.log_level.upper()),
    )

    if settings.log_format.lower() == "human":
        renderer = human_readable_renderer
    else:
        renderer = structlog.processors.JSONRenderer()

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
            renderer
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> Any:
    """Get a structured logger instance."""
    return structlog.get_logger(name)


def print_banner(title: str, items: dict = None, width: int = 80) -> None:
    """
    Print a formatted banner for important information.

    Args:
        title: Banner title
        items: Dictionary of key-value pairs to display
        width: Banner width
    """
    settings = get_settings()

    # Only print banners in human format
    if settings.log_format.lower() != "human":
        return

    border = "=" * width
    print(f"\n{border}")
    print(f"  {title}")
    print(border)

    if items:
        for key, value in items.items():
            formatted_key = key.replace("_", " ").title()
            print(f"{formatted_key:.<30} {value}")

    print(f"{border}\n")
