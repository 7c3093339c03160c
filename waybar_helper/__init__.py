"""Waybar helpers for Sway.

This package provides small status-bar helpers that talk to the Sway IPC socket
and print one status record per line for waybar custom modules.

Modules:
    - models: Window/event models (ShellType, WindowChange, FocusEvent)
    - config: Immutable output configuration and override parsing
    - classifier: Maps the focused window to an output category
    - formatter: Renders an output record through the format template
    - subscriber: i3ipc.aio connection and pull-based window event stream
    - shutdown: Interrupt-signal cancellation flag
    - wayeyes: Focus-change event loop
    - cli: Command-line entry points
"""

import logging

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "configure_logging",
]


def configure_logging(
    level: str = "WARNING",
    format_string: str | None = None,
) -> logging.Logger:
    """Configure package-level logging.

    Diagnostics always go to stderr: stdout is read by waybar.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string. Defaults to standard format
            with timestamp, level, module, and message.

    Returns:
        Configured logger instance for the waybar_helper package.
    """
    if format_string is None:
        format_string = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

    logger = logging.getLogger("waybar_helper")
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(format_string))
    logger.addHandler(handler)

    return logger
