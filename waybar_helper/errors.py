"""
Error types for the waybar helpers.

Every error carries the process exit code it maps to; only the CLI layer
turns errors into exit codes.
"""

from enum import IntEnum
from typing import Any, Dict, Optional


class ExitCode(IntEnum):
    """
    Process exit codes.

    - 0: Success (including a clean interrupt shutdown)
    - 1: Missing arguments (no sub-command / no executable)
    - 2: Runtime failure (connection, subscription, stream, bad flags)
    - 3: Unexpected arguments for a sub-command that takes none
    """

    OK = 0
    MISSING_ARGUMENTS = 1
    RUNTIME_FAILURE = 2
    UNEXPECTED_ARGUMENTS = 3


class WaybarHelperError(Exception):
    """Base exception for waybar helper errors."""

    exit_code: ExitCode = ExitCode.RUNTIME_FAILURE

    def __init__(
        self,
        message: str,
        suggestion: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize error.

        Args:
            message: Human-readable error message
            suggestion: Suggested recovery action
            context: Additional context for debugging
        """
        self.message = message
        self.suggestion = suggestion
        self.context = context or {}
        super().__init__(message)


class ConfigurationError(WaybarHelperError):
    """Invalid override flags: unknown flag, missing value or bad percentage."""

    def __init__(self, message: str, flag: Optional[str] = None, value: Optional[str] = None):
        context = {}
        if flag is not None:
            context["flag"] = flag
        if value is not None:
            context["value"] = value

        super().__init__(
            message=message,
            suggestion="Run with 'help' to list the accepted flags",
            context=context
        )


class CompositorConnectionError(WaybarHelperError, ConnectionError):
    """The Sway IPC socket could not be reached."""

    def __init__(self, reason: str):
        super().__init__(
            message=f"Sway IPC connect failed: {reason}",
            suggestion="Ensure Sway is running and SWAYSOCK points at its IPC socket",
            context={"reason": reason}
        )


class SubscriptionError(WaybarHelperError):
    """Sway rejected (or failed to answer) the event subscription."""

    def __init__(self, events: list, reason: str):
        super().__init__(
            message=f"Sway IPC subscribe to {', '.join(events)} failed: {reason}",
            context={"events": events, "reason": reason}
        )


class TransportError(WaybarHelperError):
    """The IPC connection closed or errored after subscribing."""

    def __init__(self, reason: str):
        super().__init__(
            message=f"Sway IPC event stream failed: {reason}",
            context={"reason": reason}
        )


class SignalSetupError(WaybarHelperError):
    """The interrupt handler could not be installed."""

    def __init__(self, signal_name: str, reason: str):
        super().__init__(
            message=f"Failed to install {signal_name} handler: {reason}",
            suggestion="Run the helper from the main thread of the process",
            context={"signal": signal_name, "reason": reason}
        )
