"""wayeyes: show whether the focused window is native Wayland or XWayland.

Prints one status line per focus change, in the order Sway delivers the
events. Intended as a waybar custom module with `return-type: json`.
"""

import logging
from typing import Any, AsyncIterable, Optional, TextIO

from .classifier import classify
from .config import Configuration
from .errors import TransportError
from .formatter import render
from .models import FocusEvent
from .shutdown import ShutdownContext
from .subscriber import EventSubscriber

logger = logging.getLogger(__name__)


class Wayeyes:
    """Focus-change loop for the wayeyes status line."""

    def __init__(
        self,
        config: Configuration,
        shutdown: ShutdownContext,
        subscriber: Optional[EventSubscriber] = None,
        output: Optional[TextIO] = None,
    ) -> None:
        """Initialize the loop.

        Args:
            config: Output configuration
            shutdown: Cancellation flag checked after every delivered event
            subscriber: Sway IPC subscriber (default: discover the socket)
            output: Stream for status lines (default: sys.stdout at write time)
        """
        self.config = config
        self.shutdown = shutdown
        self.subscriber = subscriber or EventSubscriber()
        self.output = output

    def format_window(self, window: Optional[Any] = None) -> str:
        """Render the status line for a focused window (None: nothing focused yet)."""
        category = classify(window)
        return render(self.config.record_for(category), self.config.template)

    def emit(self, window: Optional[Any] = None) -> None:
        print(self.format_window(window), file=self.output, flush=True)

    async def consume(self, stream: AsyncIterable[FocusEvent]) -> None:
        """Render every focus event until the stream ends or shutdown is requested.

        Raises:
            TransportError: If the stream fails and shutdown was not requested
        """
        try:
            async for event in stream:
                if self.shutdown.requested:
                    logger.info("Shutdown requested, leaving event loop")
                    return

                if not event.is_focus:
                    logger.debug(f"Ignoring window::{event.change.value} event")
                    continue

                self.emit(event.container)
        except TransportError:
            if self.shutdown.requested:
                logger.info("Event stream failed after shutdown was requested")
                return
            raise

        logger.info("Event stream ended")

    async def run(self) -> None:
        """Print the initial line, subscribe and process focus events.

        Raises:
            CompositorConnectionError: If Sway IPC is unreachable
            SubscriptionError: If the window subscription fails
            TransportError: If the connection fails mid-stream
        """
        self.emit(None)

        stream = await self.subscriber.open()
        try:
            await self.consume(stream)
        finally:
            await stream.close()
