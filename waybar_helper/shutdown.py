"""Interrupt-driven shutdown flag shared by the signal handler and the event loop."""

import logging
import signal
import threading
from typing import Any, Dict, Iterable

from .errors import SignalSetupError

logger = logging.getLogger(__name__)


class ShutdownContext:
    """Cancellation flag set from a signal handler and polled by the event loop.

    The flag is a threading.Event so the write from the handler and the read
    from the loop are synchronized. It is never cleared.
    """

    def __init__(self) -> None:
        self._requested = threading.Event()
        self._previous: Dict[int, Any] = {}

    @property
    def requested(self) -> bool:
        return self._requested.is_set()

    def request(self) -> None:
        """Request shutdown."""
        self._requested.set()

    def install(self, signals: Iterable[signal.Signals] = (signal.SIGINT,)) -> None:
        """Install handlers that only set the flag.

        Args:
            signals: Signals to handle (default: SIGINT)

        Raises:
            SignalSetupError: If a handler cannot be installed (e.g. not on
                the main thread)
        """

        def signal_handler(signum: int, frame) -> None:
            self._requested.set()

        for sig in signals:
            try:
                self._previous[sig] = signal.signal(sig, signal_handler)
            except (ValueError, OSError) as e:
                self.restore()
                raise SignalSetupError(signal.Signals(sig).name, str(e)) from e
            logger.debug("Installed %s handler", signal.Signals(sig).name)

    def restore(self) -> None:
        """Put back the handlers that were active before install()."""
        for sig, handler in self._previous.items():
            signal.signal(sig, handler if handler is not None else signal.SIG_DFL)
        self._previous.clear()
