"""Sway IPC subscription exposed as a pull-based event stream.

i3ipc.aio dispatches events to callbacks from inside `Connection.main()`.
EventStream runs `main()` as a task and queues window events so the focus
loop can consume them with `async for`.
"""

import asyncio
import logging
from typing import Any, Iterable, List, Optional

from i3ipc import Event
from i3ipc.aio import Connection

from .errors import CompositorConnectionError, SubscriptionError, TransportError
from .models import FocusEvent

logger = logging.getLogger(__name__)

# Queue marker for a clean end of the connection
_CLOSED = object()


class EventStream:
    """Lazy, non-restartable sequence of window events.

    Iteration yields FocusEvent objects, ends when the connection closes,
    and raises TransportError if the connection fails mid-stream.
    """

    def __init__(self, conn: Connection) -> None:
        self.conn = conn
        self._queue: asyncio.Queue = asyncio.Queue()
        self._main_task: Optional[asyncio.Task] = None
        self._finished = False

    def on_window(self, conn: Connection, event: Any) -> None:
        """i3ipc handler for `window` events."""
        self._queue.put_nowait(FocusEvent.from_ipc(event))

    def start(self) -> None:
        """Start the i3ipc read loop."""
        if self._main_task is None:
            self._main_task = asyncio.create_task(self._run_main())

    async def _run_main(self) -> None:
        try:
            await self.conn.main()
        except asyncio.CancelledError:
            self._queue.put_nowait(_CLOSED)
            raise
        except Exception as e:
            logger.error(f"Sway IPC event loop error: {e}")
            self._queue.put_nowait(TransportError(str(e) or type(e).__name__))
        else:
            logger.info("Sway IPC connection closed")
            self._queue.put_nowait(_CLOSED)

    def __aiter__(self) -> "EventStream":
        return self

    async def __anext__(self) -> FocusEvent:
        if self._finished:
            raise StopAsyncIteration

        item = await self._queue.get()
        if item is _CLOSED:
            self._finished = True
            raise StopAsyncIteration
        if isinstance(item, TransportError):
            self._finished = True
            raise item
        return item

    async def close(self) -> None:
        """Stop the i3ipc read loop and end the stream."""
        self._finished = True
        if self._main_task is None:
            return

        if not self._main_task.done():
            self.conn.main_quit()
        try:
            await self._main_task
        except asyncio.CancelledError:
            pass
        self._main_task = None


class EventSubscriber:
    """Connects to the Sway IPC socket and subscribes to window events."""

    def __init__(self, socket_path: Optional[str] = None) -> None:
        """Initialize subscriber.

        Args:
            socket_path: Explicit IPC socket path. None lets i3ipc discover it
                (SWAYSOCK / I3SOCK / `sway --get-socketpath`).
        """
        self.socket_path = socket_path

    async def connect(self) -> Connection:
        """Open the IPC connection.

        Raises:
            CompositorConnectionError: If the socket cannot be found or reached
        """
        try:
            conn = await Connection(socket_path=self.socket_path, auto_reconnect=False).connect()
        except Exception as e:
            raise CompositorConnectionError(str(e) or type(e).__name__) from e

        logger.info("Connected to Sway IPC")
        return conn

    async def subscribe(
        self,
        conn: Connection,
        events: Iterable[Event] = (Event.WINDOW,),
    ) -> EventStream:
        """Subscribe to window events and start streaming them.

        Args:
            conn: Connected i3ipc.aio connection
            events: Event types to subscribe to (only window events are streamed)

        Raises:
            SubscriptionError: If the subscribe request fails
        """
        events = list(events)
        names: List[str] = [getattr(event, "value", str(event)) for event in events]
        try:
            await conn.subscribe(events)
        except Exception as e:
            raise SubscriptionError(names, str(e) or type(e).__name__) from e

        stream = EventStream(conn)
        conn.on(Event.WINDOW, stream.on_window)
        stream.start()

        logger.info(f"Subscribed to Sway IPC events: {', '.join(names)}")
        return stream

    async def open(self) -> EventStream:
        """Connect and subscribe to window events."""
        conn = await self.connect()
        return await self.subscribe(conn, [Event.WINDOW])
