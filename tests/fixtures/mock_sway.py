"""Mock Sway IPC objects for waybar helper tests."""

import asyncio
from types import SimpleNamespace
from typing import Any, Callable, Iterable, List, Optional
from unittest.mock import Mock

from i3ipc import Event


def make_container(shell: Optional[str] = "xdg_shell", **props: Any) -> Mock:
    """Mock i3ipc Con whose raw IPC reply carries the given shell."""
    ipc_data = dict(props)
    if shell is not None:
        ipc_data["shell"] = shell
    container = Mock()
    container.ipc_data = ipc_data
    return container


def make_window_event(change: str = "focus", shell: Optional[str] = "xdg_shell") -> SimpleNamespace:
    """Mock i3ipc WindowEvent."""
    return SimpleNamespace(change=change, container=make_container(shell))


class FakeEventStream:
    """Stand-in for EventStream fed from a list.

    Items that are exceptions are raised instead of yielded. `before` is
    called with the item index just before each item is delivered.
    """

    def __init__(self, items: Iterable[Any], before: Optional[Callable[[int], None]] = None):
        self.items = list(items)
        self.before = before
        self.closed = False
        self.delivered = 0

    def __aiter__(self):
        return self._iterate()

    async def _iterate(self):
        for index, item in enumerate(self.items):
            if self.before:
                self.before(index)
            if isinstance(item, BaseException):
                raise item
            self.delivered += 1
            yield item

    async def close(self) -> None:
        self.closed = True


class FakeSubscriber:
    """Stand-in for EventSubscriber returning a prepared stream."""

    def __init__(self, stream: Optional[FakeEventStream] = None, error: Optional[Exception] = None):
        self.stream = stream if stream is not None else FakeEventStream([])
        self.error = error
        self.opened = False

    async def open(self) -> FakeEventStream:
        self.opened = True
        if self.error is not None:
            raise self.error
        return self.stream


class FakeSwayConnection:
    """Minimal i3ipc.aio.Connection replacement.

    `main()` blocks until `main_quit()` is called; `dispatch()` feeds a
    window event to the registered handler.
    """

    def __init__(self, subscribe_error: Optional[Exception] = None):
        self.subscribe_error = subscribe_error
        self.subscriptions: List[Any] = []
        self.handlers = {}
        self.quit_calls = 0
        self._quit: Optional[asyncio.Future] = None

    def _future(self) -> asyncio.Future:
        if self._quit is None:
            self._quit = asyncio.get_running_loop().create_future()
        return self._quit

    async def subscribe(self, events, force: bool = False) -> None:
        if self.subscribe_error is not None:
            raise self.subscribe_error
        self.subscriptions.extend(events)

    def on(self, event, handler) -> None:
        self.handlers[event] = handler

    async def main(self) -> None:
        await self._future()

    def main_quit(self, _error: Optional[Exception] = None) -> None:
        self.quit_calls += 1
        future = self._future()
        if future.done():
            return
        if _error is not None:
            future.set_exception(_error)
        else:
            future.set_result(None)

    def dispatch(self, event: Any) -> None:
        self.handlers[Event.WINDOW](self, event)
