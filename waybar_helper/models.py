"""Window and event models for Sway IPC window events."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class ShellType(str, Enum):
    """Values of the `shell` property Sway reports for view containers."""

    XDG_SHELL = "xdg_shell"
    XWAYLAND = "xwayland"


class WindowChange(str, Enum):
    """Change kinds carried by Sway `window` events.

    Anything Sway adds later maps to OTHER.
    """

    NEW = "new"
    CLOSE = "close"
    FOCUS = "focus"
    TITLE = "title"
    FULLSCREEN_MODE = "fullscreen_mode"
    MOVE = "move"
    FLOATING = "floating"
    URGENT = "urgent"
    MARK = "mark"
    OTHER = "other"

    @classmethod
    def _missing_(cls, value: object) -> "WindowChange":
        return cls.OTHER


def get_shell(container: Any) -> Optional[str]:
    """Get the display protocol of a container.

    i3ipc keeps Sway-only properties in the raw reply, so read `ipc_data`
    first and fall back to a plain `shell` attribute.

    Args:
        container: i3ipc Con (or any object exposing `shell`)

    Returns:
        The shell string ("xdg_shell", "xwayland", ...) or None if unset
    """
    ipc_data = getattr(container, "ipc_data", None)
    if isinstance(ipc_data, dict):
        return ipc_data.get("shell")
    return getattr(container, "shell", None)


@dataclass(frozen=True)
class FocusEvent:
    """A window event as seen by the focus loop.

    Only `change` and the container's shell are ever consumed.
    """

    change: WindowChange
    container: Optional[Any] = None

    @property
    def is_focus(self) -> bool:
        return self.change is WindowChange.FOCUS

    @classmethod
    def from_ipc(cls, event: Any) -> "FocusEvent":
        """Build from an i3ipc WindowEvent."""
        return cls(
            change=WindowChange(getattr(event, "change", None)),
            container=getattr(event, "container", None),
        )
