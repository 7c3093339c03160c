"""Unit tests for window event models."""

from types import SimpleNamespace

import pytest

from waybar_helper.models import FocusEvent, ShellType, WindowChange, get_shell
from tests.fixtures.mock_sway import make_container, make_window_event


class TestWindowChange:
    """Test WindowChange parsing."""

    @pytest.mark.parametrize("change", ["new", "close", "focus", "title", "fullscreen_mode", "move",
                                        "floating", "urgent", "mark"])
    def test_known_changes(self, change):
        assert WindowChange(change).value == change

    def test_unknown_change_maps_to_other(self):
        assert WindowChange("resize") is WindowChange.OTHER
        assert WindowChange(None) is WindowChange.OTHER


class TestFocusEvent:
    """Test FocusEvent construction from i3ipc events."""

    def test_from_ipc_focus(self):
        event = make_window_event("focus", "xwayland")

        focus = FocusEvent.from_ipc(event)

        assert focus.change is WindowChange.FOCUS
        assert focus.is_focus
        assert focus.container is event.container

    def test_from_ipc_other_change(self):
        focus = FocusEvent.from_ipc(make_window_event("title"))

        assert focus.change is WindowChange.TITLE
        assert not focus.is_focus

    def test_from_ipc_without_container(self):
        focus = FocusEvent.from_ipc(SimpleNamespace(change="close"))

        assert focus.container is None
        assert not focus.is_focus


class TestGetShell:
    """Test reading the display protocol from a container."""

    def test_reads_ipc_data(self):
        assert get_shell(make_container("xwayland")) == ShellType.XWAYLAND

    def test_unset_shell(self):
        assert get_shell(make_container(None)) is None

    def test_attribute_fallback(self):
        assert get_shell(SimpleNamespace(shell="xdg_shell")) == ShellType.XDG_SHELL
        assert get_shell(SimpleNamespace()) is None
