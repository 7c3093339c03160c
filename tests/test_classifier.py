"""Unit tests for focused-window classification."""

from types import SimpleNamespace
from unittest.mock import Mock

import pytest

from waybar_helper.classifier import classify
from waybar_helper.config import Category
from tests.fixtures.mock_sway import make_container


@pytest.mark.parametrize(
    "shell, expected",
    [
        ("xdg_shell", Category.NATIVE),
        ("xwayland", Category.COMPAT),
        ("layer_shell", Category.UNKNOWN),
        ("", Category.UNKNOWN),
        (None, Category.UNKNOWN),
    ],
)
def test_classify_by_shell(shell, expected):
    assert classify(make_container(shell)) is expected


def test_no_window_is_unknown():
    assert classify(None) is Category.UNKNOWN
    assert classify() is Category.UNKNOWN


def test_shell_attribute_without_ipc_data():
    assert classify(SimpleNamespace(shell="xwayland")) is Category.COMPAT
    assert classify(SimpleNamespace(shell="xdg_shell")) is Category.NATIVE


def test_object_without_shell_is_unknown():
    assert classify(SimpleNamespace(name="workspace 1")) is Category.UNKNOWN


def test_ipc_data_wins_over_attribute():
    container = make_container("xwayland")
    container.shell = "xdg_shell"

    assert classify(container) is Category.COMPAT


def test_classify_does_not_touch_window():
    container = make_container("xdg_shell", app_id="foot")
    before = dict(container.ipc_data)

    classify(container)

    assert container.ipc_data == before
    assert container.mock_calls == []
