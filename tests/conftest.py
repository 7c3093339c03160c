"""Pytest configuration and fixtures for waybar helper tests."""

import logging
import signal
from unittest.mock import Mock

import pytest

from tests.fixtures.mock_sway import make_container


@pytest.fixture
def restore_sigint():
    """Put the original SIGINT handler back after the test."""
    previous = signal.getsignal(signal.SIGINT)
    yield
    signal.signal(signal.SIGINT, previous)


@pytest.fixture
def xdg_window() -> Mock:
    return make_container("xdg_shell")


@pytest.fixture
def xwayland_window() -> Mock:
    return make_container("xwayland")


@pytest.fixture(autouse=True)
def reset_package_logging():
    """Drop handlers attached by configure_logging during CLI tests."""
    yield
    logging.getLogger("waybar_helper").handlers.clear()
