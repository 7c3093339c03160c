"""Classify the focused window by display protocol."""

from typing import Any, Optional

from .config import Category
from .models import ShellType, get_shell


def classify(window: Optional[Any] = None) -> Category:
    """Map a focused window to its output category.

    xdg-shell views are native Wayland, xwayland views are compat, and
    everything else (no window yet, layer surfaces, unset shell) is unknown.
    """
    if window is None:
        return Category.UNKNOWN

    shell = get_shell(window)
    if shell == ShellType.XDG_SHELL:
        return Category.NATIVE
    if shell == ShellType.XWAYLAND:
        return Category.COMPAT
    return Category.UNKNOWN
