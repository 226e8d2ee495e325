from __future__ import annotations

from typing import Iterable


def to_text(window: Iterable[str]) -> str:
    """Render a window as the string of its characters, in order.

    >>> to_text(("w", "h", "a"))
    'wha'
    """
    return "".join(window)
