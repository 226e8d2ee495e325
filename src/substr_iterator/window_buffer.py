from __future__ import annotations

from collections import deque


def check_size(size: int) -> int:
    """Return ``size`` if it is a usable window size.

    Raises:
        TypeError: If size is not an int
        ValueError: If size is smaller than 1
    """
    if isinstance(size, bool) or not isinstance(size, int):
        raise TypeError(f"window size must be an int (got {type(size).__name__})")
    if size < 1:
        raise ValueError(f"window size must be >= 1 (got {size})")
    return size


class WindowBuffer:
    """Fixed-capacity buffer holding the most recent characters of a text.

    Index 0 is the oldest retained character and the last index is the most
    recently pushed one. Once the buffer holds ``size`` characters, every push
    evicts the oldest character.
    """

    def __init__(self, size: int) -> None:
        """Initialize an empty buffer.

        Args:
            size: Capacity of the buffer, must be at least 1

        Raises:
            TypeError: If size is not an int
            ValueError: If size is smaller than 1
        """
        self.size = check_size(size)
        self._chars: deque[str] = deque(maxlen=self.size)

    def push(self, char: str) -> None:
        """Append a character, dropping the oldest one when already full."""
        self._chars.append(char)

    def snapshot(self) -> tuple[str, ...]:
        """Return a copy of the buffered characters, oldest first."""
        return tuple(self._chars)

    @property
    def is_full(self) -> bool:
        return len(self._chars) == self.size

    def clear(self) -> None:
        self._chars.clear()

    def __len__(self) -> int:
        return len(self._chars)

    def __repr__(self) -> str:
        return f"WindowBuffer(size={self.size}, chars={self.snapshot()!r})"
