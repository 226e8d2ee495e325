from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable, Iterator, Tuple

from substr_iterator.window_buffer import WindowBuffer

TRIGRAM_SIZE = 3

Substr = Tuple[str, ...]
Trigram = Tuple[str, str, str]


class IteratorState(Enum):
    FILLING = "filling"
    READY = "ready"
    EXHAUSTED = "exhausted"


class SubstrIterator(Iterator[Substr]):
    """Iterator over every run of ``size`` consecutive characters of a text.

    The iterator keeps a window of characters from the source and slides it
    by one character per step, so a text of ``L`` characters produces
    ``L - size + 1`` windows, or none at all when it is shorter than ``size``.
    Each window is returned as a tuple, independent of the internal buffer.

    >>> list(SubstrIterator("abcd", 3))
    [('a', 'b', 'c'), ('b', 'c', 'd')]
    """

    def __init__(self, source: Iterable[str], size: int) -> None:
        """Initialize the iterator.

        Args:
            source: Text (or any iterable of single characters) to slide over
            size: Number of characters in each window, must be at least 1

        Raises:
            TypeError: If source is a bytes-like object or size is not an int
            ValueError: If size is smaller than 1
        """
        if isinstance(source, (bytes, bytearray, memoryview)):
            raise TypeError("source must be decoded text, not bytes")
        self.buffer = WindowBuffer(size)
        self.size = self.buffer.size
        self.iter: Iterator[str] = iter(source)
        self._state = IteratorState.FILLING
        self._produced = 0
        self.logger = logging.getLogger(__name__)

    @classmethod
    def from_str(cls, text: str, size: int) -> SubstrIterator:
        return cls(text, size)

    @property
    def state(self) -> IteratorState:
        return self._state

    @property
    def produced(self) -> int:
        """Number of windows returned so far."""
        return self._produced

    @property
    def exhausted(self) -> bool:
        return self._state is IteratorState.EXHAUSTED

    def __iter__(self) -> SubstrIterator:
        """Return self as iterator.

        Unlike a fresh call on the source, this does not rewind: a partially
        consumed iterator carries on from where it stopped.
        """
        return self

    def __next__(self) -> Substr:
        """Slide the window by one character and return it.

        Returns:
            Tuple of ``size`` characters, oldest first

        Raises:
            StopIteration: When the source has no more characters, and on
                every call after that
            TypeError: If the source produces something other than a
                single-character string
        """
        if self._state is IteratorState.EXHAUSTED:
            raise StopIteration
        if self._state is IteratorState.FILLING:
            while not self.buffer.is_full:
                self._pull()
            self._state = IteratorState.READY
        else:
            self._pull()
        self._produced += 1
        return self.buffer.snapshot()

    def _pull(self) -> None:
        try:
            char = next(self.iter)
        except StopIteration:
            self._exhaust()
            raise
        if not isinstance(char, str) or len(char) != 1:
            raise TypeError(f"source items must be single characters (got {char!r})")
        self.buffer.push(char)

    def _exhaust(self) -> None:
        self.logger.debug(
            "source exhausted after %d window(s) of size %d (state was %s)",
            self._produced,
            self.size,
            self._state.value,
        )
        self._state = IteratorState.EXHAUSTED
        self.buffer.clear()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self.size}, state={self._state.value}, produced={self._produced})"


class TrigramIterator(SubstrIterator):
    """A :class:`SubstrIterator` producing windows of three characters.

    >>> next(TrigramIterator("whatever"))
    ('w', 'h', 'a')
    """

    def __init__(self, source: Iterable[str]) -> None:
        super().__init__(source, TRIGRAM_SIZE)

    @classmethod
    def from_str(cls, text: str) -> TrigramIterator:  # type: ignore[override]
        return cls(text)


def substrs(text: Iterable[str], size: int) -> Iterator[Substr]:
    """Yield every window of ``size`` consecutive characters of ``text``."""
    yield from SubstrIterator(text, size)


def trigrams(text: Iterable[str]) -> Iterator[Trigram]:
    yield from TrigramIterator(text)
