"""Pydantic codecs storing windows as plain strings.

A window ``("a", "b", "c")`` serializes to ``"abc"`` rather than to an array
of characters, and deserializing checks that the string holds exactly the
expected number of characters.
"""

from __future__ import annotations

import logging
from typing import Annotated, Any, Tuple

from pydantic import BeforeValidator, PlainSerializer, TypeAdapter

from substr_iterator.display import to_text
from substr_iterator.substr_iterator import TRIGRAM_SIZE, Substr
from substr_iterator.window_buffer import check_size


class SubstrLengthError(ValueError):
    """Raised when a serialized window does not hold the expected number of characters."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"length mismatch: expected {expected} characters, got {actual}")


def _split_chars(value: Any, size: int) -> Substr:
    if isinstance(value, str):
        chars = tuple(value)
    elif isinstance(value, (tuple, list)):
        chars = tuple(value)
        if not all(isinstance(c, str) and len(c) == 1 for c in chars):
            raise ValueError("window items must be single characters")
    else:
        raise ValueError(f"cannot read a window from {type(value).__name__}")
    if len(chars) != size:
        logging.getLogger(__name__).debug("rejecting %r: %d characters, expected %d", value, len(chars), size)
        raise SubstrLengthError(size, len(chars))
    return chars


def substr_type(size: int) -> Any:
    """Build an annotated window type usable in pydantic models.

    Args:
        size: Number of characters the window must hold

    Returns:
        ``Annotated[tuple[str, ...], ...]`` that validates from a string and
        serializes back to one

    Raises:
        TypeError: If size is not an int
        ValueError: If size is smaller than 1
    """
    check_size(size)
    return Annotated[
        Tuple[str, ...],
        BeforeValidator(lambda value: _split_chars(value, size)),
        PlainSerializer(to_text, return_type=str),
    ]


class SubstrCodec:
    """Converts windows of a fixed size to and from their string form."""

    def __init__(self, size: int) -> None:
        self.size = size
        self.adapter: TypeAdapter[Substr] = TypeAdapter(substr_type(size))

    def dump(self, window: Substr) -> str:
        """Serialize a window to the string of its characters.

        Raises:
            pydantic.ValidationError: If the window does not hold exactly
                ``size`` single characters
        """
        return self.adapter.dump_python(self.adapter.validate_python(window))

    def dump_json(self, window: Substr) -> bytes:
        return self.adapter.dump_json(self.adapter.validate_python(window))

    def load(self, value: Any) -> Substr:
        """Rebuild a window from its serialized string.

        Raises:
            pydantic.ValidationError: If the value is not made of exactly
                ``size`` characters
        """
        return self.adapter.validate_python(value)

    def load_json(self, data: str | bytes) -> Substr:
        return self.adapter.validate_json(data)


class TrigramCodec(SubstrCodec):
    def __init__(self) -> None:
        super().__init__(TRIGRAM_SIZE)


TrigramField = substr_type(TRIGRAM_SIZE)
