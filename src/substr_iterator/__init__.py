# SPDX-FileCopyrightText: 2025-present Ron M <ramayer+git@gmail.com>
#
# SPDX-License-Identifier: MIT

from .display import to_text
from .serialization import SubstrCodec, SubstrLengthError, TrigramCodec, TrigramField, substr_type
from .substr_iterator import (
    TRIGRAM_SIZE,
    IteratorState,
    Substr,
    SubstrIterator,
    Trigram,
    TrigramIterator,
    substrs,
    trigrams,
)
from .window_buffer import WindowBuffer

__all__ = [
    "TRIGRAM_SIZE",
    "IteratorState",
    "Substr",
    "SubstrCodec",
    "SubstrIterator",
    "SubstrLengthError",
    "Trigram",
    "TrigramCodec",
    "TrigramField",
    "TrigramIterator",
    "WindowBuffer",
    "substr_type",
    "substrs",
    "to_text",
    "trigrams",
]
