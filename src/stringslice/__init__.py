"""Slice text by character (code point) index instead of storage offset."""

from .core import CharRange, InvalidRangeError, MalformedTextError, SliceError, UnitSpan
from .settings import SlicerSettings
from .slicer import (
    CharSlicer,
    char_count,
    locate,
    slice,
    substring,
    try_locate,
    try_slice,
    try_substring,
)

__version__ = "0.1.0"

__all__ = [
    "CharRange",
    "CharSlicer",
    "InvalidRangeError",
    "MalformedTextError",
    "SliceError",
    "SlicerSettings",
    "UnitSpan",
    "char_count",
    "locate",
    "slice",
    "substring",
    "try_locate",
    "try_slice",
    "try_substring",
]
