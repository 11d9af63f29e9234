"""Core types for character slicing.

Range requests, storage-unit spans, the code point boundary scanner and
the error types shared by the slicer.
"""

from .errors import InvalidRangeError, MalformedTextError, SliceError
from .ranges import CharRange, UnitSpan

__all__ = ["CharRange", "InvalidRangeError", "MalformedTextError", "SliceError", "UnitSpan"]
