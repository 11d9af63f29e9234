"""Character-index slicing over ``str`` and UTF-8 buffers.

Two families share one forward scan of code point boundaries:

* :meth:`CharSlicer.slice` / :meth:`CharSlicer.substring` clamp bounds that
  run past the text to its end. A range whose bounded end precedes its
  start is a caller error and raises :class:`InvalidRangeError`.
* :meth:`CharSlicer.try_slice` / :meth:`CharSlicer.try_substring` return
  ``None`` for inverted ranges, bounds past the character count,
  bounds that are not non-negative integers and unsupported range shapes.

Results borrow from the subject. Buffer subjects yield a ``memoryview``
into the caller's memory; the subject must not be mutated while the view
is alive (a ``bytearray`` refuses to resize while exported). ``str``
subjects yield a ``str`` slice.
"""

from __future__ import annotations

import logging
from itertools import islice
from typing import Any, Iterator

from .core.decoding import as_units, char_count as _char_count, iter_boundaries
from .core.errors import InvalidRangeError
from .core.ranges import CharRange, UnitSpan
from .settings import SlicerSettings

__all__ = [
    "CharSlicer",
    "char_count",
    "locate",
    "slice",
    "substring",
    "try_locate",
    "try_slice",
    "try_substring",
]

LOGGER = logging.getLogger(__name__)

RangeLike = Any


class CharSlicer:
    """Translate character ranges into storage-unit views."""

    def __init__(self, settings: SlicerSettings | None = None) -> None:
        self._settings = settings if settings is not None else SlicerSettings()

    @property
    def settings(self) -> SlicerSettings:
        return self._settings

    def slice(self, text: Any, char_range: RangeLike) -> Any:
        """Return the view of ``text`` covering ``char_range``, clamped to the text.

        Raises:
            InvalidRangeError: If the range is inverted as given or has
                negative or non-integer bounds.
        """

        return self.locate(text, char_range).view(text)

    def try_slice(self, text: Any, char_range: RangeLike) -> Any | None:
        """Return the view of ``text`` covering ``char_range``, or ``None`` if invalid.

        Unsupported subjects still raise ``TypeError`` and, with validation
        enabled, malformed UTF-8 raises :class:`MalformedTextError`.
        """

        span = self.try_locate(text, char_range)
        if span is None:
            return None
        return span.view(text)

    def substring(self, text: Any, start: int, end: int) -> Any:
        """Return the view between characters ``start`` (inclusive) and ``end`` (exclusive)."""

        return self.slice(text, CharRange(start, end))

    def try_substring(self, text: Any, start: int, end: int) -> Any | None:
        """Fallible form of :meth:`substring`."""

        return self.try_slice(text, (start, end))

    def locate(self, text: Any, char_range: RangeLike) -> UnitSpan:
        """Return the storage-unit span for ``char_range`` using clamping rules."""

        request = CharRange.from_value(char_range)
        if request.is_inverted:
            raise InvalidRangeError(
                message=f"Range start {request.start} is greater than end {request.end}",
                details=request.to_dict(),
            )
        start_offset, end_offset = self._scan(text, request)
        if start_offset is None or end_offset is None:
            size = _unit_length(text)
            LOGGER.debug("Clamping character range %s to the end of the text", request.to_tuple())
            if start_offset is None:
                start_offset = size
            end_offset = size
        return UnitSpan(start_offset, end_offset)

    def try_locate(self, text: Any, char_range: RangeLike) -> UnitSpan | None:
        """Return the storage-unit span for ``char_range``, or ``None`` if it is invalid."""

        try:
            request = CharRange.from_value(char_range)
        except InvalidRangeError as exc:
            LOGGER.debug("Rejecting character range %r: %s", char_range, exc.message)
            return None
        except TypeError:
            LOGGER.debug("Rejecting unsupported character range %r", char_range)
            return None
        if request.is_inverted:
            LOGGER.debug("Rejecting inverted character range %s", request.to_tuple())
            return None
        start_offset, end_offset = self._scan(text, request)
        if start_offset is None or end_offset is None:
            LOGGER.debug("Rejecting character range %s past the end of the text", request.to_tuple())
            return None
        return UnitSpan(start_offset, end_offset)

    def char_count(self, text: Any) -> int:
        """Return the number of code points in ``text``."""

        return _char_count(text, validate=self._settings.validate_utf8)

    def _scan(self, text: Any, request: CharRange) -> tuple[int | None, int | None]:
        """Return storage-unit offsets for the request bounds.

        Either offset is ``None`` when its character index lies past the end
        of the text. The scan stops at the later bound; an unbounded end
        resolves to the text length without reading past ``start`` unless
        validation needs to see the rest of the view.
        """

        if isinstance(text, str):
            return _str_offsets(len(text), request)
        validate = self._settings.validate_utf8
        boundaries = iter_boundaries(text, validate=validate)
        start_offset = _nth(boundaries, request.start)
        if start_offset is None:
            return None, None
        if request.end is None:
            if validate:
                return start_offset, _last(boundaries, start_offset)
            return start_offset, _unit_length(text)
        if request.end == request.start:
            return start_offset, start_offset
        return start_offset, _nth(boundaries, request.end - request.start - 1)


def _str_offsets(length: int, request: CharRange) -> tuple[int | None, int | None]:
    # Code points are the storage units of a str.
    if request.start > length:
        return None, None
    end = length if request.end is None else request.end
    return request.start, end if end <= length else None


def _nth(boundaries: Iterator[int], skip: int) -> int | None:
    return next(islice(boundaries, skip, None), None)


def _last(boundaries: Iterator[int], default: int) -> int:
    last = default
    for last in boundaries:
        pass
    return last


def _unit_length(text: Any) -> int:
    if isinstance(text, str):
        return len(text)
    return len(as_units(text))


_DEFAULT_SLICER = CharSlicer()


def slice(text: Any, char_range: RangeLike) -> Any:
    """Module-level :meth:`CharSlicer.slice` using default settings."""

    return _DEFAULT_SLICER.slice(text, char_range)


def try_slice(text: Any, char_range: RangeLike) -> Any | None:
    """Module-level :meth:`CharSlicer.try_slice`."""

    return _DEFAULT_SLICER.try_slice(text, char_range)


def substring(text: Any, start: int, end: int) -> Any:
    """Module-level :meth:`CharSlicer.substring`."""

    return _DEFAULT_SLICER.substring(text, start, end)


def try_substring(text: Any, start: int, end: int) -> Any | None:
    """Module-level :meth:`CharSlicer.try_substring`."""

    return _DEFAULT_SLICER.try_substring(text, start, end)


def locate(text: Any, char_range: RangeLike) -> UnitSpan:
    return _DEFAULT_SLICER.locate(text, char_range)


def try_locate(text: Any, char_range: RangeLike) -> UnitSpan | None:
    return _DEFAULT_SLICER.try_locate(text, char_range)


def char_count(text: Any) -> int:
    return _DEFAULT_SLICER.char_count(text)
