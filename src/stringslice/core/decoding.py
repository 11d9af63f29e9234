"""Code point boundary scanning over ``str`` and UTF-8 buffers."""

from __future__ import annotations

from itertools import pairwise
from typing import Any, Iterator

from .errors import MalformedTextError

__all__ = ["as_units", "char_count", "char_indices", "iter_boundaries", "utf8_width"]

_CONTINUATION_MASK = 0xC0
_CONTINUATION_TAG = 0x80


def utf8_width(lead: int) -> int:
    """Return the encoded width implied by a UTF-8 lead byte.

    Bytes that cannot start a sequence report a width of 1 so a scan over
    malformed input still advances.
    """

    if lead < 0x80:
        return 1
    if lead >= 0xF0:
        return 4
    if lead >= 0xE0:
        return 3
    if lead >= 0xC0:
        return 2
    return 1


def as_units(text: Any) -> memoryview:
    """Return a flat unsigned-byte view over a bytes-like subject."""

    view = memoryview(text)
    if view.ndim != 1 or view.itemsize != 1:
        raise TypeError(
            f"Subject buffers must be one-dimensional with one-byte items, got format {view.format!r}"
        )
    if view.format != "B":
        view = view.cast("B")
    return view


def iter_boundaries(text: Any, *, validate: bool = False) -> Iterator[int]:
    """Yield the storage-unit offset of every code point, then the total length.

    Boundary ``i`` is produced only when the text holds at least ``i`` code
    points, so the ``i``-th item is where character ``i`` starts (or the end
    of the text when ``i`` equals the character count).
    """

    if isinstance(text, str):
        return iter(range(len(text) + 1))
    return _scan_utf8(as_units(text), validate)


def char_indices(text: Any, *, validate: bool = False) -> Iterator[tuple[int, str]]:
    """Yield ``(offset, character)`` pairs in order."""

    if isinstance(text, str):
        return enumerate(text)
    units = as_units(text)
    errors = "strict" if validate else "replace"
    return (
        (start, bytes(units[start:end]).decode("utf-8", errors=errors))
        for start, end in pairwise(_scan_utf8(units, validate))
    )


def char_count(text: Any, *, validate: bool = False) -> int:
    """Return the number of code points in ``text``."""

    if isinstance(text, str):
        return len(text)
    return sum(1 for _ in iter_boundaries(text, validate=validate)) - 1


def _scan_utf8(units: memoryview, validate: bool) -> Iterator[int]:
    size = len(units)
    offset = 0
    while offset < size:
        yield offset
        width = utf8_width(units[offset])
        if validate:
            _check_sequence(units, offset, width)
        offset += width
    yield size


def _check_sequence(units: memoryview, offset: int, width: int) -> None:
    lead = units[offset]
    if (lead & _CONTINUATION_MASK) == _CONTINUATION_TAG:
        raise MalformedTextError(
            message=f"Unexpected continuation byte 0x{lead:02x} at offset {offset}",
            offset=offset,
        )
    if offset + width > len(units):
        raise MalformedTextError(
            message=f"Truncated {width}-byte sequence at offset {offset}",
            offset=offset,
        )
    # Overlong forms, surrogates and values past U+10FFFF are left to the codec.
    try:
        bytes(units[offset : offset + width]).decode("utf-8")
    except UnicodeDecodeError as exc:
        raise MalformedTextError(
            message=f"Invalid UTF-8 sequence at offset {offset}",
            details={"reason": exc.reason},
            offset=offset,
        ) from exc
