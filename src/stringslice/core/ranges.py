"""Structured helpers for representing character ranges and storage-unit spans."""

from __future__ import annotations

import operator
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Iterator

from .decoding import as_units
from .errors import InvalidRangeError


@dataclass(slots=True, frozen=True)
class CharRange:
    """Half-open range of character (code point) indices.

    ``end`` of ``None`` means the range runs through the end of the text.
    Inverted bounds are kept as given so callers can decide whether to
    reject them.
    """

    start: int = 0
    end: int | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", self._coerce_index(self.start, "start"))
        if self.end is not None:
            object.__setattr__(self, "end", self._coerce_index(self.end, "end"))

    @staticmethod
    def _coerce_index(value: Any, label: str) -> int:
        if isinstance(value, bool):
            raise InvalidRangeError(
                message=f"CharRange {label} must be an integer",
                details={label: value},
            )
        try:
            number = operator.index(value)
        except TypeError as exc:
            raise InvalidRangeError(
                message=f"CharRange {label} must be an integer",
                details={label: repr(value)},
            ) from exc
        if number < 0:
            raise InvalidRangeError(
                message=f"CharRange {label} must not be negative",
                details={label: number},
            )
        return number

    def __iter__(self) -> Iterator[int | None]:
        yield self.start
        yield self.end

    @property
    def is_bounded(self) -> bool:
        return self.end is not None

    @property
    def is_inverted(self) -> bool:
        """Return ``True`` when a bounded end precedes the start."""

        return self.end is not None and self.end < self.start

    @property
    def is_empty(self) -> bool:
        """Return ``True`` when the range collapses to a single boundary."""

        return self.end == self.start

    @property
    def length(self) -> int | None:
        """Return the number of characters requested, or ``None`` when unbounded."""

        if self.end is None:
            return None
        return self.end - self.start

    def resolve(self, char_count: int) -> tuple[int, int]:
        """Return ``(start, end)`` with an unbounded end replaced by ``char_count``."""

        end = char_count if self.end is None else self.end
        return (self.start, end)

    def to_tuple(self) -> tuple[int, int | None]:
        return (self.start, self.end)

    def to_dict(self) -> dict[str, int | None]:
        return {"start": self.start, "end": self.end}

    def to_slice(self) -> slice:
        """Return the equivalent builtin ``slice`` over code points."""

        return slice(self.start, self.end)

    @classmethod
    def closed(cls, start: int, last: int) -> CharRange:
        """Build a range whose ``last`` character is included."""

        return cls(start, cls._coerce_index(last, "last") + 1)

    @classmethod
    def after(cls, index: int, end: int | None = None) -> CharRange:
        """Build a range that starts just past character ``index``."""

        return cls(cls._coerce_index(index, "index") + 1, end)

    @classmethod
    def full(cls) -> CharRange:
        """Return the range covering the whole text."""

        return cls(0, None)

    @classmethod
    def from_value(cls, value: Any) -> CharRange:
        """Coerce ``value`` into a :class:`CharRange`.

        Accepts an existing range, a builtin ``slice`` or ``range`` with unit
        step, a ``(start, end)`` pair, or a mapping with ``start``/``end``
        keys. ``None`` for either bound of a slice, pair, or mapping follows
        the builtin slice meaning: start of text, or unbounded end.
        """

        if isinstance(value, CharRange):
            return value
        if isinstance(value, slice):
            cls._check_step(value.step)
            start = 0 if value.start is None else value.start
            return cls(start, value.stop)
        if isinstance(value, range):
            cls._check_step(value.step)
            return cls(value.start, value.stop)
        if isinstance(value, Mapping):
            start = value.get("start")
            return cls(0 if start is None else start, value.get("end"))
        if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
            seq = list(value)
            if len(seq) != 2:
                raise InvalidRangeError(
                    message="CharRange sequences must have exactly two entries",
                    details={"length": len(seq)},
                )
            start, end = seq
            return cls(0 if start is None else start, end)
        raise TypeError(f"Unsupported CharRange input: {type(value).__name__}")

    @staticmethod
    def _check_step(step: Any) -> None:
        if step is not None and step != 1:
            raise InvalidRangeError(
                message="Character slices only support a step of 1",
                details={"step": step},
            )


@dataclass(slots=True, frozen=True)
class UnitSpan:
    """Storage-unit offsets covering a run of whole code points."""

    start: int
    end: int

    def __iter__(self) -> Iterator[int]:
        yield self.start
        yield self.end

    @property
    def length(self) -> int:
        """Return the number of storage units covered."""

        return self.end - self.start

    def to_tuple(self) -> tuple[int, int]:
        return (self.start, self.end)

    def to_slice(self) -> slice:
        return slice(self.start, self.end)

    def view(self, text: Any) -> Any:
        """Return the borrowed portion of ``text`` covered by this span.

        Buffers yield a ``memoryview`` sharing the subject's memory; ``str``
        subjects yield the corresponding ``str`` slice.
        """

        if isinstance(text, str):
            return text[self.start : self.end]
        return as_units(text)[self.start : self.end]


__all__ = ["CharRange", "UnitSpan"]
