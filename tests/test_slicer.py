"""Tests covering character slicing over UTF-8 buffers and str subjects."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

import stringslice
from stringslice import CharRange, CharSlicer, InvalidRangeError, MalformedTextError, UnitSpan


def _utf8(text: str) -> bytes:
    return text.encode("utf-8")


def test_slice_returns_single_emoji() -> None:
    payload = _utf8("Ùníc😎de")

    view = stringslice.slice(payload, (4, 5))

    assert view == _utf8("😎")
    assert len(view) == 4


def test_slice_open_end_keeps_source_bytes() -> None:
    payload = _utf8("世界こんにちは")

    view = stringslice.slice(payload, slice(2, None))

    assert view == _utf8("こんにちは")
    assert view.tobytes() == payload[6:]


def test_substring_matches_range_form() -> None:
    payload = _utf8("Γεια σου κόσμε")

    assert stringslice.substring(payload, 9, 14) == _utf8("κόσμε")
    assert stringslice.substring(payload, 9, 14) == stringslice.slice(payload, (9, 14))


def test_try_slice_rejects_inverted_range() -> None:
    assert stringslice.try_slice(b"string", (4, 2)) is None
    assert stringslice.try_slice("string", (4, 2)) is None
    assert stringslice.try_substring(b"string", 4, 1) is None


def test_slice_raises_for_inverted_range() -> None:
    with pytest.raises(InvalidRangeError) as excinfo:
        stringslice.slice(b"string", (4, 1))

    assert excinfo.value.details == {"start": 4, "end": 1}
    with pytest.raises(InvalidRangeError):
        stringslice.substring("string", 4, 1)


def test_try_slice_rejects_one_past_the_end() -> None:
    payload = _utf8("Ùníc😎de")
    count = stringslice.char_count(payload)

    assert stringslice.try_slice(payload, (count, count + 1)) is None
    assert stringslice.try_slice(payload, (count, count)) == b""
    assert stringslice.try_slice(payload, (count, None)) == b""


def test_empty_text() -> None:
    assert stringslice.slice(b"", (0, None)) == b""
    view = stringslice.try_slice(b"", (0, 0))
    assert view is not None
    assert view == b""
    assert stringslice.try_slice(b"", (0, 1)) is None
    assert stringslice.try_slice("", (0, 0)) == ""


def test_large_range_clamps_to_text() -> None:
    assert stringslice.slice(b"test_string", (0, 500)) == b"test_string"
    assert stringslice.slice("test_string", (0, 500)) == "test_string"


def test_start_past_end_clamps_to_empty_view_at_end() -> None:
    payload = _utf8("Ùníc😎de")

    assert stringslice.slice(payload, (20, 30)) == b""
    assert stringslice.slice(payload, (20, None)) == b""
    assert stringslice.locate(payload, (20, 30)) == UnitSpan(len(payload), len(payload))


@pytest.mark.parametrize(
    ("char_range", "expected"),
    [
        (slice(None), "test_string"),
        (slice(5, None), "string"),
        (slice(None, 8), "test_str"),
        (slice(5, 8), "str"),
        (CharRange.closed(5, 7), "str"),
        (CharRange.after(4, 8), "str"),
        (range(5, 8), "str"),
        ({"start": 5}, "string"),
        ((None, 8), "test_str"),
    ],
)
def test_range_shapes(char_range: object, expected: str) -> None:
    assert stringslice.slice(b"test_string", char_range) == _utf8(expected)
    assert stringslice.slice("test_string", char_range) == expected


def test_try_slice_rejects_malformed_requests() -> None:
    assert stringslice.try_slice(b"string", (-1, 2)) is None
    assert stringslice.try_slice(b"string", slice(0, 4, 2)) is None
    assert stringslice.try_slice(b"string", (1, 2, 3)) is None
    assert stringslice.try_substring(b"string", 0, -3) is None


def test_slice_raises_for_negative_bounds() -> None:
    with pytest.raises(InvalidRangeError):
        stringslice.substring(b"string", -1, 2)


def test_unsupported_range_shape() -> None:
    assert stringslice.try_slice(b"string", {1, 2}) is None
    assert stringslice.try_locate("string", 3.5) is None
    with pytest.raises(TypeError):
        stringslice.slice(b"string", {1, 2})


def test_view_borrows_bytearray() -> None:
    payload = bytearray(_utf8("Ùníc😎de"))

    view = stringslice.slice(payload, (4, 5))

    assert view.obj is payload
    with pytest.raises(BufferError):
        payload.extend(b"!")
    payload[9:10] = b"\x8f"
    assert view.tobytes() == b"\xf0\x9f\x98\x8f"
    view.release()
    payload.extend(b"!")


def test_view_shares_bytes_memory() -> None:
    payload = _utf8("世界こんにちは")

    view = stringslice.slice(payload, (1, 3))

    assert view.obj is payload
    assert view.readonly


def test_boundaries_align_with_code_points(slicer: CharSlicer, mixed_text: str) -> None:
    payload = _utf8(mixed_text)
    count = len(mixed_text)

    for start in range(count + 2):
        for end in range(start, count + 2):
            view = slicer.try_slice(payload, (start, end))
            if end > count:
                assert view is None
                continue
            assert view is not None
            assert view.tobytes().decode("utf-8") == mixed_text[start:end]
            assert slicer.char_count(view) == end - start


def test_lenient_slice_agrees_with_str_slicing(slicer: CharSlicer, mixed_text: str) -> None:
    payload = _utf8(mixed_text)
    count = len(mixed_text)

    for start in range(count + 3):
        for end in range(start, count + 3):
            expected = mixed_text[start:end]
            assert slicer.slice(payload, (start, end)).tobytes().decode("utf-8") == expected
            assert slicer.slice(mixed_text, (start, end)) == expected


def test_empty_range_law(slicer: CharSlicer, mixed_text: str) -> None:
    payload = _utf8(mixed_text)

    for index in range(len(mixed_text) + 1):
        assert slicer.slice(payload, (index, index)) == b""
        assert slicer.try_slice(payload, (index, index)) == b""


def test_unbounded_end_law(slicer: CharSlicer, mixed_text: str) -> None:
    payload = _utf8(mixed_text)
    count = len(mixed_text)

    for start in range(count + 1):
        assert slicer.slice(payload, (start, None)) == slicer.slice(payload, (start, count))
        assert slicer.try_slice(payload, (start, None)) == slicer.try_slice(payload, (start, count))

    assert slicer.slice(payload, (count + 1, None)) == b""
    assert slicer.try_slice(payload, (count + 1, None)) is None


def test_clamping_versus_rejection(slicer: CharSlicer, mixed_text: str) -> None:
    payload = _utf8(mixed_text)
    count = len(mixed_text)

    for end in range(count + 1, count + 4):
        assert slicer.try_slice(payload, (0, end)) is None
        assert slicer.slice(payload, (0, end)) == payload


def test_locate_returns_unit_offsets(slicer: CharSlicer) -> None:
    payload = _utf8("Ùníc😎de")

    span = slicer.locate(payload, (4, 5))

    assert span == UnitSpan(6, 10)
    assert span.length == 4
    assert payload[span.to_slice()] == _utf8("😎")
    assert slicer.try_locate(payload, (5, 4)) is None
    assert slicer.locate("Ùníc😎de", (4, 5)) == UnitSpan(4, 5)


def test_memoryview_subject_with_char_format(slicer: CharSlicer) -> None:
    payload = memoryview(_utf8("Ùníc😎de")).cast("c")

    assert slicer.slice(payload, (0, 2)) == _utf8("Ùn")


def test_rejects_unsupported_subject(slicer: CharSlicer) -> None:
    with pytest.raises(TypeError):
        slicer.slice(12345, (0, 1))


def test_validating_slicer_detects_malformed_text(validating_slicer: CharSlicer) -> None:
    with pytest.raises(MalformedTextError) as excinfo:
        validating_slicer.slice(b"ab\x80cd", (0, None))

    assert excinfo.value.offset == 2
    with pytest.raises(MalformedTextError):
        validating_slicer.try_slice(b"ab\xe0\x80\x80", (0, 4))


def test_validating_slicer_checks_open_ended_tail(validating_slicer: CharSlicer) -> None:
    with pytest.raises(MalformedTextError):
        validating_slicer.slice(b"abc\xf0\x9f", (1, None))


def test_validation_only_covers_scanned_prefix(validating_slicer: CharSlicer) -> None:
    assert validating_slicer.slice(b"ab\x80cd", (0, 2)) == b"ab"


def test_non_validating_slicer_steps_over_malformed_bytes(slicer: CharSlicer) -> None:
    assert slicer.slice(b"ab\x80cd", (3, 5)) == b"cd"


def test_concurrent_slicing_shares_subject(slicer: CharSlicer) -> None:
    text = "Ùníc😎de" * 50
    payload = _utf8(text)
    requests = [(start, start + 7) for start in range(0, len(text) - 7)]

    with ThreadPoolExecutor(max_workers=4) as pool:
        views = list(pool.map(lambda bounds: slicer.slice(payload, bounds), requests))

    for (start, end), view in zip(requests, views):
        assert view.tobytes().decode("utf-8") == text[start:end]
