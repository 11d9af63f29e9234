"""Shared pytest fixtures."""

from __future__ import annotations

import pytest

from stringslice import CharSlicer, SlicerSettings

MIXED_TEXTS: tuple[str, ...] = (
    "",
    "string",
    "Ùníc😎de",
    "世界こんにちは",
    "Γεια σου κόσμε",
    "áé",
    "𝔘𝔫𝔦𝔠𝔬𝔡𝔢 and ascii",
)


@pytest.fixture
def slicer() -> CharSlicer:
    return CharSlicer(SlicerSettings())


@pytest.fixture
def validating_slicer() -> CharSlicer:
    return CharSlicer(SlicerSettings(validate_utf8=True))


@pytest.fixture(params=MIXED_TEXTS, ids=lambda text: repr(text))
def mixed_text(request: pytest.FixtureRequest) -> str:
    return request.param
