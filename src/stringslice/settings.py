"""Settings dataclass and environment overrides for the slicer."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping

__all__ = ["SlicerSettings"]

LOGGER = logging.getLogger(__name__)
_BOOL_ENV_OVERRIDES: Mapping[str, str] = {
    "STRINGSLICE_VALIDATE_UTF8": "validate_utf8",
}
_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(slots=True, frozen=True)
class SlicerSettings:
    """Behavioural toggles for :class:`~stringslice.slicer.CharSlicer`.

    ``validate_utf8`` checks every scanned sequence of a buffer subject and
    raises :class:`~stringslice.core.errors.MalformedTextError` on bad input.
    When off, well-formed UTF-8 is a precondition of the caller.
    """

    validate_utf8: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> SlicerSettings:
        """Return defaults with any ``STRINGSLICE_*`` environment overrides applied."""

        source = os.environ if environ is None else environ
        overrides: Dict[str, Any] = {}
        for env_name, field_name in _BOOL_ENV_OVERRIDES.items():
            value = source.get(env_name)
            if value is not None:
                overrides[field_name] = value.strip().lower() in _TRUE_VALUES
        return cls().with_overrides(overrides, source="environment")

    def with_overrides(
        self,
        overrides: Mapping[str, Any],
        *,
        source: str = "runtime",
    ) -> SlicerSettings:
        """Return a copy with known, non-``None`` overrides applied."""

        allowed = {field.name for field in fields(SlicerSettings)}
        filtered: Dict[str, Any] = {}
        for key, value in overrides.items():
            if key not in allowed or value is None:
                continue
            filtered[key] = value
        if not filtered:
            return self
        LOGGER.debug("Applying %s settings overrides: %s", source, sorted(filtered))
        return replace(self, **filtered)
