# volspec/core/errors.py
from __future__ import annotations

from typing import Optional


class UnitParseError(ValueError):
    pass


class SpecValidationError(ValueError):
    """A volume option value that cannot be accepted.

    ``key`` and ``value`` identify the offending option when known; the
    original parse error (if any) is chained as ``__cause__``.
    """

    def __init__(self, message: str, *, key: Optional[str] = None, value: Optional[str] = None):
        super().__init__(message)
        self.key = key
        self.value = value
