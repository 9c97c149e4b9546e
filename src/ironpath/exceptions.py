"""Exception hierarchy for the IronPath engine."""

from __future__ import annotations


class IronPathError(Exception):
    """Base exception for all ironpath errors."""


class InvalidInput(IronPathError, ValueError):
    """A caller-supplied value is malformed (non-finite, out of range, unknown)."""


class InvalidConfiguration(IronPathError, ValueError):
    """A configuration value makes every output meaningless (e.g. step <= 0)."""


class InsufficientData(IronPathError):
    """No usable trial data to derive the requested value."""

    def __init__(self, message: str, missing: tuple[str, ...] = ()) -> None:
        super().__init__(message)
        self.missing = missing
