"""Error types raised at the parameter-construction boundary."""

from __future__ import annotations


class InvalidParameter(ValueError):
    """A required field is missing, not a number, or outside its domain.

    ``field`` is the flat parameter name (e.g. ``"area_km2"``) so callers
    can attach the message to the offending form input.
    """

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(f"{field}: {reason}")
