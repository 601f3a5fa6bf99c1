"""
exceptions.py
Error types raised by the coordinate pipeline.

Everything here derives from ValueError, so callers that only care about
"bad input" can catch that and move on.
"""


class AngleParseError(ValueError):
    """A sexagesimal string could not be turned into degrees."""

    def __init__(self, text, reason):
        self.text = text
        self.reason = reason
        super().__init__(f"cannot parse angle {text!r}: {reason}")


class MalformedAngleError(AngleParseError):
    """Wrong number of fields, out-of-range minutes/seconds, or a signed RA."""


class NumericParseError(AngleParseError):
    """One of the fields is not a finite real number."""


class DomainError(ValueError):
    """A trigonometric step would divide by (nearly) zero."""
