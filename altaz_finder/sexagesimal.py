"""
sexagesimal.py
Sexagesimal angle parsing.

Turns strings such as "05h 34m 31.94s", "+22° 00′ 52.2″" or "-05:23:28"
into decimal degrees, and renders degrees back into that notation.

Conventions:
- Right ascension is returned in degrees (hours * 15), never in hours.
- Declination is returned in degrees, sign preserved.
"""

import enum
import math
import re

import astropy.units as u
from astropy.coordinates import Angle

from altaz_finder.altaz import wrap_angle_deg
from altaz_finder.exceptions import MalformedAngleError, NumericParseError

# whitespace, field markers, and sign characters (ASCII and Unicode minus)
_SEPARATORS = re.compile(r"[\s:°'′\"″hmsdHMSD+\-−]+")
_MINUS_SIGNS = ("-", "−")
_SIGNS = "+-−"


class AngleKind(enum.Enum):
    """Selects how the whole-unit field is scaled."""
    RIGHT_ASCENSION = 15.0
    DECLINATION = 1.0

    @property
    def scale(self):
        return self.value


def _tokenize(text):
    return [tok for tok in _SEPARATORS.split(text) if tok]


def parse_sexagesimal(text, kind):
    """
    Parse a sexagesimal angle into decimal degrees.

    The sign is read from the first non-blank character before the string
    is split, because the splitter discards '+' and '-'.

    Args:
        text (str): Angle such as "05h 34m 31.94s" or "-22° 00′ 52.2″".
        kind (AngleKind): RIGHT_ASCENSION scales hours to degrees (x15).

    Returns:
        float: Angle in decimal degrees.

    Raises:
        MalformedAngleError: Not exactly three fields, minutes/seconds
            outside [0, 60), a sign anywhere but the first character,
            or a negative right ascension.
        NumericParseError: A field is not a finite number.
    """
    stripped = str(text).strip()
    negative = stripped.startswith(_MINUS_SIGNS)
    if any(ch in _SIGNS for ch in stripped[1:]):
        raise MalformedAngleError(text, "a sign is only allowed in front of the angle")

    tokens = _tokenize(stripped)
    if len(tokens) != 3:
        raise MalformedAngleError(
            text, f"expected 3 fields (whole, minutes, seconds), got {len(tokens)}")

    values = []
    for tok in tokens:
        try:
            value = float(tok)
        except ValueError:
            raise NumericParseError(text, f"{tok!r} is not a number") from None
        if not math.isfinite(value):
            raise NumericParseError(text, f"{tok!r} is not finite")
        values.append(value)

    whole, minutes, seconds = values
    if minutes >= 60.0 or seconds >= 60.0:
        raise MalformedAngleError(text, "minutes and seconds must be below 60")

    if negative and kind is AngleKind.RIGHT_ASCENSION:
        raise MalformedAngleError(text, "right ascension cannot be negative")

    degrees = (whole + minutes / 60.0 + seconds / 3600.0) * kind.scale
    return -degrees if negative else degrees


def parse_ra(text):
    """Right ascension string -> degrees."""
    return parse_sexagesimal(text, AngleKind.RIGHT_ASCENSION)


def parse_dec(text):
    """Declination string -> degrees."""
    return parse_sexagesimal(text, AngleKind.DECLINATION)


def format_sexagesimal(degrees, kind):
    """
    Render decimal degrees as "05h 34m 31.94s" (RA) or "+22° 00′ 52.2″" (Dec).

    Values that round to zero at the displayed precision print as zero,
    so a tiny negative declination shows "+00° 00′ 00.0″".
    """
    if kind is AngleKind.RIGHT_ASCENSION:
        # 0.01s of time is 1/24000 degree; 24h 00m 00.00s folds to 00h
        if round(wrap_angle_deg(degrees) * 24000) >= 360 * 24000:
            degrees = 0.0
        angle = Angle(degrees, u.deg).wrap_at(360 * u.deg)
        return angle.to_string(unit=u.hourangle, sep=("h ", "m ", "s"), precision=2, pad=True)

    # 0.1 arcsec is 1/36000 degree
    if round(degrees * 36000) == 0:
        degrees = 0.0
    return Angle(degrees, u.deg).to_string(
        unit=u.deg, sep=("° ", "′ ", "″"), precision=1, pad=True, alwayssign=True)
