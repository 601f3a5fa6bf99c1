"""
target.py
A named celestial object with fixed equatorial coordinates.

Right ascension is held in degrees (already x15), never in hours.
"""

import logging
import math
from dataclasses import dataclass

from altaz_finder.altaz import to_alt_az, wrap_angle_deg
from altaz_finder.astro_time import days_since_j2000, local_sidereal_time, to_utc_datetime, utc_now
from altaz_finder.sexagesimal import AngleKind, format_sexagesimal, parse_dec, parse_ra

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CelestialObject:
    name: str
    ra_deg: float
    dec_deg: float

    def __post_init__(self):
        ra = float(self.ra_deg)
        dec = float(self.dec_deg)
        if not (math.isfinite(ra) and 0.0 <= ra < 360.0):
            raise ValueError(f"{self.name}: right ascension {ra} outside [0, 360)")
        if not (math.isfinite(dec) and -90.0 <= dec <= 90.0):
            raise ValueError(f"{self.name}: declination {dec} outside [-90, 90]")
        object.__setattr__(self, "ra_deg", ra)
        object.__setattr__(self, "dec_deg", dec)

    @classmethod
    def from_sexagesimal(cls, name, ra_text, dec_text):
        """Build from strings like "05h 34m 31.94s" and "+22° 00′ 52.2″"."""
        return cls(name, parse_ra(ra_text), parse_dec(dec_text))

    def hour_angle(self, location, now):
        """Hour angle in degrees [0, 360) for the given observer and instant."""
        days = days_since_j2000(now)
        lst = local_sidereal_time(days, location.lon_deg, now)
        ha = lst - self.ra_deg
        if ha < 0:
            ha += 360.0
        return wrap_angle_deg(ha)

    def current_alt_az(self, location, now=None):
        """
        Altitude/azimuth of this object as seen from `location`.

        Args:
            location (GeoCoordinate): Observer.
            now: Instant to evaluate at. The system clock is read once
                when omitted, and that single instant feeds every step.

        Returns:
            HorizontalPosition
        """
        now = utc_now() if now is None else to_utc_datetime(now)
        ha = self.hour_angle(location, now)
        position = to_alt_az(ha, self.dec_deg, location)
        logger.debug("%s at %s: ha=%.4f -> %s", self.name, now.isoformat(), ha, position)
        return position

    def summary(self):
        ra = format_sexagesimal(self.ra_deg, AngleKind.RIGHT_ASCENSION)
        dec = format_sexagesimal(self.dec_deg, AngleKind.DECLINATION)
        return f"{self.name}  RA {ra} ({self.ra_deg:.4f}°)  Dec {dec} ({self.dec_deg:+.4f}°)"

    def __str__(self):
        return self.summary()
