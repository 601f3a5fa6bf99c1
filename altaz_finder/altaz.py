"""
altaz.py
Alt/Az coordinate utilities.

This module converts an hour angle and declination into horizontal
coordinates (Altitude/Azimuth) for a given observer, along with related
quantities such as airmass and parallactic angle.

All angles are in degrees unless otherwise stated.

Conventions:
- Latitude: positive North
- Azimuth: 0° = North, increasing eastward (astronomical convention)
"""

import logging
from dataclasses import dataclass
from math import sin, cos, asin, acos, atan2, radians, degrees

import numpy as np

from altaz_finder.exceptions import DomainError

logger = logging.getLogger(__name__)

# below this, cos(latitude) or cos(altitude) is treated as zero
_COS_EPSILON = 1e-12

# -----------------------------------------------------------------------------
# UTILITY FUNCTIONS
# -----------------------------------------------------------------------------

def wrap_angle_deg(angle):
    """
    Wrap an angle to the range [0, 360).

    Args:
        angle (float): Angle in degrees.

    Returns:
        float: Wrapped angle in degrees.
    """
    a = angle % 360.0
    # tiny negative inputs round up to exactly 360.0
    return 0.0 if a >= 360.0 else a

def wrap_angle_pm180(angle):
    """
    Wrap an angle to the range [-180, +180).

    Args:
        angle (float): Angle in degrees.

    Returns:
        float: Wrapped angle in degrees.
    """
    a = wrap_angle_deg(angle)
    return a - 360.0 if a >= 180.0 else a

def _clamp_unit(x):
    return max(-1.0, min(1.0, x))

# -----------------------------------------------------------------------------
# AIR MASS & PARALLACTIC ANGLE
# -----------------------------------------------------------------------------

def airmass_kasten_young(alt_deg):
    """
    Compute airmass using the Kasten & Young (1989) model.

    Valid for altitudes above the horizon.

    Args:
        alt_deg (float): Altitude in degrees.

    Returns:
        float: Airmass value, or infinity if altitude ≤ 0°.
    """
    if alt_deg <= 0:
        return np.inf

    z = 90.0 - alt_deg
    return 1.0 / (cos(radians(z)) + 0.50572 * (6.07995 + alt_deg)**-1.6364)

def parallactic_angle(ha_deg, dec_deg, location):
    """
    Angle at the object between the direction to the celestial pole and
    the direction to the zenith, in degrees (-180, 180].

    Zero on the meridian, positive once the object has crossed to the west
    (ha in 0..180), negative while it is still rising in the east.

    Args:
        ha_deg (float): Hour angle in degrees.
        dec_deg (float): Declination in degrees.
        location (GeoCoordinate): Observer; only the latitude is used.
    """
    ha_r = radians(ha_deg)
    dec_r = radians(dec_deg)
    lat_r = radians(location.lat_deg)

    # Meeus 14.1 scaled by cos(lat), which keeps it finite at the poles
    y = sin(ha_r) * cos(lat_r)
    x = sin(lat_r) * cos(dec_r) - cos(lat_r) * sin(dec_r) * cos(ha_r)
    return degrees(atan2(y, x))

# -----------------------------------------------------------------------------
# ALT/AZ CORE
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class HorizontalPosition:
    """Altitude/azimuth pair for one instant. Never cached."""
    alt_deg: float
    az_deg: float

    @property
    def airmass(self):
        return airmass_kasten_young(self.alt_deg)

    @property
    def above_horizon(self):
        return self.alt_deg > 0.0

    def __str__(self):
        return f"alt {self.alt_deg:+.4f}°  az {self.az_deg:.4f}°"

def to_alt_az(ha_deg, dec_deg, location):
    """
    Convert hour angle / declination to horizontal coordinates.

    Args:
        ha_deg (float): Hour angle in degrees (west of the meridian positive).
        dec_deg (float): Declination in degrees.
        location (GeoCoordinate): Observer; only the latitude is used.

    Returns:
        HorizontalPosition: Altitude and azimuth (0° = North, increasing East).
            When the object sits at the zenith or nadir the azimuth is
            undefined and 0.0 is returned.

    Raises:
        DomainError: If the observer is at a geographic pole, where the
            azimuth formula divides by cos(latitude) = 0.
    """
    ha_r = radians(ha_deg)
    dec_r = radians(dec_deg)
    lat_r = radians(location.lat_deg)

    cos_lat = cos(lat_r)
    if abs(cos_lat) < _COS_EPSILON:
        raise DomainError(
            f"azimuth is undefined for an observer at latitude {location.lat_deg}")

    # Altitude
    alt_r = asin(_clamp_unit(
        sin(dec_r) * sin(lat_r) +
        cos(dec_r) * cos_lat * cos(ha_r)
    ))
    alt_deg = degrees(alt_r)

    cos_alt = cos(alt_r)
    if abs(cos_alt) < _COS_EPSILON:
        logger.debug("object at zenith/nadir (alt=%.6f), azimuth set to 0", alt_deg)
        return HorizontalPosition(alt_deg=alt_deg, az_deg=0.0)

    # Azimuth, acos gives 0..180; the side of the meridian picks the half
    az_prelim = degrees(acos(_clamp_unit(
        (sin(dec_r) - sin(alt_r) * sin(lat_r)) / (cos_alt * cos_lat)
    )))

    if sin(ha_r) < 0:
        az_deg = az_prelim
    else:
        az_deg = 360.0 - az_prelim

    return HorizontalPosition(alt_deg=alt_deg, az_deg=wrap_angle_deg(az_deg))
