"""
astro_time.py
Clock access and sidereal time.

The system clock is read in exactly one place (utc_now); everything else
takes the instant as an argument so a query can be replayed with a fixed
time.

Time: UTC throughout. Longitude: positive East of Greenwich.
"""

import logging
from datetime import datetime, timezone

from astropy.time import Time

from altaz_finder.altaz import wrap_angle_deg

logger = logging.getLogger(__name__)

# J2000.0 reference epoch
J2000 = datetime(2000, 1, 1, 12, 0, 0, tzinfo=timezone.utc)

SECONDS_PER_DAY = 86400.0


def utc_now():
    """Current instant as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def to_utc_datetime(time_utc):
    """
    Normalize an instant to an aware UTC datetime.

    Args:
        time_utc (datetime, str or astropy.time.Time): Naive datetimes and
            strings are taken to be UTC.

    Returns:
        datetime: Timezone-aware UTC datetime.
    """
    if isinstance(time_utc, datetime):
        if time_utc.tzinfo is None:
            return time_utc.replace(tzinfo=timezone.utc)
        return time_utc.astimezone(timezone.utc)

    t = Time(time_utc, scale="utc")
    return t.to_datetime(timezone=timezone.utc)


def days_since_j2000(now):
    """
    Fractional days elapsed since J2000.0.

    Args:
        now: Instant accepted by to_utc_datetime().

    Returns:
        float: Days since 2000-01-01 12:00 UTC (negative before the epoch).
    """
    now = to_utc_datetime(now)
    return (now - J2000).total_seconds() / SECONDS_PER_DAY


def local_sidereal_time(days_j2000, longitude_deg, now):
    """
    Approximate Local Sidereal Time.

        LST = 100.46 + 0.985647 * d + longitude + 15 * UT

    where d is days since J2000 and UT is the UTC hour plus minutes/60.
    Good to a fraction of a degree over a few decades around J2000; treat
    it as best effort, not an arcsecond-level ephemeris.

    Args:
        days_j2000 (float): Output of days_since_j2000() for the same instant.
        longitude_deg (float): Observer longitude (positive East).
        now: Instant accepted by to_utc_datetime().

    Returns:
        float: Local Sidereal Time in degrees [0, 360).
    """
    now = to_utc_datetime(now)
    ut_hours = now.hour + now.minute / 60.0

    lst = wrap_angle_deg(
        100.46 + 0.985647 * days_j2000 + longitude_deg + 15.0 * ut_hours + 360.0
    )
    logger.debug("d=%.6f lon=%.4f UT=%.4fh -> LST=%.4f", days_j2000, longitude_deg, ut_hours, lst)
    return lst
