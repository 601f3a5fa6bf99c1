"""Current altitude/azimuth of celestial objects given in sexagesimal RA/Dec."""

from altaz_finder.altaz import HorizontalPosition, to_alt_az
from altaz_finder.astro_time import days_since_j2000, local_sidereal_time, utc_now
from altaz_finder.exceptions import AngleParseError, DomainError, MalformedAngleError, NumericParseError
from altaz_finder.location import GeoCoordinate
from altaz_finder.sexagesimal import AngleKind, parse_sexagesimal
from altaz_finder.target import CelestialObject

__version__ = "0.1.0"
