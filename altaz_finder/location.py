"""
location.py
Observer location on the Earth's surface.

Conventions:
- Latitude: positive North, [-90, 90]
- Longitude: positive East of Greenwich, stored in [-180, 180)
"""

import math
from dataclasses import dataclass

from altaz_finder.altaz import wrap_angle_pm180


@dataclass(frozen=True)
class GeoCoordinate:
    lat_deg: float
    lon_deg: float

    def __post_init__(self):
        lat = float(self.lat_deg)
        lon = float(self.lon_deg)
        if not (math.isfinite(lat) and math.isfinite(lon)):
            raise ValueError(f"latitude/longitude must be finite, got ({lat}, {lon})")
        if not -90.0 <= lat <= 90.0:
            raise ValueError(f"latitude {lat} outside [-90, 90]")
        # 0..360 inputs (e.g. 280 for 80°W) are folded into [-180, 180)
        object.__setattr__(self, "lat_deg", lat)
        object.__setattr__(self, "lon_deg", wrap_angle_pm180(lon))

    def __str__(self):
        ns = "N" if self.lat_deg >= 0 else "S"
        ew = "E" if self.lon_deg >= 0 else "W"
        return f"{abs(self.lat_deg):.4f}°{ns} {abs(self.lon_deg):.4f}°{ew}"
