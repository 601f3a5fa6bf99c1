from altaz_finder.location import GeoCoordinate
from altaz_finder.target import CelestialObject

# ----------------------------------------------------------------------
# Observer location
# ----------------------------------------------------------------------
lat = 35.0   # degrees North
lon = -80.0  # degrees East

location = GeoCoordinate(lat, lon)

# ----------------------------------------------------------------------
# Example object: M1, Crab Nebula
# ----------------------------------------------------------------------
crab = CelestialObject.from_sexagesimal("M1", "05h 34m 31.94s", "+22° 00′ 52.2″")

# ----------------------------------------------------------------------
# Compute Alt/Az for the current moment
# ----------------------------------------------------------------------
pos = crab.current_alt_az(location)

print(crab)
print("ALT :", pos.alt_deg)
print("AZ  :", pos.az_deg)
print("Airmass:", pos.airmass)
