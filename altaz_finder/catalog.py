"""
catalog.py
Catalog loading and the alt/az table.

A catalog is a delimited text file with at least the columns
'name', 'ra' and 'dec', coordinates written in sexagesimal notation:

    name;ra;dec
    M1;05h 34m 31.94s;+22° 00′ 52.2″
    M42;05:35:17.3;-05:23:28

All angular quantities are converted to decimal degrees.
"""

import logging

import numpy as np
import pandas as pd

from altaz_finder.altaz import parallactic_angle, to_alt_az
from altaz_finder.astro_time import to_utc_datetime, utc_now
from altaz_finder.exceptions import AngleParseError
from altaz_finder.sexagesimal import parse_dec, parse_ra
from altaz_finder.target import CelestialObject

logger = logging.getLogger(__name__)

def load_catalog(path, sep=';'):
    """
    Load a target catalog and convert its coordinates to degrees.

    Rows whose RA or Dec cannot be parsed are dropped; the number of
    dropped rows is logged at WARNING level, each one at DEBUG.

    Args:
        path (str): Path to the catalog file.
        sep (str): Column separator.

    Returns:
        pandas.DataFrame: Columns name, ra_deg, dec_deg.

    Raises:
        KeyError: If one of the name/ra/dec columns is missing.
    """
    df = pd.read_csv(path, sep=sep, dtype=str, skipinitialspace=True)
    missing = {"name", "ra", "dec"} - set(df.columns)
    if missing:
        raise KeyError(f"{path}: missing column(s) {sorted(missing)}")

    def parse_or_nan(parser):
        def parse(text):
            try:
                return parser(text)
            except AngleParseError as e:
                logger.debug("%s", e)
                return np.nan
        return parse

    df["ra_deg"] = df["ra"].fillna("").apply(parse_or_nan(parse_ra))
    df["dec_deg"] = df["dec"].fillna("").apply(parse_or_nan(parse_dec))

    cleaned = df[["name", "ra_deg", "dec_deg"]].dropna(subset=["ra_deg", "dec_deg"])
    # out-of-range values parse fine but are not valid positions
    in_range = (cleaned["ra_deg"] < 360.0) & (cleaned["dec_deg"].abs() <= 90.0)
    cleaned = cleaned[in_range].reset_index(drop=True)

    dropped = len(df) - len(cleaned)
    if dropped:
        logger.warning("%s: skipped %d of %d rows with unusable coordinates", path, dropped, len(df))
    return cleaned

def objects_from_catalog(df):
    return [
        CelestialObject(row.name, row.ra_deg, row.dec_deg)
        for row in df.itertuples(index=False)
    ]

TABLE_COLUMNS = ["name", "ra_deg", "dec_deg", "ha_deg", "alt_deg", "az_deg",
                 "airmass", "parallactic_angle_deg"]

def altaz_table(objects, location, now=None):
    """
    Alt/az of every object for a single instant.

    The clock is read once for the whole table, so every row refers to
    the same moment.

    Args:
        objects (iterable of CelestialObject): Targets.
        location (GeoCoordinate): Observer.
        now: Optional fixed instant; defaults to the current time.

    Returns:
        pandas.DataFrame: Columns name, ra_deg, dec_deg, ha_deg, alt_deg,
            az_deg, airmass, parallactic_angle_deg.
    """
    now = utc_now() if now is None else to_utc_datetime(now)
    rows = []
    for obj in objects:
        ha = obj.hour_angle(location, now)
        pos = to_alt_az(ha, obj.dec_deg, location)
        rows.append({
            "name": obj.name,
            "ra_deg": obj.ra_deg,
            "dec_deg": obj.dec_deg,
            "ha_deg": ha,
            "alt_deg": pos.alt_deg,
            "az_deg": pos.az_deg,
            "airmass": pos.airmass,
            "parallactic_angle_deg": parallactic_angle(ha, obj.dec_deg, location),
        })
    return pd.DataFrame(rows, columns=TABLE_COLUMNS)
