"""
cli.py
Command line front end.

    altaz-finder --lat 35.0 --lon -80.0 --name M1 --ra "05h 34m 31.94s" --dec "+22° 00′ 52.2″"
    altaz-finder --config config/config.toml
    altaz-finder --lat 35.0 --lon -80.0 --catalog data/targets.csv

Prints, for each object, its name and equatorial coordinates followed by
the altitude/azimuth it has right now.
"""

import argparse
import logging
import sys

from altaz_finder.astro_time import utc_now
from altaz_finder.catalog import altaz_table, load_catalog, objects_from_catalog
from altaz_finder.config_loader import DEFAULT_LOCATION, load_config, observer_from_config, targets_from_config
from altaz_finder.exceptions import AngleParseError, DomainError
from altaz_finder.location import GeoCoordinate
from altaz_finder.target import CelestialObject

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s:%(name)s:%(levelname)s:%(message)s'


def build_parser():
    p = argparse.ArgumentParser(
        prog="altaz-finder",
        description="Current altitude/azimuth of objects given by sexagesimal RA/Dec.",
    )
    p.add_argument("--lat", type=float, default=None, help="observer latitude, degrees North")
    p.add_argument("--lon", type=float, default=None, help="observer longitude, degrees East")
    p.add_argument("--config", default=None, help="TOML file with [location] and [[targets]]")
    p.add_argument("--catalog", default=None, help="';'-separated file with name, ra, dec columns")
    p.add_argument("--name", default="target", help="name for the --ra/--dec object")
    p.add_argument("--ra", default=None, help='right ascension, e.g. "05h 34m 31.94s"')
    p.add_argument("--dec", default=None, help='declination, e.g. "+22° 00′ 52.2″"')
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p


def _resolve_location(args, cfg):
    if args.lat is not None or args.lon is not None:
        if args.lat is None or args.lon is None:
            raise ValueError("--lat and --lon must be given together")
        return GeoCoordinate(args.lat, args.lon)
    if cfg is not None:
        return observer_from_config(cfg)
    logger.info("no location given, using Greenwich")
    return GeoCoordinate(DEFAULT_LOCATION['latitude'], DEFAULT_LOCATION['longitude'])


def _collect_objects(args, cfg):
    objects = []
    if cfg is not None:
        objects.extend(targets_from_config(cfg))
    if args.catalog:
        objects.extend(objects_from_catalog(load_catalog(args.catalog)))
    if args.ra is not None or args.dec is not None:
        if args.ra is None or args.dec is None:
            raise ValueError("--ra and --dec must be given together")
        objects.append(CelestialObject.from_sexagesimal(args.name, args.ra, args.dec))
    return objects


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)

    try:
        cfg = load_config(args.config) if args.config else None
        location = _resolve_location(args, cfg)
        objects = _collect_objects(args, cfg)
    except (AngleParseError, OSError, KeyError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    if not objects:
        parser.error("no objects: give --ra/--dec, --config or --catalog")

    now = utc_now()
    try:
        table = altaz_table(objects, location, now=now)
    except DomainError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(f"Observer: {location}   Time (UTC): {now:%Y-%m-%d %H:%M:%S}")
    for obj, row in zip(objects, table.itertuples(index=False)):
        print(obj.summary())
        print(f"    ALT: {row.alt_deg:+8.3f}°   AZ: {row.az_deg:7.3f}°   Airmass: {row.airmass:.3f}   PA: {row.parallactic_angle_deg:+7.2f}°")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
