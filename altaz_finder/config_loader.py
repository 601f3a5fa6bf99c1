"""
config_loader.py
Configuration loading utilities.

This module provides a lightweight TOML configuration loader for the
observer location and the list of targets. It performs minimal validation
and applies reasonable defaults for missing configuration sections.

This is intentionally not a strict schema validator; it is designed
to keep the tool runnable even with partial configuration files.
"""
import logging

import tomli

from altaz_finder.location import GeoCoordinate
from altaz_finder.sexagesimal import parse_dec, parse_ra
from altaz_finder.target import CelestialObject

logger = logging.getLogger(__name__)

# Royal Observatory, Greenwich
DEFAULT_LOCATION = {'latitude': 51.4769, 'longitude': -0.0005}

def load_config(path='config/config.toml'):
    """
    Load the configuration from a TOML file.

    The configuration is parsed into a plain Python dictionary.
    Only minimal validation is performed; missing sections are
    populated with default values.

    Default sections added if missing:

    location:
        - latitude (float): Observer latitude [deg, +North]
        - longitude (float): Observer longitude [deg, +East]

    targets:
        - empty list

    Args:
        path (str): Path to the TOML configuration file.

    Returns:
        dict: Configuration dictionary with defaults applied.
    """
    with open(path, 'rb') as f:
        cfg = tomli.load(f)
    if 'location' not in cfg:
        logger.warning("%s has no [location] section, using Greenwich", path)
        cfg['location'] = dict(DEFAULT_LOCATION)
    if 'targets' not in cfg:
        cfg['targets'] = []
    return cfg

def observer_from_config(cfg):
    loc = cfg['location']
    return GeoCoordinate(lat_deg=loc['latitude'], lon_deg=loc['longitude'])

def targets_from_config(cfg):
    """
    Build CelestialObjects from the [[targets]] tables.

    Each table needs 'name', 'ra' and 'dec'. 'ra'/'dec' may be sexagesimal
    strings or plain numbers in degrees.

    Raises:
        KeyError: If a table lacks one of the required keys.
        ValueError: If a coordinate does not parse (message names the target).
    """
    objects = []
    for entry in cfg.get('targets', []):
        name = entry['name']
        ra, dec = entry['ra'], entry['dec']
        try:
            ra_deg = parse_ra(ra) if isinstance(ra, str) else ra
            dec_deg = parse_dec(dec) if isinstance(dec, str) else dec
            obj = CelestialObject(name, ra_deg, dec_deg)
        except ValueError as e:
            raise ValueError(f"target {name!r}: {e}") from e
        objects.append(obj)
    return objects
