import pytest

from altaz_finder.config_loader import (
    DEFAULT_LOCATION,
    load_config,
    observer_from_config,
    targets_from_config,
)

CONFIG_TOML = """
[location]
latitude = 35.0
longitude = -80.0

[[targets]]
name = "M1"
ra = "05h 34m 31.94s"
dec = "+22° 00′ 52.2″"

[[targets]]
name = "M31"
ra = 10.6847083
dec = "+41° 16′ 07.5″"
"""


def _write(tmp_path, text):
    path = tmp_path / "config.toml"
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_load_config_reads_location_and_targets(tmp_path):
    cfg = load_config(_write(tmp_path, CONFIG_TOML))

    site = observer_from_config(cfg)
    targets = targets_from_config(cfg)

    assert (site.lat_deg, site.lon_deg) == (35.0, -80.0)
    assert [t.name for t in targets] == ["M1", "M31"]
    assert targets[0].ra_deg == pytest.approx(83.6331, abs=1e-3)
    assert targets[1].ra_deg == pytest.approx(10.6847083)
    assert targets[1].dec_deg == pytest.approx(41.26875, abs=1e-4)


def test_missing_sections_get_defaults(tmp_path):
    cfg = load_config(_write(tmp_path, "title = 'empty'\n"))

    assert cfg["location"] == DEFAULT_LOCATION
    assert cfg["targets"] == []
    assert targets_from_config(cfg) == []


def test_bad_target_names_the_target(tmp_path):
    cfg = load_config(_write(tmp_path, CONFIG_TOML + """
[[targets]]
name = "broken"
ra = "05h 34m"
dec = "+22° 00′ 52.2″"
"""))

    with pytest.raises(ValueError, match="broken"):
        targets_from_config(cfg)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "nope.toml"))
