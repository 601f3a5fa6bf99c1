import pytest

from altaz_finder.exceptions import AngleParseError, MalformedAngleError, NumericParseError
from altaz_finder.sexagesimal import (
    AngleKind,
    format_sexagesimal,
    parse_dec,
    parse_ra,
    parse_sexagesimal,
)


def test_right_ascension_is_scaled_to_degrees():
    ra = parse_sexagesimal("05h 34m 31.94s", AngleKind.RIGHT_ASCENSION)

    assert ra == pytest.approx(83.6331, abs=1e-3)


def test_declination_with_unicode_marks():
    dec = parse_sexagesimal("+22° 00′ 52.2″", AngleKind.DECLINATION)

    assert dec == pytest.approx(22.0145, abs=1e-3)


def test_negative_declination_keeps_its_sign():
    assert parse_dec("-22° 00′ 52.2″") == pytest.approx(-22.0145, abs=1e-3)


def test_negative_declination_with_zero_degrees():
    assert parse_dec("-00° 30′ 00″") == pytest.approx(-0.5)


def test_unicode_minus_sign():
    assert parse_dec("−05 23 28") < 0


def test_colon_separated_fields():
    assert parse_ra("05:34:31.94") == pytest.approx(parse_ra("05h 34m 31.94s"))
    assert parse_dec("-05:23:28") == pytest.approx(-(5 + 23 / 60 + 28 / 3600))


def test_ascii_marks_for_declination():
    assert parse_dec("41d 16' 07.5\"") == pytest.approx(41 + 16 / 60 + 7.5 / 3600)


def test_two_fields_is_malformed():
    with pytest.raises(MalformedAngleError):
        parse_ra("05h 34m")


def test_four_fields_is_malformed():
    with pytest.raises(MalformedAngleError):
        parse_dec("10 20 30 40")


def test_empty_string_is_malformed():
    with pytest.raises(MalformedAngleError):
        parse_dec("")


def test_non_numeric_field():
    with pytest.raises(NumericParseError) as excinfo:
        parse_ra("05h 3x4m 31s")

    assert excinfo.value.text == "05h 3x4m 31s"


def test_non_finite_field():
    with pytest.raises(NumericParseError):
        parse_dec("inf 00 00")


def test_minutes_out_of_range():
    with pytest.raises(MalformedAngleError):
        parse_ra("05h 60m 00s")


def test_negative_right_ascension_is_rejected():
    with pytest.raises(MalformedAngleError):
        parse_ra("-05h 00m 00s")


def test_parse_errors_are_value_errors():
    with pytest.raises(ValueError):
        parse_dec("12 34")
    assert issubclass(NumericParseError, AngleParseError)


def test_parsing_is_repeatable():
    text = "+22° 00′ 52.2″"

    assert parse_dec(text) == parse_dec(text)


def test_matches_astropy_angle():
    coordinates = pytest.importorskip("astropy.coordinates")

    assert parse_ra("05h 34m 31.94s") == pytest.approx(
        coordinates.Angle("05h34m31.94s").degree, abs=1e-9)
    assert parse_dec("-22° 00′ 52.2″") == pytest.approx(
        coordinates.Angle("-22d00m52.2s").degree, abs=1e-9)


def test_format_right_ascension():
    assert format_sexagesimal(parse_ra("05h 34m 31.94s"), AngleKind.RIGHT_ASCENSION) == "05h 34m 31.94s"


def test_format_declination():
    assert format_sexagesimal(parse_dec("-22° 00′ 52.2″"), AngleKind.DECLINATION) == "-22° 00′ 52.2″"


def test_format_carries_rounding_into_next_field():
    assert format_sexagesimal(0.9999999, AngleKind.DECLINATION) == "+01° 00′ 00.0″"


@pytest.mark.parametrize("text", ["+-22 0 0", "22 -10 0", "05h 34m +31.94s", "-22° 00′ −52.2″"])
def test_sign_inside_the_angle_is_malformed(text):
    with pytest.raises(MalformedAngleError):
        parse_dec(text)


def test_leading_plus_is_accepted():
    assert parse_dec("+22 0 0") == pytest.approx(22.0)


def test_format_tiny_negative_declination_as_zero():
    assert format_sexagesimal(-1e-9, AngleKind.DECLINATION) == "+00° 00′ 00.0″"
    assert format_sexagesimal(parse_dec("-00 00 00"), AngleKind.DECLINATION) == "+00° 00′ 00.0″"


def test_format_small_negative_declination_keeps_sign():
    assert format_sexagesimal(-0.5, AngleKind.DECLINATION) == "-00° 30′ 00.0″"


def test_format_right_ascension_wraps_at_24h():
    assert format_sexagesimal(360.0 - 1e-9, AngleKind.RIGHT_ASCENSION) == "00h 00m 00.00s"
    assert format_sexagesimal(-15.0, AngleKind.RIGHT_ASCENSION) == "23h 00m 00.00s"
