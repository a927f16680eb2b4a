import pytest

from swegeodesy import (
    RT90Position, RT90Projection, SWEREF99Position, SWEREF99Projection,
    UnknownProjectionError, WGS84Format, WGS84Position
)

from tests.functions import ROUND_TRIP_TOLERANCE, assert_grid_positions_equal, assert_positions_equal


def test_wgs84_position_init():
    pos = WGS84Position(59.3306, 18.0596)
    assert pos.latitude == 59.3306
    assert pos.longitude == 18.0596

    pos = WGS84Position('59.3306', '18.0596')
    assert pos.to_float() == (59.3306, 18.0596)


def test_wgs84_position_immutable():
    pos = WGS84Position(59.3306, 18.0596)
    with pytest.raises(AttributeError):
        pos.latitude = 0.  # type: ignore


def test_wgs84_position_eq_hash():
    assert WGS84Position(0., 0.) == WGS84Position(0., 0.)
    assert WGS84Position(0., 0.) != WGS84Position(1., 0.)
    assert WGS84Position(0., 0.) != (0., 0.)
    assert len({WGS84Position(0., 0.), WGS84Position(0., 0.), WGS84Position(1., 1.)}) == 2


def test_wgs84_position_repr():
    assert repr(WGS84Position(59.5, 18.25)) == '<WGS84Position(59.5, 18.25)>'
    assert str(WGS84Position(59.5, 18.25)) == 'N 59º 30\' 0" E 18º 15\' 0"'


def test_wgs84_parse_string():
    # Values from Eniro.se
    pos_dm = WGS84Position.from_string("N 62º 10.560' E 015º 54.180'", WGS84Format.DEGREES_MINUTES)
    pos_dms = WGS84Position.from_string(
        'N 62º 10\' 33.60" E 015º 54\' 10.80"', WGS84Format.DEGREES_MINUTES_SECONDS
    )

    assert round(pos_dm.latitude, 3) == 62.176
    assert round(pos_dm.longitude, 3) == 15.903
    assert round(pos_dms.latitude, 3) == 62.176
    assert round(pos_dms.longitude, 3) == 15.903


def test_wgs84_parse_degrees():
    pos = WGS84Position.from_string('59.3489 18.0473', WGS84Format.DEGREES)
    assert pos == WGS84Position(59.3489, 18.0473)

    pos = WGS84Position.from_string('S 33.8688º W 151.2093º', WGS84Format.DEGREES)
    assert pos == WGS84Position(-33.8688, -151.2093)


def test_wgs84_parse_invalid():
    with pytest.raises(ValueError):
        WGS84Position.from_string('not a position')

    with pytest.raises(ValueError):
        WGS84Position.from_string("N 62º 10.560' E 015º 54.180'", WGS84Format.DEGREES_MINUTES_SECONDS)

    # Latitude hemisphere in the longitude slot
    with pytest.raises(ValueError):
        WGS84Position(0., 0.).with_longitude_from_string('N 17º 50\' 06.12"')


def test_wgs84_set_components_from_string():
    pos = WGS84Position(0., 0.)
    pos = pos.with_latitude_from_string('N 59º 58\' 55.23"')
    pos = pos.with_longitude_from_string('E 017º 50\' 06.12"')

    assert pos.latitude == pytest.approx(59 + 58 / 60 + 55.23 / 3600)
    assert pos.longitude == pytest.approx(17 + 50 / 60 + 6.12 / 3600)


def test_wgs84_to_string():
    pos = WGS84Position(62.176, -15.903)
    assert pos.latitude_to_string(WGS84Format.DEGREES) == 'N 62.176º'
    assert pos.longitude_to_string(WGS84Format.DEGREES) == 'W 15.903º'
    assert pos.latitude_to_string(WGS84Format.DEGREES_MINUTES_SECONDS) == 'N 62º 10\' 33.6"'
    assert pos.longitude_to_string(WGS84Format.DEGREES_MINUTES_SECONDS) == 'W 15º 54\' 10.8"'

    pos = WGS84Position(62.5, 15.25)
    assert pos.latitude_to_string(WGS84Format.DEGREES_MINUTES) == "N 62º 30.0000'"
    assert pos.longitude_to_string(WGS84Format.DEGREES_MINUTES) == "E 15º 15.0000'"


def test_wgs84_string_round_trip():
    pos = WGS84Position(59.348914687, 18.047318906)
    for fmt in WGS84Format:
        text = f'{pos.latitude_to_string(fmt)} {pos.longitude_to_string(fmt)}'
        assert_positions_equal(WGS84Position.from_string(text, fmt), pos, abs_tol=1e-5)


def test_wgs84_dms():
    pos = WGS84Position(51.509865, -0.118092)
    assert pos.to_dms() == ((51, 30, 35.514, 'N'), (0, 7, 5.1312, 'W'))
    assert WGS84Position.from_dms((51, 30, 35.514, 'N'), (0, 7, 5.1312, 'W')) == pos


def test_rt90_position_init():
    pos = RT90Position(6583052, 1627548)
    assert pos.northing == 6583052.
    assert pos.easting == 1627548.
    assert pos.projection is RT90Projection.RT90_2_5_GON_V

    pos = RT90Position(6583052, 1627548, 'rt90_5.0_gon_o')
    assert pos.projection is RT90Projection.RT90_5_0_GON_O


def test_grid_position_rejects_projections():
    with pytest.raises(UnknownProjectionError):
        RT90Position(6583052, 1627548, 'rt90_9.9_gon_v')

    with pytest.raises(ValueError):
        RT90Position(6583052, 1627548, SWEREF99Projection.SWEREF_99_TM)

    with pytest.raises(ValueError):
        SWEREF99Position(6652797.165, 658185.201, 'bessel_rt90_2.5_gon_v')


def test_grid_position_eq_hash_repr():
    assert RT90Position(1., 2.) == RT90Position(1., 2., RT90Projection.RT90_2_5_GON_V)
    assert RT90Position(1., 2.) != RT90Position(1., 2., RT90Projection.RT90_0_0_GON_V)
    assert RT90Position(1., 2.) != SWEREF99Position(1., 2.)
    assert len({RT90Position(1., 2.), RT90Position(1., 2.), SWEREF99Position(1., 2.)}) == 2

    assert repr(RT90Position(1., 2.)) == '<RT90Position(1.0, 2.0, rt90_2.5_gon_v)>'
    assert str(SWEREF99Position(1., 2.)) == 'N: 1.0 E: 2.0 Projection: sweref_99_tm'


def test_rt90_to_wgs84():
    wgs_pos = RT90Position(6583052, 1627548).to_wgs84()

    # Values from Hitta.se
    assert round(wgs_pos.latitude, 4) == 59.3489
    assert round(wgs_pos.longitude, 4) == 18.0473

    # Values from Lantmateriet.se
    assert wgs_pos.latitude_to_string(WGS84Format.DEGREES_MINUTES_SECONDS) == 'N 59º 20\' 56.09287"'
    assert wgs_pos.longitude_to_string(WGS84Format.DEGREES_MINUTES_SECONDS) == 'E 18º 2\' 50.34806"'


def test_wgs84_to_rt90():
    wgs_pos = WGS84Position.from_string('N 59º 58\' 55.23" E 017º 50\' 06.12"')
    rt_pos = RT90Position.from_wgs84(wgs_pos)

    # Values from Lantmateriet.se
    assert round(rt_pos.northing, 3) == 6653174.343
    assert round(rt_pos.easting, 3) == 1613318.742
    assert_grid_positions_equal(wgs_pos.to_rt90(), rt_pos)


def test_wgs84_to_sweref99():
    wgs_pos = WGS84Position(0., 0.)
    wgs_pos = wgs_pos.with_latitude_from_string('N 59º 58\' 55.23"')
    wgs_pos = wgs_pos.with_longitude_from_string('E 017º 50\' 06.12"')

    sweref_pos = SWEREF99Position.from_wgs84(wgs_pos, SWEREF99Projection.SWEREF_99_TM)

    # Values from Lantmateriet.se
    assert round(sweref_pos.northing, 3) == 6652797.165
    assert round(sweref_pos.easting, 3) == 658185.201
    assert sweref_pos.projection is SWEREF99Projection.SWEREF_99_TM
    assert_grid_positions_equal(wgs_pos.to_sweref99(), sweref_pos)


def test_sweref99_to_wgs84():
    wgs_pos = SWEREF99Position(6652797.165, 658185.201).to_wgs84()

    # Values from Lantmateriet.se
    assert wgs_pos.latitude_to_string(WGS84Format.DEGREES_MINUTES_SECONDS) == 'N 59º 58\' 55.23001"'
    assert wgs_pos.longitude_to_string(WGS84Format.DEGREES_MINUTES_SECONDS) == 'E 17º 50\' 6.11997"'


def test_to_and_from_rt90():
    wgs_pos = WGS84Position(59.3293, 18.0686)
    wgs_back = RT90Position.from_wgs84(wgs_pos).to_wgs84()

    assert round(wgs_back.latitude, 4) == 59.3293
    assert round(wgs_back.longitude, 4) == 18.0686
    assert_positions_equal(wgs_back, wgs_pos, abs_tol=ROUND_TRIP_TOLERANCE)


def test_local_zone_round_trip():
    wgs_pos = WGS84Position(63.8258, 20.2630)  # Umeå
    for projection in SWEREF99Projection:
        sweref_pos = wgs_pos.to_sweref99(projection)
        assert sweref_pos.projection is projection
        assert_positions_equal(sweref_pos.to_wgs84(), wgs_pos, abs_tol=ROUND_TRIP_TOLERANCE)
