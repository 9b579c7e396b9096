from itertools import product
import math

import numpy as np
import pytest
from pytest import approx

from rt90.parameters import RT90_25_GON_V, SWEREF_99_TM, ZONES
from rt90.points import GeodeticPoint, GridPoint
from rt90.projection import *
from rt90.utils.logging import clear_warnings

from tests.functions import assert_geodetic_equal, assert_grid_equal


# Points spread over the Swedish mainland
LATITUDES = [55.3, 57.0, 59.3, 62.0, 65.5, 68.9]
LONGITUDES = [11.0, 13.0, 15.8, 18.1, 21.0, 23.9]


def test_grid_to_geodetic():
    lat, lon = grid_to_geodetic(6158063, 1322703)
    assert f'{lat:.5f}' == '55.51992'
    assert f'{lon:.5f}' == '12.99795'


def test_geodetic_to_grid():
    x, y = geodetic_to_grid(55.519919, 12.997947)
    assert round(x) == 6158063
    assert round(y) == 1322703


def test_return_types():
    assert isinstance(geodetic_to_grid(55.519919, 12.997947), GridPoint)
    assert isinstance(geodetic_to_grid(55.519919, 12.997947).x, float)
    assert isinstance(grid_to_geodetic(6158063, 1322703), GeodeticPoint)
    assert isinstance(grid_to_geodetic(6158063, 1322703).latitude, float)


def test_central_meridian():
    # On the central meridian the easting is exactly the false easting
    point = geodetic_to_grid(60., RT90_25_GON_V.central_meridian)
    assert point.y == approx(RT90_25_GON_V.false_easting)

    point = geodetic_to_grid(0., RT90_25_GON_V.central_meridian)
    assert point.x == approx(RT90_25_GON_V.false_northing)

    lat, lon = grid_to_geodetic(6_650_000, RT90_25_GON_V.false_easting)
    assert lon == approx(RT90_25_GON_V.central_meridian)


def test_geodetic_round_trip():
    for lat, lon in product(LATITUDES, LONGITUDES):
        result = grid_to_geodetic(*geodetic_to_grid(lat, lon))
        assert_geodetic_equal(result, GeodeticPoint(lat, lon))


def test_grid_round_trip():
    for lat, lon in product(LATITUDES, LONGITUDES):
        grid = geodetic_to_grid(lat, lon)
        assert_grid_equal(geodetic_to_grid(*grid_to_geodetic(*grid)), grid)


def test_round_trip_all_zones():
    for zone in ZONES.values():
        grid = geodetic_to_grid(59.3293, 18.0686, params=zone)
        result = grid_to_geodetic(*grid, params=zone)
        assert_geodetic_equal(result, GeodeticPoint(59.3293, 18.0686))


def test_zones_differ():
    rt90 = geodetic_to_grid(59.3293, 18.0686)
    sweref = geodetic_to_grid(59.3293, 18.0686, params=SWEREF_99_TM)
    assert abs(rt90.y - sweref.y) > 100_000

    assert geodetic_to_grid(62., 15., params=SWEREF_99_TM).y == approx(500_000.)


def test_disabled_projection(caplog):
    clear_warnings()
    disabled = RT90_25_GON_V.disable()

    assert grid_to_geodetic(6158063, 1322703, params=disabled) == (0., 0.)
    assert grid_to_geodetic(float('nan'), 1e12, params=disabled) == (0., 0.)
    assert 'rt90_2.5_gon_v is disabled' in caplog.text

    # Forward projection is unaffected
    assert_grid_equal(
        geodetic_to_grid(55.519919, 12.997947, params=disabled),
        GridPoint(6158063, 1322703)
    )


def test_singularity_is_not_finite():
    # 90 degrees from the central meridian on the equator
    result = geodetic_to_grid(0., RT90_25_GON_V.central_meridian + 90)
    assert not result.is_finite()
    assert not (math.isfinite(result.x) and math.isfinite(result.y))

    assert not grid_to_geodetic(float('nan'), 1322703).is_finite()
    assert not geodetic_to_grid(float('inf'), 15.).is_finite()


def test_invalid_params():
    with pytest.raises(TypeError):
        geodetic_to_grid(55., 13., params='rt90_2.5_gon_v')

    with pytest.raises(TypeError):
        grid_to_geodetic(6158063, 1322703, params=None)


def test_outside_envelope_warning(caplog):
    clear_warnings()
    geodetic_to_grid(59., 18.)
    assert 'envelope' not in caplog.text

    geodetic_to_grid(48.85, 2.35)
    assert 'envelope' in caplog.text


def test_geodetic_to_grid_array():
    x, y = geodetic_to_grid_array([55.519919, 59.3293], [12.997947, 18.0686])
    assert x.shape == y.shape == (2,)
    assert round(x[0]) == 6158063
    assert round(y[0]) == 1322703

    single = geodetic_to_grid(59.3293, 18.0686)
    assert x[1] == approx(single.x)
    assert y[1] == approx(single.y)

    # Broadcasting a single longitude
    x, y = geodetic_to_grid_array(np.array(LATITUDES), 15.)
    assert x.shape == (len(LATITUDES),)
    assert np.all(np.diff(x) > 0)


def test_grid_to_geodetic_array():
    lat, lon = grid_to_geodetic_array([6158063, 6158063], [1322703, 1322703])
    assert np.allclose(lat, 55.51992, atol=1e-5, rtol=0)
    assert np.allclose(lon, 12.99795, atol=1e-5, rtol=0)

    lat, lon = grid_to_geodetic_array([[6158063, np.nan]], [[1322703, 1322703]])
    assert lat.shape == (1, 2)
    assert np.isfinite(lat[0, 0])
    assert np.isnan(lat[0, 1])

    lat, lon = grid_to_geodetic_array([1., 2., 3.], 4., params=RT90_25_GON_V.disable())
    assert lat.tolist() == [0., 0., 0.]
    assert lon.tolist() == [0., 0., 0.]


def test_array_round_trip():
    lats, lons = np.meshgrid(LATITUDES, LONGITUDES)
    result_lat, result_lon = grid_to_geodetic_array(*geodetic_to_grid_array(lats, lons))
    assert np.allclose(result_lat, lats, atol=1e-5, rtol=0)
    assert np.allclose(result_lon, lons, atol=1e-5, rtol=0)
