import pytest

from safe_walk_routing.algorithms.sampling.polyline_sampler import PolylineSampler
from safe_walk_routing.data.distance_utils import haversine_distance
from safe_walk_routing.data.models import Coordinate, RouteGeometry

from conftest import START_LAT, START_LON, straight_path


def distance_from_start(point):
    return haversine_distance(START_LAT, START_LON, point.coordinate.latitude, point.coordinate.longitude)


@pytest.fixture
def sampler():
    return PolylineSampler()


@pytest.mark.parametrize("count", [1, 3, 6, 10])
def test_sample_returns_exactly_count_points(sampler, count):
    geometry = RouteGeometry(encoded_polyline="", path=tuple(straight_path([0, 120, 300, 650, 1000])))

    points = sampler.sample(geometry, count)

    assert len(points) == count


def test_straight_1000m_path_samples_at_equal_intervals(sampler):
    """Six samples on a 1000m path land every 1000/7 ~ 143m."""
    geometry = RouteGeometry(encoded_polyline="", path=tuple(straight_path([0, 1000])))

    points = sampler.sample(geometry, 6)

    interval = 1000 / 7
    for j, point in enumerate(points, start=1):
        assert distance_from_start(point) == pytest.approx(interval * j, abs=0.5)
        assert point.position == pytest.approx(j / 7)


def test_sampling_ignores_vertex_density(sampler):
    """A vertex-dense first 100m must not pull samples towards the start."""
    distances = list(range(0, 101)) + [1000]
    geometry = RouteGeometry(encoded_polyline="", path=tuple(straight_path(distances)))

    points = sampler.sample(geometry, 6)

    measured = [distance_from_start(p) for p in points]
    expected = [1000 * j / 7 for j in range(1, 7)]
    assert measured == pytest.approx(expected, abs=0.5)


def test_consecutive_samples_are_distinct(sampler):
    geometry = RouteGeometry(encoded_polyline="", path=tuple(straight_path([0, 10, 10, 20, 800])))

    points = sampler.sample(geometry, 6)

    for previous, current in zip(points, points[1:]):
        assert previous.coordinate != current.coordinate


def test_single_vertex_geometry_returns_its_midpoint(sampler):
    only = Coordinate(START_LAT, START_LON)
    geometry = RouteGeometry(encoded_polyline="", path=(only,))

    points = sampler.sample(geometry, 6)

    assert len(points) == 1
    assert points[0].coordinate == only


def test_zero_length_geometry_returns_midpoint_vertex(sampler):
    same = Coordinate(START_LAT, START_LON)
    geometry = RouteGeometry(encoded_polyline="", path=(same, same, same))

    points = sampler.sample(geometry, 6)

    assert len(points) == 1
    assert points[0].coordinate == same
    assert points[0].position == 0.5


def test_empty_geometry_has_no_samples(sampler):
    assert sampler.sample(RouteGeometry.from_encoded(""), 6) == []


def test_encoded_geometry_is_decoded_before_sampling(sampler):
    path = straight_path([0, 500, 1000])
    encoded = RouteGeometry.from_path(path).encoded_polyline

    geometry = RouteGeometry.from_encoded(encoded)
    points = sampler.sample(geometry, 6)

    assert len(geometry.path) == 3
    # polyline precision is 1e-5 degrees, about a meter
    assert distance_from_start(points[0]) == pytest.approx(1000 / 7, abs=2.0)
