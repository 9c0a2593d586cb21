import math

import pytest
import numpy as np

from geometry import LatLng, contains, convex_hull_andrew, signed_distance
from quickhull import InvalidInput, QuickHullBuilder, build_convex_hull, get_convex_hull


def pts(*coords):
    return [LatLng(lat, lng) for lat, lng in coords]


def sort_by_polar_angle(points):
    cx = sum(p.lng for p in points) / len(points)
    cy = sum(p.lat for p in points) / len(points)
    return sorted(points, key=lambda p: np.arctan2(p.lat - cy, p.lng - cx))


def check_hull(points: list[LatLng], hull: list[LatLng]):
    ids = {id(p) for p in points}
    assert all(id(v) in ids for v in hull), "hull contains a point that is not an input object"
    assert len(set(hull)) <= len(points)
    for p in points:
        assert contains(hull, p), f"{p} lies outside hull {hull}"


def test_signed_distance_sign():
    baseline = (LatLng(0, 0), LatLng(1, 0))
    assert signed_distance(LatLng(0.5, 1), baseline) > 0
    assert signed_distance(LatLng(0.5, -1), baseline) < 0
    assert signed_distance(LatLng(2, 0), baseline) == 0


def test_signed_distance_degenerate_baseline():
    a = LatLng(3, 4)
    for p in pts((0, 0), (10, -2), (3, 4)):
        assert signed_distance(p, (a, a)) == 0


def test_distance_compares_by_perpendicular_offset():
    baseline = (LatLng(0, 0), LatLng(2, 0))
    near, far = LatLng(1, 1), LatLng(1, 3)
    builder = QuickHullBuilder()
    assert builder.distance(far, baseline) > builder.distance(near, baseline)


def test_find_most_distant_point_ties_and_order():
    points = pts((0.2, 1), (0.8, 1), (0.5, -1), (0.4, 0.5))
    baseline = (LatLng(0, 0), LatLng(1, 0))

    max_point, outside = QuickHullBuilder().find_most_distant_point(baseline, points)

    assert max_point is points[1]
    assert outside == [points[3], points[1], points[0]]


def test_find_most_distant_point_drops_collinear():
    points = pts((0.5, 0), (2, 0), (-1, 0))
    max_point, outside = QuickHullBuilder().find_most_distant_point((LatLng(0, 0), LatLng(1, 0)), points)
    assert max_point is None
    assert outside == []


def test_find_most_distant_point_skips_nan_distance():
    points = [LatLng(math.nan, 1.0), LatLng(0.5, 2.0)]
    max_point, outside = QuickHullBuilder().find_most_distant_point((LatLng(0, 0), LatLng(1, 0)), points)
    assert max_point is points[1]
    assert outside == [points[1]]


def test_build_convex_hull_terminal_emits_start():
    a, b = LatLng(0, 0), LatLng(1, 0)
    assert build_convex_hull((a, b), pts((0.5, -1))) == [a]


def test_build_convex_hull_recurses_on_farthest_point():
    a, b = LatLng(0, 0), LatLng(1, 0)
    points = pts((0.5, 2), (0.5, 1), (0.9, 0.1))
    assert build_convex_hull((a, b), points) == [a, points[0]]


def test_build_convex_hull_does_not_mutate_input():
    points = pts((0, 0), (1, 1), (2, 0), (1, -1), (1, 0))
    copy = list(points)
    build_convex_hull((points[0], points[2]), points)
    assert points == copy


def test_empty_input_rejected():
    with pytest.raises(InvalidInput):
        get_convex_hull([])
    with pytest.raises(ValueError):
        QuickHullBuilder().get_convex_hull([])


def test_single_point():
    p = LatLng(0, 0)
    hull = get_convex_hull([p])
    assert hull == [p, p]
    assert set(hull) == {p}


def test_coincident_points():
    points = pts((1, 1), (1, 1), (1, 1))
    hull = get_convex_hull(points)
    assert set(hull) == {LatLng(1, 1)}
    assert len(hull) == 2


def test_two_points():
    points = pts((0, 0), (1, 1))
    assert get_convex_hull(points) == points


def test_collinear_points():
    points = pts((0, 0), (1, 1), (2, 2))
    assert get_convex_hull(points) == [points[0], points[2]]


def test_zero_coordinates_are_valid_extremes():
    points = pts((0, 5), (-3, 0), (0, -5), (3, 0))
    hull = get_convex_hull(points)
    assert set(hull) == set(points)
    assert len(hull) == 4


def test_horizontal_input_falls_back_to_longitude():
    points = pts((5, 0), (5, 3), (5, 1))
    assert get_convex_hull(points) == [points[0], points[1]]


def test_square():
    points = pts((0, 0), (0, 1), (1, 1), (1, 0))
    hull = get_convex_hull(points)
    assert hull == [points[1], points[2], points[3], points[0]]


def test_square_with_interior_point():
    points = pts((0, 0), (0, 1), (1, 1), (1, 0), (0.5, 0.5))
    hull = get_convex_hull(points)
    assert len(hull) == 4
    assert set(hull) == set(points[:4])
    check_hull(points, hull)


def test_seed_ties_pick_last_input_point():
    # (0, 1) sits on the bottom edge, it is kept as the seed
    points = pts((0, 0), (0, 2), (0, 1), (1, 1))
    assert get_convex_hull(points) == [points[2], points[1], points[3], points[0]]


def test_hull_is_counter_clockwise():
    points = pts((0, 0), (2, 0), (2, 2), (0, 2), (1, 1), (1, 3), (-1, 1))
    hull = get_convex_hull(points)
    ordered = sort_by_polar_angle(hull)
    start = hull.index(ordered[0])
    assert hull[start:] + hull[:start] == ordered


@pytest.mark.parametrize("n_points", [3, 10, 100, 1000])
@pytest.mark.parametrize("distribution", ["uniform", "normal"])
@pytest.mark.parametrize("limits", [(0, 100), (-100, 100), (-180, 180)])
def test_random_points_match_monotone_chain(n_points, distribution, limits):
    rng = np.random.default_rng(42)
    low, high = limits
    for _ in range(20):
        if distribution == "uniform":
            coords = rng.uniform(low, high, size=(n_points, 2))
        else:
            coords = rng.normal((low + high) / 2, (high - low) / 6, size=(n_points, 2))
        points = [LatLng(float(lat), float(lng)) for lat, lng in coords]

        hull = get_convex_hull(points)

        check_hull(points, hull)
        assert len(hull) <= n_points
        assert len(set(hull)) == len(hull)
        assert set(hull) == set(convex_hull_andrew(points))
        assert max(points, key=lambda p: p.lat) in hull
        assert min(points, key=lambda p: p.lat) in hull
        assert set(get_convex_hull(hull)) == set(hull)


@pytest.mark.parametrize("n_points", [5, 30, 300])
def test_integer_grid_points(n_points):
    # many duplicates and collinear triples
    rng = np.random.default_rng(7)
    for _ in range(50):
        coords = rng.integers(-10, 10, size=(n_points, 2))
        points = [LatLng(int(lat), int(lng)) for lat, lng in coords]

        hull = get_convex_hull(points)

        check_hull(points, hull)
        assert set(convex_hull_andrew(points)) <= set(hull)
        assert max(p.lat for p in hull) == max(p.lat for p in points)
        assert min(p.lat for p in hull) == min(p.lat for p in points)


def test_accepts_any_lat_lng_objects():
    class Marker:
        def __init__(self, lat, lng, name):
            self.lat, self.lng, self.name = lat, lng, name

    markers = [Marker(0, 0, "a"), Marker(0, 2, "b"), Marker(2, 1, "c"), Marker(0.5, 1, "inside")]
    hull = get_convex_hull(markers)
    assert [m.name for m in hull] == ["b", "c", "a"]
