from dataclasses import dataclass


@dataclass(frozen=True)
class LatLng:
    lat: float
    lng: float

    def __lt__(self, other):
        # lng plays the x axis, so sort by (lng, lat)
        return (self.lng, self.lat) < (other.lng, other.lat)


def signed_distance(point: LatLng, baseline: tuple[LatLng, LatLng]) -> float:
    """
    Signed, unnormalized distance of point from the oriented baseline a -> b.
    Positive values lie to the right of the baseline (lng as x, lat as y),
    zero on the line. Only meaningful for comparing points against the same baseline.
    """
    a, b = baseline
    v_y = b.lat - a.lat
    v_x = a.lng - b.lng
    return v_x * (point.lat - a.lat) + v_y * (point.lng - a.lng)


def cross(o: LatLng, a: LatLng, b: LatLng) -> float:
    """
    Cross product of segments oa and ob.
    """
    return (a.lng - o.lng) * (b.lat - o.lat) - (a.lat - o.lat) * (b.lng - o.lng)


def convex_hull_andrew(points: list[LatLng]) -> list[LatLng]:
    """
    Andrew's monotone chain algorithm for convex hull.
    Collinear points on hull edges are dropped. Returns vertices in
    counter-clockwise order. Time complexity: O(n log n).
    """
    points = sorted(set(points))
    if len(points) <= 2:
        return points

    lower = []
    for p in points:
        while len(lower) >= 2 and cross(lower[-2], lower[-1], p) <= 0:
            lower.pop()
        lower.append(p)

    upper = []
    for p in reversed(points):
        while len(upper) >= 2 and cross(upper[-2], upper[-1], p) <= 0:
            upper.pop()
        upper.append(p)

    return lower[:-1] + upper[:-1]


def contains(hull: list[LatLng], point: LatLng, tol: float = 1e-9) -> bool:
    """
    Check that point lies inside or on the boundary of a counter-clockwise convex polygon.
    """
    n = len(hull)
    for i in range(n):
        a, b = hull[i], hull[(i + 1) % n]
        if a == b:
            continue
        if cross(a, b, point) < -tol:
            return False
    return True
