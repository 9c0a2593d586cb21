import logging

from geometry import signed_distance

logger = logging.getLogger(__name__)


class InvalidInput(ValueError):
    """Raised when the hull of an empty point collection is requested."""


class QuickHullBuilder:
    """
    Convex hull of lat/lng points by recursive QuickHull.

    Points can be any objects with numeric `lat` and `lng` attributes.
    They are only referenced, never copied or modified, so every hull
    vertex is one of the input objects.
    """

    @staticmethod
    def distance(point, baseline) -> float:
        return signed_distance(point, baseline)

    def find_most_distant_point(self, baseline, points):
        """
        Split off the points strictly outside the baseline.

        Returns the farthest outside point (None if there is none) and the
        list of outside points. The scan runs from the end of `points`, so
        the outside list is in reverse input order and on ties the point
        met first in that scan wins.
        """
        max_dist = 0
        max_point = None
        outside = []

        for pt in reversed(points):
            d = self.distance(pt, baseline)
            if not d > 0:
                continue

            outside.append(pt)
            if d > max_dist:
                max_dist = d
                max_point = pt

        return max_point, outside

    def build_convex_hull(self, baseline, points) -> list:
        """
        Hull chain from baseline[0] towards baseline[1] over the points outside the baseline.
        The end point is not included, it is emitted by the adjacent chain.
        """
        max_point, outside = self.find_most_distant_point(baseline, points)
        if max_point is None:
            return [baseline[0]]

        start, end = baseline
        return (
            self.build_convex_hull((start, max_point), outside)
            + self.build_convex_hull((max_point, end), outside)
        )

    def get_convex_hull(self, points) -> list:
        """
        Convex hull of points in counter-clockwise order (lng as x, lat as y).

        The first vertex is not repeated at the end. A single point gives a
        two element hull with that point twice.
        """
        if len(points) == 0:
            raise InvalidInput("Cannot build a convex hull of an empty point set")

        max_lat_pt = min_lat_pt = max_lng_pt = min_lng_pt = None
        for pt in reversed(points):
            if max_lat_pt is None or pt.lat > max_lat_pt.lat:
                max_lat_pt = pt
            if min_lat_pt is None or pt.lat < min_lat_pt.lat:
                min_lat_pt = pt
            if max_lng_pt is None or pt.lng > max_lng_pt.lng:
                max_lng_pt = pt
            if min_lng_pt is None or pt.lng < min_lng_pt.lng:
                min_lng_pt = pt

        if min_lat_pt.lat != max_lat_pt.lat:
            min_pt, max_pt = min_lat_pt, max_lat_pt
        else:
            # all points on one latitude
            min_pt, max_pt = min_lng_pt, max_lng_pt
        logger.debug("Seed baseline %s -> %s for %d points", min_pt, max_pt, len(points))

        hull = (
            self.build_convex_hull((min_pt, max_pt), points)
            + self.build_convex_hull((max_pt, min_pt), points)
        )
        logger.debug("Convex hull has %d vertices", len(hull))
        return hull


_default_builder = QuickHullBuilder()


def get_convex_hull(points) -> list:
    return _default_builder.get_convex_hull(points)


def build_convex_hull(baseline, points) -> list:
    return _default_builder.build_convex_hull(baseline, points)
