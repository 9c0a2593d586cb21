import csv
import logging
import math
import time

import numpy as np

from geometry import LatLng

logger = logging.getLogger(__name__)

DISTRIBUTIONS = ("uniform", "circle", "gaussian", "clusters")


def _parse_point(line: str, lineno: int) -> LatLng:
    parts = line.replace(",", " ").split()
    if len(parts) != 2:
        raise ValueError(f"Line {lineno}: expected 'lat lng', got {line!r}")
    try:
        lat, lng = map(float, parts)
    except ValueError:
        raise ValueError(f"Line {lineno}: coordinates must be numbers, got {line!r}") from None
    if not (math.isfinite(lat) and math.isfinite(lng)):
        raise ValueError(f"Line {lineno}: coordinates must be finite, got {line!r}")
    return LatLng(lat, lng)


def load_points(filename) -> list[LatLng]:
    """
    Read a point file: the number of points on the first line,
    then one `lat lng` pair per line.
    """
    with open(filename, 'r', encoding='utf-8') as f:
        lines = [(i, line.strip()) for i, line in enumerate(f, start=1)]
    lines = [(i, line) for i, line in lines if line]
    if not lines:
        raise ValueError(f"{filename}: file is empty")

    header_lineno, header = lines[0]
    try:
        n = int(header)
    except ValueError:
        raise ValueError(f"Line {header_lineno}: expected point count, got {header!r}") from None
    if n < 0:
        raise ValueError(f"Line {header_lineno}: point count must not be negative")

    body = lines[1:n + 1]
    if len(body) < n:
        raise ValueError(f"{filename}: expected {n} points, found {len(body)}")

    points = [_parse_point(line, i) for i, line in body]
    logger.info("Loaded %d points from %s", len(points), filename)
    return points


def save_points(filename, points: list[LatLng]):
    with open(filename, 'w', encoding='utf-8') as f:
        f.write(f"{len(points)}\n")
        for pt in points:
            f.write(f"{float(pt.lat)!r} {float(pt.lng)!r}\n")


def save_hull(filename, hull: list[LatLng]):
    """
    Write hull vertices in order. A `.csv` name gives a csv table,
    anything else the plain point file format.
    """
    if str(filename).endswith('.csv'):
        with open(filename, 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f)
            writer.writerow(["index", "lat", "lng"])
            for i, pt in enumerate(hull):
                writer.writerow([i, pt.lat, pt.lng])
    else:
        save_points(filename, hull)
    logger.info("Saved %d hull vertices to %s", len(hull), filename)


def build_report(points, hull, execution_time: float, source: str | None = None) -> str:
    speed = len(points) / execution_time if execution_time > 0 else 0
    report = f"""{'=' * 60}
CONVEX HULL REPORT
{'=' * 60}
Source: {source if source else 'generated'}
Points: {len(points)}
Hull vertices: {len(hull)}
Execution time: {execution_time:.6f} s
Throughput: {speed:.0f} points/s

VERTICES:
"""
    for i, pt in enumerate(hull):
        report += f"{i:4d}: {pt.lat:12.6f} {pt.lng:12.6f}\n"

    report += f"""{'=' * 60}
Generated: {time.strftime('%Y-%m-%d %H:%M:%S')}
{'=' * 60}
"""
    return report


def generate_random_points(n: int, distribution: str = "uniform", seed: int = 42) -> list[LatLng]:
    """
    Random lat/lng points around a center in the valid coordinate range.
    """
    if n <= 0:
        raise ValueError(f"Number of points must be positive, got {n}")
    if distribution not in DISTRIBUTIONS:
        raise ValueError(f"Unknown distribution {distribution!r}, expected one of {', '.join(DISTRIBUTIONS)}")

    rng = np.random.default_rng(seed)

    if distribution == "uniform":
        lats = rng.uniform(-60, 60, n)
        lngs = rng.uniform(-120, 120, n)
    elif distribution == "circle":
        angle = rng.uniform(0, 2 * np.pi, n)
        r = 60 * np.sqrt(rng.uniform(0, 1, n))
        lats = r * np.sin(angle)
        lngs = r * np.cos(angle)
    elif distribution == "gaussian":
        lats = rng.normal(0, 20, n)
        lngs = rng.normal(0, 40, n)
    else:
        n_clusters = 5
        centers = rng.uniform((-50, -100), (50, 100), size=(n_clusters, 2))
        labels = rng.integers(0, n_clusters, n)
        lats = rng.normal(centers[labels, 0], 5)
        lngs = rng.normal(centers[labels, 1], 10)

    lats = np.clip(lats, -90, 90)
    lngs = np.clip(lngs, -180, 180)
    return [LatLng(float(lat), float(lng)) for lat, lng in zip(lats, lngs)]
