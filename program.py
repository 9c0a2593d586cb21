"""
Command line front end for the QuickHull builder.

    python program.py hull points.txt --output hull.csv --plot hull.png
    python program.py generate 1000 --distribution circle --output points.txt
    python program.py compare points.txt
"""

import argparse
import logging
import os
import sys
import time

from geometry import convex_hull_andrew
from points_io import DISTRIBUTIONS, build_report, generate_random_points, load_points, save_hull, save_points
from quickhull import QuickHullBuilder

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _cmd_hull(args: argparse.Namespace) -> int:
    points = load_points(args.input)

    start_time = time.perf_counter()
    hull = QuickHullBuilder().get_convex_hull(points)
    execution_time = time.perf_counter() - start_time

    print(build_report(points, hull, execution_time, source=os.path.basename(args.input)))

    if args.output:
        save_hull(args.output, hull)
    if args.plot:
        # matplotlib is only needed for plotting
        from visualization import save_hull_plot

        save_hull_plot(points, hull, args.plot)
        logger.info("Plot saved to %s", args.plot)
    return 0


def _cmd_generate(args: argparse.Namespace) -> int:
    points = generate_random_points(args.n, args.distribution, seed=args.seed)
    save_points(args.output, points)
    logger.info("Generated %d points (%s) into %s", len(points), args.distribution, args.output)
    return 0


def _cmd_compare(args: argparse.Namespace) -> int:
    points = load_points(args.input)

    algorithms = {
        "QuickHull": QuickHullBuilder().get_convex_hull,
        "Monotone chain": convex_hull_andrew,
    }
    results = {}
    for name, algo in algorithms.items():
        start = time.perf_counter()
        hull = algo(points)
        results[name] = (hull, time.perf_counter() - start)

    print(f"{'Algorithm':<16}{'Time (s)':>12}{'Vertices':>10}{'Points/s':>14}")
    for name, (hull, exec_time) in results.items():
        speed = len(points) / exec_time if exec_time > 0 else 0
        print(f"{name:<16}{exec_time:>12.6f}{len(set(hull)):>10}{speed:>14.0f}")

    vertex_sets = [set(hull) for hull, _ in results.values()]
    same = all(s == vertex_sets[0] for s in vertex_sets)
    print("Vertex sets match" if same else "Vertex sets differ")
    return 0 if same else 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="quickhull", description="Convex hull of lat/lng points")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=os.environ.get("QUICKHULL_LOG_LEVEL", "INFO"),
        help="Logging level (default: $QUICKHULL_LOG_LEVEL or INFO)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_hull = sub.add_parser("hull", help="Compute the convex hull of a point file")
    p_hull.add_argument("input", help="Point file: count on the first line, then 'lat lng' lines")
    p_hull.add_argument("--output", help="Save hull vertices (.csv for a table)")
    p_hull.add_argument("--plot", help="Save a plot of the points and hull (.png, .pdf, .svg)")
    p_hull.set_defaults(func=_cmd_hull)

    p_gen = sub.add_parser("generate", help="Generate random points")
    p_gen.add_argument("n", type=int, help="Number of points")
    p_gen.add_argument("--distribution", choices=DISTRIBUTIONS, default="uniform")
    p_gen.add_argument("--seed", type=int, default=42)
    p_gen.add_argument("--output", required=True)
    p_gen.set_defaults(func=_cmd_generate)

    p_cmp = sub.add_parser("compare", help="Compare QuickHull with the monotone chain algorithm")
    p_cmp.add_argument("input")
    p_cmp.set_defaults(func=_cmd_compare)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    # argparse does not check choices for a default taken from the environment
    if args.log_level not in LOG_LEVELS:
        parser.error(f"invalid QUICKHULL_LOG_LEVEL {args.log_level!r} (choose from {', '.join(LOG_LEVELS)})")
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        return args.func(args)
    except (ValueError, OSError) as e:
        logger.error("%s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
