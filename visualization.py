import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from geometry import LatLng


def plot_points(points: list[LatLng], ax: Axes | None = None, **kwargs):
    x = [p.lng for p in points]
    y = [p.lat for p in points]
    if ax is None:
        plt.scatter(x, y, **kwargs)
    else:
        ax.scatter(x, y, **kwargs)


def plot_hull(hull: list[LatLng], ax: Axes | None = None, color: str = 'r'):
    """
    Draw the hull polygon, closing the last vertex back to the first.
    """
    closed = hull + hull[:1]
    xs = [p.lng for p in closed]
    ys = [p.lat for p in closed]
    target = plt if ax is None else ax
    target.plot(xs, ys, c=color)
    target.scatter(xs[:-1], ys[:-1], c=color, s=12)


def save_hull_plot(points: list[LatLng], hull: list[LatLng], filename, title: str | None = None):
    fig = Figure(figsize=(8, 6))
    ax = fig.add_subplot(111)

    plot_points(points, ax, s=2, c='b')
    plot_hull(hull, ax)

    ax.set_xlabel("Longitude")
    ax.set_ylabel("Latitude")
    ax.set_title(title or f"Convex hull ({len(hull)} of {len(points)} points)")
    ax.grid(True, alpha=0.3)

    fig.savefig(filename, dpi=150, bbox_inches='tight')
    return fig
