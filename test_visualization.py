import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt

from geometry import Point
from graham_scan import convex_hull
from point_io import generate_random_points
from program import main, show_plot
from visualization import plot_hull, plot_points


def test_plot_hull_closes_polygon():
    hull = [Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1)]
    fig, ax = plt.subplots()
    plot_points(hull + [Point(0.5, 0.5)], ax)
    plot_hull(hull, ax)

    line = ax.get_lines()[0]
    assert list(line.get_xdata()) == [0, 1, 1, 0, 0]
    assert list(line.get_ydata()) == [0, 0, 1, 1, 0]
    plt.close(fig)


def test_plot_hull_empty():
    fig, ax = plt.subplots()
    plot_hull([], ax)
    assert not ax.get_lines()
    plt.close(fig)


def test_show_plot_saves_figure(tmp_path):
    points = generate_random_points(30, "gaussian")
    target = tmp_path / "hull.png"
    show_plot(points, convex_hull(points), target)
    assert target.stat().st_size > 0


def test_main_default_distribution_with_figure(tmp_path, capsys):
    target = tmp_path / "hull.png"
    assert main(["--generate", "--count", "20", "--save-figure", str(target)]) == 0
    hull = convex_hull(generate_random_points(20, "uniform"))
    assert len(capsys.readouterr().out.splitlines()) == len(hull)
    assert target.exists()
