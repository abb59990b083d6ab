import argparse
import logging
import sys
import time

import matplotlib.pyplot as plt

from graham_scan import convex_hull
from point_io import DISTRIBUTIONS, generate_random_points, load_points, save_points
from visualization import plot_hull, plot_points

logger = logging.getLogger(__name__)

DEFAULT_COUNT = 100
DEFAULT_SEED = 42
DEFAULT_DISTRIBUTION = "uniform"


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Convex hull of a 2D point set (Graham scan)")
    parser.add_argument("input", nargs="?",
                        help="Point file: count on the first line, then 'x y' per line")
    parser.add_argument("--generate", nargs="?", const=DEFAULT_DISTRIBUTION, choices=DISTRIBUTIONS,
                        help=f"Generate random points instead of reading a file (default: {DEFAULT_DISTRIBUTION})")
    parser.add_argument("--count", type=int, default=DEFAULT_COUNT,
                        help="Number of generated points")
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED,
                        help="Random seed for generated points")
    parser.add_argument("-o", "--output", help="Write hull vertices to this file")
    parser.add_argument("--plot", action="store_true", help="Show points and hull")
    parser.add_argument("--save-figure", help="Save the plot to this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    args = parser.parse_args(argv)
    if (args.input is None) == (args.generate is None):
        parser.error("give either an input file or --generate")
    if args.count < 0:
        parser.error("--count must be non-negative")
    return args


def show_plot(points, hull, filename=None):
    fig, ax = plt.subplots(figsize=(8, 8))
    plot_points(points, ax)
    plot_hull(hull, ax)
    ax.set_aspect('equal')
    ax.grid()
    ax.set_title(f"{len(points)} points, {len(hull)} hull vertices")

    if filename:
        fig.savefig(filename, dpi=150)
        plt.close(fig)
        logger.info("Figure saved to %s", filename)
    else:
        plt.show()


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.generate:
            points = generate_random_points(args.count, args.generate, args.seed)
        else:
            points = load_points(args.input)
    except (OSError, ValueError) as e:
        logger.error("Failed to load points: %s", e)
        return 1

    start_time = time.perf_counter()
    hull = convex_hull(points)
    execution_time = time.perf_counter() - start_time
    logger.info("Hull of %d points computed in %.4f s", len(points), execution_time)

    for p in hull:
        print(f"{p.x} {p.y}")

    if args.output:
        try:
            save_points(args.output, hull)
        except OSError as e:
            logger.error("Failed to write %s: %s", args.output, e)
            return 1

    if args.plot or args.save_figure:
        show_plot(points, hull, args.save_figure)

    return 0


if __name__ == "__main__":
    sys.exit(main())
