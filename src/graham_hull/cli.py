import argparse
import logging
import time
from pathlib import Path

import numpy as np

from graham_hull.config import CFG
from graham_hull.geometry import covers_segment
from graham_hull.geometry import encloses
from graham_hull.geometry import is_strictly_convex
from graham_hull.points_io import load_points
from graham_hull.points_io import save_points
from graham_hull.scan import GrahamScan
from graham_hull.scan import GrahamScanConfig
from graham_hull.scan import compute_hull

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    log_cfg = CFG['logging']
    logging.basicConfig(
        level=getattr(logging, str(log_cfg['level']).upper(), logging.INFO),
        format=log_cfg['format'],
    )


def _build_scanner(preprocess: bool) -> GrahamScan:
    config = GrahamScanConfig.from_cfg()
    if preprocess:
        config.use_preprocessing = True
    return GrahamScan(config)


def run_compute(args: argparse.Namespace) -> int:
    points = load_points(args.points)
    hull = compute_hull(points, _build_scanner(args.preprocess))

    if not hull:
        logger.info("Degenerate input (%d points), no hull", len(points))
    else:
        logger.info("Hull has %d of %d points", len(hull), len(points))

    for p in hull:
        print(f"{p.x:g} {p.y:g}")

    if args.output is not None:
        save_points(hull, args.output)

    if args.plot is not None:
        from graham_hull.rendering import save_hull_plot
        save_hull_plot(points, hull, args.plot)

    if args.verify and len(hull) == 2:
        spanned = covers_segment(hull, points)
        logger.info("Collinear input, segment spans all points: %s", spanned)
        if not spanned:
            return 1
    elif args.verify and hull:
        convex = is_strictly_convex(hull)
        enclosing = encloses(hull, points)
        logger.info("Strictly convex: %s, encloses all points: %s", convex, enclosing)
        if not (convex and enclosing):
            return 1

    return 0


def run_interactive(args: argparse.Namespace) -> int:
    from graham_hull.shell import HullShell

    shell = HullShell()
    logger.info("Click to add points, press space to compute the hull, 'c' to clear.")
    shell.show()
    return 0


def run_bench(args: argparse.Namespace) -> int:
    bench_cfg = CFG['bench']
    count = args.count if args.count != None else bench_cfg['count']
    seed = args.seed if args.seed != None else bench_cfg['seed']

    rng = np.random.default_rng(seed)
    test_points = rng.random((count, 2))

    scanner = _build_scanner(args.preprocess)
    _ = scanner(test_points[:bench_cfg['warmup']])

    start = time.perf_counter()
    hull = scanner(test_points)
    elapsed = time.perf_counter() - start

    logger.info("Hull size: %d points", len(hull))
    logger.info("Time: %.3fs for %s points", elapsed, f"{count:,}")
    logger.info("Throughput: %s points/second", f"{count / elapsed:,.0f}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="graham-hull",
        description="Convex hulls of 2D point sets with the Graham scan.",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a config.yaml overriding the packaged defaults.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    compute = sub.add_parser("compute", help="Compute the hull of a points file.")
    compute.add_argument("points", type=Path, help="Text file with one 'x y' pair per line.")
    compute.add_argument("--output", type=Path, default=None, help="Write hull vertices here.")
    compute.add_argument("--plot", type=Path, default=None, help="Save a PNG of points and hull.")
    compute.add_argument("--preprocess", action="store_true", help="Filter interior points first.")
    compute.add_argument("--verify", action="store_true", help="Check convexity and enclosure.")
    compute.set_defaults(func=run_compute)

    interactive = sub.add_parser("interactive", help="Open the interactive window.")
    interactive.set_defaults(func=run_interactive)

    bench = sub.add_parser("bench", help="Time the hull of random points.")
    bench.add_argument("--count", type=int, default=None)
    bench.add_argument("--seed", type=int, default=None)
    bench.add_argument("--preprocess", action="store_true")
    bench.set_defaults(func=run_bench)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        if args.config is not None:
            CFG.load(args.config)
        configure_logging()
        status = args.func(args)
    except Exception as e:
        logger.exception("An error occurred: %s", e)
        raise SystemExit(1)

    if status:
        raise SystemExit(status)


if __name__ == "__main__":
    main()
