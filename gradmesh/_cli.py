"""
Command line entry point.

    python -m gradmesh                     # interactive window
    python -m gradmesh --lines --palette 4
    python -m gradmesh --frames 120 --save mesh.gif
"""
from __future__ import annotations

import argparse
import logging

from gradmesh._config import SimulationConfig
from gradmesh._driver import FrameDriver
from gradmesh._palette import COLOR_COMBOS


def build_parser():
    parser = argparse.ArgumentParser(
        prog="gradmesh",
        description="Animated Delaunay gradient mesh. Hold the mouse button "
                    "to steer nearby points; press 1-{} to switch color "
                    "schemes.".format(len(COLOR_COMBOS)))
    parser.add_argument("--nodes", type=int, default=200,
                        help="Number of moving points")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for point placement")
    parser.add_argument("--palette", type=int, default=1,
                        choices=range(1, len(COLOR_COMBOS) + 1),
                        help="Initial color scheme (1-based)")
    parser.add_argument("--lines", action="store_true",
                        help="Draw triangle edges")
    parser.add_argument("--no-markers", action="store_true",
                        help="Do not draw the points")
    parser.add_argument("--width", type=float, default=8.0,
                        help="Window width in inches")
    parser.add_argument("--height", type=float, default=6.0,
                        help="Window height in inches")
    parser.add_argument("--dpi", type=float, default=100.0,
                        help="Figure resolution")
    parser.add_argument("--interval", type=int, default=16,
                        help="Milliseconds between frames")
    parser.add_argument("--fixed-step", action="store_true",
                        help="Advance by --interval every frame instead of "
                             "the measured time")
    parser.add_argument("--frames", type=int, default=None,
                        help="Stop after this many frames")
    parser.add_argument("--save", type=str, default="",
                        help="Render headless to an animated image file")
    parser.add_argument("--log-level", type=str, default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging verbosity")
    return parser


def config_from_args(args) -> SimulationConfig:
    return SimulationConfig(node_count=args.nodes,
                            draw_lines=args.lines,
                            draw_markers=not args.no_markers,
                            initial_combo=args.palette - 1,
                            seed=args.seed)


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(levelname)s: %(message)s")

    try:
        config = config_from_args(args)
    except ValueError as exc:
        parser.error(str(exc))

    if args.save:
        import matplotlib
        matplotlib.use('Agg')
    from matplotlib import pyplot
    from gradmesh._plotting import animate_mesh

    driver = FrameDriver(config)
    frames = args.frames
    if args.save and frames is None:
        frames = 120
    fig, ax, anim = animate_mesh(driver, frames=frames,
                                 interval=args.interval,
                                 figsize=(args.width, args.height),
                                 dpi=args.dpi,
                                 fixed_step=args.fixed_step or bool(args.save))

    if args.save:
        from matplotlib.animation import PillowWriter
        logging.info(f"Rendering {frames} frames to {args.save}")
        anim.save(args.save, writer=PillowWriter(fps=max(1, round(1000 / args.interval))),
                  dpi=args.dpi)
        pyplot.close(fig)
    else:
        logging.info("Press the number keys to switch color schemes")
        pyplot.show()
    driver.stop()
    return 0
