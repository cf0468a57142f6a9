from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence, TextIO

from shapes import ShapeError
from plotting import render_comparison, snapshot
from scene import (
    SceneConfig,
    InputFormatError,
    build_shapes,
    full_frame,
    move_and_scale,
    parse_user_input,
    format_report,
)

logger = logging.getLogger("run_shapes")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Read 'x y coef' from stdin, move every shape to (x, y) and scale it there by coef."
    )
    p.add_argument("--plot", type=str, default="", help="write a before/after figure to this path (.png or .svg)")
    p.add_argument(
        "--origin-seeded-frame",
        action="store_true",
        help="start the frame of all shapes at the origin instead of at the first shape",
    )
    p.add_argument("--log-level", type=str, default="WARNING", help="logging level (default: WARNING)")
    return p.parse_args(argv)


def run(cfg: SceneConfig, stdin: TextIO, stdout: TextIO, plot_path: str = "") -> int:
    try:
        shapes = build_shapes(cfg)
    except ShapeError as e:
        logger.error(f"Could not build shapes: {e}")
        return 1
    logger.debug(f"Built {len(shapes)} shapes: {shapes}")

    include_origin = cfg.origin_seeded_frame
    stdout.write(format_report(shapes, include_origin=include_origin))
    stdout.write("\n")

    try:
        target, coef = parse_user_input(stdin.read())
    except InputFormatError as e:
        logger.error(f"Invalid input: {e}")
        return 1

    before = None
    if plot_path:
        before = snapshot(shapes)
        before_frame = full_frame(shapes, include_origin=include_origin)

    try:
        move_and_scale(shapes, target, coef)
    except ShapeError as e:
        logger.error(f"Transform aborted: {e}")
        return 1

    stdout.write("New data:\n\n")
    stdout.write(format_report(shapes, include_origin=include_origin))

    if before is not None:
        render_comparison(
            before,
            snapshot(shapes),
            out_path=plot_path,
            before_frame=before_frame,
            after_frame=full_frame(shapes, include_origin=include_origin),
            titles=("Before", f"After: to ({target.x:g}, {target.y:g}), x{coef:g}"),
        )
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )
    cfg = SceneConfig(origin_seeded_frame=args.origin_seeded_frame)
    return run(cfg, sys.stdin, sys.stdout, plot_path=args.plot)


if __name__ == "__main__":
    sys.exit(main())
