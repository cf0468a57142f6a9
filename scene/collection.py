from __future__ import annotations

from typing import List, Sequence
import logging

from shapes import FrameRect, InvalidArgument, Point, Polygon, Rectangle, Rubber, Shape

from .config import SceneConfig

logger = logging.getLogger(__name__)


def build_shapes(cfg: SceneConfig) -> List[Shape]:
    """
    Build the startup collection [Rectangle, Rubber, Polygon].
    Either all three are returned or the construction error propagates.
    """
    r = cfg.rectangle
    rb = cfg.rubber
    return [
        Rectangle(Point(*r.center), r.width, r.height),
        Rubber(Point(*rb.center), Point(*rb.outer_center), rb.inner_radius, rb.outer_radius),
        Polygon.builtin(cfg.polygon.vertex_count),
    ]


def total_area(shapes: Sequence[Shape]) -> float:
    return float(sum(s.area() for s in shapes))


def full_frame(shapes: Sequence[Shape], include_origin: bool = False) -> FrameRect:
    """
    Frame enclosing the frames of all shapes.

    With include_origin=True the running extremes start at zero, so the
    result always contains the origin.
    """
    frames = [s.frame_rect() for s in shapes]
    if include_origin:
        left = right = bottom = top = 0.0
    else:
        if not frames:
            raise InvalidArgument("full_frame requires at least one shape")
        first = frames[0]
        left, right, bottom, top = first.left, first.right, first.bottom, first.top
    for f in frames:
        left = min(left, f.left)
        right = max(right, f.right)
        bottom = min(bottom, f.bottom)
        top = max(top, f.top)
    return FrameRect.from_edges(left, right, bottom, top)


def move_and_scale(shapes: Sequence[Shape], target: Point, factor: float) -> None:
    """
    Move every shape to 'target' and scale it there by 'factor', keeping
    each frame center's offset from 'target' scaled by the same factor.

    A non-positive factor raises InvalidArgument at the first shape; shapes
    already processed are not rolled back.
    """
    for i, shape in enumerate(shapes):
        before = shape.frame_rect().center
        shape.move_to(target)
        delta = Point(target.x - before.x, target.y - before.y)
        shape.scale(factor)
        shape.move_to(Point(target.x - delta.x * factor, target.y - delta.y * factor))
        logger.debug(f"[{i}] {type(shape).__name__}: frame center {before} -> {shape.frame_rect().center}")
