from __future__ import annotations

from typing import List, Sequence, Tuple
import math

from shapes import FrameRect, Point, Shape

from .collection import full_frame, total_area


class InputFormatError(ValueError):
    pass


def parse_user_input(text: str) -> Tuple[Point, float]:
    """
    Parse 'x y coef' from whitespace-separated text. Extra tokens are ignored.
    """
    tokens = text.split()
    if len(tokens) < 3:
        raise InputFormatError(f"expected 3 numbers 'x y coef', got {len(tokens)} value(s)")
    try:
        x, y, coef = (float(tok) for tok in tokens[:3])
    except ValueError as e:
        raise InputFormatError(f"invalid number in input: {e}") from e
    if not all(math.isfinite(v) for v in (x, y, coef)):
        raise InputFormatError(f"input values must be finite numbers, got {x} {y} {coef}")
    return Point(x, y), coef


def _format_frame(title: str, frame: FrameRect) -> List[str]:
    return [
        f"{title}:",
        f"\tCenter: {{{frame.center.x:g}, {frame.center.y:g}}}",
        f"\tWidth: {frame.width:g}",
        f"\tHeight: {frame.height:g}",
    ]


def format_report(shapes: Sequence[Shape], include_origin: bool = False) -> str:
    lines: List[str] = []
    for s in shapes:
        lines.append(f"Area {type(s).__name__}: {s.area():g}")
    lines.append(f"Total area: {total_area(shapes):g}")
    lines.append("")
    for s in shapes:
        lines.extend(_format_frame(f"Frame {type(s).__name__}", s.frame_rect()))
    lines.append("")
    lines.extend(_format_frame("Frame of all shapes", full_frame(shapes, include_origin=include_origin)))
    return "\n".join(lines) + "\n"
