import numpy as np
import matplotlib.pyplot as plt
from shapely.geometry import Polygon as ShapelyPolygon, Point as ShapelyPoint, box
import shapely.ops
from shapely.validation import make_valid
from typing import Any, List, Optional, Sequence, Tuple
import io
from PIL import Image

from shapes import FrameRect, Polygon, Rectangle, Rubber, Shape

# Fill colors per shape kind, RGB in [0, 1]
KIND_COLORS = {
    "Rectangle": np.array([0.9, 0.2, 0.2]),
    "Rubber": np.array([0.2, 0.8, 0.5]),
    "Polygon": np.array([0.2, 0.45, 0.95]),
}
DEFAULT_COLOR = np.array([0.6, 0.6, 0.6])


def shape_to_shapely(shape: Shape) -> Any:
    if isinstance(shape, Rectangle):
        c = shape.center
        return box(
            c.x - shape.width / 2, c.y - shape.height / 2,
            c.x + shape.width / 2, c.y + shape.height / 2,
        )
    if isinstance(shape, Rubber):
        c = shape.center
        outer = ShapelyPoint(c.x, c.y).buffer(shape.outer_radius, quad_segs=64)
        inner = ShapelyPoint(c.x, c.y).buffer(shape.inner_radius, quad_segs=64)
        return outer.difference(inner)
    if isinstance(shape, Polygon):
        geom = ShapelyPolygon(shape.vertices)
        if not geom.is_valid:
            # self-intersecting outline
            geom = make_valid(geom)
        return geom
    raise ValueError(f"Unknown shape kind {type(shape).__name__}")


def frame_to_shapely(frame: FrameRect) -> Any:
    return box(frame.left, frame.bottom, frame.right, frame.top)


def snapshot(shapes: Sequence[Shape]) -> List[Tuple[Any, FrameRect, np.ndarray]]:
    """
    Freeze the current geometry of each shape as [(geometry, frame, rgb), ...].
    Shapes mutate in place, so this is how a 'before' picture is kept.
    """
    return [
        (shape_to_shapely(s), s.frame_rect(), KIND_COLORS.get(type(s).__name__, DEFAULT_COLOR))
        for s in shapes
    ]


def _polygon_parts(geom: Any) -> List[ShapelyPolygon]:
    # make_valid can return nested collections
    if isinstance(geom, ShapelyPolygon):
        return [] if geom.is_empty else [geom]
    if hasattr(geom, "geoms"):
        return [p for g in geom.geoms for p in _polygon_parts(g)]
    return []


def draw_snapshot_on_axis(
    ax: plt.Axes,
    patches: Sequence[Tuple[Any, FrameRect, np.ndarray]],
    total_frame: Optional[FrameRect] = None,
    margin: float = 0.5,
) -> None:
    """
    Fill every geometry with its color and outline its frame.
    The optional total frame is drawn dashed in black.
    """
    geoms = [g for g, _, _ in patches if not g.is_empty]
    frames = [frame_to_shapely(f) for _, f, _ in patches]
    if total_frame is not None:
        frames.append(frame_to_shapely(total_frame))

    ax.set_aspect('equal')
    if not geoms and not frames:
        ax.axis('off')
        return

    minx, miny, maxx, maxy = shapely.ops.unary_union(geoms + frames).bounds
    ax.set_xlim(minx - margin, maxx + margin)
    ax.set_ylim(miny - margin, maxy + margin)

    for geom, frame, rgb in patches:
        rgba = np.append(np.array(rgb).flatten()[:3], 0.6)
        for part in _polygon_parts(geom):
            x, y = part.exterior.xy
            ax.fill(x, y, fc=rgba, ec=rgba[:3], linewidth=0.8, joinstyle='round')
            for interior in part.interiors:
                xi, yi = interior.xy
                ax.fill(xi, yi, fc='white', ec=rgba[:3], linewidth=0.8)
        fx, fy = frame_to_shapely(frame).exterior.xy
        ax.plot(fx, fy, color=rgba[:3], linewidth=1.0)

    if total_frame is not None:
        tx, ty = frame_to_shapely(total_frame).exterior.xy
        ax.plot(tx, ty, color='black', linewidth=1.2, linestyle='--')

    ax.grid(True, alpha=0.2, linestyle='--')


def save_shapes_as_png(
    shapes: Sequence[Shape],
    filename: Optional[str] = None,
    total_frame: Optional[FrameRect] = None,
    resolution: int = 256
) -> Optional[Image.Image]:
    """
    Saves the shapes as a PNG, or returns the PIL Image object if filename
    is None (in-memory rendering).
    """
    DPI_CALC = resolution / 3.0

    fig, ax = plt.subplots(figsize=(3, 3))

    draw_snapshot_on_axis(ax, snapshot(shapes), total_frame=total_frame)

    if filename is None:
        # Save to an in-memory buffer
        buffer = io.BytesIO()
        fig.savefig(
            buffer,
            format='png',
            dpi=DPI_CALC,
            bbox_inches='tight',
            facecolor='white'
        )
        plt.close(fig)
        buffer.seek(0)
        return Image.open(buffer)

    fig.savefig(
        filename,
        format='png',
        dpi=DPI_CALC,
        bbox_inches='tight',
        facecolor='white'
    )
    plt.close(fig)
    return None
