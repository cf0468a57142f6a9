from .vectorizer import (
    shape_to_shapely,
    frame_to_shapely,
    snapshot,
    draw_snapshot_on_axis,
    save_shapes_as_png,
)
from .renderer import render_comparison
