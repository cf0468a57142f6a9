from __future__ import annotations

from typing import Any, Optional, Sequence, Tuple
import logging
import os
import numpy as np
import matplotlib.pyplot as plt

from shapes import FrameRect

from plotting.vectorizer import draw_snapshot_on_axis

logger = logging.getLogger(__name__)

Snapshot = Sequence[Tuple[Any, FrameRect, np.ndarray]]


def render_comparison(
    before: Snapshot,
    after: Snapshot,
    out_path: str,
    before_frame: Optional[FrameRect] = None,
    after_frame: Optional[FrameRect] = None,
    titles: Tuple[str, str] = ("Before", "After"),
    figsize_per_cell: Tuple[float, float] = (5.0, 5.0),
    dpi: int = 200,
) -> None:
    """
    Two panels side by side: the shapes before and after the transform,
    each with its per-shape frames and the frame of all shapes.
    Format follows the extension of out_path (svg or png).
    """
    fig, axes = plt.subplots(
        1, 2,
        figsize=(figsize_per_cell[0] * 2, figsize_per_cell[1]),
        constrained_layout=True,
    )
    fig.patch.set_facecolor('white')

    for ax, patches, frame, title in zip(axes, (before, after), (before_frame, after_frame), titles):
        draw_snapshot_on_axis(ax, patches, total_frame=frame)
        ax.set_title(title, fontsize=10, color='black')

    out_dir = os.path.dirname(out_path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)

    fmt = "svg" if out_path.endswith(".svg") else "png"

    fig.savefig(out_path, dpi=dpi, format=fmt, transparent=False, facecolor='white')
    plt.close(fig)
    logger.info(f"Saved comparison plot -> {out_path}")
