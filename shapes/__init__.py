# Re-export core geometry API for convenience
from .geometry import (
    ShapeError,
    InvalidArgument,
    InvalidGeometry,
    Point,
    FrameRect,
    Affine2D,
    Shape,
    Rectangle,
    Rubber,
    Polygon,
    BUILTIN_POLYGON_VERTICES,
    signed_area,
    polygon_centroid,
)
