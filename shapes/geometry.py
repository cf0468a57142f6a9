from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple
import logging
import math
import numpy as np

logger = logging.getLogger(__name__)


class ShapeError(Exception):
    pass


class InvalidArgument(ShapeError, ValueError):
    """
    Non-positive size, radius or scale factor, or a malformed vertex array.
    """


class InvalidGeometry(InvalidArgument):
    """
    Polygon with fewer than 3 vertices or zero signed area.
    """


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class FrameRect:
    """
    Axis-aligned rectangle described by its center and full width/height.
    """
    width: float
    height: float
    center: Point

    def __post_init__(self):
        if self.width < 0.0 or self.height < 0.0:
            raise InvalidArgument(f"frame extents must be non-negative, got {self.width}x{self.height}")

    @property
    def left(self) -> float:
        return self.center.x - self.width * 0.5

    @property
    def right(self) -> float:
        return self.center.x + self.width * 0.5

    @property
    def bottom(self) -> float:
        return self.center.y - self.height * 0.5

    @property
    def top(self) -> float:
        return self.center.y + self.height * 0.5

    def corners(self) -> Tuple[Point, Point, Point, Point]:
        return (
            Point(self.left, self.bottom),
            Point(self.right, self.bottom),
            Point(self.right, self.top),
            Point(self.left, self.top),
        )

    @staticmethod
    def from_edges(left: float, right: float, bottom: float, top: float) -> "FrameRect":
        return FrameRect(
            width=right - left,
            height=top - bottom,
            center=Point((left + right) * 0.5, (bottom + top) * 0.5),
        )


@dataclass(frozen=True)
class Affine2D:
    """
    2D affine transform x -> A x + t
    """
    A: np.ndarray  # shape (2, 2)
    t: np.ndarray  # shape (2,)

    def __post_init__(self):
        if self.A.shape != (2, 2):
            raise ValueError("A must be 2x2")
        if self.t.shape != (2,):
            raise ValueError("t must be length-2")

    def apply_many(self, points_xy: np.ndarray) -> np.ndarray:
        # rows are points
        return points_xy @ self.A.T + self.t

    # ---- Constructors and composition ----
    @staticmethod
    def from_translate(dx: float, dy: float) -> "Affine2D":
        return Affine2D(A=np.eye(2), t=np.array([dx, dy], dtype=float))

    @staticmethod
    def from_scale(factor: float) -> "Affine2D":
        return Affine2D(A=np.array([[factor, 0.0], [0.0, factor]], dtype=float), t=np.zeros(2))

    @staticmethod
    def from_scale_about(factor: float, origin: Point) -> "Affine2D":
        """
        Uniform scale that keeps 'origin' fixed.
        """
        to_origin = Affine2D.from_translate(-origin.x, -origin.y)
        back = Affine2D.from_translate(origin.x, origin.y)
        return to_origin.then(Affine2D.from_scale(factor)).then(back)

    def then(self, after: "Affine2D") -> "Affine2D":
        """
        First apply self, then apply 'after'.
        y = after.apply_many(self.apply_many(x))
        """
        A_new = after.A @ self.A
        t_new = after.A @ self.t + after.t
        return Affine2D(A=A_new, t=t_new)


class Shape:
    """
    Common contract of the shape kinds: area, frame, moves and scaling
    around the shape's own reference point.
    """
    def area(self) -> float:
        raise NotImplementedError

    def frame_rect(self) -> FrameRect:
        raise NotImplementedError

    @property
    def reference_point(self) -> Point:
        raise NotImplementedError

    def move_to(self, point: Point) -> None:
        raise NotImplementedError

    def move_by(self, dx: float, dy: float) -> None:
        raise NotImplementedError

    def scale(self, factor: float) -> None:
        # Subclasses implement _scale_impl, not scale.
        if not math.isfinite(factor) or factor <= 0:
            raise InvalidArgument(f"scale factor must be positive and finite, got {factor}")
        self._scale_impl(float(factor))

    def _scale_impl(self, factor: float) -> None:
        raise NotImplementedError

    def __repr__(self) -> str:
        frame = self.frame_rect()
        return f"{type(self).__name__}(area={self.area():.4g}, frame={frame})"


class Rectangle(Shape):
    def __init__(self, center: Point, width: float, height: float):
        if width <= 0 or height <= 0:
            raise InvalidArgument(f"Rectangle needs positive width and height, got {width}x{height}")
        self.center = center
        self.width = float(width)
        self.height = float(height)

    @property
    def reference_point(self) -> Point:
        return self.center

    def area(self) -> float:
        return self.width * self.height

    def frame_rect(self) -> FrameRect:
        return FrameRect(width=self.width, height=self.height, center=self.center)

    def move_to(self, point: Point) -> None:
        self.center = point

    def move_by(self, dx: float, dy: float) -> None:
        self.center = Point(self.center.x + dx, self.center.y + dy)

    def _scale_impl(self, factor: float) -> None:
        self.width *= factor
        self.height *= factor


class Rubber(Shape):
    """
    Annulus between two radii.

    'center' is the point that moves and scales. The frame is reported
    around 'outer_center', which is fixed at construction and never moves.
    """
    def __init__(self, center: Point, outer_center: Point, inner_radius: float, outer_radius: float):
        if inner_radius <= 0 or outer_radius <= 0:
            raise InvalidArgument(
                f"Rubber needs positive radii, got inner={inner_radius} outer={outer_radius}"
            )
        self.center = center
        self.outer_center = outer_center
        self.inner_radius = float(inner_radius)
        self.outer_radius = float(outer_radius)

    @property
    def reference_point(self) -> Point:
        return self.center

    def area(self) -> float:
        return math.pi * self.outer_radius ** 2 - math.pi * self.inner_radius ** 2

    def frame_rect(self) -> FrameRect:
        side = 2.0 * self.outer_radius
        return FrameRect(width=side, height=side, center=self.outer_center)

    def move_to(self, point: Point) -> None:
        self.center = point

    def move_by(self, dx: float, dy: float) -> None:
        self.center = Point(self.center.x + dx, self.center.y + dy)

    def _scale_impl(self, factor: float) -> None:
        self.inner_radius *= factor
        self.outer_radius *= factor


BUILTIN_POLYGON_VERTICES: Tuple[Tuple[float, float], ...] = (
    (1.2, 5.6),
    (3.3, -4.7),
    (1.1, 9.3),
    (-5.5, -3.0),
    (-7.3, -0.3),
    (-2.1, 4.8),
    (3.6, 8.3),
)


def _as_vertex_array(vertices: Sequence[Sequence[float]] | np.ndarray) -> np.ndarray:
    verts = np.array(vertices, dtype=float)
    if verts.ndim != 2 or verts.shape[1] != 2:
        raise InvalidArgument(f"vertices must be an (N, 2) array, got shape {verts.shape}")
    if verts.shape[0] < 3:
        raise InvalidGeometry(f"Polygon requires at least 3 vertices, got {verts.shape[0]}")
    return verts


def signed_area(vertices: np.ndarray) -> float:
    """
    Shoelace sum over cyclic vertex pairs (i, i+1 mod n), halved.
    Positive for counter-clockwise order.
    """
    x = vertices[:, 0]
    y = vertices[:, 1]
    x_next = np.roll(x, -1)
    y_next = np.roll(y, -1)
    return 0.5 * float(np.sum(x * y_next - x_next * y))


def polygon_centroid(vertices: np.ndarray) -> Point:
    """
    Area-weighted centroid of a simple polygon.
    Raises InvalidGeometry when the signed area is exactly zero.
    """
    verts = _as_vertex_array(vertices)
    a = signed_area(verts)
    if a == 0.0:
        raise InvalidGeometry("degenerate polygon: signed area is zero")
    x = verts[:, 0]
    y = verts[:, 1]
    x_next = np.roll(x, -1)
    y_next = np.roll(y, -1)
    cross = x * y_next - x_next * y
    cx = float(np.sum((x + x_next) * cross)) / (6.0 * a)
    cy = float(np.sum((y + y_next) * cross)) / (6.0 * a)
    return Point(cx, cy)


class Polygon(Shape):
    """
    Polygon defined by an ordered list of vertices (2D points).
    Orientation can be CW or CCW. The reference point is the centroid at
    construction time and afterwards only follows explicit moves.
    """
    def __init__(self, vertices: Sequence[Sequence[float]] | np.ndarray):
        verts = _as_vertex_array(vertices)
        self._reference = polygon_centroid(verts)
        self.vertices = verts
        logger.debug(f"Polygon with {len(verts)} vertices, centroid {self._reference}")

    @classmethod
    def builtin(cls, vertex_count: int = len(BUILTIN_POLYGON_VERTICES)) -> "Polygon":
        """
        Polygon over the first 'vertex_count' points of the built-in vertex set.
        """
        if vertex_count < 3:
            raise InvalidGeometry(f"Polygon requires at least 3 vertices, got {vertex_count}")
        if vertex_count > len(BUILTIN_POLYGON_VERTICES):
            raise InvalidGeometry(
                f"built-in vertex set has {len(BUILTIN_POLYGON_VERTICES)} points, requested {vertex_count}"
            )
        return cls(BUILTIN_POLYGON_VERTICES[:vertex_count])

    @property
    def reference_point(self) -> Point:
        return self._reference

    def area(self) -> float:
        return abs(signed_area(self.vertices))

    def frame_rect(self) -> FrameRect:
        xmin, ymin = self.vertices.min(axis=0)
        xmax, ymax = self.vertices.max(axis=0)
        return FrameRect.from_edges(float(xmin), float(xmax), float(ymin), float(ymax))

    def _apply(self, T: Affine2D) -> None:
        self.vertices = T.apply_many(self.vertices)

    def move_to(self, point: Point) -> None:
        dx = point.x - self._reference.x
        dy = point.y - self._reference.y
        self._apply(Affine2D.from_translate(dx, dy))
        self._reference = point

    def move_by(self, dx: float, dy: float) -> None:
        self._apply(Affine2D.from_translate(dx, dy))
        self._reference = Point(self._reference.x + dx, self._reference.y + dy)

    def _scale_impl(self, factor: float) -> None:
        self._apply(Affine2D.from_scale_about(factor, self._reference))
