from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from shapes import BUILTIN_POLYGON_VERTICES


@dataclass(frozen=True)
class RectangleParams:
    center: Tuple[float, float] = (3.0, 3.0)
    width: float = 8.0
    height: float = 5.0


@dataclass(frozen=True)
class RubberParams:
    center: Tuple[float, float] = (-7.0, -2.0)
    outer_center: Tuple[float, float] = (-5.0, 0.0)
    inner_radius: float = 3.5
    outer_radius: float = 9.0


@dataclass(frozen=True)
class PolygonParams:
    # Number of points taken from the built-in vertex set
    vertex_count: int = len(BUILTIN_POLYGON_VERTICES)


@dataclass(frozen=True)
class SceneConfig:
    rectangle: RectangleParams = RectangleParams()
    rubber: RubberParams = RubberParams()
    polygon: PolygonParams = PolygonParams()
    origin_seeded_frame: bool = False
