import matplotlib

matplotlib.use("Agg")

import pytest

from scene import SceneConfig, build_shapes
from shapes import Point, Polygon, Rectangle, Rubber


@pytest.fixture
def rectangle():
    return Rectangle(Point(3.0, 3.0), 8.0, 5.0)


@pytest.fixture
def rubber():
    return Rubber(Point(-7.0, -2.0), Point(-5.0, 0.0), 3.5, 9.0)


@pytest.fixture
def polygon():
    return Polygon.builtin(7)


@pytest.fixture
def startup_shapes():
    return build_shapes(SceneConfig())
