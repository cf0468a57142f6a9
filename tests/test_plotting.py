import math

import pytest
from PIL import Image

from plotting import frame_to_shapely, render_comparison, save_shapes_as_png, shape_to_shapely, snapshot
from scene import full_frame, move_and_scale
from shapes import FrameRect, Point, Polygon


class TestVectorizer:
    def test_rectangle_geometry(self, rectangle):
        geom = shape_to_shapely(rectangle)
        assert geom.area == pytest.approx(rectangle.area())
        assert geom.bounds == (-1.0, 0.5, 7.0, 5.5)

    def test_rubber_geometry_around_center(self, rubber):
        geom = shape_to_shapely(rubber)
        assert geom.area == pytest.approx(rubber.area(), rel=1e-3)
        cx, cy = geom.centroid.x, geom.centroid.y
        assert (cx, cy) == pytest.approx((-7.0, -2.0), abs=1e-6)
        assert len(geom.interiors) == 1

    def test_convex_polygon_geometry(self):
        poly = Polygon([(0.0, 0.0), (4.0, 0.0), (4.0, 3.0), (0.0, 3.0)])
        geom = shape_to_shapely(poly)
        assert geom.area == pytest.approx(poly.area())

    def test_self_intersecting_polygon_is_drawable(self, polygon):
        geom = shape_to_shapely(polygon)
        assert geom.is_valid
        assert not geom.is_empty

    def test_frame_geometry(self):
        geom = frame_to_shapely(FrameRect(4.0, 2.0, Point(1.0, 1.0)))
        assert geom.bounds == (-1.0, 0.0, 3.0, 2.0)

    def test_snapshot_is_frozen(self, rectangle):
        patches = snapshot([rectangle])
        rectangle.scale(2.0)
        geom, frame, rgb = patches[0]
        assert geom.area == pytest.approx(40.0)
        assert frame.width == 8.0
        assert len(rgb) == 3

    def test_png_in_memory(self, startup_shapes):
        img = save_shapes_as_png(startup_shapes, total_frame=full_frame(startup_shapes), resolution=90)
        assert isinstance(img, Image.Image)
        assert img.width > 0 and img.height > 0

    def test_png_to_file(self, startup_shapes, tmp_path):
        out = tmp_path / "shapes.png"
        assert save_shapes_as_png(startup_shapes, filename=str(out), resolution=90) is None
        assert out.stat().st_size > 0


class TestRenderer:
    @pytest.mark.parametrize("name", ["compare.png", "compare.svg"])
    def test_render_comparison(self, startup_shapes, tmp_path, name):
        before = snapshot(startup_shapes)
        before_frame = full_frame(startup_shapes)
        move_and_scale(startup_shapes, Point(1.0, 1.0), 0.5)
        out = tmp_path / "nested" / name
        render_comparison(
            before,
            snapshot(startup_shapes),
            out_path=str(out),
            before_frame=before_frame,
            after_frame=full_frame(startup_shapes),
            dpi=50,
        )
        assert out.exists()
        assert out.stat().st_size > 0
        if name.endswith(".svg"):
            assert out.read_text().lstrip().startswith("<?xml")
