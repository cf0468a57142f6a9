import io
import logging

import pytest

import run_shapes
from scene import RectangleParams, RubberParams, SceneConfig


def _run(stdin_text, cfg=None, plot_path=""):
    out = io.StringIO()
    code = run_shapes.run(cfg or SceneConfig(), io.StringIO(stdin_text), out, plot_path=plot_path)
    return code, out.getvalue()


class TestRun:
    def test_success(self):
        code, out = _run("0 0 2\n")
        assert code == 0
        before, after = out.split("New data:")
        assert before.count("Total area:") == 1
        assert after.count("Total area:") == 1
        # Rectangle (3, 3) scaled by 2 about the origin
        assert "Center: {6, 6}" in after
        assert "Area Rectangle: 160" in after

    def test_origin_seeded_frame(self):
        code, out = _run("100 100 1\n", cfg=SceneConfig(origin_seeded_frame=True))
        assert code == 0
        assert "Frame of all shapes:" in out

    @pytest.mark.parametrize("text", ["", "1 2", "x y z", "1 2 three", "0 0 nan", "1 2 inf"])
    def test_bad_input(self, text, caplog):
        with caplog.at_level(logging.ERROR):
            code, out = _run(text)
        assert code == 1
        assert "New data:" not in out
        assert "Invalid input" in caplog.text

    @pytest.mark.parametrize("coef", ["0", "-2"])
    def test_bad_factor(self, coef, caplog):
        with caplog.at_level(logging.ERROR):
            code, out = _run(f"1 1 {coef}")
        assert code == 1
        assert "New data:" not in out
        assert "Transform aborted" in caplog.text

    @pytest.mark.parametrize(
        "cfg",
        [
            SceneConfig(rectangle=RectangleParams(height=-5.0)),
            SceneConfig(rubber=RubberParams(outer_radius=0.0)),
        ],
    )
    def test_construction_failure(self, cfg, caplog):
        with caplog.at_level(logging.ERROR):
            code, out = _run("0 0 2", cfg=cfg)
        assert code == 1
        assert out == ""
        assert "Could not build shapes" in caplog.text

    def test_built_shapes_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="run_shapes"):
            code, _ = _run("0 0 1")
        assert code == 0
        assert "Built 3 shapes" in caplog.text

    def test_plot(self, tmp_path):
        path = tmp_path / "plots" / "before_after.png"
        code, _ = _run("1 1 0.5", plot_path=str(path))
        assert code == 0
        assert path.stat().st_size > 0


class TestMain:
    def test_main_reads_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("2 -1 3"))
        assert run_shapes.main([]) == 0
        assert "New data:" in capsys.readouterr().out

    def test_main_bad_input(self, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("nope"))
        assert run_shapes.main(["--log-level", "error"]) == 1

    def test_parse_args(self):
        args = run_shapes.parse_args(["--plot", "out.svg", "--origin-seeded-frame"])
        assert args.plot == "out.svg"
        assert args.origin_seeded_frame is True
        assert args.log_level == "WARNING"
