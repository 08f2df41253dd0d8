"""Tests for layout validation and the command-line interface."""

import numpy as np
import pandas as pd
import pytest

from textrepel.cli import main
from textrepel.geometry.primitives import Box
from textrepel.validation import check_layout, find_overlaps


class TestFindOverlaps:
    """Tests for overlap pair detection."""

    def test_pairs(self):
        boxes = [
            [0, 0, 1, 1],
            [0.5, 0.5, 1.5, 1.5],
            [1.5, 0, 2, 0.5],   # touches box 1 at x=1.5
            [10, 10, 11, 11],
        ]
        assert find_overlaps(boxes) == [(0, 1), (1, 2)]

    def test_accepts_box_objects(self):
        assert find_overlaps([Box(0, 0, 1, 1), Box(2, 2, 3, 3)]) == []

    def test_numpy_input(self):
        boxes = np.array([[0, 0, 1, 1], [0, 0, 1, 1]])
        assert find_overlaps(boxes) == [(0, 1)]


class TestCheckLayout:
    """Tests for the layout report."""

    def test_clean_layout(self):
        report = check_layout([[0, 0, 1, 1], [2, 2, 3, 3]], (0, 5), (0, 5))
        assert report.passed
        assert "PASSED" in report.summary()

    def test_out_of_bounds(self):
        report = check_layout([[-1, 0, 1, 1], [2, 2, 3, 3]], (0, 5), (0, 5))
        assert report.out_of_bounds == [0]
        assert not report.passed
        assert "FAILED" in report.summary()


@pytest.fixture
def csv_inputs(tmp_path):
    points = tmp_path / "points.csv"
    pd.DataFrame({"x": [0.3, 0.7], "y": [0.5, 0.5]}).to_csv(points, index=False)
    boxes = tmp_path / "boxes.csv"
    pd.DataFrame({
        "x1": [0.25, 0.65], "y1": [0.48, 0.48],
        "x2": [0.35, 0.75], "y2": [0.52, 0.52],
    }).to_csv(boxes, index=False)
    return points, boxes


class TestCli:
    """Tests for the textrepel command."""

    def test_no_command(self, capsys):
        assert main([]) == 1

    def test_repel_writes_output(self, csv_inputs, tmp_path, capsys):
        points, boxes = csv_inputs
        out = tmp_path / "out.csv"
        code = main([
            "repel", str(points), str(boxes),
            "--xlim", "0", "1", "--ylim", "0", "1",
            "--seed", "1", "-o", str(out),
        ])

        assert code == 0
        frame = pd.read_csv(out)
        assert list(frame.columns) == ["x", "y", "overlaps"]
        assert len(frame) == 2
        assert frame["x"].tolist() == pytest.approx([0.3, 0.7], abs=1e-4)
        assert "Converged" in capsys.readouterr().out

    def test_repel_prints_table(self, csv_inputs, capsys):
        points, boxes = csv_inputs
        code = main([
            "repel", str(points), str(boxes),
            "--xlim", "0", "1", "--ylim", "0", "1",
            "--padding", "0.01", "0.01", "--maxiter", "10",
        ])
        assert code == 0
        assert "overlaps" in capsys.readouterr().out

    def test_repel_with_config(self, csv_inputs, tmp_path):
        points, boxes = csv_inputs
        cfg = tmp_path / "repel.yaml"
        cfg.write_text("maxiter: 5\nseed: 3\n")
        code = main([
            "repel", str(points), str(boxes),
            "--xlim", "0", "1", "--ylim", "0", "1",
            "--config", str(cfg), "-o", str(tmp_path / "out.csv"),
        ])
        assert code == 0

    def test_repel_bad_config_value(self, csv_inputs, tmp_path, capsys):
        points, boxes = csv_inputs
        cfg = tmp_path / "repel.yaml"
        cfg.write_text("maxiter: lots\n")
        code = main([
            "repel", str(points), str(boxes),
            "--xlim", "0", "1", "--ylim", "0", "1",
            "--config", str(cfg),
        ])
        assert code == 1
        assert "Error: maxiter" in capsys.readouterr().out

    def test_repel_missing_file(self, tmp_path, capsys):
        code = main([
            "repel", str(tmp_path / "a.csv"), str(tmp_path / "b.csv"),
            "--xlim", "0", "1", "--ylim", "0", "1",
        ])
        assert code == 1
        assert "Error:" in capsys.readouterr().out

    def test_repel_bad_limits(self, csv_inputs, capsys):
        points, boxes = csv_inputs
        code = main([
            "repel", str(points), str(boxes),
            "--xlim", "1", "0", "--ylim", "0", "1",
        ])
        assert code == 1
        assert "xlim" in capsys.readouterr().out

    def test_check(self, csv_inputs, tmp_path, capsys):
        _, boxes = csv_inputs
        assert main(["check", str(boxes), "--xlim", "0", "1", "--ylim", "0", "1"]) == 0

        overlapping = tmp_path / "overlapping.csv"
        overlapping.write_text("x1,y1,x2,y2\n0,0,1,1\n0.5,0.5,1,1\n")
        assert main(["check", str(overlapping), "--xlim", "0", "1", "--ylim", "0", "1"]) == 1
        assert "Overlapping pairs: 1" in capsys.readouterr().out
