from __future__ import annotations

from pathlib import Path

import pytest

import main
from models.point import Point


def test_process_points_reports_and_saves(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    points = [Point(i, i) for i in range(1, 5)]

    collinear = main.process_points(points, "diag", output_dir=str(tmp_path))

    assert collinear is not None
    assert collinear.number_of_segments() == 1
    out = capsys.readouterr().out
    assert "(1, 1) -> (4, 4)" in out
    assert "[OK]" in out
    assert (tmp_path / "diag_segments.txt").is_file()


def test_process_points_rejects_duplicates(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    points = [Point(5, 5), Point(5, 5)]

    assert main.process_points(points, "dup", output_dir=str(tmp_path)) is None
    assert "[ERROR]" in capsys.readouterr().out
    assert not (tmp_path / "dup_segments.txt").exists()


def test_main_processes_every_matching_file(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    inputs = tmp_path / "collinear"
    inputs.mkdir()
    (inputs / "input4.txt").write_text("4\n1 1\n2 2\n3 3\n4 4\n", encoding="utf-8")
    (inputs / "input3.txt").write_text("3\n1 1\n2 2\n3 3\n", encoding="utf-8")
    output = tmp_path / "output"

    monkeypatch.setattr(main, "INPUT_POINTS_PATTERN", str(inputs / "*.txt"))
    monkeypatch.setattr(main, "OUTPUT_FOLDER", str(output))

    main.main()

    out = capsys.readouterr().out
    assert "All point sets processed" in out
    assert (output / "input4_segments.txt").read_text(encoding="utf-8") == "(1, 1) -> (4, 4)\n"
    assert (output / "input3_segments.txt").read_text(encoding="utf-8") == ""


def test_main_without_inputs_reports_error(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr(main, "INPUT_POINTS_PATTERN", str(tmp_path / "*.txt"))
    monkeypatch.setattr(main, "OUTPUT_FOLDER", str(tmp_path / "output"))

    main.main()

    assert "[ERROR]" in capsys.readouterr().out
