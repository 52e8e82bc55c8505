from unittest import mock

import pytest

from sketchgeo.line import Line


def _data_blocks(script):
    lines = script.splitlines()
    start = next(i for i, line in enumerate(lines) if "'-'" in line and "title 'Points'" in line) + 1
    rest = lines[start:]
    first_end = rest.index("e")
    first = rest[:first_end]
    second = rest[first_end + 1:]
    second = second[: second.index("e")]
    return first, second


def test_direction_is_end_minus_start():
    line = Line((1.0, 2.0, 3.0), (4.0, 6.0, 8.0))
    assert line.direction == (3.0, 4.0, 5.0)


def test_mismatched_dimensions_raise():
    with pytest.raises(ValueError):
        Line((0.0, 0.0), (1.0, 1.0, 1.0))


def test_unsupported_dimension_raises():
    with pytest.raises(ValueError):
        Line((0.0,), (1.0,))


def test_2d_script_header():
    script = Line((0.0, 0.0), (1.0, 1.0)).gnuplot_script()
    lines = script.splitlines()
    assert lines[0] == "set xrange [-2:3]"
    assert lines[1] == "set yrange [-2:3]"
    assert lines[2] == "set pointsize 1.5"
    assert lines[3].startswith("plot '-' using 1:2 with lines")
    assert "splot" not in script


def test_3d_script_uses_splot_and_z_range():
    script = Line((0.0, 0.0, 0.0), (1.0, 2.0, 3.0)).gnuplot_script()
    assert "set zrange" in script
    assert "splot '-' using 1:2:3 with lines title '3D Line'" in script


def test_script_data_points_lie_on_line():
    line = Line((0.0, 0.0, 0.0), (2.0, 4.0, 6.0))
    first, second = _data_blocks(line.gnuplot_script())
    assert first[0] == "0 0 0 "
    assert 20 <= len(first) <= 21
    assert len(second) == 8
    for row in first + second:
        x, y, z = (float(v) for v in row.split())
        assert y == pytest.approx(2 * x, abs=1e-4)
        assert z == pytest.approx(3 * x, abs=1e-4)
        assert 0.0 <= x <= 2.0


def test_write_script_round_trip(tmp_path):
    line = Line((1.0, -1.0), (3.0, 5.0))
    path = tmp_path / "line.gp"
    line.write_gnuplot_script(path)
    assert path.read_text(encoding="utf-8") == line.gnuplot_script()


def test_plot_runs_gnuplot(tmp_path):
    line = Line((0.0, 0.0), (1.0, 1.0))
    path = tmp_path / "line.gp"
    with mock.patch("sketchgeo.line.subprocess.run") as run:
        run.return_value = mock.Mock(returncode=0)
        status = line.plot(path)
    assert status == 0
    run.assert_called_once_with(["gnuplot", "-p", str(path)], check=False)