"""Straight segments in 2D or 3D and gnuplot scripts that draw them."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass, field
from os import PathLike
from typing import Sequence, Union

PathType = Union[str, "PathLike[str]"]

_AXES = "xyz"


def _fmt(value: float) -> str:
    return f"{value:g}"


@dataclass(frozen=True)
class Line:
    """A segment from start to end, both with two or three coordinates."""

    start: tuple[float, ...]
    end: tuple[float, ...]
    direction: tuple[float, ...] = field(init=False)

    def __init__(self, start: Sequence[float], end: Sequence[float]) -> None:
        start_t = tuple(float(c) for c in start)
        end_t = tuple(float(c) for c in end)
        if len(start_t) != len(end_t):
            raise ValueError("start and end must have the same number of coordinates")
        if len(start_t) not in (2, 3):
            raise ValueError("a line must be 2- or 3-dimensional")
        object.__setattr__(self, "start", start_t)
        object.__setattr__(self, "end", end_t)
        object.__setattr__(self, "direction", tuple(e - s for s, e in zip(start_t, end_t)))

    @property
    def dimension(self) -> int:
        return len(self.start)

    def _at(self, t: float) -> str:
        return "".join(f"{_fmt(s + t * d)} " for s, d in zip(self.start, self.direction))

    def gnuplot_script(self) -> str:
        """Inline-data gnuplot script drawing the line and eight points along it."""
        lines = [
            f"set {axis}range [{_fmt(s - 2)}:{_fmt(e + 2)}]"
            for axis, s, e in zip(_AXES, self.start, self.end)
        ]
        lines.append("set pointsize 1.5")
        if self.dimension == 2:
            lines.append("plot '-' using 1:2 with lines title '2D Line', \\")
            lines.append("     '-' using 1:2 with points pt 7 ps 1.5 title 'Points'")
        else:
            lines.append("splot '-' using 1:2:3 with lines title '3D Line', \\")
            lines.append("      '-' using 1:2:3 with points pt 7 ps 1.5 title 'Points'")

        t = 0.0
        while t <= 1:
            lines.append(self._at(t))
            t += 0.05
        lines.append("e")

        lines.extend(self._at((i + 1) / 9.0) for i in range(8))
        lines.append("e")
        return "\n".join(lines) + "\n"

    def write_gnuplot_script(self, filename: PathType) -> None:
        """Save the gnuplot script to a file."""
        with open(filename, "w", encoding="utf-8") as out:
            out.write(self.gnuplot_script())

    def plot(self, script_filename: PathType) -> int:
        """Run gnuplot on a saved script and return its exit status."""
        completed = subprocess.run(["gnuplot", "-p", str(script_filename)], check=False)
        return completed.returncode