"""Command-line entry point for the geometry tools."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from .meshio import convert_obj_to_stl, extract_triangles, write_dat_file
from .transform import Operation, transform_file
from .voronoi import Point, compute_voronoi_cells

DEFAULT_SITES = (Point(0, 0), Point(10, 0), Point(5, 10))
DEFAULT_PAD = 5.0


def _site(text: str) -> Point:
    try:
        x_text, y_text = text.split(",")
        return Point(float(x_text), float(y_text))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected x,y but got {text!r}") from None


def _fmt(value: float) -> str:
    return f"{value:g}"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sketchgeo", description="Geometry tools.")
    commands = parser.add_subparsers(dest="command", required=True)

    voronoi = commands.add_parser("voronoi", help="print the Voronoi cells of sites")
    voronoi.add_argument("sites", nargs="*", type=_site, help="sites as x,y")
    voronoi.add_argument("--pad", type=float, default=DEFAULT_PAD)

    obj2stl = commands.add_parser("obj2stl", help="convert an OBJ file to ASCII STL")
    obj2stl.add_argument("obj_file")
    obj2stl.add_argument("stl_file")

    stl2dat = commands.add_parser("stl2dat", help="write STL triangles as a data file")
    stl2dat.add_argument("stl_file")
    stl2dat.add_argument("dat_file")

    transform = commands.add_parser("transform", help="transform a data file in place")
    transform.add_argument("file")
    transform.add_argument("operation", choices=[op.value for op in Operation])
    transform.add_argument("values", nargs="+")
    return parser


def _transform_args(operation: Operation, values: Sequence[str]) -> list[object]:
    if operation is Operation.ROTATE:
        if len(values) != 2:
            raise ValueError("rotate needs an angle and an axis")
        return [float(values[0]), values[1]]
    if len(values) != 3:
        raise ValueError(f"{operation.value} needs three values")
    return [float(v) for v in values]


def main(argv: Sequence[str] | None = None) -> int:
    """Run a command; return the exit status."""
    args = _build_parser().parse_args(argv)
    try:
        if args.command == "voronoi":
            sites = args.sites or list(DEFAULT_SITES)
            cells = compute_voronoi_cells(sites, args.pad)
            blocks = ["".join(f"{_fmt(p.x)} {_fmt(p.y)}\n" for p in cell) for cell in cells]
            sys.stdout.write("\n".join(blocks))
        elif args.command == "obj2stl":
            count = convert_obj_to_stl(args.obj_file, args.stl_file)
            print(f"wrote {count} facets to {args.stl_file}")
        elif args.command == "stl2dat":
            triangles = extract_triangles(args.stl_file)
            write_dat_file(args.dat_file, triangles)
            print(f"wrote {len(triangles)} triangles to {args.dat_file}")
        else:
            operation = Operation(args.operation)
            transformed = transform_file(
                args.file, operation, *_transform_args(operation, args.values)
            )
            print(f"transformed {len(transformed)} entities in {args.file}")
    except (OSError, ValueError) as error:
        print(f"sketchgeo: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())