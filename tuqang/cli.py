"""Validate one shape from the command line.

    tuqang-validate right_triangle base=3 height=4 hypotenuse=5
    tuqang-validate square s1=2 s2=2 s3=2 s4=2.05 --json

Exit status: 0 valid, 1 invalid, 2 usage error.
"""

from __future__ import annotations

import argparse
import json
import sys

from tuqang.geometry.dimensions import normalize_dimensions
from tuqang.geometry.shapes import ShapeKind, fields_for, parse_shape
from tuqang.geometry.validator import EPSILON, validate


def _parse_pairs(pairs: list[str]) -> dict[str, str]:
    raw: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise ValueError(f"Expected key=value, got {pair!r}")
        raw[key.strip()] = value
    return raw


def _shape_help() -> str:
    lines = ["shapes and their fields:"]
    for shape in ShapeKind:
        keys = " ".join(f.key for f in fields_for(shape))
        lines.append(f"  {shape.value:<22} {keys}")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="tuqang-validate",
        description="Check whether side lengths form the given shape",
        epilog=_shape_help(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("shape", help="Shape name, e.g. square or right_triangle")
    parser.add_argument("dimensions", nargs="*", help="Side lengths as key=value")
    parser.add_argument(
        "-e", "--epsilon", type=float, default=EPSILON,
        help=f"Length tolerance (default {EPSILON})",
    )
    parser.add_argument("--json", action="store_true", help="Print the outcome as JSON")
    args = parser.parse_args(argv)

    if args.epsilon <= 0:
        parser.error("--epsilon must be greater than 0")
    try:
        shape = parse_shape(args.shape)
        raw = _parse_pairs(args.dimensions)
    except ValueError as e:
        parser.error(str(e))

    outcome = validate(shape, normalize_dimensions(raw), args.epsilon)

    if args.json:
        print(json.dumps({"shape": shape.value, **outcome.to_dict()}))
    else:
        print(f"{shape.display_name}: {'VALID' if outcome.is_valid else 'INVALID'}")
        print(outcome.message)
        if outcome.perimeter is not None:
            print(f"Perimeter: {outcome.perimeter:.2f}")

    return 0 if outcome.is_valid else 1


if __name__ == "__main__":
    sys.exit(main())
