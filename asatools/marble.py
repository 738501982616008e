"""Best value obtainable by cutting a marble slab into priced pieces.

Every cut runs straight across the whole slab, either vertically or
horizontally. A piece may be rotated by a quarter turn when it fits that way.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable

Piece = tuple[int, int, int]


def _check_dimensions(width: int, height: int) -> None:
    if width < 0 or height < 0:
        raise ValueError(f"slab dimensions must not be negative: {width}x{height}")


def build_price_table(width: int, height: int, pieces: Iterable[Piece]) -> list[list[int]]:
    """Return a (width+1) x (height+1) table of the best single-piece price per size.

    Pieces with a non-positive price or dimension, or that fit the slab in
    neither orientation, are ignored. A piece is recorded in every orientation
    in which it fits, and the highest price wins for each size.
    """
    _check_dimensions(width, height)
    table = [[0] * (height + 1) for _ in range(width + 1)]
    for x, y, price in pieces:
        if price <= 0 or x <= 0 or y <= 0:
            continue
        fits_upright = x <= width and y <= height
        fits_rotated = y <= width and x <= height
        if fits_upright:
            table[x][y] = max(table[x][y], price)
        if fits_rotated:
            table[y][x] = max(table[y][x], price)
    return table


def max_slab_value(width: int, height: int, pieces: Iterable[Piece]) -> int:
    """Return the highest total price obtainable from a width x height slab."""
    table = build_price_table(width, height, pieces)
    for i in range(1, width + 1):
        row = table[i]
        for j in range(1, height + 1):
            vertical = max(
                (table[p][j] + table[i - p][j] for p in range(1, i // 2 + 1)),
                default=0,
            )
            horizontal = max(
                (row[k] + row[j - k] for k in range(1, j // 2 + 1)),
                default=0,
            )
            row[j] = max(row[j], vertical, horizontal)
    return table[width][height]


def parse_input(text: str) -> tuple[int, int, list[Piece]]:
    """Parse ``width height``, a piece count, then ``x y price`` per piece."""
    try:
        numbers = [int(token) for token in text.split()]
    except ValueError as exc:
        raise ValueError(f"input must consist of integers: {exc}") from None
    if len(numbers) < 3:
        raise ValueError("expected slab width, height and number of pieces")
    width, height, count = numbers[:3]
    if count < 0:
        raise ValueError(f"number of pieces must not be negative: {count}")
    values = numbers[3:]
    if len(values) < 3 * count:
        raise ValueError(f"expected {count} pieces of three integers each")
    it = iter(values[: 3 * count])
    pieces = list(zip(it, it, it))
    return width, height, pieces


def main(argv: list[str] | None = None) -> int:
    """Read a slab description from standard input and print its best value."""
    parser = argparse.ArgumentParser(
        description="Compute the best value of a marble slab cut into priced pieces."
    )
    parser.parse_args(argv)
    try:
        width, height, pieces = parse_input(sys.stdin.read())
        result = max_slab_value(width, height, pieces)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())