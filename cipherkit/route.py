"""Route cipher: text is written into a grid row by row and read along a route."""

import argparse
import enum


class Route(enum.IntEnum):
    """The path along which the grid is read."""

    SPIRAL = 1
    SNAKE = 2
    DIAGONAL = 3


def _spiral(rows, cols):
    top, bottom, left, right = 0, rows - 1, 0, cols - 1
    while top <= bottom and left <= right:
        for col in range(left, right + 1):
            yield top, col
        top += 1
        for row in range(top, bottom + 1):
            yield row, right
        right -= 1
        if top <= bottom:
            for col in range(right, left - 1, -1):
                yield bottom, col
            bottom -= 1
        if left <= right:
            for row in range(bottom, top - 1, -1):
                yield row, left
            left += 1


def _snake(rows, cols):
    for row in range(rows):
        columns = range(cols) if row % 2 == 0 else range(cols - 1, -1, -1)
        for col in columns:
            yield row, col


def _diagonal(rows, cols):
    for total in range(rows + cols - 1):
        for row in range(rows):
            col = total - row
            if 0 <= col < cols:
                yield row, col


_PATHS = {Route.SPIRAL: _spiral, Route.SNAKE: _snake, Route.DIAGONAL: _diagonal}


def _cells(rows, cols, route):
    if rows < 1 or cols < 1:
        raise ValueError("grid dimensions must be positive")
    try:
        route = Route(route)
    except ValueError:
        raise ValueError(f"unknown route: {route!r}") from None
    return list(_PATHS[route](rows, cols))


def encrypt(text, rows, cols, route):
    """Fill a rows x cols grid with ``text`` (space padded, excess dropped) and read it along ``route``."""
    cells = _cells(rows, cols, route)
    padded = text.ljust(rows * cols)[: rows * cols]
    return "".join(padded[row * cols + col] for row, col in cells)


def decrypt(text, rows, cols, route):
    """Write ``text`` along ``route`` and read the grid row by row, dropping spaces."""
    grid = dict(zip(_cells(rows, cols, route), text))
    return "".join(
        ch
        for row in range(rows)
        for col in range(cols)
        if (ch := grid.get((row, col), " ")) != " "
    )


def main(argv=None):
    """Encrypt and decrypt a text with the route cipher and print the results."""
    parser = argparse.ArgumentParser(prog="route", description="Route cipher demo.")
    parser.add_argument("text", nargs="?")
    parser.add_argument("rows", nargs="?", type=int)
    parser.add_argument("cols", nargs="?", type=int)
    parser.add_argument("route", nargs="?", type=int, help="1: Spiral, 2: Snake, 3: Diagonal")
    args = parser.parse_args(argv)

    try:
        text = args.text if args.text is not None else input("Enter text to encrypt: ")
        if args.rows is not None and args.cols is not None:
            rows, cols = args.rows, args.cols
        else:
            dims = input("Enter grid dimensions (rows cols): ").split()
            if len(dims) != 2:
                raise ValueError("expected two numbers")
            rows, cols = (int(value) for value in dims)
        route = args.route if args.route is not None else int(
            input("Enter route type (1: Spiral, 2: Snake, 3: Diagonal): ")
        )
        encrypted = encrypt(text, rows, cols, route)
        decrypted = decrypt(encrypted, rows, cols, route)
    except ValueError as exc:
        print(f"Error: {exc}")
        return 1

    print(f"\nOriginal text: {text}")
    print(f"Encrypted text: {encrypted}")
    print(f"Decrypted text: {decrypted}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())