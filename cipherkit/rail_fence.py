"""Rail fence cipher: text is written in a zigzag over several rails and read rail by rail."""

from collections import Counter
from itertools import cycle, islice

from .caesar import _demo, _Field


def _zigzag(length, rails):
    if rails < 2:
        raise ValueError("rails must be at least 2")
    period = list(range(rails)) + list(range(rails - 2, 0, -1))
    return list(islice(cycle(period), length))


def encrypt(text, rails):
    """Read ``text`` off its zigzag rail by rail; spaces are dropped."""
    pattern = _zigzag(len(text), rails)
    fence = [[] for _ in range(rails)]
    for char, rail in zip(text, pattern):
        if char != " ":
            fence[rail].append(char)
    return "".join("".join(row) for row in fence)


def decrypt(text, rails):
    """Invert :func:`encrypt` for text without spaces."""
    pattern = _zigzag(len(text), rails)
    counts = Counter(pattern)
    chars = iter(text)
    fence = [iter("".join(islice(chars, counts[rail]))) for rail in range(rails)]
    return "".join(next(fence[rail]) for rail in pattern)


def main(argv=None):
    """Encrypt and decrypt a text with the rail fence cipher and print the results."""
    rails = _Field("rails", "Enter number of rails: ", int)
    return _demo(argv, "rail_fence", "Rail fence cipher demo.", [rails], encrypt, decrypt)


if __name__ == "__main__":
    raise SystemExit(main())