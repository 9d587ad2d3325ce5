"""Hill cipher on letter pairs with a 2x2 key matrix modulo 26."""

import argparse
import math
import string
from collections import deque

ALPHABET_SIZE = 26
PAD_LETTER = "X"


def _matrix(key):
    rows = [list(row) for row in key]
    if len(rows) != 2 or any(len(row) != 2 for row in rows):
        raise ValueError("key must be a 2x2 matrix")
    return [[int(value) for value in row] for row in rows]


def determinant(key):
    """Return the determinant of the 2x2 ``key`` reduced into [0, 26)."""
    (a, b), (c, d) = _matrix(key)
    return (a * d - b * c) % ALPHABET_SIZE


def mod_inverse(a, m):
    """Return the x in [1, m) with a * x = 1 (mod m); raise ValueError if none exists."""
    a %= m
    for x in range(1, m):
        if a * x % m == 1:
            return x
    raise ValueError(f"{a} has no multiplicative inverse modulo {m}")


def is_valid_key(key):
    """Tell whether every entry lies in [0, 26) and the determinant is coprime with 26."""
    matrix = _matrix(key)
    if any(not 0 <= value < ALPHABET_SIZE for row in matrix for value in row):
        return False
    return math.gcd(determinant(matrix), ALPHABET_SIZE) == 1


def adjugate(key):
    """Return the adjugate of the 2x2 ``key``, off-diagonal entries reduced mod 26."""
    (a, b), (c, d) = _matrix(key)
    return [[d, -b % ALPHABET_SIZE], [-c % ALPHABET_SIZE, a]]


def _inverse_key(key):
    try:
        det_inv = mod_inverse(determinant(key), ALPHABET_SIZE)
    except ValueError:
        raise ValueError(
            "Invalid key matrix! No modular multiplicative inverse exists."
        ) from None
    return [[value * det_inv % ALPHABET_SIZE for value in row] for row in adjugate(key)]


def encrypt(text, key):
    """Encrypt the letters of ``text`` in pairs; the result is upper case, padded with X."""
    (k00, k01), (k10, k11) = _matrix(key)
    letters = [ch.upper() for ch in text if ch in string.ascii_letters]
    if len(letters) % 2:
        letters.append(PAD_LETTER)
    numbers = iter(ord(ch) - ord("A") for ch in letters)
    out = []
    for p1, p2 in zip(numbers, numbers):
        out.append(chr(ord("A") + (k00 * p1 + k01 * p2) % ALPHABET_SIZE))
        out.append(chr(ord("A") + (k10 * p1 + k11 * p2) % ALPHABET_SIZE))
    return "".join(out)


def decrypt(text, key):
    """Decrypt ``text`` with the inverse of ``key``; raise ValueError if it has none."""
    return encrypt(text, _inverse_key(key))


def _read_key_numbers(count):
    values = []
    tokens = deque()
    while len(values) < count:
        if not tokens:
            tokens.extend(input().split())
            continue
        value = int(tokens.popleft())
        if 0 <= value < ALPHABET_SIZE:
            values.append(value)
        else:
            print("Please enter a number between 0 and 25: ", end="")
    return values


def main(argv=None):
    """Encrypt and decrypt a text with the Hill cipher and print the results."""
    parser = argparse.ArgumentParser(prog="hill", description="Hill cipher demo.")
    parser.add_argument("text", nargs="?")
    parser.add_argument("key", nargs="*", type=int, help="four numbers, row by row")
    args = parser.parse_args(argv)

    try:
        text = args.text if args.text is not None else input(
            "Enter text to encrypt (letters only): "
        )
        if args.key:
            if len(args.key) != 4:
                raise ValueError("the key needs exactly 4 numbers")
            if any(not 0 <= value < ALPHABET_SIZE for value in args.key):
                raise ValueError("key numbers must lie between 0 and 25")
            numbers = args.key
        else:
            print("Enter 2x2 key matrix (4 numbers between 0-25):")
            print("Note: Determinant must be coprime with 26")
            numbers = _read_key_numbers(4)
    except (ValueError, EOFError) as exc:
        print(f"Error: {exc}")
        return 1

    key = [numbers[:2], numbers[2:]]
    if not is_valid_key(key):
        print("\nError: Invalid key matrix! Determinant must be coprime with 26.")
        return 1

    encrypted = encrypt(text, key)
    decrypted = decrypt(encrypted, key)

    print(f"\nOriginal text:  {text}")
    print(f"Encrypted text: {encrypted}")
    print(f"Decrypted text: {decrypted}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())