"""Affine cipher: each letter x becomes (a * x + b) mod 26."""

from .caesar import ALPHABET_SIZE, _demo, _Field, _transform_letter


def mod_inverse(a, m):
    """Return the smallest x in [1, m) with a * x = 1 (mod m), or 1 if there is none."""
    return next((x for x in range(1, m) if (a % m) * (x % m) % m == 1), 1)


def encrypt(text, a, b):
    """Encrypt ASCII letters of ``text``; other characters pass through unchanged."""
    return "".join(_transform_letter(c, lambda x: a * x + b) for c in text)


def decrypt(text, a, b):
    """Invert :func:`encrypt` for keys where ``a`` is coprime with 26."""
    a_inv = mod_inverse(a, ALPHABET_SIZE)
    return "".join(_transform_letter(c, lambda y: a_inv * (y - b)) for c in text)


def main(argv=None):
    """Encrypt and decrypt a text with the affine cipher and print the results."""
    fields = [
        _Field("a", "Enter first key (a) [must be coprime with 26]: ", int),
        _Field("b", "Enter second key (b): ", int),
    ]
    return _demo(argv, "affine", "Affine cipher demo.", fields, encrypt, decrypt)


if __name__ == "__main__":
    raise SystemExit(main())