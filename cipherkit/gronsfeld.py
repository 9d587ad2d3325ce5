"""Gronsfeld cipher: a Vigenere variant whose key is a sequence of digits."""

import string

from .caesar import _cycle_to, _demo, _Field, _shift_letter, _show_key


def process_key(key, length):
    """Return the digits of ``key`` repeated to ``length`` shift amounts."""
    digits = [int(ch) for ch in key if ch in string.digits]
    if not digits:
        raise ValueError("key must contain at least one digit")
    return _cycle_to(digits, length)


def _apply(text, key, sign):
    shifts = process_key(key, len(text))
    return "".join(_shift_letter(c, sign * s) for c, s in zip(text, shifts))


def encrypt(text, key):
    """Encrypt ``text`` with the digits of ``key``."""
    return _apply(text, key, 1)


def decrypt(text, key):
    """Decrypt ``text`` with the digits of ``key``."""
    return _apply(text, key, -1)


def main(argv=None):
    """Encrypt and decrypt a text with the Gronsfeld cipher and print the results."""
    key = _Field("key", "Enter numerical key (e.g., 31415): ")
    return _demo(argv, "gronsfeld", "Gronsfeld cipher demo.", [key], encrypt, decrypt, _show_key)


if __name__ == "__main__":
    raise SystemExit(main())