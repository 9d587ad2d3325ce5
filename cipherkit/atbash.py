"""Atbash cipher: the alphabet is mirrored, A <-> Z, B <-> Y, and so on."""

import string

from .caesar import _demo

_TABLE = str.maketrans(
    string.ascii_uppercase + string.ascii_lowercase,
    string.ascii_uppercase[::-1] + string.ascii_lowercase[::-1],
)


def encrypt(text):
    """Mirror every ASCII letter of ``text``; other characters pass through."""
    return text.translate(_TABLE)


def decrypt(text):
    """Atbash is its own inverse, so decryption equals encryption."""
    return encrypt(text)


def main(argv=None):
    """Encrypt and decrypt a text with Atbash and print the results."""
    return _demo(argv, "atbash", "Atbash cipher demo.", [], encrypt, decrypt)


if __name__ == "__main__":
    raise SystemExit(main())