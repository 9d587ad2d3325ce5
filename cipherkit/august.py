"""August cipher: a polyalphabetic cipher whose row i is the alphabet shifted by i*i."""

import functools
import string

from .caesar import ALPHABET_SIZE, _KEY, _demo, _require_key, _show_key


@functools.cache
def generate_tableau():
    """Return the 26 tableau rows; row i is the alphabet shifted by i * i."""
    return tuple(
        "".join(chr(ord("A") + (j + i * i) % ALPHABET_SIZE) for j in range(ALPHABET_SIZE))
        for i in range(ALPHABET_SIZE)
    )


def _transform(text, key, lookup):
    _require_key(key)
    if any(ch not in string.ascii_letters for ch in key):
        raise ValueError("key must consist of letters only")
    tableau = generate_tableau()
    out = []
    for i, char in enumerate(text):
        if char in string.ascii_letters:
            row = tableau[ord(key[i % len(key)].upper()) - ord("A")]
            letter = lookup(row, char.upper())
            out.append(letter if char.isupper() else letter.lower())
        else:
            out.append(char)
    return "".join(out)


def encrypt(text, key):
    """Encrypt ``text`` with ``key``; non-letters pass through but still use a key position."""
    return _transform(text, key, lambda row, c: row[ord(c) - ord("A")])


def decrypt(text, key):
    """Invert :func:`encrypt`."""
    return _transform(text, key, lambda row, c: chr(ord("A") + row.index(c)))


def main(argv=None):
    """Encrypt and decrypt a text with the August cipher and print the results."""
    return _demo(argv, "august", "August cipher demo.", [_KEY], encrypt, decrypt, _show_key)


if __name__ == "__main__":
    raise SystemExit(main())