"""Vigenere cipher: letters are shifted by the letters of a repeating key."""

from .caesar import _KEY, _cycle_to, _demo, _key_offset, _require_key, _shift_letter, _show_key


def generate_key(text, key):
    """Repeat ``key`` to the length of ``text``."""
    _require_key(key)
    return "".join(_cycle_to(key, len(text)))


def _apply(text, key, sign):
    return "".join(
        _shift_letter(c, sign * _key_offset(c, k, fold_upper=False))
        for c, k in zip(text, generate_key(text, key))
    )


def encrypt(text, key):
    """Encrypt ``text`` with ``key`` repeated over its length."""
    return _apply(text, key, 1)


def decrypt(text, key):
    """Decrypt ``text`` with ``key`` repeated over its length."""
    return _apply(text, key, -1)


def main(argv=None):
    """Encrypt and decrypt a text with the Vigenere cipher and print the results."""
    return _demo(argv, "vigenere", "Vigenere cipher demo.", [_KEY], encrypt, decrypt, _show_key)


if __name__ == "__main__":
    raise SystemExit(main())