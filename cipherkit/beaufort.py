"""Beaufort cipher: each letter becomes (key - letter) mod 26; it is its own inverse."""

from .caesar import _KEY, _cycle_to, _demo, _key_offset, _require_key, _show_key, _transform_letter


def generate_key(text, key):
    """Repeat ``key`` to the length of ``text``."""
    _require_key(key)
    return "".join(_cycle_to(key, len(text)))


def beaufort(text, key):
    """Apply the Beaufort transformation with ``key`` repeated over ``text``."""
    return "".join(
        _transform_letter(c, lambda x, c=c, k=k: _key_offset(c, k, fold_upper=False) - x)
        for c, k in zip(text, generate_key(text, key))
    )


def encrypt(text, key):
    """Encrypt ``text`` with ``key``."""
    return beaufort(text, key)


def decrypt(text, key):
    """Decrypt ``text`` with ``key``; identical to encryption."""
    return beaufort(text, key)


def main(argv=None):
    """Encrypt and decrypt a text with the Beaufort cipher and print the results."""
    return _demo(argv, "beaufort", "Beaufort cipher demo.", [_KEY], encrypt, decrypt, _show_key)


if __name__ == "__main__":
    raise SystemExit(main())