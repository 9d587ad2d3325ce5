"""Autokey cipher: the key stream is the initial key followed by the plaintext."""

from .caesar import _demo, _Field, _key_offset, _require_key, _shift_letter


def generate_autokey(text, key):
    """Return the key stream: ``key`` followed by ``text``, cut to the length of ``text``."""
    return (key + text)[: len(text)]


def encrypt(text, key):
    """Encrypt ``text`` with the autokey built from the initial ``key``."""
    _require_key(key)
    stream = generate_autokey(text, key)
    return "".join(_shift_letter(c, _key_offset(c, k)) for c, k in zip(text, stream))


def decrypt(text, key):
    """Decrypt ``text``, extending the key stream with the recovered plaintext."""
    _require_key(key)
    stream = list(key)
    out = []
    for i, char in enumerate(text):
        plain = _shift_letter(char, -_key_offset(char, stream[i]))
        out.append(plain)
        stream.append(plain)
    return "".join(out)


def _details(text, key):
    return [f"Initial key: {key}", f"Full autokey: {generate_autokey(text, key)}"]


def main(argv=None):
    """Encrypt and decrypt a text with the autokey cipher and print the results."""
    key = _Field("key", "Enter initial key: ")
    return _demo(argv, "autokey", "Autokey cipher demo.", [key], encrypt, decrypt, _details)


if __name__ == "__main__":
    raise SystemExit(main())