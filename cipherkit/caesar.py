"""Caesar cipher, plus the letter arithmetic and demo runner the other ciphers share."""

import argparse
from dataclasses import dataclass
from itertools import cycle, islice
from typing import Callable, Optional

ALPHABET_SIZE = 26


def _ascii_upper(ch):
    return chr(ord(ch) - 32) if "a" <= ch <= "z" else ch


def _ascii_lower(ch):
    return chr(ord(ch) + 32) if "A" <= ch <= "Z" else ch


def _transform_letter(char, func):
    """Map an ASCII letter through ``func`` on its alphabet offset; keep anything else."""
    if "A" <= char <= "Z":
        base = ord("A")
    elif "a" <= char <= "z":
        base = ord("a")
    else:
        return char
    return chr(base + func(ord(char) - base) % ALPHABET_SIZE)


def _shift_letter(char, amount):
    return _transform_letter(char, lambda offset: offset + amount)


def _key_offset(char, key_char, fold_upper=True):
    """Shift amount a key character gives to ``char``, in the case of ``char``.

    Lower-case letters always use the lower-cased key character; upper-case
    letters use the upper-cased one, or the key character as given when
    ``fold_upper`` is false.
    """
    if "A" <= char <= "Z":
        return ord(_ascii_upper(key_char) if fold_upper else key_char) - ord("A")
    return ord(_ascii_lower(key_char)) - ord("a")


def _require_key(key):
    if not key:
        raise ValueError("key must not be empty")


def _cycle_to(items, length):
    """Repeat ``items`` to exactly ``length`` elements."""
    return list(islice(cycle(items), length))


@dataclass(frozen=True)
class _Field:
    name: str
    prompt: str
    convert: Callable[[str], object] = str


_TEXT = _Field("text", "Enter text to encrypt: ")
_KEY = _Field("key", "Enter key: ")


def _read_inputs(argv, prog, description, fields):
    """Take each field from the command line, or prompt for it when it is missing."""
    parser = argparse.ArgumentParser(prog=prog, description=description)
    for field in fields:
        parser.add_argument(field.name, nargs="?")
    args = parser.parse_args(argv)
    values = {}
    for field in fields:
        raw = getattr(args, field.name)
        values[field.name] = field.convert(input(field.prompt) if raw is None else raw)
    return values


def _show_key(text, key):
    return [f"Key: {key}"]


def _demo(argv, prog, description, fields, encrypt_func, decrypt_func,
          details: Optional[Callable] = None):
    """Encrypt and decrypt a text read from ``argv`` or the user, and print the results."""
    try:
        values = _read_inputs(argv, prog, description, [_TEXT, *fields])
        text = values.pop("text")
        encrypted = encrypt_func(text, **values)
        decrypted = decrypt_func(encrypted, **values)
    except ValueError as exc:
        print(f"Error: {exc}")
        return 1

    lines = [f"\nOriginal text: {text}"]
    if details is not None:
        lines.extend(details(text, **values))
    lines.append(f"Encrypted text: {encrypted}")
    lines.append(f"Decrypted text: {decrypted}")
    print("\n".join(lines))
    return 0


def encrypt(text, shift):
    """Shift every ASCII letter of ``text`` forward by ``shift`` places."""
    return "".join(_shift_letter(char, shift) for char in text)


def decrypt(text, shift):
    """Undo :func:`encrypt` with the same ``shift``."""
    return encrypt(text, ALPHABET_SIZE - shift % ALPHABET_SIZE)


def main(argv=None):
    """Encrypt and decrypt a text with the Caesar cipher and print the results."""
    shift = _Field("shift", "Enter shift value (1-25): ", lambda raw: int(raw) % ALPHABET_SIZE)
    return _demo(argv, "caesar", "Caesar cipher demo.", [shift], encrypt, decrypt)


if __name__ == "__main__":
    raise SystemExit(main())