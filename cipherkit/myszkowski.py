"""Columnar transposition keyed by a word, read in the order of the key's letters."""

import string
from itertools import combinations, islice

from .caesar import _Field, _read_inputs


def _letters(text, what):
    cleaned = "".join(ch.upper() for ch in text if ch in string.ascii_letters)
    if not cleaned:
        raise ValueError(f"{what} must contain at least one letter!")
    return cleaned


def preprocess_text(text):
    """Keep the ASCII letters of ``text`` in upper case; raise ValueError if none remain."""
    return _letters(text, "Text")


def preprocess_key(key):
    """Keep the ASCII letters of ``key`` in upper case; raise ValueError if none remain."""
    return _letters(key, "Key")


def create_grid(text, key):
    """Write ``text`` row by row into ``len(key)`` columns, padding the last row with spaces."""
    cols = len(key)
    if not cols:
        raise ValueError("key must not be empty")
    rows = -(-len(text) // cols)
    padded = text.ljust(rows * cols)
    return [list(padded[row * cols:(row + 1) * cols]) for row in range(rows)]


def format_grid(grid, key):
    """Render the grid under its key, showing padding cells as underscores."""
    lines = [
        "Encryption Grid:",
        "  " + "".join(f"{ch} " for ch in key),
        "  " + "- " * len(key),
    ]
    lines.extend(
        "| " + "".join(f"{'_' if ch == ' ' else ch} " for ch in row) + "|" for row in grid
    )
    return "\n".join(lines)


def key_order(key):
    """Return the column indices in the order their key letters are read."""
    order = list(range(len(key)))
    for i, j in combinations(range(len(key)), 2):
        if key[order[i]] > key[order[j]]:
            order[i], order[j] = order[j], order[i]
    return order


def encrypt(text, key):
    """Encrypt the letters of ``text`` with the letters of ``key``."""
    text = preprocess_text(text)
    key = preprocess_key(key)
    grid = create_grid(text, key)
    return "".join(
        row[col] for col in key_order(key) for row in grid if row[col] != " "
    )


def decrypt(text, key):
    """Invert :func:`encrypt`."""
    text = preprocess_text(text)
    key = preprocess_key(key)
    cols = len(key)
    full_rows, remaining = divmod(len(text), cols)
    lengths = [full_rows + (1 if col < remaining else 0) for col in range(cols)]

    chars = iter(text)
    columns = {col: "".join(islice(chars, lengths[col])) for col in key_order(key)}

    return "".join(
        columns[col][row]
        for row in range(max(lengths))
        for col in range(cols)
        if row < lengths[col]
    )


def main(argv=None):
    """Encrypt and decrypt a text, showing the grid and reading order."""
    fields = [
        _Field("text", "Enter text to encrypt (letters only): "),
        _Field("key", "Enter key (letters only): "),
    ]
    values = _read_inputs(argv, "myszkowski", "Keyed columnar transposition demo.", fields)
    text, key = values["text"], values["key"]
    try:
        clean_text = preprocess_text(text)
        clean_key = preprocess_key(key)
    except ValueError as exc:
        print(f"Error: {exc}")
        return 1

    encrypted = encrypt(clean_text, clean_key)
    decrypted = decrypt(encrypted, clean_key)
    order = "".join(f"{clean_key[col]} " for col in key_order(clean_key))

    print("\n".join([
        "\n" + format_grid(create_grid(clean_text, clean_key), clean_key),
        "",
        f"Reading order: {order}",
        f"\nOriginal text:  {text}",
        f"Preprocessed:   {clean_text}",
        f"Key:           {key}",
        f"Preprocessed:   {clean_key}",
        f"Encrypted text: {encrypted}",
        f"Decrypted text: {decrypted}",
    ]))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())