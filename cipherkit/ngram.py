"""N-gram analysis helpers: n-gram lists, frequencies, repeats, index of coincidence
and a simple substitution cipher."""

import argparse
import string
from itertools import combinations

MAX_NGRAMS = 1000
ALPHABET_SIZE = 26

_MENU = """
Available operations:
1. Generate n-grams
2. Frequency analysis
3. Find repeating sequences
4. Calculate Index of Coincidence
5. Simple substitution cipher"""


def preprocess_text(text):
    """Keep only the ASCII letters of ``text``, in upper case."""
    return "".join(ch.upper() for ch in text if ch in string.ascii_letters)


def generate_ngrams(text, n):
    """Return every run of ``n`` consecutive characters of ``text``, in order."""
    if n < 1:
        raise ValueError("n must be at least 1")
    return [text[i:i + n] for i in range(len(text) - n + 1)]


def analyze_frequency(text, n):
    """Count the n-grams of ``text`` in order of first appearance.

    At most ``MAX_NGRAMS`` distinct n-grams are tracked; later new ones are ignored.
    """
    counts = {}
    for gram in generate_ngrams(text, n):
        if gram in counts:
            counts[gram] += 1
        elif len(counts) < MAX_NGRAMS:
            counts[gram] = 1
    return counts


def _sorted_by_count(items):
    # Exchange sort, descending by count; keeps the exact order of ties it produces.
    items = list(items)
    for i, j in combinations(range(len(items)), 2):
        if items[i][1] < items[j][1]:
            items[i], items[j] = items[j], items[i]
    return items


def format_frequency_analysis(frequencies):
    """Render a frequency table sorted by count, highest first.

    Percentages are relative to the number of distinct n-grams.
    """
    items = list(frequencies.items()) if hasattr(frequencies, "items") else list(frequencies)
    distinct = len(items)
    lines = [
        "N-gram Frequency Analysis:",
        f"{'N-gram':<10}{'Count':<10}{'Percentage':<15}",
        "-----------------------------",
    ]
    for gram, count in _sorted_by_count(items):
        percentage = 100.0 * count / distinct
        lines.append(f"{gram:<10}{count:<10}{percentage:<15.2f}")
    return "\n".join(lines)


def find_repeating_sequences(text, n):
    """Map each n-gram occurring more than once to the positions where it starts."""
    positions = {}
    for index, gram in enumerate(generate_ngrams(text, n)):
        positions.setdefault(gram, []).append(index)
    return {gram: found for gram, found in positions.items() if len(found) > 1}


def index_of_coincidence(text):
    """Return the index of coincidence of the letters of ``text``.

    The denominator uses the full length of ``text``, non-letters included.
    """
    length = len(text)
    if length < 2:
        raise ValueError("text must hold at least two characters")
    freqs = [0] * ALPHABET_SIZE
    for ch in text:
        if ch in string.ascii_letters:
            freqs[ord(ch.upper()) - ord("A")] += 1
    denominator = length * (length - 1.0)
    return sum(f * (f - 1.0) / denominator for f in freqs)


def _check_key(key):
    if len(key) != ALPHABET_SIZE:
        raise ValueError("Key must be exactly 26 letters")


def substitution_encrypt(text, key):
    """Replace each letter by the key letter at its alphabet position, keeping case."""
    _check_key(key)
    out = []
    for ch in text:
        if ch in string.ascii_letters:
            sub = key[ord(ch.upper()) - ord("A")]
            out.append(sub.lower() if ch.islower() else sub)
        else:
            out.append(ch)
    return "".join(out)


def substitution_decrypt(text, key):
    """Invert :func:`substitution_encrypt`; raise ValueError for a letter not in ``key``."""
    _check_key(key)
    out = []
    for ch in text:
        if ch in string.ascii_letters:
            position = key.find(ch.upper())
            if position < 0:
                raise ValueError(f"letter {ch.upper()!r} does not occur in the key")
            plain = chr(ord("A") + position)
            out.append(plain.lower() if ch.islower() else plain)
        else:
            out.append(ch)
    return "".join(out)


def main(argv=None):
    """Run one n-gram operation on a text and print the result."""
    parser = argparse.ArgumentParser(prog="ngram", description="N-gram analysis tools.")
    parser.add_argument("text", nargs="?")
    parser.add_argument("operation", nargs="?", help="operation number, 1 to 5")
    parser.add_argument("--n", type=int, help="length of the n-grams")
    parser.add_argument("--key", help="26-letter substitution key")
    args = parser.parse_args(argv)

    text = args.text if args.text is not None else input("Enter text for analysis: ")
    operation = args.operation
    if operation is None:
        print(_MENU)
        operation = input("\nEnter operation number: ")
    operation = operation.strip()

    try:
        if operation in ("1", "2", "3"):
            n = args.n if args.n is not None else int(input("Enter n (length of n-grams): "))
            if operation == "1":
                print(f"\nGenerated {n}-grams:")
                print("".join(f"{gram} " for gram in generate_ngrams(text, n)))
            elif operation == "2":
                print("\n" + format_frequency_analysis(analyze_frequency(text, n)))
            else:
                print(f"\nRepeating {n}-gram sequences:")
                for gram, found in find_repeating_sequences(text, n).items():
                    print(f"{gram} appears at positions: " + "".join(f"{p} " for p in found))
        elif operation == "4":
            print(f"\nIndex of Coincidence: {index_of_coincidence(text):.4f}")
            print("(English text typically has IoC around 0.067)")
        elif operation == "5":
            key = args.key if args.key is not None else input("Enter 26-letter key (A-Z): ")
            print(substitution_encrypt(text, key))
            print(substitution_decrypt(text, key))
    except ValueError as exc:
        print(f"Error: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())