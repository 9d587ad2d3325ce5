"""Classical ciphers and simple n-gram cryptanalysis tools."""

__version__ = "0.1.0"

__all__ = [
    "affine",
    "atbash",
    "august",
    "autokey",
    "beaufort",
    "caesar",
    "gronsfeld",
    "hill",
    "myszkowski",
    "ngram",
    "rail_fence",
    "route",
    "vigenere",
]