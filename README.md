# cipherkit

Classical ciphers and a few simple cryptanalysis tools. Each cipher lives in
its own module with plain `encrypt` and `decrypt` functions that take and
return strings. Each module also has a command that encrypts a text, decrypts
the result again and prints all three.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Ciphers

| Module                 | Cipher                                       | Key arguments                    |
|------------------------|----------------------------------------------|----------------------------------|
| `cipherkit.caesar`     | Caesar shift                                 | `shift` (integer)                |
| `cipherkit.affine`     | Affine, `a*x + b mod 26`                     | `a` (coprime with 26), `b`       |
| `cipherkit.atbash`     | Atbash, mirrored alphabet                    | none                             |
| `cipherkit.vigenere`   | Vigenère                                     | `key` (word)                     |
| `cipherkit.beaufort`   | Beaufort, its own inverse                    | `key` (word)                     |
| `cipherkit.autokey`    | Autokey, key followed by the plaintext       | `key` (word)                     |
| `cipherkit.gronsfeld`  | Gronsfeld, Vigenère with digits              | `key` (string holding digits)    |
| `cipherkit.august`     | August tableau, row *i* shifted by *i*²      | `key` (letters only)             |
| `cipherkit.hill`       | Hill on letter pairs                         | `key` (2×2 matrix, values 0–25)  |
| `cipherkit.myszkowski` | Keyed columnar transposition                 | `key` (word)                     |
| `cipherkit.rail_fence` | Rail fence                                   | `rails` (at least 2)             |
| `cipherkit.route`      | Route: spiral, snake or diagonal             | `rows`, `cols`, `route`          |

The substitution ciphers (Caesar, affine, Atbash, Vigenère, Beaufort,
autokey, Gronsfeld, August) only touch the ASCII letters, keep their case and
pass every other character through. Where a key is repeated over the text,
non-letters still use up a key position.

The Hill cipher and the keyed columnar transposition drop everything but
letters and upper-case the text first; Hill pads an odd number of letters
with `X`.

The rail fence drops spaces when encrypting, and the route cipher drops
spaces when decrypting, so texts with spaces do not come back unchanged.

Empty keys raise `ValueError`, as do a Gronsfeld key without digits, an
August key with non-letters, a transposition text or key without letters, and
fewer than two rails. `affine.mod_inverse` returns 1 when `a` has no inverse,
so `affine.decrypt` gives wrong results for an `a` that is not coprime with
26; nothing checks this.

## Library use

```python
from cipherkit import affine, atbash, caesar, vigenere

caesar.encrypt("Hello, World!", 3)         # 'Khoor, Zruog!'
caesar.decrypt("Khoor, Zruog!", 3)         # 'Hello, World!'

atbash.encrypt("Hello")                    # 'Svool'

vigenere.encrypt("ATTACKATDAWN", "LEMON")  # 'LXFOPVEFRNHR'

ciphertext = affine.encrypt("Affine cipher", 5, 8)
affine.decrypt(ciphertext, 5, 8)           # 'Affine cipher'
```

Other helpers: `vigenere.generate_key` and `beaufort.generate_key` repeat a
key to the length of a text, `autokey.generate_autokey` builds the autokey
stream, `gronsfeld.process_key` turns a digit key into shift amounts, and
`august.generate_tableau` returns the 26 tableau rows. `beaufort.beaufort`
is the transformation both `encrypt` and `decrypt` use.

### Hill

The key is a 2×2 matrix. `hill.is_valid_key` checks that every entry lies in
0–25 and that the determinant is coprime with 26; `hill.decrypt` raises
`ValueError` for a key without an inverse. `determinant`, `adjugate` and
`mod_inverse` are available too.

```python
from cipherkit import hill

matrix = [[3, 3], [2, 5]]
hill.is_valid_key(matrix)                  # True
ciphertext = hill.encrypt("help", matrix)
hill.decrypt(ciphertext, matrix)           # 'HELP'
```

### Transpositions

```python
from cipherkit import myszkowski, rail_fence, route

ciphertext = rail_fence.encrypt("WEAREDISCOVERED", 3)
rail_fence.decrypt(ciphertext, 3)          # 'WEAREDISCOVERED'

ciphertext = myszkowski.encrypt("we are discovered", "tomato")
myszkowski.decrypt(ciphertext, "tomato")   # 'WEAREDISCOVERED'

ciphertext = route.encrypt("WEAREDISCOVERED", 3, 5, route.Route.SPIRAL)
route.decrypt(ciphertext, 3, 5, route.Route.SPIRAL)  # 'WEAREDISCOVERED'
```

The `myszkowski` module also offers `preprocess_text`, `preprocess_key`,
`create_grid`, `format_grid` (the grid as text, padding shown as `_`) and
`key_order` (the order in which columns are read). Columns are read in the
order of their key letters; repeated key letters are read as separate
columns.

`route.encrypt` pads the text with spaces to fill the `rows` × `cols` grid and
drops anything beyond it. `route` may be a `Route` member or the numbers 1
(spiral), 2 (snake) or 3 (diagonal).

### N-gram analysis

`cipherkit.ngram` works on the text as given; call `preprocess_text` first to
keep only the letters in upper case.

- `generate_ngrams(text, n)`: every overlapping n-gram, in order
- `analyze_frequency(text, n)`: a dict of n-gram counts in order of first
  appearance, tracking at most `MAX_NGRAMS` (1000) distinct n-grams
- `format_frequency_analysis(frequencies)`: a table sorted by count; the
  percentage column is relative to the number of distinct n-grams
- `find_repeating_sequences(text, n)`: n-grams that occur more than once,
  mapped to their start positions
- `index_of_coincidence(text)`: counts letters, divides by the full length of
  the text including non-letters; English text is around 0.067
- `substitution_encrypt(text, key)` / `substitution_decrypt(text, key)`: a
  simple substitution with a 26-letter key alphabet

## Commands

Each command takes its inputs as arguments and asks for any that are missing,
then prints the original, encrypted and decrypted text:

```
cipherkit-caesar [text] [shift]
cipherkit-affine [text] [a] [b]
cipherkit-atbash [text]
cipherkit-vigenere [text] [key]
cipherkit-beaufort [text] [key]
cipherkit-autokey [text] [key]
cipherkit-gronsfeld [text] [key]
cipherkit-august [text] [key]
cipherkit-hill [text] [k00 k01 k10 k11]
cipherkit-myszkowski [text] [key]
cipherkit-rail-fence [text] [rails]
cipherkit-route [text] [rows] [cols] [route]
```

`cipherkit-myszkowski` also prints the grid and the reading order.

`cipherkit-ngram [text] [operation] [--n N] [--key KEY]` runs one operation:
1 n-grams, 2 frequency analysis, 3 repeating sequences, 4 index of
coincidence, 5 simple substitution (prints the text encrypted and then
decrypted with the key).

Invalid input is reported as `Error: ...` with exit status 1.

These ciphers are for learning and puzzles; none of them offers any real
security, and the package has no tools for breaking them beyond the n-gram
helpers above.