import string

import pytest

from cipherkit import ngram

SAMPLE = "THEQUICKBROWNFOXJUMPSOVERTHELAZYDOGTHE"
KEY = "QWERTYUIOPASDFGHJKLZXCVBNM"


def test_preprocess_keeps_only_letters_upper():
    result = ngram.preprocess_text("Hello, World! 42")
    assert result == "HELLOWORLD"


def test_preprocess_result_is_letters_only():
    result = ngram.preprocess_text("a-b c.d_e9")
    assert all(ch in string.ascii_uppercase for ch in result)
    assert len(result) == 5


@pytest.mark.parametrize("n", [1, 2, 3, 5])
def test_generate_ngrams_reassembles_text(n):
    grams = ngram.generate_ngrams(SAMPLE, n)
    assert len(grams) == len(SAMPLE) - n + 1
    assert all(len(g) == n for g in grams)
    assert "".join(g[0] for g in grams) + grams[-1][1:] == SAMPLE


def test_generate_ngrams_longer_than_text_is_empty():
    assert ngram.generate_ngrams("AB", 3) == []


def test_generate_ngrams_rejects_zero():
    with pytest.raises(ValueError):
        ngram.generate_ngrams("ABC", 0)


def test_analyze_frequency_counts_sum_to_ngram_total():
    counts = ngram.analyze_frequency(SAMPLE, 3)
    assert sum(counts.values()) == len(SAMPLE) - 2
    assert set(counts) == set(ngram.generate_ngrams(SAMPLE, 3))


def test_analyze_frequency_first_appearance_order():
    counts = ngram.analyze_frequency("ABAB", 2)
    assert list(counts) == ["AB", "BA"]
    assert counts["AB"] == 2


def test_format_frequency_analysis_sorted_descending():
    table = ngram.format_frequency_analysis(ngram.analyze_frequency(SAMPLE, 2))
    lines = table.splitlines()
    assert lines[0] == "N-gram Frequency Analysis:"
    assert lines[2] == "-----------------------------"
    counts = [int(line[10:20]) for line in lines[3:]]
    assert counts == sorted(counts, reverse=True)
    assert len(lines) - 3 == len(ngram.analyze_frequency(SAMPLE, 2))


def test_format_frequency_analysis_percent_of_distinct():
    table = ngram.format_frequency_analysis({"AB": 2, "BA": 1})
    rows = table.splitlines()[3:]
    assert rows[0].startswith("AB")
    assert rows[0][20:].strip() == "100.00"


def test_find_repeating_sequences_positions_match():
    repeats = ngram.find_repeating_sequences(SAMPLE, 3)
    assert "THE" in repeats
    for gram, positions in repeats.items():
        assert len(positions) > 1
        assert positions == sorted(positions)
        assert all(SAMPLE[p:p + 3] == gram for p in positions)


def test_find_repeating_sequences_none_when_unique():
    assert ngram.find_repeating_sequences("ABCDEFG", 2) == {}


def test_index_of_coincidence_single_letter():
    assert ngram.index_of_coincidence("AAAA") == pytest.approx(1.0)


def test_index_of_coincidence_all_distinct():
    assert ngram.index_of_coincidence("ABCDEF") == pytest.approx(0.0)


def test_index_of_coincidence_case_insensitive():
    assert ngram.index_of_coincidence("abAB") == pytest.approx(
        ngram.index_of_coincidence("ABAB")
    )


def test_index_of_coincidence_too_short():
    with pytest.raises(ValueError):
        ngram.index_of_coincidence("A")


def test_substitution_identity_key():
    text = "Hello, World!"
    assert ngram.substitution_encrypt(text, string.ascii_uppercase) == text


def test_substitution_round_trip():
    text = "Attack at Dawn, 5 o'clock."
    encrypted = ngram.substitution_encrypt(text, KEY)
    assert ngram.substitution_decrypt(encrypted, KEY) == text


def test_substitution_keeps_case():
    assert ngram.substitution_encrypt("a", KEY) == KEY[0].lower()
    assert ngram.substitution_encrypt("A", KEY) == KEY[0]


def test_substitution_bad_key_length():
    with pytest.raises(ValueError):
        ngram.substitution_encrypt("ABC", "SHORT")
    with pytest.raises(ValueError):
        ngram.substitution_decrypt("ABC", "SHORT")


def test_substitution_decrypt_letter_missing_from_key():
    with pytest.raises(ValueError):
        ngram.substitution_decrypt("A", string.ascii_lowercase)


def test_main_index_of_coincidence(capsys):
    assert ngram.main(["HELLO", "4"]) == 0
    out = capsys.readouterr().out
    assert "Index of Coincidence:" in out
    assert "(English text typically has IoC around 0.067)" in out


def test_main_repeating_sequences(capsys):
    assert ngram.main([SAMPLE, "3", "--n", "3"]) == 0
    out = capsys.readouterr().out
    assert "Repeating 3-gram sequences:" in out
    assert "THE appears at positions:" in out


def test_main_bad_key(capsys):
    assert ngram.main(["HELLO", "5", "--key", "ABC"]) == 1
    assert "Key must be exactly 26 letters" in capsys.readouterr().out