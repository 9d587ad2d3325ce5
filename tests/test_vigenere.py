import pytest

from cipherkit import vigenere


def test_generate_key():
    assert vigenere.generate_key("ATTACKATDAWN", "LEMON") == "LEMONLEMONLE"


def test_known_example():
    cipher = vigenere.encrypt("ATTACKATDAWN", "LEMON")
    assert cipher == "LXFOPVEFRNHR"
    assert vigenere.decrypt(cipher, "LEMON") == "ATTACKATDAWN"


def test_key_a_is_identity():
    assert vigenere.encrypt("Some Text, here.", "A") == "Some Text, here."


@pytest.mark.parametrize(
    "text,key",
    [("Hello, World!", "KEY"), ("lower text", "lemon"), ("UPPER TEXT", "lemon"), ("", "K")],
)
def test_round_trip_keeps_length(text, key):
    cipher = vigenere.encrypt(text, key)
    assert len(cipher) == len(text)
    assert vigenere.decrypt(cipher, key) == text


def test_lowercase_text_ignores_key_case():
    assert vigenere.encrypt("hello", "KEY") == vigenere.encrypt("hello", "key")


def test_empty_key_rejected():
    with pytest.raises(ValueError):
        vigenere.decrypt("text", "")


def test_main_arguments(capsys):
    assert vigenere.main(["Attack at dawn", "LEMON"]) == 0
    out = capsys.readouterr().out
    assert "Key: LEMON" in out and "Decrypted text: Attack at dawn" in out


def test_main_prompts(monkeypatch, capsys):
    answers = iter(["hidden", "key"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert vigenere.main([]) == 0
    assert "Decrypted text: hidden" in capsys.readouterr().out