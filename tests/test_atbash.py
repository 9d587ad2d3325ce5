import string

import pytest

from cipherkit import atbash


def test_alphabet_reversed():
    assert atbash.encrypt(string.ascii_uppercase) == string.ascii_uppercase[::-1]
    assert atbash.encrypt(string.ascii_lowercase) == string.ascii_lowercase[::-1]


def test_known_value():
    assert atbash.encrypt("abc") == "zyx"


@pytest.mark.parametrize("text", ["Hello, World!", "", "xyz 987", "MiXeD"])
def test_involution(text):
    assert atbash.decrypt(atbash.encrypt(text)) == text
    assert atbash.decrypt(text) == atbash.encrypt(text)


def test_non_letters_unchanged():
    assert atbash.encrypt("123 !? é") == "123 !? é"


def test_main(capsys):
    assert atbash.main(["Secret Message"]) == 0
    out = capsys.readouterr().out
    assert f"Encrypted text: {atbash.encrypt('Secret Message')}" in out
    assert "Decrypted text: Secret Message" in out


def test_main_prompts(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt="": "plain")
    assert atbash.main([]) == 0
    assert "Original text: plain" in capsys.readouterr().out