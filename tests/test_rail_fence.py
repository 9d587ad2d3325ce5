import pytest

from cipherkit import rail_fence


def test_worked_example():
    assert rail_fence.encrypt("WEAREDISCOVEREDFLEEATONCE", 3) == "WECRLTEERDSOEEFEAOCAIVDEN"


def test_decrypt_worked_example():
    assert (
        rail_fence.decrypt("WECRLTEERDSOEEFEAOCAIVDEN", 3) == "WEAREDISCOVEREDFLEEATONCE"
    )


@pytest.mark.parametrize("text", ["", "A", "HELLO", "attack-at-dawn!", "ABCDEFGHIJKLMNOP"])
@pytest.mark.parametrize("rails", [2, 3, 4, 5, 7, 30])
def test_round_trip(text, rails):
    assert rail_fence.decrypt(rail_fence.encrypt(text, rails), rails) == text


def test_encrypt_is_permutation():
    text = "DEFENDTHEEASTWALL"
    assert sorted(rail_fence.encrypt(text, 4)) == sorted(text)


def test_spaces_are_dropped():
    text = "we are found"
    encrypted = rail_fence.encrypt(text, 3)
    assert " " not in encrypted
    assert sorted(encrypted) == sorted(text.replace(" ", ""))


def test_more_rails_than_letters_is_identity():
    assert rail_fence.encrypt("ABC", 5) == "ABC"


def test_decrypt_preserves_length():
    assert len(rail_fence.decrypt("ABCDEFG", 3)) == 7


@pytest.mark.parametrize("rails", [1, 0, -2])
def test_encrypt_rejects_too_few_rails(rails):
    with pytest.raises(ValueError):
        rail_fence.encrypt("HELLO", rails)


@pytest.mark.parametrize("rails", [1, 0])
def test_decrypt_rejects_too_few_rails(rails):
    with pytest.raises(ValueError):
        rail_fence.decrypt("HELLO", rails)


def test_main_prints_round_trip(capsys):
    assert rail_fence.main(["WEAREDISCOVERED", "3"]) == 0
    out = capsys.readouterr().out
    assert "Original text: WEAREDISCOVERED" in out
    assert "Decrypted text: WEAREDISCOVERED" in out


def test_main_reports_bad_rails(capsys):
    assert rail_fence.main(["HELLO", "1"]) == 1
    assert "Error" in capsys.readouterr().out