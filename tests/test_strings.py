import pytest

from dsadrills.strings import is_alphanumeric, is_palindrome


@pytest.mark.parametrize("ch", ["a", "Z", "0", "9", "m"])
def test_is_alphanumeric_accepts_letters_and_digits(ch):
    assert is_alphanumeric(ch) is True


@pytest.mark.parametrize("ch", [" ", ",", ":", "_", "é", "", "ab"])
def test_is_alphanumeric_rejects_others(ch):
    assert is_alphanumeric(ch) is False


@pytest.mark.parametrize(
    "text",
    ["A man, a plan, a canal: Panama", "", " ", "racecar", "No 'x' in Nixon", "12321"],
)
def test_is_palindrome_true(text):
    assert is_palindrome(text) is True


@pytest.mark.parametrize("text", ["race a car", "0P", "hello", "12345"])
def test_is_palindrome_false(text):
    assert is_palindrome(text) is False


def test_is_palindrome_ignores_case():
    assert is_palindrome("AbBa") is True


def test_is_palindrome_text_plus_reverse_is_palindrome():
    text = "Hello, World 42"
    assert is_palindrome(text + text[::-1]) is True
    assert is_palindrome(text) is False