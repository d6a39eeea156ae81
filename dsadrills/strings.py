"""Palindrome check ignoring case and non-alphanumeric characters."""

import string

_ALNUM = frozenset(string.ascii_letters + string.digits)


def is_alphanumeric(ch: str) -> bool:
    """Report whether ``ch`` is an ASCII letter or digit."""
    return ch in _ALNUM


def is_palindrome(text: str) -> bool:
    """Report whether ``text`` reads the same both ways.

    Only ASCII letters and digits are compared, and letters are compared
    without regard to case.
    """
    kept = [ch.lower() for ch in text if is_alphanumeric(ch)]
    return kept == kept[::-1]