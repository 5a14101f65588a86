"""Helpers for counting characters in passwords."""

from collections.abc import Container


def count_matching_characters(characters: Container[str], text: str) -> int:
    """Count the characters of ``text`` that are in ``characters``.

    Every occurrence counts, so repeated characters are counted each time.

    Args:
        characters: Characters to look for (a CharacterSet, string or set).
        text: Text to scan.

    Returns:
        Number of matching characters in the text.
    """
    return sum(1 for c in text if c in characters)
