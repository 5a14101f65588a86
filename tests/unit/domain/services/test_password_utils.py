"""Unit tests for password utilities."""

from passguard.domain.services import CharacterSet, count_matching_characters


def test_count_matching_characters_counts_every_occurrence():
    """Repeated characters are counted each time they occur."""
    assert count_matching_characters(CharacterSet("ab"), "aabbx") == 4


def test_count_matching_characters_no_matches():
    assert count_matching_characters(CharacterSet("ab"), "xyz") == 0
    assert count_matching_characters(CharacterSet("ab"), "") == 0


def test_count_matching_characters_plain_containers():
    """Any container of characters works."""
    assert count_matching_characters("abc", "a-b-c") == 3
    assert count_matching_characters({"-"}, "a-b-c") == 2
