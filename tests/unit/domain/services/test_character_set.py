"""Unit tests for CharacterSet."""

import copy
import pickle

import pytest

from passguard.core.exceptions import InvalidConfigurationError
from passguard.domain.services import CharacterSet


class TestConstruction:
    """Test building character sets."""

    def test_sorted_from_string(self):
        """Characters are sorted regardless of input order."""
        assert CharacterSet("cba").characters == ("a", "b", "c")

    def test_sorted_from_list(self):
        """Sequences of single characters are accepted."""
        assert list(CharacterSet(["z", "!", "A"])) == ["!", "A", "z"]

    def test_empty_fails(self):
        """Empty input cannot build a set."""
        with pytest.raises(InvalidConfigurationError, match="greater than zero"):
            CharacterSet("")

    def test_multi_character_element_fails(self):
        """Elements must be single characters."""
        with pytest.raises(InvalidConfigurationError, match="single characters"):
            CharacterSet(["a", "bc"])

    def test_duplicates_kept(self):
        """Duplicates are allowed and kept."""
        charset = CharacterSet("aab")
        assert len(charset) == 3
        assert "a" in charset

    def test_immutable(self):
        """Attributes cannot be reassigned."""
        charset = CharacterSet("abc")
        with pytest.raises(AttributeError):
            charset._characters = ("x",)


class TestMembership:
    """Test binary search membership."""

    @pytest.mark.parametrize("c", ["a", "m", "z", "0", "~"])
    def test_members(self, c):
        """Every member is found."""
        charset = CharacterSet("zma0~")
        assert charset.contains(c) is True
        assert c in charset

    @pytest.mark.parametrize("c", ["b", " ", "\x00", "\U0010FFFF", "Z"])
    def test_non_members(self, c):
        """Characters before, between and after members are not found."""
        charset = CharacterSet("zma0~")
        assert charset.contains(c) is False
        assert c not in charset

    def test_non_string_not_member(self):
        """Non-string values are never members."""
        assert 97 not in CharacterSet("a")

    def test_supplementary_characters(self):
        """Characters outside the BMP are single members."""
        charset = CharacterSet(["\U0001F600", "a"])
        assert "\U0001F600" in charset
        assert "\U0001F601" not in charset


class TestEquality:
    """Test comparison and representation."""

    def test_order_invariant_equality(self):
        """Sets built from the same characters are equal."""
        assert CharacterSet("ba") == CharacterSet("ab")
        assert hash(CharacterSet("ba")) == hash(CharacterSet("ab"))

    def test_different_sets_not_equal(self):
        assert CharacterSet("ab") != CharacterSet("abc")

    def test_repr(self):
        assert repr(CharacterSet("cab")) == "CharacterSet('abc')"
        assert str(CharacterSet("cab")) == "abc"


class TestCopying:
    """Test copying and pickling immutable sets."""

    def test_copy_and_deepcopy(self):
        charset = CharacterSet("cab")
        assert copy.copy(charset) == charset
        assert copy.deepcopy(charset) == charset

    def test_pickle_round_trip(self):
        charset = CharacterSet("cab")
        restored = pickle.loads(pickle.dumps(charset))
        assert restored == charset
        assert "a" in restored
        with pytest.raises(AttributeError):
            restored._characters = ("x",)
