"""Sorted, immutable store of allowed characters.

Membership is tested by binary search over a sorted tuple. Allowed sets
are small and sorted once at construction, so this keeps lookups at
O(log n) with deterministic ordering and no hashing.
"""

from bisect import bisect_left
from collections.abc import Iterable, Iterator

from passguard.core.exceptions import InvalidConfigurationError


class CharacterSet:
    """Immutable sorted collection of characters.

    Duplicates in the input are kept; they do not affect membership.

    Example:
        >>> charset = CharacterSet("cab")
        >>> "a" in charset
        True
        >>> "".join(charset)
        'abc'
    """

    __slots__ = ("_characters",)

    def __init__(self, characters: Iterable[str]) -> None:
        """Build the set from a string or an iterable of single characters.

        Args:
            characters: Allowed characters, in any order.

        Raises:
            InvalidConfigurationError: If no characters are given or an
                element is not a single character.
        """
        chars = tuple(characters)
        if not chars:
            raise InvalidConfigurationError(
                "allowed characters length must be greater than zero"
            )
        for c in chars:
            if not isinstance(c, str) or len(c) != 1:
                raise InvalidConfigurationError(
                    f"allowed characters must be single characters, got {c!r}"
                )
        object.__setattr__(self, "_characters", tuple(sorted(chars)))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[type, tuple[tuple[str, ...]]]:
        # Copies and pickles are rebuilt through __init__.
        return (type(self), (self._characters,))

    @property
    def characters(self) -> tuple[str, ...]:
        """The allowed characters in sorted order."""
        return self._characters

    def contains(self, c: str) -> bool:
        """Check whether a character is in the set.

        Args:
            c: Character to look up.

        Returns:
            True if the character is present.
        """
        chars = self._characters
        i = bisect_left(chars, c)
        return i < len(chars) and chars[i] == c

    def __contains__(self, c: object) -> bool:
        return isinstance(c, str) and self.contains(c)

    def __len__(self) -> int:
        return len(self._characters)

    def __iter__(self) -> Iterator[str]:
        return iter(self._characters)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CharacterSet):
            return NotImplemented
        return self._characters == other._characters

    def __hash__(self) -> int:
        return hash(self._characters)

    def __str__(self) -> str:
        return "".join(self._characters)

    def __repr__(self) -> str:
        return f"CharacterSet({str(self)!r})"
