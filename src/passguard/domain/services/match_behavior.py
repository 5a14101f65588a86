"""Match behaviors deciding where a character must occur to be matched."""

from enum import Enum

from passguard.core.exceptions import InvalidConfigurationError


class MatchBehavior(str, Enum):
    """Where in the text a character must appear to count as a match."""

    CONTAINS = "contains"
    STARTS_WITH = "starts with"
    ENDS_WITH = "ends with"

    def match(self, text: str, character: str) -> bool:
        """Check whether ``character`` occurs in ``text`` at this position.

        Args:
            text: Text to search.
            character: Character to look for.

        Returns:
            True if the character occurs where this behavior requires.
        """
        if self is MatchBehavior.STARTS_WITH:
            return text.startswith(character)
        if self is MatchBehavior.ENDS_WITH:
            return text.endswith(character)
        return character in text

    @classmethod
    def parse(cls, name: "str | MatchBehavior") -> "MatchBehavior":
        """Resolve a behavior from a member name or value.

        Accepts ``CONTAINS``, ``starts_with``, ``ends with`` and so on,
        ignoring case.

        Raises:
            InvalidConfigurationError: If no behavior matches the name.
        """
        if isinstance(name, MatchBehavior):
            return name
        key = str(name).strip().upper().replace(" ", "_").replace("-", "_")
        try:
            return cls[key]
        except KeyError:
            valid = ", ".join(member.value for member in cls)
            raise InvalidConfigurationError(
                f"Unknown match behavior '{name}'. Valid: {valid}"
            ) from None

    def __str__(self) -> str:
        return self.value
