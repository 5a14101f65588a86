"""Allowed character rule.

Validation fails unless the password contains only allowed characters.
Each offending character is reported once per validation, either as the
generic ``ALLOWED_CHAR`` code or, with enhanced error messages, as a code
specific to the character (``ALLOWED_CHAR.<code point>``).
"""

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from passguard.domain.entities.password_data import PasswordData
from passguard.domain.entities.rule_result import (
    CountCategory,
    RuleResult,
    RuleResultMetadata,
)
from passguard.domain.services.character_set import CharacterSet
from passguard.domain.services.match_behavior import MatchBehavior
from passguard.domain.services.password_utils import count_matching_characters

if TYPE_CHECKING:
    from passguard.core.config import Settings


class AllowedCharacterRule:
    """Rule for determining if a password contains only allowed characters.

    Instances are immutable and hold no per-call state, so a single rule
    can be shared across threads.

    Example:
        >>> rule = AllowedCharacterRule("abc")
        >>> result = rule.validate("abcZ")
        >>> result.error_codes
        ['ALLOWED_CHAR']
        >>> result.metadata.get_count(CountCategory.ALLOWED)
        3
    """

    ERROR_CODE = "ALLOWED_CHAR"

    __slots__ = (
        "_allowed_characters",
        "_match_behavior",
        "_report_all_failures",
        "_enhanced_error_messages",
    )

    def __init__(
        self,
        allowed_characters: Iterable[str],
        match_behavior: MatchBehavior | str = MatchBehavior.CONTAINS,
        report_all_failures: bool = True,
        enhanced_error_messages: bool = False,
    ) -> None:
        """Create a new allowed character rule.

        Args:
            allowed_characters: Characters a password may contain, in any order.
            match_behavior: Where a disallowed character must occur to be reported.
            report_all_failures: Report every offending character, or stop at the first.
            enhanced_error_messages: Use an error code specific to each offending character.

        Raises:
            InvalidConfigurationError: If ``allowed_characters`` is empty or
                ``match_behavior`` is not a known behavior.
        """
        object.__setattr__(self, "_allowed_characters", CharacterSet(allowed_characters))
        object.__setattr__(self, "_match_behavior", MatchBehavior.parse(match_behavior))
        object.__setattr__(self, "_report_all_failures", bool(report_all_failures))
        object.__setattr__(self, "_enhanced_error_messages", bool(enhanced_error_messages))

    @classmethod
    def from_settings(cls, settings: "Settings") -> "AllowedCharacterRule":
        """Build a rule from the allowed character settings."""
        return cls(
            settings.allowed_characters,
            match_behavior=settings.match_behavior,
            report_all_failures=settings.report_all_failures,
            enhanced_error_messages=settings.enhanced_error_messages,
        )

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[type, tuple[Any, ...]]:
        # Copies and pickles are rebuilt through __init__.
        return (
            type(self),
            (
                self._allowed_characters.characters,
                self._match_behavior,
                self._report_all_failures,
                self._enhanced_error_messages,
            ),
        )

    @property
    def allowed_characters(self) -> tuple[str, ...]:
        """Allowed characters in sorted order."""
        return self._allowed_characters.characters

    @property
    def match_behavior(self) -> MatchBehavior:
        return self._match_behavior

    @property
    def report_all_failures(self) -> bool:
        return self._report_all_failures

    @property
    def enhanced_error_messages(self) -> bool:
        """Whether error codes are specific to the offending character."""
        return self._enhanced_error_messages

    def validate(self, password: PasswordData | str) -> RuleResult:
        """Validate a password against the allowed character set.

        Args:
            password: Password to validate, as PasswordData or plain text.

        Returns:
            Result with one error per distinct offending character (or only
            the first, when not reporting all failures) and the count of
            allowed characters as metadata.
        """
        text = PasswordData.of(password).password
        result = RuleResult()
        reported: set[str] = set()
        for c in text:
            if self._allowed_characters.contains(c) or c in reported:
                continue
            if self._match_behavior is MatchBehavior.CONTAINS or self._match_behavior.match(text, c):
                result.add_error(self._error_code(c), self._create_detail_parameters(c))
                if not self._report_all_failures:
                    break
                reported.add(c)
        result.metadata = self._create_metadata(text)
        return result

    def _error_code(self, c: str) -> str:
        if self._enhanced_error_messages:
            return f"{self.ERROR_CODE}.{ord(c)}"
        return self.ERROR_CODE

    def _create_detail_parameters(self, c: str) -> dict[str, Any]:
        """Create the message parameters for an offending character.

        Args:
            c: Illegal character.

        Returns:
            Parameter name to value, offending character first.
        """
        return {
            "illegalCharacter": c,
            "matchBehavior": self._match_behavior,
        }

    def _create_metadata(self, text: str) -> RuleResultMetadata:
        return RuleResultMetadata.of(
            CountCategory.ALLOWED,
            count_matching_characters(self._allowed_characters, text),
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}("
            f"report_all_failures={self._report_all_failures}, "
            f"match_behavior={self._match_behavior.value!r}, "
            f"enhanced_error_messages={self._enhanced_error_messages}, "
            f"allowed_characters={str(self._allowed_characters)!r})"
        )
