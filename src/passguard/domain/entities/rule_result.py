"""Rule result data model.

Contains the structures a rule returns from validation:
- RuleResultDetail: One error code with its message parameters
- RuleResultMetadata: Character counts gathered while validating
- RuleResult: Outcome of one rule over one password
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class CountCategory(str, Enum):
    """Categories of character counts reported in rule metadata."""

    LENGTH = "Length"
    LOWERCASE = "LowerCase"
    UPPERCASE = "UpperCase"
    DIGIT = "Digit"
    SPECIAL = "Special"
    WHITESPACE = "Whitespace"
    ALLOWED = "Allowed"
    ILLEGAL = "Illegal"


@dataclass(frozen=True)
class RuleResultDetail:
    """A single validation error.

    Attributes:
        error_code: Machine-readable error code used for message lookup.
        parameters: Message parameters in insertion order.
    """

    error_code: str
    parameters: dict[str, Any] = field(default_factory=dict)

    @property
    def values(self) -> list[Any]:
        """Parameter values in insertion order, for positional formatting."""
        return list(self.parameters.values())

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serialisable dictionary."""
        return {
            "code": self.error_code,
            "parameters": {
                name: value.value if isinstance(value, Enum) else value
                for name, value in self.parameters.items()
            },
        }


@dataclass
class RuleResultMetadata:
    """Character counts keyed by category."""

    counts: dict[CountCategory, int] = field(default_factory=dict)

    @classmethod
    def of(cls, category: CountCategory, value: int) -> "RuleResultMetadata":
        """Create metadata holding a single count."""
        return cls(counts={category: value})

    def get_count(self, category: CountCategory) -> int:
        """Return the count for a category, 0 when it was not recorded."""
        return self.counts.get(category, 0)

    def has_count(self, category: CountCategory) -> bool:
        return category in self.counts

    def merge(self, other: "RuleResultMetadata") -> "RuleResultMetadata":
        """Combine with another metadata record.

        Counts from ``other`` win where both record the same category.
        """
        return RuleResultMetadata(counts={**self.counts, **other.counts})

    def to_dict(self) -> dict[str, int]:
        return {category.value: count for category, count in self.counts.items()}


@dataclass
class RuleResult:
    """Result of validating a password against one rule.

    A result starts out valid and becomes invalid as soon as an error is
    added. Metadata is attached regardless of the outcome.

    Attributes:
        valid: Whether the password passed the rule.
        details: Errors in detection order.
        metadata: Counts gathered during validation.
    """

    valid: bool = True
    details: list[RuleResultDetail] = field(default_factory=list)
    metadata: RuleResultMetadata = field(default_factory=RuleResultMetadata)

    def add_error(self, code: str, parameters: dict[str, Any] | None = None) -> None:
        """Record an error and mark the result invalid.

        Args:
            code: Error code.
            parameters: Message parameters, kept in insertion order.
        """
        self.details.append(RuleResultDetail(code, dict(parameters or {})))
        self.valid = False

    @property
    def error_codes(self) -> list[str]:
        return [detail.error_code for detail in self.details]

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serialisable dictionary."""
        return {
            "valid": self.valid,
            "details": [detail.to_dict() for detail in self.details],
            "metadata": self.metadata.to_dict(),
        }
