"""PassGuard - Allowed character password rule.

Checks that every character of a password belongs to an allowed set and
explains failures with stable error codes, parameters and counts.
"""

__version__ = "0.1.0"

from passguard.core.exceptions import InvalidConfigurationError, PassGuardError
from passguard.domain.entities import (
    CountCategory,
    PasswordData,
    RuleResult,
    RuleResultDetail,
    RuleResultMetadata,
)
from passguard.domain.services import (
    AllowedCharacterRule,
    CharacterSet,
    MatchBehavior,
    Rule,
)

__all__ = [
    "AllowedCharacterRule",
    "CharacterSet",
    "CountCategory",
    "InvalidConfigurationError",
    "MatchBehavior",
    "PassGuardError",
    "PasswordData",
    "Rule",
    "RuleResult",
    "RuleResultDetail",
    "RuleResultMetadata",
    "__version__",
]
