"""Domain services for PassGuard.

Services hold the rule logic. They have no dependencies on
infrastructure or external frameworks.
"""

from passguard.domain.services.allowed_character_rule import AllowedCharacterRule
from passguard.domain.services.character_set import CharacterSet
from passguard.domain.services.match_behavior import MatchBehavior
from passguard.domain.services.password_utils import count_matching_characters
from passguard.domain.services.rule import Rule

__all__ = [
    "AllowedCharacterRule",
    "CharacterSet",
    "MatchBehavior",
    "Rule",
    "count_matching_characters",
]
