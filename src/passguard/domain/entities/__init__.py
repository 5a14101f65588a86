"""Domain entities for PassGuard.

Entities are pure Python dataclasses describing the data rules consume
and produce. They have no dependencies on infrastructure or frameworks.
"""

from passguard.domain.entities.password_data import PasswordData
from passguard.domain.entities.rule_result import (
    CountCategory,
    RuleResult,
    RuleResultDetail,
    RuleResultMetadata,
)

__all__ = [
    "CountCategory",
    "PasswordData",
    "RuleResult",
    "RuleResultDetail",
    "RuleResultMetadata",
]
