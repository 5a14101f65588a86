"""Interface shared by password rules."""

from typing import Protocol

from passguard.domain.entities.password_data import PasswordData
from passguard.domain.entities.rule_result import RuleResult


class Rule(Protocol):
    """A single password policy check.

    Rules never raise for a bad password; failures are returned as
    errors on the result.
    """

    def validate(self, password: PasswordData | str) -> RuleResult:
        """Validate a password and return the outcome."""
        ...
