"""Password data entity supplied to rules for validation."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PasswordData:
    """Container for the text under test.

    Attributes:
        password: The candidate password, never normalized or modified.
        username: Optional username the password belongs to.
    """

    password: str
    username: str | None = None

    def __post_init__(self) -> None:
        """Validate password data after initialization."""
        if not isinstance(self.password, str):
            raise TypeError("Password must be a string")

    def __repr__(self) -> str:
        # Keep the password itself out of reprs and tracebacks.
        return f"PasswordData(username={self.username!r}, password=<{len(self.password)} chars>)"

    @classmethod
    def of(cls, password: "PasswordData | str") -> "PasswordData":
        """Wrap a plain string, passing existing PasswordData through."""
        if isinstance(password, PasswordData):
            return password
        return cls(password=password)
