"""Typed primitives for programmatic freesms usage."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Credentials:
    """Free Mobile account identifier and API key."""

    user: str
    password: str = field(repr=False)

    def is_valid(self) -> bool:
        """Both values must be present; the API validates them for real."""
        return bool(self.user.strip() and self.password.strip())
