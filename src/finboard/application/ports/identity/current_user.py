"""CurrentUser - the application's view of the authenticated user.

Authentication happens upstream; the presentation layer translates whatever
identity it receives into this type.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CurrentUser:
    """Immutable representation of the current authenticated user."""

    user_id: str
    email: str | None = None

    def __str__(self) -> str:
        return f"CurrentUser({self.email or self.user_id})"
