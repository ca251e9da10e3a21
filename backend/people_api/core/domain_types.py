"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - PersonId wraps the store-assigned integer key — never client-assigned
    - The current user is ALWAYS one of two variants: AuthenticatedUser or AnonymousUser
    - AnonymousUser carries no identity fields (no "no User" sentinel profile)

Design Decisions:
    - NewType over dataclass wrappers for ids: zero runtime cost, full type-checker support
    - Frozen dataclasses for the user variants: safe to share across a request, hashable
"""

from dataclasses import asdict, dataclass
from typing import Any, NewType, Union


# ─── Identity Types ──────────────────────────────────────────────

PersonId = NewType("PersonId", int)


# ─── User Context ────────────────────────────────────────────────

@dataclass(frozen=True)
class AuthenticatedUser:
    """Profile returned by the OAuth2 provider for the logged-in user."""
    login: str
    name: str | None = None
    email: str | None = None
    company: str | None = None
    url: str | None = None

    is_authenticated = True

    @classmethod
    def from_profile(cls, profile: dict[str, Any]) -> "AuthenticatedUser":
        """Build from a provider profile payload, ignoring unknown keys."""
        login = profile.get("login")
        if not login:
            raise ValueError("provider profile has no login")
        return cls(
            login=str(login),
            name=profile.get("name"),
            email=profile.get("email"),
            company=profile.get("company"),
            url=profile.get("html_url") or profile.get("url"),
        )

    def to_dict(self) -> dict[str, str | None]:
        return asdict(self)


@dataclass(frozen=True)
class AnonymousUser:
    """No session, or a session without a logged-in user."""

    is_authenticated = False

    def to_dict(self) -> dict[str, str | None]:
        return {"login": None}


ANONYMOUS = AnonymousUser()

UserContext = Union[AuthenticatedUser, AnonymousUser]
