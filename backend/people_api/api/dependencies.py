"""Route Dependencies — store and auth collaborators injected into route handlers.

Invariants:
    - Routes never construct repositories or gates themselves
    - require_user either returns an AuthenticatedUser or raises; it never yields anonymous
    - FastAPI caches dependencies per request: router-level and handler-level
      require_user share one evaluation (one token exchange per callback)

Design Decisions:
    - Collaborators looked up on app.state: tests replace them with dependency_overrides
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from people_api.config import Settings, get_settings
from people_api.core.domain_types import AuthenticatedUser, UserContext
from people_api.core.errors import LoginRequiredError
from people_api.core.repository_protocols import PersonRepository
from people_api.infrastructure.database import get_db
from people_api.infrastructure.oauth_gate import GitHubAuthGate
from people_api.services.person_repository import SqlPersonRepository


def get_app_settings(request: Request) -> Settings:
    return getattr(request.app.state, "settings", None) or get_settings()


def get_person_repository(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> PersonRepository:
    return SqlPersonRepository(db, timeout_seconds=settings.database_timeout_seconds)


def get_auth_gate(request: Request) -> GitHubAuthGate:
    gate = getattr(request.app.state, "auth_gate", None)
    if gate is None:
        raise RuntimeError("Auth gate not initialized")
    return gate


def get_current_user(
    request: Request, gate: GitHubAuthGate = Depends(get_auth_gate),
) -> UserContext:
    """Typed accessor for the request's user: authenticated or anonymous."""
    return gate.current_user(request)


async def require_user(
    request: Request,
    user: UserContext = Depends(get_current_user),
    gate: GitHubAuthGate = Depends(get_auth_gate),
) -> AuthenticatedUser:
    """Gate for the protected subtree."""
    if isinstance(user, AuthenticatedUser):
        return user
    if gate.is_configured and gate.is_callback(request):
        return await gate.complete_login(request)
    raise LoginRequiredError()
