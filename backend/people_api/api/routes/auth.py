"""Auth Routes — GitHub login/logout and the protected /auth subtree.

Invariants:
    - Every /auth route passes require_user first (router-level dependency)
    - Anonymous callers never see a protected payload: redirect to /login instead
    - /login and /logout are public

Design Decisions:
    - Two routers: `router` (public login/logout) and `private_router` (gated),
      registered separately in main.py so the gate cannot leak onto public routes
"""

import logging

from fastapi import APIRouter, Depends, Request

from people_api.api.dependencies import get_auth_gate, require_user
from people_api.core.domain_types import AuthenticatedUser
from people_api.infrastructure.oauth_gate import GitHubAuthGate

logger = logging.getLogger(__name__)
router = APIRouter(tags=["auth"])
private_router = APIRouter(
    prefix="/auth", tags=["private"], dependencies=[Depends(require_user)],
)


@router.get("/login")
async def login(
    request: Request, gate: GitHubAuthGate = Depends(get_auth_gate),
):
    """Start the provider's authorization-code flow."""
    return await gate.login(request)


@router.get("/logout")
async def logout(
    request: Request, gate: GitHubAuthGate = Depends(get_auth_gate),
):
    gate.logout(request)
    return {"message": "logged out"}


@private_router.get("/")
async def user_info(user: AuthenticatedUser = Depends(require_user)):
    """Greets the logged-in user with their provider profile."""
    return {"Hello": "from private", "user": user.to_dict()}


@private_router.get("/api")
async def private_api():
    return {"message": "Hello to private"}
