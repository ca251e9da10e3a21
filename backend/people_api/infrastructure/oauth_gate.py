"""GitHub OAuth2 Gate — wraps Authlib's Starlette client with session-backed user tracking.

Invariants:
    - OAuthConfig is built once at startup and never mutated (frozen dataclass)
    - Token exchange, CSRF state, and cookie signing are Authlib/Starlette's job, not ours
    - The session holds only the user descriptor (login, name, email, company, url), never tokens
    - current_user() ALWAYS returns AuthenticatedUser or AnonymousUser
    - Provider failures mapped to AuthenticationError (401) or ExternalServiceError (502)

Design Decisions:
    - Missing credentials file is not fatal: the gate is "unconfigured", /login answers 503
      and protected routes keep redirecting (ADR: private area is optional)
    - The redirect URL points at the protected subtree, so the callback is completed there
"""

import logging
from dataclasses import dataclass
from pathlib import Path

import httpx
from authlib.integrations.starlette_client import OAuth, OAuthError
from pydantic import ValidationError
from starlette.requests import Request
from starlette.responses import Response

from people_api.core.domain_types import (
    ANONYMOUS, AuthenticatedUser, UserContext,
)
from people_api.core.errors import (
    AuthenticationError, AuthUnavailableError, ExternalServiceError,
)
from people_api.schemas.auth import OAuthCredentials

logger = logging.getLogger(__name__)

GITHUB_AUTHORIZE_URL = "https://github.com/login/oauth/authorize"
GITHUB_ACCESS_TOKEN_URL = "https://github.com/login/oauth/access_token"
GITHUB_API_BASE_URL = "https://api.github.com/"

SESSION_USER_KEY = "user"


@dataclass(frozen=True)
class OAuthConfig:
    """Everything the gate and the session middleware need, resolved at startup."""
    redirect_url: str
    scopes: tuple[str, ...]
    session_secret: str
    session_cookie: str
    credentials: OAuthCredentials | None = None
    unavailable_reason: str | None = None

    @property
    def is_configured(self) -> bool:
        return self.credentials is not None


def load_oauth_config(
    redirect_url: str,
    credentials_file: str,
    scopes: list[str] | tuple[str, ...],
    secret: str,
    session_cookie: str = "people_session",
) -> OAuthConfig:
    """Read the provider credentials file and freeze the OAuth2 setup."""
    credentials = None
    reason = None
    try:
        credentials = OAuthCredentials.model_validate_json(
            Path(credentials_file).read_text(encoding="utf-8"),
        )
    except FileNotFoundError:
        reason = f"credentials file {credentials_file} not found"
    except (OSError, ValidationError) as e:
        reason = f"credentials file {credentials_file} is invalid"
        logger.error(f"Cannot load OAuth credentials: {e}")
    if reason:
        logger.warning(f"OAuth login disabled: {reason}")
    return OAuthConfig(
        redirect_url=redirect_url,
        scopes=tuple(scopes),
        session_secret=secret,
        session_cookie=session_cookie,
        credentials=credentials,
        unavailable_reason=reason,
    )


class GitHubAuthGate:
    """Login redirect, callback completion, and session lookup for GitHub users."""

    def __init__(self, config: OAuthConfig, client=None):
        self.config = config
        self._client = client
        if client is None and config.credentials is not None:
            self._client = OAuth().register(
                name="github",
                client_id=config.credentials.client_id,
                client_secret=config.credentials.client_secret,
                authorize_url=GITHUB_AUTHORIZE_URL,
                access_token_url=GITHUB_ACCESS_TOKEN_URL,
                api_base_url=GITHUB_API_BASE_URL,
                client_kwargs={"scope": " ".join(config.scopes)},
            )

    @property
    def is_configured(self) -> bool:
        return self._client is not None

    def _require_client(self):
        if self._client is None:
            raise AuthUnavailableError(
                self.config.unavailable_reason or "OAuth2 is not configured",
            )
        return self._client

    def current_user(self, request: Request) -> UserContext:
        """User stored in the signed session, or the anonymous variant."""
        profile = request.session.get(SESSION_USER_KEY)
        if not profile:
            return ANONYMOUS
        try:
            return AuthenticatedUser.from_profile(profile)
        except (AttributeError, ValueError):
            logger.warning("Discarding malformed session user")
            request.session.pop(SESSION_USER_KEY, None)
            return ANONYMOUS

    @staticmethod
    def is_callback(request: Request) -> bool:
        """True when the provider redirected back with an authorization code."""
        params = request.query_params
        return "code" in params and "state" in params

    async def login(self, request: Request) -> Response:
        """Redirect the browser to the provider's authorization page."""
        client = self._require_client()
        return await client.authorize_redirect(request, self.config.redirect_url)

    async def complete_login(self, request: Request) -> AuthenticatedUser:
        """Exchange the callback code for a token, fetch the profile, remember it."""
        client = self._require_client()
        try:
            token = await client.authorize_access_token(request)
            resp = await client.get("user", token=token)
            resp.raise_for_status()
            profile = resp.json()
        except OAuthError as e:
            logger.warning(f"OAuth2 callback rejected: {e}")
            raise AuthenticationError(f"OAuth2 login failed: {e}")
        except httpx.HTTPError as e:
            logger.error(f"GitHub request failed: {e}")
            raise ExternalServiceError("GitHub", str(e))

        try:
            user = AuthenticatedUser.from_profile(profile)
        except ValueError as e:
            raise AuthenticationError(f"OAuth2 login failed: {e}")

        request.session[SESSION_USER_KEY] = user.to_dict()
        logger.info("User logged in", extra={"user_login": user.login})
        return user

    def logout(self, request: Request) -> None:
        request.session.pop(SESSION_USER_KEY, None)
