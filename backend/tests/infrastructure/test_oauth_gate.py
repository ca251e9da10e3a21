"""OAuth Gate — credentials loading and session-backed user lookup."""

import json
from types import SimpleNamespace

import pytest

from people_api.core.domain_types import ANONYMOUS, AuthenticatedUser
from people_api.core.errors import AuthUnavailableError
from people_api.infrastructure.oauth_gate import (
    SESSION_USER_KEY, GitHubAuthGate, load_oauth_config,
)


def _load(path):
    return load_oauth_config(
        redirect_url="http://localhost:8080/auth/",
        credentials_file=str(path),
        scopes=["read:user"],
        secret="s3cret",
    )


def test_load_config_reads_credentials_file(tmp_path):
    cred_file = tmp_path / "clientid.github.json"
    cred_file.write_text(json.dumps({"clientid": "abc", "secret": "def"}))

    config = _load(cred_file)

    assert config.is_configured
    assert config.credentials.client_id == "abc"
    assert config.credentials.client_secret == "def"
    assert config.scopes == ("read:user",)
    assert config.session_cookie == "people_session"


def test_load_config_missing_file_is_unconfigured(tmp_path):
    config = _load(tmp_path / "absent.json")
    assert not config.is_configured
    assert "not found" in config.unavailable_reason


def test_load_config_invalid_file_is_unconfigured(tmp_path):
    cred_file = tmp_path / "clientid.github.json"
    cred_file.write_text(json.dumps({"clientid": "abc"}))

    config = _load(cred_file)

    assert not config.is_configured
    assert "invalid" in config.unavailable_reason


def test_config_is_immutable(tmp_path):
    config = _load(tmp_path / "absent.json")
    with pytest.raises(AttributeError):
        config.redirect_url = "http://evil/"


def test_gate_registers_github_client(tmp_path):
    cred_file = tmp_path / "clientid.github.json"
    cred_file.write_text(json.dumps({"clientid": "abc", "secret": "def"}))

    gate = GitHubAuthGate(_load(cred_file))

    assert gate.is_configured


async def test_unconfigured_gate_refuses_login(tmp_path):
    gate = GitHubAuthGate(_load(tmp_path / "absent.json"))
    with pytest.raises(AuthUnavailableError):
        await gate.login(SimpleNamespace(session={}))


def test_current_user_anonymous_without_session_user(tmp_path):
    gate = GitHubAuthGate(_load(tmp_path / "absent.json"))
    assert gate.current_user(SimpleNamespace(session={})) is ANONYMOUS


def test_current_user_from_session(tmp_path):
    gate = GitHubAuthGate(_load(tmp_path / "absent.json"))
    request = SimpleNamespace(session={SESSION_USER_KEY: {"login": "octocat"}})

    user = gate.current_user(request)

    assert user == AuthenticatedUser(login="octocat")


def test_malformed_session_user_is_discarded(tmp_path):
    gate = GitHubAuthGate(_load(tmp_path / "absent.json"))
    request = SimpleNamespace(session={SESSION_USER_KEY: {"name": "no login"}})

    assert gate.current_user(request) is ANONYMOUS
    assert SESSION_USER_KEY not in request.session


def test_is_callback_needs_code_and_state():
    assert GitHubAuthGate.is_callback(
        SimpleNamespace(query_params={"code": "c", "state": "s"}),
    )
    assert not GitHubAuthGate.is_callback(
        SimpleNamespace(query_params={"code": "c"}),
    )
