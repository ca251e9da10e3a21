"""Domain Types — user context variants and identity wrappers.

Tests:
    - AuthenticatedUser built from a provider profile, unknown keys ignored
    - AnonymousUser is a distinct variant, not a profile with a placeholder name
    - PersonId wraps int
"""

import pytest

from people_api.core.domain_types import (
    ANONYMOUS, AnonymousUser, AuthenticatedUser, PersonId,
)


def test_person_id_wraps_int():
    assert PersonId(5) == 5


def test_authenticated_user_from_github_profile():
    user = AuthenticatedUser.from_profile({
        "login": "octocat",
        "name": "The Octocat",
        "html_url": "https://github.com/octocat",
        "url": "https://api.github.com/users/octocat",
        "followers": 20,
    })
    assert user.login == "octocat"
    assert user.url == "https://github.com/octocat"
    assert user.is_authenticated


def test_profile_round_trips_through_to_dict():
    user = AuthenticatedUser(login="octocat", email="o@example.com")
    assert AuthenticatedUser.from_profile(user.to_dict()) == user


def test_profile_without_login_is_rejected():
    with pytest.raises(ValueError):
        AuthenticatedUser.from_profile({"name": "Nobody"})


def test_anonymous_is_not_authenticated():
    assert isinstance(ANONYMOUS, AnonymousUser)
    assert not ANONYMOUS.is_authenticated
    assert ANONYMOUS.to_dict() == {"login": None}
